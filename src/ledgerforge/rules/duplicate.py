"""Duplicate charge: a known amount billed again far sooner than the merchant's interval."""

from __future__ import annotations

from ledgerforge.rules.base import BaseRule, RuleContext
from ledgerforge.schemas import RuleResult, Transaction


class DuplicateChargeRule(BaseRule):
    rule_id = "DuplicateCharge"

    def evaluate(self, ctx: RuleContext) -> list[RuleResult]:
        tx, pattern = ctx.transaction, ctx.pattern
        if pattern is None or not self.matches_normal(tx.amount, pattern):
            return []

        last: Transaction | None = None
        for h in ctx.history:
            if h.id == tx.id or h.date >= tx.date:
                continue
            if abs(abs(h.amount) - abs(tx.amount)) > self.tolerance + 1e-9:
                continue
            if last is None or h.date > last.date:
                last = h
        if last is None:
            return []

        gap = (tx.date - last.date).days
        interval = pattern.expected_interval
        if gap < interval - self.forgiveness_days and gap < interval * 0.5:
            return [
                RuleResult(
                    rule_id=self.rule_id,
                    suspicious_type="duplicate",
                    severity="high",
                    reason=f"Charged {gap} days after last charge (expected ~{interval} days)",
                    parent_id=last.id,
                    evidence_fields={
                        "days_since_last": gap,
                        "expected_interval": interval,
                        "rule_hash": self.get_rule_hash(),
                    },
                )
            ]
        return []
