"""Overcharge: right billing day, amount above every known plan."""

from __future__ import annotations

from ledgerforge.rules.base import BaseRule, RuleContext
from ledgerforge.schemas import RuleResult


class OverchargeRule(BaseRule):
    rule_id = "Overcharge"

    def evaluate(self, ctx: RuleContext) -> list[RuleResult]:
        tx, pattern = ctx.transaction, ctx.pattern
        if pattern is None or not pattern.normal_amounts:
            return []
        amount = abs(tx.amount)
        usual = max(pattern.normal_amounts)
        if amount <= usual + self.tolerance:
            return []
        if abs(tx.date.day - pattern.expected_day_of_month) > self.forgiveness_days:
            return []
        return [
            RuleResult(
                rule_id=self.rule_id,
                suspicious_type="overcharge",
                severity="medium",
                reason=(
                    f"Charged ${amount:.2f} instead of usual ${usual:.2f} "
                    f"(+${amount - usual:.2f})"
                ),
                evidence_fields={
                    "amount": round(amount, 2),
                    "usual_amount": usual,
                    "expected_day_of_month": pattern.expected_day_of_month,
                    "rule_hash": self.get_rule_hash(),
                },
            )
        ]
