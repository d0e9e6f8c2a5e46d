"""Unexpected charge: an amount this merchant has not billed within the surrounding months."""

from __future__ import annotations

from ledgerforge.patterns import add_months
from ledgerforge.rules.base import BaseRule, RuleContext
from ledgerforge.schemas import RuleResult


class UnexpectedChargeRule(BaseRule):
    rule_id = "UnexpectedCharge"

    def __init__(self, config: dict | None = None) -> None:
        super().__init__(config)
        self.window_months = int((config or {}).get("unexpected_window_months", 3))

    def evaluate(self, ctx: RuleContext) -> list[RuleResult]:
        tx, pattern = ctx.transaction, ctx.pattern
        if pattern is None or not pattern.normal_amounts:
            return []
        if self.matches_normal(tx.amount, pattern):
            return []

        # A second plan seen nearby is not novel.
        lo = add_months(tx.date, -self.window_months)
        hi = add_months(tx.date, self.window_months)
        for h in ctx.history:
            if h.id == tx.id or not (lo <= h.date <= hi):
                continue
            if abs(abs(h.amount) - abs(tx.amount)) <= self.tolerance + 1e-9:
                return []

        normal = ", ".join(f"${a:.2f}" for a in pattern.normal_amounts)
        return [
            RuleResult(
                rule_id=self.rule_id,
                suspicious_type="unexpected",
                severity="low",
                reason=(
                    f"Unusual amount ${abs(tx.amount):.2f} for {tx.merchant_name} "
                    f"(normal: {normal})"
                ),
                evidence_fields={
                    "amount": round(abs(tx.amount), 2),
                    "normal_amounts": list(pattern.normal_amounts),
                    "window_months": self.window_months,
                    "rule_hash": self.get_rule_hash(),
                },
            )
        ]
