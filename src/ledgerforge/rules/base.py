"""Base classifier interface and context."""

from __future__ import annotations

import hashlib
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass

from ledgerforge.schemas import MerchantPattern, RuleResult, Transaction


def stable_rule_hash(rule_id: str, salt: str = "v1") -> str:
    """Stable hash for rule (rule_id + salt) for evidence fields."""
    return hashlib.sha256(f"{rule_id}:{salt}".encode()).hexdigest()[:16]


@dataclass(frozen=True)
class RuleContext:
    """Context passed to rules: the charge, its merchant's history and derived pattern."""

    transaction: Transaction
    history: Sequence[Transaction]  # same merchant, sorted by date, includes `transaction`
    pattern: MerchantPattern | None


class BaseRule(ABC):
    """Base class for suspicious-charge classifiers."""

    rule_id: str = "base"
    RULE_HASH: str = ""  # Override in subclass for stable per-rule hash; else derived from rule_id.

    def __init__(self, config: dict | None = None) -> None:
        cfg = config or {}
        self.tolerance = float(cfg.get("amount_tolerance", 0.10))
        self.forgiveness_days = int(cfg.get("forgiveness_days", 3))

    def get_rule_hash(self) -> str:
        """Stable hash for this rule (stored in evidence_fields)."""
        return self.RULE_HASH or stable_rule_hash(self.rule_id)

    def matches_normal(self, amount: float, pattern: MerchantPattern) -> bool:
        return any(abs(abs(amount) - n) <= self.tolerance + 1e-9 for n in pattern.normal_amounts)

    @abstractmethod
    def evaluate(self, ctx: RuleContext) -> list[RuleResult]:
        """Evaluate rule; return list of RuleResult (empty if no hit)."""
        ...
