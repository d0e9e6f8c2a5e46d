"""Suspicious-charge classifiers, in priority order: duplicate > overcharge > unexpected."""

from ledgerforge.rules.base import BaseRule, RuleContext, RuleResult
from ledgerforge.rules.duplicate import DuplicateChargeRule
from ledgerforge.rules.overcharge import OverchargeRule
from ledgerforge.rules.unexpected import UnexpectedChargeRule


def get_all_rules(config: dict | None = None) -> list[BaseRule]:
    """Return enabled rule instances from the ``detection`` config section, in priority order."""
    det = (config or {}).get("detection", {})
    rules_cfg = det.get("rules", {})
    rules: list[BaseRule] = []
    if rules_cfg.get("duplicate", {}).get("enabled", True):
        rules.append(DuplicateChargeRule(det))
    if rules_cfg.get("overcharge", {}).get("enabled", True):
        rules.append(OverchargeRule(det))
    if rules_cfg.get("unexpected", {}).get("enabled", True):
        rules.append(UnexpectedChargeRule(det))
    return rules


__all__ = [
    "BaseRule",
    "RuleResult",
    "RuleContext",
    "get_all_rules",
    "DuplicateChargeRule",
    "OverchargeRule",
    "UnexpectedChargeRule",
]
