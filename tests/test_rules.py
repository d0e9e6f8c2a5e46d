"""Suspicious-charge classifiers."""

from __future__ import annotations

from datetime import date

from ledgerforge.patterns import MerchantIndex
from ledgerforge.rules import (
    DuplicateChargeRule,
    OverchargeRule,
    RuleContext,
    UnexpectedChargeRule,
    get_all_rules,
)
from ledgerforge.rules.base import stable_rule_hash


def _ctx(txns, target_id: str) -> RuleContext:
    idx = MerchantIndex(txns)
    tx = next(t for t in txns if t.id == target_id)
    return RuleContext(
        transaction=tx,
        history=idx.history(tx.merchant_name),
        pattern=idx.pattern(tx.merchant_name),
    )


def test_duplicate_two_days_apart(make_txn) -> None:
    txns = [make_txn("n1", date(2025, 1, 12), -15.99), make_txn("n2", date(2025, 1, 14), -15.99)]
    hits = DuplicateChargeRule().evaluate(_ctx(txns, "n2"))
    assert len(hits) == 1
    assert hits[0].suspicious_type == "duplicate"
    assert hits[0].parent_id == "n1"
    assert hits[0].reason == "Charged 2 days after last charge (expected ~30 days)"
    assert DuplicateChargeRule().evaluate(_ctx(txns, "n1")) == []


def test_duplicate_uses_most_recent_earlier_charge(make_txn) -> None:
    txns = [
        make_txn("n1", date(2025, 1, 12), -15.99),
        make_txn("n2", date(2025, 2, 12), -15.99),
        make_txn("n3", date(2025, 3, 12), -15.99),
        make_txn("n4", date(2025, 3, 15), -15.99),
    ]
    hits = DuplicateChargeRule().evaluate(_ctx(txns, "n4"))
    assert hits and hits[0].parent_id == "n3"


def test_regular_monthly_charge_not_duplicate(make_txn) -> None:
    txns = [make_txn(f"n{m}", date(2025, m, 12), -15.99) for m in range(1, 5)]
    for t in txns:
        assert DuplicateChargeRule().evaluate(_ctx(txns, t.id)) == []


def test_overcharge_on_billing_day(make_txn) -> None:
    txns = [make_txn(f"s{m}", date(2024, m, 12), -9.99, merchant="Spotify") for m in (10, 11, 12)]
    txns.append(make_txn("s13", date(2025, 1, 13), -12.99, merchant="Spotify"))
    ctx = _ctx(txns, "s13")
    assert DuplicateChargeRule().evaluate(ctx) == []
    hits = OverchargeRule().evaluate(ctx)
    assert len(hits) == 1
    assert hits[0].suspicious_type == "overcharge"
    assert hits[0].evidence_fields["usual_amount"] == 9.99


def test_overcharge_needs_matching_timing(make_txn) -> None:
    txns = [make_txn(f"s{m}", date(2024, m, 12), -9.99, merchant="Spotify") for m in (10, 11, 12)]
    txns.append(make_txn("late", date(2025, 1, 25), -12.99, merchant="Spotify"))
    assert OverchargeRule().evaluate(_ctx(txns, "late")) == []


def test_small_difference_within_tolerance_not_overcharge(make_txn) -> None:
    txns = [make_txn(f"s{m}", date(2024, m, 12), -9.99, merchant="Spotify") for m in (10, 11, 12)]
    txns.append(make_txn("close", date(2025, 1, 12), -10.05, merchant="Spotify"))
    assert OverchargeRule().evaluate(_ctx(txns, "close")) == []


def test_unexpected_novel_amount(make_txn) -> None:
    txns = [make_txn(f"h{m}", date(2025, m, 3), -12.99, merchant="Hulu") for m in (1, 2, 3, 4)]
    txns.append(make_txn("odd", date(2025, 3, 20), -6.49, merchant="Hulu"))
    ctx = _ctx(txns, "odd")
    assert OverchargeRule().evaluate(ctx) == []
    hits = UnexpectedChargeRule().evaluate(ctx)
    assert len(hits) == 1
    assert hits[0].suspicious_type == "unexpected"
    assert "$6.49" in hits[0].reason


def test_second_plan_within_window_not_unexpected(make_txn) -> None:
    txns = [make_txn(f"h{m}", date(2025, m, 3), -12.99, merchant="Hulu") for m in (1, 2, 3, 4)]
    txns.append(make_txn("p1", date(2025, 2, 20), -6.49, merchant="Hulu"))
    txns.append(make_txn("p2", date(2025, 4, 20), -6.49, merchant="Hulu"))
    # 6.49 now repeats, so it is a normal amount.
    assert UnexpectedChargeRule().evaluate(_ctx(txns, "p2")) == []


def test_amount_seen_nearby_within_tolerance_not_unexpected(make_txn) -> None:
    txns = [make_txn(f"h{m}", date(2025, m, 3), -12.99, merchant="Hulu") for m in (1, 2, 3, 4)]
    txns.append(make_txn("p1", date(2025, 2, 20), -6.49, merchant="Hulu"))
    txns.append(make_txn("p2", date(2025, 4, 20), -6.45, merchant="Hulu"))
    assert UnexpectedChargeRule().evaluate(_ctx(txns, "p2")) == []


def test_amount_seen_outside_window_is_unexpected(make_txn) -> None:
    txns = [make_txn(f"h{m}", date(2025, m, 3), -12.99, merchant="Hulu") for m in range(1, 13)]
    txns.append(make_txn("p1", date(2025, 1, 20), -6.49, merchant="Hulu"))
    txns.append(make_txn("p2", date(2025, 9, 20), -6.45, merchant="Hulu"))
    assert UnexpectedChargeRule().evaluate(_ctx(txns, "p2"))


def test_no_pattern_never_flags(make_txn) -> None:
    txns = [make_txn("only", date(2025, 1, 1), -99.0)]
    ctx = _ctx(txns, "only")
    assert ctx.pattern is None
    for rule in get_all_rules():
        assert rule.evaluate(ctx) == []


def test_get_all_rules_priority_and_toggles() -> None:
    assert [r.rule_id for r in get_all_rules()] == ["DuplicateCharge", "Overcharge", "UnexpectedCharge"]
    cfg = {"detection": {"rules": {"overcharge": {"enabled": False}}}}
    assert [r.rule_id for r in get_all_rules(cfg)] == ["DuplicateCharge", "UnexpectedCharge"]


def test_rules_read_detection_config() -> None:
    rule = UnexpectedChargeRule({"amount_tolerance": 0.25, "forgiveness_days": 5, "unexpected_window_months": 6})
    assert rule.tolerance == 0.25
    assert rule.forgiveness_days == 5
    assert rule.window_months == 6


def test_rule_hash_stable() -> None:
    assert DuplicateChargeRule().get_rule_hash() == stable_rule_hash("DuplicateCharge")
    assert len(stable_rule_hash("x")) == 16
