"""Anomaly injection over raw monthly output."""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from ledgerforge.engine import generate, generate_months
from ledgerforge.ids import parse_transaction_id
from ledgerforge.injection import inject_anomalies
from ledgerforge.prng import SeededRandom
from ledgerforge.profile import build_profile


@pytest.fixture(scope="module")
def raw(profile):
    return generate_months(profile, date(2025, 1, 1), date(2025, 6, 30))


def _injected(raw, profile, **kwargs):
    return inject_anomalies(raw, profile, rng=SeededRandom(f"{profile.id}:test"), **kwargs)


def test_flagged_merchant_count_and_variety(raw, profile) -> None:
    out = _injected(raw, profile)
    flagged = [t for t in out if t.is_suspicious]
    merchants = {t.merchant_name for t in flagged}
    assert 2 <= len(merchants) <= 6
    assert len(flagged) == len(merchants)
    if len(merchants) >= 3:
        assert {t.suspicious_type for t in flagged} == {"duplicate", "overcharge", "unexpected"}


@pytest.mark.parametrize("seed", [f"inj-{i}" for i in range(8)])
def test_bounds_hold_across_seeds(raw, profile, seed: str) -> None:
    out = inject_anomalies(raw, profile, rng=SeededRandom(seed))
    merchants = {t.merchant_name for t in out if t.is_suspicious}
    assert 2 <= len(merchants) <= 6


def test_input_not_mutated(raw, profile) -> None:
    before = list(raw)
    _injected(raw, profile)
    assert raw == before
    assert not any(t.is_suspicious for t in raw)


def test_deterministic_for_same_rng(raw, profile) -> None:
    assert _injected(raw, profile) == _injected(raw, profile)


def test_only_outflows_from_recurring_merchants(raw, profile) -> None:
    for t in _injected(raw, profile):
        if t.is_suspicious:
            assert t.amount < 0
            assert t.kind != "income"
            assert t.is_subscription or t.is_recurring


def test_shapes_of_each_anomaly(raw, profile) -> None:
    by_id = {t.id: t for t in raw}
    out = _injected(raw, profile)
    appended = [t for t in out if t.id not in by_id]
    assert len(out) == len(raw) + len(appended)
    for t in out:
        if not t.is_suspicious:
            continue
        if t.suspicious_type == "duplicate":
            parent = by_id[t.parent_id]
            assert t.id not in by_id
            assert parse_transaction_id(t.id).phase == "X"
            assert t.amount == parent.amount
            assert t.merchant_name == parent.merchant_name
            assert timedelta(days=2) <= t.date - parent.date <= timedelta(days=4)
        elif t.suspicious_type == "overcharge":
            original = by_id[t.id]
            assert t.date == original.date
            assert 1.09 <= t.amount / original.amount <= 1.31
        else:
            assert t.id not in by_id
            assert parse_transaction_id(t.id).phase == "X"
            assert t.parent_id is None
            assert 4.99 <= abs(t.amount) <= 15.99
            assert any(
                r.merchant_name == t.merchant_name and timedelta(days=5) <= t.date - r.date <= timedelta(days=9)
                for r in raw
            )


def test_overcharge_replaces_in_place(raw, profile) -> None:
    out = _injected(raw, profile)
    for i, t in enumerate(out[: len(raw)]):
        assert t.id == raw[i].id


def test_frozen_records_untouched(raw, profile) -> None:
    frozen = {t.id for t in raw}
    assert _injected(raw, profile, frozen_ids=frozen) == raw


def _assert_full_gaps(out, base) -> None:
    by_id = {t.id: t for t in base}
    for t in out:
        if t.id in by_id or not t.is_suspicious:
            continue
        if t.suspicious_type == "duplicate":
            assert 2 <= (t.date - by_id[t.parent_id].date).days <= 4
        else:
            assert any(
                r.merchant_name == t.merchant_name and 5 <= (t.date - r.date).days <= 9
                for r in base
            )


@pytest.mark.parametrize("seed", [f"ceil-{i}" for i in range(6)])
def test_date_ceiling_keeps_full_gaps(raw, profile, seed: str) -> None:
    ceiling = date(2025, 3, 31)
    out = inject_anomalies(raw, profile, rng=SeededRandom(seed), date_ceiling=ceiling)
    added = [t for t in out if t.id not in {r.id for r in raw}]
    assert all(t.date <= ceiling for t in added)
    _assert_full_gaps(out, raw)


def test_original_on_ceiling_day_is_passed_over(make_txn, profile) -> None:
    txns = [make_txn("n1", date(2025, 1, 31), -15.99)]
    out = inject_anomalies(txns, profile, (1, 1), date_ceiling=date(2025, 1, 31))
    assert out == txns


def test_earlier_original_chosen_when_last_has_no_room(make_txn, profile) -> None:
    txns = [make_txn("n0", date(2025, 1, 12), -15.99), make_txn("n1", date(2025, 1, 31), -15.99)]
    out = inject_anomalies(txns, profile, (1, 1), date_ceiling=date(2025, 1, 31))
    (dup,) = [t for t in out if t.is_suspicious]
    assert dup.suspicious_type == "duplicate"
    assert dup.parent_id == "n0"
    assert 2 <= (dup.date - txns[0].date).days <= 4


@pytest.mark.parametrize("seed", [f"short-{i}" for i in range(40)])
def test_generated_anomalies_keep_full_gaps(seed: str) -> None:
    txns = generate(build_profile(seed), date(2025, 2, 1), date(2025, 2, 28))
    raw = [t for t in txns if parse_transaction_id(t.id).phase != "X"]
    assert all(t.date <= date(2025, 2, 28) for t in txns)
    _assert_full_gaps(txns, raw)


def test_zero_count_range(raw, profile) -> None:
    assert _injected(raw, profile, count_range=(0, 0)) == raw


def test_no_candidates(make_txn, profile) -> None:
    txns = [make_txn("v1", date(2025, 1, 3), -20.0, kind="expense")]
    assert inject_anomalies(txns, profile) == txns
