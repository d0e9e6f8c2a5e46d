"""Deliberate anomaly injection for guaranteed demo coverage."""

from __future__ import annotations

import logging
from collections.abc import Collection, Sequence
from datetime import date, timedelta

from ledgerforge.ids import ANOMALY_PHASE, DEFAULT_EPOCH_YEAR, make_transaction_id
from ledgerforge.prng import SeededRandom
from ledgerforge.schemas import SUSPICIOUS_TYPES, LifestyleProfile, Transaction

log = logging.getLogger(__name__)

DUPLICATE_SEQUENCE_BASE = 900
UNEXPECTED_SEQUENCE_BASE = 950
# Days between the original charge and the injected copy.
GAP_DAYS = {"duplicate": (2, 4), "unexpected": (5, 9)}


def _is_candidate(t: Transaction) -> bool:
    # Outflows only: an income record is never a billing anomaly.
    return bool(t.merchant_name) and t.amount < 0 and (t.kind == "subscription" or t.is_recurring)


def _free_id(
    profile: LifestyleProfile, on: date, sequence: int, taken: set[str], epoch_year: int
) -> str:
    while True:
        txn_id = make_transaction_id(profile.id, on, ANOMALY_PHASE, sequence, epoch_year)
        if txn_id not in taken:
            taken.add(txn_id)
            return txn_id
        sequence += 1


def inject_anomalies(
    transactions: Sequence[Transaction],
    profile: LifestyleProfile,
    count_range: tuple[int, int] = (2, 6),
    *,
    rng: SeededRandom | None = None,
    frozen_ids: Collection[str] = frozenset(),
    date_ceiling: date | None = None,
    epoch_year: int = DEFAULT_EPOCH_YEAR,
    tolerance: float = 0.10,
) -> list[Transaction]:
    """Seed 2-6 anomalies across distinct recurring merchants; returns a new list.

    Types rotate duplicate -> overcharge -> unexpected. Records in
    ``frozen_ids`` are neither picked nor rewritten. A duplicate or unexpected
    charge keeps its full gap after the original, so only originals with room
    before ``date_ceiling`` are eligible; a merchant with none is passed over.
    """
    result = list(transactions)
    groups: dict[str, list[Transaction]] = {}
    for t in result:
        if t.id not in frozen_ids and _is_candidate(t):
            groups.setdefault(t.merchant_name, []).append(t)
    if not groups:
        return result

    rng = rng or SeededRandom(f"{profile.id}:anomalies")
    lo, hi = count_range
    target = rng.range(lo, hi)
    available = list(groups)

    position = {t.id: i for i, t in enumerate(result)}
    taken = set(position)
    injected = 0
    while injected < target and available:
        merchant = available.pop(int(rng.next() * len(available)))
        kind = SUSPICIOUS_TYPES[injected % len(SUSPICIOUS_TYPES)]
        gap = 0
        if kind in GAP_DAYS:
            gap = rng.range(*GAP_DAYS[kind])
        group = [
            t
            for t in groups[merchant]
            if date_ceiling is None or t.date + timedelta(days=gap) <= date_ceiling
        ]
        if not group:
            log.debug("No room for a %s after any %s charge", kind, merchant)
            continue
        original = group[int(rng.next() * len(group))]

        if kind == "duplicate":
            on = original.date + timedelta(days=gap)
            dup = original.model_copy(
                update={
                    "id": _free_id(
                        profile, on, DUPLICATE_SEQUENCE_BASE + injected, taken, epoch_year
                    ),
                    "date": on,
                }
            ).labeled(
                "duplicate", f"Duplicate charge detected - {gap} days after original", original.id
            )
            result.append(dup)
        elif kind == "overcharge":
            usual = abs(original.amount)
            inflated = round(usual * (1.1 + rng.next() * 0.2), 2)
            result[position[original.id]] = original.labeled(
                "overcharge",
                f"Amount ${inflated:.2f} is higher than usual ${usual:.2f}",
                amount=-inflated,
            )
        else:
            on = original.date + timedelta(days=gap)
            unusual = round(4.99 + rng.next() * 10, 2)
            if abs(unusual - abs(original.amount)) <= tolerance:
                unusual = round(unusual + 1.0, 2)
            odd = original.model_copy(
                update={
                    "id": _free_id(
                        profile, on, UNEXPECTED_SEQUENCE_BASE + injected, taken, epoch_year
                    ),
                    "date": on,
                    "amount": -unusual,
                }
            ).labeled("unexpected", f"Unexpected charge of ${unusual:.2f} from {merchant}")
            result.append(odd)
        injected += 1

    log.info("Injected %d anomalies across %d candidate merchants", injected, len(groups))
    return result
