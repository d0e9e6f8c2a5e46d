"""Merchant pattern analysis: what 'normal' looks like for one merchant.

The expected interval is the modal gap between consecutive charges, rounded
to the nearest 7-day bucket. With irregular history (e.g. a skipped month)
this can shift the baseline; the heuristic is kept as-is on purpose.
"""

from __future__ import annotations

import calendar
from collections.abc import Iterable, Sequence
from datetime import date

from ledgerforge.ids import round_half_up
from ledgerforge.schemas import MerchantPattern, Transaction

DEFAULT_INTERVAL_DAYS = 30
DEFAULT_DAY_OF_MONTH = 15
AMOUNT_TOLERANCE = 0.10


def same_amount(a: float, b: float, tolerance: float = AMOUNT_TOLERANCE) -> bool:
    """Compare absolute amounts within ``tolerance`` (never exact float equality)."""
    return abs(abs(a) - abs(b)) <= tolerance + 1e-9


def add_months(d: date, months: int) -> date:
    """Calendar month shift; day clamped to the target month's length."""
    index = d.year * 12 + (d.month - 1) + months
    year, month0 = divmod(index, 12)
    last = calendar.monthrange(year, month0 + 1)[1]
    return date(year, month0 + 1, min(d.day, last))


def _first_mode(values: Iterable[int], default: int) -> int:
    """Most frequent value; ties go to the value that reached the max count first."""
    counts: dict[int, int] = {}
    for v in values:
        counts[v] = counts.get(v, 0) + 1
    best, best_count = default, 0
    for value, count in counts.items():
        if count > best_count:
            best, best_count = value, count
    return best


def pattern_from_history(merchant: str, history: Sequence[Transaction]) -> MerchantPattern | None:
    """Build the pattern from one merchant's records, already sorted by date."""
    if len(history) < 2:
        return None

    amount_counts: dict[str, int] = {}
    for t in history:
        key = f"{abs(t.amount):.2f}"
        amount_counts[key] = amount_counts.get(key, 0) + 1
    normal = [float(k) for k, c in amount_counts.items() if c >= 2]
    if not normal:
        # Nothing recurs: every observed amount counts as a plan.
        normal = [float(k) for k in amount_counts]

    buckets = []
    for prev, cur in zip(history, history[1:], strict=False):
        gap = (cur.date - prev.date).days
        if gap <= 0:
            continue
        bucket = round_half_up(gap / 7) * 7
        if bucket:
            buckets.append(bucket)

    return MerchantPattern(
        merchant=merchant,
        normal_amounts=tuple(normal),
        expected_interval=_first_mode(buckets, DEFAULT_INTERVAL_DAYS),
        expected_day_of_month=_first_mode((t.date.day for t in history), DEFAULT_DAY_OF_MONTH),
    )


def analyze_pattern(transactions: Iterable[Transaction], merchant: str) -> MerchantPattern | None:
    """Pattern for ``merchant`` over ``transactions``; None with fewer than 2 records."""
    history = sorted((t for t in transactions if t.merchant_name == merchant), key=lambda t: t.date)
    return pattern_from_history(merchant, history)


class MerchantIndex:
    """Per-merchant history grouped once, patterns computed lazily and cached.

    Read-only after construction, so classifiers may share one index.
    """

    def __init__(self, transactions: Iterable[Transaction]) -> None:
        groups: dict[str, list[Transaction]] = {}
        for t in transactions:
            groups.setdefault(t.merchant_name, []).append(t)
        self._history: dict[str, tuple[Transaction, ...]] = {
            m: tuple(sorted(txns, key=lambda t: t.date)) for m, txns in groups.items()
        }
        self._patterns: dict[str, MerchantPattern | None] = {}

    def __contains__(self, merchant: object) -> bool:
        return merchant in self._history

    def merchants(self) -> list[str]:
        return list(self._history)

    def history(self, merchant: str) -> tuple[Transaction, ...]:
        return self._history.get(merchant, ())

    def pattern(self, merchant: str) -> MerchantPattern | None:
        if merchant not in self._patterns:
            self._patterns[merchant] = pattern_from_history(merchant, self.history(merchant))
        return self._patterns[merchant]
