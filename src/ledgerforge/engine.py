"""Transaction engine: month-by-month staged generation, then whole-dataset post-processing.

Per month, a fresh ``SeededRandom(month_seed(profile, year, month))`` feeds the
stages below in this exact order (the draw protocol, see DRAW_PROTOCOL_VERSION):

    1. fixed recurring bills (housing, utilities, phone, internet, insurance, loans)
    2. subscriptions (stable amounts via StableAmountRegistry)
    3. income (two payroll deposits)
    4. variable spending
    5. internal transfer to savings
    6. fees (from the per-profile palette)

After every month is generated: anomaly injection, detection pass, sort by
(date, id).
"""

from __future__ import annotations

import calendar
import logging
from collections import Counter
from collections.abc import Collection, Iterator, Sequence
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from ledgerforge import catalog
from ledgerforge.catalog import FeeType
from ledgerforge.config import _default_config
from ledgerforge.detection import run_detection_pass
from ledgerforge.errors import ExtendConflictError, InvalidDateRangeError, InvalidModeError
from ledgerforge.ids import (
    ANOMALY_PHASE,
    DEFAULT_EPOCH_YEAR,
    make_transaction_id,
    month_from_epoch,
    month_seed,
    parse_transaction_id,
    pattern_fingerprint,
    profile_prefix,
)
from ledgerforge.injection import inject_anomalies
from ledgerforge.prng import SeededRandom
from ledgerforge.schemas import LifestyleProfile, Transaction

log = logging.getLogger(__name__)

FEE_PALETTE_RANGE = (3, 6)


# --- Dates ---
def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def clamp_day(year: int, month: int, day: int) -> int:
    """Clamp ``day`` into [1, last day of month]."""
    return max(1, min(day, days_in_month(year, month)))


def iter_months(start: date, end: date) -> Iterator[tuple[int, int]]:
    year, month = start.year, start.month
    while (year, month) <= (end.year, end.month):
        yield year, month
        month += 1
        if month > 12:
            month, year = 1, year + 1


def month_count(start: date, end: date) -> int:
    return (end.year - start.year) * 12 + (end.month - start.month) + 1


# --- Descriptions ---
_SUBSCRIPTION_DESCRIPTORS = (
    ("apple", "APPLE.COM/BILL"),
    ("netflix", "NETFLIX.COM"),
    ("spotify", "SPOTIFY USA"),
    ("amazon", "AMAZON PRIME"),
    ("hulu", "HULU.COM"),
    ("disney", "DISNEY PLUS"),
    ("hbo", "HBO MAX"),
    ("youtube", "GOOGLE *YouTube"),
)


def format_description(merchant: str, style: str) -> str:
    """Statement descriptor for a charge style: card, ach, online or subscription."""
    upper = merchant.upper()
    if style == "card":
        return f"VISA*{upper}"
    if style == "ach":
        return f"{upper} ACH"
    if style == "online":
        return upper if "." in merchant else f"{upper}.COM"
    if style == "subscription":
        lower = merchant.lower()
        for needle, descriptor in _SUBSCRIPTION_DESCRIPTORS:
            if needle in lower:
                return descriptor
        return f"{upper}.COM"
    return upper


# --- Generation state ---
class StableAmountRegistry:
    """First amount seen per (category, merchant, plan); reused every later month."""

    def __init__(self) -> None:
        self._amounts: dict[tuple[str, str, str | None], float] = {}

    def resolve(self, key: tuple[str, str, str | None], default: float) -> float:
        return self._amounts.setdefault(key, default)

    def __len__(self) -> int:
        return len(self._amounts)

    def __contains__(self, key: object) -> bool:
        return key in self._amounts


def fee_palette(profile: LifestyleProfile) -> list[FeeType]:
    """The 3-6 fee types this profile ever incurs. Drawn once, independent of date range."""
    rng = SeededRandom(f"{profile.id}:fees")
    return rng.pick_distinct(catalog.FEE_TYPES, *FEE_PALETTE_RANGE)


@dataclass
class GenerationContext:
    """State threaded through every stage of one ``generate`` call."""

    profile: LifestyleProfile
    epoch_year: int = DEFAULT_EPOCH_YEAR
    registry: StableAmountRegistry = field(default_factory=StableAmountRegistry)
    fees: list[FeeType] = field(default_factory=list)

    def month(self, year: int, month: int) -> MonthContext:
        return MonthContext(
            ctx=self,
            year=year,
            month=month,
            rng=SeededRandom(month_seed(self.profile.id, year, month)),
        )


@dataclass
class MonthContext:
    ctx: GenerationContext
    year: int
    month: int
    rng: SeededRandom
    records: list[Transaction] = field(default_factory=list)
    sequences: Counter = field(default_factory=Counter)

    @property
    def days(self) -> int:
        return days_in_month(self.year, self.month)

    def emit(
        self,
        day: int,
        amount: float,
        description: str,
        category: str,
        kind: str,
        phase: str,
        merchant: str,
        **flags: Any,
    ) -> Transaction:
        on = date(self.year, self.month, clamp_day(self.year, self.month, day))
        seq = self.sequences[phase]
        self.sequences[phase] += 1
        tx = Transaction(
            id=make_transaction_id(self.ctx.profile.id, on, phase, seq, self.ctx.epoch_year),
            date=on,
            amount=round(amount, 2),
            description=description,
            merchant_name=merchant,
            category=category,
            kind=kind,
            **flags,
        )
        self.records.append(tx)
        return tx


# --- Stages ---
def _bill(
    m: MonthContext,
    merchant: str,
    category: str,
    days: tuple[int, int],
    amounts: tuple[float, float],
) -> None:
    day = m.rng.range(*days)
    amount = -m.rng.uniform(*amounts)
    description = format_description(merchant, "ach")
    m.emit(day, amount, description, category, "expense", "R", merchant, is_recurring=True)


def stage_fixed_bills(m: MonthContext) -> None:
    p = m.ctx.profile
    if p.housing_type == "rent":
        housing = -m.rng.range(1200, 2500)
    else:
        housing = -m.rng.range(1500, 3000)
    m.emit(
        1,
        housing,
        format_description(p.housing_provider, "ach"),
        "Rent" if p.housing_type == "rent" else "Mortgage",
        "expense",
        "R",
        p.housing_provider,
        is_recurring=True,
    )
    for util in p.utilities:
        _bill(m, util.name, "Utilities", (5, 25), (40, 150))
    _bill(m, p.phone_carrier, "Phone", (10, 20), (60, 120))
    _bill(m, p.internet_provider, "Internet", (10, 20), (50, 90))
    _bill(m, p.auto_insurance, "Insurance", (10, 20), (80, 150))
    _bill(m, p.health_insurance, "Insurance", (1, 5), (200, 600))
    _bill(m, p.home_insurance, "Insurance", (15, 25), (80, 200))
    if p.life_insurance:
        _bill(m, p.life_insurance, "Insurance", (1, 10), (30, 80))
    if p.car_lender:
        _bill(m, p.car_lender, "Loans", (1, 10), (300, 600))
    if p.student_loan_servicer:
        _bill(m, p.student_loan_servicer, "Loans", (15, 25), (200, 500))
    for lender in p.other_loans:
        _bill(m, lender, "Loans", (5, 20), (100, 400))


def stage_subscriptions(m: MonthContext) -> None:
    for plan in m.ctx.profile.subscriptions():
        key = (plan.category, plan.merchant, plan.plan_label)
        amount = m.ctx.registry.resolve(key, plan.amount)
        day = clamp_day(m.year, m.month, plan.billing_day)
        m.emit(
            day,
            -amount,
            format_description(plan.merchant, "subscription"),
            "Subscriptions",
            "subscription",
            "S",
            plan.merchant,
            is_subscription=True,
            is_recurring=True,
            pattern_fingerprint=pattern_fingerprint(plan.merchant, amount, day),
        )


def stage_income(m: MonthContext) -> None:
    salary = m.rng.range(2500, 4000)
    description = f"{m.ctx.profile.primary_bank.name.upper()} DIRECT DEP"
    for day in (1, 15):
        m.emit(day, salary, description, "Income", "income", "I", "Employer", is_recurring=True)


def _spend(
    m: MonthContext,
    day: int,
    pool: Sequence[str],
    amounts: tuple[float, float],
    category: str,
    style: str,
    suffix: str = "",
) -> None:
    merchant = m.rng.pick(pool)
    amount = -m.rng.uniform(*amounts)
    description = format_description(merchant, style) + suffix
    m.emit(day, amount, description, category, "expense", "V", merchant)


def stage_variable_spending(m: MonthContext) -> None:
    p, rng, days = m.ctx.profile, m.rng, m.days

    # Groceries: roughly weekly
    for d in range(1, days + 1, 7):
        _spend(m, min(d + rng.range(0, 2), days), p.grocery_stores, (80, 200), "Groceries", "card")

    # Fast food / coffee: 8-12
    for _ in range(rng.range(8, 12)):
        day = rng.range(1, days)
        if rng.next() > 0.6:
            _spend(m, day, p.coffee_shops, (4, 8), "Dining", "card")
        else:
            _spend(m, day, p.fast_food_spots, (10, 25), "Dining", "card")

    for _ in range(rng.range(3, 5)):
        _spend(m, rng.range(1, days), p.casual_dining, (25, 80), "Dining", "card")

    # Fuel: roughly weekly
    for d in range(1, days + 1, 7):
        day = min(d + rng.range(0, 3), days)
        _spend(m, day, p.gas_stations, (30, 60), "Transport", "card", " GAS")

    for _ in range(rng.range(2, 6)):
        _spend(m, rng.range(1, days), p.rideshare_apps, (10, 45), "Transport", "card")
    for _ in range(rng.range(3, 6)):
        _spend(m, rng.range(1, days), p.food_delivery_apps, (15, 50), "Dining", "online")
    for _ in range(rng.range(2, 4)):
        _spend(m, rng.range(1, days), p.retail_stores, (20, 100), "Shopping", "card")
    for _ in range(rng.range(3, 6)):
        _spend(m, rng.range(1, days), p.online_shops, (15, 150), "Shopping", "online")
    for _ in range(rng.range(1, 3)):
        _spend(m, rng.range(1, days), p.unclassified_merchants, (5, 50), "Other", "card")


def stage_transfers(m: MonthContext) -> None:
    if m.rng.next() > 0.7:
        day = m.rng.range(1, m.days)
        amount = -m.rng.range(100, 500)
        m.emit(day, amount, "Transfer to Savings", "Transfer", "transfer_internal", "T", "Savings")


def stage_fees(m: MonthContext) -> None:
    if not m.ctx.fees:
        return
    for _ in range(m.rng.range(2, 8)):
        fee = m.rng.pick(m.ctx.fees)
        day = m.rng.range(1, m.days)
        jitter = 0.8 + m.rng.next() * 0.4
        m.emit(day, -(fee.amount * jitter), fee.name, "Fees", "fee", "F", fee.merchant)


STAGES = (
    stage_fixed_bills,
    stage_subscriptions,
    stage_income,
    stage_variable_spending,
    stage_transfers,
    stage_fees,
)


def generate_month(ctx: GenerationContext, year: int, month: int) -> list[Transaction]:
    """Run every stage for one month; records in emission order."""
    m = ctx.month(year, month)
    for stage in STAGES:
        stage(m)
    log.debug("Generated %04d-%02d: %d records", year, month, len(m.records))
    return m.records


def generate_months(
    profile: LifestyleProfile,
    start: date,
    end: date,
    config: dict | None = None,
    skip_months: Collection[tuple[int, int]] = (),
) -> list[Transaction]:
    """Monthly stages only (no injection, detection or sort)."""
    cfg = config or _default_config()
    ctx = GenerationContext(
        profile=profile,
        epoch_year=int(cfg.get("generation", {}).get("id_epoch_year", DEFAULT_EPOCH_YEAR)),
        fees=fee_palette(profile),
    )
    out: list[Transaction] = []
    for year, month in iter_months(start, end):
        if (year, month) in skip_months:
            continue
        out.extend(generate_month(ctx, year, month))
    return out


# --- Extend support ---
def covered_months(
    profile: LifestyleProfile, existing: Sequence[Transaction], epoch_year: int = DEFAULT_EPOCH_YEAR
) -> set[tuple[int, int]]:
    """Months already generated, read from the ids of existing non-anomaly records.

    Raises ExtendConflictError if a record belongs to another profile,
    is not a generated id, or repeats an id.
    """
    prefix = profile_prefix(profile.id)
    seen: set[str] = set()
    months: set[tuple[int, int]] = set()
    for t in existing:
        if t.id in seen:
            raise ExtendConflictError(f"duplicate transaction id in existing records: {t.id}")
        seen.add(t.id)
        try:
            parsed = parse_transaction_id(t.id)
        except ValueError as e:
            raise ExtendConflictError(str(e)) from e
        if parsed.prefix != prefix:
            raise ExtendConflictError(f"record {t.id} was not generated for this profile")
        if parsed.phase == ANOMALY_PHASE:
            continue
        month = month_from_epoch(parsed.epoch_month, epoch_year)
        if (t.date.year, t.date.month) != month:
            raise ExtendConflictError(f"record {t.id} is dated outside its generated month")
        months.add(month)
    return months


def _sort_key(t: Transaction) -> tuple[date, str]:
    return t.date, t.id


def generate(
    profile: LifestyleProfile,
    start: date,
    end: date,
    mode: str = "full",
    existing: Sequence[Transaction] | None = None,
    config: dict | None = None,
) -> list[Transaction]:
    """Deterministic ledger for ``profile`` over [start, end], sorted by (date, id).

    ``extend`` keeps ``existing`` verbatim and only generates months it does
    not cover; injection and detection then touch only the new records.
    """
    if mode not in ("full", "extend"):
        raise InvalidModeError(f"mode must be 'full' or 'extend', got {mode!r}")
    if start > end:
        raise InvalidDateRangeError(f"start {start} is after end {end}")
    cfg = config or _default_config()
    max_months = int(cfg.get("generation", {}).get("max_months", 120))
    if month_count(start, end) > max_months:
        raise InvalidDateRangeError(
            f"range spans {month_count(start, end)} months; limit is {max_months}"
        )
    epoch_year = int(cfg.get("generation", {}).get("id_epoch_year", DEFAULT_EPOCH_YEAR))

    prior = list(existing or []) if mode == "extend" else []
    skip = covered_months(profile, prior, epoch_year) if prior else set()
    fresh = generate_months(profile, start, end, cfg, skip_months=skip)
    if not fresh:
        log.info(
            "Nothing to generate for %s: all %d months covered",
            profile_prefix(profile.id),
            len(skip),
        )
        return sorted(prior, key=_sort_key)

    frozen = {t.id for t in prior}
    records = prior + fresh

    inj = cfg.get("injection", {})
    if inj.get("enabled", True):
        first, last = min(fresh, key=_sort_key).date, max(fresh, key=_sort_key).date
        rng = SeededRandom(f"{profile.id}:anomalies:{first:%Y-%m}:{last:%Y-%m}")
        ceiling = date(end.year, end.month, days_in_month(end.year, end.month))
        records = inject_anomalies(
            records,
            profile,
            (int(inj.get("min_count", 2)), int(inj.get("max_count", 6))),
            rng=rng,
            frozen_ids=frozen,
            date_ceiling=ceiling,
            epoch_year=epoch_year,
            tolerance=float(cfg.get("detection", {}).get("amount_tolerance", 0.10)),
        )

    if cfg.get("detection", {}).get("enabled", True):
        new_ids = {t.id for t in records if t.id not in frozen}
        records = run_detection_pass(records, cfg, only_ids=new_ids)

    log.info(
        "Generated %d records for %s (%d new, %d months, mode=%s)",
        len(records),
        profile_prefix(profile.id),
        len(records) - len(prior),
        month_count(start, end) - len(skip),
        mode,
    )
    return sorted(records, key=_sort_key)
