"""Deterministic transaction identifiers and pattern fingerprints."""

from __future__ import annotations

import math
import re
from datetime import date
from typing import Literal, NamedTuple

from ledgerforge.prng import fnv1a

GenerationPhase = Literal["R", "S", "I", "V", "T", "F", "X"]
PHASES: tuple[str, ...] = ("R", "S", "I", "V", "T", "F", "X")
ANOMALY_PHASE = "X"
DEFAULT_EPOCH_YEAR = 2020

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_ID_PATTERN = re.compile(r"^([0-9a-z]{4})-(-?\d+)-([RSIVTFX])-([0-9a-z]{3,})$")


class ParsedId(NamedTuple):
    prefix: str
    epoch_month: int
    phase: str
    sequence: int


def to_base36(num: int) -> str:
    if num < 0:
        return "-" + to_base36(-num)
    if num == 0:
        return "0"
    out = []
    while num:
        num, rem = divmod(num, 36)
        out.append(_DIGITS[rem])
    return "".join(reversed(out))


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def profile_prefix(profile_id: str) -> str:
    """First four base-36 characters of the profile hash."""
    return to_base36(fnv1a(profile_id))[:4].rjust(4, "0")


def epoch_month(year: int, month: int, epoch_year: int = DEFAULT_EPOCH_YEAR) -> int:
    return (year - epoch_year) * 12 + (month - 1)


def month_from_epoch(value: int, epoch_year: int = DEFAULT_EPOCH_YEAR) -> tuple[int, int]:
    """Inverse of ``epoch_month``: (year, month 1-12)."""
    years, month_index = divmod(value, 12)
    return epoch_year + years, month_index + 1


def make_transaction_id(
    profile_id: str,
    on: date,
    phase: GenerationPhase | str,
    sequence: int,
    epoch_year: int = DEFAULT_EPOCH_YEAR,
) -> str:
    """Stable id: ``{prefix}-{epochMonth}-{phase}-{seq}`` e.g. ``p7x2-61-R-00c``."""
    if phase not in PHASES:
        raise ValueError(f"unknown generation phase {phase!r}")
    if sequence < 0:
        raise ValueError("sequence must be non-negative")
    seq = to_base36(sequence).rjust(3, "0")
    month = epoch_month(on.year, on.month, epoch_year)
    return f"{profile_prefix(profile_id)}-{month}-{phase}-{seq}"


def parse_transaction_id(txn_id: str) -> ParsedId:
    m = _ID_PATTERN.match(txn_id)
    if not m:
        raise ValueError(f"not a generated transaction id: {txn_id!r}")
    return ParsedId(m.group(1), int(m.group(2)), m.group(3), int(m.group(4), 36))


def month_seed(profile_id: str, year: int, month: int) -> int:
    return fnv1a(f"{profile_id}:{year}:{month}")


def pattern_fingerprint(merchant: str, amount: float, day_of_month: int) -> str:
    """Short key for (merchant, rounded amount, billing day)."""
    key = f"{merchant.lower()}:{round_half_up(abs(amount))}:{day_of_month}"
    return to_base36(fnv1a(key))
