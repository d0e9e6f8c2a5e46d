"""Pytest fixtures: sample config, a fixed profile, a cached six-month ledger."""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from ledgerforge.config import _default_config
from ledgerforge.engine import generate
from ledgerforge.profile import build_profile
from ledgerforge.schemas import LifestyleProfile, Transaction

PROFILE_SEED = "demo-user-0042"


@pytest.fixture
def config_path(tmp_path: Path) -> str:
    """Return path to a temporary config dir with default.yaml."""
    cfg_dir = tmp_path / "config"
    cfg_dir.mkdir()
    (cfg_dir / "default.yaml").write_text(
        f"""
app:
  log_level: INFO
generation:
  max_months: 24
injection:
  enabled: true
  min_count: 2
  max_count: 6
detection:
  enabled: true
  amount_tolerance: 0.10
  forgiveness_days: 3
reporting:
  output_dir: "{tmp_path / 'exports'}"
"""
    )
    return str(cfg_dir / "default.yaml")


@pytest.fixture(scope="session")
def profile() -> LifestyleProfile:
    return build_profile(PROFILE_SEED)


@pytest.fixture(scope="session")
def ledger(profile: LifestyleProfile) -> list[Transaction]:
    """Jan-Jun 2025, default config."""
    return generate(profile, date(2025, 1, 1), date(2025, 6, 30), config=_default_config())


def _make_txn(
    txn_id: str,
    on: date,
    amount: float,
    merchant: str = "Netflix",
    kind: str = "subscription",
    **extra,
) -> Transaction:
    """Hand-built record for rule and detection tests."""
    return Transaction(
        id=txn_id,
        date=on,
        amount=amount,
        description=merchant.upper(),
        merchant_name=merchant,
        category="Subscriptions",
        kind=kind,
        **extra,
    )


@pytest.fixture
def make_txn():
    return _make_txn
