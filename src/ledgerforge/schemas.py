"""Pydantic v2 schemas: ledger records, lifestyle profile, rule output, API bodies."""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterator
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

TransactionKind = Literal[
    "income",
    "expense",
    "subscription",
    "fee",
    "transfer_internal",
    "transfer_external",
    "refund",
]
SuspiciousType = Literal["duplicate", "overcharge", "unexpected"]
SubscriptionCategory = Literal["streaming", "music", "cloud_storage", "gym", "software"]
GenerationMode = Literal["full", "extend"]

SUSPICIOUS_TYPES: tuple[str, ...] = ("duplicate", "overcharge", "unexpected")


# --- Ledger records ---
class Transaction(BaseModel):
    """One ledger line. Positive amount = inflow. Frozen: updates go through model_copy."""

    model_config = ConfigDict(frozen=True)

    id: str
    date: dt.date
    amount: float
    description: str
    merchant_name: str
    category: str
    kind: TransactionKind
    account_id: str = "checking"
    source: str = "Checking"
    is_recurring: bool = False
    is_subscription: bool = False
    is_suspicious: bool = False
    suspicious_type: SuspiciousType | None = None
    suspicious_reason: str | None = None
    parent_id: str | None = None
    pattern_fingerprint: str | None = None

    def labeled(
        self, suspicious_type: str, reason: str, parent_id: str | None = None, **changes: Any
    ) -> Transaction:
        """Return a copy carrying suspicion fields (and any extra field changes)."""
        update: dict[str, Any] = {
            "is_suspicious": True,
            "suspicious_type": suspicious_type,
            "suspicious_reason": reason,
            "parent_id": parent_id,
        }
        update.update(changes)
        return self.model_copy(update=update)


# --- Lifestyle profile ---
class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class BankAccount(_Frozen):
    name: str
    type: Literal["checking", "savings", "mmsa"]


class PeerWallet(_Frozen):
    name: str
    app: str


class CreditCard(_Frozen):
    name: str
    issuer: str


class UtilityProvider(_Frozen):
    name: str
    type: Literal["electric", "gas", "water", "internet", "combined"]


class SubscriptionPlan(_Frozen):
    merchant: str
    display_name: str
    category: SubscriptionCategory
    amount: float
    billing_day: int = Field(..., ge=1, le=31)
    plan_label: str | None = None


class LifestyleProfile(_Frozen):
    """Persona drawn once from a seed; constant for the profile's lifetime."""

    id: str
    created_at: dt.datetime | None = None

    primary_bank: BankAccount
    secondary_banks: tuple[BankAccount, ...]
    p2p_wallets: tuple[PeerWallet, ...]
    credit_cards: tuple[CreditCard, ...]
    investment_brokerages: tuple[str, ...]
    crypto_exchanges: tuple[str, ...]

    housing_type: Literal["rent", "mortgage"]
    housing_provider: str

    utilities: tuple[UtilityProvider, ...]
    phone_carrier: str
    internet_provider: str

    auto_insurance: str
    health_insurance: str
    home_insurance: str
    life_insurance: str | None = None

    car_lender: str | None = None
    student_loan_servicer: str | None = None
    other_loans: tuple[str, ...] = ()

    streaming_services: tuple[SubscriptionPlan, ...]
    music_service: SubscriptionPlan
    cloud_storage: tuple[SubscriptionPlan, ...]
    gym: SubscriptionPlan | None = None
    software_subscriptions: tuple[SubscriptionPlan, ...]

    grocery_stores: tuple[str, ...]
    fast_food_spots: tuple[str, ...]
    coffee_shops: tuple[str, ...]
    casual_dining: tuple[str, ...]
    gas_stations: tuple[str, ...]
    rideshare_apps: tuple[str, ...]
    food_delivery_apps: tuple[str, ...]
    retail_stores: tuple[str, ...]
    online_shops: tuple[str, ...]
    unclassified_merchants: tuple[str, ...]

    def subscriptions(self) -> Iterator[SubscriptionPlan]:
        """Plans in billing-emission order: streaming, music, gym, cloud, software."""
        yield from self.streaming_services
        yield self.music_service
        if self.gym is not None:
            yield self.gym
        yield from self.cloud_storage
        yield from self.software_subscriptions


# --- Pattern analysis / rules internal ---
class MerchantPattern(_Frozen):
    """Per-merchant baseline derived from history. Never persisted."""

    merchant: str
    normal_amounts: tuple[float, ...]
    expected_interval: int = 30
    expected_day_of_month: int = 15


class RuleResult(BaseModel):
    """Output of a single classifier evaluation."""

    rule_id: str
    suspicious_type: SuspiciousType
    severity: str
    reason: str
    transaction_id: str | None = None
    parent_id: str | None = None
    evidence_fields: dict[str, Any] | None = None


# --- API ---
class GenerateRequest(BaseModel):
    profile_id: str = Field(..., min_length=1, max_length=200)
    start: dt.date
    end: dt.date
    mode: GenerationMode = "full"
    existing: list[Transaction] | None = None

    @model_validator(mode="after")
    def check_range(self) -> GenerateRequest:
        if self.start > self.end:
            raise ValueError("start must be on or before end")
        return self


class SuspiciousSummary(BaseModel):
    total_flagged: int
    unresolved: int
    confirmed: int
    dismissed: int
    by_type: dict[str, int] = Field(default_factory=dict)


class GenerateResponse(BaseModel):
    profile_id: str
    count: int
    digest: str
    summary: SuspiciousSummary
    transactions: list[Transaction]


class AnalyzeRequest(BaseModel):
    transactions: list[Transaction]


class AnalyzeResponse(BaseModel):
    flagged: int
    transactions: list[Transaction]
    alerts: list[RuleResult] = Field(default_factory=list)
