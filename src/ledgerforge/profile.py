"""Lifestyle profile builder.

One pass over a ``SeededRandom(seed)``. Draw order is part of the output
contract (see DRAW_PROTOCOL_VERSION):

    1. accounts   2. housing   3. bills   4. insurance
    5. loans      6. subscriptions         7. daily-spend pools

Appending draws at the end is safe; inserting or reordering is not.
"""

from __future__ import annotations

import logging
from datetime import datetime

from ledgerforge import catalog
from ledgerforge.ids import profile_prefix
from ledgerforge.prng import SeededRandom
from ledgerforge.schemas import (
    BankAccount,
    CreditCard,
    LifestyleProfile,
    PeerWallet,
    SubscriptionPlan,
    UtilityProvider,
)

log = logging.getLogger(__name__)


def _list_price(table: dict[str, float], name: str, rng: SeededRandom, lo: int, hi: int) -> float:
    """Catalog price, else a randomized ``N.99`` (draws only for unlisted merchants)."""
    if name in table:
        return table[name]
    return rng.range(lo, hi) + 0.99


def _plans(
    names: list[str],
    category: str,
    table: dict[str, float],
    rng: SeededRandom,
    lo: int,
    hi: int,
    labelled: bool = False,
) -> tuple[SubscriptionPlan, ...]:
    plans = []
    for name in names:
        amount = _list_price(table, name, rng, lo, hi)
        plans.append(
            SubscriptionPlan(
                merchant=name,
                display_name=name,
                category=category,
                amount=amount,
                billing_day=rng.range(1, 28),
                plan_label=f"{amount:.2f}" if labelled else None,
            )
        )
    return tuple(plans)


def build_profile(seed: str, created_at: datetime | None = None) -> LifestyleProfile:
    """Materialize the persona for ``seed``. Same seed, same profile."""
    rng = SeededRandom(seed)

    # 1. Accounts
    primary_name = rng.pick(catalog.BANKS)
    primary_bank = BankAccount(name=primary_name, type="checking")
    secondary_banks = tuple(
        BankAccount(name=name, type="savings")
        for name in rng.pick_distinct([b for b in catalog.BANKS if b != primary_name], 2, 4)
    )
    p2p_wallets = tuple(
        PeerWallet(name=name, app=name) for name in rng.pick_distinct(catalog.P2P_SERVICES, 1, 3)
    )
    credit_cards = tuple(
        CreditCard(name=name, issuer=name.split(" ")[0])
        for name in rng.pick_distinct(catalog.CREDIT_CARDS, 1, 4)
    )
    brokerages = tuple(rng.pick_distinct(catalog.INVESTMENT_BROKERAGES, 1, 2))
    crypto = tuple(rng.pick_distinct(catalog.CRYPTO_EXCHANGES, 1, 3))

    # 2. Housing (rent XOR mortgage)
    housing_type = "rent" if rng.next() > 0.3 else "mortgage"
    housing_provider = rng.pick(catalog.HOUSING_PROVIDERS)

    # 3. Bills
    utilities = tuple(
        UtilityProvider(name=name, type=catalog.UTILITY_TYPES[i % len(catalog.UTILITY_TYPES)])
        for i, name in enumerate(rng.pick_distinct(catalog.UTILITY_PROVIDERS, 2, 5))
    )
    phone_carrier = rng.pick(catalog.MOBILE_CARRIERS)
    internet_provider = rng.pick(catalog.INTERNET_PROVIDERS)

    # 4. Insurance
    auto_insurance = rng.pick(catalog.AUTO_INSURERS)
    health_insurance = rng.pick(catalog.HEALTH_INSURERS)
    home_insurance = rng.pick(catalog.HOME_INSURERS)
    life_insurance = rng.pick(catalog.LIFE_INSURERS) if rng.next() > 0.6 else None

    # 5. Loans
    car_lender = rng.pick(catalog.AUTO_LENDERS) if rng.next() > 0.5 else None
    student_loan = rng.pick(catalog.STUDENT_LOAN_SERVICERS) if rng.next() > 0.6 else None
    other_loans = tuple(rng.pick_distinct(catalog.OTHER_LENDERS, 0, 2)) if rng.next() > 0.7 else ()

    # 6. Subscriptions
    streaming = _plans(
        rng.pick_distinct(catalog.STREAMING_VIDEO, 2, 5),
        "streaming",
        catalog.STREAMING_PRICES,
        rng,
        5,
        15,
    )
    music_name = rng.pick(catalog.MUSIC_SUBSCRIPTIONS)
    music = SubscriptionPlan(
        merchant=music_name,
        display_name="Music Subscription",
        category="music",
        amount=catalog.MUSIC_PRICES.get(music_name, catalog.MUSIC_DEFAULT_PRICE),
        billing_day=rng.range(1, 28),
    )
    cloud = _plans(
        rng.pick_distinct(catalog.CLOUD_STORAGE, 1, 3),
        "cloud_storage",
        catalog.CLOUD_PRICES,
        rng,
        2,
        12,
        labelled=True,
    )
    gym = None
    if rng.next() > 0.3:
        gym = SubscriptionPlan(
            merchant=rng.pick(catalog.GYMS),
            display_name="Gym Membership",
            category="gym",
            amount=catalog.GYM_PRICES[0] if rng.next() > 0.5 else catalog.GYM_PRICES[1],
            billing_day=1,
        )
    software = _plans(
        rng.pick_distinct(catalog.SOFTWARE_SUBSCRIPTIONS, 2, 6),
        "software",
        catalog.SOFTWARE_PRICES,
        rng,
        5,
        20,
    )

    # 7. Daily-spend pools
    grocery = tuple(rng.pick_distinct(catalog.GROCERY_STORES, 2, 6))
    fast_food = tuple(rng.pick_distinct(catalog.FAST_FOOD, 5, 10))
    coffee = tuple(rng.pick_distinct(catalog.COFFEE_SHOPS, 2, 4))
    dining = tuple(rng.pick_distinct(catalog.RESTAURANTS, 4, 5))
    gas = tuple(rng.pick_distinct(catalog.GAS_STATIONS, 2, 5))
    rideshare = tuple(rng.pick_distinct(catalog.RIDESHARE, 1, 3))
    delivery = tuple(rng.pick_distinct(catalog.FOOD_DELIVERY, 1, 3))
    retail = tuple(rng.pick_distinct(catalog.RETAIL_STORES, 3, 6))
    online = tuple(rng.pick_distinct(catalog.ONLINE_SHOPS, 3, 5))
    unclassified = tuple(rng.pick_distinct(catalog.UNCLASSIFIED_MERCHANTS, 4, 5))

    profile = LifestyleProfile(
        id=seed,
        created_at=created_at,
        primary_bank=primary_bank,
        secondary_banks=secondary_banks,
        p2p_wallets=p2p_wallets,
        credit_cards=credit_cards,
        investment_brokerages=brokerages,
        crypto_exchanges=crypto,
        housing_type=housing_type,
        housing_provider=housing_provider,
        utilities=utilities,
        phone_carrier=phone_carrier,
        internet_provider=internet_provider,
        auto_insurance=auto_insurance,
        health_insurance=health_insurance,
        home_insurance=home_insurance,
        life_insurance=life_insurance,
        car_lender=car_lender,
        student_loan_servicer=student_loan,
        other_loans=other_loans,
        streaming_services=streaming,
        music_service=music,
        cloud_storage=cloud,
        gym=gym,
        software_subscriptions=software,
        grocery_stores=grocery,
        fast_food_spots=fast_food,
        coffee_shops=coffee,
        casual_dining=dining,
        gas_stations=gas,
        rideshare_apps=rideshare,
        food_delivery_apps=delivery,
        retail_stores=retail,
        online_shops=online,
        unclassified_merchants=unclassified,
    )
    log.debug(
        "Built profile %s: %d subscriptions, housing=%s",
        profile_prefix(seed),
        sum(1 for _ in profile.subscriptions()),
        housing_type,
    )
    return profile
