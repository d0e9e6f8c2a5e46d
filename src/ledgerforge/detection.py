"""Detection pass: label organically suspicious charges against full history."""

from __future__ import annotations

import logging
from collections.abc import Collection, Sequence

from ledgerforge.patterns import MerchantIndex
from ledgerforge.rules import BaseRule, RuleContext, get_all_rules
from ledgerforge.schemas import RuleResult, Transaction

log = logging.getLogger(__name__)


def _classify(
    tx: Transaction, index: MerchantIndex, rules: Sequence[BaseRule]
) -> RuleResult | None:
    ctx = RuleContext(
        transaction=tx,
        history=index.history(tx.merchant_name),
        pattern=index.pattern(tx.merchant_name),
    )
    if ctx.pattern is None:
        return None
    for rule in rules:
        hits = rule.evaluate(ctx)
        if hits:
            return hits[0]
    return None


def analyze_transaction(
    tx: Transaction,
    history: Sequence[Transaction],
    rules: Sequence[BaseRule] | None = None,
) -> RuleResult | None:
    """Classify one charge against ``history``; first matching rule wins, None if clean."""
    return _classify(tx, MerchantIndex(history), rules if rules is not None else get_all_rules())


def collect_alerts(
    transactions: Sequence[Transaction],
    config: dict | None = None,
    only_ids: Collection[str] | None = None,
) -> list[RuleResult]:
    """First rule hit for each unlabeled record, in input order, with ``transaction_id`` set.

    ``only_ids`` limits which records are evaluated; all records still serve
    as history.
    """
    rules = get_all_rules(config)
    index = MerchantIndex(transactions)
    alerts: list[RuleResult] = []
    for tx in transactions:
        if tx.is_suspicious or (only_ids is not None and tx.id not in only_ids):
            continue
        hit = _classify(tx, index, rules)
        if hit is not None:
            alerts.append(hit.model_copy(update={"transaction_id": tx.id}))
    return alerts


def apply_alerts(
    transactions: Sequence[Transaction], alerts: Sequence[RuleResult]
) -> list[Transaction]:
    """Label the records named by ``alerts``; order is preserved."""
    by_id = {a.transaction_id: a for a in alerts}
    out: list[Transaction] = []
    for tx in transactions:
        hit = by_id.get(tx.id)
        if hit is None or tx.is_suspicious:
            out.append(tx)
        else:
            out.append(tx.labeled(hit.suspicious_type, hit.reason, hit.parent_id))
    return out


def run_detection_pass(
    transactions: Sequence[Transaction],
    config: dict | None = None,
    only_ids: Collection[str] | None = None,
) -> list[Transaction]:
    """Label every unlabeled record that a classifier flags; order is preserved."""
    alerts = collect_alerts(transactions, config, only_ids)
    log.info("Detection pass labeled %d of %d records", len(alerts), len(transactions))
    return apply_alerts(transactions, alerts)
