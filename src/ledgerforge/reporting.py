"""Review summaries and dataset export (JSONL + CSV + metadata sidecar)."""

from __future__ import annotations

import csv
import hashlib
import json
import logging
from collections import Counter
from collections.abc import Iterable, Mapping, Sequence
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from ledgerforge import DRAW_PROTOCOL_VERSION, ENGINE_VERSION, RULES_VERSION, __version__
from ledgerforge.catalog import CATALOG_VERSION
from ledgerforge.config import get_config_hash
from ledgerforge.schemas import SuspiciousSummary, Transaction

log = logging.getLogger(__name__)

Decision = str  # "confirmed" | "dismissed"

_TYPE_LABELS = {
    "duplicate": "Potential Duplicate",
    "overcharge": "Unusual Amount",
    "unexpected": "Unexpected Charge",
}

CSV_FIELDS = [
    "id",
    "date",
    "amount",
    "description",
    "merchant_name",
    "category",
    "kind",
    "account_id",
    "source",
    "is_recurring",
    "is_subscription",
    "is_suspicious",
    "suspicious_type",
    "suspicious_reason",
    "parent_id",
    "pattern_fingerprint",
]


def suspicious_type_label(suspicious_type: str | None) -> str:
    return _TYPE_LABELS.get(suspicious_type or "", "Suspicious Activity")


def compute_suspicious_summary(
    suspicious: Iterable[Transaction], decisions: Mapping[str, Decision] | None = None
) -> SuspiciousSummary:
    """Counts for the review queue. A record with no decision is unresolved."""
    decisions = decisions or {}
    flagged = [t for t in suspicious if t.is_suspicious]
    by_decision = Counter(decisions.get(t.id) for t in flagged)
    by_type = Counter(t.suspicious_type or "unknown" for t in flagged)
    return SuspiciousSummary(
        total_flagged=len(flagged),
        unresolved=by_decision[None],
        confirmed=by_decision["confirmed"],
        dismissed=by_decision["dismissed"],
        by_type=dict(sorted(by_type.items())),
    )


def unresolved_suspicious(
    suspicious: Iterable[Transaction], decisions: Mapping[str, Decision] | None = None
) -> list[Transaction]:
    """Flagged records still worth showing: everything not dismissed."""
    decisions = decisions or {}
    return [t for t in suspicious if t.is_suspicious and decisions.get(t.id) != "dismissed"]


def surrounding_context(
    target: Transaction, transactions: Iterable[Transaction], days_window: int = 45
) -> list[Transaction]:
    """Same-merchant records within ``days_window`` days of ``target``, oldest first."""
    merchant = target.merchant_name.lower()
    nearby = [
        t
        for t in transactions
        if t.id != target.id
        and t.merchant_name.lower() == merchant
        and abs((t.date - target.date).days) <= days_window
    ]
    return sorted(nearby, key=lambda t: (t.date, t.id))


def dataset_digest(transactions: Sequence[Transaction]) -> str:
    """SHA256 over canonical JSON of the records, in order."""
    h = hashlib.sha256()
    for t in transactions:
        canonical = json.dumps(t.model_dump(mode="json"), sort_keys=True, separators=(",", ":"))
        h.update(canonical.encode("utf-8"))
        h.update(b"\n")
    return h.hexdigest()


def write_jsonl(transactions: Iterable[Transaction], path: str | Path) -> int:
    n = 0
    with open(path, "w", encoding="utf-8") as f:
        for t in transactions:
            f.write(t.model_dump_json() + "\n")
            n += 1
    return n


def read_jsonl(path: str | Path) -> list[Transaction]:
    out: list[Transaction] = []
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            out.append(Transaction.model_validate_json(line))
    return out


def write_csv(transactions: Iterable[Transaction], path: str | Path) -> int:
    n = 0
    with open(path, "w", encoding="utf-8", newline="") as f:
        w = csv.DictWriter(f, fieldnames=CSV_FIELDS, extrasaction="ignore")
        w.writeheader()
        for t in transactions:
            w.writerow(t.model_dump(mode="json"))
            n += 1
    return n


def export_dataset(
    transactions: Sequence[Transaction],
    output_dir: str | Path,
    prefix: str = "ledger",
    config: dict[str, Any] | None = None,
) -> tuple[str, str, str]:
    """
    Write JSONL, CSV and a ``.meta.json`` sidecar carrying the digest,
    config hash and versions needed to reproduce the run.
    Returns (path_jsonl, path_csv, path_meta).
    """
    path = Path(output_dir)
    path.mkdir(parents=True, exist_ok=True)
    jsonl_path = path / f"{prefix}.jsonl"
    csv_path = path / f"{prefix}.csv"
    meta_path = path / f"{prefix}.meta.json"

    write_jsonl(transactions, jsonl_path)
    write_csv(transactions, csv_path)
    summary = compute_suspicious_summary(transactions)
    meta = {
        "generated_at": datetime.now(UTC).isoformat(),
        "count": len(transactions),
        "digest": dataset_digest(transactions),
        "config_hash": get_config_hash(config) if config is not None else None,
        "summary": summary.model_dump(),
        "versions": {
            "package": __version__,
            "engine": ENGINE_VERSION,
            "rules": RULES_VERSION,
            "catalog": CATALOG_VERSION,
            "draw_protocol": DRAW_PROTOCOL_VERSION,
        },
    }
    with open(meta_path, "w", encoding="utf-8") as f:
        json.dump(meta, f, indent=2)
    log.info("Exported %d records to %s", len(transactions), path)
    return str(jsonl_path), str(csv_path), str(meta_path)
