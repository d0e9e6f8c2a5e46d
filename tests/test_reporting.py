"""Review summaries, context windows, digests and exports."""

from __future__ import annotations

import csv
import json
from datetime import date
from pathlib import Path

from ledgerforge.config import _default_config, get_config_hash
from ledgerforge.reporting import (
    compute_suspicious_summary,
    dataset_digest,
    export_dataset,
    read_jsonl,
    surrounding_context,
    suspicious_type_label,
    unresolved_suspicious,
    write_csv,
    write_jsonl,
)


def _flagged(make_txn):
    return [
        make_txn("a", date(2025, 1, 5), -15.99).labeled("duplicate", "r", "x"),
        make_txn("b", date(2025, 1, 6), -12.99).labeled("overcharge", "r"),
        make_txn("c", date(2025, 1, 7), -6.49).labeled("unexpected", "r"),
        make_txn("d", date(2025, 1, 8), -6.49),
    ]


def test_summary_counts(make_txn) -> None:
    s = compute_suspicious_summary(_flagged(make_txn), {"a": "confirmed", "b": "dismissed"})
    assert s.total_flagged == 3
    assert s.confirmed == 1
    assert s.dismissed == 1
    assert s.unresolved == 1
    assert s.by_type == {"duplicate": 1, "overcharge": 1, "unexpected": 1}


def test_summary_without_decisions(make_txn) -> None:
    s = compute_suspicious_summary(_flagged(make_txn))
    assert (s.total_flagged, s.unresolved, s.confirmed, s.dismissed) == (3, 3, 0, 0)


def test_unresolved_excludes_dismissed(make_txn) -> None:
    out = unresolved_suspicious(_flagged(make_txn), {"a": "confirmed", "b": "dismissed"})
    assert [t.id for t in out] == ["a", "c"]


def test_type_labels() -> None:
    assert suspicious_type_label("duplicate") == "Potential Duplicate"
    assert suspicious_type_label("overcharge") == "Unusual Amount"
    assert suspicious_type_label("unexpected") == "Unexpected Charge"
    assert suspicious_type_label(None) == "Suspicious Activity"


def test_surrounding_context(make_txn) -> None:
    target = make_txn("t", date(2025, 3, 1), -15.99)
    txns = [
        target,
        make_txn("late", date(2025, 4, 10), -15.99),
        make_txn("early", date(2025, 1, 20), -15.99, merchant="NETFLIX"),
        make_txn("far", date(2024, 12, 1), -15.99),
        make_txn("other", date(2025, 3, 2), -9.99, merchant="Hulu"),
    ]
    assert [t.id for t in surrounding_context(target, txns)] == ["early", "late"]
    assert [t.id for t in surrounding_context(target, txns, days_window=30)] == []


def test_digest_stable_and_order_sensitive(ledger) -> None:
    assert dataset_digest(ledger) == dataset_digest(list(ledger))
    assert len(dataset_digest(ledger)) == 64
    assert dataset_digest(ledger) != dataset_digest(list(reversed(ledger)))


def test_jsonl_round_trip(tmp_path: Path, ledger) -> None:
    path = tmp_path / "ledger.jsonl"
    assert write_jsonl(ledger, path) == len(ledger)
    assert read_jsonl(path) == ledger


def test_csv_has_header_and_rows(tmp_path: Path, ledger) -> None:
    path = tmp_path / "ledger.csv"
    write_csv(ledger, path)
    with open(path, encoding="utf-8", newline="") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == len(ledger)
    assert rows[0]["id"] == ledger[0].id
    assert rows[0]["date"] == ledger[0].date.isoformat()


def test_export_dataset_writes_sidecar(tmp_path: Path, ledger) -> None:
    cfg = _default_config()
    jsonl_path, csv_path, meta_path = export_dataset(ledger, tmp_path / "out", prefix="demo", config=cfg)
    assert Path(jsonl_path).name == "demo.jsonl"
    assert Path(csv_path).exists()
    meta = json.loads(Path(meta_path).read_text(encoding="utf-8"))
    assert meta["count"] == len(ledger)
    assert meta["digest"] == dataset_digest(ledger)
    assert meta["config_hash"] == get_config_hash(cfg)
    assert meta["summary"]["total_flagged"] == sum(1 for t in ledger if t.is_suspicious)
    assert set(meta["versions"]) == {"package", "engine", "rules", "catalog", "draw_protocol"}
