"""Typer CLI: generate, profile, summary, verify, serve-api."""

from __future__ import annotations

import calendar
import json
import os
from datetime import date, datetime
from pathlib import Path

import typer

from ledgerforge.config import get_config, get_config_hash
from ledgerforge.engine import generate as generate_ledger
from ledgerforge.errors import GenerationError
from ledgerforge.ids import profile_prefix
from ledgerforge.logging import setup_logging
from ledgerforge.profile import build_profile
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

app = typer.Typer(help="Deterministic synthetic ledger generator")


def _load(config: str | None) -> dict:
    cfg = get_config(config)
    setup_logging(cfg.get("app", {}).get("log_level", "INFO"))
    return cfg


def _parse_date(value: str, end: bool = False) -> date:
    """YYYY-MM-DD, or YYYY-MM meaning the first (or, for ``end``, last) day of that month."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        pass
    try:
        d = datetime.strptime(value, "%Y-%m").date()
    except ValueError as e:
        raise typer.BadParameter(f"expected YYYY-MM or YYYY-MM-DD, got {value!r}") from e
    if end:
        return d.replace(day=calendar.monthrange(d.year, d.month)[1])
    return d


@app.command()
def generate(
    profile_id: str = typer.Argument(..., help="Profile seed"),
    start: str = typer.Option(..., "--start", "-s", help="YYYY-MM or YYYY-MM-DD"),
    end: str = typer.Option(..., "--end", "-e", help="YYYY-MM or YYYY-MM-DD"),
    mode: str = typer.Option("full", "--mode", "-m", help="full or extend"),
    existing: str | None = typer.Option(
        None, "--existing", help="JSONL from an earlier run (required for --mode extend)"
    ),
    output: str | None = typer.Option(
        None, "--output", "-o", help="Write .jsonl or .csv; default exports to reporting.output_dir"
    ),
    config: str | None = typer.Option(None, "--config", "-c", help="Config YAML path"),
) -> None:
    """Generate a ledger for PROFILE_ID over [start, end]."""
    cfg = _load(config)
    if mode == "extend" and not existing:
        typer.echo("--mode extend needs --existing FILE.jsonl", err=True)
        raise typer.Exit(1)
    prior = None
    if existing:
        if not Path(existing).exists():
            typer.echo(f"File not found: {existing}", err=True)
            raise typer.Exit(1)
        try:
            prior = read_jsonl(existing)
        except ValueError as e:
            typer.echo(f"Invalid ledger file {existing}: {e}", err=True)
            raise typer.Exit(1) from e
    profile = build_profile(profile_id)
    try:
        txns = generate_ledger(
            profile,
            _parse_date(start),
            _parse_date(end, end=True),
            mode=mode,
            existing=prior,
            config=cfg,
        )
    except GenerationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e

    if output is None:
        out_dir = cfg.get("reporting", {}).get("output_dir", "./exports")
        prefix = f"ledger_{profile_prefix(profile_id)}"
        paths = export_dataset(txns, out_dir, prefix=prefix, config=cfg)
        typer.echo(f"Wrote {len(txns)} transactions: {', '.join(paths)}")
    else:
        suffix = Path(output).suffix.lower()
        if suffix not in (".jsonl", ".csv"):
            typer.echo("Output must be .jsonl or .csv", err=True)
            raise typer.Exit(1)
        Path(output).parent.mkdir(parents=True, exist_ok=True)
        (write_csv if suffix == ".csv" else write_jsonl)(txns, output)
        typer.echo(f"Wrote {len(txns)} transactions to {output}")
    typer.echo(f"Digest: {dataset_digest(txns)}")


@app.command()
def profile(
    profile_id: str = typer.Argument(..., help="Profile seed"),
) -> None:
    """Print the lifestyle profile derived from PROFILE_ID as JSON."""
    typer.echo(build_profile(profile_id).model_dump_json(indent=2))


@app.command()
def summary(
    path: str = typer.Argument(..., help="JSONL file from generate"),
    details: bool = typer.Option(
        False, "--details", "-d", help="List each flagged charge with nearby same-merchant charges"
    ),
    config: str | None = typer.Option(None, "--config", "-c", help="Config YAML path"),
) -> None:
    """Print suspicious-charge counts by type."""
    p = Path(path)
    if not p.exists():
        typer.echo(f"File not found: {path}", err=True)
        raise typer.Exit(1)
    txns = read_jsonl(p)
    s = compute_suspicious_summary(txns)
    typer.echo(f"Transactions: {len(txns)}")
    typer.echo(f"Flagged: {s.total_flagged}")
    for kind, n in s.by_type.items():
        typer.echo(f"  {suspicious_type_label(kind)}: {n}")
    if not details:
        return
    window = int(get_config(config).get("reporting", {}).get("context_days", 45))
    for t in unresolved_suspicious(txns):
        nearby = surrounding_context(t, txns, days_window=window)
        typer.echo(
            f"{t.date} {t.merchant_name} ${abs(t.amount):.2f} "
            f"[{suspicious_type_label(t.suspicious_type)}] {len(nearby)} nearby"
        )
        for r in nearby:
            typer.echo(f"    {r.date} ${abs(r.amount):.2f}")


@app.command()
def verify(
    profile_id: str = typer.Argument(..., help="Profile seed"),
    start: str = typer.Option(..., "--start", "-s", help="YYYY-MM or YYYY-MM-DD"),
    end: str = typer.Option(..., "--end", "-e", help="YYYY-MM or YYYY-MM-DD"),
    config: str | None = typer.Option(None, "--config", "-c", help="Config YAML path"),
) -> None:
    """Generate twice from a fresh profile and compare digests. Exit 1 on mismatch."""
    cfg = _load(config)
    s, e = _parse_date(start), _parse_date(end, end=True)
    try:
        first = dataset_digest(generate_ledger(build_profile(profile_id), s, e, config=cfg))
        second = dataset_digest(generate_ledger(build_profile(profile_id), s, e, config=cfg))
    except GenerationError as err:
        typer.echo(f"Error: {err}", err=True)
        raise typer.Exit(1) from err
    typer.echo(json.dumps({"digest": first, "config_hash": get_config_hash(cfg)}))
    if first != second:
        typer.echo(f"Digest mismatch: {first} != {second}", err=True)
        raise typer.Exit(1)
    typer.echo("Deterministic: OK")


@app.command("serve-api")
def serve_api(
    config: str | None = typer.Option(None, "--config", "-c", help="Config YAML path"),
    host: str | None = typer.Option(None, "--host", "-h", help="Bind host"),
    port: int | None = typer.Option(None, "--port", "-p", help="Bind port"),
) -> None:
    """Start the FastAPI server."""
    cfg = _load(config)
    if config:
        os.environ["LEDGERFORGE_CONFIG_PATH"] = config
    h = (
        host
        or os.environ.get("LEDGERFORGE_API_HOST")
        or cfg.get("api", {}).get("host", "127.0.0.1")
    )
    _pe = os.environ.get("LEDGERFORGE_API_PORT", "")
    p = (
        port
        if port is not None
        else (int(_pe) if _pe and _pe.isdigit() else None) or cfg.get("api", {}).get("port", 8000)
    )
    import uvicorn

    uvicorn.run("ledgerforge.api:app", host=h, port=p, reload=False)


if __name__ == "__main__":
    app()
