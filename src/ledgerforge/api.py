"""FastAPI app: build profiles, generate ledgers, re-run detection."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, HTTPException

from ledgerforge import DRAW_PROTOCOL_VERSION, ENGINE_VERSION, RULES_VERSION, __version__
from ledgerforge.catalog import CATALOG_VERSION
from ledgerforge.config import get_config, get_config_hash
from ledgerforge.detection import apply_alerts, collect_alerts
from ledgerforge.engine import generate
from ledgerforge.errors import ExtendConflictError, GenerationError
from ledgerforge.logging import get_logger, setup_logging
from ledgerforge.profile import build_profile
from ledgerforge.reporting import compute_suspicious_summary, dataset_digest
from ledgerforge.schemas import (
    AnalyzeRequest,
    AnalyzeResponse,
    GenerateRequest,
    GenerateResponse,
    LifestyleProfile,
)

log = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    config = get_config()
    setup_logging(config.get("app", {}).get("log_level", "INFO"))
    yield


app = FastAPI(title="ledgerforge API", version=__version__, lifespan=lifespan)


@app.get("/health")
def health() -> dict[str, Any]:
    """Liveness and the versions that pin generated output."""
    config = get_config()
    return {
        "status": "ok",
        "engine_version": ENGINE_VERSION,
        "rules_version": RULES_VERSION,
        "catalog_version": CATALOG_VERSION,
        "draw_protocol_version": DRAW_PROTOCOL_VERSION,
        "config_hash": get_config_hash(config),
    }


@app.get("/profiles/{profile_id}", response_model=LifestyleProfile)
def get_profile(profile_id: str) -> LifestyleProfile:
    return build_profile(profile_id)


@app.post("/generate", response_model=GenerateResponse)
def generate_ledger(body: GenerateRequest) -> GenerateResponse:
    """Generate (or extend) a ledger. Range errors are 422; extend conflicts are 409."""
    config = get_config()
    profile = build_profile(body.profile_id)
    try:
        transactions = generate(
            profile, body.start, body.end, mode=body.mode, existing=body.existing, config=config
        )
    except ExtendConflictError as e:
        raise HTTPException(status_code=409, detail=str(e)) from e
    except GenerationError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    return GenerateResponse(
        profile_id=body.profile_id,
        count=len(transactions),
        digest=dataset_digest(transactions),
        summary=compute_suspicious_summary(transactions),
        transactions=transactions,
    )


@app.post("/analyze", response_model=AnalyzeResponse)
def analyze(body: AnalyzeRequest) -> AnalyzeResponse:
    """Run the detection pass over caller-supplied records; already-labeled records are kept.

    Each new label comes back as an alert with its severity and evidence.
    """
    config = get_config()
    alerts = collect_alerts(body.transactions, config)
    labeled = apply_alerts(body.transactions, alerts)
    log.info("Analyze labeled %d of %d records", len(alerts), len(labeled))
    return AnalyzeResponse(flagged=len(alerts), transactions=labeled, alerts=alerts)
