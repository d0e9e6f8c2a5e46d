"""Logging setup: stdout, seeds and free-text fields redacted."""

from __future__ import annotations

import logging
import re
import sys
from typing import Any

# A profile seed is the identity a whole persona is derived from: log the prefix, never the seed.
REDACT_KEYS = frozenset({"profile_id", "seed", "description", "reason"})
REDACT_PATTERN = re.compile(
    r"(\b" + "|".join(re.escape(k) for k in REDACT_KEYS) + r")[\s=:]+[^\s,\)\]]+",
    re.IGNORECASE,
)


def _redact_message(msg: Any) -> str:
    """Replace key=value or key: value for redacted keys with [REDACTED]."""
    if not isinstance(msg, str):
        return str(msg)
    return REDACT_PATTERN.sub(r"\1=[REDACTED]", msg)


class SeedRedactionFilter(logging.Filter):
    """Redact profile seeds and free text from log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = _redact_message(record.msg)
        if getattr(record, "args", None) and isinstance(record.args, tuple | dict):
            if isinstance(record.args, tuple):
                record.args = tuple(
                    _redact_message(a) if isinstance(a, str) else a for a in record.args
                )
            else:
                record.args = {
                    k: "[REDACTED]" if k.lower() in REDACT_KEYS else v
                    for k, v in record.args.items()
                }
        return True


def setup_logging(log_level: str = "INFO") -> None:
    """Configure root logger: stdout, redaction filter."""
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
        stream=sys.stdout,
        force=True,
    )
    for name in ("", "ledgerforge"):
        logging.getLogger(name).addFilter(SeedRedactionFilter())
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return a logger for module `name` (redaction applied at root)."""
    return logging.getLogger(name)
