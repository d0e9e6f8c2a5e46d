"""Logging entry points for callers (implementation lives in logging_config)."""

from ledgerforge.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
