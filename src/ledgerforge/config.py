"""Configuration loading from YAML + environment overrides."""

from __future__ import annotations

import hashlib
import os
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _load_yaml(path: str | Path) -> dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    out = dict(base)
    for k, v in override.items():
        if k in out and isinstance(out[k], dict) and isinstance(v, dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


class AppSettings(BaseSettings):
    """App-level settings with env override."""

    model_config = SettingsConfigDict(
        env_prefix="LEDGERFORGE_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    config_path: str = Field(default="config/default.yaml", alias="LEDGERFORGE_CONFIG_PATH")
    log_level: str | None = Field(default=None, alias="LEDGERFORGE_LOG_LEVEL")
    api_host: str = Field(default="127.0.0.1", alias="LEDGERFORGE_API_HOST")
    api_port: int = Field(default=8000, alias="LEDGERFORGE_API_PORT")


def validate_generation_config(config: dict[str, Any]) -> None:
    """Raise ValueError on injection bounds or detection tolerances that cannot work."""
    inj = config.get("injection") or {}
    lo = int(inj.get("min_count", 2))
    hi = int(inj.get("max_count", 6))
    if lo < 0 or hi < 0:
        raise ValueError("injection.min_count and injection.max_count must be >= 0")
    if lo > hi:
        raise ValueError(f"injection.min_count ({lo}) must not exceed injection.max_count ({hi})")
    det = config.get("detection") or {}
    if float(det.get("amount_tolerance", 0.10)) <= 0:
        raise ValueError("detection.amount_tolerance must be positive")
    if int(det.get("forgiveness_days", 3)) < 0:
        raise ValueError("detection.forgiveness_days must be >= 0")
    gen = config.get("generation") or {}
    if int(gen.get("max_months", 120)) < 1:
        raise ValueError("generation.max_months must be >= 1")


def get_config(config_path: str | None = None) -> dict[str, Any]:
    """Load merged config from YAML and apply env overrides via AppSettings."""
    settings = AppSettings()
    path = config_path or settings.config_path
    if not Path(path).exists():
        base = _default_config()
    else:
        base = _deep_merge(_default_config(), _load_yaml(path))
        dev_path = Path(path).parent / "dev.yaml"
        if dev_path.exists() and os.environ.get("LEDGERFORGE_ENV") == "dev":
            base = _deep_merge(base, _load_yaml(dev_path))
    if settings.log_level:
        base.setdefault("app", {})["log_level"] = settings.log_level
    validate_generation_config(base)
    return base


def _default_config() -> dict[str, Any]:
    return {
        "app": {"name": "ledgerforge", "log_level": "INFO"},
        "generation": {"max_months": 120, "id_epoch_year": 2020},
        "injection": {"enabled": True, "min_count": 2, "max_count": 6},
        "detection": {
            "enabled": True,
            "amount_tolerance": 0.10,
            "forgiveness_days": 3,
            "unexpected_window_months": 3,
            "rules": {
                "duplicate": {"enabled": True},
                "overcharge": {"enabled": True},
                "unexpected": {"enabled": True},
            },
        },
        "reporting": {"output_dir": "./exports", "context_days": 45},
        "api": {"host": "127.0.0.1", "port": 8000},
    }


def get_config_hash(config: dict[str, Any]) -> str:
    """SHA256 of resolved config for reproducibility (canonical key order)."""
    canonical = yaml.dump(config, default_flow_style=False, sort_keys=True, allow_unicode=True)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()
