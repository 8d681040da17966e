"""Configuration loader."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml

from .models import CacheSettings, FetchSettings, SiteSettings

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config.yaml"


def load_config(config_path: Path | str | None = None) -> dict[str, Any]:
    """Load config from YAML file.

    Resolution order: explicit path, CHALUPY_CONFIG, project-root config.yaml.
    An explicit path that does not exist is an error; a missing default file
    means every setting takes its built-in default.
    """
    explicit = config_path or os.environ.get("CHALUPY_CONFIG")
    path = Path(explicit) if explicit else DEFAULT_CONFIG_PATH
    if not path.exists():
        if explicit:
            raise FileNotFoundError(f"Config not found: {path}")
        return {}
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _range_ms(raw: Any, default: tuple[float, float]) -> tuple[float, float]:
    if isinstance(raw, (list, tuple)) and len(raw) == 2:
        low, high = float(raw[0]), float(raw[1])
        return (min(low, high), max(low, high))
    return default


def get_site_settings(config: dict[str, Any]) -> SiteSettings:
    """Extract target site layout from config."""
    site = config.get("site", {})
    return SiteSettings(
        base_url=str(site.get("base_url", "https://www.e-chalupy.cz")).rstrip("/"),
        search_path=str(site.get("search_path", "/chalupy")),
        regions_path=str(site.get("regions_path", "/oblasti")),
        features_path=str(site.get("features_path", "/vybaveni")),
    )


def get_fetch_settings(config: dict[str, Any]) -> FetchSettings:
    """Extract timeout, retry and delay settings from config."""
    fetch = config.get("fetch", {})
    return FetchSettings(
        timeout_seconds=float(fetch.get("timeout_seconds", 30)),
        retries=int(fetch.get("retries", 2)),
        politeness_delay_ms=_range_ms(fetch.get("politeness_delay_ms"), (500.0, 1500.0)),
        backoff_delay_ms=_range_ms(fetch.get("backoff_delay_ms"), (1000.0, 3000.0)),
    )


def get_cache_settings(config: dict[str, Any]) -> CacheSettings:
    """Extract catalog cache settings from config."""
    cache = config.get("cache", {})
    return CacheSettings(ttl_seconds=float(cache.get("ttl_seconds", 3600)))


def get_log_level(config: dict[str, Any]) -> str:
    """Log level: CHALUPY_LOG_LEVEL wins over the config file."""
    level = os.environ.get("CHALUPY_LOG_LEVEL") or config.get("logging", {}).get("level", "INFO")
    return str(level).upper()
