"""Environment helpers that turn .env files and os.environ into settings."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Optional

from . import config

ALIAS_KEY_MAP = {
    "port": "PORT",
    "listen port": "PORT",
    "host": "HOST",
    "origin": "CORS_ORIGIN",
    "cors origin": "CORS_ORIGIN",
    "allowed origin": "CORS_ORIGIN",
    "static": "STATIC_DIR",
    "static dir": "STATIC_DIR",
    "seed": "CATALOG_SEED",
    "log level": "LOG_LEVEL",
}


@dataclass
class Settings:
    """Runtime settings for the catalog server."""

    host: str = config.DEFAULT_HOST
    port: int = config.DEFAULT_PORT
    cors_origin: str = config.DEFAULT_CORS_ORIGIN
    static_dir: str = config.DEFAULT_STATIC_DIR
    log_level: str = config.DEFAULT_LOG_LEVEL
    seed: Optional[int] = None


def load_env(path: Optional[Path] = None) -> Dict[str, str]:
    """Load environment variables from a .env file, returning a mapping.

    The file is expected to contain KEY=VALUE pairs. Existing os.environ takes
    precedence, but values from the file are also exported for downstream use.
    """

    env_path = Path(path) if path else Path(__file__).resolve().parent.parent / ".env"
    values: Dict[str, str] = {}
    if not env_path.exists():
        return values

    for raw_line in env_path.read_text().splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, raw_value = line.split("=", 1)
        parsed_key = _normalize_key(key)
        value = raw_value.strip().strip('"').strip("'")
        if parsed_key:
            values[parsed_key] = value
            os.environ.setdefault(parsed_key, value)
    return values


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build ``Settings`` from the environment, falling back to defaults."""

    source = os.environ if environ is None else environ
    seed_raw = source.get("CATALOG_SEED", "").strip()
    return Settings(
        host=source.get("HOST", config.DEFAULT_HOST),
        port=_parse_int(source, "PORT", config.DEFAULT_PORT),
        cors_origin=source.get("CORS_ORIGIN", config.DEFAULT_CORS_ORIGIN),
        static_dir=source.get("STATIC_DIR", config.DEFAULT_STATIC_DIR),
        log_level=_parse_log_level(source),
        seed=_parse_int(source, "CATALOG_SEED", 0) if seed_raw else None,
    )


def _parse_int(source: Mapping[str, str], name: str, default: int) -> int:
    raw = source.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"Environment variable {name} must be an integer, got {raw!r}") from None


def _parse_log_level(source: Mapping[str, str]) -> str:
    level = source.get("LOG_LEVEL", "").strip().upper() or config.DEFAULT_LOG_LEVEL
    if level not in config.LOG_LEVELS:
        raise RuntimeError(
            f"Environment variable LOG_LEVEL must be one of {', '.join(config.LOG_LEVELS)}, got {level!r}"
        )
    return level


def _normalize_key(key: str) -> Optional[str]:
    lowered = key.lower().strip()
    if not lowered:
        return None
    if lowered in ALIAS_KEY_MAP:
        return ALIAS_KEY_MAP[lowered]
    return lowered.replace(" ", "_").upper()
