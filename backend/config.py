"""
Service settings. Every field is overridable through an environment variable.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from backend.corpus import EATERIES_DIR


def _read_env_int(name: str, default: int) -> int:
    """Read env var as int; return default if unset or invalid."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class CatalogConfig:
    """Where the catalog is loaded from and how the server is bound."""

    eateries_dir: Path = EATERIES_DIR
    host: str = "127.0.0.1"
    port: int = 8080
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "CatalogConfig":
        """Build config from EATERIES_* / LOG_LEVEL env vars, falling back to defaults."""
        return cls(
            eateries_dir=Path(os.getenv("EATERIES_DIR", str(EATERIES_DIR))),
            host=os.getenv("EATERIES_HOST", "127.0.0.1"),
            port=_read_env_int("EATERIES_PORT", 8080),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
