from __future__ import annotations

import logging
import os
from dataclasses import dataclass

_LOG = logging.getLogger(__name__)

SEED_ENV = "CARDS_SEED"


@dataclass(frozen=True)
class Settings:
    seed: int | None = None


def _seed_from_env() -> int | None:
    raw = os.getenv(SEED_ENV)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError:
        # 非整数视为未设置
        _LOG.warning("Ignoring non-integer %s=%r", SEED_ENV, raw)
        return None


def get_settings() -> Settings:
    """Read settings from the environment on every call (no cache)."""
    return Settings(seed=_seed_from_env())


__all__ = ["SEED_ENV", "Settings", "get_settings"]
