from __future__ import annotations

import os
from dataclasses import dataclass

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _s(name: str, default: str, allowed: tuple[str, ...]) -> str:
    value = os.getenv(name, "").strip().upper()
    return value if value in allowed else default


@dataclass(frozen=True)
class DestructureConfig:
    log_level: str = _s("DESTRUCTURE_LOG_LEVEL", "INFO", LOG_LEVELS)


CONFIG = DestructureConfig()
