import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List, Tuple

# Bounds on window length, threshold and each per-minute sample
MIN_BOUND = 1
MAX_BOUND = 105
MIN_SAMPLE = 0

DEFAULT_SAMPLES = (2, 2, 2, 2, 5, 5, 5, 8)


@dataclass(frozen=True)
class Settings:
    window_length: int = 3
    threshold: int = 4
    samples: Tuple[int, ...] = DEFAULT_SAMPLES
    log_level: str = "INFO"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _samples_env(name: str) -> Tuple[int, ...]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return DEFAULT_SAMPLES
    try:
        return tuple(int(tok) for tok in raw.replace(",", " ").split())
    except ValueError:
        raise ValueError(f"{name} must be a comma separated list of integers, got {raw!r}") from None


def load_settings() -> Settings:
    cors = os.getenv("CORS_ORIGINS", "*").split(",")
    return Settings(
        window_length=_int_env("CALL_ALERTS_WINDOW_LENGTH", 3),
        threshold=_int_env("CALL_ALERTS_THRESHOLD", 4),
        samples=_samples_env("CALL_ALERTS_SAMPLES"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        cors_origins=[c.strip() for c in cors if c.strip()] or ["*"],
    )


@lru_cache
def get_settings() -> Settings:
    return load_settings()
