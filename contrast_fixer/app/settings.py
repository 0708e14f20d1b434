from __future__ import annotations
import os
from dataclasses import dataclass

from contrast_fixer.app.errors import ConfigError

DEFAULT_POLICY = "legacy_min_3"
DEFAULT_MAX_STEPS = 200


def _get_float(name: str) -> float | None:
    v = os.getenv(name)
    if v is None or v.strip() == "":
        return None
    try:
        f = float(v)
    except ValueError as e:
        raise ConfigError(f"Env var {name} must be a number, got {v!r}") from e
    if f <= 0:
        raise ConfigError(f"Env var {name} must be positive, got {v!r}")
    return f


def _get_int(name: str, default: int) -> int:
    v = os.getenv(name)
    if v is None or v.strip() == "":
        return default
    try:
        i = int(v)
    except ValueError as e:
        raise ConfigError(f"Env var {name} must be an integer, got {v!r}") from e
    if i <= 0:
        raise ConfigError(f"Env var {name} must be positive, got {v!r}")
    return i

@dataclass(frozen=True)
class Settings:
    # Contrast search
    policy: str
    min_contrast_ratio: float
    max_steps: int

    # Logging
    log_level: str

def load_settings() -> Settings:
    from contrast_fixer.resolver.policies import maybe_get_policy

    policy_name = os.getenv("CONTRAST_POLICY", DEFAULT_POLICY).strip() or DEFAULT_POLICY
    policy = maybe_get_policy(policy_name)
    if policy is None:
        raise ConfigError(f"Unknown contrast policy: {policy_name}")

    ratio = _get_float("CONTRAST_MIN_RATIO")

    return Settings(
        policy=policy.name,
        min_contrast_ratio=ratio if ratio is not None else policy.min_contrast_ratio,
        max_steps=_get_int("CONTRAST_MAX_STEPS", DEFAULT_MAX_STEPS),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
