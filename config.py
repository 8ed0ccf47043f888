"""
Environment configuration

Values come from the process environment, with a local .env file filling in
anything that is not already set.
"""
import os
import random
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    random_seed: Optional[int] = None


def get_settings() -> Settings:
    """Read settings from the environment."""
    raw_seed = os.getenv("RANDOM_SEED", "").strip()
    seed = None
    if raw_seed:
        try:
            seed = int(raw_seed)
        except ValueError:
            raise ValueError(f"RANDOM_SEED must be an integer, found {raw_seed!r}")

    return Settings(
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        random_seed=seed,
    )


def build_rng(settings: Optional[Settings] = None) -> Optional[random.Random]:
    """
    Build the random source for the service

    Returns:
        A seeded random.Random when RANDOM_SEED is set, otherwise None so
        callers fall back to the shared module-level generator
    """
    settings = settings or get_settings()
    if settings.random_seed is None:
        return None
    return random.Random(settings.random_seed)
