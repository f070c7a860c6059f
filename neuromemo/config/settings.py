"""
Engine Configuration

This module provides type-safe configuration loading using Pydantic settings.
Environment variables are loaded from .env file and validated.

Every tunable constant of the scheduling, difficulty and scoring engine lives
here so that callers can change behaviour without touching the algorithms.

Usage:
    from neuromemo.config import settings

    # Access settings
    floor = settings.SM2_MIN_EASE
    pool = settings.SESSION_MINIMUM_POOL_SIZE
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic_settings import BaseSettings

PROJECT_ROOT = Path(__file__).parent.parent.parent


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    # Application
    APP_NAME: str = "NeuroMemo"
    DEBUG: bool = False

    # SM-2 review scheduling
    SM2_INITIAL_EASE: float = 2.5
    SM2_MIN_EASE: float = 1.3
    SM2_MAX_QUALITY: int = 5
    SM2_PASSING_QUALITY: int = 3  # quality below this is a failed recall
    SM2_FIRST_INTERVAL_DAYS: int = 1
    SM2_SECOND_INTERVAL_DAYS: int = 6

    # Session selection and setup
    SESSION_MINIMUM_POOL_SIZE: int = 10
    SESSION_BASE_TIME_LIMIT_SECONDS: float = 60.0
    SESSION_BASE_OPTION_COUNT: int = 4

    # Adaptive difficulty
    DIFFICULTY_INCREASE_THRESHOLD: int = 3  # consecutive successes to step up
    DIFFICULTY_DECREASE_THRESHOLD: int = 2  # consecutive failures to step down
    DIFFICULTY_DEFAULT_LEVEL: str = "medium"
    DIFFICULTY_MIN_OPTION_COUNT: int = 2

    # Scoring
    SCORE_MAX_BASE: float = 100.0
    SCORE_MAX_TIME_BONUS: float = 0.5
    SCORE_MIN_CORRECT_ANSWER: float = 10.0
    SCORE_STREAK_MULTIPLIER: float = 0.1  # 10% per consecutive correct answer
    SCORE_CONNECTION_PENALTY_PER_ERROR: float = 0.05
    SCORE_CONNECTION_MAX_PENALTY: float = 0.5

    # Experience / leveling
    XP_BASE: int = 100
    XP_GROWTH: float = 1.8
    XP_MAX_LEVEL: int = 50

    # Mastery
    MASTERY_MIN_INTERVAL_DAYS: int = 21  # interval at which an item counts as mastered
    MASTERY_TREND_THRESHOLD: float = 0.05

    # Streaks
    STREAK_MILESTONES: list[int] = [3, 7, 14, 30, 60, 100, 365]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()


@lru_cache()
def load_yaml_config() -> dict[str, Any]:
    """Load engine configuration from config/default.yaml."""
    config_path = PROJECT_ROOT / "config" / "default.yaml"

    if not config_path.exists():
        return {}

    with open(config_path) as f:
        return yaml.safe_load(f) or {}


yaml_config: dict[str, Any] = load_yaml_config()
