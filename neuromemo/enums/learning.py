"""
Learning System Enums

Defines enums for adaptive difficulty, activity kinds, review forecasts
and mastery tracking.
"""

from enum import Enum


class DifficultyLevel(str, Enum):
    """
    Coarse per-activity difficulty level.

    Levels are ordered; the adapter moves exactly one step at a time:
    BEGINNER < EASY < MEDIUM < HARD < EXPERT
    """

    BEGINNER = "beginner"
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXPERT = "expert"

    @property
    def rank(self) -> int:
        """Zero-based position of the level on the scale."""
        return list(DifficultyLevel).index(self)

    def step(self, delta: int) -> "DifficultyLevel":
        """Return the level `delta` steps away, saturating at both ends."""
        levels = list(DifficultyLevel)
        index = min(max(self.rank + delta, 0), len(levels) - 1)
        return levels[index]


class ActivityKind(str, Enum):
    """
    Activity (game mode) that produced an outcome.

    Difficulty state and XP conversion are tracked independently per kind.
    """

    FREE_STUDY = "free_study"
    IDENTIFICATION = "identification"  # Touch-and-name / identify structure
    CONNECTIONS = "connections"  # Connect related structures
    MISSING_LABELS = "missing_labels"
    QUIZ = "quiz"
    SPATIAL_TEST = "spatial_test"
    SPEED_CHALLENGE = "speed_challenge"  # Countdown against the clock


class ForecastBucket(str, Enum):
    """
    Buckets used by the review forecast.

    NEW items have never been reviewed and are always due.
    """

    NEW = "new"
    OVERDUE = "overdue"
    TODAY = "today"
    TOMORROW = "tomorrow"
    THIS_WEEK = "this_week"
    LATER = "later"


class MasteryTrend(str, Enum):
    """
    Trend direction for mastery tracking.

    Calculated by comparing current mastery to a previous value:
    - delta > threshold: IMPROVING
    - delta < -threshold: DECLINING
    - else: STABLE
    """

    IMPROVING = "improving"
    STABLE = "stable"
    DECLINING = "declining"
