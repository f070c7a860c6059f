"""
Learning State Models

State owned by the learning services:
- MasteryRecord: per (user, structure) spaced-repetition state
- DifficultyState: per (user, activity) coarse difficulty level
- SessionOutcome: ephemeral input to scoring
- StreakState: daily practice streak
- SessionParameters / SystemProgress: derived values handed to callers

ARCHITECTURE NOTE:
    Algorithm state uses frozen dataclasses, updated only through
    dataclasses.replace; derived summaries use pydantic SummaryModel.
    None of these are persisted by the engine. Storage keyed by
    (user_id, structure_id) and (user_id, activity) is the caller's concern.

    All datetimes are expected to be timezone-aware UTC.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from pydantic import Field

from neuromemo.config.settings import settings
from neuromemo.enums.anatomy import AnatomicalSystem
from neuromemo.enums.learning import ActivityKind, DifficultyLevel
from neuromemo.models.base import SummaryModel


@dataclass(frozen=True)
class MasteryRecord:
    """
    Spaced-repetition state for one structure and one user.

    A record with no `next_review` has never been reviewed and is always due.
    Invariant: when present, next_review == last_review + interval days.
    """

    user_id: str
    structure_id: str
    ease_factor: float = field(default_factory=lambda: settings.SM2_INITIAL_EASE)
    interval: int = 0  # Days until next review
    review_count: int = 0
    last_review: Optional[datetime] = None
    next_review: Optional[datetime] = None
    correct_count: int = 0
    incorrect_count: int = 0

    def is_new(self) -> bool:
        """Check if this record has never been reviewed."""
        return self.last_review is None

    @property
    def success_rate(self) -> float:
        """Share of passing reviews (0.0 when never answered)."""
        total = self.correct_count + self.incorrect_count
        return self.correct_count / total if total > 0 else 0.0


@dataclass(frozen=True)
class DifficultyState:
    """
    Coarse difficulty level for one user in one activity.

    The consecutive counters exist only to decide level transitions.
    """

    user_id: str
    activity: ActivityKind
    level: DifficultyLevel = field(
        default_factory=lambda: DifficultyLevel(settings.DIFFICULTY_DEFAULT_LEVEL)
    )
    consecutive_successes: int = 0
    consecutive_failures: int = 0
    adaptive: bool = True  # Non-adaptive states ignore outcomes


@dataclass(frozen=True)
class SessionOutcome:
    """Raw performance of one finished session, as consumed by scoring."""

    correct: int
    incorrect: int
    elapsed_seconds: float
    streak: int
    activity: ActivityKind
    level: DifficultyLevel

    @property
    def total(self) -> int:
        return self.correct + self.incorrect


@dataclass(frozen=True)
class SessionParameters:
    """Session setup values derived from a difficulty level."""

    activity: ActivityKind
    level: DifficultyLevel
    time_limit_seconds: float
    option_count: int
    hint_detail: float


@dataclass(frozen=True)
class StreakState:
    """Daily practice streak."""

    current: int = 0
    longest: int = 0
    last_practice: Optional[date] = None


class SystemProgress(SummaryModel):
    """
    Study progress aggregated over one anatomical system.

    A structure counts as mastered once its interval reaches
    MASTERY_MIN_INTERVAL_DAYS.
    """

    system: AnatomicalSystem
    total_structures: int = 0
    studied_structures: int = 0
    mastered_structures: int = 0
    average_accuracy: float = Field(0.0, ge=0.0, le=1.0)
    last_studied: Optional[datetime] = None

    @property
    def progress_percentage(self) -> float:
        """Mastered structures as a percentage of the system's structures."""
        if self.total_structures == 0:
            return 0.0
        return self.mastered_structures / self.total_structures * 100.0
