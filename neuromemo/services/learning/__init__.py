"""
Learning System Services

Services for SM-2 review scheduling, session selection, adaptive difficulty
and scoring.

Modules:
- sm2: SM-2 update rule and per-user ReviewScheduler
- due_selection: Deterministic session pool and answer option selection
- difficulty: Per-activity adaptive difficulty levels
- scoring: Session scores, streak bonuses and experience points
- mastery: Per-system mastery summaries
- streak_tracking: Daily practice streaks

Usage:
    from neuromemo.services.learning import (
        ReviewScheduler,
        DifficultyAdapter,
        select_session,
        session_score,
    )
"""

from neuromemo.services.learning.sm2 import (
    ReviewScheduler,
    apply_review,
    get_review_forecast,
    is_due,
    quality_from_answer,
)
from neuromemo.services.learning.due_selection import select_options, select_session
from neuromemo.services.learning.difficulty import DifficultyAdapter
from neuromemo.services.learning.scoring import (
    session_score,
    score_session,
    streak_bonus,
    xp_for_next_level,
    xp_from_score,
)
from neuromemo.services.learning.mastery import summarize_by_system
from neuromemo.services.learning.streak_tracking import update_daily_streak

__all__ = [
    # SM-2
    "ReviewScheduler",
    "apply_review",
    "get_review_forecast",
    "is_due",
    "quality_from_answer",
    # Selection
    "select_session",
    "select_options",
    # Difficulty
    "DifficultyAdapter",
    # Scoring
    "session_score",
    "score_session",
    "streak_bonus",
    "xp_for_next_level",
    "xp_from_score",
    # Progress
    "summarize_by_system",
    "update_daily_streak",
]
