"""
Daily Streak Tracking

Tracks consecutive days of practice.

Responsibilities:
- Advance or restart the current streak when the learner practices
- Keep the longest streak ever reached
- Report the next streak milestone

The current date is always passed in; nothing here reads the clock.

Usage:
    from neuromemo.services.learning.streak_tracking import update_daily_streak

    streak = update_daily_streak(streak, today=date(2024, 3, 2))
"""

from dataclasses import replace
from datetime import date, timedelta
from typing import Optional

from neuromemo.config.settings import settings
from neuromemo.models.learning import StreakState


def update_daily_streak(streak: StreakState, today: date) -> StreakState:
    """
    Record practice on `today`.

    - First practice ever, or a gap of more than one day: streak restarts at 1
    - Practice on the day after the last one: streak grows by 1
    - Further practice on the same day: unchanged

    Args:
        streak: Current streak state (not modified)
        today: Date of the practice

    Returns:
        Updated streak state
    """
    last = streak.last_practice

    if last is not None and today <= last:
        return streak

    if last is not None and today == last + timedelta(days=1):
        current = streak.current + 1
    else:
        current = 1

    return replace(
        streak,
        current=current,
        longest=max(streak.longest, current),
        last_practice=today,
    )


def is_streak_active(streak: StreakState, today: date) -> bool:
    """
    Check whether the streak is still alive.

    A streak stays valid if the learner practiced today or yesterday.
    """
    if streak.last_practice is None:
        return False
    return today - streak.last_practice <= timedelta(days=1)


def next_milestone(current_streak: int) -> Optional[int]:
    """Smallest configured milestone above the current streak, or None."""
    return next((m for m in settings.STREAK_MILESTONES if m > current_streak), None)


def milestones_reached(longest_streak: int) -> list[int]:
    """Configured milestones already reached by the longest streak."""
    return [m for m in settings.STREAK_MILESTONES if longest_streak >= m]
