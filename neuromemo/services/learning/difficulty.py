"""
Adaptive Difficulty

Tracks a coarse difficulty level per (user, activity) and moves it one step
at a time based on consecutive successes and failures. The level feeds
session setup (time limits, option counts, hint detail) and scoring; it is
independent of per-structure ease factors.

Transitions:
    success: successes += 1, failures = 0;
             successes >= increase_threshold and below max → level up, successes = 0
    failure: failures += 1, successes = 0;
             failures >= decrease_threshold and above min → level down, failures = 0

Usage:
    from neuromemo.services.learning.difficulty import DifficultyAdapter

    adapter = DifficultyAdapter()
    state = adapter.record_result("u1", ActivityKind.IDENTIFICATION, success=True)
    params = adapter.session_parameters(state)
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from neuromemo.config.settings import settings, yaml_config
from neuromemo.enums.learning import ActivityKind, DifficultyLevel
from neuromemo.models.learning import DifficultyState, SessionParameters

logger = logging.getLogger(__name__)


# Time available relative to the activity's base time limit
TIME_LIMIT_MULTIPLIERS: dict[DifficultyLevel, float] = {
    DifficultyLevel.BEGINNER: 2.0,
    DifficultyLevel.EASY: 1.5,
    DifficultyLevel.MEDIUM: 1.0,
    DifficultyLevel.HARD: 0.8,
    DifficultyLevel.EXPERT: 0.6,
}

# Options added to (or removed from) the activity's base option count
OPTION_COUNT_ADJUSTMENTS: dict[DifficultyLevel, int] = {
    DifficultyLevel.BEGINNER: -1,
    DifficultyLevel.EASY: 0,
    DifficultyLevel.MEDIUM: 1,
    DifficultyLevel.HARD: 2,
    DifficultyLevel.EXPERT: 3,
}

# Share of hint detail shown (1.0 = full hints)
HINT_DETAIL_LEVELS: dict[DifficultyLevel, float] = {
    DifficultyLevel.BEGINNER: 1.0,
    DifficultyLevel.EASY: 0.8,
    DifficultyLevel.MEDIUM: 0.6,
    DifficultyLevel.HARD: 0.3,
    DifficultyLevel.EXPERT: 0.1,
}

_EXPERIENCE_LEVELS: dict[str, DifficultyLevel] = {
    "none": DifficultyLevel.EASY,
    "beginner": DifficultyLevel.EASY,
    "intermediate": DifficultyLevel.MEDIUM,
    "advanced": DifficultyLevel.HARD,
    "expert": DifficultyLevel.HARD,
}


def get_time_limit_multiplier(level: DifficultyLevel) -> float:
    return TIME_LIMIT_MULTIPLIERS.get(level, 1.0)


def get_option_count_adjustment(level: DifficultyLevel) -> int:
    return OPTION_COUNT_ADJUSTMENTS.get(level, 0)


def get_hint_detail_level(level: DifficultyLevel) -> float:
    return HINT_DETAIL_LEVELS.get(level, 0.6)


def adjust_time_limit(base_seconds: float, level: DifficultyLevel) -> float:
    """Scale a base time limit for the given level."""
    return base_seconds * get_time_limit_multiplier(level)


def adjust_option_count(base_count: int, level: DifficultyLevel) -> int:
    """Adjust a base option count for the given level, never below the minimum."""
    return max(
        settings.DIFFICULTY_MIN_OPTION_COUNT,
        base_count + get_option_count_adjustment(level),
    )


def suggest_level_for_experience(experience: str) -> DifficultyLevel:
    """
    Suggest a starting level from a new user's self-reported experience.

    Unknown answers start at the default level.
    """
    return _EXPERIENCE_LEVELS.get(
        experience.strip().lower(),
        DifficultyLevel(settings.DIFFICULTY_DEFAULT_LEVEL),
    )


class DifficultyAdapter:
    """
    Per-user, per-activity difficulty state machine.

    `record_outcome` is the pure transition; `record_result` additionally
    stores the new state under its (user_id, activity) key. Callers must
    serialize concurrent updates to the same key.

    Attributes:
        increase_threshold: Consecutive successes needed to step up
        decrease_threshold: Consecutive failures needed to step down
    """

    def __init__(
        self,
        increase_threshold: Optional[int] = None,
        decrease_threshold: Optional[int] = None,
    ):
        """
        Initialize adapter.

        Args:
            increase_threshold: Default DIFFICULTY_INCREASE_THRESHOLD
            decrease_threshold: Default DIFFICULTY_DECREASE_THRESHOLD
        """
        self.increase_threshold = (
            increase_threshold
            if increase_threshold is not None
            else settings.DIFFICULTY_INCREASE_THRESHOLD
        )
        self.decrease_threshold = (
            decrease_threshold
            if decrease_threshold is not None
            else settings.DIFFICULTY_DECREASE_THRESHOLD
        )
        self._states: dict[tuple[str, ActivityKind], DifficultyState] = {}

    # =========================================================================
    # State transitions
    # =========================================================================

    def record_outcome(self, state: DifficultyState, success: bool) -> DifficultyState:
        """
        Apply one outcome to a difficulty state.

        Levels move exactly one step per threshold crossing and never skip.

        Args:
            state: Current state (not modified)
            success: Whether the interaction succeeded

        Returns:
            New state
        """
        if not state.adaptive:
            return state

        levels = list(DifficultyLevel)

        if success:
            successes = state.consecutive_successes + 1
            if successes >= self.increase_threshold and state.level != levels[-1]:
                new_level = state.level.step(+1)
                logger.debug(
                    f"Difficulty up {state.user_id}/{state.activity.value}: "
                    f"{state.level.value} -> {new_level.value}"
                )
                return replace(
                    state,
                    level=new_level,
                    consecutive_successes=0,
                    consecutive_failures=0,
                )
            return replace(state, consecutive_successes=successes, consecutive_failures=0)

        failures = state.consecutive_failures + 1
        if failures >= self.decrease_threshold and state.level != levels[0]:
            new_level = state.level.step(-1)
            logger.debug(
                f"Difficulty down {state.user_id}/{state.activity.value}: "
                f"{state.level.value} -> {new_level.value}"
            )
            return replace(
                state,
                level=new_level,
                consecutive_successes=0,
                consecutive_failures=0,
            )
        return replace(state, consecutive_successes=0, consecutive_failures=failures)

    def record_result(
        self,
        user_id: str,
        activity: ActivityKind,
        success: bool,
    ) -> DifficultyState:
        """Apply an outcome to the stored state for (user, activity) and store it."""
        state = self.record_outcome(self.state_for(user_id, activity), success)
        self._states[(user_id, activity)] = state
        return state

    # =========================================================================
    # State registry
    # =========================================================================

    def state_for(self, user_id: str, activity: ActivityKind) -> DifficultyState:
        """Return the stored state, or a fresh default-level state."""
        state = self._states.get((user_id, activity))
        if state is None:
            state = DifficultyState(user_id=user_id, activity=activity)
        return state

    def restore(self, state: DifficultyState) -> None:
        """Store a previously persisted state."""
        self._states[(state.user_id, state.activity)] = state

    def set_level(
        self,
        user_id: str,
        activity: ActivityKind,
        level: DifficultyLevel,
    ) -> DifficultyState:
        """Set a level explicitly, clearing the transition counters."""
        state = replace(
            self.state_for(user_id, activity),
            level=level,
            consecutive_successes=0,
            consecutive_failures=0,
        )
        self._states[(user_id, activity)] = state
        return state

    def set_adaptive(
        self,
        user_id: str,
        activity: ActivityKind,
        adaptive: bool,
    ) -> DifficultyState:
        """Enable or disable adaptation for (user, activity)."""
        state = replace(self.state_for(user_id, activity), adaptive=adaptive)
        self._states[(user_id, activity)] = state
        return state

    def reset(self, user_id: str, activity: Optional[ActivityKind] = None) -> None:
        """
        Forget stored difficulty for a user.

        Args:
            user_id: User to reset
            activity: Only this activity; all of the user's activities if None
        """
        keys = [
            key
            for key in self._states
            if key[0] == user_id and (activity is None or key[1] == activity)
        ]
        for key in keys:
            del self._states[key]
        logger.debug(f"Reset difficulty for {user_id}: {len(keys)} state(s)")

    # =========================================================================
    # Session setup
    # =========================================================================

    def session_parameters(
        self,
        state: DifficultyState,
        base_time_limit: Optional[float] = None,
        base_option_count: Optional[int] = None,
    ) -> SessionParameters:
        """
        Derive session setup values for a difficulty state.

        Base values come from the arguments, then from the `activities`
        section of config/default.yaml, then from settings.

        Args:
            state: Difficulty state of the session's (user, activity)
            base_time_limit: Base time limit in seconds at MEDIUM-equivalent scale
            base_option_count: Base number of answer options

        Returns:
            SessionParameters for the state's level
        """
        activity_config = yaml_config.get("activities", {}).get(state.activity.value, {})
        if base_time_limit is None:
            base_time_limit = activity_config.get(
                "base_time_limit_seconds", settings.SESSION_BASE_TIME_LIMIT_SECONDS
            )
        if base_option_count is None:
            base_option_count = activity_config.get(
                "base_option_count", settings.SESSION_BASE_OPTION_COUNT
            )

        return SessionParameters(
            activity=state.activity,
            level=state.level,
            time_limit_seconds=adjust_time_limit(base_time_limit, state.level),
            option_count=adjust_option_count(base_option_count, state.level),
            hint_detail=get_hint_detail_level(state.level),
        )
