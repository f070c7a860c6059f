"""
Unit tests for the adaptive difficulty adapter.

Tests level transitions, the state registry and session parameter lookups.
"""

from dataclasses import FrozenInstanceError
from unittest.mock import patch

import pytest

from neuromemo.enums.learning import ActivityKind, DifficultyLevel
from neuromemo.models.learning import DifficultyState
from neuromemo.services.learning.difficulty import (
    DifficultyAdapter,
    adjust_option_count,
    adjust_time_limit,
    get_hint_detail_level,
    get_option_count_adjustment,
    get_time_limit_multiplier,
    suggest_level_for_experience,
)


@pytest.fixture
def adapter():
    """Create an adapter with the default thresholds (3 up, 2 down)."""
    return DifficultyAdapter(increase_threshold=3, decrease_threshold=2)


def _state(level=DifficultyLevel.MEDIUM, **kwargs):
    return DifficultyState(
        user_id="user-1",
        activity=ActivityKind.IDENTIFICATION,
        level=level,
        **kwargs,
    )


class TestRecordOutcome:
    """Tests for the pure state transition."""

    def test_three_successes_step_up(self, adapter):
        """Test medium + three successes → hard with counters reset."""
        state = _state()
        for _ in range(3):
            state = adapter.record_outcome(state, True)

        assert state.level == DifficultyLevel.HARD
        assert state.consecutive_successes == 0
        assert state.consecutive_failures == 0

    def test_two_successes_do_not_step(self, adapter):
        """Test that the threshold must be reached."""
        state = adapter.record_outcome(adapter.record_outcome(_state(), True), True)

        assert state.level == DifficultyLevel.MEDIUM
        assert state.consecutive_successes == 2

    def test_two_failures_step_down(self, adapter):
        """Test medium + two failures → easy."""
        state = adapter.record_outcome(adapter.record_outcome(_state(), False), False)

        assert state.level == DifficultyLevel.EASY
        assert state.consecutive_failures == 0

    def test_failure_resets_success_run(self, adapter):
        """Test that a failure breaks a run of successes."""
        state = _state()
        for success in [True, True, False, True, True]:
            state = adapter.record_outcome(state, success)

        assert state.level == DifficultyLevel.MEDIUM
        assert state.consecutive_successes == 2
        assert state.consecutive_failures == 0

    def test_never_skips_levels(self, adapter):
        """Test that long success runs climb one level per threshold."""
        state = _state(level=DifficultyLevel.BEGINNER)
        levels = []
        for _ in range(9):
            state = adapter.record_outcome(state, True)
            levels.append(state.level)

        assert levels[2] == DifficultyLevel.EASY
        assert levels[5] == DifficultyLevel.MEDIUM
        assert levels[8] == DifficultyLevel.HARD

    def test_saturates_at_expert(self, adapter):
        """Test that the maximum level is never exceeded."""
        state = _state(level=DifficultyLevel.EXPERT)
        for _ in range(10):
            state = adapter.record_outcome(state, True)

        assert state.level == DifficultyLevel.EXPERT

    def test_saturates_at_beginner(self, adapter):
        """Test that the minimum level is never undercut."""
        state = _state(level=DifficultyLevel.BEGINNER)
        for _ in range(10):
            state = adapter.record_outcome(state, False)

        assert state.level == DifficultyLevel.BEGINNER

    def test_non_adaptive_state_ignores_outcomes(self, adapter):
        """Test that adaptation can be switched off."""
        state = _state(adaptive=False)
        for _ in range(5):
            state = adapter.record_outcome(state, True)

        assert state.level == DifficultyLevel.MEDIUM
        assert state.consecutive_successes == 0

    def test_input_state_not_mutated(self, adapter):
        """Test that record_outcome returns a new state."""
        state = _state()

        adapter.record_outcome(state, True)

        assert state.consecutive_successes == 0


class TestAdapterRegistry:
    """Tests for per (user, activity) state storage."""

    def test_default_state(self, adapter):
        """Test that unknown keys start at the default level."""
        state = adapter.state_for("user-1", ActivityKind.QUIZ)

        assert state.level == DifficultyLevel.MEDIUM

    def test_activities_are_independent(self, adapter):
        """Test that activities do not share state."""
        for _ in range(3):
            adapter.record_result("user-1", ActivityKind.QUIZ, True)

        assert adapter.state_for("user-1", ActivityKind.QUIZ).level == DifficultyLevel.HARD
        assert (
            adapter.state_for("user-1", ActivityKind.CONNECTIONS).level
            == DifficultyLevel.MEDIUM
        )

    def test_stored_state_cannot_be_modified(self, adapter):
        """Test that states handed out by the adapter are immutable."""
        adapter.set_level("user-1", ActivityKind.QUIZ, DifficultyLevel.HARD)

        with pytest.raises(FrozenInstanceError):
            adapter.state_for("user-1", ActivityKind.QUIZ).level = DifficultyLevel.EXPERT

        assert adapter.state_for("user-1", ActivityKind.QUIZ).level == DifficultyLevel.HARD

    def test_set_level(self, adapter):
        """Test explicit level selection."""
        state = adapter.set_level("user-1", ActivityKind.QUIZ, DifficultyLevel.EXPERT)

        assert adapter.state_for("user-1", ActivityKind.QUIZ) == state
        assert state.level == DifficultyLevel.EXPERT

    def test_set_adaptive(self, adapter):
        """Test disabling adaptation through the registry."""
        adapter.set_adaptive("user-1", ActivityKind.QUIZ, False)
        for _ in range(3):
            adapter.record_result("user-1", ActivityKind.QUIZ, True)

        assert adapter.state_for("user-1", ActivityKind.QUIZ).level == DifficultyLevel.MEDIUM

    def test_reset_single_activity(self, adapter):
        """Test resetting one activity keeps the others."""
        adapter.set_level("user-1", ActivityKind.QUIZ, DifficultyLevel.HARD)
        adapter.set_level("user-1", ActivityKind.CONNECTIONS, DifficultyLevel.HARD)

        adapter.reset("user-1", ActivityKind.QUIZ)

        assert adapter.state_for("user-1", ActivityKind.QUIZ).level == DifficultyLevel.MEDIUM
        assert (
            adapter.state_for("user-1", ActivityKind.CONNECTIONS).level
            == DifficultyLevel.HARD
        )

    def test_reset_all_activities_for_user(self, adapter):
        """Test resetting a user leaves other users alone."""
        adapter.set_level("user-1", ActivityKind.QUIZ, DifficultyLevel.HARD)
        adapter.set_level("user-2", ActivityKind.QUIZ, DifficultyLevel.HARD)

        adapter.reset("user-1")

        assert adapter.state_for("user-1", ActivityKind.QUIZ).level == DifficultyLevel.MEDIUM
        assert adapter.state_for("user-2", ActivityKind.QUIZ).level == DifficultyLevel.HARD

    def test_restore(self, adapter):
        """Test resuming from a persisted state."""
        adapter.restore(_state(level=DifficultyLevel.EASY, consecutive_successes=2))

        state = adapter.record_result("user-1", ActivityKind.IDENTIFICATION, True)

        assert state.level == DifficultyLevel.MEDIUM

    @patch("neuromemo.services.learning.difficulty.settings")
    def test_thresholds_default_from_settings(self, mock_settings):
        """Test that thresholds come from settings when not given."""
        mock_settings.DIFFICULTY_INCREASE_THRESHOLD = 5
        mock_settings.DIFFICULTY_DECREASE_THRESHOLD = 4

        adapter = DifficultyAdapter()

        assert adapter.increase_threshold == 5
        assert adapter.decrease_threshold == 4


class TestLookupTables:
    """Tests for level → session parameter lookups."""

    def test_time_limit_multiplier_decreases_with_level(self):
        """Test that harder levels allow less time."""
        multipliers = [get_time_limit_multiplier(level) for level in DifficultyLevel]

        assert multipliers == sorted(multipliers, reverse=True)
        assert get_time_limit_multiplier(DifficultyLevel.MEDIUM) == 1.0

    def test_option_adjustment_increases_with_level(self):
        """Test that harder levels show more options."""
        adjustments = [get_option_count_adjustment(level) for level in DifficultyLevel]

        assert adjustments == [-1, 0, 1, 2, 3]

    def test_adjust_time_limit(self):
        """Test scaling a base time limit."""
        assert adjust_time_limit(60, DifficultyLevel.BEGINNER) == 120
        assert adjust_time_limit(60, DifficultyLevel.EXPERT) == pytest.approx(36)

    def test_adjust_option_count_has_floor(self):
        """Test that there are never fewer than two options."""
        assert adjust_option_count(2, DifficultyLevel.BEGINNER) == 2
        assert adjust_option_count(4, DifficultyLevel.HARD) == 6

    def test_hint_detail(self):
        """Test hint detail shrinks with level."""
        assert get_hint_detail_level(DifficultyLevel.BEGINNER) == 1.0
        assert get_hint_detail_level(DifficultyLevel.EXPERT) == pytest.approx(0.1)

    def test_session_parameters_with_explicit_bases(self, adapter):
        """Test deriving session setup from a state."""
        params = adapter.session_parameters(
            _state(level=DifficultyLevel.HARD),
            base_time_limit=100,
            base_option_count=4,
        )

        assert params.level == DifficultyLevel.HARD
        assert params.time_limit_seconds == pytest.approx(80)
        assert params.option_count == 6
        assert params.hint_detail == pytest.approx(0.3)

    @patch("neuromemo.services.learning.difficulty.yaml_config", {})
    @patch("neuromemo.services.learning.difficulty.settings")
    def test_session_parameters_fall_back_to_settings(self, mock_settings, adapter):
        """Test that base values come from settings without YAML config."""
        mock_settings.SESSION_BASE_TIME_LIMIT_SECONDS = 50.0
        mock_settings.SESSION_BASE_OPTION_COUNT = 3
        mock_settings.DIFFICULTY_MIN_OPTION_COUNT = 2

        params = adapter.session_parameters(_state())

        assert params.time_limit_seconds == pytest.approx(50.0)
        assert params.option_count == 4

    @patch(
        "neuromemo.services.learning.difficulty.yaml_config",
        {"activities": {"identification": {"base_time_limit_seconds": 30}}},
    )
    def test_session_parameters_from_yaml(self, adapter):
        """Test that per-activity YAML bases are used."""
        params = adapter.session_parameters(_state(level=DifficultyLevel.EASY))

        assert params.time_limit_seconds == pytest.approx(45)


class TestSuggestLevel:
    """Tests for new-user level suggestions."""

    @pytest.mark.parametrize(
        "experience,expected",
        [
            ("none", DifficultyLevel.EASY),
            ("Beginner", DifficultyLevel.EASY),
            ("intermediate", DifficultyLevel.MEDIUM),
            (" advanced ", DifficultyLevel.HARD),
            ("expert", DifficultyLevel.HARD),
            ("unknown", DifficultyLevel.MEDIUM),
        ],
    )
    def test_suggestions(self, experience, expected):
        assert suggest_level_for_experience(experience) == expected
