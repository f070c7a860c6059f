"""
Scoring and Experience

Pure functions turning raw session performance into scores and experience
points. Nothing here keeps state; the difficulty level at time of play is
passed in and used as a multiplier.

Formulas:
    session score = round(accuracy * SCORE_MAX_BASE
                          * difficulty_multiplier(level)
                          * time_multiplier)
    time_multiplier = 1 + min(0.5, 1 - elapsed/limit) * time_bonus_factor(level)
                      (only when elapsed < limit, else 1.0)
    xp for next level = round(XP_BASE * XP_GROWTH ** (level - 1))

Usage:
    from neuromemo.services.learning.scoring import session_score, xp_from_score

    score = session_score(8, 10, elapsed_seconds=40, time_limit_seconds=60,
                          level=DifficultyLevel.MEDIUM)
    xp = xp_from_score(score, ActivityKind.IDENTIFICATION)
"""

from neuromemo.config.settings import settings
from neuromemo.enums.learning import ActivityKind, DifficultyLevel
from neuromemo.models.learning import SessionOutcome
from neuromemo.services.learning.utils import round_half_up

DIFFICULTY_MULTIPLIERS: dict[DifficultyLevel, float] = {
    DifficultyLevel.BEGINNER: 0.8,
    DifficultyLevel.EASY: 1.0,
    DifficultyLevel.MEDIUM: 1.5,
    DifficultyLevel.HARD: 2.0,
    DifficultyLevel.EXPERT: 3.0,
}

TIME_BONUS_FACTORS: dict[DifficultyLevel, float] = {
    DifficultyLevel.BEGINNER: 0.5,
    DifficultyLevel.EASY: 0.8,
    DifficultyLevel.MEDIUM: 1.0,
    DifficultyLevel.HARD: 1.5,
    DifficultyLevel.EXPERT: 2.0,
}

# Score-to-XP conversion per activity; unlisted activities convert 1:1
XP_CONVERSION_FACTORS: dict[ActivityKind, float] = {
    ActivityKind.IDENTIFICATION: 0.5,
    ActivityKind.CONNECTIONS: 0.7,
    ActivityKind.QUIZ: 1.0,
    ActivityKind.SPATIAL_TEST: 1.2,
    ActivityKind.SPEED_CHALLENGE: 1.5,
}


def difficulty_multiplier(level: DifficultyLevel) -> float:
    return DIFFICULTY_MULTIPLIERS.get(level, 1.0)


def time_bonus_factor(level: DifficultyLevel) -> float:
    return TIME_BONUS_FACTORS.get(level, 1.0)


def conversion_factor(activity: ActivityKind) -> float:
    return XP_CONVERSION_FACTORS.get(activity, 1.0)


def accuracy(correct: int, total: int) -> float:
    """Share of correct answers; 0.0 for an empty session."""
    if total <= 0:
        return 0.0
    return max(0, correct) / total


def session_score(
    correct: int,
    total: int,
    elapsed_seconds: float,
    time_limit_seconds: float,
    level: DifficultyLevel,
) -> int:
    """
    Calculate the score of a timed session.

    Args:
        correct: Correct answers
        total: Questions asked (the true denominator)
        elapsed_seconds: Time used
        time_limit_seconds: Time allowed; non-positive limits give no bonus
        level: Difficulty level at time of play

    Returns:
        Rounded score; 0 when total is 0
    """
    if total <= 0:
        return 0

    base = accuracy(correct, total) * settings.SCORE_MAX_BASE

    time_multiplier = 1.0
    if time_limit_seconds > 0 and elapsed_seconds < time_limit_seconds:
        remaining_ratio = 1.0 - elapsed_seconds / time_limit_seconds
        time_multiplier = 1.0 + min(
            settings.SCORE_MAX_TIME_BONUS, remaining_ratio
        ) * time_bonus_factor(level)

    return round_half_up(base * difficulty_multiplier(level) * time_multiplier)


def score_session(outcome: SessionOutcome, time_limit_seconds: float) -> int:
    """Apply `session_score` to a finished session's outcome."""
    return session_score(
        outcome.correct,
        outcome.total,
        outcome.elapsed_seconds,
        time_limit_seconds,
        outcome.level,
    )


def connection_score(
    correct: int,
    total: int,
    wrong_attempts: int,
    level: DifficultyLevel,
) -> int:
    """
    Score a connections game.

    Each wrong attempt costs SCORE_CONNECTION_PENALTY_PER_ERROR of the base,
    capped at SCORE_CONNECTION_MAX_PENALTY.
    """
    if total <= 0:
        return 0

    base = accuracy(correct, total) * settings.SCORE_MAX_BASE
    penalty = min(
        settings.SCORE_CONNECTION_MAX_PENALTY,
        max(0, wrong_attempts) * settings.SCORE_CONNECTION_PENALTY_PER_ERROR,
    )
    return round_half_up(base * (1.0 - penalty) * difficulty_multiplier(level))


def review_answer_score(quality: int, item_difficulty: int, streak: int) -> int:
    """
    Score a single spaced-repetition answer.

    Harder items (authoring difficulty 1-5, 3 is neutral) and longer streaks
    score more. Passing answers never score below SCORE_MIN_CORRECT_ANSWER.
    """
    q = max(0, min(settings.SM2_MAX_QUALITY, quality))
    base = q / settings.SM2_MAX_QUALITY * settings.SCORE_MAX_BASE
    difficulty_modifier = max(1, min(5, item_difficulty)) / 3.0
    streak_bonus = min(1.0, max(0, streak) * settings.SCORE_STREAK_MULTIPLIER)

    score = round_half_up(base * difficulty_modifier * (1.0 + streak_bonus))
    if q >= settings.SM2_PASSING_QUALITY:
        return max(round_half_up(settings.SCORE_MIN_CORRECT_ANSWER), score)
    return score


def streak_bonus(streak_length: int) -> int:
    """
    Bonus for a run of consecutive correct answers.

    Tiers: 0 up to 1, 10 per answer for 2-3, 20 per answer for 4-7,
    30 per answer beyond.
    """
    if streak_length <= 1:
        return 0
    if streak_length <= 3:
        return 10 * streak_length
    if streak_length <= 7:
        return 20 * streak_length
    return 30 * streak_length


def leaderboard_score(game_score: int, accuracy_ratio: float, streak_days: int) -> int:
    """Combined ranking score: game score + accuracy percent + streak bonus."""
    return game_score + int(accuracy_ratio * 100) + streak_bonus(streak_days)


def xp_for_next_level(current_level: int) -> int:
    """XP needed to advance from `current_level` (levels start at 1)."""
    level = max(1, current_level)
    return round_half_up(settings.XP_BASE * settings.XP_GROWTH ** (level - 1))


def xp_from_score(score: float, activity: ActivityKind) -> int:
    """Convert a session score into experience points."""
    return round_half_up(score * conversion_factor(activity))


def level_for_xp(total_xp: int) -> int:
    """
    Level reached with `total_xp` accumulated experience.

    Walks the leveling curve from level 1, capped at XP_MAX_LEVEL.
    """
    level = 1
    remaining = total_xp
    while level < settings.XP_MAX_LEVEL:
        needed = xp_for_next_level(level)
        if remaining < needed:
            break
        remaining -= needed
        level += 1
    return level
