"""
SM-2 Review Scheduler

Implements the SuperMemo-2 update rule used to schedule structure reviews.

Key Concepts:
- Ease factor (EF): Multiplier controlling how fast intervals grow (floor 1.3)
- Interval: Days until the next review
- Quality of recall (q): 0-5 self-assessed answer quality, 3+ is a pass

Update rule (every review):
    EF' = max(1.3, EF + (0.1 - (5 - q) * (0.08 + (5 - q) * 0.02)))
    q < 3            → interval = 1
    first pass       → interval = 1
    second pass      → interval = 6
    later passes     → interval = round(interval * EF')
    next_review      = now + interval days

The ease factor moves on every review, failures included; only the interval
is reset by a failure.

Usage:
    from neuromemo.services.learning.sm2 import ReviewScheduler

    scheduler = ReviewScheduler(user_id="u1")

    # Review a structure
    record = scheduler.record_review("hippocampus", quality=4, now=now)

    # Check whether it is due
    scheduler.is_due(record, as_of=now)
"""

import logging
from dataclasses import replace
from datetime import datetime, timedelta
from typing import Iterable, Optional

from neuromemo.config.settings import settings
from neuromemo.enums.learning import ForecastBucket
from neuromemo.models.learning import MasteryRecord
from neuromemo.services.learning.utils import round_half_up

logger = logging.getLogger(__name__)


def clamp_quality(quality: int) -> int:
    """Clamp a recall quality into [0, SM2_MAX_QUALITY]."""
    return max(0, min(settings.SM2_MAX_QUALITY, int(quality)))


def calculate_ease(
    ease_factor: float,
    quality: int,
    min_ease: Optional[float] = None,
) -> float:
    """
    Apply the SM-2 ease update and clamp to the floor.

    Args:
        ease_factor: Current ease factor
        quality: Recall quality, already clamped to 0-5
        min_ease: Ease floor (default SM2_MIN_EASE)

    Returns:
        New ease factor, never below the floor
    """
    if min_ease is None:
        min_ease = settings.SM2_MIN_EASE
    miss = settings.SM2_MAX_QUALITY - quality
    candidate = ease_factor + (0.1 - miss * (0.08 + miss * 0.02))
    return max(min_ease, candidate)


def calculate_interval(
    record: MasteryRecord,
    quality: int,
    new_ease: float,
    first_interval_days: Optional[int] = None,
    second_interval_days: Optional[int] = None,
) -> int:
    """
    Calculate the next interval in days.

    Args:
        record: Record state before the review
        quality: Recall quality, already clamped to 0-5
        new_ease: Ease factor after this review's update
        first_interval_days: Default SM2_FIRST_INTERVAL_DAYS
        second_interval_days: Default SM2_SECOND_INTERVAL_DAYS

    Returns:
        Interval in days (always >= 1)
    """
    if first_interval_days is None:
        first_interval_days = settings.SM2_FIRST_INTERVAL_DAYS
    if second_interval_days is None:
        second_interval_days = settings.SM2_SECOND_INTERVAL_DAYS

    if quality < settings.SM2_PASSING_QUALITY:
        return first_interval_days
    if record.review_count == 0:
        return first_interval_days
    if record.review_count == 1:
        return second_interval_days
    return max(1, round_half_up(record.interval * new_ease))


def apply_review(
    record: MasteryRecord,
    quality: int,
    now: datetime,
    min_ease: Optional[float] = None,
    first_interval_days: Optional[int] = None,
    second_interval_days: Optional[int] = None,
) -> MasteryRecord:
    """
    Pure SM-2 state transition.

    Out-of-range qualities are clamped, never rejected. Constants not given
    explicitly come from settings.

    Args:
        record: Current record (not modified)
        quality: Recall quality, nominally 0-5
        now: Review timestamp
        min_ease: Ease floor
        first_interval_days: Interval after a first pass or any failure
        second_interval_days: Interval after the second pass

    Returns:
        New record with updated ease, interval, counters and dates
    """
    q = clamp_quality(quality)
    ease = calculate_ease(record.ease_factor, q, min_ease)
    interval = calculate_interval(
        record, q, ease, first_interval_days, second_interval_days
    )
    passed = q >= settings.SM2_PASSING_QUALITY

    return replace(
        record,
        ease_factor=ease,
        interval=interval,
        review_count=record.review_count + 1,
        last_review=now,
        next_review=now + timedelta(days=interval),
        correct_count=record.correct_count + (1 if passed else 0),
        incorrect_count=record.incorrect_count + (0 if passed else 1),
    )


def is_due(record: Optional[MasteryRecord], as_of: datetime) -> bool:
    """
    Check whether a record is due for review.

    A missing record or one without next_review has never been studied and
    is always due.
    """
    if record is None or record.next_review is None:
        return True
    return record.next_review <= as_of


def quality_from_answer(correct: bool, hesitated: bool = False) -> int:
    """
    Map a game answer to a recall quality.

    Args:
        correct: Whether the learner answered correctly
        hesitated: Whether the answer was slow or needed a hint

    Returns:
        5 for a clean correct answer, 4 if hesitant, 1 for a wrong answer
    """
    if not correct:
        return 1
    return 4 if hesitated else settings.SM2_MAX_QUALITY


class ReviewScheduler:
    """
    Owner of one user's mastery records.

    Records are created lazily on first review and never deleted; `reset`
    returns a record to its initial state instead. Callers must serialize
    concurrent reviews of the same structure.

    Attributes:
        user_id: User the records belong to
        min_ease: Ease floor
        first_interval_days: Interval after a first pass or any failure
        second_interval_days: Interval after the second pass
    """

    def __init__(
        self,
        user_id: str,
        records: Optional[Iterable[MasteryRecord]] = None,
        min_ease: Optional[float] = None,
        first_interval_days: Optional[int] = None,
        second_interval_days: Optional[int] = None,
    ):
        """
        Initialize scheduler.

        Args:
            user_id: User the records belong to
            records: Previously persisted records to resume from; records
                of other users are skipped
            min_ease: Default SM2_MIN_EASE
            first_interval_days: Default SM2_FIRST_INTERVAL_DAYS
            second_interval_days: Default SM2_SECOND_INTERVAL_DAYS
        """
        self.user_id = user_id
        self.min_ease = min_ease if min_ease is not None else settings.SM2_MIN_EASE
        self.first_interval_days = (
            first_interval_days
            if first_interval_days is not None
            else settings.SM2_FIRST_INTERVAL_DAYS
        )
        self.second_interval_days = (
            second_interval_days
            if second_interval_days is not None
            else settings.SM2_SECOND_INTERVAL_DAYS
        )
        self._records: dict[str, MasteryRecord] = {}
        for record in records or ():
            if record.user_id != user_id:
                logger.warning(
                    f"Skipping mastery record {record.user_id}/{record.structure_id}: "
                    f"scheduler belongs to {user_id}"
                )
                continue
            self._records[record.structure_id] = record

    def get_record(self, structure_id: str) -> Optional[MasteryRecord]:
        """Return the record for a structure, or None if never reviewed."""
        return self._records.get(structure_id)

    def records(self) -> dict[str, MasteryRecord]:
        """Snapshot of all records keyed by structure id."""
        return dict(self._records)

    def record_review(
        self,
        structure_id: str,
        quality: int,
        now: datetime,
    ) -> MasteryRecord:
        """
        Process a review and store the updated record.

        Args:
            structure_id: Reviewed structure
            quality: Recall quality, clamped to 0-5
            now: Review timestamp

        Returns:
            Updated record
        """
        record = self._records.get(structure_id)
        if record is None:
            record = MasteryRecord(user_id=self.user_id, structure_id=structure_id)

        updated = apply_review(
            record,
            quality,
            now,
            min_ease=self.min_ease,
            first_interval_days=self.first_interval_days,
            second_interval_days=self.second_interval_days,
        )
        self._records[structure_id] = updated

        logger.debug(
            f"Review {self.user_id}/{structure_id}: q={clamp_quality(quality)} "
            f"ease {record.ease_factor:.2f}->{updated.ease_factor:.2f} "
            f"interval {record.interval}->{updated.interval}d"
        )
        return updated

    def reset(self, structure_id: str) -> MasteryRecord:
        """
        Reset a structure's record to its initial state.

        Returns:
            The fresh record (stored; never reviewed, so always due)
        """
        record = MasteryRecord(user_id=self.user_id, structure_id=structure_id)
        self._records[structure_id] = record
        logger.debug(f"Reset mastery record {self.user_id}/{structure_id}")
        return record

    @staticmethod
    def is_due(record: Optional[MasteryRecord], as_of: datetime) -> bool:
        return is_due(record, as_of)


def get_review_forecast(
    records: Iterable[MasteryRecord],
    as_of: datetime,
) -> dict[ForecastBucket, int]:
    """
    Get forecast of upcoming reviews.

    Args:
        records: Mastery records
        as_of: Reference time

    Returns:
        Counts per bucket: new, overdue, today, tomorrow, this_week, later
    """
    today_start = as_of.replace(hour=0, minute=0, second=0, microsecond=0)
    tomorrow_start = today_start + timedelta(days=1)
    week_end = today_start + timedelta(days=7)

    forecast = {bucket: 0 for bucket in ForecastBucket}

    for record in records:
        due = record.next_review
        if due is None:
            forecast[ForecastBucket.NEW] += 1
        elif due < today_start:
            forecast[ForecastBucket.OVERDUE] += 1
        elif due < tomorrow_start:
            forecast[ForecastBucket.TODAY] += 1
        elif due < tomorrow_start + timedelta(days=1):
            forecast[ForecastBucket.TOMORROW] += 1
        elif due < week_end:
            forecast[ForecastBucket.THIS_WEEK] += 1
        else:
            forecast[ForecastBucket.LATER] += 1

    return forecast
