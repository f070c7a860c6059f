"""
Mastery Summary

Aggregates a user's mastery records over the catalog, per anatomical system.

Mastery Calculation:
- Studied: structure has been reviewed at least once
- Mastered: current interval >= MASTERY_MIN_INTERVAL_DAYS
- Average accuracy: mean success rate over studied structures

Usage:
    from neuromemo.services.learning.mastery import summarize_by_system

    progress = summarize_by_system(catalog, scheduler.records())
    for system, summary in progress.items():
        print(system.value, f"{summary.progress_percentage:.0f}%")
"""

import logging
from typing import Mapping

from neuromemo.config.settings import settings
from neuromemo.enums.anatomy import AnatomicalSystem
from neuromemo.enums.learning import MasteryTrend
from neuromemo.models.learning import MasteryRecord, SystemProgress
from neuromemo.services.knowledge_graph.catalog import StructureCatalog

logger = logging.getLogger(__name__)


def is_mastered(record: MasteryRecord) -> bool:
    """Check if a record's interval has reached the mastery threshold."""
    return record.interval >= settings.MASTERY_MIN_INTERVAL_DAYS


def summarize_by_system(
    catalog: StructureCatalog,
    records: Mapping[str, MasteryRecord],
) -> dict[AnatomicalSystem, SystemProgress]:
    """
    Summarize study progress per system.

    Records for structures missing from the catalog are ignored.

    Args:
        catalog: Structure catalog
        records: The user's mastery records keyed by structure id

    Returns:
        SystemProgress per system present in the catalog, in first-seen order
    """
    summaries: dict[AnatomicalSystem, SystemProgress] = {}
    accuracy_sums: dict[AnatomicalSystem, float] = {}

    for structure in catalog:
        summary = summaries.setdefault(
            structure.system, SystemProgress(system=structure.system)
        )
        summary.total_structures += 1

        record = records.get(structure.id)
        if record is None or record.is_new():
            continue

        summary.studied_structures += 1
        accuracy_sums[structure.system] = (
            accuracy_sums.get(structure.system, 0.0) + record.success_rate
        )
        if is_mastered(record):
            summary.mastered_structures += 1
        if summary.last_studied is None or record.last_review > summary.last_studied:
            summary.last_studied = record.last_review

    for system, summary in summaries.items():
        if summary.studied_structures:
            summary.average_accuracy = (
                accuracy_sums[system] / summary.studied_structures
            )

    logger.debug(f"Mastery summary over {len(summaries)} system(s)")
    return summaries


def overall_progress(summaries: Mapping[AnatomicalSystem, SystemProgress]) -> float:
    """Mastered share (0-1) of all studied structures across systems."""
    studied = sum(s.studied_structures for s in summaries.values())
    if studied == 0:
        return 0.0
    return sum(s.mastered_structures for s in summaries.values()) / studied


def calculate_trend(current_score: float, previous_score: float) -> MasteryTrend:
    """
    Calculate mastery trend based on score delta.

    Args:
        current_score: Current mastery score (0-1).
        previous_score: Previous mastery score (0-1).

    Returns:
        IMPROVING if delta > threshold, DECLINING if < -threshold, else STABLE.
    """
    delta = current_score - previous_score
    threshold = settings.MASTERY_TREND_THRESHOLD

    if delta > threshold:
        return MasteryTrend.IMPROVING
    elif delta < -threshold:
        return MasteryTrend.DECLINING
    return MasteryTrend.STABLE
