"""
Due Set Selection

Builds the pool of structures for a study session from the catalog and a
user's mastery records. Selection is fully deterministic: identical inputs
always produce the same ordered pool. Shuffling for presentation, if any,
happens after this call.

Ordering:
    never-reviewed structures first, then ascending next_review,
    ties broken by structure identifier

Fallback:
    when fewer than `minimum_pool_size` structures are due, the pool is topped
    up with not-yet-due structures that come due soonest.

Usage:
    from neuromemo.services.learning.due_selection import select_session

    pool = select_session(catalog, scheduler.records(), as_of=now)
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Mapping, Optional

from neuromemo.config.settings import settings
from neuromemo.models.catalog import Structure
from neuromemo.models.learning import MasteryRecord
from neuromemo.services.knowledge_graph.catalog import StructureCatalog
from neuromemo.services.learning.sm2 import is_due

logger = logging.getLogger(__name__)


def _due_order_key(
    structure: Structure,
    records: Mapping[str, MasteryRecord],
) -> tuple[bool, Optional[datetime], str]:
    """Sort key: absent next_review first, then soonest next_review, then id."""
    record = records.get(structure.id)
    next_review = record.next_review if record else None
    if next_review is None:
        return (False, None, structure.id)
    return (True, next_review, structure.id)


def select_session(
    catalog: StructureCatalog,
    records: Mapping[str, MasteryRecord],
    as_of: datetime,
    minimum_pool_size: Optional[int] = None,
) -> list[Structure]:
    """
    Select the structures for a study session.

    Args:
        catalog: Structure catalog to draw from
        records: The user's mastery records keyed by structure id (read only)
        as_of: Reference time for due checks
        minimum_pool_size: Smallest pool to return when the catalog allows it
            (default SESSION_MINIMUM_POOL_SIZE)

    Returns:
        All due structures if there are at least `minimum_pool_size` of them,
        otherwise the due structures followed by the soonest-due remaining
        ones, up to `minimum_pool_size`. Never contains duplicates and is
        empty only for an empty catalog.
    """
    if minimum_pool_size is None:
        minimum_pool_size = settings.SESSION_MINIMUM_POOL_SIZE
    # A pool is never empty while the catalog has structures
    minimum_pool_size = max(1, minimum_pool_size)

    due: list[Structure] = []
    not_due: list[Structure] = []
    for structure in catalog:
        if is_due(records.get(structure.id), as_of):
            due.append(structure)
        else:
            not_due.append(structure)

    due.sort(key=lambda s: _due_order_key(s, records))

    if len(due) >= minimum_pool_size:
        logger.debug(f"Session pool: {len(due)} due structures")
        return due

    not_due.sort(key=lambda s: _due_order_key(s, records))
    shortfall = max(0, minimum_pool_size - len(due))
    pool = due + not_due[:shortfall]

    logger.debug(
        f"Session pool: {len(due)} due + {len(pool) - len(due)} early "
        f"(minimum {minimum_pool_size}, catalog {len(catalog)})"
    )
    return pool


def select_options(
    catalog: StructureCatalog,
    target_id: str,
    option_count: int,
) -> list[Structure]:
    """
    Pick answer options for a multiple-choice question.

    The target comes first, followed by distractors from the same system,
    then from the rest of the catalog, each group ordered by identifier.

    Args:
        catalog: Structure catalog
        target_id: Identifier of the correct answer
        option_count: Total number of options wanted (target included)

    Returns:
        Up to `option_count` distinct structures; empty if the target is
        not in the catalog
    """
    target = catalog.get(target_id)
    if target is None or option_count <= 0:
        return []

    same_system = sorted(catalog.same_system(target_id), key=lambda s: s.id)
    same_ids = {s.id for s in same_system}
    others = sorted(
        (s for s in catalog if s.id != target_id and s.id not in same_ids),
        key=lambda s: s.id,
    )

    return ([target] + same_system + others)[:option_count]
