"""
Data models.

- catalog.py: Pydantic content models (Structure, Relationship, CatalogDocument)
- learning.py: Learning state (MasteryRecord, DifficultyState, SessionOutcome, ...)
"""

from neuromemo.models.base import ContentModel, SummaryModel
from neuromemo.models.catalog import CatalogDocument, Relationship, Structure
from neuromemo.models.learning import (
    DifficultyState,
    MasteryRecord,
    SessionOutcome,
    SessionParameters,
    StreakState,
    SystemProgress,
)

__all__ = [
    "ContentModel",
    "SummaryModel",
    "CatalogDocument",
    "Relationship",
    "Structure",
    "DifficultyState",
    "MasteryRecord",
    "SessionOutcome",
    "SessionParameters",
    "StreakState",
    "SystemProgress",
]
