"""
Centralized enum definitions for the engine.

All enums are organized by domain:
- anatomy.py: Anatomical systems, organizational levels, relationship kinds
- learning.py: Difficulty levels, activity kinds, forecast buckets, trends

Usage:
    from neuromemo.enums import AnatomicalSystem, DifficultyLevel

    # Or import from specific module
    from neuromemo.enums.anatomy import RelationshipKind
"""

from neuromemo.enums.anatomy import (
    AnatomicalSystem,
    AnatomicalLevel,
    RelationshipKind,
)
from neuromemo.enums.learning import (
    DifficultyLevel,
    ActivityKind,
    ForecastBucket,
    MasteryTrend,
)

__all__ = [
    # Anatomy enums
    "AnatomicalSystem",
    "AnatomicalLevel",
    "RelationshipKind",
    # Learning enums
    "DifficultyLevel",
    "ActivityKind",
    "ForecastBucket",
    "MasteryTrend",
]
