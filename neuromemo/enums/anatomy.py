"""
Anatomy Catalog Enums

Defines the closed vocabularies used by catalog content: anatomical systems,
organizational levels and the kinds of relationships between structures.
Values are validated when a catalog document is parsed, so a typo in the
source data fails at load time instead of silently creating a new category.
"""

from enum import Enum


class AnatomicalSystem(str, Enum):
    """
    Owning system of a structure.

    Used as the primary grouping for study sessions and for same-system
    distractor selection in multiple-choice games.
    """

    CENTRAL = "central"  # Central nervous system
    PERIPHERAL = "peripheral"  # Peripheral nervous system
    VASCULAR = "vascular"  # Cerebral vasculature
    VENTRICULAR = "ventricular"  # Ventricular system
    LIMBIC = "limbic"
    SENSORY = "sensory"
    MOTOR = "motor"
    AUTONOMIC = "autonomic"
    MENINGEAL = "meningeal"
    OTHER = "other"


class AnatomicalLevel(str, Enum):
    """
    Organizational level of a structure.

    Levels have a fixed ordinal order, from whole systems down to
    microscopic structures. Use `ordinal` to compare levels.
    """

    SYSTEM = "system"
    REGION = "region"
    CORTEX = "cortex"
    GYRUS = "gyrus"
    SULCUS = "sulcus"
    NUCLEUS = "nucleus"
    TRACT = "tract"
    NERVE = "nerve"
    VESSEL = "vessel"
    CELLULAR = "cellular"
    MICROSCOPIC = "microscopic"

    @property
    def ordinal(self) -> int:
        """Position of the level in the organizational hierarchy (0 = system)."""
        return list(AnatomicalLevel).index(self)


class RelationshipKind(str, Enum):
    """
    Kinds of edges between two structures.

    Values:
        PART_OF: Source is a part of target (hierarchy)
        CONNECTS: Fiber or pathway connection
        SUPPLIES: Vascular supply
        INNERVATES: Nerve innervation
        ADJACENT_TO: Spatial neighbour (symmetric)
    """

    PART_OF = "part_of"
    CONNECTS = "connects"
    SUPPLIES = "supplies"
    INNERVATES = "innervates"
    ADJACENT_TO = "adjacent_to"
