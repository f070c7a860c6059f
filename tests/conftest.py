"""
Shared Test Fixtures and Configuration

This module provides pytest fixtures used across unit tests: a small
neuroanatomy catalog, its raw document form and fixed timestamps.
"""

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Add the project root to the path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from neuromemo.enums.anatomy import (  # noqa: E402
    AnatomicalLevel,
    AnatomicalSystem,
    RelationshipKind,
)
from neuromemo.models.catalog import Relationship, Structure  # noqa: E402
from neuromemo.services.knowledge_graph.catalog import StructureCatalog  # noqa: E402


# ============================================================================
# Time
# ============================================================================


@pytest.fixture
def now() -> datetime:
    """Fixed reference time (timezone-aware UTC)."""
    return datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc)


# ============================================================================
# Catalog Data
# ============================================================================


@pytest.fixture
def sample_structures() -> list[Structure]:
    """Six structures across three systems, in authoring order."""
    return [
        Structure(
            id="hippocampus",
            name="Hipocampo",
            latin_name="Hippocampus",
            synonyms=("Cornu Ammonis",),
            system=AnatomicalSystem.LIMBIC,
            category="temporal",
            level=AnatomicalLevel.REGION,
            difficulty=3,
        ),
        Structure(
            id="amygdala",
            name="Amígdala",
            latin_name="Corpus amygdaloideum",
            system=AnatomicalSystem.LIMBIC,
            category="temporal",
            level=AnatomicalLevel.NUCLEUS,
            difficulty=3,
        ),
        Structure(
            id="fornix",
            name="Fórnix",
            system=AnatomicalSystem.LIMBIC,
            category="commissural",
            level=AnatomicalLevel.TRACT,
            difficulty=4,
        ),
        Structure(
            id="caudate",
            name="Núcleo caudado",
            latin_name="Nucleus caudatus",
            system=AnatomicalSystem.MOTOR,
            category="basal_ganglia",
            level=AnatomicalLevel.NUCLEUS,
            difficulty=2,
        ),
        Structure(
            id="putamen",
            name="Putamen",
            system=AnatomicalSystem.MOTOR,
            category="basal_ganglia",
            level=AnatomicalLevel.NUCLEUS,
            difficulty=2,
        ),
        Structure(
            id="pca",
            name="Arteria cerebral posterior",
            latin_name="Arteria cerebri posterior",
            synonyms=("PCA",),
            system=AnatomicalSystem.VASCULAR,
            category="arteries",
            level=AnatomicalLevel.VESSEL,
            difficulty=5,
        ),
    ]


@pytest.fixture
def sample_relationships() -> list[Relationship]:
    """Relationships between the sample structures."""
    return [
        Relationship(
            source_id="fornix",
            target_id="hippocampus",
            kind=RelationshipKind.CONNECTS,
            description="Main efferent tract of the hippocampus",
        ),
        Relationship(
            source_id="amygdala",
            target_id="hippocampus",
            kind=RelationshipKind.ADJACENT_TO,
            symmetric=True,
        ),
        Relationship(
            source_id="pca",
            target_id="hippocampus",
            kind=RelationshipKind.SUPPLIES,
        ),
        Relationship(
            source_id="caudate",
            target_id="putamen",
            kind=RelationshipKind.CONNECTS,
        ),
    ]


@pytest.fixture
def catalog(sample_structures, sample_relationships) -> StructureCatalog:
    """Loaded catalog built from the sample data."""
    return StructureCatalog.load(sample_structures, sample_relationships)


@pytest.fixture
def sample_document() -> dict:
    """JSON-shaped catalog document."""
    return {
        "structures": [
            {
                "id": "thalamus",
                "name": "Tálamo",
                "latin_name": "Thalamus",
                "system": "central",
                "category": "diencephalon",
                "level": "nucleus",
                "difficulty": 3,
                "tags": ["diencephalon"],
            },
            {
                "id": "internal_capsule",
                "name": "Cápsula interna",
                "system": "motor",
                "level": "tract",
                "difficulty": 4,
            },
        ],
        "relationships": [
            {
                "source_id": "internal_capsule",
                "target_id": "thalamus",
                "kind": "adjacent_to",
                "symmetric": True,
            }
        ],
    }
