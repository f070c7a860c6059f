"""
Catalog Content Models (Pydantic)

Schemas for the anatomical content the catalog is built from:
- Structure: a learnable anatomical item
- Relationship: an edge between two structures
- CatalogDocument: the JSON-shaped document both are usually parsed from

ARCHITECTURE NOTE:
    These models hold authoring content only. Study progress (ease,
    intervals, answer counts) lives in MasteryRecord, joined to a structure
    by identifier, so reference data is never mutated by a review.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from neuromemo.enums.anatomy import AnatomicalLevel, AnatomicalSystem, RelationshipKind
from neuromemo.models.base import ContentModel


class Structure(ContentModel):
    """
    A learnable anatomical structure.

    The intrinsic `difficulty` rating (1-5) is assigned at authoring time
    and is independent from the learner's ease factor.
    """

    id: str = Field(..., min_length=1, description="Stable identifier")
    name: str = Field(..., min_length=1, description="Display name")
    system: AnatomicalSystem
    category: str = Field("", description="Free-form grouping within a system")
    level: AnatomicalLevel
    latin_name: Optional[str] = None
    synonyms: tuple[str, ...] = Field(default_factory=tuple)
    tags: tuple[str, ...] = Field(default_factory=tuple)
    difficulty: int = Field(3, ge=1, le=5, description="Authoring difficulty 1-5")

    # Descriptive content
    description: str = ""
    functional_roles: tuple[str, ...] = Field(default_factory=tuple)
    clinical_relevance: str = ""
    exam_frequency: float = Field(0.0, ge=0.0, le=1.0)
    image_references: tuple[str, ...] = Field(default_factory=tuple)

    @property
    def search_terms(self) -> tuple[str, ...]:
        """Terms matched by catalog search: name, latin name, then synonyms."""
        terms = [self.name]
        if self.latin_name:
            terms.append(self.latin_name)
        terms.extend(self.synonyms)
        return tuple(terms)


class Relationship(ContentModel):
    """
    Edge between two structures.

    `symmetric` records whether the relationship reads the same in both
    directions (e.g. adjacency). Catalog traversal always follows edges in
    both directions regardless.
    """

    source_id: str = Field(..., min_length=1)
    target_id: str = Field(..., min_length=1)
    kind: RelationshipKind
    description: str = ""
    symmetric: bool = False

    def other_end(self, structure_id: str) -> Optional[str]:
        """Return the opposite endpoint, or None if `structure_id` is not an endpoint."""
        if structure_id == self.source_id:
            return self.target_id
        if structure_id == self.target_id:
            return self.source_id
        return None


class CatalogDocument(ContentModel):
    """
    Raw catalog document.

    Typically sourced from JSON:
        {"structures": [...], "relationships": [...]}
    """

    structures: list[Structure] = Field(default_factory=list)
    relationships: list[Relationship] = Field(default_factory=list)
