"""
Structure Catalog

Immutable, queryable in-memory index over anatomical structures and the
relationships between them.

Construction validates referential integrity once; afterwards every query is
a read of prebuilt indexes, so a catalog can be shared between threads
without locking.

Indexes built at load time (single pass, O(n)):
- by identifier (primary)
- by system and by category
- by organizational level
- adjacency list of relationships, both directions
- folded search terms (case- and diacritic-insensitive)

Usage:
    from neuromemo.services.knowledge_graph.catalog import StructureCatalog

    catalog = StructureCatalog.load(structures, relationships)

    hippocampus = catalog.get("hippocampus")
    limbic = catalog.by_system(AnatomicalSystem.LIMBIC)
    for structure, kind in catalog.related_to("hippocampus"):
        print(structure.name, kind)
"""

from __future__ import annotations

import logging
from collections import defaultdict
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping, Optional

from pydantic import ValidationError

from neuromemo.enums.anatomy import AnatomicalLevel, AnatomicalSystem, RelationshipKind
from neuromemo.errors import (
    DanglingRelationshipError,
    DuplicateIdentifierError,
    InvalidCatalogDocumentError,
)
from neuromemo.models.catalog import CatalogDocument, Relationship, Structure
from neuromemo.utils.text import fold_term

logger = logging.getLogger(__name__)


class StructureCatalog:
    """
    Read-only index over structures and relationships.

    Do not instantiate directly; use `StructureCatalog.load()` or
    `parse_catalog_document()` so that integrity checks always run.
    """

    def __init__(
        self,
        structures: dict[str, Structure],
        relationships: tuple[Relationship, ...],
    ):
        self._structures = MappingProxyType(structures)
        self._relationships = relationships

        by_system: dict[AnatomicalSystem, list[Structure]] = defaultdict(list)
        by_category: dict[str, list[Structure]] = defaultdict(list)
        by_level: dict[AnatomicalLevel, list[Structure]] = defaultdict(list)
        search_index: list[tuple[Structure, tuple[str, ...]]] = []

        for structure in structures.values():
            by_system[structure.system].append(structure)
            by_category[structure.category].append(structure)
            by_level[structure.level].append(structure)
            search_index.append(
                (structure, tuple(fold_term(t) for t in structure.search_terms))
            )

        adjacency: dict[str, list[tuple[str, RelationshipKind]]] = defaultdict(list)
        for rel in relationships:
            adjacency[rel.source_id].append((rel.target_id, rel.kind))
            if rel.target_id != rel.source_id:
                adjacency[rel.target_id].append((rel.source_id, rel.kind))

        self._by_system = {k: tuple(v) for k, v in by_system.items()}
        self._by_category = {k: tuple(v) for k, v in by_category.items()}
        self._by_level = {k: tuple(v) for k, v in by_level.items()}
        self._adjacency = {k: tuple(v) for k, v in adjacency.items()}
        self._search_index = tuple(search_index)

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def load(
        cls,
        structures: Iterable[Structure],
        relationships: Iterable[Relationship] = (),
    ) -> "StructureCatalog":
        """
        Build a catalog after validating referential integrity.

        Args:
            structures: Structures in catalog (insertion) order
            relationships: Edges between those structures

        Returns:
            Constructed catalog

        Raises:
            DuplicateIdentifierError: Two structures share an identifier
            DanglingRelationshipError: A relationship endpoint is unknown
        """
        index: dict[str, Structure] = {}
        for structure in structures:
            if structure.id in index:
                logger.warning(f"Catalog load failed: duplicate id {structure.id!r}")
                raise DuplicateIdentifierError(structure.id)
            index[structure.id] = structure

        edges = tuple(relationships)
        for rel in edges:
            missing = [
                endpoint
                for endpoint in dict.fromkeys((rel.source_id, rel.target_id))
                if endpoint not in index
            ]
            if missing:
                logger.warning(
                    f"Catalog load failed: relationship {rel.source_id!r} -> "
                    f"{rel.target_id!r} references unknown {missing}"
                )
                raise DanglingRelationshipError(rel.source_id, rel.target_id, missing)

        logger.info(
            f"Catalog loaded: {len(index)} structures, {len(edges)} relationships"
        )
        return cls(index, edges)

    # =========================================================================
    # Lookups
    # =========================================================================

    def get(self, structure_id: str) -> Optional[Structure]:
        """Return the structure with this identifier, or None."""
        return self._structures.get(structure_id)

    def all(self) -> list[Structure]:
        """All structures in insertion order."""
        return list(self._structures.values())

    def relationships(self) -> list[Relationship]:
        """All relationships in load order."""
        return list(self._relationships)

    def search(self, term: str) -> list[Structure]:
        """
        Substring search over name, latin name and synonyms.

        Matching is case- and diacritic-insensitive. Results keep catalog
        insertion order and are not ranked. An empty term matches nothing.

        Args:
            term: Search text

        Returns:
            Matching structures, each at most once
        """
        needle = fold_term(term)
        if not needle:
            return []
        return [
            structure
            for structure, terms in self._search_index
            if any(needle in t for t in terms)
        ]

    def by_system(self, system: AnatomicalSystem) -> list[Structure]:
        return list(self._by_system.get(system, ()))

    def by_category(self, category: str) -> list[Structure]:
        return list(self._by_category.get(category, ()))

    def by_level(self, level: AnatomicalLevel) -> list[Structure]:
        return list(self._by_level.get(level, ()))

    def related_to(self, structure_id: str) -> list[tuple[Structure, RelationshipKind]]:
        """
        One-hop neighbours of a structure, following edges in both directions.

        A structure connected by several relationships appears once per
        relationship, each paired with that relationship's kind.

        Args:
            structure_id: Identifier of the structure

        Returns:
            (neighbour, kind) pairs in relationship load order; empty for
            unknown identifiers
        """
        return [
            (self._structures[other_id], kind)
            for other_id, kind in self._adjacency.get(structure_id, ())
        ]

    def same_system(self, structure_id: str) -> list[Structure]:
        """Other structures sharing this structure's system, in insertion order."""
        structure = self.get(structure_id)
        if structure is None:
            return []
        return [s for s in self._by_system.get(structure.system, ()) if s.id != structure_id]

    def __len__(self) -> int:
        return len(self._structures)

    def __contains__(self, structure_id: object) -> bool:
        return structure_id in self._structures

    def __iter__(self) -> Iterator[Structure]:
        return iter(self._structures.values())


def parse_catalog_document(document: Mapping[str, Any]) -> StructureCatalog:
    """
    Validate a JSON-shaped document and build a catalog from it.

    Args:
        document: Mapping with "structures" and optional "relationships" lists

    Returns:
        Constructed catalog

    Raises:
        InvalidCatalogDocumentError: Document does not match the schema
        DuplicateIdentifierError: Two structures share an identifier
        DanglingRelationshipError: A relationship endpoint is unknown
    """
    try:
        parsed = CatalogDocument.model_validate(document)
    except ValidationError as e:
        logger.warning(f"Catalog document rejected: {e.error_count()} validation error(s)")
        raise InvalidCatalogDocumentError(
            f"Invalid catalog document: {e.error_count()} validation error(s)",
            details={"errors": e.errors(include_url=False)},
        ) from e

    return StructureCatalog.load(parsed.structures, parsed.relationships)
