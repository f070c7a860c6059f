"""
Knowledge Graph Services

In-memory anatomical knowledge graph: structures, their relationships and
the lookups the learning services draw candidates from.

Usage:
    from neuromemo.services.knowledge_graph import StructureCatalog

    catalog = StructureCatalog.load(structures, relationships)
"""

from neuromemo.services.knowledge_graph.catalog import (
    StructureCatalog,
    parse_catalog_document,
)

__all__ = [
    "StructureCatalog",
    "parse_catalog_document",
]
