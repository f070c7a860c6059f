"""
Engine Exceptions

Custom exception classes for the engine. Only catalog construction can fail;
everything downstream of a valid catalog normalizes its input instead of
raising.

Usage:
    from neuromemo.errors import CatalogLoadError, DanglingRelationshipError

    try:
        catalog = StructureCatalog.load(structures, relationships)
    except DanglingRelationshipError as e:
        print(e.missing)

Exception hierarchy:
    ServiceError
    └── CatalogLoadError
        ├── DuplicateIdentifierError
        ├── DanglingRelationshipError
        └── InvalidCatalogDocumentError
"""

from typing import Optional


class ServiceError(Exception):
    """
    Base exception for engine errors.

    Provides consistent error handling with:
    - Error code for categorization
    - Optional details for debugging

    Example:
        raise ServiceError("Catalog is not loaded", error_code="not_loaded")
    """

    error_code: str = "service_error"

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        super().__init__(message)
        self.message = message
        if error_code:
            self.error_code = error_code
        self.details = details or {}


class CatalogLoadError(ServiceError):
    """
    Catalog construction failed.

    Fatal to catalog construction; no partial catalog is ever returned.
    """

    error_code = "catalog_load_error"


class DuplicateIdentifierError(CatalogLoadError):
    """Two structures share the same identifier."""

    error_code = "duplicate_identifier"

    def __init__(self, identifier: str):
        super().__init__(
            f"Duplicate structure identifier: {identifier!r}",
            details={"identifier": identifier},
        )
        self.identifier = identifier


class DanglingRelationshipError(CatalogLoadError):
    """A relationship references a structure that is not in the catalog."""

    error_code = "dangling_relationship"

    def __init__(self, source_id: str, target_id: str, missing: list[str]):
        super().__init__(
            f"Relationship {source_id!r} -> {target_id!r} references "
            f"unknown structure(s): {', '.join(repr(m) for m in missing)}",
            details={
                "source_id": source_id,
                "target_id": target_id,
                "missing": list(missing),
            },
        )
        self.source_id = source_id
        self.target_id = target_id
        self.missing = list(missing)


class InvalidCatalogDocumentError(CatalogLoadError):
    """
    Raw catalog document failed validation.

    Raised for unknown enum values, out-of-range difficulty ratings and
    missing required fields.
    """

    error_code = "invalid_catalog_document"
