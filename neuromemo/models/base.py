"""
Base Models for Catalog Content Validation

This module provides base classes with strict validation settings for
catalog content and for the read-only summaries the engine hands back.

MOTIVATION:
    Catalog documents are authored by hand. Typos in enum values or field
    names must fail at parse time rather than producing silently empty
    categories at runtime.

Usage:
    # For content parsed from documents (strictest validation, immutable)
    class Structure(ContentModel):
        id: str
        name: str

    # For summaries computed by the engine
    class SystemProgress(SummaryModel):
        total: int

Architecture:
    Document → ContentModel (extra="forbid", frozen) → StructureCatalog
    Engine state → SummaryModel (extra="ignore") → Caller
"""

from pydantic import BaseModel, ConfigDict


class ContentModel(BaseModel):
    """
    Base model for catalog content with strict validation.

    Features:
        - extra="forbid": Unknown fields raise ValidationError
        - frozen=True: Content is immutable after load
        - validate_default=True: Validates default values
        - str_strip_whitespace=True: Trims whitespace from strings
        - from_attributes=True: Allows conversion from ORM/attribute objects

    Example:
        >>> class Item(ContentModel):
        ...     name: str
        >>>
        >>> Item(name="Hippocampus")  # OK
        >>> Item(nmae="Hippocampus")  # Raises ValidationError
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        validate_default=True,
        str_strip_whitespace=True,
        from_attributes=True,
    )


class SummaryModel(BaseModel):
    """
    Base model for summaries produced by the engine.

    More lenient than ContentModel: still type-validated, but extra fields
    are ignored and instances stay mutable for incremental aggregation.
    """

    model_config = ConfigDict(
        extra="ignore",
        validate_default=True,
        from_attributes=True,
    )
