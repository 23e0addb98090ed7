# Path: remapper/process/matcher/models/search_params.py
"""
Search Specification Models

Pydantic models describing a previously-known type by its structural
characteristics. A remap specification pairs those characteristics with
the name the type should carry once it is found again in a new build.

Every criterion is optional. An unset criterion (None, or an empty
member set) disables the matching predicate for that axis entirely.
"""

from typing import Optional
from pydantic import BaseModel, Field

from constants import WILDCARD


# =============================================================================
# SEARCH PARAMETERS
# =============================================================================

class SearchParams(BaseModel):
    """
    Structural criteria for one target type.

    Boolean flags are tri-state: None means "not requested", True/False
    must equal the candidate's attribute. Member lists are matched by
    name; an ignore list containing "*" means the candidate must have no
    members of that kind.

    Example:
        params = SearchParams(
            is_sealed=True,
            match_methods=["Update"],
            ignore_fields=["*"],
        )
    """

    # Flags
    is_public: Optional[bool] = Field(
        default=None,
        description="True: externally visible; False: not externally visible"
    )
    is_abstract: Optional[bool] = Field(default=None)
    is_interface: Optional[bool] = Field(default=None)
    is_enum: Optional[bool] = Field(default=None)
    is_nested: Optional[bool] = Field(default=None)
    is_sealed: Optional[bool] = Field(default=None)
    has_attribute: Optional[bool] = Field(
        default=None,
        description="Whether the type carries any custom attribute"
    )
    has_generic_parameters: Optional[bool] = Field(default=None)

    # Inheritance
    is_derived: Optional[bool] = Field(
        default=None,
        description="Whether the type derives from a base type"
    )
    match_base_class: Optional[str] = Field(
        default=None,
        description="Base type name that confirms a match"
    )
    ignore_base_class: Optional[str] = Field(
        default=None,
        description="Base type name that vetoes a match"
    )

    # Counts
    constructor_parameter_count: Optional[int] = Field(
        default=None, ge=0,
        description="Some instance constructor must take exactly this many parameters"
    )
    method_count: Optional[int] = Field(
        default=None, ge=0,
        description="Exact number of non-constructor methods"
    )

    # Member sets
    match_methods: tuple[str, ...] = Field(default_factory=tuple)
    ignore_methods: tuple[str, ...] = Field(default_factory=tuple)
    match_fields: tuple[str, ...] = Field(default_factory=tuple)
    ignore_fields: tuple[str, ...] = Field(default_factory=tuple)
    match_properties: tuple[str, ...] = Field(default_factory=tuple)
    ignore_properties: tuple[str, ...] = Field(default_factory=tuple)
    match_nested_types: tuple[str, ...] = Field(default_factory=tuple)
    ignore_nested_types: tuple[str, ...] = Field(default_factory=tuple)

    class Config:
        """Pydantic configuration."""
        frozen = True

    @property
    def ignores_all_methods(self) -> bool:
        """Check if the type is required to have no methods."""
        return WILDCARD in self.ignore_methods

    def conflicts(self) -> list[str]:
        """
        List mutually exclusive criteria requested together.

        Returns:
            Human-readable conflict descriptions (empty if consistent)
        """
        problems = []
        if self.match_methods and self.ignores_all_methods:
            problems.append(
                "match_methods is set while ignore_methods contains the "
                f"'{WILDCARD}' wildcard"
            )
        return problems


class RemapSpecification(BaseModel):
    """
    One type to re-identify in a new build.

    Attributes:
        new_type_name: Canonical name to give the matched type
        original_type_name: Name in the prior build (diagnostics only)
        search_params: Structural criteria used for matching
    """
    new_type_name: str = Field(
        min_length=1,
        description="Canonical name proposed for the matched type"
    )
    original_type_name: Optional[str] = Field(
        default=None,
        description="Name the type carried in the prior build"
    )
    search_params: SearchParams = Field(default_factory=SearchParams)

    class Config:
        """Pydantic configuration."""
        frozen = True


__all__ = [
    'SearchParams',
    'RemapSpecification',
]
