# Path: remapper/process/matcher/models/type_declaration.py
"""
Type Declaration Models

Read-only views of the declarations in a decoded module. These are the
candidates the matching engine scores. The TypeIndex provides the
ordered, flattened candidate list and name lookups.
"""

from enum import Enum
from typing import Optional
from dataclasses import dataclass, field

from constants import (
    INSTANCE_CONSTRUCTOR_NAME,
    STATIC_CONSTRUCTOR_NAME,
    NESTED_TYPE_SEPARATOR,
)


class Visibility(str, Enum):
    """Type visibility as recorded by the host metadata."""
    PUBLIC = "public"
    NOT_PUBLIC = "not_public"
    NESTED_PUBLIC = "nested_public"
    NESTED_PRIVATE = "nested_private"
    NESTED_FAMILY = "nested_family"
    NESTED_ASSEMBLY = "nested_assembly"
    NESTED_FAMILY_AND_ASSEMBLY = "nested_family_and_assembly"
    NESTED_FAMILY_OR_ASSEMBLY = "nested_family_or_assembly"


@dataclass
class MethodDeclaration:
    """
    A method or constructor declared on a type.

    Attributes:
        name: Method name (".ctor"/".cctor" for constructors)
        parameter_count: Number of declared parameters
        is_constructor: Whether this is an instance or static constructor
        is_static: Whether the method is static
        is_public: Whether the method is public
    """
    name: str
    parameter_count: int = 0
    is_constructor: bool = False
    is_static: bool = False
    is_public: bool = False

    @property
    def is_static_constructor(self) -> bool:
        """Check if this is the type initializer."""
        return self.is_constructor and (
            self.is_static or self.name == STATIC_CONSTRUCTOR_NAME
        )


@dataclass
class FieldDeclaration:
    """A field declared on a type."""
    name: str
    is_public: bool = False
    is_static: bool = False


@dataclass
class PropertyDeclaration:
    """
    A property declared on a type.

    Accessors are kept as methods so accessibility changes can reach them.
    """
    name: str
    getter: Optional[MethodDeclaration] = None
    setter: Optional[MethodDeclaration] = None


@dataclass
class TypeDeclaration:
    """
    One type declaration from a module.

    Attributes:
        name: Simple type name (possibly obfuscated)
        namespace: Namespace ('' for nested or global types)
        visibility: Host visibility attribute
        is_sealed: Whether the type is sealed
        is_abstract: Whether the type is abstract
        is_interface: Whether the type is an interface
        is_enum: Whether the type is an enum
        base_type: Simple name of the base type, None if there is none
        has_generic_parameters: Whether the type is generic
        has_custom_attributes: Whether any custom attribute is applied
        methods: Methods and constructors in declaration order
        fields: Fields in declaration order
        properties: Properties in declaration order
        nested_types: Nested type declarations in declaration order
        declaring_type: Enclosing type for nested declarations
    """
    name: str
    namespace: str = ""
    visibility: Visibility = Visibility.PUBLIC
    is_sealed: bool = False
    is_abstract: bool = False
    is_interface: bool = False
    is_enum: bool = False
    base_type: Optional[str] = None
    has_generic_parameters: bool = False
    has_custom_attributes: bool = False
    methods: list[MethodDeclaration] = field(default_factory=list)
    fields: list[FieldDeclaration] = field(default_factory=list)
    properties: list[PropertyDeclaration] = field(default_factory=list)
    nested_types: list['TypeDeclaration'] = field(default_factory=list)
    declaring_type: Optional['TypeDeclaration'] = field(
        default=None, repr=False, compare=False
    )

    def __post_init__(self):
        for nested in self.nested_types:
            nested.declaring_type = self

    # ------------------------------------------------------------------
    # Visibility
    # ------------------------------------------------------------------

    @property
    def is_nested(self) -> bool:
        """Check if the type is declared inside another type."""
        return self.declaring_type is not None or self.visibility.value.startswith('nested_')

    @property
    def is_public(self) -> bool:
        """Top-level public type."""
        return self.visibility == Visibility.PUBLIC

    @property
    def is_not_public(self) -> bool:
        """Top-level type that is not externally visible."""
        return self.visibility == Visibility.NOT_PUBLIC

    # ------------------------------------------------------------------
    # Members
    # ------------------------------------------------------------------

    @property
    def constructors(self) -> list[MethodDeclaration]:
        """Instance constructors."""
        return [
            m for m in self.methods
            if m.is_constructor and not m.is_static_constructor
        ]

    @property
    def has_static_constructor(self) -> bool:
        """Check if the type declares a type initializer."""
        return any(m.is_static_constructor for m in self.methods)

    @property
    def regular_methods(self) -> list[MethodDeclaration]:
        """Methods that are not constructors."""
        return [m for m in self.methods if not m.is_constructor]

    @property
    def method_names(self) -> list[str]:
        return [m.name for m in self.regular_methods]

    @property
    def field_names(self) -> list[str]:
        return [f.name for f in self.fields]

    @property
    def property_names(self) -> list[str]:
        return [p.name for p in self.properties]

    @property
    def nested_type_names(self) -> list[str]:
        return [t.name for t in self.nested_types]

    # ------------------------------------------------------------------
    # Naming
    # ------------------------------------------------------------------

    @property
    def full_name(self) -> str:
        """Namespace-qualified name, nested types joined with '/'."""
        if self.declaring_type is not None:
            return f"{self.declaring_type.full_name}{NESTED_TYPE_SEPARATOR}{self.name}"
        if self.namespace:
            return f"{self.namespace}.{self.name}"
        return self.name

    def iter_all(self):
        """Yield this type followed depth-first by all nested types."""
        yield self
        for nested in self.nested_types:
            yield from nested.iter_all()


def make_constructor(parameter_count: int = 0, is_static: bool = False) -> MethodDeclaration:
    """Build a constructor declaration with the host's naming."""
    return MethodDeclaration(
        name=STATIC_CONSTRUCTOR_NAME if is_static else INSTANCE_CONSTRUCTOR_NAME,
        parameter_count=0 if is_static else parameter_count,
        is_constructor=True,
        is_static=is_static,
    )


class TypeIndex:
    """
    Ordered index of every type declaration in a module.

    Top-level types keep their module order; each is followed by its
    nested types, depth-first. This order is the candidate order used
    for matching and for tie-breaking.

    Indexes:
        - by_full_name: Full name -> declaration
        - by_name: Simple name -> declarations
    """

    def __init__(self, module_name: str = "unknown"):
        """Initialize empty index."""
        self.module_name = module_name
        self._types: list[TypeDeclaration] = []
        self._by_full_name: dict[str, TypeDeclaration] = {}
        self._by_name: dict[str, list[TypeDeclaration]] = {}

    @classmethod
    def from_types(
        cls,
        types: list[TypeDeclaration],
        module_name: str = "unknown"
    ) -> 'TypeIndex':
        """Build an index from top-level type declarations."""
        index = cls(module_name)
        for type_decl in types:
            index.add_type(type_decl)
        return index

    def add_type(self, type_decl: TypeDeclaration) -> None:
        """
        Add a top-level type and all of its nested types.

        Args:
            type_decl: Top-level declaration to index
        """
        for declaration in type_decl.iter_all():
            self._types.append(declaration)
            self._by_full_name[declaration.full_name] = declaration
            self._by_name.setdefault(declaration.name, []).append(declaration)

    def get_type(self, full_name: str) -> Optional[TypeDeclaration]:
        """Get declaration by full name."""
        return self._by_full_name.get(full_name)

    def find_by_name(self, name: str) -> list[TypeDeclaration]:
        """Get declarations with the given simple name."""
        return list(self._by_name.get(name, []))

    def get_all_types(self) -> list[TypeDeclaration]:
        """Get all declarations in candidate order."""
        return list(self._types)

    def get_top_level_types(self) -> list[TypeDeclaration]:
        return [t for t in self._types if t.declaring_type is None]

    def __iter__(self):
        return iter(self._types)

    def __len__(self) -> int:
        return len(self._types)

    def __contains__(self, full_name: str) -> bool:
        return full_name in self._by_full_name


__all__ = [
    'Visibility',
    'MethodDeclaration',
    'FieldDeclaration',
    'PropertyDeclaration',
    'TypeDeclaration',
    'TypeIndex',
    'make_constructor',
]
