"""
Kotlin type system for code generation.

Maps schema property descriptors to Kotlin type declarations (including
nested generics for arrays and maps) and decides which resolved types
need an import in generated code.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Mapping, Optional, Tuple

from ...core.config import GeneratorConfig
from ...core.schema import Property, PropertyKind, get_schema_type
from .config import (
    BUILTIN_NAMESPACE_PREFIXES,
    KOTLIN_DEFAULT_INCLUDES,
    KOTLIN_IMPORT_MAPPING,
    KOTLIN_INSTANTIATION_TYPES,
    KOTLIN_PRIMITIVES,
    KOTLIN_SPECIAL_CHAR_REPLACEMENTS,
    KOTLIN_TYPE_MAPPING,
)


@dataclass(frozen=True)
class KotlinTypeTables:
    """
    Immutable lookup tables shared by every resolver call.

    Built once from the generator configuration; the mappings are
    read-only proxies so concurrent resolution never observes a change.
    """

    type_mapping: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType(dict(KOTLIN_TYPE_MAPPING))
    )
    import_mapping: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType(dict(KOTLIN_IMPORT_MAPPING))
    )
    instantiation_types: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType(dict(KOTLIN_INSTANTIATION_TYPES))
    )
    language_specific_primitives: frozenset = KOTLIN_PRIMITIVES
    default_includes: frozenset = KOTLIN_DEFAULT_INCLUDES
    special_char_replacements: Tuple[Tuple[str, str], ...] = (
        KOTLIN_SPECIAL_CHAR_REPLACEMENTS
    )
    namespace_prefixes: Tuple[str, ...] = BUILTIN_NAMESPACE_PREFIXES

    @classmethod
    def from_config(cls, config: GeneratorConfig) -> "KotlinTypeTables":
        """Merge configured overrides over the Kotlin defaults."""
        type_mapping = dict(KOTLIN_TYPE_MAPPING)
        type_mapping.update(config.type_mappings)

        import_mapping = dict(KOTLIN_IMPORT_MAPPING)
        import_mapping.update(config.import_mappings)

        replacements = dict(KOTLIN_SPECIAL_CHAR_REPLACEMENTS)
        replacements.update(config.special_char_replacements)

        return cls(
            type_mapping=MappingProxyType(type_mapping),
            import_mapping=MappingProxyType(import_mapping),
            special_char_replacements=tuple(replacements.items()),
        )

    @property
    def array_type(self) -> str:
        return self.type_mapping["array"]

    @property
    def map_type(self) -> str:
        return self.type_mapping["map"]

    @property
    def string_type(self) -> str:
        return self.type_mapping["string"]

    def has_builtin_prefix(self, name: str) -> bool:
        return name.startswith(self.namespace_prefixes)


class KotlinTypeResolver:
    """
    Central engine for mapping schema properties to Kotlin types.

    Model naming is injected so that unmapped schema types and references
    go through the same pipeline as model class names.
    """

    def __init__(self, tables: KotlinTypeTables, model_namer: Callable[[str], str]):
        self.tables = tables
        self._model_namer = model_namer

    def resolve_type(self, schema_type: str) -> str:
        """
        Map a schema type keyword to a Kotlin type name.

        Unknown keywords are treated as model names. Mapped primitives
        still pass through model naming so casing stays consistent.

        Example:
            ``"integer"`` -> ``"Int"``, ``"date-time"`` -> ``"java.util.Calendar"``
        """
        mapped = self.tables.type_mapping.get(schema_type, schema_type)
        return self._model_namer(mapped)

    def get_schema_type(self, prop: Property) -> str:
        """Resolved Kotlin type of the property's outer schema keyword."""
        return self.resolve_type(get_schema_type(prop))

    def type_declaration(self, prop: Property) -> str:
        """
        Full Kotlin type declaration for a property.

        Arrays and maps recurse into their item/value property, so arrays
        of arrays produce nested generics with no depth limit.
        """
        if prop.kind == PropertyKind.ARRAY:
            return self._array_declaration(prop)

        if prop.kind == PropertyKind.MAP:
            # schema maps are keyed by strings only
            inner = self.type_declaration(self._map_value(prop))
            return f"{self.get_schema_type(prop)}<{self.tables.string_type}, {inner}>"

        if prop.kind == PropertyKind.REFERENCE:
            return self._model_namer(prop.simple_ref)

        resolved = self.get_schema_type(prop)
        # a mapped name may itself be a schema keyword (e.g. "Date")
        return self.tables.type_mapping.get(resolved, resolved)

    def instantiation_type(self, prop: Property) -> Optional[str]:
        """
        Type expression used to instantiate default values.

        Returns:
            ``Array<...>`` for arrays, ``mapOf<String, ...>`` for maps,
            otherwise None
        """
        if prop.kind == PropertyKind.ARRAY:
            return self._array_declaration(prop)

        if prop.kind == PropertyKind.MAP:
            inner = self.get_schema_type(self._map_value(prop))
            return (
                f"{self.tables.instantiation_types['map']}"
                f"<{self.tables.string_type}, {inner}>"
            )

        return None

    def _array_declaration(self, prop: Property) -> str:
        # TODO: qualify the collection type (kotlin.Array) to avoid clashing with a model named Array
        items = prop.items or Property(kind=PropertyKind.PRIMITIVE, type="object")
        return f"{self.tables.array_type}<{self.type_declaration(items)}>"

    @staticmethod
    def _map_value(prop: Property) -> Property:
        return prop.additional_properties or Property(
            kind=PropertyKind.PRIMITIVE, type="object"
        )


class KotlinImportResolver:
    """Decides which Kotlin types need an import and from where."""

    def __init__(self, tables: KotlinTypeTables, model_package: str = ""):
        self.tables = tables
        self.model_package = model_package

    def needs_import(self, type_name: str) -> bool:
        """
        Check whether a resolved type needs an import statement.

        Built-in namespaces, Kotlin primitives and the default includes
        are always available.
        """
        return (
            not self.tables.has_builtin_prefix(type_name)
            and type_name not in self.tables.default_includes
            and type_name not in self.tables.language_specific_primitives
        )

    def resolve_import(self, name: str) -> str:
        """
        Fully-qualified path to import for a type name.

        Names that need no import are returned unchanged.
        """
        if not self.needs_import(name):
            return name

        if name in self.tables.import_mapping:
            return self.tables.import_mapping[name]

        # already qualified through the import mapping
        if "." in name or not self.model_package:
            return name

        return f"{self.model_package}.{name}"
