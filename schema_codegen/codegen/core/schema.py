"""
Core schema representation for name and type resolution.

The schema-processing layer hands over property, model and operation
descriptors in this normalized form. Descriptors are immutable so they
can be shared between resolver calls running in parallel.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class PropertyKind(Enum):
    """Shape of a schema property."""

    PRIMITIVE = "primitive"
    ARRAY = "array"
    MAP = "map"
    REFERENCE = "reference"


@dataclass(frozen=True)
class Property:
    """A single schema property (field type) descriptor."""

    kind: PropertyKind
    type: str = ""  # schema type keyword, e.g. "integer", "string"
    format: Optional[str] = None  # schema format, e.g. "int64", "date-time"

    # For arrays
    items: Optional["Property"] = None

    # For maps
    additional_properties: Optional["Property"] = None

    # For references
    ref: Optional[str] = None

    # Enum values, when the property is an inline enum
    enum: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def simple_ref(self) -> str:
        """Model name a reference points at (last path segment of the ref)."""
        if not self.ref:
            return ""
        return self.ref.rsplit("/", 1)[-1]

    @property
    def is_enum(self) -> bool:
        return bool(self.enum)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Property":
        """
        Build a property from a swagger-style property object.

        Args:
            data: Mapping with ``type``/``format``/``items``/
                ``additionalProperties``/``$ref``/``enum`` keys

        Returns:
            Property descriptor
        """
        if "$ref" in data:
            return reference(data["$ref"])

        schema_type = data.get("type", "object")
        enum_values = tuple(str(v) for v in data.get("enum", ()))

        if schema_type == "array":
            return array_of(cls.from_dict(data.get("items", {"type": "object"})))

        additional = data.get("additionalProperties")
        if schema_type == "object" and isinstance(additional, dict):
            return map_of(cls.from_dict(additional))

        return primitive(schema_type, data.get("format"), enum=enum_values)


def primitive(type_name: str, format: Optional[str] = None, enum=()) -> Property:
    """Create a primitive property."""
    return Property(
        kind=PropertyKind.PRIMITIVE, type=type_name, format=format, enum=tuple(enum)
    )


def array_of(items: Property) -> Property:
    """Create an array property with the given item property."""
    return Property(kind=PropertyKind.ARRAY, type="array", items=items)


def map_of(value: Property) -> Property:
    """Create a string-keyed map property with the given value property."""
    return Property(kind=PropertyKind.MAP, type="object", additional_properties=value)


def reference(ref: str) -> Property:
    """Create a reference to a named model."""
    return Property(kind=PropertyKind.REFERENCE, ref=ref)


# (type, format) -> schema type keyword
_FORMAT_KEYWORDS = {
    ("integer", "int64"): "long",
    ("number", "float"): "float",
    ("number", "double"): "double",
    ("string", "date"): "date",
    ("string", "date-time"): "DateTime",
    ("string", "uuid"): "UUID",
    ("string", "binary"): "binary",
    ("string", "byte"): "ByteArray",
}


def get_schema_type(prop: Property) -> str:
    """
    Return the schema type keyword used for type-mapping lookups.

    Example:
        >>> get_schema_type(primitive("integer", "int64"))
        'long'
        >>> get_schema_type(reference("#/definitions/Pet"))
        'Pet'
    """
    if prop.kind == PropertyKind.ARRAY:
        return "array"
    if prop.kind == PropertyKind.MAP:
        return "map"
    if prop.kind == PropertyKind.REFERENCE:
        return prop.simple_ref

    return _FORMAT_KEYWORDS.get((prop.type, prop.format), prop.type)


@dataclass(frozen=True)
class Schema:
    """A named model with its properties in declaration order."""

    name: str
    properties: Tuple[Tuple[str, Property], ...] = ()
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, name: str, data: Dict[str, Any]) -> "Schema":
        """Build a schema from a swagger-style model definition."""
        properties = tuple(
            (prop_name, Property.from_dict(prop_data))
            for prop_name, prop_data in data.get("properties", {}).items()
        )
        return cls(name=name, properties=properties, description=data.get("description"))


@dataclass(frozen=True)
class Operation:
    """An API operation as seen by name derivation."""

    path: str
    http_method: str
    operation_id: Optional[str] = None
    tags: Tuple[str, ...] = ()

    def with_path(self, path: str) -> "Operation":
        return replace(self, path=path)
