"""
Base generator interface for all code generation targets.

Defines the naming and type-resolution contract that every language
backend implements, and the driver that resolves a batch of schemas into
plain strings for the template-rendering layer.
"""

import os
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from ...logging_config import get_logger
from .config import GeneratorConfig, load_config
from .schema import Operation, Property, Schema

logger = get_logger(__name__)

_LEADING_SLASH = re.compile(r"^/")
_TRAILING_SLASH = re.compile(r"/$")


def strip_path_separators(path: str) -> str:
    """
    Strip one leading and one trailing slash from an operation path.

    Example:
        >>> strip_path_separators("/pets/")
        'pets'
    """
    return _TRAILING_SLASH.sub("", _LEADING_SLASH.sub("", path))


class CodeGenerator(ABC):
    """Abstract base class for all language backends."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with an immutable configuration."""
        self.config = config or load_config()

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'kotlin')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.kt')."""
        pass

    # Identifier resolution

    @abstractmethod
    def to_var_name(self, name: str) -> str:
        pass

    @abstractmethod
    def to_param_name(self, name: str) -> str:
        pass

    @abstractmethod
    def to_model_name(self, name: str) -> str:
        pass

    @abstractmethod
    def to_enum_var_name(self, value: str, datatype: str) -> str:
        pass

    @abstractmethod
    def to_model_filename(self, name: str) -> str:
        pass

    @abstractmethod
    def to_api_name(self, name: str) -> str:
        pass

    @abstractmethod
    def to_enum_name(self, property_name: str) -> str:
        pass

    @abstractmethod
    def to_enum_value(self, value: str, datatype: str) -> str:
        pass

    # Type resolution

    @abstractmethod
    def get_type_declaration(self, prop: Property) -> str:
        """
        Output the type declaration of a property.

        Args:
            prop: Property descriptor

        Returns:
            Type declaration string in the target language
        """
        pass

    @abstractmethod
    def to_instantiation_type(self, prop: Property) -> Optional[str]:
        pass

    # Imports

    @abstractmethod
    def needs_import(self, type_name: str) -> bool:
        """Check whether a type needs an import statement."""
        pass

    @abstractmethod
    def to_model_import(self, name: str) -> str:
        """Fully-qualified name to import for a model or type."""
        pass

    # Operations

    def from_operation(self, operation: Operation) -> Operation:
        """Normalize an operation before names are derived from it."""
        return operation.with_path(strip_path_separators(operation.path))

    # Output folders

    def api_file_folder(self) -> str:
        return self._package_folder(self.config.api_package)

    def model_file_folder(self) -> str:
        return self._package_folder(self.config.model_package)

    def api_doc_file_folder(self) -> str:
        return self._doc_folder(self.config.api_doc_path)

    def model_doc_file_folder(self) -> str:
        return self._doc_folder(self.config.model_doc_path)

    def _doc_folder(self, doc_path: str) -> str:
        # plain join keeps "./" and the trailing separator, e.g. "./docs/"
        return f"{self.config.output_folder}/{doc_path}".replace("/", os.sep)

    def _package_folder(self, package: str) -> str:
        folder = Path(self.config.output_folder) / self.config.source_folder
        for part in package.split("."):
            if part:
                folder = folder / part
        return str(folder)

    def to_enum_vars(self, values: Iterable[str], datatype: str) -> List[Dict[str, str]]:
        """Enum constant name/value pairs for an enum property."""
        return [
            {
                "name": self.to_enum_var_name(value, datatype),
                "value": self.to_enum_value(value, datatype),
            }
            for value in values
        ]


@dataclass(frozen=True)
class ResolvedProperty:
    """Strings the renderer needs for one property."""

    name: str
    original_name: str
    declaration: str
    instantiation_type: Optional[str] = None
    enum_name: Optional[str] = None
    enum_vars: List[Dict[str, str]] = field(default_factory=list)


@dataclass(frozen=True)
class ResolvedSchema:
    """Strings the renderer needs for one model."""

    class_name: str
    filename: str
    original_name: str
    properties: List[ResolvedProperty] = field(default_factory=list)
    imports: List[str] = field(default_factory=list)
    description: Optional[str] = None


class ResolutionResult:
    """Container for resolution results and metadata."""

    def __init__(
        self,
        schemas: List[ResolvedSchema],
        metadata: Optional[Dict[str, Any]] = None,
    ):
        self.schemas = schemas
        self.metadata = metadata or {}

    def get(self, original_name: str) -> Optional[ResolvedSchema]:
        for schema in self.schemas:
            if schema.original_name == original_name:
                return schema
        return None


def _collect_type_names(generator: CodeGenerator, prop: Property) -> List[str]:
    """Type names referenced by a property, innermost types included."""
    names = []
    if prop.items is not None:
        names.extend(_collect_type_names(generator, prop.items))
    if prop.additional_properties is not None:
        names.extend(_collect_type_names(generator, prop.additional_properties))
    if prop.items is None and prop.additional_properties is None:
        names.append(generator.get_type_declaration(prop))
    return names


def resolve_schema(generator: CodeGenerator, schema: Schema) -> ResolvedSchema:
    """
    Resolve every name and type of a single schema.

    Args:
        generator: Language backend
        schema: Schema to resolve

    Returns:
        ResolvedSchema with plain strings only
    """
    properties = []
    imports = set()

    for prop_name, prop in schema.properties:
        declaration = generator.get_type_declaration(prop)

        enum_name = None
        enum_vars: List[Dict[str, str]] = []
        if prop.is_enum:
            enum_name = generator.to_enum_name(prop_name)
            enum_vars = generator.to_enum_vars(prop.enum, declaration)

        properties.append(
            ResolvedProperty(
                name=generator.to_var_name(prop_name),
                original_name=prop_name,
                declaration=declaration,
                instantiation_type=generator.to_instantiation_type(prop),
                enum_name=enum_name,
                enum_vars=enum_vars,
            )
        )

        for type_name in _collect_type_names(generator, prop):
            if generator.needs_import(type_name):
                imports.add(generator.to_model_import(type_name))

    return ResolvedSchema(
        class_name=generator.to_model_name(schema.name),
        filename=generator.to_model_filename(schema.name),
        original_name=schema.name,
        properties=properties,
        imports=sorted(imports),
        description=schema.description,
    )


def resolve_schemas(
    generator: CodeGenerator, schemas: Iterable[Schema]
) -> ResolutionResult:
    """
    Resolve a batch of schemas for the template-rendering layer.

    Each schema is resolved independently; the generator holds no per-call
    state, so callers may equally fan this out over worker threads.
    """
    resolved = [resolve_schema(generator, schema) for schema in schemas]

    metadata = {
        "language": generator.language_name,
        "file_extension": generator.file_extension,
        "schema_count": len(resolved),
        "model_folder": generator.model_file_folder(),
        "model_doc_folder": generator.model_doc_file_folder(),
    }

    logger.info(
        "Resolved %d schema(s) for %s", len(resolved), generator.language_name
    )
    return ResolutionResult(resolved, metadata)
