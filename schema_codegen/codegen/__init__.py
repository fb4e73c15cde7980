"""
schema_codegen code generation module

Resolves identifiers and type declarations for target-language backends
from API schema descriptors.
"""

from typing import Any, Dict, Iterable, Optional

from .registry import (
    GeneratorRegistry,
    RegistryError,
    describe_language,
    get_generator,
    get_registry,
    is_language_supported,
    list_supported_languages,
    register_generator,
)
from .core.generator import (
    CodeGenerator,
    ResolutionResult,
    resolve_schemas,
    strip_path_separators,
)
from .core.schema import Operation, Property, PropertyKind, Schema
from .core.config import (
    ConfigManager,
    ConfigurationError,
    GeneratorConfig,
    load_config,
)
from .core.naming import NamingConvention


def resolve_definitions(
    definitions: Dict[str, Dict[str, Any]],
    language: str = "kotlin",
    config: Optional[Dict[str, Any]] = None,
) -> ResolutionResult:
    """
    Resolve names and types for swagger-style model definitions.

    Args:
        definitions: Mapping of model name to definition object
        language: Target language name
        config: Generator option bundle

    Returns:
        ResolutionResult ready for the template renderer
    """
    generator = get_generator(language, config)
    schemas: Iterable[Schema] = (
        Schema.from_dict(name, data) for name, data in definitions.items()
    )
    return resolve_schemas(generator, schemas)


__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "describe_language",
    "CodeGenerator",
    "ResolutionResult",
    "Operation",
    "Property",
    "PropertyKind",
    "Schema",
    "ConfigManager",
    "ConfigurationError",
    "GeneratorConfig",
    "NamingConvention",
    "get_generator",
    "get_registry",
    "is_language_supported",
    "list_supported_languages",
    "load_config",
    "register_generator",
    "resolve_definitions",
    "resolve_schemas",
    "strip_path_separators",
]
