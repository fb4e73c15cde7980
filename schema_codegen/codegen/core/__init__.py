"""
Core code generation components.

Provides base classes and utilities used by all language backends.
"""

from .generator import (
    CodeGenerator,
    ResolutionResult,
    ResolvedProperty,
    ResolvedSchema,
    resolve_schema,
    resolve_schemas,
    strip_path_separators,
)
from .schema import (
    Operation,
    Property,
    PropertyKind,
    Schema,
    array_of,
    get_schema_type,
    map_of,
    primitive,
    reference,
)
from .naming import (
    CONVENTION_TRANSFORMS,
    NamingConvention,
    apply_convention,
    camelize,
    initial_caps,
    sanitize_name,
    title_case,
    underscore,
)
from .config import (
    ConfigManager,
    ConfigurationError,
    GeneratorConfig,
    load_config,
    parse_naming_convention,
)
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "ResolutionResult",
    "ResolvedProperty",
    "ResolvedSchema",
    "resolve_schema",
    "resolve_schemas",
    "strip_path_separators",
    # Schema descriptors
    "Operation",
    "Property",
    "PropertyKind",
    "Schema",
    "array_of",
    "get_schema_type",
    "map_of",
    "primitive",
    "reference",
    # Naming utilities - language-agnostic
    "CONVENTION_TRANSFORMS",
    "NamingConvention",
    "apply_convention",
    "camelize",
    "initial_caps",
    "sanitize_name",
    "title_case",
    "underscore",
    # Configuration system
    "ConfigManager",
    "ConfigurationError",
    "GeneratorConfig",
    "load_config",
    "parse_naming_convention",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
