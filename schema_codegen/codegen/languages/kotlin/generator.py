"""
Kotlin generator backend.

Resolves variable, parameter, enum, model, file and service names and
Kotlin type declarations from schema descriptors.
"""

import re
from typing import Any, Dict, Optional

from ....logging_config import get_logger
from ...core.config import GeneratorConfig, config_to_options
from ...core.generator import CodeGenerator
from ...core.naming import (
    NamingConvention,
    apply_convention,
    camelize,
    initial_caps,
    sanitize_name,
    title_case,
)
from ...core.schema import Property
from .config import (
    DEFAULT_SERVICE_NAME,
    EMPTY_ENUM_NAME,
    KOTLIN_RESERVED_WORDS,
    KOTLIN_STRING_TYPES,
    SERVICE_SUFFIX,
)
from .naming import ReservedWordGuard, SpecialCharacterTranscoder
from .types import KotlinImportResolver, KotlinTypeResolver, KotlinTypeTables

logger = get_logger(__name__)

_CONSTANT_NAME = re.compile(r"[A-Z_]*")
_LEADING_DIGIT = re.compile(r"\d", re.ASCII)


class KotlinGenerator(CodeGenerator):
    """Naming and type resolution for Kotlin client and server code."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize the Kotlin backend from an immutable configuration."""
        super().__init__(config)

        self.tables = KotlinTypeTables.from_config(self.config)
        self.reserved_words = ReservedWordGuard(KOTLIN_RESERVED_WORDS)
        self.transcoder = SpecialCharacterTranscoder(
            self.tables.special_char_replacements
        )
        self.type_resolver = KotlinTypeResolver(self.tables, self.to_model_name)
        self.import_resolver = KotlinImportResolver(
            self.tables, self.config.model_package
        )

        logger.debug(
            "Kotlin generator ready (enumPropertyNaming=%s, modelPackage=%s)",
            self.enum_property_naming.value,
            self.config.model_package or "<none>",
        )

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "kotlin"

    @property
    def file_extension(self) -> str:
        """Return Kotlin file extension."""
        return ".kt"

    @property
    def enum_property_naming(self) -> NamingConvention:
        return self.config.enum_property_naming

    # Escaping

    def is_reserved_word(self, word: str) -> bool:
        # case-sensitive, "Class" is a valid name
        return self.reserved_words.is_reserved(word)

    def escape_reserved_word(self, name: str) -> str:
        return self.reserved_words.escape(name)

    def escape_quotation_mark(self, text: str) -> str:
        """Remove double quotes to avoid code injection."""
        return text.replace('"', "")

    def escape_unsafe_characters(self, text: str) -> str:
        """Break up comment delimiters in text placed inside comments."""
        return text.replace("*/", "*_/").replace("/*", "/_*")

    # Identifiers

    def to_var_name(self, name: str) -> str:
        """
        Kotlin property name for a schema property.

        Example:
            ``pet_id`` -> ``petId``, ``class`` -> ```class```,
            ``SOME_VALUE`` -> ``SOME_VALUE``
        """
        name = sanitize_name(name)
        name = name.replace("-", "_")

        # all upper case names are kept as constants
        if _CONSTANT_NAME.fullmatch(name):
            return name

        name = camelize(name, lowercase_first_letter=True)

        if self.is_reserved_word(name) or _LEADING_DIGIT.match(name):
            name = self.escape_reserved_word(name)

        return name

    def to_param_name(self, name: str) -> str:
        """Kotlin parameter name; same rules as property names."""
        return self.to_var_name(name)

    def to_enum_var_name(self, value: str, datatype: str) -> str:
        """
        Kotlin enum constant name for an enum value.

        The configured enumPropertyNaming convention is applied after
        sanitizing, independently of how property names are cased.
        """
        if not value:
            modified = EMPTY_ENUM_NAME
        else:
            modified = self.transcoder.sanitize(value)

        modified = apply_convention(modified, self.enum_property_naming)

        if self.is_reserved_word(modified):
            return self.escape_reserved_word(modified)

        return modified

    def to_enum_value(self, value: str, datatype: str) -> str:
        """Literal for an enum value; string datatypes are quoted."""
        if datatype in KOTLIN_STRING_TYPES:
            return f'"{self.escape_quotation_mark(value)}"'
        return value

    def to_enum_name(self, property_name: str) -> str:
        return initial_caps(property_name)

    def to_model_name(self, name: str) -> str:
        """
        Kotlin class name for a model.

        Fully-qualified kotlin.* and java.* names are kept as given, and
        names in the import mapping resolve to their mapped type.
        """
        if self.tables.has_builtin_prefix(name):
            return name

        if name in self.tables.import_mapping:
            return self.tables.import_mapping[name]

        modified = name.replace(".", "").replace("-", "_")
        modified = self.transcoder.sanitize(modified)

        if self.is_reserved_word(modified):
            modified = self.escape_reserved_word(modified)

        # escaped names are re-cased inside the backticks; keep this order
        modified = title_case(modified)
        modified = camelize(modified)
        return title_case(modified)

    def to_model_filename(self, name: str) -> str:
        """File name (without extension) for a model; matches the class name."""
        return self.to_model_name(name.replace("-", "_"))

    def to_api_name(self, name: str) -> str:
        """Service class name for an API tag."""
        if not name:
            return DEFAULT_SERVICE_NAME
        return initial_caps(name) + SERVICE_SUFFIX

    # Types

    def get_schema_type(self, prop: Property) -> str:
        return self.type_resolver.get_schema_type(prop)

    def get_type_declaration(self, prop: Property) -> str:
        return self.type_resolver.type_declaration(prop)

    def to_instantiation_type(self, prop: Property) -> Optional[str]:
        return self.type_resolver.instantiation_type(prop)

    # Imports

    def needs_import(self, type_name: str) -> bool:
        return self.import_resolver.needs_import(type_name)

    def to_model_import(self, name: str) -> str:
        return self.import_resolver.resolve_import(name)

    # Options

    def additional_properties(self) -> Dict[str, Any]:
        """Processed option bundle handed to the template renderer."""
        options = config_to_options(self.config)
        for key in ("outputFolder", "typeMappings", "importMappings", "specialCharReplacements"):
            options.pop(key)
        return options
