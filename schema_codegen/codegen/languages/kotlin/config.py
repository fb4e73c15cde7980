"""
Kotlin type system tables.

Default type mapping, import mapping and built-in sets for the Kotlin
backend. These are the starting point for KotlinTypeTables; generator
configuration may add to the mappings but never changes them afterwards.
"""

# Kotlin types that are always available and never imported
KOTLIN_PRIMITIVES = frozenset(
    {
        "Byte",
        "Short",
        "Int",
        "Long",
        "Float",
        "Double",
        "Boolean",
    }
)

KOTLIN_DEFAULT_INCLUDES = frozenset(
    KOTLIN_PRIMITIVES
    | {
        "Char",
        "String",
        "Array",
        "List",
        "Set",
        "Map",
    }
)

# Fully-qualified names under these prefixes are used verbatim
BUILTIN_NAMESPACE_PREFIXES = ("kotlin.", "java.")

# Schema type keyword -> Kotlin type
KOTLIN_TYPE_MAPPING = {
    "string": "String",
    "boolean": "Boolean",
    "integer": "Int",
    "float": "Float",
    "long": "Long",
    "double": "Double",
    "number": "Double",
    "date-time": "Calendar",
    "date": "Calendar",
    "file": "java.io.File",
    "array": "Array",
    "list": "Array",
    "map": "Map",
    "object": "Empty",
    "binary": "Array<Byte>",
    "Date": "Calendar",
    "DateTime": "Calendar",
}

# Schema keyword -> constructor function used for default values
KOTLIN_INSTANTIATION_TYPES = {
    "array": "arrayOf",
    "list": "arrayOf",
    "map": "mapOf",
}

# Well-known type names -> fully-qualified Kotlin/Java type
KOTLIN_IMPORT_MAPPING = {
    "BigDecimal": "Double",
    "UUID": "java.util.UUID",
    "File": "java.io.File",
    "Date": "java.util.Date",
    "Timestamp": "java.sql.Timestamp",
    "DateTime": "java.time.LocalDateTime",
    "LocalDateTime": "java.time.LocalDateTime",
    "LocalDate": "java.time.LocalDate",
    "LocalTime": "java.time.LocalTime",
    "Calendar": "java.util.Calendar",
}

KOTLIN_SPECIAL_CHAR_REPLACEMENTS = ((";", "Semicolon"),)

# Kotlin hard keywords plus the soft/modifier keywords that break
# generated declarations. "data" is intentionally not reserved.
KOTLIN_RESERVED_WORDS = frozenset(
    {
        "abstract",
        "annotation",
        "as",
        "break",
        "case",
        "catch",
        "class",
        "companion",
        "const",
        "constructor",
        "continue",
        "crossinline",
        "delegate",
        "do",
        "else",
        "enum",
        "external",
        "false",
        "final",
        "finally",
        "for",
        "fun",
        "if",
        "in",
        "infix",
        "init",
        "inline",
        "inner",
        "interface",
        "internal",
        "is",
        "it",
        "lateinit",
        "lazy",
        "noinline",
        "null",
        "object",
        "open",
        "operator",
        "out",
        "override",
        "package",
        "private",
        "protected",
        "public",
        "reified",
        "return",
        "sealed",
        "super",
        "suspend",
        "tailrec",
        "this",
        "throw",
        "true",
        "try",
        "typealias",
        "typeof",
        "val",
        "var",
        "vararg",
        "when",
        "while",
    }
)

# Datatypes whose enum values are emitted as string literals
KOTLIN_STRING_TYPES = frozenset({"String", "kotlin.String", "Char"})

DEFAULT_SERVICE_NAME = "DefaultService"
SERVICE_SUFFIX = "Service"
EMPTY_ENUM_NAME = "EMPTY"
UNDERSCORE_NAME = "Underscore"
