"""
Naming utilities shared by all language backends.

Provides the selectable naming conventions for enum constants and the
casing helpers (camelize, underscore, title case) that the backends
compose into their identifier pipelines.
"""

import re
from enum import Enum
from typing import Callable, Dict, Optional


class NamingConvention(Enum):
    """Naming conventions selectable for enum constant names."""

    ORIGINAL = "original"  # as sanitized
    CAMEL_CASE = "camelCase"  # someValue
    PASCAL_CASE = "PascalCase"  # SomeValue
    SNAKE_CASE = "snake_case"  # some_value
    UPPERCASE = "UPPERCASE"  # SOME_VALUE

    @classmethod
    def values(cls) -> list[str]:
        """Option strings in declaration order."""
        return [member.value for member in cls]


_CLASS_NAME = re.compile(r"(\.?)(\w)([^.]*)$", re.ASCII)
_UNDERSCORE_CHAR = re.compile(r"(_)(.)")
_HYPHEN_CHAR = re.compile(r"(-)(.)")
_UPPER_RUN = re.compile(r"([A-Z]+)([A-Z][a-z])")
_LOWER_UPPER = re.compile(r"([a-z\d])([A-Z])", re.ASCII)
_NON_WORD = re.compile(r"[^a-zA-Z0-9_]")


def camelize(word: str, lowercase_first_letter: bool = False) -> str:
    """
    Convert a separated word to CamelCase.

    Slashes and dots act as word boundaries, ``_x`` becomes ``X`` and
    ``-x`` becomes ``X``. An underscore in front of a character that has
    no lower case form (upper case letters, digits) is simply dropped.

    Args:
        word: Word to convert
        lowercase_first_letter: Produce lowerCamelCase instead

    Returns:
        Camelized word

    Example:
        >>> camelize("pet_id", True)
        'petId'
        >>> camelize("some-value")
        'SomeValue'
    """
    word = word.replace("/", ".")

    word = "".join(part[0].upper() + part[1:] for part in word.split(".") if part)

    match = _CLASS_NAME.search(word)
    if match:
        word = (
            word[: match.start()]
            + match.group(1)
            + match.group(2).upper()
            + match.group(3)
        )

    match = _UNDERSCORE_CHAR.search(word)
    while match:
        following = match.group(2)
        upper = following.upper()
        if following == upper:
            word = word.replace("_", "", 1)
        else:
            word = word[: match.start()] + upper + word[match.end() :]
        match = _UNDERSCORE_CHAR.search(word)

    match = _HYPHEN_CHAR.search(word)
    while match:
        word = word[: match.start()] + match.group(2).upper() + word[match.end() :]
        match = _HYPHEN_CHAR.search(word)

    if lowercase_first_letter and word:
        word = word[0].lower() + word[1:]

    return word


def underscore(word: str) -> str:
    """
    Convert a CamelCase or hyphenated word to snake_case.

    Example:
        >>> underscore("SomeValue")
        'some_value'
        >>> underscore("XMLHttp")
        'xml_http'
    """
    word = word.replace(".", "/")
    word = word.replace("$", "__")
    word = _UPPER_RUN.sub(r"\1_\2", word)
    word = _LOWER_UPPER.sub(r"\1_\2", word)
    word = word.replace("-", "_").replace(" ", "_")
    return word.lower()


def title_case(word: str) -> str:
    """Upper-case the first character only."""
    return word[:1].upper() + word[1:]


def initial_caps(word: str) -> str:
    """Capitalize the first character, leaving the rest untouched."""
    return title_case(word)


def sanitize_name(name: Optional[str]) -> str:
    """
    Reduce an arbitrary schema name to identifier characters.

    Brackets, parentheses, dots, hyphens and spaces are turned into
    underscores (or dropped), anything else outside ``[A-Za-z0-9_]`` is
    removed.

    Example:
        >>> sanitize_name("created-at")
        'created_at'
        >>> sanitize_name("items[]")
        'items'
    """
    if name is None:
        return "ERROR_UNKNOWN"

    if name == "$":
        return "value"

    name = name.replace("[]", "")
    name = name.replace("[", "_")
    name = name.replace("]", "")
    name = name.replace("(", "_")
    name = name.replace(")", "")
    name = name.replace(".", "_")
    name = name.replace("-", "_")
    name = name.replace(" ", "_")
    return _NON_WORD.sub("", name)


def _camel_convention(token: str) -> str:
    # drops hyphens and underscores
    return camelize(token, lowercase_first_letter=True)


def _pascal_convention(token: str) -> str:
    return title_case(camelize(token))


def _snake_convention(token: str) -> str:
    # drops hyphens, keeps underscores
    return underscore(token)


CONVENTION_TRANSFORMS: Dict[NamingConvention, Callable[[str], str]] = {
    NamingConvention.ORIGINAL: lambda token: token,
    NamingConvention.CAMEL_CASE: _camel_convention,
    NamingConvention.PASCAL_CASE: _pascal_convention,
    NamingConvention.SNAKE_CASE: _snake_convention,
    NamingConvention.UPPERCASE: str.upper,
}


def apply_convention(token: str, convention: NamingConvention) -> str:
    """
    Apply a naming convention to an already sanitized token.

    Args:
        token: Sanitized token
        convention: Convention to apply

    Returns:
        Re-cased token (reserved-word escaping is left to the caller)
    """
    return CONVENTION_TRANSFORMS[convention](token)
