"""
Kotlin-specific naming utilities and sanitization.

Handles Kotlin reserved words (escaped with backticks rather than
mangled) and the character rules for Kotlin identifiers.
"""

import re
from typing import Iterable, Tuple

from .config import (
    KOTLIN_RESERVED_WORDS,
    KOTLIN_SPECIAL_CHAR_REPLACEMENTS,
    UNDERSCORE_NAME,
)

_ESCAPE = "`"
_DISALLOWED_RUN = re.compile(r"[^a-zA-Z0-9_]+")
_ONLY_UNDERSCORES = re.compile(r"_+")


class ReservedWordGuard:
    """Case-sensitive reserved word check with backtick escaping."""

    def __init__(self, reserved_words: Iterable[str] = KOTLIN_RESERVED_WORDS):
        self._reserved_words = frozenset(reserved_words)

    @property
    def reserved_words(self) -> frozenset:
        return self._reserved_words

    def is_reserved(self, word: str) -> bool:
        """Return True if ``word`` is a reserved word (exact case)."""
        return word in self._reserved_words

    def escape(self, word: str) -> str:
        """Wrap ``word`` in backticks so Kotlin accepts it as a name."""
        return f"{_ESCAPE}{word}{_ESCAPE}"

    def strip_escape(self, word: str) -> str:
        """Remove a backtick escape added by escape()."""
        if len(word) >= 2 and word.startswith(_ESCAPE) and word.endswith(_ESCAPE):
            return word[1:-1]
        return word

    def is_escaped(self, word: str) -> bool:
        return self.strip_escape(word) != word


class SpecialCharacterTranscoder:
    """
    Replaces characters that are not valid in Kotlin identifiers.

    Table entries are applied first (underscore is never table-driven),
    then every other run of disallowed characters collapses to a single
    underscore. Names starting with a digit get an underscore prefix, and
    names made only of underscores, which Kotlin reserves, become
    ``Underscore``.
    """

    def __init__(
        self,
        replacements: Iterable[Tuple[str, str]] = KOTLIN_SPECIAL_CHAR_REPLACEMENTS,
    ):
        self._replacements: Tuple[Tuple[str, str], ...] = tuple(
            (key, value) for key, value in replacements if key and key != "_"
        )

    @property
    def replacements(self) -> Tuple[Tuple[str, str], ...]:
        return self._replacements

    def sanitize(self, raw: str) -> str:
        """
        Sanitize a raw schema name into Kotlin identifier characters.

        Example:
            >>> SpecialCharacterTranscoder().sanitize("a;b")
            'aSemicolonb'
            >>> SpecialCharacterTranscoder().sanitize("123abc")
            '_123abc'
        """
        word = raw
        for key, value in self._replacements:
            word = word.replace(key, value)

        word = _DISALLOWED_RUN.sub("_", word)

        if word[:1].isdigit():
            word = f"_{word}"

        if _ONLY_UNDERSCORES.fullmatch(word):
            word = UNDERSCORE_NAME

        return word
