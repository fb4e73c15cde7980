# tests/test_kotlin_naming.py

import pytest

from schema_codegen.codegen.languages.kotlin.config import KOTLIN_RESERVED_WORDS
from schema_codegen.codegen.languages.kotlin.naming import (
    ReservedWordGuard,
    SpecialCharacterTranscoder,
)


@pytest.fixture
def guard():
    return ReservedWordGuard()


@pytest.fixture
def transcoder():
    return SpecialCharacterTranscoder()


def test_reserved_words_are_case_sensitive(guard):
    assert guard.is_reserved("class")
    assert not guard.is_reserved("Class")
    assert not guard.is_reserved("CLASS")


def test_data_is_not_reserved(guard):
    assert "data" not in KOTLIN_RESERVED_WORDS
    assert not guard.is_reserved("data")


def test_escape_wraps_in_backticks(guard):
    assert guard.escape("class") == "`class`"
    assert guard.strip_escape("`class`") == "class"
    assert guard.strip_escape("class") == "class"
    assert guard.is_escaped("`fun`")
    assert not guard.is_escaped("fun")


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("___", "Underscore"),
        ("_", "Underscore"),
        ("123abc", "_123abc"),
        ("a;b", "aSemicolonb"),
        ("some value!", "some_value_"),
        ("a--b", "a_b"),
        ("some-value", "some_value"),
        ("héllo", "h_llo"),
        ("", ""),
    ],
)
def test_sanitize(transcoder, raw, expected):
    assert transcoder.sanitize(raw) == expected


@pytest.mark.parametrize(
    "name", ["petId", "_123abc", "some_value", "Underscore", "aSemicolonb", "A_B_C"]
)
def test_sanitize_is_idempotent(transcoder, name):
    assert transcoder.sanitize(transcoder.sanitize(name)) == transcoder.sanitize(name)
    assert transcoder.sanitize(name) == name


def test_underscore_is_never_table_driven():
    transcoder = SpecialCharacterTranscoder([("_", "X"), ("@", "At")])
    assert transcoder.replacements == (("@", "At"),)
    assert transcoder.sanitize("a_b@c") == "a_bAtc"


def test_replacements_apply_in_order():
    transcoder = SpecialCharacterTranscoder([("<=", "LessOrEqual"), ("<", "Less")])
    assert transcoder.sanitize("a<=b<c") == "aLessOrEqualbLessc"
