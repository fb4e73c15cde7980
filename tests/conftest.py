# tests/conftest.py

import pytest

from schema_codegen.codegen.core.config import load_config
from schema_codegen.codegen.languages.kotlin import KotlinGenerator


@pytest.fixture
def generator():
    """Kotlin generator with default options."""
    return KotlinGenerator(load_config())


@pytest.fixture
def make_generator():
    """Factory for Kotlin generators with explicit options."""

    def _make(**options):
        return KotlinGenerator(load_config(options))

    return _make


@pytest.fixture
def petstore_definitions():
    return {
        "Pet": {
            "description": "A pet for sale in the pet store",
            "properties": {
                "id": {"type": "integer", "format": "int64"},
                "name": {"type": "string"},
                "tags": {"type": "array", "items": {"$ref": "#/definitions/Tag"}},
                "status": {
                    "type": "string",
                    "enum": ["available", "pending", "sold"],
                },
                "created-at": {"type": "string", "format": "date-time"},
                "attributes": {
                    "type": "object",
                    "additionalProperties": {"type": "string"},
                },
            },
        },
        "Tag": {
            "properties": {
                "id": {"type": "integer", "format": "int64"},
                "name": {"type": "string"},
            },
        },
    }
