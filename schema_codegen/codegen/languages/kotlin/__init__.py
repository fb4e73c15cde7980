"""
Kotlin generator backend.

Resolves Kotlin identifiers and type declarations from schema
descriptors, escaping reserved words with backticks.
"""

from typing import Any, Dict, Optional

from ...core.config import load_config
from .generator import KotlinGenerator
from .naming import ReservedWordGuard, SpecialCharacterTranscoder
from .types import KotlinImportResolver, KotlinTypeResolver, KotlinTypeTables

__all__ = [
    "KotlinGenerator",
    "KotlinTypeTables",
    "KotlinTypeResolver",
    "KotlinImportResolver",
    "ReservedWordGuard",
    "SpecialCharacterTranscoder",
    "create_generator",
]


def create_generator(options: Optional[Dict[str, Any]] = None, **kwargs) -> KotlinGenerator:
    """
    Create a Kotlin generator from host-generator options.

    Args:
        options: Option bundle (packageName, enumPropertyNaming, ...)
        **kwargs: Additional options, merged over ``options``

    Returns:
        Configured KotlinGenerator instance
    """
    merged = dict(options or {})
    merged.update(kwargs)
    return KotlinGenerator(load_config(merged))


# Example usage:
#
# generator = create_generator(packageName="io.swagger.petstore", enumPropertyNaming="UPPERCASE")
# generator.to_model_name("pet-category")  # "PetCategory"
