"""
Language-specific generator backends.

This module contains the naming and type backends for target languages.
"""

from .kotlin import KotlinGenerator, create_generator as create_kotlin_generator

__all__ = ["KotlinGenerator", "create_kotlin_generator"]
