"""
schema_codegen - naming and type resolution for schema-driven code generators.
"""

__version__ = "0.1.0"
