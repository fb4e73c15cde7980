"""
Backend registry.

Maps language names and their aliases (case-insensitive) to CodeGenerator
subclasses and builds configured backends from option bundles.
"""

from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Type, Union

from ..logging_config import get_logger
from .core.config import ConfigurationError, GeneratorConfig, load_config
from .core.generator import CodeGenerator

logger = get_logger(__name__)

ConfigSource = Union[GeneratorConfig, Dict[str, Any], str, Path, None]


class RegistryError(Exception):
    """Exception raised for unknown languages and bad registrations."""

    pass


def _coerce_config(config: ConfigSource) -> GeneratorConfig:
    """Turn any accepted config source into a frozen GeneratorConfig."""
    if isinstance(config, GeneratorConfig):
        return config
    if config is None:
        return load_config()
    if isinstance(config, dict):
        return load_config(options=config)
    if isinstance(config, (str, Path)):
        return load_config(config_file=config)
    raise ConfigurationError(f"Invalid config type: {type(config).__name__}")


class GeneratorRegistry:
    """Language name -> backend class lookup."""

    def __init__(self):
        self._backends: Dict[str, Type[CodeGenerator]] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        language: str,
        generator_class: Type[CodeGenerator],
        aliases: Optional[Iterable[str]] = None,
        replace: bool = False,
    ):
        """
        Register a backend class under a language name.

        Aliases are validated before anything is stored, so a rejected
        registration leaves the registry unchanged.

        Args:
            language: Primary language name (e.g., 'kotlin')
            generator_class: CodeGenerator subclass
            aliases: Alternative names for the language
            replace: Overwrite an existing registration

        Raises:
            RegistryError: If the class is not a backend or an alias is taken
        """
        if not (isinstance(generator_class, type) and issubclass(generator_class, CodeGenerator)):
            raise RegistryError(f"{generator_class!r} does not inherit from CodeGenerator")

        key = language.lower()
        if key in self._backends and not replace:
            logger.debug("%s already registered, keeping %s", key, self._backends[key].__name__)
            return

        alias_keys = [alias.lower() for alias in aliases or () if alias.lower() != key]
        if not replace:
            for alias in alias_keys:
                if alias in self._backends:
                    raise RegistryError(f"Alias '{alias}' conflicts with registered language '{alias}'")
                target = self._aliases.get(alias)
                if target is not None and target != key:
                    raise RegistryError(f"Alias '{alias}' already points to '{target}'")

        self._backends[key] = generator_class
        for alias in alias_keys:
            self._aliases[alias] = key

        logger.debug("Registered %s backend: %s", key, generator_class.__name__)

    def unregister(self, language: str):
        """Remove a language and every alias pointing at it."""
        key = self._aliases.get(language.lower(), language.lower())
        self._backends.pop(key, None)
        self._aliases = {alias: target for alias, target in self._aliases.items() if target != key}

    def canonical_name(self, language: str) -> str:
        """
        Primary name for a language or alias.

        Raises:
            RegistryError: If the language is unknown
        """
        key = language.lower()
        key = self._aliases.get(key, key)
        if key not in self._backends:
            raise RegistryError(
                f"No generator registered for language: {language}. "
                f"Available: {', '.join(self.list_languages()) or 'none'}"
            )
        return key

    def get_generator_class(self, language: str) -> Type[CodeGenerator]:
        return self._backends[self.canonical_name(language)]

    def create_generator(self, language: str, config: ConfigSource = None) -> CodeGenerator:
        """
        Build a configured backend.

        Args:
            language: Language name or alias
            config: GeneratorConfig, option dict, JSON file path, or None for defaults

        Raises:
            RegistryError: If the language is unknown
            ConfigurationError: If the configuration is invalid
        """
        generator_class = self.get_generator_class(language)
        return generator_class(_coerce_config(config))

    def describe(self, language: str) -> Dict[str, Any]:
        """Summary of a backend: names, file extension and default options."""
        key = self.canonical_name(language)
        generator = self._backends[key](load_config())
        return {
            "language": key,
            "aliases": self.get_aliases_for_language(key),
            "generator": type(generator).__name__,
            "file_extension": generator.file_extension,
            "reserved_word_escape": generator.to_var_name("class"),
        }

    def list_languages(self) -> List[str]:
        return sorted(self._backends)

    def get_aliases_for_language(self, language: str) -> List[str]:
        key = language.lower()
        return sorted(alias for alias, target in self._aliases.items() if target == key)

    def is_supported(self, language: str) -> bool:
        key = language.lower()
        return key in self._backends or key in self._aliases


_global_registry: Optional[GeneratorRegistry] = None


def get_registry() -> GeneratorRegistry:
    """Global registry with the bundled backends registered."""
    global _global_registry
    if _global_registry is None:
        _global_registry = GeneratorRegistry()
        _register_bundled_backends(_global_registry)
    return _global_registry


def _register_bundled_backends(registry: GeneratorRegistry):
    from .languages.kotlin import KotlinGenerator

    registry.register("kotlin", KotlinGenerator, aliases=["kt"])


def register_generator(
    language: str,
    generator_class: Type[CodeGenerator],
    aliases: Optional[Iterable[str]] = None,
):
    """Register a backend in the global registry."""
    get_registry().register(language, generator_class, aliases)


def get_generator(language: str, config: ConfigSource = None) -> CodeGenerator:
    """Build a configured backend from the global registry."""
    return get_registry().create_generator(language, config)


def describe_language(language: str) -> Dict[str, Any]:
    return get_registry().describe(language)


def list_supported_languages() -> List[str]:
    return get_registry().list_languages()


def is_language_supported(language: str) -> bool:
    return get_registry().is_supported(language)
