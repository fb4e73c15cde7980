"""
Configuration management for code generation.

Handles loading and merging the generator option bundle from defaults,
JSON files and explicit overrides. The result is a frozen GeneratorConfig
that is built once at startup and shared read-only by every resolver.
"""

import json
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

from ...logging_config import get_logger
from .naming import NamingConvention

logger = get_logger(__name__)


class ConfigurationError(ValueError):
    """Exception raised for configuration-related errors."""

    pass


def parse_naming_convention(value: Union[str, NamingConvention]) -> NamingConvention:
    """
    Parse an enumPropertyNaming option value.

    Raises:
        ConfigurationError: If the value is not one of the known conventions
    """
    if isinstance(value, NamingConvention):
        return value

    try:
        return NamingConvention(value)
    except ValueError:
        lines = [f"{value} is an invalid enum property naming option. Please choose from:"]
        lines.extend(f"  {option}" for option in NamingConvention.values())
        raise ConfigurationError("\n".join(lines)) from None


def _frozen_mapping(value: Optional[Mapping[str, str]], option: str) -> Mapping[str, str]:
    if value is None:
        return MappingProxyType({})
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"{option} must be a mapping, got {type(value).__name__}")
    for key, mapped in value.items():
        if not isinstance(key, str) or not isinstance(mapped, str):
            raise ConfigurationError(
                f"{option} entries must map strings to strings, got {key!r}: {mapped!r}"
            )
    return MappingProxyType(dict(value))


def _replacement_pairs(value: Any) -> Tuple[Tuple[str, str], ...]:
    """Normalize specialCharReplacements given as a mapping or as pairs."""
    if value is None:
        return ()
    if isinstance(value, Mapping):
        value = list(value.items())
    elif isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        raise ConfigurationError(
            f"specialCharReplacements must be a mapping or a list of pairs, "
            f"got {type(value).__name__}"
        )

    pairs = []
    for item in value:
        if (
            not isinstance(item, (tuple, list))
            or len(item) != 2
            or not all(isinstance(part, str) for part in item)
        ):
            raise ConfigurationError(
                f"specialCharReplacements entries must be (character, replacement) "
                f"string pairs, got {item!r}"
            )
        pairs.append((item[0], item[1]))
    return tuple(pairs)


@dataclass(frozen=True)
class GeneratorConfig:
    """Immutable option bundle for a generator backend."""

    # Output layout
    output_folder: str = "."
    source_folder: str = "src/main/kotlin"
    api_doc_path: str = "docs/"
    model_doc_path: str = "docs/"

    # Packaging metadata (passed through verbatim)
    package_name: Optional[str] = None
    group_id: str = "fr.vestiairecollective"
    artifact_id: Optional[str] = None
    artifact_version: str = "1.0.0"
    model_package: str = ""
    api_package: str = ""

    # Naming
    enum_property_naming: NamingConvention = NamingConvention.ORIGINAL

    # Table overrides, merged over the backend defaults
    type_mappings: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    import_mappings: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    special_char_replacements: Tuple[Tuple[str, str], ...] = ()

    def __post_init__(self):
        """
        Validate every option and normalize enum and mapping fields so
        instances are truly read-only.

        Raises:
            ConfigurationError: On the first option with a wrong type
        """
        for name in _TEXT_FIELDS:
            self._check_text(name, optional=False)
        for name in _OPTIONAL_TEXT_FIELDS:
            self._check_text(name, optional=True)

        object.__setattr__(
            self,
            "enum_property_naming",
            parse_naming_convention(self.enum_property_naming),
        )
        object.__setattr__(
            self, "type_mappings", _frozen_mapping(self.type_mappings, "typeMappings")
        )
        object.__setattr__(
            self,
            "import_mappings",
            _frozen_mapping(self.import_mappings, "importMappings"),
        )

        object.__setattr__(
            self,
            "special_char_replacements",
            _replacement_pairs(self.special_char_replacements),
        )

    def _check_text(self, name: str, optional: bool):
        value = getattr(self, name)
        if value is None and optional:
            return
        if not isinstance(value, str):
            raise ConfigurationError(
                f"{_OPTION_NAMES.get(name, name)} must be a string, "
                f"got {type(value).__name__}"
            )


_TEXT_FIELDS = (
    "output_folder",
    "source_folder",
    "api_doc_path",
    "model_doc_path",
    "group_id",
    "artifact_version",
    "model_package",
    "api_package",
)
_OPTIONAL_TEXT_FIELDS = ("package_name", "artifact_id")


# Option keys as used by the host generator, mapped to GeneratorConfig fields
OPTION_KEYS = {
    "outputFolder": "output_folder",
    "sourceFolder": "source_folder",
    "apiDocPath": "api_doc_path",
    "modelDocPath": "model_doc_path",
    "packageName": "package_name",
    "groupId": "group_id",
    "artifactId": "artifact_id",
    "artifactVersion": "artifact_version",
    "modelPackage": "model_package",
    "apiPackage": "api_package",
    "enumPropertyNaming": "enum_property_naming",
    "typeMappings": "type_mappings",
    "importMappings": "import_mappings",
    "specialCharReplacements": "special_char_replacements",
}

# GeneratorConfig field -> option key, for error messages
_OPTION_NAMES = {name: key for key, name in OPTION_KEYS.items()}

IGNORED_OPTIONS = {"invokerPackage", "invoker_package"}


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self, defaults: Optional[Dict[str, Any]] = None):
        """
        Initialize configuration manager.

        Args:
            defaults: Option values applied before files and overrides
        """
        self._defaults: Dict[str, Any] = dict(defaults or {})

    def load(
        self,
        options: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GeneratorConfig:
        """
        Build a GeneratorConfig from defaults, a JSON file and overrides.

        Args:
            options: Explicit option overrides (camelCase or snake_case keys)
            config_file: Path to JSON configuration file

        Returns:
            Frozen generator configuration

        Raises:
            ConfigurationError: On unreadable files or invalid option values
        """
        merged = dict(self._defaults)

        if config_file:
            merged.update(self._load_config_file(config_file))

        if options:
            merged.update(options)

        return self._dict_to_config(merged)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigurationError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == ".json":
            raise ConfigurationError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in configuration file {path}: {str(e)}"
            ) from e
        except OSError as e:
            raise ConfigurationError(
                f"Failed to load configuration file {path}: {str(e)}"
            ) from e

        if not isinstance(config, dict):
            raise ConfigurationError(
                f"Configuration file must contain a JSON object: {path}"
            )

        logger.debug("Loaded %d option(s) from %s", len(config), path)
        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Convert an option dictionary to a GeneratorConfig instance."""
        known_fields = {f.name for f in fields(GeneratorConfig)}
        config_args: Dict[str, Any] = {}

        for key, value in config_dict.items():
            if key in IGNORED_OPTIONS:
                logger.warning(
                    "%s is ignored by this generator. Use packageName.", key
                )
                continue

            name = OPTION_KEYS.get(key, key)
            if name not in known_fields:
                logger.debug("Ignoring unknown option: %s", key)
                continue
            config_args[name] = value

        config = GeneratorConfig(**config_args)

        # packageName seeds the sub-packages that were not set explicitly
        if config.package_name:
            seeded = {}
            if "model_package" not in config_args:
                seeded["model_package"] = f"{config.package_name}.models"
            if "api_package" not in config_args:
                seeded["api_package"] = f"{config.package_name}.apis"
            if seeded:
                config = replace(config, **seeded)

        return config


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    options: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        options: Explicit option overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged, frozen configuration
    """
    return get_config_manager().load(options, config_file)


def config_to_options(config: GeneratorConfig) -> Dict[str, Any]:
    """Render a configuration back into host-generator option keys."""
    options = {}
    for key, name in OPTION_KEYS.items():
        value = getattr(config, name)
        if isinstance(value, NamingConvention):
            value = value.value
        elif isinstance(value, Mapping):
            value = dict(value)
        elif name == "special_char_replacements":
            value = dict(value)
        options[key] = value
    return options


def save_config(config: GeneratorConfig, output_path: Union[str, Path]):
    """Save configuration to a JSON file."""
    path = Path(output_path)
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(config_to_options(config), f, indent=2, ensure_ascii=False)
    except OSError as e:
        raise ConfigurationError(f"Failed to save configuration to {path}: {str(e)}") from e
