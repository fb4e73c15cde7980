# tests/test_registry.py

import pytest

from schema_codegen.codegen import (
    ConfigurationError,
    GeneratorConfig,
    RegistryError,
    describe_language,
    get_generator,
    is_language_supported,
    list_supported_languages,
)
from schema_codegen.codegen.languages.kotlin import KotlinGenerator
from schema_codegen.codegen.registry import GeneratorRegistry


@pytest.mark.parametrize("language", ["kotlin", "kt", "KOTLIN"])
def test_kotlin_is_registered(language):
    assert is_language_supported(language)
    assert isinstance(get_generator(language), KotlinGenerator)


def test_list_supported_languages():
    assert "kotlin" in list_supported_languages()


def test_unknown_language():
    with pytest.raises(RegistryError, match="No generator registered"):
        get_generator("cobol")


def test_config_forms():
    from_dict = get_generator("kotlin", {"packageName": "io.swagger"})
    from_config = get_generator("kotlin", GeneratorConfig(package_name="io.swagger"))

    assert from_dict.config.model_package == "io.swagger.models"
    # a ready-made config is used as is
    assert from_config.config.model_package == ""


def test_config_file_path(tmp_path):
    path = tmp_path / "kotlin.json"
    path.write_text('{"enumPropertyNaming": "UPPERCASE"}', encoding="utf-8")
    generator = get_generator("kotlin", str(path))
    assert generator.to_enum_var_name("sold", "String") == "SOLD"


def test_invalid_config_type():
    with pytest.raises(ConfigurationError):
        get_generator("kotlin", 42)


def test_register_rejects_non_generator():
    registry = GeneratorRegistry()
    with pytest.raises(RegistryError):
        registry.register("text", str)


def test_alias_conflicts():
    registry = GeneratorRegistry()
    registry.register("kotlin", KotlinGenerator, aliases=["kt"])
    registry.register("kotlin-server", KotlinGenerator)

    with pytest.raises(RegistryError, match="conflicts"):
        registry.register("kotlin-client", KotlinGenerator, aliases=["kotlin"])
    with pytest.raises(RegistryError, match="already points"):
        registry.register("kotlin-spring", KotlinGenerator, aliases=["kt"])


def test_unregister_drops_aliases():
    registry = GeneratorRegistry()
    registry.register("kotlin", KotlinGenerator, aliases=["kt"])
    assert registry.get_aliases_for_language("kotlin") == ["kt"]

    registry.unregister("kotlin")
    assert not registry.is_supported("kotlin")
    assert not registry.is_supported("kt")


def test_describe_language():
    info = describe_language("KT")
    assert info == {
        "language": "kotlin",
        "aliases": ["kt"],
        "generator": "KotlinGenerator",
        "file_extension": ".kt",
        "reserved_word_escape": "`class`",
    }


def test_rejected_registration_leaves_registry_unchanged():
    registry = GeneratorRegistry()
    registry.register("kotlin", KotlinGenerator, aliases=["kt"])

    with pytest.raises(RegistryError):
        registry.register("kotlin-client", KotlinGenerator, aliases=["kt"])
    assert not registry.is_supported("kotlin-client")


def test_unregister_by_alias():
    registry = GeneratorRegistry()
    registry.register("kotlin", KotlinGenerator, aliases=["kt"])
    registry.unregister("kt")
    assert registry.list_languages() == []


def test_public_error_types():
    import schema_codegen.codegen as codegen

    errors = sorted(name for name in codegen.__all__ if name.endswith("Error"))
    assert errors == ["ConfigurationError", "RegistryError"]
