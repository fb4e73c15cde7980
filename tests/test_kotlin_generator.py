# tests/test_kotlin_generator.py

import os
from pathlib import Path

import pytest

from schema_codegen.codegen.core.schema import Operation, reference
from schema_codegen.codegen.core.generator import strip_path_separators
from schema_codegen.codegen.languages.kotlin import create_generator
from schema_codegen.codegen.languages.kotlin.config import KOTLIN_RESERVED_WORDS


class TestVarNames:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("pet_id", "petId"),
            ("created-at", "createdAt"),
            ("SOME_VALUE", "SOME_VALUE"),
            ("class", "`class`"),
            ("1st", "`1st`"),
            ("it", "`it`"),
            ("Name", "name"),
            ("PetType", "petType"),
            ("data", "data"),
            ("user name", "userName"),
            ("$", "value"),
            ("", ""),
        ],
    )
    def test_to_var_name(self, generator, name, expected):
        assert generator.to_var_name(name) == expected

    @pytest.mark.parametrize("word", sorted(KOTLIN_RESERVED_WORDS))
    def test_every_reserved_word_is_escaped(self, generator, word):
        escaped = generator.to_var_name(word)
        assert escaped == f"`{word}`"
        assert generator.reserved_words.is_reserved(
            generator.reserved_words.strip_escape(escaped)
        )

    def test_param_names_follow_var_names(self, generator):
        for name in ["pet_id", "class", "SOME_VALUE", "user name"]:
            assert generator.to_param_name(name) == generator.to_var_name(name)

    @pytest.mark.parametrize("name", ["petId", "createdAt", "SOME_VALUE", "name"])
    def test_var_names_are_stable(self, generator, name):
        assert generator.to_var_name(generator.to_var_name(name)) == generator.to_var_name(name)


class TestEnumNames:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("some-value", "some_value"),
            ("", "EMPTY"),
            ("class", "`class`"),
            ("123", "_123"),
            (";", "Semicolon"),
            ("___", "Underscore"),
            ("true", "`true`"),
        ],
    )
    def test_original_convention(self, generator, value, expected):
        assert generator.to_enum_var_name(value, "String") == expected

    @pytest.mark.parametrize(
        "convention, value, expected",
        [
            ("camelCase", "some-value", "someValue"),
            ("camelCase", "Class", "`class`"),
            ("camelCase", "", "eMPTY"),
            ("PascalCase", "some-value", "SomeValue"),
            ("PascalCase", "", "EMPTY"),
            ("snake_case", "some-value", "some_value"),
            ("snake_case", "SomeValue", "some_value"),
            ("snake_case", "", "empty"),
            ("UPPERCASE", "some-value", "SOME_VALUE"),
            ("UPPERCASE", "class", "CLASS"),
        ],
    )
    def test_configured_convention(self, make_generator, convention, value, expected):
        generator = make_generator(enumPropertyNaming=convention)
        assert generator.to_enum_var_name(value, "String") == expected

    def test_convention_does_not_affect_var_names(self, make_generator):
        generator = make_generator(enumPropertyNaming="UPPERCASE")
        assert generator.to_var_name("pet_id") == "petId"

    def test_custom_replacements(self, make_generator):
        generator = make_generator(specialCharReplacements={"@": "At"})
        assert generator.to_enum_var_name("a@b", "String") == "aAtb"
        assert generator.to_enum_var_name("a;b", "String") == "aSemicolonb"

    @pytest.mark.parametrize(
        "value, datatype, expected",
        [
            ("available", "String", '"available"'),
            ('say "hi"', "String", '"say hi"'),
            ("1", "Int", "1"),
        ],
    )
    def test_to_enum_value(self, generator, value, datatype, expected):
        assert generator.to_enum_value(value, datatype) == expected

    def test_to_enum_vars(self, generator):
        assert generator.to_enum_vars(["sold", ""], "String") == [
            {"name": "sold", "value": '"sold"'},
            {"name": "EMPTY", "value": '""'},
        ]

    def test_to_enum_name(self, generator):
        assert generator.to_enum_name("status") == "Status"


class TestModelNames:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("pet", "Pet"),
            ("pet_store", "PetStore"),
            ("pet-store", "PetStore"),
            ("pet.store", "Petstore"),
            ("kotlin.String", "kotlin.String"),
            ("java.math.BigDecimal", "java.math.BigDecimal"),
            ("BigDecimal", "Double"),
            ("UUID", "java.util.UUID"),
            ("class", "`Class`"),
            ("object", "`Object`"),
            ("Pet;Store", "PetSemicolonStore"),
            ("___", "Underscore"),
            ("user address", "UserAddress"),
            ("API_response", "APIResponse"),
            ("ApiResponse", "ApiResponse"),
        ],
    )
    def test_to_model_name(self, generator, name, expected):
        assert generator.to_model_name(name) == expected

    @pytest.mark.parametrize(
        "name", ["pet_store", "pet-store", "API_response", "user address", "___", "Pet;Store"]
    )
    def test_model_names_are_stable(self, generator, name):
        once = generator.to_model_name(name)
        assert generator.to_model_name(once) == once

    @pytest.mark.parametrize("name, expected", [("3d_secure", "3dSecure"), ("2fa", "2fa")])
    def test_leading_digit_prefix_is_camelized_away(self, generator, name, expected):
        assert generator.to_model_name(name) == expected
        assert generator.get_type_declaration(reference(f"#/definitions/{name}")) == expected

    def test_model_filename_matches_class_name(self, generator):
        assert generator.to_model_filename("pet-store") == "PetStore"
        assert generator.to_model_filename("pet_store") == generator.to_model_name("pet_store")

    @pytest.mark.parametrize(
        "tag, expected",
        [("", "DefaultService"), ("pet", "PetService"), ("userAccount", "UserAccountService")],
    )
    def test_to_api_name(self, generator, tag, expected):
        assert generator.to_api_name(tag) == expected


class TestEscaping:
    def test_escape_quotation_mark(self, generator):
        assert generator.escape_quotation_mark('a "quoted" word') == "a quoted word"

    def test_escape_unsafe_characters(self, generator):
        assert generator.escape_unsafe_characters("/* x */") == "/_* x *_/"

    def test_reserved_check_is_case_sensitive(self, generator):
        assert generator.is_reserved_word("when")
        assert not generator.is_reserved_word("When")


class TestOperations:
    @pytest.mark.parametrize(
        "path, expected",
        [
            ("/pets/", "pets"),
            ("/pets/{petId}/", "pets/{petId}"),
            ("//double//", "/double/"),
            ("/", ""),
            ("pets", "pets"),
        ],
    )
    def test_strip_path_separators(self, path, expected):
        assert strip_path_separators(path) == expected

    def test_from_operation_returns_new_operation(self, generator):
        operation = Operation(path="/pets/{petId}/", http_method="GET", tags=("pet",))
        normalized = generator.from_operation(operation)
        assert normalized.path == "pets/{petId}"
        assert normalized.tags == ("pet",)
        assert operation.path == "/pets/{petId}/"


class TestFoldersAndOptions:
    def test_folders(self, make_generator):
        generator = make_generator(packageName="io.swagger.petstore", outputFolder="out")
        assert generator.model_file_folder() == str(
            Path("out/src/main/kotlin/io/swagger/petstore/models")
        )
        assert generator.api_file_folder() == str(
            Path("out/src/main/kotlin/io/swagger/petstore/apis")
        )
        assert generator.api_doc_file_folder() == os.path.join("out", "docs", "")
        assert generator.model_doc_file_folder() == os.path.join("out", "docs", "")

    def test_default_doc_folder_keeps_separators(self, generator):
        assert generator.api_doc_file_folder() == os.path.join(".", "docs", "")

    def test_additional_properties(self, make_generator):
        generator = make_generator(
            packageName="io.swagger.petstore",
            artifactId="petstore-client",
            enumPropertyNaming="camelCase",
        )
        options = generator.additional_properties()
        assert options["packageName"] == "io.swagger.petstore"
        assert options["artifactId"] == "petstore-client"
        assert options["groupId"] == "fr.vestiairecollective"
        assert options["artifactVersion"] == "1.0.0"
        assert options["sourceFolder"] == "src/main/kotlin"
        assert options["modelPackage"] == "io.swagger.petstore.models"
        assert options["enumPropertyNaming"] == "camelCase"
        assert "outputFolder" not in options

    def test_create_generator_merges_keyword_options(self):
        generator = create_generator(
            {"packageName": "io.swagger.petstore"}, enumPropertyNaming="UPPERCASE"
        )
        assert generator.config.model_package == "io.swagger.petstore.models"
        assert generator.to_enum_var_name("sold", "String") == "SOLD"

    def test_language_metadata(self, generator):
        assert generator.language_name == "kotlin"
        assert generator.file_extension == ".kt"
