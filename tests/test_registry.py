"""Tests for schema_codegen/registry.py."""

import json

import pytest

from schema_codegen import GoCodegen, get_generator, list_supported_languages
from schema_codegen.languages.go.config import GoConfig
from schema_codegen.registry import GeneratorRegistry, RegistryError


class TestRegistry:
    def test_go_registered(self):
        assert "go" in list_supported_languages()
        assert isinstance(get_generator("go"), GoCodegen)

    def test_alias(self):
        assert isinstance(get_generator("golang"), GoCodegen)
        assert isinstance(get_generator("Go"), GoCodegen)

    def test_dict_config(self):
        assert get_generator("go", {"with_xml": True}).config.with_xml

    def test_config_object(self):
        config = GoConfig(package_name="petstore")
        assert get_generator("go", config).config is config

    def test_config_file(self, tmp_path):
        path = tmp_path / "go.json"
        path.write_text(json.dumps({"package_name": "petstore"}))
        assert get_generator("go", path).config.package_name == "petstore"

    def test_unknown_language(self):
        with pytest.raises(RegistryError, match="No generator registered for language: rust"):
            get_generator("rust")

    def test_invalid_config(self):
        with pytest.raises(RegistryError, match="Failed to create go generator"):
            get_generator("go", {"name_mapping": 5})
        with pytest.raises(RegistryError, match="Invalid config type"):
            get_generator("go", 42)

    def test_register_rejects_non_generator(self):
        with pytest.raises(RegistryError):
            GeneratorRegistry().register("text", str)

    def test_alias_conflict(self):
        registry = GeneratorRegistry()
        registry.register("go", GoCodegen, aliases=["golang"])
        assert registry.is_supported("golang")
        with pytest.raises(RegistryError, match="already points to 'go'"):
            registry.register("gopher", GoCodegen, aliases=["golang"])
