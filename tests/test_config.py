"""Tests for schema_codegen/core/config.py and schema_codegen/languages/go/config.py."""

import json

import pytest

from schema_codegen.core.config import ConfigError, get_config_manager, load_config, validate_config
from schema_codegen.languages.go.config import GoConfig, validate_go_config


class TestLoadConfig:
    def test_go_defaults(self):
        config = load_config("go")
        assert isinstance(config, GoConfig)
        assert config.package_name == "openapi"
        assert config.with_validate
        assert not config.with_xml
        assert config.post_process_command is None

    def test_custom_overrides(self):
        config = load_config("go", custom_config={"package_name": "petstore", "with_xml": True})
        assert config.package_name == "petstore"
        assert config.with_xml

    def test_unknown_keys_go_to_custom(self):
        config = load_config("go", custom_config={"generate_interfaces": True})
        assert config.custom == {"generate_interfaces": True}

    def test_unknown_language(self):
        with pytest.raises(ConfigError, match="No configuration registered for language: rust"):
            load_config("rust")

    def test_invalid_value(self):
        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_config("go", custom_config={"name_mapping": 5})

    def test_list_languages(self):
        assert "go" in get_config_manager().list_languages()


class TestConfigFile:
    def test_load_json(self, tmp_path):
        path = tmp_path / "go.json"
        path.write_text(
            json.dumps(
                {
                    "package_name": "petstore",
                    "model_name_mapping": {"pet": "Animal"},
                    "import_mapping": {"time": "github.com/acme/clock"},
                }
            )
        )
        config = load_config("go", config_file=path)
        assert config.package_name == "petstore"
        assert config.model_name_mapping == {"pet": "Animal"}
        assert config.import_mapping == {"time": ("github.com/acme/clock",)}

    def test_custom_config_wins_over_file(self, tmp_path):
        path = tmp_path / "go.json"
        path.write_text(json.dumps({"package_name": "fromfile"}))
        config = load_config("go", custom_config={"package_name": "fromargs"}, config_file=path)
        assert config.package_name == "fromargs"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config("go", config_file=tmp_path / "missing.json")

    def test_not_json_suffix(self, tmp_path):
        path = tmp_path / "go.yaml"
        path.write_text("package_name: petstore")
        with pytest.raises(ConfigError, match="must be JSON"):
            load_config("go", config_file=path)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "go.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError, match="Invalid JSON"):
            load_config("go", config_file=path)

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "go.json"
        path.write_text("[1, 2]")
        with pytest.raises(ConfigError, match="JSON object"):
            load_config("go", config_file=path)

    def test_save_and_reload(self, tmp_path):
        config = load_config(
            "go",
            custom_config={"package_name": "petstore", "extra_reserved_words": ["client"], "flavor": "x"},
        )
        path = tmp_path / "saved.json"
        get_config_manager().save_config(config, path)

        saved = json.loads(path.read_text())
        assert saved["flavor"] == "x"
        assert "custom" not in saved

        reloaded = load_config("go", config_file=path)
        assert reloaded.package_name == "petstore"
        assert reloaded.extra_reserved_words == ("client",)
        assert reloaded.custom == {"flavor": "x"}


class TestFrozenConfig:
    def test_fields_are_read_only(self):
        config = GoConfig(name_mapping={"a": "B"})
        with pytest.raises(AttributeError):
            config.package_name = "other"
        with pytest.raises(TypeError):
            config.name_mapping["c"] = "D"

    def test_caller_dict_is_copied(self):
        mapping = {"a": "B"}
        config = GoConfig(name_mapping=mapping)
        mapping["c"] = "D"
        assert "c" not in config.name_mapping

    def test_to_dict(self):
        data = GoConfig(import_mapping={"time": "clock"}).to_dict()
        assert data["import_mapping"] == {"time": ["clock"]}
        assert data["package_name"] == "openapi"


class TestValidation:
    def test_clean_config(self):
        assert validate_go_config(GoConfig()) == []

    def test_empty_values_reported(self):
        config = GoConfig(name_mapping={"a": ""}, type_mapping={"integer": ""}, import_mapping={"time": ()})
        warnings = validate_config(config)
        assert "Empty value for 'a' in name_mapping" in warnings
        assert "Empty type for 'integer' in type_mapping" in warnings
        assert "Import 'time' is mapped to nothing in import_mapping" in warnings

    def test_bad_package_name(self):
        warnings = validate_go_config(GoConfig(package_name="Pet_Store"))
        assert "Package names should be lowercase" in warnings
