"""Unit tests for configuration management."""

import json

import pytest

from writergen.codegen.core.config import (
    DEFAULT_MODULE_NAME,
    ConfigError,
    ConfigManager,
    GeneratorConfig,
    load_config,
)


class TestGeneratorConfig:
    """Tests for GeneratorConfig."""

    def test_default_values(self) -> None:
        config = GeneratorConfig()

        assert config.module_name == DEFAULT_MODULE_NAME == "Ovirt::SDK::V4"
        assert config.indent == "  "
        assert config.attribute_names == ("href", "id")
        assert config.add_comments is True
        assert config.module_config().module_path == "ovirt/sdk/v4"

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            GeneratorConfig().module_name = "Other"


class TestConfigManager:
    """Tests for ConfigManager."""

    def test_defaults(self) -> None:
        config = ConfigManager().get_config()
        assert config == GeneratorConfig()

    def test_overrides_skip_none(self) -> None:
        config = load_config({"module_name": None, "indent_size": 4})
        assert config.module_name == DEFAULT_MODULE_NAME
        assert config.indent_size == 4

    def test_file_then_overrides(self, tmp_path) -> None:
        path = tmp_path / "writergen.json"
        path.write_text(
            json.dumps(
                {
                    "module_name": "My::Sdk",
                    "extra_reserved_words": ["object"],
                    "indent_size": 4,
                    "gem_name": "my-sdk",
                }
            ),
            encoding="utf-8",
        )

        config = load_config({"indent_size": 3}, config_file=path)

        assert config.module_name == "My::Sdk"
        assert config.extra_reserved_words == ("object",)
        assert config.indent_size == 3
        assert config.custom == {"gem_name": "my-sdk"}

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            load_config(config_file=tmp_path / "missing.json")

    def test_not_json_file(self, tmp_path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("module_name: X", encoding="utf-8")
        with pytest.raises(ConfigError, match="must be JSON"):
            load_config(config_file=path)

    def test_invalid_json(self, tmp_path) -> None:
        path = tmp_path / "config.json"
        path.write_text("{", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid JSON"):
            load_config(config_file=path)

    def test_not_an_object(self, tmp_path) -> None:
        path = tmp_path / "config.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(config_file=path)

    def test_reserved_words_must_be_list(self) -> None:
        with pytest.raises(ConfigError):
            load_config({"extra_reserved_words": "object"})

    def test_validate_config(self) -> None:
        manager = ConfigManager()
        assert manager.validate_config(GeneratorConfig()) == []

        warnings = manager.validate_config(
            GeneratorConfig(
                module_name="Ovirt::sdk", indent_size=0, line_ending="\r", attribute_names=()
            )
        )
        assert len(warnings) == 4
        assert "'sdk'" in warnings[0]
