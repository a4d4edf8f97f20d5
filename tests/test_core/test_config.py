"""Tests for configuration loading."""

import json

import pytest

from boilergen.core.config import (
    DEFAULT_TARGETS,
    ConfigError,
    ConfigManager,
    GeneratorConfig,
    load_config,
)


class TestGetConfig:
    def test_defaults(self):
        config = load_config()
        assert config.package_name == "models"
        assert config.targets == list(DEFAULT_TARGETS)
        assert config.imports == []
        assert config.gofmt_command == "gofmt"

    def test_overrides_and_custom_keys(self):
        config = load_config({"package_name": "store", "generated_by": "ci"})
        assert config.package_name == "store"
        assert config.custom == {"generated_by": "ci"}

    def test_file_then_overrides(self, tmp_path):
        path = tmp_path / "boilergen.json"
        path.write_text(json.dumps({"package_name": "fromfile", "imports": ["time"]}))

        config = ConfigManager().get_config({"package_name": "override"}, path)
        assert config.package_name == "override"
        assert config.imports == ["time"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(config_file=tmp_path / "missing.json")

    def test_requires_json_suffix(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("package_name: x")
        with pytest.raises(ConfigError, match="must be JSON"):
            load_config(config_file=path)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError, match="Invalid JSON"):
            load_config(config_file=path)

    def test_requires_object(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("[1, 2]")
        with pytest.raises(ConfigError, match="JSON object"):
            load_config(config_file=path)

    def test_defaults_are_not_shared(self):
        first = load_config()
        first.targets.append("upsert")
        first.imports.append("time")

        second = load_config()
        assert second.targets == list(DEFAULT_TARGETS)
        assert second.imports == []

    def test_override_lists_are_copied(self):
        manager = ConfigManager()
        overrides = {"targets": ["struct"], "imports": ["time"]}
        config = manager.get_config(overrides)
        config.targets.append("insert")
        assert overrides["targets"] == ["struct"]
        assert config.imports is not overrides["imports"]

    def test_targets_must_be_list(self):
        with pytest.raises(ConfigError, match="'targets' must be a list"):
            load_config({"targets": "struct"})


class TestValidateConfig:
    def test_valid(self):
        assert ConfigManager().validate_config(GeneratorConfig()) == []

    def test_bad_package_name(self):
        warnings = ConfigManager().validate_config(GeneratorConfig(package_name="my-models"))
        assert warnings == ["Invalid Go package name: my-models"]

    def test_uppercase_package_name(self):
        warnings = ConfigManager().validate_config(GeneratorConfig(package_name="Models"))
        assert warnings == ["Go package names should be lowercase: Models"]

    def test_unknown_and_empty_targets(self):
        manager = ConfigManager()
        assert manager.validate_config(GeneratorConfig(targets=["struct", "upsert"])) == [
            "Unknown targets: upsert"
        ]
        assert manager.validate_config(GeneratorConfig(targets=[])) == ["No targets configured"]
