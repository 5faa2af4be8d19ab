"""
Tests for Configuration Management

Tests assembly configuration loading and resolved value lookup.
"""

import pytest
import yaml

from template_system.config import AssemblyConfig, ConfigurationManager
from template_system.error_handling import ConfigurationError, ErrorCodes


class TestAssemblyConfig:
    """Test AssemblyConfig model."""

    def test_defaults(self):
        config = AssemblyConfig()

        assert config.template_name == "3scale-api-management"
        assert config.components is None
        assert config.output_format == "yaml"

    def test_invalid_output_format(self):
        with pytest.raises(ValueError, match="Output format"):
            AssemblyConfig(output_format="xml")

    @pytest.mark.parametrize("components", ["zync", ["zync", 1]])
    def test_invalid_components(self, components):
        with pytest.raises(ValueError, match="list of component names"):
            AssemblyConfig(components=components)

    def test_round_trip_dict(self):
        config = AssemblyConfig(template_name="t", components=["zync"])

        assert AssemblyConfig.from_dict(config.to_dict()) == config


class TestConfigurationManager:
    """Test configuration manager functionality."""

    def create_test_config(self, config_dir, data):
        config_file = config_dir / "assembly-config.yaml"
        with open(config_file, "w") as f:
            yaml.dump(data, f)
        return config_file

    def test_defaults_without_file(self, temp_workspace):
        manager = ConfigurationManager(str(temp_workspace))

        assert manager.get_assembly_config() == AssemblyConfig()

    def test_load_configuration(self, temp_workspace):
        self.create_test_config(
            temp_workspace,
            {
                "template_name": "zync-only",
                "components": ["common", "zync"],
                "output_format": "json",
            },
        )

        config = ConfigurationManager(str(temp_workspace)).get_assembly_config()

        assert config.template_name == "zync-only"
        assert config.components == ["common", "zync"]
        assert config.output_format == "json"

    def test_invalid_yaml(self, temp_workspace):
        (temp_workspace / "assembly-config.yaml").write_text("components: [unclosed")

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigurationManager(str(temp_workspace))

        assert exc_info.value.error_code == ErrorCodes.CONFIG_INVALID_FORMAT

    def test_invalid_values(self, temp_workspace):
        self.create_test_config(temp_workspace, {"output_format": "xml"})

        with pytest.raises(ConfigurationError):
            ConfigurationManager(str(temp_workspace))

    def test_components_must_be_a_list(self, temp_workspace):
        (temp_workspace / "assembly-config.yaml").write_text("components: zync\n")

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigurationManager(str(temp_workspace))

        assert exc_info.value.error_code == ErrorCodes.CONFIG_INVALID_FORMAT
        assert "list of component names" in exc_info.value.message

    def test_resolved_values_from_env_files(self, temp_workspace, clean_env):
        (temp_workspace / ".env").write_text(
            "APP_LABEL=myapp\nZYNC_DATABASE_PASSWORD=global\n"
        )
        (temp_workspace / ".env.staging").write_text(
            "ZYNC_DATABASE_PASSWORD=staging\n"
        )
        manager = ConfigurationManager(str(temp_workspace), environment="staging")

        values = manager.get_resolved_values()

        assert values == {"APP_LABEL": "myapp", "ZYNC_DATABASE_PASSWORD": "staging"}

    def test_process_environment_wins_over_global_env_file(
        self, temp_workspace, clean_env, monkeypatch
    ):
        (temp_workspace / ".env").write_text("APP_LABEL=from-file\n")
        monkeypatch.setenv("APP_LABEL", "from-env")

        values = ConfigurationManager(str(temp_workspace)).get_resolved_values()

        assert values["APP_LABEL"] == "from-env"
