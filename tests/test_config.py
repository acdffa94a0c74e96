"""Tests for configuration loading and validation."""

from pathlib import Path

import pytest

from medquery.config import (
    AppConfig,
    ConfigurationError,
    LogFormat,
    load_config,
    load_environment_config,
    validate_config_file,
)

FIXTURES_DIR = Path(__file__).parent / "fixtures"


class TestConfigurationLoading:
    """Test configuration loading from YAML files."""

    def test_load_valid_config(self, clean_env):
        """Test loading a fully specified configuration file."""
        app_config, env_config = load_config(FIXTURES_DIR / "valid_config.yaml")

        assert app_config.search.max_query_length == 150
        assert app_config.search.max_history_items == 5
        assert app_config.search.history_path == "./data/history.json"
        assert app_config.logging.level == "WARNING"
        assert app_config.logging.format == "json"
        assert env_config.environment == "local"

    def test_load_minimal_config(self, clean_env):
        """Test that omitted settings fall back to defaults."""
        app_config, _ = load_config(FIXTURES_DIR / "minimal_config.yaml")

        assert app_config.search.max_history_items == 10
        assert app_config.search.history_path is None
        assert app_config.logging.level == "INFO"
        assert app_config.logging.format == LogFormat.KEY_VALUE

    def test_defaults_without_config_file(self, clean_env):
        """Test that no config file at all is allowed."""
        app_config, _ = load_config()

        assert app_config == AppConfig()

    def test_config_yaml_in_cwd_is_used(self, clean_env):
        """Test default file lookup in the working directory."""
        (clean_env / "config.yaml").write_text("search:\n  max_history_items: 3\n")

        app_config, _ = load_config()

        assert app_config.search.max_history_items == 3

    def test_config_dir_fallback(self, clean_env):
        """Test lookup of config/config.yaml."""
        (clean_env / "config").mkdir()
        (clean_env / "config" / "config.yaml").write_text("search:\n  max_history_items: 4\n")

        app_config, _ = load_config()

        assert app_config.search.max_history_items == 4

    def test_empty_file_means_defaults(self, clean_env):
        """Test that an empty YAML file is accepted."""
        config_file = clean_env / "empty.yaml"
        config_file.write_text("")

        app_config, _ = load_config(config_file)

        assert app_config == AppConfig()

    def test_blank_history_path_is_unset(self, clean_env):
        """Test that a whitespace-only history path is ignored."""
        config_file = clean_env / "config.yaml"
        config_file.write_text("search:\n  history_path: '  '\n")

        app_config, _ = load_config(config_file)

        assert app_config.search.history_path is None


class TestConfigurationErrors:
    """Test invalid configuration files."""

    def test_explicit_file_not_found(self, clean_env):
        """Test error when the given config file doesn't exist."""
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(Path("nonexistent.yaml"))

        assert "not found" in str(exc_info.value)
        assert exc_info.value.suggestions

    def test_invalid_yaml_syntax(self, clean_env):
        """Test error on malformed YAML."""
        config_file = clean_env / "bad.yaml"
        config_file.write_text("search:\n  max_query_length: [unclosed\n")

        with pytest.raises(ConfigurationError) as exc_info:
            load_config(config_file)

        assert "Failed to parse YAML" in str(exc_info.value)

    def test_top_level_must_be_mapping(self, clean_env):
        """Test error when the file holds a list."""
        config_file = clean_env / "list.yaml"
        config_file.write_text("- search\n- logging\n")

        with pytest.raises(ConfigurationError) as exc_info:
            load_config(config_file)

        assert "mapping" in str(exc_info.value)

    def test_unknown_field(self, clean_env):
        """Test that typos in field names are reported."""
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(FIXTURES_DIR / "invalid_unknown_field.yaml")

        assert "Unknown field: search -> fuzzy" in exc_info.value.errors

    def test_invalid_log_level(self, clean_env):
        """Test enum validation."""
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(FIXTURES_DIR / "invalid_log_level.yaml")

        assert any(error.startswith("logging -> level") for error in exc_info.value.errors)

    def test_wrong_type(self, clean_env):
        """Test a non-integer length."""
        config_file = clean_env / "config.yaml"
        config_file.write_text("search:\n  max_query_length: long\n")

        with pytest.raises(ConfigurationError) as exc_info:
            load_config(config_file)

        assert "Invalid type for 'search -> max_query_length': expected int" in str(exc_info.value)

    def test_out_of_range(self, clean_env):
        """Test numeric bounds."""
        config_file = clean_env / "config.yaml"
        config_file.write_text("search:\n  max_query_length: 0\n")

        with pytest.raises(ConfigurationError) as exc_info:
            load_config(config_file)

        assert "search -> max_query_length" in str(exc_info.value)


class TestConfigurationWarnings:
    """Test warnings for valid but suspicious settings."""

    def test_short_max_query_length_warns(self, clean_env):
        """Test a warning for a tiny length limit."""
        config_file = clean_env / "config.yaml"
        config_file.write_text("search:\n  max_query_length: 10\n")

        with pytest.warns(UserWarning, match="max_query_length"):
            app_config, _ = load_config(config_file)

        assert app_config.search.max_query_length == 10

    def test_debug_logging_warns(self, clean_env):
        """Test a warning for DEBUG logging."""
        config_file = clean_env / "config.yaml"
        config_file.write_text("logging:\n  level: DEBUG\n")

        with pytest.warns(UserWarning, match="DEBUG"):
            load_config(config_file)


class TestEnvironmentVariables:
    """Test environment variable loading and precedence."""

    def test_defaults(self, clean_env):
        """Test that nothing is required."""
        env_config = load_environment_config()

        assert env_config.log_level is None
        assert env_config.log_format is None
        assert env_config.history_path is None
        assert env_config.environment == "local"

    def test_values_are_normalized(self, clean_env, monkeypatch):
        """Test case normalization of level and format."""
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_FORMAT", "JSON")
        monkeypatch.setenv("ENVIRONMENT", "staging")

        env_config = load_environment_config()

        assert env_config.log_level == "DEBUG"
        assert env_config.log_format == "json"
        assert env_config.environment == "staging"

    def test_invalid_values(self, clean_env, monkeypatch):
        """Test that all invalid variables are reported together."""
        monkeypatch.setenv("LOG_LEVEL", "LOUD")
        monkeypatch.setenv("LOG_FORMAT", "xml")

        with pytest.raises(ConfigurationError) as exc_info:
            load_environment_config()

        message = str(exc_info.value)
        assert "LOG_LEVEL" in message
        assert "LOG_FORMAT" in message

    def test_environment_overrides_file(self, clean_env, monkeypatch):
        """Test environment > config file precedence."""
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        monkeypatch.setenv("MEDQUERY_HISTORY_PATH", "/tmp/medquery-history.json")

        app_config, _ = load_config(FIXTURES_DIR / "valid_config.yaml")

        assert app_config.logging.level == "ERROR"
        assert app_config.logging.format == "json"
        assert app_config.search.history_path == "/tmp/medquery-history.json"


class TestValidateConfigFile:
    """Test the standalone validation utility."""

    def test_valid_file(self, capsys):
        """Test a valid file."""
        assert validate_config_file(FIXTURES_DIR / "valid_config.yaml") is True
        assert "is valid" in capsys.readouterr().out

    def test_invalid_file(self, capsys):
        """Test an invalid file."""
        assert validate_config_file(FIXTURES_DIR / "invalid_log_level.yaml") is False
        assert "validation failed" in capsys.readouterr().out

    def test_example_config_is_valid(self):
        """Test the example configuration shipped with the repository."""
        example = Path(__file__).parent.parent / "config.example.yaml"

        assert validate_config_file(example) is True
