"""Unit tests for templated YAML configuration loading."""

import os
from textwrap import dedent
from unittest.mock import patch

import pytest

from src.useradmin.runtime.config.config_data import ConfigData, DatabaseConfig
from src.useradmin.runtime.config.config_template import (
    apply_environment_overrides,
    load_templated_yaml,
    substitute_env_vars,
)


class TestSubstituteEnvVars:
    """Test environment variable substitution."""

    def test_default_used_when_unset(self):
        with patch.dict(os.environ, {}, clear=True):
            assert substitute_env_vars("port: ${APP_PORT:-8080}") == "port: 8080"

    def test_environment_value_wins(self):
        with patch.dict(os.environ, {"APP_PORT": "9000"}, clear=True):
            assert substitute_env_vars("port: ${APP_PORT:-8080}") == "port: 9000"

    def test_empty_default(self):
        with patch.dict(os.environ, {}, clear=True):
            assert substitute_env_vars('file: "${LOG_FILE:-}"') == 'file: ""'

    def test_required_variable_missing(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValueError, match="DATABASE_URL"):
                substitute_env_vars("${DATABASE_URL}")

    def test_required_variable_with_message(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValueError, match="set a DSN"):
                substitute_env_vars("${DATABASE_URL:?set a DSN}")


class TestEnvironmentOverrides:
    def test_prefixed_variable_replaces_plain_one(self):
        with patch.dict(
            os.environ,
            {"DATABASE_URL": "sqlite://", "PRODUCTION_DATABASE_URL": "postgresql://db/app"},
            clear=True,
        ):
            apply_environment_overrides("production")
            assert os.environ["DATABASE_URL"] == "postgresql://db/app"


class TestLoadTemplatedYaml:
    @pytest.fixture
    def config_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            dedent(
                """\
                config:
                  app:
                    environment: ${APP_ENVIRONMENT:-development}
                    port: ${APP_PORT:-8080}
                  database:
                    url: ${DATABASE_URL:-sqlite:///./test.db}
                    pool_size: 3
                  logging:
                    level: ${LOG_LEVEL:-INFO}
                    file: "${LOG_FILE:-}"
                """
            )
        )
        return path

    def test_loads_with_defaults(self, config_file):
        with patch.dict(os.environ, {}, clear=True):
            config = load_templated_yaml(config_file)

        assert config.app.environment == "development"
        assert config.app.port == 8080
        assert config.app.api_prefix == "/api/v1"
        assert config.database.url == "sqlite:///./test.db"
        assert config.database.max_connections == 23
        assert config.logging.file == ""

    def test_environment_substitution(self, config_file):
        with patch.dict(
            os.environ,
            {"APP_PORT": "9090", "DATABASE_URL": "postgresql://u:p@db/app", "LOG_LEVEL": "WARNING"},
            clear=True,
        ):
            config = load_templated_yaml(config_file)

        assert config.app.port == 9090
        assert config.database.is_sqlite is False
        assert config.logging.level == "WARNING"

    def test_invalid_values_raise_value_error(self, config_file):
        with patch.dict(os.environ, {"APP_PORT": "not-a-port"}, clear=True):
            with pytest.raises(ValueError, match="Invalid configuration"):
                load_templated_yaml(config_file)

    def test_empty_file_is_rejected(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        with pytest.raises(ValueError):
            load_templated_yaml(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_templated_yaml(tmp_path / "nope.yaml")

    def test_repository_config_file_is_valid(self):
        """The config.yaml shipped at the project root loads cleanly."""
        root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.dirname(__file__))))
        with patch.dict(os.environ, {}, clear=True):
            config = load_templated_yaml(os.path.join(root, "config.yaml"))

        assert isinstance(config, ConfigData)
        assert config.app.port == 8080
        assert config.database.pool_size == 5
        assert config.database.max_overflow == 20


class TestDefaults:
    def test_built_in_defaults(self):
        config = ConfigData()

        assert (config.app.host, config.app.port) == ("0.0.0.0", 8080)
        assert config.app.cors.origins == ["*"]
        assert "X-Trace-ID" in config.app.cors.allow_headers
        assert config.database.auto_migrate is True

    def test_sqlite_detection(self):
        assert DatabaseConfig(url="sqlite://").is_sqlite
        assert not DatabaseConfig(url="postgresql://localhost/app").is_sqlite
