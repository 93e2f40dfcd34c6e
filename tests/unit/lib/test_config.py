"""Unit tests for configuration loading."""

import pytest

from cmdkit.lib.config import AppConfig, get_config, set_config


class TestAppConfig:
    """Test AppConfig defaults, validation and environment loading."""

    def test_defaults(self):
        config = AppConfig()

        assert config.app_name == "My CLI App"
        assert config.app_version == "1.0.0"
        assert config.verbosity == "error"
        assert config.log_format == "console"
        assert config.strict is False

    def test_from_env(self, monkeypatch, tmp_path):
        """Test values are read from CMDKIT_* variables."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("CMDKIT_APP_NAME", "deployer")
        monkeypatch.setenv("CMDKIT_APP_VERSION", "2.1.0")
        monkeypatch.setenv("CMDKIT_VERBOSITY", "debug")
        monkeypatch.setenv("CMDKIT_LOG_FORMAT", "json")
        monkeypatch.setenv("CMDKIT_STRICT", "true")

        config = AppConfig.from_env()

        assert config.app_name == "deployer"
        assert config.app_version == "2.1.0"
        assert config.verbosity == "debug"
        assert config.log_format == "json"
        assert config.strict is True

    def test_from_env_file(self, monkeypatch, tmp_path):
        """Test an explicit .env file is loaded."""
        monkeypatch.delenv("CMDKIT_APP_NAME", raising=False)
        env_file = tmp_path / "app.env"
        env_file.write_text("CMDKIT_APP_NAME=from-file\n")

        config = AppConfig.from_env(str(env_file))

        assert config.app_name == "from-file"
        monkeypatch.delenv("CMDKIT_APP_NAME", raising=False)

    @pytest.mark.parametrize("verbosity", ["quiet", "WARN", "0", "5"])
    def test_validate_accepts_verbosity(self, verbosity):
        AppConfig(verbosity=verbosity).validate()

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"verbosity": "loud"},
            {"verbosity": "6"},
            {"log_level": "TRACE"},
            {"log_format": "xml"},
            {"app_name": "  "},
        ],
    )
    def test_validate_rejects_invalid(self, kwargs):
        with pytest.raises(ValueError):
            AppConfig(**kwargs).validate()

    def test_set_and_get_config(self):
        config = AppConfig(app_name="custom")
        set_config(config)

        assert get_config() is config

    @pytest.mark.parametrize("verbosity", ["loud", "-1", "9"])
    def test_validate_uses_verbosity_levels(self, verbosity):
        """Test config accepts exactly the levels Verbosity.parse accepts."""
        with pytest.raises(ValueError, match="(?i)verbosity"):
            AppConfig(verbosity=verbosity).validate()
