"""
Tests for the YAML configuration layer and settings.
"""

import pytest

from src.utils.constants import load_settings
from src.utils.yaml_config import get_config, get_config_value, interpolate


def test_common_config_values():
    assert get_config_value("app.name") == "iris-species-predictor"
    assert get_config_value("server.port") == 8000
    assert get_config_value("does.not.exist", default="fallback") == "fallback"


def test_interpolation_from_config():
    description = get_config_value("app.description")

    assert "Iris Species Predictor" in description
    assert "${" not in description


def test_interpolation_from_environment(monkeypatch):
    monkeypatch.setenv("IRIS_TEST_VAR", "ENV_OK")

    assert interpolate("${IRIS_TEST_VAR}", {}) == "ENV_OK"
    assert interpolate("${missing.key}", {}) == "${missing.key}"


def test_environment_file_merges_common_anchors():
    """Test that an environment file overrides only what it names."""
    cfg = get_config("serve", "production")

    assert cfg["app"]["environment"] == "production"
    assert cfg["app"]["name"] == "iris-species-predictor"
    assert cfg["server"]["port"] == 8080
    assert cfg["server"]["host"] == "0.0.0.0"
    assert cfg["prediction"]["delay_seconds"] == 0.0


def test_missing_config_file():
    with pytest.raises(FileNotFoundError):
        get_config("serve", "nowhere")


def test_config_is_cached():
    assert get_config() is get_config()
    assert get_config(force_reload=True) is not None


def test_load_settings_defaults():
    settings = load_settings()

    assert settings.environment == "development"
    assert settings.delay_seconds == 1.0
    assert settings.log_level == "INFO"


def test_load_settings_for_environment():
    settings = load_settings("production")

    assert settings.environment == "production"
    assert settings.port == 8080
    assert settings.log_level == "WARNING"


def test_load_settings_environment_overrides(monkeypatch):
    monkeypatch.setenv("APP_ENVIRONMENT", "development")
    monkeypatch.setenv("PREDICTION_DELAY_SECONDS", "0.25")
    monkeypatch.setenv("LOG_LEVEL", "error")

    settings = load_settings()

    assert settings.delay_seconds == pytest.approx(0.25)
    assert settings.log_level == "ERROR"


def test_load_settings_rejects_bad_delay(monkeypatch):
    monkeypatch.setenv("PREDICTION_DELAY_SECONDS", "soon")

    with pytest.raises(ValueError):
        load_settings()


def test_config_from_custom_directory(tmp_path):
    """Test loading a config tree from another directory."""
    (tmp_path / "common.yaml").write_text(
        "server: &server\n  host: localhost\n  port: 9000\n"
        "app:\n  name: demo\n  banner: \"${app.name} on ${server.port}\"\n"
    )
    (tmp_path / "serve_staging.yaml").write_text(
        "server:\n  <<: *server\n  port: 9100\n"
    )

    assert get_config_value("app.banner", config_dir=tmp_path) == "demo on 9000"

    staging = get_config("serve", "staging", config_dir=tmp_path)
    assert staging["server"] == {"host": "localhost", "port": 9100}
    assert staging["app"]["banner"] == "demo on 9100"


def test_custom_directory_is_cached_separately(tmp_path):
    (tmp_path / "common.yaml").write_text("app:\n  name: other\n")

    assert get_config_value("app.name", config_dir=tmp_path) == "other"
    assert get_config_value("app.name") == "iris-species-predictor"


def test_missing_config_in_custom_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        get_config(config_dir=tmp_path)
