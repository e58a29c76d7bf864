"""Tests for client settings loading."""

import pytest
from pydantic import ValidationError

from shipment_sdk.config import ClientSettings, load_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ("EASYPOST_API_KEY", "EASYPOST_BASE_URL", "EASYPOST_TIMEOUT_SECONDS", "SHIPMENT_SDK_CONFIG"):
        monkeypatch.delenv(name, raising=False)
    # keep load_dotenv() away from any developer .env
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("shipment_sdk.config.load_dotenv", lambda *a, **kw: False)


def test_yaml_client_section_is_loaded(tmp_path):
    path = tmp_path / "client.yml"
    path.write_text("client:\n  base_url: https://api.example.test/v2\n  timeout_seconds: 5\n", encoding="utf-8")

    settings = load_settings(path)

    assert settings.base_url == "https://api.example.test/v2"
    assert settings.timeout_seconds == 5.0
    assert settings.api_key is None


def test_env_overrides_yaml(tmp_path, monkeypatch):
    path = tmp_path / "client.yml"
    path.write_text("base_url: https://yaml.example.test/v2\n", encoding="utf-8")
    monkeypatch.setenv("EASYPOST_API_KEY", "EZTK_123")
    monkeypatch.setenv("EASYPOST_BASE_URL", "https://env.example.test/v2")

    settings = load_settings(path)

    assert settings.api_key == "EZTK_123"
    assert settings.base_url == "https://env.example.test/v2"


def test_config_path_from_env(tmp_path, monkeypatch):
    path = tmp_path / "other.yml"
    path.write_text("client:\n  user_agent: custom-agent\n", encoding="utf-8")
    monkeypatch.setenv("SHIPMENT_SDK_CONFIG", str(path))

    assert load_settings().user_agent == "custom-agent"


def test_missing_explicit_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "nope.yml")


def test_non_mapping_yaml_raises(tmp_path):
    path = tmp_path / "list.yml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_settings(path)


def test_invalid_timeout_fails_validation(tmp_path, monkeypatch):
    path = tmp_path / "client.yml"
    path.write_text("client: {}\n", encoding="utf-8")
    monkeypatch.setenv("EASYPOST_TIMEOUT_SECONDS", "0")
    with pytest.raises(ValidationError):
        load_settings(path)


def test_defaults():
    settings = ClientSettings()
    assert settings.base_url == "https://api.easypost.com/v2"
    assert settings.timeout_seconds == 30.0
