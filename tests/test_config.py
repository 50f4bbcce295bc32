import pytest

from edenred_balance.config import DEFAULT_BASE_URL, DEFAULT_CARD_ID, Settings, load_settings
from edenred_balance.errors import ConfigError


def test_load_settings_reads_credentials_from_env(monkeypatch):
    monkeypatch.setenv("EDENRED_USER", "ana@example.com")
    monkeypatch.setenv("EDENRED_PASSWORD", "secret")

    settings = load_settings()

    assert settings.edenred_user == "ana@example.com"
    assert settings.edenred_password == "secret"
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.card_id == DEFAULT_CARD_ID
    assert settings.debug is False
    assert settings.log_level == "INFO"


@pytest.mark.parametrize(
    "env",
    [
        {},
        {"EDENRED_USER": "ana@example.com"},
        {"EDENRED_PASSWORD": "secret"},
        {"EDENRED_USER": "", "EDENRED_PASSWORD": "secret"},
    ],
)
def test_load_settings_requires_both_credentials(monkeypatch, env):
    for k, v in env.items():
        monkeypatch.setenv(k, v)

    with pytest.raises(ConfigError):
        load_settings()


def test_settings_read_dotenv_file(tmp_path):
    (tmp_path / ".env").write_text(
        "EDENRED_USER=dotenv-user\nEDENRED_PASSWORD=dotenv-pass\nEDENRED_CARD_ID=111\nEDENRED_DEBUG=true\n",
        encoding="utf-8",
    )

    settings = load_settings()

    assert settings.edenred_user == "dotenv-user"
    assert settings.card_id == "111"
    assert settings.debug is True


def test_invalid_setting_becomes_config_error(monkeypatch):
    monkeypatch.setenv("EDENRED_USER", "u")
    monkeypatch.setenv("EDENRED_PASSWORD", "p")
    monkeypatch.setenv("EDENRED_DEBUG", "not-a-bool")

    with pytest.raises(ConfigError):
        load_settings()


def test_settings_without_validation_allow_missing_credentials():
    settings = Settings()
    assert settings.edenred_user == ""
    assert settings.edenred_password == ""
