import pytest

from edenred_balance.config import load_settings

ENV_KEYS = (
    "EDENRED_USER",
    "EDENRED_PASSWORD",
    "EDENRED_BASE_URL",
    "EDENRED_CARD_ID",
    "EDENRED_DEBUG",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    # no stray .env file or exported credentials leak into a test
    monkeypatch.chdir(tmp_path)
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    load_settings.cache_clear()
    yield
    load_settings.cache_clear()
