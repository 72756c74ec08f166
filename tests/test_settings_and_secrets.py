"""
Unit tests for Settings.from_env and the Secrets Manager bootstrap.
"""

import json
import os
from unittest.mock import Mock, patch

import pytest

from src.infrastructure.config.settings import DEFAULT_BASE_URL, Settings
from src.infrastructure.secrets.secrets_manager_adapter import SecretsManagerAdapter


class TestSettings:
    def test_defaults(self):
        settings = Settings.from_env({})

        assert settings.iex_base_url == DEFAULT_BASE_URL
        assert settings.iex_api_token == ""
        assert settings.iex_timeout_seconds == 10.0
        assert settings.symbols_path == "/iex/symbols"
        assert settings.last_traded_price_path == "/iex/last-traded-price"
        assert settings.historical_prices_path == "/iex/historical-prices"

    def test_overrides(self):
        settings = Settings.from_env(
            {
                "IEX_BASE_URL": "https://sandbox.iexapis.com/stable",
                "IEX_API_TOKEN": "Tsk_abc",
                "IEX_TIMEOUT_SECONDS": "2.5",
                "HISTORICAL_PRICES_PATH": "/history/",
                "LOG_LEVEL": "debug",
                "LOG_FORMAT": "JSON",
            }
        )

        assert settings.iex_base_url == "https://sandbox.iexapis.com/stable"
        assert settings.iex_api_token == "Tsk_abc"
        assert settings.iex_timeout_seconds == 2.5
        assert settings.historical_prices_path == "/history"
        assert settings.log_level == "DEBUG"
        assert settings.log_format == "json"

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("IEX_API_TOKEN", "from_env")

        assert Settings.from_env().iex_api_token == "from_env"


@pytest.fixture(autouse=True)
def isolated_environ():
    with patch.dict(os.environ):
        yield


@pytest.fixture
def secrets_client():
    client = Mock()
    client.get_secret_value.return_value = {
        "SecretString": json.dumps({"IEX_API_TOKEN": "secret_token", "IEX_TIMEOUT_SECONDS": 5})
    }
    return client


@pytest.fixture
def adapter(secrets_client):
    with patch(
        "src.infrastructure.secrets.secrets_manager_adapter.boto3.client",
        return_value=secrets_client,
    ):
        return SecretsManagerAdapter(region="us-east-1")


class TestSecretsManagerAdapter:
    def test_get_secret(self, adapter, secrets_client):
        assert adapter.get_secret("arn:secret") == {
            "IEX_API_TOKEN": "secret_token",
            "IEX_TIMEOUT_SECONDS": 5,
        }
        secrets_client.get_secret_value.assert_called_once_with(SecretId="arn:secret")

    def test_load_into_env(self, adapter, monkeypatch):
        monkeypatch.delenv("IEX_API_TOKEN", raising=False)
        monkeypatch.delenv("IEX_TIMEOUT_SECONDS", raising=False)

        loaded = adapter.load_into_env("arn:secret")

        assert sorted(loaded) == ["IEX_API_TOKEN", "IEX_TIMEOUT_SECONDS"]
        settings = Settings.from_env()
        assert settings.iex_api_token == "secret_token"
        assert settings.iex_timeout_seconds == 5.0

    def test_existing_env_wins(self, adapter, monkeypatch):
        monkeypatch.setenv("IEX_API_TOKEN", "explicit")
        monkeypatch.delenv("IEX_TIMEOUT_SECONDS", raising=False)

        loaded = adapter.load_into_env("arn:secret")

        assert loaded == ["IEX_TIMEOUT_SECONDS"]
        assert Settings.from_env().iex_api_token == "explicit"
