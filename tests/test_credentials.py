"""Tests for credential resolution and the environment provider."""

import logging

from gopeople_client.config import GoPeopleSettings
from gopeople_client.credentials import (
    Credentials,
    EnvCredentialProvider,
    resolve_credentials,
)
from gopeople_client.exceptions import (
    ConfigurationError,
    MissingConfigurationError,
)
from gopeople_client.result import Err, Ok

from conftest import API_KEY, HOST, BrokenProvider, StaticProvider


def _settings(**values) -> GoPeopleSettings:
    return GoPeopleSettings(_env_file=None, **values)


def test_credentials_accept_stored_key_name():
    creds = Credentials.model_validate({"host": HOST, "key": API_KEY})
    assert creds.host == HOST
    assert creds.api_key == API_KEY


async def test_resolve_credentials_combines_host_and_key():
    result = await resolve_credentials(StaticProvider())
    assert result == Ok(Credentials(host=HOST, api_key=API_KEY))


async def test_resolve_credentials_returns_provider_error_unchanged():
    provider = BrokenProvider("store offline")
    result = await resolve_credentials(provider)
    assert isinstance(result, Err)
    assert result.error is provider.error


async def test_resolve_credentials_rejects_empty_host():
    result = await resolve_credentials(StaticProvider(host=""))
    assert isinstance(result.error, ConfigurationError)
    assert str(result.error).startswith("Invalid carrier credentials")


class TestEnvCredentialProvider:
    async def test_resolves_configured_values(self):
        provider = EnvCredentialProvider(_settings(host=HOST, key=API_KEY))
        assert await provider.resolve_host() == Ok(HOST)
        assert await provider.resolve_key() == Ok(API_KEY)

    async def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("GOPEOPLE_HOST", "https://api.example.com")
        monkeypatch.setenv("GOPEOPLE_KEY", "env-key")
        provider = EnvCredentialProvider(_settings())
        assert await provider.resolve_host() == Ok("https://api.example.com")
        assert await provider.resolve_key() == Ok("env-key")

    async def test_missing_host(self, monkeypatch):
        monkeypatch.delenv("GOPEOPLE_HOST", raising=False)
        provider = EnvCredentialProvider(_settings(key=API_KEY))
        result = await provider.resolve_host()
        assert isinstance(result.error, MissingConfigurationError)
        assert str(result.error) == "No env variable 'GOPEOPLE_HOST' available"
        assert await provider.resolve_key() == Ok(API_KEY)

    async def test_missing_key(self, monkeypatch):
        monkeypatch.delenv("GOPEOPLE_KEY", raising=False)
        provider = EnvCredentialProvider(_settings(host=HOST))
        result = await provider.resolve_key()
        assert str(result.error) == "No env variable 'GOPEOPLE_KEY' available"

    def test_warns_when_values_missing(self, monkeypatch, caplog):
        monkeypatch.delenv("GOPEOPLE_HOST", raising=False)
        monkeypatch.delenv("GOPEOPLE_KEY", raising=False)
        with caplog.at_level(logging.WARNING):
            EnvCredentialProvider(_settings())
        assert "credentials missing" in caplog.text

    async def test_values_read_once(self, monkeypatch):
        """Later environment changes do not affect an existing provider."""
        monkeypatch.setenv("GOPEOPLE_HOST", HOST)
        monkeypatch.setenv("GOPEOPLE_KEY", API_KEY)
        provider = EnvCredentialProvider(_settings())
        monkeypatch.setenv("GOPEOPLE_HOST", "https://changed.example.com")
        assert await provider.resolve_host() == Ok(HOST)
