"""Tests for the individual credentials providers."""

import aiohttp
import pytest

from vault_client.auth import (
    EnvironmentVaultCredentialsProvider,
    StaticVaultCredentialsProvider,
    SystemPropertyVaultCredentialsProvider,
    UserPassVaultCredentialsProvider,
    VaultCredentialsProviderChain,
)
from vault_client.config import ClientConfig
from vault_client.exceptions import VaultClientException, VaultServerException
from vault_client.http import VaultHttp
from vault_client.properties import set_property
from vault_client.url import StaticVaultUrlResolver


class TestEnvironmentProvider:
    @pytest.mark.asyncio
    async def test_reads_vault_token(self, monkeypatch):
        monkeypatch.setenv("VAULT_TOKEN", "s.env")
        credentials = await EnvironmentVaultCredentialsProvider().get_credentials()
        assert credentials.token == "s.env"

    @pytest.mark.asyncio
    async def test_missing(self):
        with pytest.raises(VaultClientException, match="VAULT_TOKEN"):
            await EnvironmentVaultCredentialsProvider().get_credentials()

    @pytest.mark.asyncio
    async def test_blank(self, monkeypatch):
        monkeypatch.setenv("VAULT_TOKEN", "  ")
        with pytest.raises(VaultClientException):
            await EnvironmentVaultCredentialsProvider().get_credentials()


class TestSystemPropertyProvider:
    @pytest.mark.asyncio
    async def test_reads_vault_token_property(self):
        set_property("vault.token", "s.prop")
        credentials = await SystemPropertyVaultCredentialsProvider().get_credentials()
        assert credentials.token == "s.prop"

    @pytest.mark.asyncio
    async def test_missing(self):
        with pytest.raises(VaultClientException, match="vault.token"):
            await SystemPropertyVaultCredentialsProvider().get_credentials()


class TestStaticProvider:
    @pytest.mark.asyncio
    async def test_returns_token(self):
        credentials = await StaticVaultCredentialsProvider("s.static").get_credentials()
        assert credentials.token == "s.static"

    @pytest.mark.asyncio
    async def test_blank_token(self):
        with pytest.raises(VaultClientException):
            await StaticVaultCredentialsProvider("").get_credentials()

    def test_repr_hides_token(self):
        provider = StaticVaultCredentialsProvider("s.secret")
        assert "s.secret" not in repr(provider._credentials)


LOGIN_RESPONSE = {
    "auth": {
        "client_token": "s.login",
        "accessor": "acc",
        "policies": ["default", "app"],
        "metadata": {"username": "alice"},
        "lease_duration": 3600,
        "renewable": True,
    }
}


@pytest.fixture
def userpass(fake_session):
    http = VaultHttp(ClientConfig(retry_backoff=0), fake_session)
    return UserPassVaultCredentialsProvider(
        StaticVaultUrlResolver("https://vault.example.com:8200"),
        username="alice",
        password="hunter2",
        http=http,
    )


class TestUserPassProvider:
    @pytest.mark.asyncio
    async def test_login(self, userpass, fake_session, make_response):
        fake_session.request.side_effect = [make_response(200, LOGIN_RESPONSE)]

        credentials = await userpass.get_credentials()

        assert credentials.token == "s.login"
        assert credentials.lease_duration == 3600
        assert credentials.renewable is True
        assert credentials.policies == ("default", "app")

        args, kwargs = fake_session.request.call_args
        assert args == (
            "POST",
            "https://vault.example.com:8200/v1/auth/userpass/login/alice",
        )
        assert kwargs["json"] == {"password": "hunter2"}
        assert "X-Vault-Token" not in kwargs["headers"]

    @pytest.mark.asyncio
    async def test_rejected_login_is_resolution_error(
        self, userpass, fake_session, make_response
    ):
        fake_session.request.side_effect = [
            make_response(400, {"errors": ["invalid username or password"]})
        ]

        with pytest.raises(VaultServerException) as excinfo:
            await userpass.get_credentials()

        assert excinfo.value.status == 400
        assert excinfo.value.errors == ["invalid username or password"]
        assert isinstance(excinfo.value, VaultClientException)

    @pytest.mark.asyncio
    async def test_missing_auth_block(self, userpass, fake_session, make_response):
        fake_session.request.side_effect = [make_response(200, {"data": {}})]

        with pytest.raises(VaultClientException, match="auth block"):
            await userpass.get_credentials()

    @pytest.mark.asyncio
    async def test_chain_falls_back_on_network_error(self, userpass, fake_session):
        fake_session.request.side_effect = aiohttp.ClientConnectionError("refused")
        chain = VaultCredentialsProviderChain(
            [userpass, StaticVaultCredentialsProvider("s.fallback")]
        )

        credentials = await chain.get_credentials()

        assert credentials.token == "s.fallback"
        # Connection errors are retried before the chain gives up on the provider
        assert fake_session.request.call_count == 3

    @pytest.mark.asyncio
    async def test_custom_mount(self, fake_session, make_response):
        provider = UserPassVaultCredentialsProvider(
            StaticVaultUrlResolver("https://vault.example.com"),
            username="bob",
            password="pw",
            mount="ldap",
            http=VaultHttp(ClientConfig(retry_backoff=0), fake_session),
        )
        fake_session.request.side_effect = [make_response(200, LOGIN_RESPONSE)]

        await provider.get_credentials()

        args, _ = fake_session.request.call_args
        assert args[1] == "https://vault.example.com/v1/auth/ldap/login/bob"
