import pytest

from vault_client.auth import DefaultVaultCredentialsProviderChain
from vault_client.client import VaultAdminClient, VaultClient
from vault_client.config import ClientConfig
from vault_client.factory import get_admin_client, get_client
from vault_client.url import DefaultVaultUrlResolver


def test_get_client_uses_defaults():
    client = get_client()
    assert isinstance(client, VaultClient)
    assert isinstance(client.url_resolver, DefaultVaultUrlResolver)
    assert isinstance(client.credentials_provider, DefaultVaultCredentialsProviderChain)
    assert client.config == ClientConfig()


def test_get_admin_client_passes_config():
    config = ClientConfig(timeout=3)
    client = get_admin_client(config=config)
    assert isinstance(client, VaultAdminClient)
    assert client.config is config


@pytest.mark.asyncio
async def test_dotenv_file_loaded(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("VAULT_ADDR=https://vault.example.com\nVAULT_TOKEN=s.dotenv\n")

    client = get_client(dotenv_path=env_file)

    assert client.url_resolver.resolve() == "https://vault.example.com"
    credentials = await client.credentials_provider.get_credentials()
    assert credentials.token == "s.dotenv"
