"""Async client for the HashiCorp Vault HTTP API."""

from .auth import (
    DefaultVaultCredentialsProviderChain,
    EnvironmentVaultCredentialsProvider,
    StaticVaultCredentialsProvider,
    SystemPropertyVaultCredentialsProvider,
    UserPassVaultCredentialsProvider,
    VaultCredentialsProviderChain,
)
from .client import VaultAdminClient, VaultClient
from .config import ClientConfig, load_config
from .exceptions import (
    CredentialsNotFoundException,
    VaultClientException,
    VaultConfigurationError,
    VaultServerException,
)
from .factory import get_admin_client, get_client
from .protocol import UrlResolver, VaultCredentials, VaultCredentialsProvider
from .url import DefaultVaultUrlResolver, StaticVaultUrlResolver

__all__ = [
    "ClientConfig",
    "CredentialsNotFoundException",
    "DefaultVaultCredentialsProviderChain",
    "DefaultVaultUrlResolver",
    "EnvironmentVaultCredentialsProvider",
    "StaticVaultCredentialsProvider",
    "StaticVaultUrlResolver",
    "SystemPropertyVaultCredentialsProvider",
    "UrlResolver",
    "UserPassVaultCredentialsProvider",
    "VaultAdminClient",
    "VaultClient",
    "VaultClientException",
    "VaultConfigurationError",
    "VaultCredentials",
    "VaultCredentialsProvider",
    "VaultCredentialsProviderChain",
    "VaultServerException",
    "get_admin_client",
    "get_client",
    "load_config",
]
