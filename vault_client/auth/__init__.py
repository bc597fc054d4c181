"""Credentials providers for the Vault client."""

from .chain import (
    DefaultVaultCredentialsProviderChain,
    VaultCredentialsProviderChain,
)
from .environment import EnvironmentVaultCredentialsProvider
from .properties import SystemPropertyVaultCredentialsProvider
from .static import StaticVaultCredentialsProvider
from .userpass import UserPassVaultCredentialsProvider

__all__ = [
    "DefaultVaultCredentialsProviderChain",
    "EnvironmentVaultCredentialsProvider",
    "StaticVaultCredentialsProvider",
    "SystemPropertyVaultCredentialsProvider",
    "UserPassVaultCredentialsProvider",
    "VaultCredentialsProviderChain",
]
