# vault_client/factory.py
"""
Default Client Factory

Builds clients that resolve the Vault URL and token from the environment and
the process properties.
"""

from pathlib import Path

import aiohttp
from dotenv import load_dotenv
from loguru import logger

from .auth.chain import DefaultVaultCredentialsProviderChain
from .client import VaultAdminClient, VaultClient
from .config import ClientConfig
from .url import DefaultVaultUrlResolver


def _prepare(dotenv_path: str | Path | None) -> None:
    if dotenv_path is not None and load_dotenv(dotenv_path):
        logger.debug(f"Loaded environment from {dotenv_path}")


def get_client(
    config: ClientConfig | None = None,
    dotenv_path: str | Path | None = None,
    session: aiohttp.ClientSession | None = None,
) -> VaultClient:
    """
    Create a VaultClient using the default URL resolver and provider chain.

    Args:
        config: HTTP settings; defaults apply when omitted.
        dotenv_path: Optional .env file loaded into the environment first.
        session: Optional shared aiohttp session.
    """
    _prepare(dotenv_path)
    return VaultClient(
        DefaultVaultUrlResolver(),
        DefaultVaultCredentialsProviderChain(),
        config=config,
        session=session,
    )


def get_admin_client(
    config: ClientConfig | None = None,
    dotenv_path: str | Path | None = None,
    session: aiohttp.ClientSession | None = None,
) -> VaultAdminClient:
    """Create a VaultAdminClient the same way as get_client."""
    _prepare(dotenv_path)
    return VaultAdminClient(
        DefaultVaultUrlResolver(),
        DefaultVaultCredentialsProviderChain(),
        config=config,
        session=session,
    )
