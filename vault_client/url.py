# vault_client/url.py
"""
Vault URL Resolution

Resolvers determine the Vault base URL from the environment, the process
properties, or an explicit value.
"""

import os

from yarl import URL

from .exceptions import VaultConfigurationError
from .properties import get_property
from .protocol import UrlResolver

VAULT_ADDR_ENV_PROPERTY = "VAULT_ADDR"
VAULT_ADDR_SYS_PROPERTY = "vault.addr"


def is_valid_url(value: str | None) -> bool:
    """Return True if value is a non-blank http(s) URL with a host."""
    if not value or not value.strip():
        return False
    try:
        url = URL(value.strip())
    except (ValueError, TypeError):
        return False
    return url.scheme in ("http", "https") and bool(url.host)


class DefaultVaultUrlResolver(UrlResolver):
    """
    Resolves the Vault URL from the following places, in order:

    * Environment variable ``VAULT_ADDR``
    * Process property ``vault.addr``
    """

    def resolve(self) -> str:
        env_url = os.environ.get(VAULT_ADDR_ENV_PROPERTY)
        sys_url = get_property(VAULT_ADDR_SYS_PROPERTY)

        if is_valid_url(env_url):
            return env_url.strip()
        elif is_valid_url(sys_url):
            return sys_url.strip()

        raise VaultConfigurationError(
            "Failed to resolve the Vault URL from the environment and/or process properties."
        )


class StaticVaultUrlResolver(UrlResolver):
    """Returns a fixed URL, validated at construction."""

    def __init__(self, url: str):
        if not is_valid_url(url):
            raise VaultConfigurationError(f"Invalid Vault URL: {url!r}")
        self.url = url.strip()

    def resolve(self) -> str:
        return self.url
