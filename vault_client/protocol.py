# vault_client/protocol.py
"""
Vault Client Protocol Definitions

This module defines the credentials dataclass and the two capability
interfaces the client is assembled from: credentials providers and URL
resolvers.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class VaultCredentials:
    """
    An authentication token for Vault plus optional lease metadata.

    Attributes:
        token: The Vault token sent in the X-Vault-Token header.
        lease_duration: Token lease in seconds, when known.
        renewable: Whether the token lease can be renewed.
        policies: Policies attached to the token, when known.
    """

    token: str
    lease_duration: int | None = None
    renewable: bool = False
    policies: tuple[str, ...] = ()

    def is_blank(self) -> bool:
        return not self.token or not self.token.strip()

    def __repr__(self) -> str:
        # Never expose the token itself
        return (
            f"VaultCredentials(token='***', lease_duration={self.lease_duration}, "
            f"renewable={self.renewable}, policies={self.policies})"
        )


class VaultCredentialsProvider(ABC):
    """
    Abstract Base Class for every source of Vault credentials.

    Providers raise VaultClientException when their source is unavailable
    or empty. Any other exception is treated as unexpected by callers.
    """

    @abstractmethod
    async def get_credentials(self) -> VaultCredentials:
        """
        Resolve credentials from this provider's source.

        Returns:
            VaultCredentials: The resolved credentials.

        Raises:
            VaultClientException: If the source cannot produce a token.
        """
        ...


class UrlResolver(ABC):
    """Abstract Base Class for resolving the Vault base URL."""

    @abstractmethod
    def resolve(self) -> str:
        """
        Determine the Vault base URL.

        Returns:
            str: The Vault base URL, e.g. ``https://vault.example.com:8200``.

        Raises:
            VaultConfigurationError: If no valid URL is available.
        """
        ...
