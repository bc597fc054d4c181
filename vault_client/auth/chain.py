# vault_client/auth/chain.py
"""
Credentials Provider Chain

Chains several credentials providers together. Providers are tried in the
order given at construction and the first one to return a non-blank token
wins. By default the winner is remembered and used directly on subsequent
calls, skipping the rest of the chain even if it later fails.
"""

import threading
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from loguru import logger

from ..exceptions import (
    CredentialsNotFoundException,
    VaultClientException,
    VaultConfigurationError,
)
from ..protocol import VaultCredentials, VaultCredentialsProvider
from .environment import EnvironmentVaultCredentialsProvider
from .properties import SystemPropertyVaultCredentialsProvider


class AttemptOutcome(Enum):
    RESOLVED = "resolved"
    BLANK_TOKEN = "blank_token"
    RESOLUTION_ERROR = "resolution_error"
    UNEXPECTED_ERROR = "unexpected_error"


@dataclass(frozen=True)
class ProviderAttempt:
    """
    The result of asking one provider for credentials.

    Attributes:
        provider: The provider that was asked.
        outcome: How the attempt ended.
        credentials: The credentials, set only when outcome is RESOLVED.
        error: The raised exception, set only for the two error outcomes.
    """

    provider: VaultCredentialsProvider
    outcome: AttemptOutcome
    credentials: VaultCredentials | None = None
    error: Exception | None = None


def _provider_name(provider: VaultCredentialsProvider) -> str:
    return type(provider).__name__


async def attempt(provider: VaultCredentialsProvider) -> ProviderAttempt:
    """Ask a provider for credentials and classify the result."""
    try:
        credentials = await provider.get_credentials()
    except VaultClientException as e:
        return ProviderAttempt(provider, AttemptOutcome.RESOLUTION_ERROR, error=e)
    except Exception as e:
        return ProviderAttempt(provider, AttemptOutcome.UNEXPECTED_ERROR, error=e)

    if credentials is None or credentials.is_blank():
        return ProviderAttempt(provider, AttemptOutcome.BLANK_TOKEN)
    return ProviderAttempt(provider, AttemptOutcome.RESOLVED, credentials=credentials)


class VaultCredentialsProviderChain(VaultCredentialsProvider):
    """
    Provider that delegates to an ordered list of other providers.

    The memoized provider and the reuse flag are guarded by a lock so a chain
    can be shared between threads. When two callers race to record a winner,
    one of them is kept; which one is unspecified.
    """

    def __init__(self, providers: Iterable[VaultCredentialsProvider] | None):
        """
        Initialize the chain.

        Args:
            providers: Providers in priority order.

        Raises:
            VaultConfigurationError: If no providers are given.
        """
        self._providers: tuple[VaultCredentialsProvider, ...] = tuple(providers or ())
        if not self._providers:
            raise VaultConfigurationError("No credentials providers specified")

        self._lock = threading.Lock()
        self._reuse_last_provider = True
        self._last_used_provider: VaultCredentialsProvider | None = None

    @classmethod
    def of(cls, *providers: VaultCredentialsProvider) -> "VaultCredentialsProviderChain":
        return cls(providers)

    @property
    def providers(self) -> tuple[VaultCredentialsProvider, ...]:
        return self._providers

    @property
    def reuse_last_provider(self) -> bool:
        with self._lock:
            return self._reuse_last_provider

    @reuse_last_provider.setter
    def reuse_last_provider(self, value: bool) -> None:
        with self._lock:
            self._reuse_last_provider = value

    @property
    def last_used_provider(self) -> VaultCredentialsProvider | None:
        with self._lock:
            return self._last_used_provider

    def reset(self) -> None:
        """Forget the memoized provider."""
        with self._lock:
            self._last_used_provider = None

    async def get_credentials(self) -> VaultCredentials:
        """
        Return credentials from the first provider that yields a token.

        If a provider already succeeded and reuse is enabled, only that
        provider is called and its result or error is passed through as is.

        Raises:
            CredentialsNotFoundException: If no provider yields a token.
        """
        with self._lock:
            memoized = self._last_used_provider if self._reuse_last_provider else None
        if memoized is not None:
            return await memoized.get_credentials()

        for provider in self._providers:
            result = await attempt(provider)
            name = _provider_name(provider)

            if result.outcome is AttemptOutcome.RESOLVED:
                with self._lock:
                    self._last_used_provider = provider
                return result.credentials
            elif result.outcome is AttemptOutcome.BLANK_TOKEN:
                logger.debug(
                    f"Credentials provider {name} returned a blank token, moving on to next provider"
                )
            elif result.outcome is AttemptOutcome.RESOLUTION_ERROR:
                logger.info(
                    f"Failed to resolve Vault credentials with provider {name} "
                    f"for reason: {result.error}, moving on to next provider"
                )
            else:
                logger.opt(exception=result.error).warning(
                    f"Unexpected error attempting to get credentials with provider {name}"
                )

        raise CredentialsNotFoundException(
            "Unable to find credentials from any provider in the specified chain"
        )


class DefaultVaultCredentialsProviderChain(VaultCredentialsProviderChain):
    """
    Looks for a Vault token in the following places, in order:

    * Environment variable ``VAULT_TOKEN``
    * Process property ``vault.token``
    """

    def __init__(self):
        super().__init__(
            [
                EnvironmentVaultCredentialsProvider(),
                SystemPropertyVaultCredentialsProvider(),
            ]
        )
