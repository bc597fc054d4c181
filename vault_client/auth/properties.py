"""Credentials from the ``vault.token`` process property."""

from ..exceptions import VaultClientException
from ..properties import get_property
from ..protocol import VaultCredentials, VaultCredentialsProvider

VAULT_TOKEN_SYS_PROPERTY = "vault.token"


class SystemPropertyVaultCredentialsProvider(VaultCredentialsProvider):
    async def get_credentials(self) -> VaultCredentials:
        token = get_property(VAULT_TOKEN_SYS_PROPERTY) or ""
        if not token.strip():
            raise VaultClientException(
                f"{VAULT_TOKEN_SYS_PROPERTY} property is not set or blank"
            )
        return VaultCredentials(token=token)
