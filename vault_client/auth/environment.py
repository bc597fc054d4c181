"""Credentials from the ``VAULT_TOKEN`` environment variable."""

import os

from ..exceptions import VaultClientException
from ..protocol import VaultCredentials, VaultCredentialsProvider

VAULT_TOKEN_ENV_PROPERTY = "VAULT_TOKEN"


class EnvironmentVaultCredentialsProvider(VaultCredentialsProvider):
    async def get_credentials(self) -> VaultCredentials:
        token = os.environ.get(VAULT_TOKEN_ENV_PROPERTY, "")
        if not token.strip():
            raise VaultClientException(
                f"{VAULT_TOKEN_ENV_PROPERTY} environment variable is not set or blank"
            )
        return VaultCredentials(token=token)
