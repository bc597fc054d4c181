"""Credentials from a token supplied by the caller."""

from ..exceptions import VaultClientException
from ..protocol import VaultCredentials, VaultCredentialsProvider


class StaticVaultCredentialsProvider(VaultCredentialsProvider):
    """Always returns the token it was constructed with."""

    def __init__(self, token: str):
        self._credentials = VaultCredentials(token=token or "")

    async def get_credentials(self) -> VaultCredentials:
        if self._credentials.is_blank():
            raise VaultClientException("Static Vault token is blank")
        return self._credentials
