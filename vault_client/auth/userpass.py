# vault_client/auth/userpass.py
"""
Username/Password Credentials Provider

Logs in against Vault's ``userpass`` auth backend and turns the returned
``auth`` block into credentials.
"""

from loguru import logger

from ..config import ClientConfig
from ..exceptions import VaultClientException
from ..http import VaultHttp, join_url
from ..model import VaultAuthResponse
from ..protocol import UrlResolver, VaultCredentials, VaultCredentialsProvider

LOGIN_PATH = "v1/auth/{mount}/login/{username}"


class UserPassVaultCredentialsProvider(VaultCredentialsProvider):
    """
    Provider that authenticates with a username and password.

    Every call performs a login request; wrap this provider in a
    VaultCredentialsProviderChain to reuse it without logging in again
    through the rest of the chain.
    """

    def __init__(
        self,
        url_resolver: UrlResolver,
        username: str,
        password: str,
        mount: str = "userpass",
        config: ClientConfig | None = None,
        http: VaultHttp | None = None,
    ):
        """
        Initialize the provider.

        Args:
            url_resolver: Resolves the Vault base URL.
            username: The userpass username.
            password: The userpass password.
            mount: Mount path of the userpass backend.
            config: Client settings used when no transport is given.
            http: Transport to reuse, e.g. one bound to a shared session.
        """
        self.url_resolver = url_resolver
        self.username = username
        self._password = password
        self.mount = mount
        self._http = http or VaultHttp(config)

    async def get_credentials(self) -> VaultCredentials:
        """
        Log in and return the issued client token.

        Raises:
            VaultServerException: If Vault rejects the login.
            VaultConfigurationError: If the Vault URL cannot be resolved.
        """
        url = join_url(
            self.url_resolver.resolve(),
            LOGIN_PATH.format(mount=self.mount, username=self.username),
        )
        payload = await self._http.request(
            "POST", url, payload={"password": self._password}
        )
        if not payload or not payload.get("auth"):
            raise VaultClientException("Vault login response did not include an auth block")
        auth = VaultAuthResponse.from_payload(payload)
        logger.debug(f"Logged in to Vault as {self.username}")
        return VaultCredentials(
            token=auth.client_token,
            lease_duration=auth.lease_duration,
            renewable=auth.renewable,
            policies=tuple(auth.policies),
        )
