# vault_client/client.py
"""
Vault Client

Async facade over the Vault HTTP API. VaultClient covers the generic secret
backend; VaultAdminClient adds initialization, seal, policy and token
management.
"""

from typing import Any

import aiohttp
from loguru import logger

from .config import ClientConfig
from .exceptions import VaultClientException
from .http import VaultHttp, join_url
from .model import (
    VaultAuthResponse,
    VaultClientTokenResponse,
    VaultInitResponse,
    VaultListResponse,
    VaultPolicy,
    VaultResponse,
    VaultSealStatusResponse,
    VaultTokenAuthRequest,
)
from .protocol import UrlResolver, VaultCredentialsProvider

SECRET_PATH_PREFIX = "v1/secret/"
AUTH_TOKEN_PATH_PREFIX = "v1/auth/token/"
SYS_PATH_PREFIX = "v1/sys/"


class VaultClient:
    """
    Client for reading and writing secrets.

    Each authenticated call asks the credentials provider for a token first,
    so a provider chain can take care of caching.
    """

    def __init__(
        self,
        url_resolver: UrlResolver,
        credentials_provider: VaultCredentialsProvider,
        config: ClientConfig | None = None,
        session: aiohttp.ClientSession | None = None,
    ):
        """
        Initialize the client.

        Args:
            url_resolver: Resolves the Vault base URL.
            credentials_provider: Supplies the token for authenticated calls.
            config: HTTP settings; defaults apply when omitted.
            session: Optional shared aiohttp session. The caller owns it.
        """
        self.url_resolver = url_resolver
        self.credentials_provider = credentials_provider
        self.config = config or ClientConfig()
        self._http = VaultHttp(self.config, session)

    def _url(self, path: str) -> str:
        return join_url(self.url_resolver.resolve(), path)

    async def _token(self) -> str:
        credentials = await self.credentials_provider.get_credentials()
        if credentials is None or credentials.is_blank():
            raise VaultClientException("Credentials provider returned a blank Vault token")
        return credentials.token

    async def _execute(
        self,
        method: str,
        path: str,
        *,
        payload: dict | None = None,
        params: dict | None = None,
        authenticated: bool = True,
        allow_not_found: bool = False,
    ) -> dict | None:
        token = await self._token() if authenticated else None
        return await self._http.request(
            method,
            self._url(path),
            token=token,
            payload=payload,
            params=params,
            allow_not_found=allow_not_found,
        )

    async def read(self, path: str) -> VaultResponse:
        """
        Read the secret stored at a path.

        Args:
            path: Path below ``secret/``, e.g. ``app/db``.

        Raises:
            VaultServerException: If Vault rejects the read or the secret is missing.
        """
        payload = await self._execute("GET", SECRET_PATH_PREFIX + path)
        return VaultResponse.model_validate(payload or {})

    async def write(self, path: str, data: dict[str, Any]) -> None:
        """Write a secret, replacing any data already at the path."""
        await self._execute("POST", SECRET_PATH_PREFIX + path, payload=data)
        logger.debug(f"Wrote secret at {path}")

    async def delete(self, path: str) -> None:
        """Delete the secret at a path."""
        await self._execute("DELETE", SECRET_PATH_PREFIX + path)
        logger.debug(f"Deleted secret at {path}")

    async def lookup_self(self) -> VaultClientTokenResponse:
        """Return details about the token in use."""
        payload = await self._execute("GET", AUTH_TOKEN_PATH_PREFIX + "lookup-self")
        return VaultClientTokenResponse.from_payload(payload or {})

    async def list(self, path: str) -> VaultListResponse:
        """
        List the keys below a path. A path with nothing below it yields an
        empty response rather than an error.
        """
        payload = await self._execute(
            "GET",
            SECRET_PATH_PREFIX + path,
            params={"list": "true"},
            allow_not_found=True,
        )
        if payload is None:
            return VaultListResponse()
        return VaultListResponse.from_payload(payload)


class VaultAdminClient(VaultClient):
    """Client for the administrative ``sys`` and ``auth/token`` endpoints."""

    async def init(self, secret_shares: int, secret_threshold: int) -> VaultInitResponse:
        """
        Initialize a new Vault.

        Args:
            secret_shares: Number of unseal key shares to generate.
            secret_threshold: Shares required to unseal.

        Returns:
            VaultInitResponse: The unseal keys and the initial root token.
        """
        if secret_threshold > secret_shares:
            raise ValueError("secret_threshold cannot exceed secret_shares")
        payload = await self._execute(
            "PUT",
            SYS_PATH_PREFIX + "init",
            payload={"secret_shares": secret_shares, "secret_threshold": secret_threshold},
            authenticated=False,
        )
        logger.info(f"Initialized Vault with {secret_shares} key shares")
        return VaultInitResponse.model_validate(payload or {})

    async def seal_status(self) -> VaultSealStatusResponse:
        payload = await self._execute(
            "GET", SYS_PATH_PREFIX + "seal-status", authenticated=False
        )
        return VaultSealStatusResponse.model_validate(payload or {})

    async def unseal(self, key: str, reset: bool = False) -> VaultSealStatusResponse:
        """Submit one unseal key share; ``reset`` discards earlier shares."""
        body: dict[str, Any] = {"reset": True} if reset else {"key": key}
        payload = await self._execute(
            "PUT", SYS_PATH_PREFIX + "unseal", payload=body, authenticated=False
        )
        return VaultSealStatusResponse.model_validate(payload or {})

    async def list_policies(self) -> list[str]:
        payload = await self._execute("GET", SYS_PATH_PREFIX + "policy") or {}
        return list(payload.get("policies") or payload.get("keys") or [])

    async def get_policy(self, name: str) -> VaultPolicy:
        payload = await self._execute("GET", SYS_PATH_PREFIX + f"policy/{name}")
        return VaultPolicy.model_validate(payload or {})

    async def put_policy(self, name: str, policy: VaultPolicy) -> None:
        await self._execute(
            "PUT", SYS_PATH_PREFIX + f"policy/{name}", payload=policy.model_dump()
        )
        logger.info(f"Stored policy {name}")

    async def delete_policy(self, name: str) -> None:
        await self._execute("DELETE", SYS_PATH_PREFIX + f"policy/{name}")
        logger.info(f"Deleted policy {name}")

    async def create_token(self, request: VaultTokenAuthRequest) -> VaultAuthResponse:
        """Create a child token of the one in use."""
        payload = await self._execute(
            "POST", AUTH_TOKEN_PATH_PREFIX + "create", payload=request.to_payload()
        )
        if not payload or not payload.get("auth"):
            raise VaultClientException("Vault token create response did not include an auth block")
        return VaultAuthResponse.from_payload(payload)

    async def revoke_token(self, token: str) -> None:
        """Revoke a token and all of its children."""
        await self._execute(
            "POST", AUTH_TOKEN_PATH_PREFIX + "revoke", payload={"token": token}
        )
