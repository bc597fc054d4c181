# vault_client/http.py
"""
HTTP Transport

A thin wrapper around aiohttp that sends JSON requests to Vault, maps error
responses to VaultServerException, and retries transient failures with
exponential backoff.
"""

import asyncio
import json

import aiohttp
from loguru import logger
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from .config import ClientConfig
from .exceptions import VaultClientException, VaultServerException

VAULT_TOKEN_HEADER = "X-Vault-Token"


def is_retryable(error: BaseException) -> bool:
    """Connection failures, timeouts and 5xx responses are worth retrying."""
    if isinstance(error, VaultServerException):
        return error.is_server_error
    return isinstance(error, (aiohttp.ClientError, asyncio.TimeoutError))


def join_url(base: str, path: str) -> str:
    return f"{base.rstrip('/')}/{path.lstrip('/')}"


def _log_retry(retry_state: RetryCallState) -> None:
    error = retry_state.outcome.exception() if retry_state.outcome else None
    logger.warning(
        f"Vault request failed on attempt {retry_state.attempt_number}: {error}. Retrying"
    )


def _parse_errors(status: int, body: str) -> VaultServerException:
    errors: list[str] = []
    if body.strip():
        try:
            payload = json.loads(body)
        except ValueError:
            errors = [body.strip()]
        else:
            if isinstance(payload, dict):
                errors = [str(e) for e in payload.get("errors") or []]
    return VaultServerException(status, errors)


class VaultHttp:
    """
    Sends requests to Vault.

    A shared aiohttp session may be supplied; otherwise a short-lived session
    is opened for every request.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        session: aiohttp.ClientSession | None = None,
    ):
        self.config = config or ClientConfig()
        self._session = session
        self._timeout = aiohttp.ClientTimeout(total=self.config.timeout)

    def _retrying(self) -> AsyncRetrying:
        return AsyncRetrying(
            stop=stop_after_attempt(self.config.max_retries),
            wait=wait_exponential(multiplier=self.config.retry_backoff, max=30),
            retry=retry_if_exception(is_retryable),
            before_sleep=_log_retry,
            reraise=True,
        )

    async def request(
        self,
        method: str,
        url: str,
        *,
        token: str | None = None,
        payload: dict | None = None,
        params: dict | None = None,
        allow_not_found: bool = False,
    ) -> dict | None:
        """
        Send a request and return the decoded JSON body.

        Args:
            method: HTTP method.
            url: Absolute URL.
            token: Vault token for the X-Vault-Token header, if any.
            payload: JSON body.
            params: Query parameters.
            allow_not_found: Return None instead of raising on 404.

        Returns:
            The decoded JSON body, or None for empty bodies (and 404s when
            allow_not_found is set).

        Raises:
            VaultServerException: On a non-2xx response.
            aiohttp.ClientError: On transport failures after all retries.
        """
        headers = {"Accept": "application/json"}
        if token is not None:
            headers[VAULT_TOKEN_HEADER] = token

        async for attempt in self._retrying():
            with attempt:
                logger.debug(f"{method} {url}")
                return await self._send(
                    method, url, headers, payload, params, allow_not_found
                )

    async def _send(self, method, url, headers, payload, params, allow_not_found):
        if self._session is not None:
            return await self._exchange(
                self._session, method, url, headers, payload, params, allow_not_found
            )
        async with aiohttp.ClientSession(timeout=self._timeout) as session:
            return await self._exchange(
                session, method, url, headers, payload, params, allow_not_found
            )

    async def _exchange(
        self, session, method, url, headers, payload, params, allow_not_found
    ):
        async with session.request(
            method,
            url,
            headers=headers,
            json=payload,
            params=params,
            ssl=self.config.verify_ssl,
            timeout=self._timeout,
        ) as resp:
            if allow_not_found and resp.status == 404:
                return None
            if resp.status < 200 or resp.status >= 300:
                raise _parse_errors(resp.status, await resp.text())
            try:
                return await resp.json(content_type=None)
            except ValueError as e:
                raise VaultClientException(
                    f"Vault returned a non-JSON body with status {resp.status}"
                ) from e
