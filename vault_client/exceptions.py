"""Errors raised by the Vault client."""


class VaultClientException(Exception):
    """Raised when a value (credentials, URL, response) cannot be resolved.

    Inside a credentials provider chain this is the expected failure: the
    chain logs it and moves on to the next provider.
    """


class VaultConfigurationError(VaultClientException):
    """Raised when the client is misconfigured (no providers, no valid URL)."""


class CredentialsNotFoundException(VaultClientException):
    """Raised when no provider in a chain produced a usable token."""


class VaultServerException(VaultClientException):
    """Raised when Vault answers with a non-2xx status.

    Attributes:
        status: HTTP status code returned by Vault.
        errors: Error messages from the ``errors`` field of the response body.
    """

    def __init__(self, status: int, errors: list[str] | None = None):
        self.status = status
        self.errors = errors or []
        detail = ", ".join(self.errors) if self.errors else "no error details"
        super().__init__(f"Vault responded with status {status}: {detail}")

    @property
    def is_server_error(self) -> bool:
        return self.status >= 500
