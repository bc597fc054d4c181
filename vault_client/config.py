# vault_client/config.py
"""
Client Configuration

Holds the tunables of the HTTP facade and loads them from YAML files whose
string values may reference environment variables as ``${VAR_NAME}``.
"""

import os
import re
from dataclasses import dataclass, fields
from pathlib import Path

import yaml
from loguru import logger

from .exceptions import VaultConfigurationError

DEFAULT_TIMEOUT = 15.0
DEFAULT_MAX_RETRIES = 3
DEFAULT_RETRY_BACKOFF = 1.0

PLACEHOLDER = re.compile(r"\$\{(\w+)\}")


@dataclass
class ClientConfig:
    """
    Settings for VaultClient.

    Attributes:
        timeout: Total timeout per HTTP request, in seconds.
        max_retries: Attempts per request before the last error is raised.
        retry_backoff: Multiplier for the exponential wait between attempts.
        verify_ssl: Whether TLS certificates are verified.
    """

    timeout: float = DEFAULT_TIMEOUT
    max_retries: int = DEFAULT_MAX_RETRIES
    retry_backoff: float = DEFAULT_RETRY_BACKOFF
    verify_ssl: bool = True

    def __post_init__(self):
        if self.max_retries < 1:
            raise ValueError("max_retries must be at least 1")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")

    @classmethod
    def from_dict(cls, values: dict) -> "ClientConfig":
        """
        Build a config from a mapping, ignoring unknown keys.

        A value that is still a bare ``${VAR}`` placeholder, because the
        variable is unset, is dropped so the field default applies.

        Raises:
            VaultConfigurationError: If a value cannot be converted to the
                field's type.
        """
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in values.items():
            if key not in known:
                continue
            if isinstance(value, str) and PLACEHOLDER.fullmatch(value.strip()):
                logger.debug(f"{value.strip()} is unset, using the default for {key}")
                continue
            kwargs[key] = _coerce(key, value, cls)
        return cls(**kwargs)


def _coerce(key: str, value, cls):
    """Convert string values to the type of the field's default."""
    default = getattr(cls, key)
    if not isinstance(value, str):
        return value
    unresolved = PLACEHOLDER.findall(value)
    if unresolved:
        raise VaultConfigurationError(
            f"Config key {key!r} references unset variable(s): {', '.join(unresolved)}"
        )
    if isinstance(default, bool):
        return value.strip().lower() in ("1", "true", "yes", "on")
    try:
        if isinstance(default, int):
            return int(value)
        if isinstance(default, float):
            return float(value)
    except ValueError as e:
        raise VaultConfigurationError(
            f"Config key {key!r} expects a {type(default).__name__}, got {value!r}"
        ) from e
    return value


def interpolate(value):
    """Substitute ``${VAR}`` references in every string of a YAML tree.

    References to unset variables are kept verbatim so callers can tell
    them apart from empty values.
    """
    if isinstance(value, dict):
        return {key: interpolate(item) for key, item in value.items()}
    if isinstance(value, list):
        return [interpolate(item) for item in value]
    if not isinstance(value, str):
        return value
    return PLACEHOLDER.sub(lambda m: os.environ.get(m.group(1), m.group(0)), value)


def load_yaml(path: str | Path) -> dict:
    """Load a YAML mapping with environment variables substituted."""
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at the top of {path}")
    return interpolate(data)


def load_config(path: str | Path) -> ClientConfig:
    """
    Load a ClientConfig from the ``client`` section of a YAML file.

    Example::

        client:
          timeout: ${VAULT_CLIENT_TIMEOUT}
          max_retries: 5

    Args:
        path: Path to the YAML file.

    Returns:
        ClientConfig: The parsed configuration; defaults fill missing keys.
    """
    data = load_yaml(path)
    return ClientConfig.from_dict(data.get("client") or {})
