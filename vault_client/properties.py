# vault_client/properties.py
"""
Process-level Properties

A process-wide registry of dotted configuration keys (``vault.addr``,
``vault.token``) that the default resolver and credentials provider consult
after the environment. Values can be set programmatically or loaded from a
YAML file.
"""

import threading
from pathlib import Path

from loguru import logger

from .config import load_yaml


class SystemProperties:
    """Thread-safe mapping of property names to string values."""

    def __init__(self):
        self._lock = threading.Lock()
        self._values: dict[str, str] = {}

    def get(self, name: str, default: str | None = None) -> str | None:
        with self._lock:
            return self._values.get(name, default)

    def set(self, name: str, value: str) -> None:
        with self._lock:
            self._values[name] = str(value)

    def clear(self, name: str) -> None:
        with self._lock:
            self._values.pop(name, None)

    def clear_all(self) -> None:
        with self._lock:
            self._values.clear()

    def update(self, values: dict[str, str]) -> None:
        with self._lock:
            self._values.update({k: str(v) for k, v in values.items()})


system_properties = SystemProperties()


def get_property(name: str, default: str | None = None) -> str | None:
    return system_properties.get(name, default)


def set_property(name: str, value: str) -> None:
    system_properties.set(name, value)


def clear_property(name: str) -> None:
    system_properties.clear(name)


def flatten(obj: dict, prefix: str = "") -> dict[str, str]:
    """
    Flatten nested mappings into dotted keys.

    ``{"vault": {"addr": "x"}}`` becomes ``{"vault.addr": "x"}``. ``None``
    values are dropped.
    """
    flat = {}
    for key, value in obj.items():
        name = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, dict):
            flat.update(flatten(value, name))
        elif value is not None:
            flat[name] = str(value)
    return flat


def load_properties(path: str | Path) -> dict[str, str]:
    """
    Register every entry of a YAML file as a process property.

    Args:
        path: Path to the YAML file.

    Returns:
        dict[str, str]: The properties that were registered.
    """
    values = flatten(load_yaml(path))
    system_properties.update(values)
    logger.debug(f"Loaded {len(values)} properties from {path}")
    return values
