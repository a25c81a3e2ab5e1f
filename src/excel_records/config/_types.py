"""Sentinel and exception types for the config module."""

from __future__ import annotations


class _Undefined:
    """Sentinel for missing config values (distinct from ``None``)."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED = _Undefined()


class ConfigError(Exception):
    """Base exception for config-related errors."""


class UndefinedValueError(ConfigError):
    """Raised when a required setting is missing from every source."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Setting '{key}' is required but not set.")
