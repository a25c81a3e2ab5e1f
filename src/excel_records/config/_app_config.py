"""Typed setting groups using Pydantic ``BaseModel``.

Subclass ``AppConfig``, declare fields and a ``Meta`` inner class::

    class ReaderSettings(AppConfig):
        class Meta:
            prefix = "reader"
            env_prefix = "EXCEL_RECORDS_READER"

        header_row: int = 1

    ReaderSettings.load().header_row  # EXCEL_RECORDS_READER_HEADER_ROW or reader_header_row
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from ._repository import ConfigRepository
from ._types import UNDEFINED, _Undefined


class AppConfig(BaseModel):
    """Base class for declarative, typed setting groups."""

    model_config = ConfigDict(frozen=True)

    class Meta:
        prefix: str = ""
        env_prefix: str = ""

    @classmethod
    def load(cls, repo: ConfigRepository | None = None) -> "AppConfig":
        """Load setting values and return a validated instance.

        Resolution per field:
        1. Environment variable (``{ENV_PREFIX}_{FIELD_NAME}`` uppercased)
        2. Settings file key (``{prefix}_{field}``)
        3. Omit, so Pydantic uses the field default or raises ``ValidationError``
        """
        from ._reader import _auto_repository

        source = repo or _auto_repository()

        raw_data: dict[str, Any] = {}
        for field_name in cls.model_fields:
            value = cls._raw_value(source, field_name)
            if not isinstance(value, _Undefined):
                raw_data[field_name] = value
        return cls.model_validate(raw_data)

    @classmethod
    def _raw_value(cls, source: ConfigRepository, field_name: str) -> Any:
        """The unvalidated value for *field_name*, or ``UNDEFINED``."""
        env_prefix = getattr(cls.Meta, "env_prefix", "")
        if env_prefix:
            env_value = source.get_env(f"{env_prefix}_{field_name}".upper())
            if env_value is not None:
                return env_value

        prefix = getattr(cls.Meta, "prefix", "")
        file_value = source.get_file_config(f"{prefix}_{field_name}" if prefix else field_name)
        return UNDEFINED if file_value is None else file_value
