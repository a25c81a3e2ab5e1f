"""Setting sources: the process environment and an optional JSON file."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Mapping, Protocol, runtime_checkable

from ._types import ConfigError

SETTINGS_FILE_ENV = "EXCEL_RECORDS_SETTINGS_FILE"


@runtime_checkable
class ConfigRepository(Protocol):
    """Abstraction over where setting values come from."""

    def get_env(self, key: str) -> str | None:
        ...

    def get_file_config(self, key: str) -> Any:
        ...


class EnvironmentConfigRepository:
    """Reads ``os.environ`` and the JSON file named by ``EXCEL_RECORDS_SETTINGS_FILE``.

    The file is parsed lazily on first lookup and cached for the lifetime of
    the repository. A missing variable means "no file"; a variable pointing at
    an unreadable or malformed file raises :class:`ConfigError`.
    """

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        settings_file: str | os.PathLike[str] | None = None,
    ) -> None:
        self._environ = os.environ if environ is None else environ
        self._settings_file = settings_file
        self._file_data: dict[str, Any] | None = None

    def get_env(self, key: str) -> str | None:
        return self._environ.get(key)

    def get_file_config(self, key: str) -> Any:
        return self._load_file().get(key)

    def _load_file(self) -> dict[str, Any]:
        if self._file_data is not None:
            return self._file_data

        path = self._settings_file or self._environ.get(SETTINGS_FILE_ENV)
        if not path:
            self._file_data = {}
            return self._file_data

        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise ConfigError(f"Cannot read settings file {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Settings file {path} must contain a JSON object")

        self._file_data = data
        return self._file_data


class FakeConfigRepository:
    """Dict-backed config repository for tests.

    >>> repo = FakeConfigRepository(env={"EXCEL_RECORDS_DAYFIRST": "1"})
    >>> repo.get_env("EXCEL_RECORDS_DAYFIRST")
    '1'
    """

    def __init__(
        self,
        env: dict[str, str] | None = None,
        file: dict[str, Any] | None = None,
    ) -> None:
        self._env: dict[str, str] = dict(env or {})
        self._file: dict[str, Any] = dict(file or {})

    def get_env(self, key: str) -> str | None:
        return self._env.get(key)

    def get_file_config(self, key: str) -> Any:
        return self._file.get(key)

    def set_env(self, key: str, value: str) -> None:
        self._env[key] = value

    def set_file(self, key: str, value: Any) -> None:
        self._file[key] = value
