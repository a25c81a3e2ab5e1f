"""``config()`` reads one setting from the environment or the settings file.

Lookup order:
1. Environment variable (if ``env=`` specified)
2. JSON settings file: the literal key, then a dot-path into nested objects
3. Default value (returned as-is, **not** passed through ``cast``)
4. Raise ``UndefinedValueError``
"""

from __future__ import annotations

from typing import Any, Callable

from ._repository import ConfigRepository, EnvironmentConfigRepository
from ._types import UNDEFINED, UndefinedValueError, _Undefined

_active_repository: ConfigRepository | None = None


def set_repository(repo: ConfigRepository | None) -> None:
    global _active_repository
    _active_repository = repo


def get_repository() -> ConfigRepository | None:
    """Return the installed repository, ``None`` until one is set or created."""
    return _active_repository


def _auto_repository() -> ConfigRepository:
    """Return the installed repository, creating an ``EnvironmentConfigRepository`` once."""
    global _active_repository
    if _active_repository is None:
        _active_repository = EnvironmentConfigRepository()
    return _active_repository


def _file_value(repo: ConfigRepository, key: str) -> Any:
    """Value of *key* in the settings file, or ``UNDEFINED``.

    ``"reader.header_row"`` matches a literal top-level key of that name first,
    then ``{"reader": {"header_row": ...}}``.
    """
    value = repo.get_file_config(key)
    if value is not None:
        return value

    head, _, rest = key.partition(".")
    if not rest:
        return UNDEFINED

    node = repo.get_file_config(head)
    for segment in rest.split("."):
        if not isinstance(node, dict) or segment not in node:
            return UNDEFINED
        node = node[segment]
    return node


def config(
    key: str,
    *,
    default: Any = UNDEFINED,
    cast: Callable[[Any], Any] | None = None,
    env: str | None = None,
    repo: ConfigRepository | None = None,
) -> Any:
    """Read a setting, casting whatever was found.

    Parameters
    ----------
    key:
        Key in the settings file. Supports dot-paths (``"reader.header_row"``).
    default:
        Fallback when the key is found nowhere. Returned **as-is**.
    cast:
        Callable applied to the raw value, e.g. ``int`` or a :class:`Choices`.
    env:
        Environment variable checked before the settings file.
    repo:
        Per-call repository override.
    """
    source = repo or _auto_repository()

    value: Any = UNDEFINED
    if env is not None:
        env_value = source.get_env(env)
        if env_value is not None:
            value = env_value
    if isinstance(value, _Undefined):
        value = _file_value(source, key)

    if isinstance(value, _Undefined):
        if isinstance(default, _Undefined):
            raise UndefinedValueError(key)
        return default

    return value if cast is None else cast(value)
