"""Test utilities for the config module."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator

from ._reader import get_repository, set_repository
from ._repository import FakeConfigRepository


@contextmanager
def override_config(
    *,
    env: dict[str, str] | None = None,
    file: dict[str, Any] | None = None,
) -> Iterator[FakeConfigRepository]:
    """Temporarily replace the setting source with a ``FakeConfigRepository``.

    Usage::

        with override_config(env={"EXCEL_RECORDS_AFFIRMATIVE_TOKEN": "Si"}) as repo:
            assert RecordSettings.load().affirmative_token == "Si"
            repo.set_file("excel_records_dayfirst", True)
    """
    previous = get_repository()
    fake = FakeConfigRepository(env=env, file=file)
    set_repository(fake)
    try:
        yield fake
    finally:
        set_repository(previous)
