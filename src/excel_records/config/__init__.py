"""Typed, validated settings for excel_records.

Values come from environment variables and an optional JSON settings file,
with fail-fast reads and pluggable sources for tests.
"""

from ._app_config import AppConfig
from ._casters import Choices, Csv
from ._reader import config
from ._repository import ConfigRepository, EnvironmentConfigRepository, FakeConfigRepository
from ._settings import DEFAULT_TIME_FORMATS, RecordSettings
from ._testing import override_config
from ._types import ConfigError, UndefinedValueError

__all__ = [
    # Core
    "config",
    "ConfigError",
    "UndefinedValueError",
    # Typed groups
    "AppConfig",
    "RecordSettings",
    "DEFAULT_TIME_FORMATS",
    # Helpers
    "Csv",
    "Choices",
    # Sources
    "ConfigRepository",
    "EnvironmentConfigRepository",
    # Testing
    "override_config",
    "FakeConfigRepository",
]
