"""Tests for _app_config.py: AppConfig base class."""

import pytest
from pydantic import ValidationError

from excel_records.config._app_config import AppConfig
from excel_records.config._repository import FakeConfigRepository


def _repo(**kwargs) -> FakeConfigRepository:
    return FakeConfigRepository(**kwargs)


class ReaderSettings(AppConfig):
    class Meta:
        prefix = "reader"
        env_prefix = "READER"

    header_row: int = 1
    skip_empty: bool = True


class TestPrefixMapping:
    def test_file_prefix(self):
        cfg = ReaderSettings.load(repo=_repo(file={"reader_header_row": 3}))
        assert cfg.header_row == 3

    def test_no_prefix(self):
        class SimpleConfig(AppConfig):
            debug: bool = False

        cfg = SimpleConfig.load(repo=_repo(file={"debug": True}))
        assert cfg.debug is True


class TestEnvPrefix:
    def test_env_prefix(self):
        cfg = ReaderSettings.load(repo=_repo(env={"READER_SKIP_EMPTY": "false"}))
        assert cfg.skip_empty is False

    def test_env_beats_file(self):
        cfg = ReaderSettings.load(
            repo=_repo(env={"READER_HEADER_ROW": "4"}, file={"reader_header_row": 2})
        )
        assert cfg.header_row == 4


class TestDefaultsAndValidation:
    def test_uses_field_defaults(self):
        cfg = ReaderSettings.load(repo=_repo())
        assert cfg.header_row == 1
        assert cfg.skip_empty is True

    def test_missing_required_field_raises(self):
        class MyConfig(AppConfig):
            required_key: str

        with pytest.raises(ValidationError):
            MyConfig.load(repo=_repo())

    def test_invalid_value_raises(self):
        with pytest.raises(ValidationError):
            ReaderSettings.load(repo=_repo(env={"READER_HEADER_ROW": "first"}))

    def test_instances_are_frozen(self):
        cfg = ReaderSettings.load(repo=_repo())
        with pytest.raises(ValidationError):
            cfg.header_row = 9
