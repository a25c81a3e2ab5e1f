"""Settings that shape how cells are coerced and errors are reported."""

from __future__ import annotations

from typing import Literal

from pydantic import field_validator

from ._app_config import AppConfig
from ._casters import Csv

# Format strings may contain commas ("%B %d, %Y"), so lists are split on ";".
FORMAT_LIST_DELIMITER = ";"

DEFAULT_TIME_FORMATS = ("%H:%M:%S", "%H:%M", "%H:%M:%S.%f", "%I:%M %p", "%I:%M:%S %p")


class RecordSettings(AppConfig):
    """Defaults for :class:`~excel_records.fields.FieldCoercionEngine` and records.

    Environment variables use the ``EXCEL_RECORDS_`` prefix, settings file keys
    the ``excel_records_`` prefix (``EXCEL_RECORDS_AFFIRMATIVE_TOKEN`` or
    ``"excel_records_affirmative_token"``).

    ``date_formats`` and ``time_formats`` take a JSON list or a ``;``-separated
    string (``"%B %d, %Y;%d/%m/%Y"``).
    """

    class Meta:
        prefix = "excel_records"
        env_prefix = "EXCEL_RECORDS"

    affirmative_token: str = "Yes"
    include_worksheet_name_in_error: bool = True
    date_formats: tuple[str, ...] = ()
    time_formats: tuple[str, ...] = DEFAULT_TIME_FORMATS
    dayfirst: bool = False
    month_names: Literal["english", "locale"] = "english"

    @field_validator("date_formats", "time_formats", mode="before")
    @classmethod
    def _split_formats(cls, value):
        return Csv(delimiter=FORMAT_LIST_DELIMITER, post_process=tuple)(value)

    @field_validator("affirmative_token")
    @classmethod
    def _non_blank_token(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("affirmative_token must not be blank")
        return value.strip()
