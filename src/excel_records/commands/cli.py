"""``excel-records`` command line interface."""

from __future__ import annotations

import importlib
import sys
import zipfile
from typing import Type

import click
from openpyxl.utils.exceptions import InvalidFileException

from .._logging import LOG_LEVELS, setup_logging
from ..config import Choices, ConfigError, config
from ..exceptions import ExcelRecordsError
from ..record import ExcelRecord
from ..workbook import ReaderConfig, Worksheet, open_worksheet, read_records

# Problems opening or reading a workbook that are reported, not raised.
_READ_ERRORS = (
    ExcelRecordsError,
    ConfigError,
    ValueError,
    InvalidFileException,
    zipfile.BadZipFile,
)


def load_record_class(spec: str) -> Type[ExcelRecord]:
    """Resolve ``"package.module:ClassName"`` to an :class:`ExcelRecord` subclass."""
    module_name, _, class_name = spec.partition(":")
    if not module_name or not class_name:
        raise click.BadParameter("expected 'module:ClassName'", param_hint="--record")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise click.BadParameter(f"cannot import {module_name}: {e}", param_hint="--record")

    record_cls = getattr(module, class_name, None)
    if not (isinstance(record_cls, type) and issubclass(record_cls, ExcelRecord)):
        raise click.BadParameter(
            f"{spec} is not an ExcelRecord subclass", param_hint="--record"
        )
    return record_cls


def _sheet_option(value: str | None) -> str | int | None:
    if value is not None and value.isdigit():
        return int(value)
    return value


def _configure_logging(level: str | None) -> None:
    if level is None:
        level = config(
            "log_level",
            env="EXCEL_RECORDS_LOG_LEVEL",
            cast=Choices(LOG_LEVELS, cast=str.upper),
            default="WARNING",
        )
    setup_logging(level)


@click.group("excel-records")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (default: EXCEL_RECORDS_LOG_LEVEL or WARNING)",
)
def cli(log_level: str | None) -> None:
    """Validate spreadsheet rows as typed records."""
    try:
        _configure_logging(log_level)
    except (ConfigError, ValueError) as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)


@cli.command("validate")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--record", "record_spec", required=True, help="Record class as module:ClassName")
@click.option("--sheet", default=None, help="Worksheet name or 1-based position")
@click.option("--header-row", default=1, show_default=True, type=click.IntRange(min=1))
@click.option("--start-row", default=None, type=click.IntRange(min=1), help="First data row")
@click.option("--max-rows", default=None, type=click.IntRange(min=1))
@click.option("--stop-on-first-error", is_flag=True, default=False)
def validate_command(
    path: str,
    record_spec: str,
    sheet: str | None,
    header_row: int,
    start_row: int | None,
    max_rows: int | None,
    stop_on_first_error: bool,
) -> None:
    """Read every data row of PATH and report validation errors.

    Examples:\n
        excel-records validate customers.xlsx --record myapp.records:CustomerRecord\n
        excel-records validate book.xlsx --record myapp.records:Order --sheet Orders\n
    """
    record_cls = load_record_class(record_spec)

    try:
        reader_config = ReaderConfig(
            sheet=_sheet_option(sheet),
            header_row=header_row,
            data_row_start=start_row,
            max_rows=max_rows,
            stop_on_first_error=stop_on_first_error,
        )
        result = read_records(path, record_cls, config=reader_config)
    except _READ_ERRORS as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)

    for row_index, message in result.errors:
        click.echo(f"Row {row_index}: {message}")

    summary = result.summary
    click.echo(
        f"{summary.total_rows} records: {summary.valid_rows} valid, "
        f"{summary.invalid_rows} invalid ({summary.error_rate:.1f}% errors)"
    )
    if summary.invalid_rows:
        sys.exit(1)


@cli.command("headers")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.argument("headers", nargs=-1, required=True)
@click.option("--sheet", default=None, help="Worksheet name or 1-based position")
@click.option("--row", default=1, show_default=True, type=click.IntRange(min=1))
@click.option("--column", default=1, show_default=True, type=click.IntRange(min=1))
def headers_command(
    path: str, headers: tuple[str, ...], sheet: str | None, row: int, column: int
) -> None:
    """Check that PATH carries HEADERS starting at the given cell."""
    try:
        with open_worksheet(path, _sheet_option(sheet)) as worksheet:
            Worksheet(worksheet).validate_headers(list(headers), column=column, row=row)
    except _READ_ERRORS as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)

    click.echo("Headers OK")


def main() -> None:
    cli()
