"""Error message catalogue.

Every user-visible data-quality message is built here so records and the
engine phrase problems identically.
"""

from __future__ import annotations


def required(description: str) -> str:
    return f"Required: {description}"


def max_length(description: str, length: int) -> str:
    return f"{description} must not exceed {length} characters."


def exact_length(description: str, length: int) -> str:
    return f"{description} must be exactly {length} characters long."


def integer_invalid(description: str) -> str:
    return f"{description} must be a valid integer."


def short_invalid(description: str) -> str:
    return f"{description} must be a valid short integer (-32768 to 32767)."


def long_invalid(description: str) -> str:
    return f"{description} must be a valid long integer."


def number_invalid(description: str) -> str:
    return f"{description} must be a valid number."


def datetime_invalid(description: str) -> str:
    return f"{description} must be a valid date."


def time_invalid(description: str) -> str:
    return f"{description} must be a valid time."


def type_invalid(description: str, type_name: str) -> str:
    return f"{description} is not a valid {type_name}"


def email_invalid(description: str) -> str:
    return f"{description} is not a valid email address."
