"""Parse text into Option values.

Every helper accepts ``str | None`` and returns Present(parsed) or ABSENT.
``None``, blank and malformed input all yield ABSENT; nothing here raises for
bad input and ``None`` never reaches the underlying parser.

Grammar follows invariant-culture conventions:
- integers: optional sign and ASCII digits
- floats/decimals: optional sign, ``,`` thousands groups, ``.`` decimal point
- booleans: ``true`` / ``false`` in any case
- datetimes: ISO 8601, then the configured strptime formats (US month-first)

Surrounding whitespace is ignored everywhere.
"""

from __future__ import annotations

import re
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any

from .config import get_settings
from .monads import ABSENT, Option, Present
from .observability import get_logger

logger = get_logger("parsing")

_DIGITS = r"(?:\d{1,3}(?:,\d{3})+|\d+)"
_NUMBER = rf"[+-]?(?:{_DIGITS}(?:\.\d*)?|\.\d+)"

_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)
_FLOAT_RE = re.compile(rf"{_NUMBER}(?:[eE][+-]?\d+)?|[+-]?(?:inf(?:inity)?|nan)", re.ASCII | re.IGNORECASE)
_DECIMAL_RE = re.compile(_NUMBER, re.ASCII)

_BOOLS = {"true": True, "false": False}


def _prepare(text: str | None, kind: str) -> str | None:
    """Stripped text, or None when there is nothing to parse."""
    if text is None:
        return None
    stripped = text.strip()
    if not stripped:
        logger.debug("blank input rejected as %s", kind)
        return None
    return stripped


def _reject(text: str, kind: str) -> Option[Any]:
    logger.debug("could not parse %r as %s", text, kind)
    return ABSENT


def try_parse_int(text: str | None) -> Option[int]:
    """Parse an integer literal.

    Example:
        >>> try_parse_int(" -123 ")
        Present(-123)
        >>> try_parse_int("1_000")
        ABSENT
    """
    if (s := _prepare(text, "int")) is None:
        return ABSENT
    if not _INT_RE.fullmatch(s):
        return _reject(s, "int")
    try:
        return Present(int(s))
    except ValueError:
        # Beyond sys.get_int_max_str_digits()
        return _reject(s, "int")


def try_parse_float(text: str | None) -> Option[float]:
    """Parse a floating-point literal, including ``inf``/``nan``.

    Example:
        >>> try_parse_float("1,234.5")
        Present(1234.5)
    """
    if (s := _prepare(text, "float")) is None:
        return ABSENT
    if not _FLOAT_RE.fullmatch(s):
        return _reject(s, "float")
    return Present(float(s.replace(",", "")))


def try_parse_decimal(text: str | None) -> Option[Decimal]:
    """Parse a fixed-point literal exactly. No exponent, no NaN or infinity."""
    if (s := _prepare(text, "decimal")) is None:
        return ABSENT
    if not _DECIMAL_RE.fullmatch(s):
        return _reject(s, "decimal")
    try:
        return Present(Decimal(s.replace(",", "")))
    except InvalidOperation:
        return _reject(s, "decimal")


def try_parse_datetime(text: str | None, formats: tuple[str, ...] | None = None) -> Option[datetime]:
    """Parse a date/time.

    Args:
        text: Input text
        formats: strptime formats tried after ISO 8601; defaults to
            ``COMMONCOMMONS_PARSE_DATETIME_FORMATS``

    Example:
        >>> try_parse_datetime("01/31/2020")
        Present(datetime.datetime(2020, 1, 31, 0, 0))
    """
    if (s := _prepare(text, "datetime")) is None:
        return ABSENT
    try:
        return Present(datetime.fromisoformat(s))
    except ValueError:
        pass
    for fmt in formats if formats is not None else get_settings().parsing.datetime_formats:
        try:
            return Present(datetime.strptime(s, fmt))
        except ValueError:
            continue
    return _reject(s, "datetime")


def try_parse_bool(text: str | None) -> Option[bool]:
    """Parse ``true`` / ``false`` (case-insensitive)."""
    if (s := _prepare(text, "bool")) is None:
        return ABSENT
    parsed = _BOOLS.get(s.lower())
    if parsed is None:
        return _reject(s, "bool")
    return Present(parsed)


__all__ = [
    "try_parse_bool",
    "try_parse_datetime",
    "try_parse_decimal",
    "try_parse_float",
    "try_parse_int",
]
