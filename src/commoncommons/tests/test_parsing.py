"""Tests for text parsing helpers."""

from __future__ import annotations

import logging
import math
from datetime import datetime
from decimal import Decimal

import pytest

from commoncommons import (
    ABSENT,
    Present,
    try_parse_bool,
    try_parse_datetime,
    try_parse_decimal,
    try_parse_float,
    try_parse_int,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("123", Present(123)),
        ("-123", Present(-123)),
        ("+7", Present(7)),
        ("  42 ", Present(42)),
        ("abc", ABSENT),
        ("1_000", ABSENT),
        ("1.5", ABSENT),
        ("1" * 5000, ABSENT),
        ("", ABSENT),
        ("   ", ABSENT),
        (None, ABSENT),
    ],
)
def test_try_parse_int(text: str | None, expected: object) -> None:
    assert try_parse_int(text) == expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("123.45", Present(123.45)),
        ("-123.45", Present(-123.45)),
        ("1,234.5", Present(1234.5)),
        ("1e3", Present(1000.0)),
        (".5", Present(0.5)),
        ("abc", ABSENT),
        ("1_0.0", ABSENT),
        ("1,2", ABSENT),
        (None, ABSENT),
    ],
)
def test_try_parse_float(text: str | None, expected: object) -> None:
    assert try_parse_float(text) == expected


def test_try_parse_float_special_values() -> None:
    assert try_parse_float("Infinity") == Present(math.inf)
    assert try_parse_float("-inf") == Present(-math.inf)
    assert math.isnan(try_parse_float("NaN").value)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("123.45", Present(Decimal("123.45"))),
        ("-123.45", Present(Decimal("-123.45"))),
        ("0.1", Present(Decimal("0.1"))),
        ("10,000.00", Present(Decimal("10000.00"))),
        ("1e5", ABSENT),
        ("NaN", ABSENT),
        ("abc", ABSENT),
        (None, ABSENT),
    ],
)
def test_try_parse_decimal(text: str | None, expected: object) -> None:
    assert try_parse_decimal(text) == expected


def test_try_parse_decimal_is_exact() -> None:
    assert try_parse_decimal("0.1").value + try_parse_decimal("0.2").value == Decimal("0.3")


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("01/01/2020", Present(datetime(2020, 1, 1))),
        ("12/31/2021 23:59:58", Present(datetime(2021, 12, 31, 23, 59, 58))),
        ("2020-01-01", Present(datetime(2020, 1, 1))),
        ("2020-01-01T10:30:00", Present(datetime(2020, 1, 1, 10, 30))),
        ("13/01/2020", ABSENT),
        ("abc", ABSENT),
        (None, ABSENT),
    ],
)
def test_try_parse_datetime(text: str | None, expected: object) -> None:
    assert try_parse_datetime(text) == expected


def test_try_parse_datetime_explicit_formats() -> None:
    assert try_parse_datetime("31.01.2020", formats=("%d.%m.%Y",)) == Present(datetime(2020, 1, 31))
    assert try_parse_datetime("01/31/2020", formats=()) is ABSENT


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("true", Present(True)),
        ("false", Present(False)),
        ("TRUE", Present(True)),
        (" False ", Present(False)),
        ("yes", ABSENT),
        ("1", ABSENT),
        ("abc", ABSENT),
        (None, ABSENT),
    ],
)
def test_try_parse_bool(text: str | None, expected: object) -> None:
    assert try_parse_bool(text) == expected


def test_parsed_values_compose() -> None:
    assert try_parse_int("41").map(lambda n: n + 1).value_or(0) == 42
    assert try_parse_int("x").map(lambda n: n + 1).value_or(0) == 0


def test_rejected_input_is_logged_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="commoncommons.parsing"):
        try_parse_int("abc")

    assert "could not parse 'abc' as int" in caplog.text
