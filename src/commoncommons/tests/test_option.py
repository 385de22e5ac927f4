"""Tests for the Option type."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntEnum

import pytest

from commoncommons import UnwrapError
from commoncommons.monads import ABSENT, Failure, Option, Present, Result, Success, TextResult, tap


def _never(*_: object) -> object:
    raise AssertionError("callback must not be invoked")


async def _never_async(*_: object) -> object:
    raise AssertionError("callback must not be invoked")


# ─────────────────────────────────────────────────────────────────────────────
# Fixtures: user with an optional grade
# ─────────────────────────────────────────────────────────────────────────────


class Grade(IntEnum):
    F = 0
    D = 1
    C = 2
    B = 3
    A = 4


_PHRASES = {
    Grade.F: "Wow, you are a failure",
    Grade.D: "You are not good enough",
    Grade.C: "You are average",
    Grade.B: "You are good",
    Grade.A: "You are great",
}


def as_phrase(grade: Grade) -> TextResult[str]:
    phrase = _PHRASES.get(grade)
    return Success(phrase) if phrase else Failure("You can't even provide a correct grade")


@dataclass(frozen=True)
class User:
    name: str
    average_grade: Grade | int

    @staticmethod
    def parse(name: str, grade: str | None) -> Option[User]:
        if grade is None:
            return ABSENT
        if grade.isdigit():
            return Present(User(name, int(grade)))
        return Option.of(Grade.__members__.get(grade)).map(lambda g: User(name, g))


# ─────────────────────────────────────────────────────────────────────────────
# Construction
# ─────────────────────────────────────────────────────────────────────────────


def test_of_none_is_absent() -> None:
    assert Option.of(None) is ABSENT
    assert Option.absent() is ABSENT
    assert Option.of(0) == Present(0)


def test_present_rejects_none() -> None:
    with pytest.raises(ValueError):
        Present(None)


def test_value_access() -> None:
    assert Present("x").value == "x"
    assert Present(0).value_or(5) == 0
    assert ABSENT.value_or(5) == 5
    assert Present(1).to_nullable() == 1
    assert ABSENT.to_nullable() is None

    with pytest.raises(UnwrapError):
        ABSENT.value


# ─────────────────────────────────────────────────────────────────────────────
# map
# ─────────────────────────────────────────────────────────────────────────────


def test_map_absent_returns_absent_without_calling() -> None:
    assert ABSENT.map(_never) is ABSENT


def test_map_present() -> None:
    assert Present(1).map(lambda x: x + 1) == Present(2)


def test_map_flattens_option_and_none() -> None:
    assert Present(1).map(lambda _: ABSENT) is ABSENT
    assert Present(1).map(lambda x: Present(x * 3)) == Present(3)
    assert Present({"a": 1}).map(lambda d: d.get("b")) is ABSENT


@pytest.mark.parametrize(
    ("grade", "expected"),
    [
        (None, "No valid grade provided"),
        ("LOL", "No valid grade provided"),
        ("Z", "No valid grade provided"),
        ("49", "You can't even provide a correct grade"),
        ("B", "You are good"),
        ("A", "You are great"),
    ],
)
def test_chained_map_and_match_through_result(grade: str | None, expected: str) -> None:
    result = (
        User.parse("Mark", grade)
        .map(lambda user: replace(user, name="REDACTED"))
        .map(lambda user: user.average_grade)
        .match(
            success=as_phrase,
            failure=lambda: Result.failure("No valid grade provided"),
        )
        .match(
            success=lambda phrase: phrase,
            failure=lambda error: error,
        )
    )

    assert result == expected


@pytest.mark.asyncio
async def test_map_async() -> None:
    async def increment(x: int) -> int:
        return x + 1

    assert await ABSENT.map_async(_never_async) is ABSENT
    assert await Present(1).map_async(increment) == Present(2)


# ─────────────────────────────────────────────────────────────────────────────
# match / do
# ─────────────────────────────────────────────────────────────────────────────


def test_match() -> None:
    assert Present(42).match(lambda x: x, _never) == 42
    assert ABSENT.match(_never, lambda: -1) == -1


@pytest.mark.asyncio
async def test_match_async() -> None:
    async def same(x: int) -> int:
        return x

    async def fallback() -> int:
        return -1

    assert await Present(42).match_async(same, _never_async) == 42
    assert await ABSENT.match_async(_never_async, fallback) == -1


def test_do_returns_self() -> None:
    seen: list[object] = []

    present = Present("v")
    assert present.do(seen.append, _never) is present
    assert ABSENT.do(_never, lambda: seen.append("absent")) is ABSENT
    assert seen == ["v", "absent"]


# ─────────────────────────────────────────────────────────────────────────────
# Conversion & Dunder
# ─────────────────────────────────────────────────────────────────────────────


def test_to_result() -> None:
    assert Present(1).to_result("missing") == Success(1)
    assert ABSENT.to_result("missing") == Failure("missing")


def test_truthiness_ignores_payload() -> None:
    assert Present(0)
    assert Present("")
    assert not ABSENT


def test_repr_eq_iter() -> None:
    assert repr(Present(1)) == "Present(1)"
    assert repr(ABSENT) == "ABSENT"
    assert Present(1) != ABSENT
    assert Present(1) != 1
    assert list(Present(1)) == [1]
    assert list(ABSENT) == []


def test_option_is_immutable() -> None:
    with pytest.raises(AttributeError):
        Present(1)._value = 2  # type: ignore[misc]


def test_tap_inside_chain() -> None:
    seen: list[int] = []

    assert Present(2).map(lambda x: tap(x * 5, seen.append)) == Present(10)
    assert seen == [10]


@pytest.mark.parametrize("option", [Present(7), ABSENT])
def test_pattern_matching_names_the_variant(option: Option[int]) -> None:
    match option:
        case Option(True, value):
            matched = f"present {value}"
        case Option(False, _):
            matched = "absent"
    assert matched == option.match(lambda v: f"present {v}", lambda: "absent")
