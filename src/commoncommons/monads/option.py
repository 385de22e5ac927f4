"""Option type: a value that is either present or absent.

One explicit sum type replaces ad-hoc ``None`` checks. The vocabulary mirrors
Result (map, match and their awaitable forms) so optional values compose the
same way outcomes do.

Example:
    >>> Option.of(" Ada ").map(str.strip).map(str.upper).value_or("anonymous")
    'ADA'
    >>> Option.of(None).map(str.strip).value_or("anonymous")
    'anonymous'

Absence flattens through chained maps: when a mapper returns an Option it is
used as is, and when it returns ``None`` the result is ABSENT.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Awaitable, Callable, Generic, NoReturn, TypeVar, cast

from ..errors import UnwrapError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .result import Result

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


class Option(Generic[T]):
    """Present(value) or ABSENT.

    Use Present() / Option.of() to construct; ABSENT is a singleton.
    Pattern matching names the variant first: ``case Option(True, value)``.
    """

    __slots__ = ("_value", "_present")
    __match_args__ = ("_present", "_value")

    def __init__(self, value: T | None, present: bool) -> None:
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_present", present)

    def __setattr__(self, name: str, value: object) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def of(cls, value: T | None) -> Option[T]:
        """Present(value), or ABSENT when value is None."""
        return ABSENT if value is None else cls(value, True)

    @classmethod
    def absent(cls) -> Option[T]:
        return ABSENT

    # ─── Inspection ─────────────────────────────────────────────────────

    def is_present(self) -> bool:
        return self._present

    def is_absent(self) -> bool:
        return not self._present

    @property
    def value(self) -> T:
        """Present payload.

        Raises:
            UnwrapError: If absent
        """
        if self._present:
            return cast(T, self._value)
        raise UnwrapError("value read from absent option", self)

    def value_or(self, default: U) -> T | U:
        return cast(T, self._value) if self._present else default

    def to_nullable(self) -> T | None:
        """Back to the ``None`` convention for code that expects it."""
        return self._value if self._present else None

    # ─── Transformation ─────────────────────────────────────────────────

    def map(self, f: Callable[[T], U | Option[U] | None]) -> Option[U]:
        """Apply f if present. ABSENT stays ABSENT and f is not called."""
        if not self._present:
            return ABSENT
        return _lift(f(cast(T, self._value)))

    async def map_async(self, f: Callable[[T], Awaitable[U | Option[U] | None]]) -> Option[U]:
        """Awaitable form of map."""
        if not self._present:
            return ABSENT
        return _lift(await f(cast(T, self._value)))

    # ─── Consumption ────────────────────────────────────────────────────

    def match(self, success: Callable[[T], U], failure: Callable[[], U]) -> U:
        """Exactly one branch is invoked. failure takes no arguments."""
        if self._present:
            return success(cast(T, self._value))
        return failure()

    async def match_async(
        self,
        success: Callable[[T], Awaitable[U]],
        failure: Callable[[], Awaitable[U]],
    ) -> U:
        if self._present:
            return await success(cast(T, self._value))
        return await failure()

    def do(self, present: Callable[[T], object], absent: Callable[[], object]) -> Option[T]:
        """Run one callback for its effect and return self for chaining."""
        if self._present:
            present(cast(T, self._value))
        else:
            absent()
        return self

    def to_result(self, error: E) -> Result[T, E]:
        """Present as success, ABSENT as failure carrying error."""
        from .result import Result

        return Result.success(cast(T, self._value)) if self._present else Result.failure(error)

    # ─── Dunder Methods ─────────────────────────────────────────────────

    def __bool__(self) -> bool:
        """True if present, regardless of the payload's own truthiness."""
        return self._present

    def __repr__(self) -> str:
        return f"Present({self._value!r})" if self._present else "ABSENT"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        return self._present == other._present and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._present, self._value))

    def __iter__(self) -> Iterator[T]:
        if self._present:
            yield cast(T, self._value)


ABSENT: Option[Any] = Option(None, False)


def Present(value: T) -> Option[T]:  # noqa: N802
    """Construct a present Option.

    Raises:
        ValueError: If value is None; use Option.of() for nullable input
    """
    if value is None:
        raise ValueError("Present() requires a value, use Option.of() for nullable input")
    return Option(value, True)


def _lift(output: U | Option[U] | None) -> Option[U]:
    if isinstance(output, Option):
        return output
    return Option.of(output)
