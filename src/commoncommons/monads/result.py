"""Result type for outcomes that can fail without raising.

A Result is a closed sum type with two variants:
- Success: carries the value of a completed operation
- Failure: carries the caller-defined error describing why it did not complete

The combinator vocabulary is deliberately small:
- map / map_async: transform the value, forward the error untouched
- match / match_async: exhaustive consumption of both variants
- do / do_async: side effects on exactly one variant, returns the Result

Callbacks run at most once and never on the wrong variant. Exceptions raised
inside a callback propagate to the caller; use try_fn / try_async to capture
them explicitly.
"""

from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Awaitable,
    Callable,
    Generic,
    NoReturn,
    ParamSpec,
    TypeAlias,
    TypeVar,
    cast,
)

from ..errors import UnwrapError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from .async_result import AsyncResult
    from .option import Option

# Type variables for generic Result
T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Mapped success type
F = TypeVar("F")  # Mapped error type
P = ParamSpec("P")

_SUCCESS = True
_FAILURE = False


class Result(Generic[T, E]):
    """Discriminated union representing success or failure.

    Examples:
        >>> Result.success(42).map(lambda v: f"got {v}").match(
        ...     lambda s: s,
        ...     lambda e: f"err: {e}",
        ... )
        'got 42'

        >>> Result.failure("boom").map(lambda v: f"got {v}").match(
        ...     lambda s: s,
        ...     lambda e: f"err: {e}",
        ... )
        'err: boom'

    Notes:
        - The discriminant is an explicit flag, so ``Success(None)`` is a success
        - Instances are immutable; every operation returns a new Result or self
        - Pattern matching names the variant first: ``case Result(True, value)``
          for success, ``case Result(False, error)`` for failure
    """

    __slots__ = ("_value", "_is_success")
    __match_args__ = ("_is_success", "_value")

    def __init__(self, value: T | E, is_success: bool) -> None:
        """Private constructor. Use Result.success()/Result.failure() instead."""
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_is_success", is_success)

    def __setattr__(self, name: str, value: object) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # ─────────────────────────────────────────────────────────────────
    # Construction
    # ─────────────────────────────────────────────────────────────────

    @classmethod
    def success(cls, value: T) -> Result[T, E]:
        """Construct the success variant. Never raises."""
        return cls(value, _SUCCESS)

    @classmethod
    def failure(cls, error: E) -> Result[T, E]:
        """Construct the failure variant. Never raises."""
        return cls(error, _FAILURE)

    # ─────────────────────────────────────────────────────────────────
    # Inspection
    # ─────────────────────────────────────────────────────────────────

    def is_success(self) -> bool:
        return self._is_success

    def is_failure(self) -> bool:
        return not self._is_success

    @property
    def value(self) -> T:
        """Success payload.

        Raises:
            UnwrapError: If the Result is a failure
        """
        if self._is_success:
            return cast(T, self._value)
        raise UnwrapError(f"value read from failure: {self._value!r}", self)

    @property
    def error(self) -> E:
        """Failure payload.

        Raises:
            UnwrapError: If the Result is a success
        """
        if not self._is_success:
            return cast(E, self._value)
        raise UnwrapError(f"error read from success: {self._value!r}", self)

    def value_or(self, default: T) -> T:
        """Success payload, or default on failure."""
        return cast(T, self._value) if self._is_success else default

    def value_or_else(self, f: Callable[[E], T]) -> T:
        """Success payload, or a value computed from the error."""
        return cast(T, self._value) if self._is_success else f(cast(E, self._value))

    # ─────────────────────────────────────────────────────────────────
    # Transformation
    # ─────────────────────────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Apply f to the value if successful; forward the error untouched otherwise.

        Type signature: Result[T, E] -> (T -> U) -> Result[U, E]
        """
        if self._is_success:
            return Result(f(cast(T, self._value)), _SUCCESS)
        return Result(cast(E, self._value), _FAILURE)

    def map_async(self, f: Callable[[T], Awaitable[U]]) -> AsyncResult[U, E]:
        """Chain an awaitable transform without awaiting it here.

        The returned AsyncResult runs f once it is awaited. On failure it
        resolves to the same error and f is never called.

        Example:
            >>> async def fetch_name(user_id: int) -> str: ...
            >>> name = await Result.success(7).map_async(fetch_name)
        """
        from .async_result import AsyncResult

        return AsyncResult.from_result(self).map_async(f)

    def map_error(self, f: Callable[[E], F]) -> Result[T, F]:
        """Apply f to the error if failed; forward the value untouched otherwise."""
        if not self._is_success:
            return Result(f(cast(E, self._value)), _FAILURE)
        return Result(cast(T, self._value), _SUCCESS)

    def bind(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain an operation that can itself fail.

        Type signature: Result[T, E] -> (T -> Result[U, E]) -> Result[U, E]

        Example:
            >>> def positive(n: int) -> Result[int, str]:
            ...     return Success(n) if n > 0 else Failure("must be positive")
            >>> Success(5).bind(positive).value
            5
            >>> Success(-1).bind(positive).error
            'must be positive'
        """
        if self._is_success:
            return f(cast(T, self._value))
        return Result(cast(E, self._value), _FAILURE)

    # ─────────────────────────────────────────────────────────────────
    # Consumption
    # ─────────────────────────────────────────────────────────────────

    def match(self, success: Callable[[T], U], failure: Callable[[E], U]) -> U:
        """Exhaustive case analysis. Exactly one of the two functions is invoked."""
        if self._is_success:
            return success(cast(T, self._value))
        return failure(cast(E, self._value))

    async def match_async(
        self,
        success: Callable[[T], Awaitable[U]],
        failure: Callable[[E], Awaitable[U]],
    ) -> U:
        """Await the selected branch only; the other is never called."""
        if self._is_success:
            return await success(cast(T, self._value))
        return await failure(cast(E, self._value))

    def do(self, success: Callable[[T], object], failure: Callable[[E], object]) -> Result[T, E]:
        """Run one callback for its effect and return self for chaining."""
        if self._is_success:
            success(cast(T, self._value))
        else:
            failure(cast(E, self._value))
        return self

    async def do_async(
        self,
        success: Callable[[T], Awaitable[object]],
        failure: Callable[[E], Awaitable[object]],
    ) -> Result[T, E]:
        """Await one callback for its effect and return self for chaining."""
        if self._is_success:
            await success(cast(T, self._value))
        else:
            await failure(cast(E, self._value))
        return self

    # ─────────────────────────────────────────────────────────────────
    # Conversion
    # ─────────────────────────────────────────────────────────────────

    def to_option(self) -> Option[T]:
        """Success value as Present, failure as ABSENT (the error is dropped)."""
        from .option import ABSENT, Option

        return Option.of(cast(T, self._value)) if self._is_success else ABSENT

    # ─────────────────────────────────────────────────────────────────
    # Dunder Methods
    # ─────────────────────────────────────────────────────────────────

    def __bool__(self) -> bool:
        """True if success."""
        return self._is_success

    def __repr__(self) -> str:
        variant = "Success" if self._is_success else "Failure"
        return f"{variant}({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return self._is_success == other._is_success and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._is_success, self._value))

    def __iter__(self) -> Iterator[T]:
        """Yield the value if success, nothing if failure."""
        if self._is_success:
            yield cast(T, self._value)


# Result whose error is a plain text message
TextResult: TypeAlias = Result[T, str]


# ═════════════════════════════════════════════════════════════════════════════
# Constructor Functions
# ═════════════════════════════════════════════════════════════════════════════


def Success(value: T) -> Result[T, E]:  # noqa: N802
    """Construct the success variant."""
    return Result(value, _SUCCESS)


def Failure(error: E) -> Result[T, E]:  # noqa: N802
    """Construct the failure variant."""
    return Result(error, _FAILURE)


# ═════════════════════════════════════════════════════════════════════════════
# Exception Capture & Collections
# ═════════════════════════════════════════════════════════════════════════════


def try_fn(f: Callable[P, T], *args: P.args, **kwargs: P.kwargs) -> Result[T, Exception]:
    """Call f, capturing a raised Exception as a failure.

    Example:
        >>> try_fn(int, "42")
        Success(42)
        >>> try_fn(int, "x").is_failure()
        True
    """
    try:
        return Result(f(*args, **kwargs), _SUCCESS)
    except Exception as e:
        return Result(e, _FAILURE)


async def try_async(
    f: Callable[P, Awaitable[T]],
    *args: P.args,
    **kwargs: P.kwargs,
) -> Result[T, Exception]:
    """Await f, capturing a raised Exception as a failure. Cancellation still propagates."""
    try:
        return Result(await f(*args, **kwargs), _SUCCESS)
    except Exception as e:
        return Result(e, _FAILURE)


def sequence(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Iterable[Result[T, E]] -> Result[list[T], E]. Stops at the first failure.

    Example:
        >>> sequence([Success(1), Success(2)])
        Success([1, 2])
        >>> sequence([Success(1), Failure("bad"), Success(3)])
        Failure('bad')
    """
    values: list[T] = []
    for r in results:
        if not r._is_success:
            return Result(cast(E, r._value), _FAILURE)
        values.append(cast(T, r._value))
    return Result(values, _SUCCESS)
