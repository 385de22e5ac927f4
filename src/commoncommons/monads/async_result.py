"""Deferred Result: chain transforms onto a computation that has not finished.

An AsyncResult wraps one awaitable that will resolve to a Result. Chaining
(map, map_async) returns a new handle immediately, so a pipeline can be
assembled without an await between every step:

    >>> async def load(user_id: int) -> Result[dict, str]: ...
    >>> async def render(user: dict) -> str: ...
    >>>
    >>> page = await (
    ...     AsyncResult(load(7))
    ...     .map(lambda user: {**user, "name": user["name"].title()})
    ...     .map_async(render)
    ...     .match_async(success=wrap_ok, failure=wrap_error)
    ... )

Links run strictly in chain order, each after its predecessor has resolved.
After the first failure, later transforms are skipped and the original error
reaches the end of the chain untouched.

Nothing runs until the handle is first awaited (or as_task() is called). The
computation is then wrapped in an asyncio task that is memoized, so a handle
can be awaited, matched or extended several times without re-running it.
The task belongs to the event loop that first resolved the handle. Awaiting
it from another loop (e.g. a later ``asyncio.run``) while it is still pending
raises RuntimeError; once done, its Result can be read from any loop.

Cancelling a task that awaits the chain cancels the link it is blocked on,
which cancels the link that one awaits, back to the source.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Awaitable, Callable, Generator, Generic, TypeVar

from ..observability import get_logger
from .result import Result

if TYPE_CHECKING:
    from collections.abc import Coroutine

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")

logger = get_logger("async_result")


class _Ready(Generic[T]):
    """Awaitable that completes immediately with a known value."""

    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        self._value = value

    def __await__(self) -> Generator[None, None, T]:
        return self._value
        yield  # pragma: no cover


class AsyncResult(Generic[T, E]):
    """Lazy handle to a pending computation producing ``Result[T, E]``.

    The memoized task is bound to the loop that first resolves the handle, so a
    pending handle must not be awaited from a different ``asyncio.run`` call.

    Args:
        source: Awaitable (coroutine, task or future) resolving to a Result
    """

    __slots__ = ("_start", "_task")

    def __init__(self, source: Awaitable[Result[T, E]]) -> None:
        self._start: Callable[[], Awaitable[Result[T, E]]] = lambda: source
        self._task: asyncio.Future[Result[T, E]] | None = None

    @classmethod
    def from_result(cls, result: Result[T, E]) -> AsyncResult[T, E]:
        """Handle that resolves to an already-known Result."""
        return cls(_Ready(result))

    @classmethod
    def _deferred(cls, start: Callable[[], Coroutine[object, object, Result[T, E]]]) -> AsyncResult[T, E]:
        handle: AsyncResult[T, E] = cls.__new__(cls)
        handle._start = start
        handle._task = None
        return handle

    # ─────────────────────────────────────────────────────────────────
    # Chaining (returns immediately)
    # ─────────────────────────────────────────────────────────────────

    def map_async(self, f: Callable[[T], Awaitable[U]]) -> AsyncResult[U, E]:
        """Chain an awaitable transform of the success value.

        Returns a new handle without awaiting anything. f is called only if the
        chain so far resolved to a success.
        """
        async def link() -> Result[U, E]:
            result = await self.as_task()
            if result.is_success():
                return Result.success(await f(result.value))
            return Result.failure(result.error)

        return AsyncResult._deferred(link)

    def map(self, f: Callable[[T], U]) -> AsyncResult[U, E]:
        """Chain a synchronous transform of the success value."""
        async def link() -> Result[U, E]:
            return (await self.as_task()).map(f)

        return AsyncResult._deferred(link)

    # ─────────────────────────────────────────────────────────────────
    # Resolution (suspension points)
    # ─────────────────────────────────────────────────────────────────

    async def match_async(
        self,
        success: Callable[[T], Awaitable[U]],
        failure: Callable[[E], Awaitable[U]],
    ) -> U:
        """Wait for the whole chain, then await exactly one branch."""
        result = await self.as_task()
        return await result.match_async(success, failure)

    def as_task(self) -> asyncio.Future[Result[T, E]]:
        """Task of the full chain, created on first call and reused afterwards.

        Raises:
            RuntimeError: If called without a running event loop
        """
        if self._task is None:
            loop = asyncio.get_running_loop()
            self._task = asyncio.ensure_future(self._start(), loop=loop)
            logger.debug("scheduled async result %r", self._task)
        return self._task

    def __await__(self) -> Generator[object, None, Result[T, E]]:
        return self.as_task().__await__()

    def __repr__(self) -> str:
        state = "pending" if self._task is None or not self._task.done() else "done"
        return f"AsyncResult<{state}>"


async def match_awaitable(
    awaitable: Awaitable[Result[T, E]],
    success: Callable[[T], Awaitable[U]],
    failure: Callable[[E], Awaitable[U]],
) -> U:
    """Await a Result, then await exactly one branch.

    Example:
        >>> async def lookup(key: str) -> Result[int, str]: ...
        >>> text = await match_awaitable(lookup("a"), success=show, failure=explain)
    """
    result = await awaitable
    return await result.match_async(success, failure)
