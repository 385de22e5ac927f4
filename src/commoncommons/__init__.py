"""commoncommons - functional wrapper types for everyday Python.

- Result: success or failure without raising
- AsyncResult: chain transforms onto a Result that is still being computed
- Option: present or absent, instead of scattered ``None`` checks
- try_parse_*: text to Option parsing

Quick Start:
    >>> from commoncommons import Failure, Success
    >>>
    >>> Success(42).map(lambda v: f"got {v}").match(lambda s: s, lambda e: f"err: {e}")
    'got 42'
    >>> Failure("boom").map(lambda v: f"got {v}").match(lambda s: s, lambda e: f"err: {e}")
    'err: boom'

Async pipelines:
    >>> from commoncommons import AsyncResult
    >>>
    >>> async def main() -> str:
    ...     return await (
    ...         AsyncResult(fetch_user(7))
    ...         .map_async(fetch_avatar)
    ...         .match_async(success=render, failure=render_error)
    ...     )

Optional values and parsing:
    >>> from commoncommons import try_parse_int
    >>>
    >>> try_parse_int("41").map(lambda n: n + 1).value_or(0)
    42
    >>> try_parse_int("abc").map(lambda n: n + 1).value_or(0)
    0
"""

from __future__ import annotations

__version__ = "1.0.0"

from .errors import CommonsError, UnwrapError
from .monads import (
    ABSENT,
    AsyncResult,
    Failure,
    Option,
    Present,
    Result,
    Success,
    TextResult,
    match_awaitable,
    sequence,
    tap,
    try_async,
    try_fn,
)
from .observability import configure_logging, get_logger
from .parsing import try_parse_bool, try_parse_datetime, try_parse_decimal, try_parse_float, try_parse_int

__all__ = [
    "__version__",
    # Result
    "Result",
    "TextResult",
    "Success",
    "Failure",
    "try_fn",
    "try_async",
    "sequence",
    # Async
    "AsyncResult",
    "match_awaitable",
    # Option
    "Option",
    "Present",
    "ABSENT",
    "tap",
    # Parsing
    "try_parse_int",
    "try_parse_float",
    "try_parse_decimal",
    "try_parse_datetime",
    "try_parse_bool",
    # Errors
    "CommonsError",
    "UnwrapError",
    # Logging
    "configure_logging",
    "get_logger",
]
