"""Result, AsyncResult and Option: value-semantics outcome and presence types.

Example:
    >>> from commoncommons.monads import Failure, Result, Success
    >>>
    >>> def divide(a: int, b: int) -> Result[float, str]:
    ...     return Failure("division by zero") if b == 0 else Success(a / b)
    >>>
    >>> divide(10, 4).map(lambda x: x * 2).match(str, lambda e: f"error: {e}")
    '5.0'
    >>> divide(1, 0).map(lambda x: x * 2).match(str, lambda e: f"error: {e}")
    'error: division by zero'
"""

from .async_result import AsyncResult, match_awaitable
from .option import ABSENT, Option, Present
from .result import Failure, Result, Success, TextResult, sequence, try_async, try_fn
from .tap import tap

__all__ = [
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
    # Misc
    "tap",
]
