"""Exceptions raised by commoncommons itself.

Result and Option never raise for their own states; these cover misuse only,
such as reading the value of a failure. Exceptions raised inside user callbacks
are never wrapped in these types.
"""

from __future__ import annotations


class CommonsError(Exception):
    """Base class for commoncommons exceptions."""


class UnwrapError(CommonsError, RuntimeError):
    """Read the payload of the wrong variant (e.g. ``.value`` on a failure).

    Attributes:
        container: The Result or Option that was read
    """

    def __init__(self, message: str, container: object) -> None:
        super().__init__(message)
        self.container = container


__all__ = ["CommonsError", "UnwrapError"]
