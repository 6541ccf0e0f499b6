"""Errors raised by the repository layer.

Only argument problems are exceptions. A record that cannot be found is
reported through the return value (False / None) so callers can tell
"nothing to do" apart from "something went wrong". Database errors raised by
SQLAlchemy are never wrapped.
"""

from __future__ import annotations


class RepositoryError(Exception):
    """Base class for errors raised by this package."""


class InvalidArgumentError(RepositoryError, ValueError):
    """A structurally invalid argument: unset id, page below 1, unknown mode."""

    def __init__(self, argument: str, message: str) -> None:
        super().__init__(f"{argument}: {message}")
        self.argument = argument


class NullArgumentError(InvalidArgumentError):
    """A required entity argument was None."""

    def __init__(self, argument: str) -> None:
        super().__init__(argument, "must not be None")
