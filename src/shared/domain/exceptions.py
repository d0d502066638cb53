"""Dispatcher configuration errors.

These signal programming or wiring defects, never a runtime condition
that callers are expected to recover from.
"""

from __future__ import annotations


class DispatchError(Exception):
    """Base class for mediator configuration errors."""


class UnregisteredRequestError(DispatchError):
    """No handler is registered for the request type."""

    def __init__(self, request_class: type) -> None:
        self.request_class = request_class
        super().__init__(f"No handler registered for {request_class.__name__!r}.")


class DuplicateHandlerError(DispatchError):
    """A handler is already registered for the request type."""

    def __init__(self, request_class: type) -> None:
        self.request_class = request_class
        super().__init__(
            f"A handler is already registered for {request_class.__name__!r}."
        )


class HandlerRegistrySealedError(DispatchError):
    """The registry was sealed at startup and no longer accepts handlers."""
