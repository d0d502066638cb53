"""In-memory mediator implementation."""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping, Type, TypeVar

import structlog

from shared.domain.bus import IMediator, IRequestHandler
from shared.domain.exceptions import (
    DuplicateHandlerError,
    HandlerRegistrySealedError,
    UnregisteredRequestError,
)
from shared.domain.requests import Request

R = TypeVar("R")

logger = structlog.get_logger(__name__)


class InMemoryMediator(IMediator):
    """Routes each request to the single handler bound to its concrete type.

    Handlers are registered at startup and the registry is then sealed;
    afterwards it is a read-only mapping shared by every in-flight request.
    """

    def __init__(self) -> None:
        self._handlers: Dict[Type[Request], IRequestHandler] = {}
        self._sealed = False

    @property
    def sealed(self) -> bool:
        return self._sealed

    @property
    def handlers(self) -> Mapping[Type[Request], IRequestHandler]:
        return MappingProxyType(self._handlers)

    def register(self, request_class: Type[Request], handler: IRequestHandler) -> None:
        if self._sealed:
            raise HandlerRegistrySealedError(
                f"Cannot register {request_class.__name__!r}: registry is sealed."
            )
        if request_class in self._handlers:
            raise DuplicateHandlerError(request_class)
        self._handlers[request_class] = handler

    def seal(self) -> None:
        """Freeze the registry. Idempotent."""
        if not self._sealed:
            self._sealed = True
            logger.info(
                "dispatch.registry_sealed",
                requests=sorted(cls.__name__ for cls in self._handlers),
            )

    async def send(self, request: Request[R]) -> R:
        """Await the registered handler in the caller's task.

        Cancelling the caller cancels the handler and whatever it awaits.
        The handler's value is returned unchanged.
        """
        handler = self._handlers.get(type(request))
        if handler is None:
            logger.error("dispatch.unregistered_request", request=request.request_name)
            raise UnregisteredRequestError(type(request))
        return await handler.handle(request)


# Global mediator instance (singleton), populated in ``ProductsConfig.ready``

mediator = InMemoryMediator()
