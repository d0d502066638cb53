"""Domain bus interfaces for in-process request dispatching."""

from __future__ import annotations

from typing import Generic, Protocol, Type, TypeVar

from shared.domain.requests import Request

Q = TypeVar("Q", bound=Request, contravariant=True)
R = TypeVar("R")
R_co = TypeVar("R_co", covariant=True)


class IRequestHandler(Protocol, Generic[Q, R_co]):
    """Handler interface: fulfils exactly one request type."""

    async def handle(self, request: Q) -> R_co: ...


class IMediator(Protocol):
    """Mediator interface."""

    async def send(self, request: Request[R]) -> R: ...

    def register(self, request_class: Type[Request], handler: IRequestHandler) -> None: ...
