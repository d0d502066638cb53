"""Request primitives for the in-process mediator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

R = TypeVar("R")


@dataclass(frozen=True)
class Request(Generic[R]):
    """Base request (immutable).

    The type parameter ``R`` declares what the registered handler returns,
    e.g. ``GetProductsQuery(Request[list[Product]])``.
    """

    @property
    def request_name(self) -> str:
        return self.__class__.__name__
