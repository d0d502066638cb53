"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Handlers and services
depend on this abstraction, never on Django ORM directly.

Every method is a coroutine: callers suspend while the query runs.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Category``, ``Product``).
    """

    @abstractmethod
    async def get_by_id(self, id: int) -> Optional[T]:
        """Retrieve an entity by its primary key, ``None`` when absent."""

    @abstractmethod
    async def create(self, entity: T) -> T:
        """Persist a new entity."""

    @abstractmethod
    async def update(self, entity: T) -> T:
        """Persist changes to an existing entity."""

    @abstractmethod
    async def remove(self, entity: T) -> T:
        """Delete an entity."""
