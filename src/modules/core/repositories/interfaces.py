"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Handler code depends on
this abstraction, never on Django ORM directly.

``filters`` arguments are flat mappings of field name to expected value
and are matched by exact equality, so every implementation (SQL-backed
or in-memory) evaluates them identically.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, List, Mapping, Optional, TypeVar
from uuid import UUID

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Customer``).
    """

    @abstractmethod
    def get_by_id(self, id: UUID) -> Optional[T]:
        """Retrieve an entity by its primary key, ``None`` when absent."""

    @abstractmethod
    def list(self) -> List[T]:
        """Enumerate every stored entity."""

    @abstractmethod
    def find(
        self, filters: Mapping[str, Any], exclude_id: Optional[UUID] = None
    ) -> List[T]:
        """Entities whose fields equal ``filters``, minus ``exclude_id``."""

    @abstractmethod
    def exists(
        self, filters: Mapping[str, Any], exclude_id: Optional[UUID] = None
    ) -> bool:
        """``True`` when ``find`` would return at least one entity."""

    @abstractmethod
    def add(self, entity: T) -> T:
        """Persist a new entity."""

    @abstractmethod
    def update(self, entity: T) -> T:
        """Persist changes to an already stored entity."""

    @abstractmethod
    def delete(self, id: UUID) -> bool:
        """Remove an entity by ID; ``False`` when nothing was removed."""
