"""In-memory implementation of the Customer repository.

Holds customers in a dict keyed by id and mirrors the behaviour of the
Django repository, including its storage faults: the same unique
constraints raise ``IntegrityError`` and updating a missing row raises
``DatabaseError``.  Entities are copied on the way in and out so callers
never share state with the store.
"""

from __future__ import annotations

import copy
from typing import Any, Dict, Iterable, List, Mapping, Optional
from uuid import UUID

import structlog
from django.db import DatabaseError, IntegrityError

from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository
from modules.customers.uniqueness import email_filters, name_filters

logger = structlog.get_logger(__name__)


class InMemoryCustomerRepository(ICustomerRepository):
    """Customer repository backed by a plain dict."""

    def __init__(self, customers: Iterable[Customer] = ()) -> None:
        self._customers: Dict[UUID, Customer] = {}
        for customer in customers:
            self.add(customer)

    def __len__(self) -> int:
        return len(self._customers)

    def get_by_id(self, id: UUID) -> Optional[Customer]:
        customer = self._customers.get(id)
        return copy.copy(customer) if customer is not None else None

    def list(self) -> List[Customer]:
        return [copy.copy(customer) for customer in self._customers.values()]

    def find(
        self, filters: Mapping[str, Any], exclude_id: Optional[UUID] = None
    ) -> List[Customer]:
        return [
            copy.copy(customer)
            for customer in self._customers.values()
            if customer.id != exclude_id and self._matches(customer, filters)
        ]

    def exists(
        self, filters: Mapping[str, Any], exclude_id: Optional[UUID] = None
    ) -> bool:
        return any(
            customer.id != exclude_id and self._matches(customer, filters)
            for customer in self._customers.values()
        )

    def add(self, entity: Customer) -> Customer:
        if entity.id in self._customers:
            raise IntegrityError(f"Customer {entity.id} already stored.")
        self._check_constraints(entity)
        self._customers[entity.id] = copy.copy(entity)
        logger.info("customer.saved", customer_id=str(entity.id), is_new=True)
        return entity

    def update(self, entity: Customer) -> Customer:
        if entity.id not in self._customers:
            raise DatabaseError("Forced update did not affect any rows.")
        self._check_constraints(entity)
        self._customers[entity.id] = copy.copy(entity)
        logger.info("customer.saved", customer_id=str(entity.id), is_new=False)
        return entity

    def delete(self, id: UUID) -> bool:
        removed = self._customers.pop(id, None)
        if removed is not None:
            logger.info("customer.deleted", customer_id=str(id))
        return removed is not None

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _matches(customer: Customer, filters: Mapping[str, Any]) -> bool:
        return all(getattr(customer, field) == value for field, value in filters.items())

    def _check_constraints(self, entity: Customer) -> None:
        """Enforce the same unique constraints as the ``customers`` table."""
        if self.exists(email_filters(entity.email), exclude_id=entity.id):
            raise IntegrityError("UNIQUE constraint failed: customers.email")
        if self.exists(
            name_filters(entity.first_name, entity.last_name, entity.date_of_birth),
            exclude_id=entity.id,
        ):
            raise IntegrityError(
                "UNIQUE constraint failed: customers_unique_name_birth"
            )
