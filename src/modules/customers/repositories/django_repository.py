"""Django ORM implementation of the Customer repository.

Satisfies ``ICustomerRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern for look-ups: methods
return ``None`` / ``False`` for missing rows instead of raising.  Storage
faults (``DatabaseError`` and subclasses) propagate to the handler layer,
which turns them into failed results.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional
from uuid import UUID

import structlog
from django.core.exceptions import ValidationError
from django.db import models, transaction

from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerDjangoRepository(ICustomerRepository):
    """Concrete Customer repository backed by Django ORM."""

    def get_by_id(self, id: UUID) -> Optional[Customer]:
        """Retrieve a customer by primary key.

        Returns ``None`` for non-existent or invalid IDs (e.g. malformed UUID).
        """
        try:
            return Customer.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def list(self) -> List[Customer]:
        return list(Customer.objects.all())

    def find(
        self, filters: Mapping[str, Any], exclude_id: Optional[UUID] = None
    ) -> List[Customer]:
        return list(self._filtered(filters, exclude_id))

    def exists(
        self, filters: Mapping[str, Any], exclude_id: Optional[UUID] = None
    ) -> bool:
        return self._filtered(filters, exclude_id).exists()

    @transaction.atomic
    def add(self, entity: Customer) -> Customer:
        entity.save(force_insert=True)
        logger.info("customer.saved", customer_id=str(entity.id), is_new=True)
        return entity

    @transaction.atomic
    def update(self, entity: Customer) -> Customer:
        """Persist changes; raises ``DatabaseError`` if the row is gone."""
        # Django turns saves of "adding" instances with a pk default into INSERTs.
        entity._state.adding = False
        entity.save(force_update=True)
        logger.info("customer.saved", customer_id=str(entity.id), is_new=False)
        return entity

    @transaction.atomic
    def delete(self, id: UUID) -> bool:
        """Hard-delete a customer by ID.

        Returns ``True`` if a row was removed, ``False`` otherwise.
        """
        try:
            deleted, _ = Customer.objects.filter(id=id).delete()
        except (ValueError, ValidationError):
            return False
        if deleted:
            logger.info("customer.deleted", customer_id=str(id))
        return bool(deleted)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _filtered(
        filters: Mapping[str, Any], exclude_id: Optional[UUID]
    ) -> models.QuerySet[Customer]:
        queryset = Customer.objects.filter(**filters)
        if exclude_id is not None:
            queryset = queryset.exclude(id=exclude_id)
        return queryset
