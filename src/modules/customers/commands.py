"""Write requests for the Customer aggregate."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from modules.customers.dtos import CustomerModel


@dataclass(frozen=True)
class AddCustomerCommand:
    """Insert a new customer; ``customer.id`` is ignored."""

    customer: CustomerModel


@dataclass(frozen=True)
class UpdateCustomerCommand:
    """Overwrite the customer identified by ``customer.id``."""

    customer: CustomerModel


@dataclass(frozen=True)
class DeleteCustomerCommand:
    id: UUID
