"""Customer command handlers.

Handlers trust their input: uniqueness is checked by the caller through
the existence queries before a command is sent.  A write that still
collides fails at the storage layer and comes back as a ``DATA_ACCESS``
failure.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

import structlog

from modules.customers.commands import (
    AddCustomerCommand,
    DeleteCustomerCommand,
    UpdateCustomerCommand,
)
from modules.customers.dtos import CustomerModel
from modules.customers.models import Customer
from shared.domain.result import Result, ResultError
from shared.infrastructure.handlers import BaseRequestHandler

if TYPE_CHECKING:
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)

C = TypeVar("C")
T = TypeVar("T")


class CustomerCommandHandler(BaseRequestHandler[C, T]):
    """Receives an ``ICustomerRepository`` via constructor injection."""

    def __init__(self, repository: ICustomerRepository) -> None:
        self._repo = repository


class AddCustomerCommandHandler(
    CustomerCommandHandler[AddCustomerCommand, CustomerModel]
):
    def _execute(self, command: AddCustomerCommand) -> Result[CustomerModel]:
        customer = self._repo.add(Customer(**command.customer.entity_fields()))
        logger.info("customer.added", customer_id=str(customer.id))
        return Result.succeeded(CustomerModel.from_entity(customer))


class UpdateCustomerCommandHandler(
    CustomerCommandHandler[UpdateCustomerCommand, CustomerModel]
):
    def _execute(self, command: UpdateCustomerCommand) -> Result[CustomerModel]:
        payload = command.customer
        customer = (
            self._repo.get_by_id(payload.id) if payload.id is not None else None
        )
        if customer is None:
            logger.info("customer.not_found", customer_id=str(payload.id))
            return Result.failed(
                ResultError.NOT_FOUND, f"Customer {payload.id} not found."
            )

        for field in Customer.MUTABLE_FIELDS:
            setattr(customer, field, getattr(payload, field))

        customer = self._repo.update(customer)
        logger.info("customer.updated", customer_id=str(customer.id))
        return Result.succeeded(CustomerModel.from_entity(customer))


class DeleteCustomerCommandHandler(
    CustomerCommandHandler[DeleteCustomerCommand, None]
):
    def _execute(self, command: DeleteCustomerCommand) -> Result[None]:
        if not self._repo.delete(command.id):
            logger.info("customer.not_found", customer_id=str(command.id))
            return Result.failed(
                ResultError.NOT_FOUND, f"Customer {command.id} not found."
            )
        logger.info("customer.removed", customer_id=str(command.id))
        return Result.succeeded()
