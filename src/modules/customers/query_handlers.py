"""Customer query handlers.

Read-only: none of these handlers writes to the repository.  Each one
maps stored customers to ``CustomerModel`` or answers an existence check
with a ``bool`` payload.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, TypeVar

import structlog

from modules.customers import uniqueness
from modules.customers.dtos import CustomerModel
from modules.customers.queries import (
    GetCustomerByIdQuery,
    GetCustomersQuery,
    IsExistCustomerEmailForUpdateQuery,
    IsExistCustomerEmailQuery,
    IsExistCustomerNameForUpdateQuery,
    IsExistCustomerNameQuery,
)
from shared.domain.result import Result, ResultError
from shared.infrastructure.handlers import BaseRequestHandler

if TYPE_CHECKING:
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)

Q = TypeVar("Q")
T = TypeVar("T")


class CustomerQueryHandler(BaseRequestHandler[Q, T]):
    """Receives an ``ICustomerRepository`` via constructor injection."""

    def __init__(self, repository: ICustomerRepository) -> None:
        self._repo = repository


class GetCustomersQueryHandler(
    CustomerQueryHandler[GetCustomersQuery, List[CustomerModel]]
):
    def _execute(self, query: GetCustomersQuery) -> Result[List[CustomerModel]]:
        customers = [CustomerModel.from_entity(c) for c in self._repo.list()]
        logger.debug("customer.listed", count=len(customers))
        return Result.succeeded(customers)


class GetCustomerByIdQueryHandler(
    CustomerQueryHandler[GetCustomerByIdQuery, CustomerModel]
):
    def _execute(self, query: GetCustomerByIdQuery) -> Result[CustomerModel]:
        customer = self._repo.get_by_id(query.id)
        if customer is None:
            logger.info("customer.not_found", customer_id=str(query.id))
            return Result.failed(
                ResultError.NOT_FOUND, f"Customer {query.id} not found."
            )
        return Result.succeeded(CustomerModel.from_entity(customer))


class IsExistCustomerEmailQueryHandler(
    CustomerQueryHandler[IsExistCustomerEmailQuery, bool]
):
    def _execute(self, query: IsExistCustomerEmailQuery) -> Result[bool]:
        return Result.succeeded(uniqueness.email_taken(self._repo, query.email))


class IsExistCustomerEmailForUpdateQueryHandler(
    CustomerQueryHandler[IsExistCustomerEmailForUpdateQuery, bool]
):
    def _execute(self, query: IsExistCustomerEmailForUpdateQuery) -> Result[bool]:
        return Result.succeeded(
            uniqueness.email_taken(self._repo, query.email, exclude_id=query.id)
        )


class IsExistCustomerNameQueryHandler(
    CustomerQueryHandler[IsExistCustomerNameQuery, bool]
):
    def _execute(self, query: IsExistCustomerNameQuery) -> Result[bool]:
        return Result.succeeded(
            uniqueness.name_taken(
                self._repo, query.first_name, query.last_name, query.date_of_birth
            )
        )


class IsExistCustomerNameForUpdateQueryHandler(
    CustomerQueryHandler[IsExistCustomerNameForUpdateQuery, bool]
):
    def _execute(self, query: IsExistCustomerNameForUpdateQuery) -> Result[bool]:
        return Result.succeeded(
            uniqueness.name_taken(
                self._repo,
                query.first_name,
                query.last_name,
                query.date_of_birth,
                exclude_id=query.id,
            )
        )
