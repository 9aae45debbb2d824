"""Customer service layer (Use Cases).

Sits in front of the handlers and plays the caller's part of the
contract: it runs the existence-check queries before sending add/update
commands, and unwraps each ``Result`` into a value or a domain exception.

Business rules enforced here:
- Email must be unique.
- First name + last name + date of birth must be unique.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, TypeVar
from uuid import UUID

import structlog

from modules.customers.commands import (
    AddCustomerCommand,
    DeleteCustomerCommand,
    UpdateCustomerCommand,
)
from modules.customers.exceptions import (
    CustomerAlreadyExists,
    CustomerNotFound,
    CustomerOperationFailed,
)
from modules.customers.queries import (
    GetCustomerByIdQuery,
    GetCustomersQuery,
    IsExistCustomerEmailForUpdateQuery,
    IsExistCustomerEmailQuery,
    IsExistCustomerNameForUpdateQuery,
    IsExistCustomerNameQuery,
)
from shared.domain.result import ResultError

if TYPE_CHECKING:
    from modules.customers.dtos import CustomerModel
    from shared.domain.bus import IMediator
    from shared.domain.result import Result

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class CustomerService:
    """Application service for Customer use-cases.

    Receives an ``IMediator`` via constructor injection (DIP).
    """

    def __init__(self, mediator: IMediator) -> None:
        self._mediator = mediator

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_customer(self, customer: CustomerModel) -> CustomerModel:
        """Create a new customer after enforcing uniqueness rules.

        Raises:
            CustomerAlreadyExists: if the email or the name + birth date
                is already taken.
        """
        if self._send(IsExistCustomerEmailQuery(customer.email)):
            logger.warning("customer.duplicate_email")
            raise CustomerAlreadyExists("Email already registered.")

        if self._send(
            IsExistCustomerNameQuery(
                customer.first_name, customer.last_name, customer.date_of_birth
            )
        ):
            logger.warning("customer.duplicate_name")
            raise CustomerAlreadyExists(
                "A customer with this name and date of birth already exists."
            )

        created = self._send(AddCustomerCommand(customer))
        logger.info("customer.created", customer_id=str(created.id))
        return created

    def update_customer(self, customer: CustomerModel) -> CustomerModel:
        """Overwrite an existing customer.

        Raises:
            CustomerNotFound: if the customer does not exist.
            CustomerAlreadyExists: if the new email or name + birth date
                collides with another customer.
        """
        if customer.id is None:
            raise CustomerNotFound("Customer id is required for an update.")

        log = logger.bind(customer_id=str(customer.id))

        if self._send(IsExistCustomerEmailForUpdateQuery(customer.id, customer.email)):
            log.warning("customer.duplicate_email")
            raise CustomerAlreadyExists("Email already registered.")

        if self._send(
            IsExistCustomerNameForUpdateQuery(
                customer.id,
                customer.first_name,
                customer.last_name,
                customer.date_of_birth,
            )
        ):
            log.warning("customer.duplicate_name")
            raise CustomerAlreadyExists(
                "A customer with this name and date of birth already exists."
            )

        return self._send(UpdateCustomerCommand(customer))

    def delete_customer(self, id: UUID) -> None:
        """Remove a customer.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        self._send(DeleteCustomerCommand(id))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_customers(self) -> List[CustomerModel]:
        return self._send(GetCustomersQuery())

    def get_customer(self, id: UUID) -> CustomerModel:
        """Retrieve a single customer by ID.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        return self._send(GetCustomerByIdQuery(id))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _send(self, request: object) -> T:
        result: Result[T] = self._mediator.send(request)
        if result.is_succeeded:
            return result.data
        if result.error == ResultError.NOT_FOUND:
            raise CustomerNotFound(result.message)
        logger.error(
            "customer.operation_failed",
            request=type(request).__name__,
            error=str(result.error),
            message=result.message,
        )
        raise CustomerOperationFailed(result.message or str(result.error))
