"""Read requests for the Customer aggregate."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID


@dataclass(frozen=True)
class GetCustomersQuery:
    """List every customer."""


@dataclass(frozen=True)
class GetCustomerByIdQuery:
    id: UUID


@dataclass(frozen=True)
class IsExistCustomerEmailQuery:
    email: str


@dataclass(frozen=True)
class IsExistCustomerEmailForUpdateQuery:
    """Email check that ignores the customer being edited."""

    id: UUID
    email: str


@dataclass(frozen=True)
class IsExistCustomerNameQuery:
    first_name: str
    last_name: str
    date_of_birth: date


@dataclass(frozen=True)
class IsExistCustomerNameForUpdateQuery:
    """Name + birth date check that ignores the customer being edited."""

    id: UUID
    first_name: str
    last_name: str
    date_of_birth: date
