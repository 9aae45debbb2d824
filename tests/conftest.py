from __future__ import annotations

from datetime import date

import pytest

from modules.customers.models import Customer
from modules.customers.repositories.memory_repository import InMemoryCustomerRepository
from modules.customers.wiring import build_mediator


@pytest.fixture()
def make_customer():
    """Factory building an unsaved Customer with sane defaults."""

    def _make(**overrides) -> Customer:
        defaults = {
            "first_name": "Maria",
            "last_name": "Silva",
            "email": "maria.silva@example.com",
            "date_of_birth": date(1990, 4, 12),
            "phone_number": "+5511912345678",
        }
        defaults.update(overrides)
        return Customer(**defaults)

    return _make


@pytest.fixture()
def fake_customers(make_customer) -> list[Customer]:
    """Three distinct customers standing in for a populated table."""
    return [
        make_customer(
            first_name="Alice",
            last_name="Walker",
            email="alice.walker@example.com",
            date_of_birth=date(1985, 2, 17),
        ),
        make_customer(
            first_name="Bob",
            last_name="Stone",
            email="bob.stone@example.com",
            date_of_birth=date(1992, 8, 3),
        ),
        make_customer(
            first_name="Carol",
            last_name="Diaz",
            email="carol.diaz@example.com",
            date_of_birth=date(1978, 12, 30),
        ),
    ]


@pytest.fixture()
def memory_repo(fake_customers) -> InMemoryCustomerRepository:
    return InMemoryCustomerRepository(fake_customers)


@pytest.fixture()
def mediator(memory_repo):
    return build_mediator(memory_repo)
