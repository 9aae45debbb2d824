"""Integration tests for CustomerDjangoRepository.

Covers:
- Interface compliance.
- CRUD operations: get_by_id, list, add, update, delete.
- find / exists with exclusion, exact matching.
- Edge cases: invalid UUID, non-existent records, unique constraints.
"""

from __future__ import annotations

import uuid
from datetime import date

import pytest
from django.db import DatabaseError, IntegrityError

from modules.customers.models import Customer
from modules.customers.repositories.django_repository import CustomerDjangoRepository

pytestmark = [pytest.mark.integration, pytest.mark.django_db]


@pytest.fixture()
def repo() -> CustomerDjangoRepository:
    return CustomerDjangoRepository()


@pytest.fixture()
def stored(repo, fake_customers) -> list[Customer]:
    return [repo.add(customer) for customer in fake_customers]


# ===========================================================================
# Instantiation
# ===========================================================================


class TestRepositoryInstantiation:
    def test_is_instance_of_interface(self, repo):
        from modules.customers.repositories.interfaces import ICustomerRepository

        assert isinstance(repo, ICustomerRepository)


# ===========================================================================
# Reads
# ===========================================================================


class TestGetById:
    def test_returns_customer_when_found(self, repo, stored):
        result = repo.get_by_id(stored[0].id)
        assert result is not None
        assert result.email == stored[0].email

    def test_returns_none_when_not_found(self, repo):
        assert repo.get_by_id(uuid.uuid4()) is None

    def test_returns_none_for_invalid_uuid(self, repo):
        assert repo.get_by_id("not-a-uuid") is None


class TestList:
    def test_returns_all_customers(self, repo, stored):
        assert len(repo.list()) == 3

    def test_returns_empty_list_when_no_customers(self, repo):
        assert repo.list() == []


class TestFindAndExists:
    def test_find_by_email(self, repo, stored):
        found = repo.find({"email": stored[1].email})
        assert [c.id for c in found] == [stored[1].id]

    def test_exists_excludes_id(self, repo, stored):
        filters = {"email": stored[1].email}
        assert repo.exists(filters) is True
        assert repo.exists(filters, exclude_id=stored[1].id) is False
        assert repo.exists(filters, exclude_id=stored[0].id) is True

    def test_exists_on_name_triple(self, repo, stored):
        target = stored[2]
        filters = {
            "first_name": target.first_name,
            "last_name": target.last_name,
            "date_of_birth": target.date_of_birth,
        }
        assert repo.exists(filters) is True
        assert repo.exists({**filters, "date_of_birth": date(1900, 1, 1)}) is False

    def test_email_match_is_case_sensitive(self, repo, stored):
        assert repo.exists({"email": stored[0].email.upper()}) is False


# ===========================================================================
# Writes
# ===========================================================================


class TestAdd:
    def test_persists_customer(self, repo, make_customer):
        customer = repo.add(make_customer())
        assert Customer.objects.filter(id=customer.id).exists()

    def test_returns_same_entity(self, repo, make_customer):
        customer = make_customer()
        assert repo.add(customer) is customer

    def test_duplicate_email_raises(self, repo, stored, make_customer):
        with pytest.raises(IntegrityError):
            repo.add(make_customer(email=stored[0].email))
        assert Customer.objects.count() == 3

    def test_duplicate_name_triple_raises(self, repo, stored, make_customer):
        target = stored[0]
        with pytest.raises(IntegrityError):
            repo.add(
                make_customer(
                    first_name=target.first_name,
                    last_name=target.last_name,
                    date_of_birth=target.date_of_birth,
                    email="unique@example.com",
                )
            )


class TestUpdate:
    def test_updates_existing_customer(self, repo, stored):
        customer = repo.get_by_id(stored[0].id)
        customer.phone_number = "+4420700000000"
        repo.update(customer)
        assert Customer.objects.get(id=customer.id).phone_number == "+4420700000000"

    def test_missing_row_raises(self, repo, make_customer):
        with pytest.raises(DatabaseError):
            repo.update(make_customer())


class TestDelete:
    def test_removes_existing_customer(self, repo, stored):
        assert repo.delete(stored[0].id) is True
        assert not Customer.objects.filter(id=stored[0].id).exists()

    def test_returns_false_for_nonexistent(self, repo):
        assert repo.delete(uuid.uuid4()) is False

    def test_returns_false_for_invalid_uuid(self, repo):
        assert repo.delete("bad-id") is False
