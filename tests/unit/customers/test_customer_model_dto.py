"""Unit tests for the CustomerModel presentation DTO.

Covers:
- Validation: email format, required names.
- Phone number sanitisation.
- from_entity mapping and entity_fields.
- Frozen immutability.
"""

from __future__ import annotations

from datetime import date
from uuid import uuid4

import pytest
from pydantic import ValidationError

from modules.customers.dtos import CustomerModel

pytestmark = pytest.mark.unit


def _model(**overrides) -> CustomerModel:
    defaults = {
        "first_name": "Maria",
        "last_name": "Silva",
        "email": "maria.silva@example.com",
        "date_of_birth": date(1990, 4, 12),
    }
    defaults.update(overrides)
    return CustomerModel(**defaults)


class TestValidation:
    def test_id_is_optional(self):
        assert _model().id is None

    def test_phone_number_defaults_empty(self):
        assert _model().phone_number == ""

    def test_invalid_email_raises(self):
        with pytest.raises(ValidationError):
            _model(email="not-an-email")

    def test_empty_first_name_raises(self):
        with pytest.raises(ValidationError):
            _model(first_name="")

    def test_date_of_birth_parsed_from_iso_string(self):
        assert _model(date_of_birth="1990-04-12").date_of_birth == date(1990, 4, 12)


class TestPhoneSanitisation:
    def test_strips_formatting(self):
        assert _model(phone_number="+55 (11) 91234-5678").phone_number == "+5511912345678"

    def test_keeps_plain_digits(self):
        assert _model(phone_number="5551230001").phone_number == "5551230001"


class TestMapping:
    def test_from_entity_preserves_fields(self, make_customer):
        customer = make_customer()
        dto = CustomerModel.from_entity(customer)

        assert dto.id == customer.id
        assert dto.first_name == "Maria"
        assert dto.last_name == "Silva"
        assert dto.email == "maria.silva@example.com"
        assert dto.date_of_birth == date(1990, 4, 12)
        assert dto.phone_number == "+5511912345678"

    def test_from_entity_does_not_revalidate_stored_values(self, make_customer):
        customer = make_customer(email="user@localhost", first_name="")
        dto = CustomerModel.from_entity(customer)

        assert dto.email == "user@localhost"
        assert dto.first_name == ""

    def test_entity_fields_excludes_id(self):
        dto = _model(id=uuid4(), phone_number="+5511912345678")
        assert dto.entity_fields() == {
            "first_name": "Maria",
            "last_name": "Silva",
            "email": "maria.silva@example.com",
            "date_of_birth": date(1990, 4, 12),
            "phone_number": "+5511912345678",
        }


class TestFrozen:
    def test_is_immutable(self):
        dto = _model()
        with pytest.raises(ValidationError):
            dto.first_name = "Changed"
