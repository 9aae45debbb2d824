"""Customer DTOs.

Framework-agnostic data transfer objects using Pydantic v2.
``CustomerModel`` is the presentation shape: it is what query handlers
return and what add/update commands carry.  Validation runs on input only;
``from_entity`` maps stored rows without re-validating them.  DTOs are
immutable (``frozen=True``).
"""

from __future__ import annotations

import re
from datetime import date
from typing import TYPE_CHECKING, Any, Dict, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

if TYPE_CHECKING:
    from modules.customers.models import Customer


class CustomerModel(BaseModel):
    """Immutable presentation shape of a Customer.

    ``id`` is optional because an add command carries a customer that has
    not been assigned an identifier yet; update commands must set it.
    """

    model_config = ConfigDict(frozen=True)

    id: Optional[UUID] = None
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    date_of_birth: date
    phone_number: str = Field(default="", max_length=20)

    @field_validator("phone_number", mode="before")
    @classmethod
    def sanitize_phone_number(cls, v: Any) -> Any:
        """Strip spacing and punctuation, keeping digits and a leading ``+``."""
        if not isinstance(v, str):
            return v
        return re.sub(r"[\s().\-]", "", v)

    def entity_fields(self) -> Dict[str, Any]:
        """Field values to write onto a Customer entity (everything but ``id``)."""
        return self.model_dump(exclude={"id"})

    @classmethod
    def from_entity(cls, customer: Customer) -> CustomerModel:
        """Build the presentation shape from a Customer model instance.

        Stored rows are trusted as-is: input validation is skipped so that a
        row the store accepted always maps, even if it would fail ``EmailStr``
        or the length bounds today.
        """
        return cls.model_construct(
            id=customer.id,
            first_name=customer.first_name,
            last_name=customer.last_name,
            email=customer.email,
            date_of_birth=customer.date_of_birth,
            phone_number=customer.phone_number,
        )
