"""Customer model.

Business rules implemented:
- Email must be unique in the system.
- The (first name, last name, date of birth) triple must be unique.
- Delete is physical: there is no soft delete and no versioning.

Both uniqueness rules are database constraints, so a write that slips past
the existence-check queries still fails at the storage layer.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class Customer(BaseModel):
    """Customer aggregate root."""

    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100)
    email = models.EmailField(max_length=254, unique=True)
    date_of_birth = models.DateField()
    phone_number = models.CharField(max_length=20, blank=True, default="")

    class Meta:
        db_table = "customers"
        ordering = ["last_name", "first_name"]
        constraints = [
            models.UniqueConstraint(
                fields=["first_name", "last_name", "date_of_birth"],
                name="customers_unique_name_birth",
            ),
        ]

    # Fields overwritten by an update command.
    MUTABLE_FIELDS = (
        "first_name",
        "last_name",
        "email",
        "date_of_birth",
        "phone_number",
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __str__(self) -> str:
        return f"{self.full_name} ({self.date_of_birth})"
