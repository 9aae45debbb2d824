"""Customer repository interface.

Specialises ``IRepository[Customer]``; the uniqueness look-ups (email,
name + birth date) are expressed through ``find`` / ``exists`` filters
built in ``modules.customers.uniqueness``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.customers.models import Customer


class ICustomerRepository(IRepository["Customer"]):
    """Repository contract for the Customer aggregate."""
