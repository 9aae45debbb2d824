"""Customer uniqueness predicates.

A customer's email is unique, and so is its (first name, last name,
date of birth) triple.  Each check takes an optional ``exclude_id`` so an
edit that keeps the customer's own values is not reported as a clash.

Matching is exact: no case folding, no whitespace trimming.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Any, Dict, Optional
from uuid import UUID

if TYPE_CHECKING:
    from modules.customers.repositories.interfaces import ICustomerRepository


def email_filters(email: str) -> Dict[str, Any]:
    return {"email": email}


def name_filters(first_name: str, last_name: str, date_of_birth: date) -> Dict[str, Any]:
    return {
        "first_name": first_name,
        "last_name": last_name,
        "date_of_birth": date_of_birth,
    }


def email_taken(
    repository: ICustomerRepository,
    email: str,
    exclude_id: Optional[UUID] = None,
) -> bool:
    """``True`` if a customer other than ``exclude_id`` holds ``email``."""
    return repository.exists(email_filters(email), exclude_id=exclude_id)


def name_taken(
    repository: ICustomerRepository,
    first_name: str,
    last_name: str,
    date_of_birth: date,
    exclude_id: Optional[UUID] = None,
) -> bool:
    """``True`` if a customer other than ``exclude_id`` holds the name triple."""
    return repository.exists(
        name_filters(first_name, last_name, date_of_birth),
        exclude_id=exclude_id,
    )
