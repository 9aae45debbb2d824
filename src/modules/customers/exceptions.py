"""Customer domain exceptions.

Raised by ``CustomerService`` when it unwraps a handler ``Result`` or
when a uniqueness rule is violated.  Handlers themselves never raise:
they return a failed ``Result`` instead.
"""

from __future__ import annotations


class CustomerAlreadyExists(Exception):
    """A customer with the same email, or the same name and birth date, exists."""


class CustomerNotFound(Exception):
    """The requested customer does not exist."""


class CustomerOperationFailed(Exception):
    """A handler returned a failure other than not-found (cancelled, storage fault)."""
