"""Request bus interfaces for in-process query/command dispatch."""

from __future__ import annotations

import threading
from typing import Any, Generic, Optional, Protocol, Type, TypeVar

from shared.domain.result import Result

R = TypeVar("R", contravariant=True)
T = TypeVar("T")


class HandlerNotFound(LookupError):
    """No handler is registered for the dispatched request type."""


class HandlerAlreadyRegistered(ValueError):
    """A request type may only have a single handler."""


class IRequestHandler(Protocol, Generic[R, T]):
    """Handler interface for a single query or command type."""

    def handle(
        self, request: R, cancellation: Optional[threading.Event] = None
    ) -> Result[T]: ...


class IMediator(Protocol):
    """Mediator interface: routes each request to its one handler."""

    def send(
        self, request: Any, cancellation: Optional[threading.Event] = None
    ) -> Result[Any]: ...

    def register(self, request_class: Type[Any], handler: IRequestHandler) -> None: ...
