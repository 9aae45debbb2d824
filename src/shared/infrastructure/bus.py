"""In-memory mediator implementation."""

from __future__ import annotations

import threading
from typing import Any, Dict, Optional, Type

import structlog

from shared.domain.bus import (
    HandlerAlreadyRegistered,
    HandlerNotFound,
    IMediator,
    IRequestHandler,
)
from shared.domain.result import Result

logger = structlog.get_logger(__name__)


class InMemoryMediator(IMediator):
    """Simple in-process request dispatcher (one handler per request type)."""

    def __init__(self) -> None:
        self._handlers: Dict[Type[Any], IRequestHandler] = {}

    def register(self, request_class: Type[Any], handler: IRequestHandler) -> None:
        if request_class in self._handlers:
            raise HandlerAlreadyRegistered(
                f"Handler already registered for {request_class.__name__}."
            )
        self._handlers[request_class] = handler

    def send(
        self, request: Any, cancellation: Optional[threading.Event] = None
    ) -> Result[Any]:
        handler = self._handlers.get(type(request))
        if handler is None:
            raise HandlerNotFound(
                f"No handler registered for {type(request).__name__}."
            )
        logger.debug(
            "mediator.dispatch",
            request=type(request).__name__,
            handler=type(handler).__name__,
        )
        return handler.handle(request, cancellation)

    @property
    def registered(self) -> tuple[Type[Any], ...]:
        return tuple(self._handlers)
