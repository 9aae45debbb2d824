"""Base class for query and command handlers.

``BaseRequestHandler.handle`` is the only public entry point.  It:

1. Fails fast with ``CANCELLED`` when the cancellation signal is already
   set, before the repository is touched.
2. Runs ``_execute`` and turns any ``DatabaseError`` raised by the
   data-access layer into a ``DATA_ACCESS`` failure, so no storage fault
   escapes to the caller.
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

import structlog
from django.db import DatabaseError

from shared.domain.result import Result, ResultError

logger = structlog.get_logger(__name__)

R = TypeVar("R")
T = TypeVar("T")


class BaseRequestHandler(ABC, Generic[R, T]):
    def handle(
        self, request: R, cancellation: Optional[threading.Event] = None
    ) -> Result[T]:
        log = logger.bind(
            handler=type(self).__name__, request=type(request).__name__
        )

        if cancellation is not None and cancellation.is_set():
            log.info("request.cancelled")
            return Result.failed(
                ResultError.CANCELLED, "Operation cancelled before it started."
            )

        try:
            return self._execute(request)
        except DatabaseError as exc:
            log.error("request.data_access_failed", error=str(exc))
            return Result.failed(ResultError.DATA_ACCESS, str(exc))

    @abstractmethod
    def _execute(self, request: R) -> Result[T]:
        """Do the work for ``request``; may raise ``DatabaseError``."""
