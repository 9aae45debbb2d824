"""Explicit construction of the customer handlers.

Every handler is built with the repository it is given and registered on a
mediator, one handler per query/command type.
"""

from __future__ import annotations

from typing import Dict, Optional, Type

from modules.customers import command_handlers, commands, queries, query_handlers
from modules.customers.repositories.interfaces import ICustomerRepository
from shared.infrastructure.bus import InMemoryMediator
from shared.infrastructure.handlers import BaseRequestHandler

QUERY_HANDLERS: Dict[type, Type[BaseRequestHandler]] = {
    queries.GetCustomersQuery: query_handlers.GetCustomersQueryHandler,
    queries.GetCustomerByIdQuery: query_handlers.GetCustomerByIdQueryHandler,
    queries.IsExistCustomerEmailQuery: query_handlers.IsExistCustomerEmailQueryHandler,
    queries.IsExistCustomerEmailForUpdateQuery: (
        query_handlers.IsExistCustomerEmailForUpdateQueryHandler
    ),
    queries.IsExistCustomerNameQuery: query_handlers.IsExistCustomerNameQueryHandler,
    queries.IsExistCustomerNameForUpdateQuery: (
        query_handlers.IsExistCustomerNameForUpdateQueryHandler
    ),
}

COMMAND_HANDLERS: Dict[type, Type[BaseRequestHandler]] = {
    commands.AddCustomerCommand: command_handlers.AddCustomerCommandHandler,
    commands.UpdateCustomerCommand: command_handlers.UpdateCustomerCommandHandler,
    commands.DeleteCustomerCommand: command_handlers.DeleteCustomerCommandHandler,
}


def build_mediator(
    repository: ICustomerRepository,
    mediator: Optional[InMemoryMediator] = None,
) -> InMemoryMediator:
    """Register every customer handler, bound to ``repository``."""
    mediator = mediator if mediator is not None else InMemoryMediator()
    for request_class, handler_class in {**QUERY_HANDLERS, **COMMAND_HANDLERS}.items():
        mediator.register(request_class, handler_class(repository))
    return mediator
