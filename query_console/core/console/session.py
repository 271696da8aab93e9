from typing import Optional

from query_console.core.config import settings
from query_console.core.console.backend import QueryBackend
from query_console.core.console.controller import QueryController
from query_console.core.console.synchronizer import SchemaSynchronizer
from query_console.core.console.view import ConsoleView


class QueryConsole:
    """One console: its view handles plus the controller and synchronizer wired to them."""

    def __init__(
        self,
        backend: QueryBackend,
        view: Optional[ConsoleView] = None,
        schema_query: Optional[str] = None,
        strict_separator: Optional[bool] = None,
    ):
        self.backend = backend
        self.view = view or ConsoleView()

        if schema_query is None:
            schema_query = settings.SCHEMA_QUERY
        if strict_separator is None:
            strict_separator = settings.STRICT_SEPARATOR

        self.controller = QueryController(
            backend, self.view, strict_separator=strict_separator
        )
        self.synchronizer = SchemaSynchronizer(
            backend, self.view, schema_query=schema_query
        )
