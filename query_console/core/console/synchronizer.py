import logging
from enum import Enum
from typing import Optional

from query_console.core.console.backend import QueryBackend
from query_console.core.console.interpreter import failure_text
from query_console.core.console.parsing import parse_schema_reply, select_all_query
from query_console.core.console.tickets import TicketCounter
from query_console.core.console.view import ConsoleView
from query_console.core.schemas import ErrorText, Message, RenderInstruction


LOADING_TEXT = "Loading..."
SCHEMA_FAILED_TEXT = "Failed to load schema."


class SyncState(Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERROR_SHOWN = "error_shown"


class SchemaSynchronizer:
    """
    Keeps the schema sidebar in line with the backend's table listing.

    refresh() asks the backend for its tables and renders the outcome in
    the schema area. select() only fills the query input, it never calls
    the backend.
    """

    def __init__(
        self,
        backend: QueryBackend,
        view: ConsoleView,
        schema_query: str = "SHOW TABLES",
    ):
        self.backend = backend
        self.view = view
        self.schema_query = schema_query
        self.state = SyncState.IDLE
        self._tickets = TicketCounter()

    def _render(self, ticket: int, instruction: RenderInstruction) -> None:
        if self._tickets.is_current(ticket):
            self.view.schema.render(instruction)

    async def refresh(self) -> RenderInstruction:
        ticket = self._tickets.issue()
        self.state = SyncState.LOADING
        self._render(ticket, Message(text=LOADING_TEXT))

        try:
            reply = await self.backend.execute_query(self.schema_query)
        except Exception as error:
            logging.error(f"Failed to load schema: {error}")
            instruction = ErrorText(text=SCHEMA_FAILED_TEXT, cause=failure_text(error))
            next_state = SyncState.ERROR_SHOWN
        else:
            instruction = parse_schema_reply(reply)
            next_state = SyncState.READY

        # A newer refresh owns the sidebar now
        if self._tickets.is_current(ticket):
            self.state = next_state
            self._render(ticket, instruction)

        return instruction

    def select(self, table_name: str) -> str:
        """Pre-fill the query input with SELECT * FROM <table_name>."""
        query = select_all_query(table_name)
        self.view.query_input.set(query)
        self.view.query_input.focus()
        return query

    @property
    def current(self) -> Optional[RenderInstruction]:
        return self.view.schema.current
