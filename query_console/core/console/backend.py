# query_console/core/console/backend.py
"""
BACKEND MODULE - The single call the console makes: execute_query(query) -> str

Backends:
    HttpQueryBackend  → forwards the query to a remote engine over HTTP
    SqlQueryBackend   → runs the query on the async SQLAlchemy engine and
                        answers in the engine's text grammar

Both raise QueryBackendError on failure. The console still turns any other
exception a backend lets through into an error message.
"""

from typing import Any, List, Optional

import httpx
from sqlalchemy import inspect, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from query_console.core.config import settings
from query_console.core.console.parsing import format_schema_reply, format_tabular
from query_console.core.database import AsyncSessionLocal, engine
from query_console.core.schemas import ParsedTable


HELP_TEXT = "\n".join(
    [
        "Available commands:",
        "  SELECT ... - Query data, rows come back as a table",
        "  INSERT / UPDATE / DELETE / CREATE ... - Change data or schema",
        "  INSPECT <table_name> - Show table columns and types",
        "  SHOW TABLES - List all tables in the database",
        "  help - Show this help message",
    ]
)


class QueryBackendError(Exception):
    """
    Raised when the backend could not run a query.

    `detail` keeps the raw failure value (string or structured); str() of
    the exception is its text form, which is what the operator sees.
    """

    def __init__(self, detail: Any):
        self.detail = detail
        super().__init__(str(detail))


class QueryBackend:
    """Interface of a query-execution backend."""

    async def execute_query(self, query: str) -> str:
        raise NotImplementedError


# ============================================================================
# HTTP BACKEND
# ============================================================================


class HttpQueryBackend(QueryBackend):
    def __init__(
        self,
        url: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url
        self.timeout = timeout
        self._transport = transport

    async def execute_query(self, query: str) -> str:
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.post(self.url, json={"query": query})
        except httpx.HTTPError as error:
            raise QueryBackendError(str(error) or error.__class__.__name__) from error

        if response.is_error:
            raise QueryBackendError(
                response.text or f"Backend returned HTTP {response.status_code}"
            )

        return response.text


# ============================================================================
# SQL BACKEND
# ============================================================================


def _cell(value: Any) -> str:
    if value is None:
        return "NULL"
    return str(value)


class SqlQueryBackend(QueryBackend):
    """
    Run console queries directly on a SQLAlchemy async engine.

    SHOW TABLES, INSPECT <table> and help are answered here; everything else
    goes to the database as a textual SQL statement.
    """

    def __init__(
        self,
        engine: AsyncEngine,
        session_factory: Optional[async_sessionmaker[AsyncSession]] = None,
    ):
        self.engine = engine
        self._sessions = session_factory or async_sessionmaker(
            bind=engine, class_=AsyncSession, expire_on_commit=False
        )

    async def execute_query(self, query: str) -> str:
        statement = query.strip()
        command = statement.rstrip(";").strip()
        lowered = command.lower()

        try:
            if lowered == "help":
                return HELP_TEXT
            if lowered == "show tables":
                return format_schema_reply(await self._table_names())
            if lowered.startswith("inspect "):
                return await self._inspect(command[len("inspect ") :].strip())
            return await self._run(statement)
        except SQLAlchemyError as error:
            raise QueryBackendError(f"Error: {error}") from error

    async def _table_names(self) -> List[str]:
        async with self.engine.connect() as conn:
            return await conn.run_sync(
                lambda sync_conn: inspect(sync_conn).get_table_names()
            )

    async def _inspect(self, table_name: str) -> str:
        if table_name not in await self._table_names():
            return f"Table '{table_name}' not found"

        async with self.engine.connect() as conn:
            columns = await conn.run_sync(
                lambda sync_conn: inspect(sync_conn).get_columns(table_name)
            )

        table = ParsedTable(
            headers=["Column", "Type"],
            rows=[[column["name"], str(column["type"])] for column in columns],
        )
        return format_tabular(table)

    async def _run(self, statement: str) -> str:
        async with self._sessions() as session:
            result = await session.execute(text(statement))

            returns_rows = result.returns_rows
            if returns_rows:
                headers = list(result.keys())
                rows = [[_cell(value) for value in row] for row in result.all()]
            else:
                affected = result.rowcount

            # RETURNING statements write too
            await session.commit()

        if returns_rows:
            if not rows:
                return "No rows found"
            return format_tabular(ParsedTable(headers=headers, rows=rows))

        if affected is None or affected < 0:
            return "Statement executed"
        return f"Statement executed, {affected} rows affected"


def get_backend() -> QueryBackend:
    """Build the backend selected by settings.BACKEND."""
    if settings.BACKEND == "http":
        return HttpQueryBackend(settings.BACKEND_URL, timeout=settings.BACKEND_TIMEOUT)

    return SqlQueryBackend(engine, AsyncSessionLocal)
