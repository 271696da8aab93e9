import asyncio

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine

from query_console.api.dependencies import get_console
from query_console.core.console.backend import QueryBackend, SqlQueryBackend
from query_console.core.console.session import QueryConsole
from query_console.main import app


class FakeBackend(QueryBackend):
    """
    Backend stand-in with canned replies.

    A reply that is an exception is raised instead of returned. Queries with
    a gate wait for it to be set before answering, with the reply that
    was current when they were called.
    """

    def __init__(self, replies=None):
        self.replies = dict(replies or {})
        self.calls = []
        self.gates = {}

    def hold(self, query: str) -> asyncio.Event:
        self.gates[query] = asyncio.Event()
        return self.gates[query]

    async def execute_query(self, query: str) -> str:
        self.calls.append(query)
        reply = self.replies.get(query, "")
        gate = self.gates.get(query)
        if gate is not None:
            await gate.wait()
        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest.fixture
def backend():
    return FakeBackend(
        {
            "SHOW TABLES": "Tables:\n- orders\n- users",
            "SELECT * FROM orders": "id | item\n---------\n1 | tea\n2 | cake",
        }
    )


@pytest.fixture
def console(backend):
    return QueryConsole(backend, schema_query="SHOW TABLES", strict_separator=False)


# Client
@pytest_asyncio.fixture(scope="function")
async def client(console):
    app.dependency_overrides[get_console] = lambda: console

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


# A throwaway database file per test for the SQL backend
@pytest_asyncio.fixture(scope="function")
async def sql_backend(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path}/console.db")
    yield SqlQueryBackend(engine)
    await engine.dispose()
