import pytest

from query_console import main
from query_console.core.config import settings
from query_console.core.schemas import ErrorText, SchemaList


@pytest.mark.asyncio
async def test_startup_loads_schema(monkeypatch, backend):
    """The sidebar is filled once when the app starts"""
    backend.replies["SHOW TABLES"] = "Tables:\n- orders"
    monkeypatch.setattr(main, "get_backend", lambda: backend)
    monkeypatch.setattr(settings, "LOAD_SCHEMA_ON_STARTUP", True)
    monkeypatch.setattr(settings, "SCHEMA_QUERY", "SHOW TABLES")

    async with main.app.router.lifespan_context(main.app):
        schema = main.app.state.console.view.schema.current
        assert isinstance(schema, SchemaList)
        assert [entry.name for entry in schema.entries] == ["orders"]

    assert backend.calls == ["SHOW TABLES"]


@pytest.mark.asyncio
async def test_startup_survives_backend_failure(monkeypatch, backend):
    """A backend that cannot be reached leaves an error in the sidebar, the app still starts"""
    backend.replies["SHOW TABLES"] = OSError("Connect call failed")
    monkeypatch.setattr(main, "get_backend", lambda: backend)
    monkeypatch.setattr(settings, "LOAD_SCHEMA_ON_STARTUP", True)
    monkeypatch.setattr(settings, "SCHEMA_QUERY", "SHOW TABLES")

    async with main.app.router.lifespan_context(main.app):
        assert main.app.state.console.view.schema.current == ErrorText(
            text="Failed to load schema.", cause="Connect call failed"
        )


@pytest.mark.asyncio
async def test_startup_schema_load_can_be_disabled(monkeypatch, backend):
    monkeypatch.setattr(main, "get_backend", lambda: backend)
    monkeypatch.setattr(settings, "LOAD_SCHEMA_ON_STARTUP", False)

    async with main.app.router.lifespan_context(main.app):
        assert main.app.state.console.view.schema.current is None

    assert backend.calls == []
