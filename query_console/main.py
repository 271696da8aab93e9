import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI

from query_console.core.config import settings
from query_console.core.database import engine
from query_console.core.console.backend import get_backend
from query_console.core.console.session import QueryConsole
from query_console.api.router import api_router

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


# Build the console once, fill the schema sidebar, close the engine at shutdown
@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.console = QueryConsole(get_backend())

    if settings.LOAD_SCHEMA_ON_STARTUP:
        schema = await app.state.console.synchronizer.refresh()
        logger.info(f"Initial schema load: {schema.kind}")

    yield
    await engine.dispose()


app = FastAPI(title="Query Console API", lifespan=lifespan)

# Include the master router containing all our endpoints
app.include_router(api_router)


@app.get("/")
async def root():
    return {"message": "Welcome to the Query Console API"}
