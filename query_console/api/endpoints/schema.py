from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from query_console.api.dependencies import get_console
from query_console.core import schemas
from query_console.core.console.session import QueryConsole

router = APIRouter(prefix="/console/schema", tags=["Schema"])

console_dep = Annotated[QueryConsole, Depends(get_console)]


@router.post("/refresh", response_model=schemas.RenderInstruction)
async def refresh_schema(console: console_dep):
    """Reload the table list from the backend."""
    return await console.synchronizer.refresh()


# Clicking a table name in the sidebar
@router.post("/select", response_model=schemas.QueryInput)
async def select_table(payload: schemas.SchemaSelectRequest, console: console_dep):
    # Listed names are always a single non-blank line
    name = payload.table_name
    if not name.strip() or "\n" in name or "\r" in name:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid table name"
        )

    query = console.synchronizer.select(name)
    return schemas.QueryInput(query=query)
