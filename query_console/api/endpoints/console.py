from typing import Annotated, Optional

from fastapi import APIRouter, Depends, status

from query_console.api.dependencies import get_console
from query_console.core import schemas
from query_console.core.console.session import QueryConsole

router = APIRouter(prefix="/console", tags=["Console"])

console_dep = Annotated[QueryConsole, Depends(get_console)]


@router.get("/state", response_model=schemas.ConsoleStateResponse)
async def get_state(console: console_dep):
    """Return what each area of the console currently shows."""
    return schemas.ConsoleStateResponse(
        query=console.view.query_input.value,
        result=console.view.result.current,
        schema=console.view.schema.current,
    )


@router.put("/input", status_code=status.HTTP_200_OK)
async def set_input(payload: schemas.QueryInput, console: console_dep):
    console.view.query_input.set(payload.query)
    return {"query": console.view.query_input.value}


# Submit button
@router.post("/submit", response_model=schemas.RenderInstruction)
async def submit_query(console: console_dep, payload: Optional[schemas.SubmitRequest] = None):
    """
    Run the query currently in the input.

    A query in the body replaces the input first, the same as typing it.
    """
    if payload is not None and payload.query is not None:
        console.view.query_input.set(payload.query)
    return await console.controller.submit()


# Keyboard shortcut on the query input
@router.post("/keydown", response_model=schemas.KeyDownResponse)
async def key_down(event: schemas.KeyDownEvent, console: console_dep):
    result = await console.controller.keydown(
        event.key, ctrl_key=event.ctrl_key, meta_key=event.meta_key
    )
    return schemas.KeyDownResponse(handled=result is not None, result=result)
