from typing import Optional, List, Literal, Union, Annotated

from pydantic import BaseModel, ConfigDict, Field


# =========================
# Parsed data
# =========================
class ParsedTable(BaseModel):
    # Cells line up with headers by position only, rows may be ragged
    headers: List[str]
    rows: List[List[str]] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class SchemaEntry(BaseModel):
    name: str
    query: str

    model_config = ConfigDict(frozen=True)


# =========================
# Render instructions
# =========================
class Message(BaseModel):
    kind: Literal["message"] = "message"
    text: str

    model_config = ConfigDict(frozen=True)


class ErrorText(BaseModel):
    kind: Literal["error"] = "error"
    text: str
    # Original failure detail when `text` is a generic replacement
    cause: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class Table(BaseModel):
    kind: Literal["table"] = "table"
    table: ParsedTable

    model_config = ConfigDict(frozen=True)


class SchemaList(BaseModel):
    kind: Literal["schema"] = "schema"
    entries: List[SchemaEntry] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


RenderInstruction = Annotated[
    Union[Message, ErrorText, Table, SchemaList], Field(discriminator="kind")
]


# =========================
# API payloads
# =========================
class QueryInput(BaseModel):
    query: str


class SubmitRequest(BaseModel):
    query: Optional[str] = None


class KeyDownEvent(BaseModel):
    key: str
    ctrl_key: bool = False
    meta_key: bool = False


class KeyDownResponse(BaseModel):
    handled: bool
    result: Optional[RenderInstruction] = None


class SchemaSelectRequest(BaseModel):
    table_name: str = Field(min_length=1)


class ConsoleStateResponse(BaseModel):
    query: str
    result: Optional[RenderInstruction] = None
    schema_view: Optional[RenderInstruction] = Field(default=None, alias="schema")

    model_config = ConfigDict(populate_by_name=True)
