# query_console/core/console/parsing.py
"""
PARSING MODULE - Decode the backend's text replies

Purpose:
    1. Turn a pipe-separated reply into a structured table
    2. Turn the SHOW TABLES reply into a list of schema entries
    3. Encode tables and table listings back into the same text grammar

Reply grammars:
    Tabular:
        <header1> | <header2> | ... | <headerN>
        <separator line>
        <cell1> | <cell2> | ... | <cellM>

    Table listing:
        Tables:
        - <name1>
        - <name2>

Neither grammar escapes "|" or newlines inside a cell. Whatever does not
match is shown to the operator as plain text.
"""

import re
from typing import List, Union

from query_console.core.schemas import (
    ErrorText,
    Message,
    ParsedTable,
    SchemaEntry,
    SchemaList,
    Table,
)


NO_TABLES_TEXT = "No tables found."
UNEXPECTED_FORMAT_TEXT = "Unexpected format"
EMPTY_LISTING_TEXT = "No tables in database"

_SEPARATOR_PATTERN = re.compile(r"^[\s\-+|=:]+$")


def _split_lines(text: str) -> List[str]:
    return text.strip().split("\n")


def _split_fields(line: str) -> List[str]:
    return [field.strip() for field in line.split("|")]


def select_all_query(table_name: str) -> str:
    """Query pre-filled when the operator picks a table from the sidebar."""
    return f"SELECT * FROM {table_name}"


# ============================================================================
# TABULAR REPLIES
# ============================================================================


def looks_like_separator(line: str) -> bool:
    """True for lines such as "-----" or "-------+--------"."""
    return bool(_SEPARATOR_PATTERN.match(line))


def parse_tabular(text: str, strict_separator: bool = False) -> Union[Message, Table]:
    """
    Decide whether a backend reply is a table and extract it.

    The second line is treated as a separator and skipped without looking
    at it. With strict_separator=True a second line that is not made of
    dashes, pluses, pipes, equals signs or colons turns the whole reply
    into a plain message instead.

    Args:
        text: Raw backend reply
        strict_separator: Validate the separator line

    Returns:
        Table with headers and rows, or Message with the stripped text

    Examples:
        "id | name\\n---\\n1 | Ann" → Table(headers=["id", "name"], rows=[["1", "Ann"]])
        "Inserted 1 row into 'users'" → Message("Inserted 1 row into 'users'")
    """
    stripped = text.strip()
    lines = _split_lines(text)

    if len(lines) < 2 or "|" not in lines[0]:
        return Message(text=stripped)

    if strict_separator and not looks_like_separator(lines[1]):
        return Message(text=stripped)

    headers = _split_fields(lines[0])
    # Blank lines are kept as a single empty cell
    rows = [_split_fields(line) for line in lines[2:]]

    return Table(table=ParsedTable(headers=headers, rows=rows))


def format_tabular(table: ParsedTable) -> str:
    """
    Encode a table in the reply grammar parse_tabular() reads.

    The separator is a run of dashes as long as the header line.
    """
    header = " | ".join(table.headers)
    lines = [header, "-" * max(len(header), 1)]
    lines.extend(" | ".join(row) for row in table.rows)
    return "\n".join(lines)


# ============================================================================
# TABLE LISTING REPLIES
# ============================================================================


def _strip_list_marker(line: str) -> str:
    line = line.strip()
    if line.startswith("-"):
        line = line[1:]
    return line.strip()


def parse_schema_reply(text: str) -> Union[Message, ErrorText, SchemaList]:
    """
    Read the reply to the table listing query.

    Lines after the "Tables:" heading lose one leading hyphen and are
    stripped; lines left empty are dropped. Duplicate names are kept.
    A listing that ends up with no names is reported the same way as a
    database without tables.

    Returns:
        SchemaList when the reply has the listing shape,
        Message("No tables found.") when the reply says there are no tables,
        ErrorText("Unexpected format") otherwise

    Examples:
        "Tables:\\n- orders\\n- users" → SchemaList([orders, users])
        "No tables in database" → Message("No tables found.")
        "garbage" → ErrorText("Unexpected format")
    """
    lines = _split_lines(text)

    if len(lines) < 2 or not lines[0].lower().startswith("tables"):
        if "no tables" in text.lower():
            return Message(text=NO_TABLES_TEXT)
        return ErrorText(text=UNEXPECTED_FORMAT_TEXT)

    entries = []
    for line in lines[1:]:
        name = _strip_list_marker(line)
        if name:
            entries.append(SchemaEntry(name=name, query=select_all_query(name)))

    if not entries:
        return Message(text=NO_TABLES_TEXT)

    return SchemaList(entries=entries)


def format_schema_reply(table_names: List[str]) -> str:
    """Encode table names as the listing parse_schema_reply() reads."""
    if not table_names:
        return EMPTY_LISTING_TEXT
    return "\n".join(["Tables:"] + [f"- {name}" for name in table_names])
