# query_console/core/console/interpreter.py
"""
INTERPRETER MODULE - Run one submitted query and decide how to show the reply

Flow:
    query text → strip → empty?  → "Please enter a query."
                       ↓
               "Executing query..." → backend.execute_query()
                                          ↓                ↓
                                       reply             failure
                                          ↓                ↓
                               empty? / parse_tabular()   ErrorText(raw failure)
"""

import logging
from enum import Enum
from typing import Callable

from query_console.core.console.backend import QueryBackend
from query_console.core.console.parsing import parse_tabular
from query_console.core.schemas import ErrorText, Message, RenderInstruction


EMPTY_QUERY_TEXT = "Please enter a query."
EXECUTING_TEXT = "Executing query..."
NO_OUTPUT_TEXT = "[No output from server]"


def failure_text(error: Exception) -> str:
    """Text form of a backend failure, as shown to the operator."""
    return str(error) or error.__class__.__name__


class SubmissionState(Enum):
    """Lifecycle of a single submission."""

    IDLE = "idle"
    EXECUTING = "executing"
    RENDERED = "rendered"
    ERROR_DISPLAYED = "error_displayed"


class ResultInterpreter:
    """
    Carries one submission from Idle to Rendered or ErrorDisplayed.

    A new interpreter is made for every submission, nothing is kept between
    them. Every render instruction goes through `emit`; the final one is
    also returned from run().
    """

    def __init__(
        self,
        backend: QueryBackend,
        emit: Callable[[RenderInstruction], None],
        strict_separator: bool = False,
    ):
        self.backend = backend
        self.emit = emit
        self.strict_separator = strict_separator
        self.state = SubmissionState.IDLE

    def _finish(self, state: SubmissionState, instruction: RenderInstruction):
        self.state = state
        self.emit(instruction)
        return instruction

    async def run(self, query_text: str) -> RenderInstruction:
        if self.state is not SubmissionState.IDLE:
            raise RuntimeError("ResultInterpreter instances run only once")

        query = query_text.strip()
        if not query:
            return self._finish(SubmissionState.RENDERED, Message(text=EMPTY_QUERY_TEXT))

        self.state = SubmissionState.EXECUTING
        self.emit(Message(text=EXECUTING_TEXT))

        try:
            reply = await self.backend.execute_query(query)
        except Exception as error:
            logging.error(f"Query failed: {error}")
            return self._finish(
                SubmissionState.ERROR_DISPLAYED, ErrorText(text=failure_text(error))
            )

        if not reply:
            return self._finish(SubmissionState.RENDERED, Message(text=NO_OUTPUT_TEXT))

        return self._finish(
            SubmissionState.RENDERED,
            parse_tabular(reply, strict_separator=self.strict_separator),
        )
