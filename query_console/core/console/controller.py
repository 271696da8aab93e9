from typing import Optional

from query_console.core.console.backend import QueryBackend
from query_console.core.console.interpreter import ResultInterpreter
from query_console.core.console.tickets import TicketCounter
from query_console.core.console.view import ConsoleView
from query_console.core.schemas import RenderInstruction


SUBMIT_KEY = "Enter"


def is_submit_shortcut(key: str, ctrl_key: bool = False, meta_key: bool = False) -> bool:
    # Ctrl+Enter, or Cmd+Enter on macOS
    return key == SUBMIT_KEY and (ctrl_key or meta_key)


class QueryController:
    """
    Routes the submit button and the Ctrl/Cmd+Enter shortcut to the same
    submission path.

    Each submission gets a ticket. Only the newest submission may write to
    the result area; a slower, older one finishing later is not rendered.
    """

    def __init__(
        self,
        backend: QueryBackend,
        view: ConsoleView,
        strict_separator: bool = False,
    ):
        self.backend = backend
        self.view = view
        self.strict_separator = strict_separator
        self._tickets = TicketCounter()

    def _render(self, ticket: int, instruction: RenderInstruction) -> None:
        if self._tickets.is_current(ticket):
            self.view.result.render(instruction)

    async def submit(self) -> RenderInstruction:
        ticket = self._tickets.issue()
        interpreter = ResultInterpreter(
            self.backend,
            lambda instruction: self._render(ticket, instruction),
            strict_separator=self.strict_separator,
        )
        return await interpreter.run(self.view.query_input.value)

    async def keydown(
        self, key: str, ctrl_key: bool = False, meta_key: bool = False
    ) -> Optional[RenderInstruction]:
        """Submit on Ctrl/Cmd+Enter. Returns None when the key is not the shortcut."""
        if not is_submit_shortcut(key, ctrl_key, meta_key):
            return None
        return await self.submit()
