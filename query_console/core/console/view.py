from typing import Optional

from query_console.core.schemas import RenderInstruction


class ViewSink:
    """One area of the console page. Keeps whatever was rendered last."""

    def __init__(self, name: str):
        self.name = name
        self.current: Optional[RenderInstruction] = None

    def render(self, instruction: RenderInstruction) -> None:
        self.current = instruction


class QueryInputField:
    def __init__(self, value: str = ""):
        self.value = value
        self.focused = False

    def set(self, value: str) -> None:
        self.value = value

    def focus(self) -> None:
        self.focused = True


class ConsoleView:
    """
    Handles to the three areas the console writes to: the query input,
    the result pane and the schema sidebar. Built once per console and
    handed to the controller and the schema synchronizer.
    """

    def __init__(
        self,
        query_input: Optional[QueryInputField] = None,
        result: Optional[ViewSink] = None,
        schema: Optional[ViewSink] = None,
    ):
        self.query_input = query_input or QueryInputField()
        self.result = result or ViewSink("result")
        self.schema = schema or ViewSink("schema")
