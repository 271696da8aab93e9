from fastapi import Request

from query_console.core.console.session import QueryConsole


# The console is built once in the app lifespan and shared by every request
def get_console(request: Request) -> QueryConsole:
    return request.app.state.console
