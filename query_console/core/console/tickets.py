class TicketCounter:
    """
    Hands out increasing numbers to overlapping calls so only the newest
    one gets to render. Older calls still finish, their output is dropped.
    """

    def __init__(self):
        self._latest = 0

    @property
    def latest(self) -> int:
        return self._latest

    def issue(self) -> int:
        self._latest += 1
        return self._latest

    def is_current(self, ticket: int) -> bool:
        return ticket == self._latest
