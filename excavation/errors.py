"""
Exceptions raised by the dig site.
NO UI DEPENDENCIES.
"""


class ExcavationError(Exception):
    """Base class for dig site errors."""


class SelectionExhausted(ExcavationError):
    """The pool could not fill the score budget within the allowed draws."""

    def __init__(self, budget: int, total: int, draws: int):
        self.budget = budget
        self.total = total
        self.draws = draws
        super().__init__(
            f"Could not fill score budget {budget} after {draws} draws "
            f"(reached {total})"
        )


class GameOverError(ExcavationError):
    """A command was issued to a game that has already ended."""
