"""
Planner error kinds.

Each error also derives from the matching builtin so callers that only know
about ``IndexError``, ``ValueError`` or ``OSError`` still catch it. Domain
infeasibility (zero capability, negative margin) is never an error; it is a
valid ``MissionResult`` with ``success = False``.
"""


class PlannerError(Exception):
    """Base class for all planner errors."""


class InvalidSelection(PlannerError, IndexError):
    """Rocket or body menu index outside the catalog range."""

    def __init__(self, kind: str, index: int, size: int):
        self.kind = kind
        self.index = index
        self.size = size
        super().__init__(f"Invalid {kind} selection {index}. Valid: 1-{size}")


class DateParseError(PlannerError, ValueError):
    """A start or epoch date string is not a valid YYYY-MM-DD calendar date."""

    def __init__(self, text):
        self.text = text
        super().__init__(f"Invalid date '{text}'. Expected YYYY-MM-DD")


class PersistenceFailure(PlannerError, OSError):
    """Writing a mission report failed. Never affects the computed result."""
