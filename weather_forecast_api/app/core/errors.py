"""
Domain error values.

Services return a ``NotFound`` instance instead of raising when an
operation addresses an id with no matching row.  Callers check for it
with ``isinstance`` and translate it (the HTTP layer turns it into a
404).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class NotFound:
    """No live entity of kind ``entity`` has the requested ``id``."""

    entity: str
    id: int

    @property
    def message(self) -> str:
        return f"{self.entity} with id {self.id} was not found."
