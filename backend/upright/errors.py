"""Exceptions raised by the upright design engine."""

from __future__ import annotations


class InputValidationError(ValueError):
    """An input value is outside its permitted range.

    Raised before any calculation runs. ``field`` is the wire name of the
    offending value (e.g. ``"grossArea"``) and ``section`` the input group it
    belongs to (e.g. ``"sectionProperties"``).
    """

    def __init__(self, section: str, field: str, message: str) -> None:
        self.section = section
        self.field = field
        super().__init__(f"{section}.{field} {message}")


class DomainError(ArithmeticError):
    """A demand/capacity ratio was requested against a non-positive capacity."""

    def __init__(self, term: str, capacity: float) -> None:
        self.term = term
        self.capacity = capacity
        super().__init__(
            f"{term}: capacity is {capacity:g}, a demand/capacity ratio cannot be formed"
        )
