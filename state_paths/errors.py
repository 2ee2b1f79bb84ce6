"""
Error values and exceptions raised or reported by the path tooling.

Configuration problems (an unknown state, a start state outside the
requested states) are returned as plain values inside results so that a
region-wide run can carry on past a single bad state. Data-integrity
problems are raised.
"""

from typing import NamedTuple


class UnknownNodeError(NamedTuple):
    """A requested state code has no entry in the border table."""

    code: str
    role: str = "state"

    def message(self) -> str:
        if self.role == "state":
            return f"Error: {self.code} is not defined in our state borders."
        return f"Error: {self.role} state {self.code} is not defined in our state borders."


class InvalidStartConstraint(NamedTuple):
    """The fixed start state is not one of the requested states."""

    code: str

    def message(self) -> str:
        return f"Error: Start state {self.code} must be one of the states provided."


class UnknownStateError(KeyError):
    """Raised by the static data provider for codes it does not define."""

    def __init__(self, code: str):
        super().__init__(code)
        self.code = code

    def __str__(self) -> str:
        return f"Unknown state code '{self.code}'"


class AttributeLookupGap(LookupError):
    """A path visits a state/month that is missing from the climate table."""

    def __init__(self, code: str, month: int):
        super().__init__(f"No temperature recorded for {code} in month {month}")
        self.code = code
        self.month = month


class ClimateDataError(ValueError):
    """The climate table could not be parsed."""
