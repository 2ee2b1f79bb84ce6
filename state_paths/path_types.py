import re
from datetime import date
from typing import Dict, List, Mapping, NamedTuple, Optional, Sequence, Tuple, Union

from state_paths.constants import (
    DEFAULT_INTERVAL,
    DEFAULT_MAX_TEMP,
    DEFAULT_MIN_TEMP,
    DEFAULT_START_MONTH,
    INTERVAL_UNITS,
    MONTHS_PER_YEAR,
)
from state_paths.errors import InvalidStartConstraint, UnknownNodeError


# Type aliases for clarity
NodeCode = str
Path = Tuple[NodeCode, ...]
Adjacency = Mapping[NodeCode, List[NodeCode]]
MonthlyTemperatures = Mapping[NodeCode, Tuple[float, ...]]
ConfigError = Union[UnknownNodeError, InvalidStartConstraint]

_INTERVAL_PATTERN = re.compile(r"^\+?\s*(\d+)\s*([a-zA-Z]+)$")


class Classification(NamedTuple):
    """Census region and division of a state; both None for territories."""

    top: Optional[str]
    sub: Optional[str]


class ComfortRange(NamedTuple):
    """Inclusive temperature bounds."""

    min_temp: float
    max_temp: float

    def contains(self, value: float) -> bool:
        return self.min_temp <= value <= self.max_temp

    def validate(self) -> "ComfortRange":
        if self.min_temp > self.max_temp:
            raise ValueError(
                f"Minimum temperature {self.min_temp} is above maximum {self.max_temp}"
            )
        return self


class Interval(NamedTuple):
    """Length of stay in each state, e.g. Interval(1, "week")."""

    amount: int
    unit: str

    @classmethod
    def parse(cls, text: Union[str, "Interval"]) -> "Interval":
        """
        Parse strings such as "1 week", "2 months", "+10 days".

        Raises:
            ValueError: if the text is not "<count> <unit>" with a known unit
        """
        if isinstance(text, Interval):
            return text

        match = _INTERVAL_PATTERN.match(text.strip())
        if not match:
            raise ValueError(f"Cannot parse interval '{text}'")

        amount, unit = int(match.group(1)), match.group(2).lower()
        if unit not in INTERVAL_UNITS:
            raise ValueError(f"Unknown interval unit '{unit}' in '{text}'")

        return cls(amount=amount, unit=INTERVAL_UNITS[unit])

    def __str__(self) -> str:
        suffix = "" if self.amount == 1 else "s"
        return f"{self.amount} {self.unit}{suffix}"


class TripSettings(NamedTuple):
    """Immutable settings for the temperature filter."""

    start_month: int = DEFAULT_START_MONTH
    interval: Interval = Interval(1, "week")
    comfort_range: ComfortRange = ComfortRange(DEFAULT_MIN_TEMP, DEFAULT_MAX_TEMP)
    state_ranges: Mapping[NodeCode, ComfortRange] = {}
    year: Optional[int] = None

    @classmethod
    def create(
        cls,
        start_month: int = DEFAULT_START_MONTH,
        interval: Union[str, Interval] = DEFAULT_INTERVAL,
        min_temp: float = DEFAULT_MIN_TEMP,
        max_temp: float = DEFAULT_MAX_TEMP,
        state_ranges: Optional[Mapping[str, Tuple[float, float]]] = None,
        year: Optional[int] = None,
    ) -> "TripSettings":
        """Build validated settings; state codes are upper-cased."""
        if not 1 <= start_month <= MONTHS_PER_YEAR:
            raise ValueError(f"Start month must be between 1 and 12, got {start_month}")

        overrides = {
            code.strip().upper(): ComfortRange(*bounds).validate()
            for code, bounds in (state_ranges or {}).items()
        }

        return cls(
            start_month=start_month,
            interval=Interval.parse(interval),
            comfort_range=ComfortRange(min_temp, max_temp).validate(),
            state_ranges=overrides,
            year=year,
        )

    def range_for(self, code: NodeCode) -> ComfortRange:
        """Per-state override if one is set, else the global range."""
        return self.state_ranges.get(code, self.comfort_range)

    def start_date(self) -> date:
        year = self.year if self.year is not None else date.today().year
        return date(year, self.start_month, 1)


class PathRequest(NamedTuple):
    """Which states to route through and the optional fixed endpoints."""

    states: Sequence[NodeCode]
    start_state: Optional[NodeCode] = None
    end_state: Optional[NodeCode] = None
    max_paths: Optional[int] = None


class AcceptedPath(NamedTuple):
    """A path that passed the temperature filter, with the temperature seen at each stop."""

    path: Path
    temperatures: Tuple[float, ...]

    def stops(self) -> List[Tuple[NodeCode, float]]:
        return list(zip(self.path, self.temperatures))


class BoundedAdjacencyResult(NamedTuple):
    """Borders restricted to the requested states, plus any unknown codes."""

    adjacency: Dict[NodeCode, List[NodeCode]]
    errors: List[UnknownNodeError]


class EnumerationResult(NamedTuple):
    """Result of enumerating every path through a set of states."""

    paths: List[Path]
    total_states: int
    errors: List[ConfigError]
    truncated: bool = False

    @property
    def count(self) -> int:
        return len(self.paths)


class FilterResult(NamedTuple):
    """Paths surviving the temperature filter, in input order."""

    accepted: List[AcceptedPath]
    rejected: int

    @property
    def count(self) -> int:
        return len(self.accepted)

    @property
    def paths(self) -> List[Path]:
        return [item.path for item in self.accepted]


class PathStatistics(NamedTuple):
    """Statistics about a collection of accepted paths."""

    total_paths: int
    start_distribution: Dict[NodeCode, int]
    end_distribution: Dict[NodeCode, int]
    temperature_min: Optional[float]
    temperature_max: Optional[float]
    temperature_mean: Optional[float]


class CountingResult(NamedTuple):
    """Result of counting paths without enumerating them."""

    count: int
    by_start: Dict[NodeCode, int]
