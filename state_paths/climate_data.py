"""
Loader for average monthly temperature per state.

Reads the NOAA state climatology layout
(http://www.esrl.noaa.gov/psd/data/usclimate/tmp.state.19712000.climo):
one line per state, the full state name followed by twelve monthly values,
fields separated by runs of two or more spaces. Anything after the twelfth
value (the annual mean) is ignored.
"""

import re
from pathlib import Path
from typing import Dict, Iterable, Tuple, Union

from state_paths.constants import MONTHS_PER_YEAR
from state_paths.errors import AttributeLookupGap, ClimateDataError
from state_paths.graph_data import code_for_name
from state_paths.path_types import MonthlyTemperatures, NodeCode

_FIELD_SEPARATOR = re.compile(r"\s{2,}|\t+")


def _parse_line(line: str, line_number: int) -> Tuple[NodeCode, Tuple[float, ...]]:
    fields = _FIELD_SEPARATOR.split(line.strip())
    state_name, values = fields[0], fields[1:]

    code = code_for_name(state_name)
    if code is None:
        raise ClimateDataError(f"Line {line_number}: unknown state name '{state_name}'")

    if len(values) < MONTHS_PER_YEAR:
        raise ClimateDataError(
            f"Line {line_number}: expected {MONTHS_PER_YEAR} monthly values "
            f"for {state_name}, found {len(values)}"
        )

    try:
        monthly = tuple(float(value) for value in values[:MONTHS_PER_YEAR])
    except ValueError as e:
        raise ClimateDataError(f"Line {line_number}: {e}") from e

    return code, monthly


def parse_climate_data(lines: Iterable[str]) -> Dict[NodeCode, Tuple[float, ...]]:
    """
    Parse climate table lines into {state code: 12 monthly temperatures}.

    Month 1 (January) is index 0. Blank lines are skipped.

    Raises:
        ClimateDataError: on unknown state names or short/non-numeric rows
    """
    table = {}
    for line_number, line in enumerate(lines, 1):
        if not line.strip():
            continue
        code, monthly = _parse_line(line, line_number)
        table[code] = monthly
    return table


def load_climate_data(source: Union[str, Path]) -> Dict[NodeCode, Tuple[float, ...]]:
    """Read and parse a climate table file."""
    with open(Path(source).expanduser(), "r", encoding="utf-8") as f:
        return parse_climate_data(f)


def monthly_temperature(table: MonthlyTemperatures, code: NodeCode, month: int) -> float:
    """
    Temperature for a state in a calendar month (1-12).

    Raises:
        AttributeLookupGap: if the table has no value for that state and month
    """
    try:
        monthly = table[code]
    except KeyError:
        raise AttributeLookupGap(code, month) from None

    if not 1 <= month <= len(monthly):
        raise AttributeLookupGap(code, month)
    return monthly[month - 1]
