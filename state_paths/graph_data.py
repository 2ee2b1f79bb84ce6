"""
Static reference data: which U.S. states border each other, state names,
and census regions.

Only the 48 contiguous states have border entries. Alaska, Hawaii, the
District of Columbia and the territories are named and classified but
cannot be routed through.
"""

from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from state_paths.errors import UnknownStateError
from state_paths.path_types import Classification, NodeCode


# Land borders as pure data
_BORDER_DATA = {
    "AL": ["MS", "FL", "GA", "TN"],
    "AZ": ["CA", "NV", "UT", "NM"],
    "AR": ["MS", "OK", "TX", "LA", "TN", "MO"],
    "CA": ["AZ", "NV", "OR"],
    "CO": ["UT", "NM", "WY", "OK", "KS", "NE"],
    "CT": ["NY", "RI", "MA"],
    "DE": ["PA", "MD"],
    "FL": ["AL", "GA"],
    "GA": ["FL", "AL", "SC", "NC", "TN"],
    "ID": ["WA", "OR", "MT", "WY", "NV", "UT"],
    "IL": ["WI", "IA", "IN", "KY", "MO"],
    "IN": ["IL", "MI", "OH", "KY"],
    "IA": ["MN", "WI", "IL", "MO", "NE", "SD"],
    "KS": ["NE", "MO", "CO", "OK"],
    "KY": ["MO", "TN", "IL", "IN", "OH", "WV", "VA"],
    "LA": ["TX", "AR", "MS"],
    "ME": ["NH"],
    "MD": ["PA", "DE", "VA", "WV"],
    "MA": ["RI", "CT", "NH", "VT", "NY"],
    "MI": ["IN", "OH"],
    "MN": ["ND", "SD", "IA", "WI"],
    "MS": ["LA", "AR", "TN", "AL"],
    "MO": ["IA", "NE", "KS", "OK", "AR", "TN", "KY", "IL"],
    "MT": ["ID", "WY", "SD", "ND"],
    "NE": ["WY", "SD", "IA", "MO", "KS", "CO"],
    "NV": ["CA", "OR", "ID", "UT", "AZ"],
    "NH": ["ME", "VT", "MA"],
    "NJ": ["PA", "NY"],
    "NM": ["AZ", "TX", "OK", "CO"],
    "NY": ["VT", "MA", "CT", "NJ", "PA"],
    "NC": ["SC", "GA", "TN", "VA"],
    "ND": ["MT", "SD", "MN"],
    "OH": ["MI", "IN", "KY", "WV", "PA"],
    "OK": ["CO", "KS", "MO", "AR", "TX", "NM"],
    "OR": ["WA", "CA", "ID", "NV"],
    "PA": ["OH", "WV", "MD", "NY", "NJ", "DE"],
    "RI": ["MA", "CT"],
    "SC": ["GA", "NC"],
    "SD": ["ND", "NE", "MT", "WY", "IA", "MN"],
    "TN": ["AR", "MO", "KY", "VA", "NC", "GA", "AL", "MS"],
    "TX": ["NM", "OK", "AR", "LA"],
    "UT": ["ID", "NV", "AZ", "CO", "WY"],
    "VT": ["NH", "NY", "MA"],
    "VA": ["KY", "WV", "TN", "NC", "MD"],
    "WA": ["OR", "ID"],
    "WV": ["PA", "OH", "KY", "VA", "MD"],
    "WI": ["MN", "IA", "IL"],
    "WY": ["MT", "ID", "UT", "CO", "NE", "SD"],
}

_STATE_NAMES = {
    "AL": "Alabama",
    "AK": "Alaska",
    "AS": "American Samoa",
    "AZ": "Arizona",
    "AR": "Arkansas",
    "CA": "California",
    "CO": "Colorado",
    "CT": "Connecticut",
    "DE": "Delaware",
    "DC": "District of Columbia",
    "FL": "Florida",
    "GA": "Georgia",
    "HI": "Hawaii",
    "ID": "Idaho",
    "IL": "Illinois",
    "IN": "Indiana",
    "IA": "Iowa",
    "KS": "Kansas",
    "KY": "Kentucky",
    "LA": "Louisiana",
    "ME": "Maine",
    "MD": "Maryland",
    "MA": "Massachusetts",
    "MI": "Michigan",
    "MN": "Minnesota",
    "MS": "Mississippi",
    "MO": "Missouri",
    "MT": "Montana",
    "NE": "Nebraska",
    "NV": "Nevada",
    "NH": "New Hampshire",
    "NJ": "New Jersey",
    "NM": "New Mexico",
    "NY": "New York",
    "NC": "North Carolina",
    "ND": "North Dakota",
    "OH": "Ohio",
    "OK": "Oklahoma",
    "OR": "Oregon",
    "PA": "Pennsylvania",
    "RI": "Rhode Island",
    "SC": "South Carolina",
    "SD": "South Dakota",
    "TN": "Tennessee",
    "TX": "Texas",
    "UT": "Utah",
    "VT": "Vermont",
    "VA": "Virginia",
    "WA": "Washington",
    "WI": "Wisconsin",
    "WV": "West Virginia",
    "WY": "Wyoming",
    "FM": "Federated States of Micronesia",
    "GU": "Guam",
    "MH": "Marshall Islands",
    "MP": "Northern Mariana Is.",
    "PW": "Palau Island",
    "PR": "Puerto Rico",
    "VI": "Virgin Islands",
}

# Census regions
REGIONS = MappingProxyType(
    {
        "NE": "Northeast",
        "MW": "Midwest",
        "S": "South",
        "W": "West",
    }
)

SUB_REGIONS = MappingProxyType(
    {
        "WNC": "West North Central",
        "M": "Mountain",
        "P": "Pacific",
        "ENC": "East North Central",
        "WSC": "West South Central",
        "NE": "New England",
        "SA": "South Atlantic",
        "MA": "Middle Atlantic",
        "ESC": "East South Central",
    }
)

REGIONS_SUB_REGIONS = MappingProxyType(
    {
        "NE": ("NE", "MA"),
        "MW": ("ENC", "WNC"),
        "S": ("SA", "ESC", "WSC"),
        "W": ("M", "P"),
    }
)

# (top region, sub region) per state; territories are unclassified
_STATE_REGIONS = {
    "AS": (None, None),
    "FM": (None, None),
    "GU": (None, None),
    "MH": (None, None),
    "MP": (None, None),
    "PW": (None, None),
    "PR": (None, None),
    "VI": (None, None),
    "CT": ("NE", "NE"),
    "ME": ("NE", "NE"),
    "MA": ("NE", "NE"),
    "NH": ("NE", "NE"),
    "RI": ("NE", "NE"),
    "VT": ("NE", "NE"),
    "NJ": ("NE", "MA"),
    "NY": ("NE", "MA"),
    "PA": ("NE", "MA"),
    "IL": ("MW", "ENC"),
    "IN": ("MW", "ENC"),
    "MI": ("MW", "ENC"),
    "OH": ("MW", "ENC"),
    "WI": ("MW", "ENC"),
    "IA": ("MW", "WNC"),
    "KS": ("MW", "WNC"),
    "MN": ("MW", "WNC"),
    "MO": ("MW", "WNC"),
    "NE": ("MW", "WNC"),
    "ND": ("MW", "WNC"),
    "SD": ("MW", "WNC"),
    "DE": ("S", "SA"),
    "DC": ("S", "SA"),
    "FL": ("S", "SA"),
    "GA": ("S", "SA"),
    "MD": ("S", "SA"),
    "NC": ("S", "SA"),
    "SC": ("S", "SA"),
    "VA": ("S", "SA"),
    "WV": ("S", "SA"),
    "AL": ("S", "ESC"),
    "KY": ("S", "ESC"),
    "MS": ("S", "ESC"),
    "TN": ("S", "ESC"),
    "AR": ("S", "WSC"),
    "LA": ("S", "WSC"),
    "OK": ("S", "WSC"),
    "TX": ("S", "WSC"),
    "AZ": ("W", "M"),
    "CO": ("W", "M"),
    "ID": ("W", "M"),
    "MT": ("W", "M"),
    "NV": ("W", "M"),
    "NM": ("W", "M"),
    "UT": ("W", "M"),
    "WY": ("W", "M"),
    "AK": ("W", "P"),
    "CA": ("W", "P"),
    "HI": ("W", "P"),
    "OR": ("W", "P"),
    "WA": ("W", "P"),
}


# Expose immutable views of the tables
STATE_BORDERS: Mapping[NodeCode, List[NodeCode]] = MappingProxyType(_BORDER_DATA)
STATE_NAMES: Mapping[NodeCode, str] = MappingProxyType(_STATE_NAMES)
STATES_BY_REGION: Mapping[NodeCode, Classification] = MappingProxyType(
    {code: Classification(*regions) for code, regions in _STATE_REGIONS.items()}
)

_CODES_BY_NAME = {name.lower(): code for code, name in _STATE_NAMES.items()}


def get_borders() -> Dict[NodeCode, List[NodeCode]]:
    """
    Get a copy of the border table.

    Returns a mutable copy for algorithms that need to modify the structure.
    """
    return {code: list(borders) for code, borders in _BORDER_DATA.items()}


def has_borders(code: NodeCode) -> bool:
    """Whether the state can be routed through (has a border entry)."""
    return code in _BORDER_DATA


def neighbors(code: NodeCode) -> List[NodeCode]:
    """Bordering states, in table order."""
    try:
        return list(_BORDER_DATA[code])
    except KeyError:
        raise UnknownStateError(code) from None


def classify(code: NodeCode) -> Classification:
    if code not in STATES_BY_REGION:
        raise UnknownStateError(code)
    return STATES_BY_REGION[code]


def full_name(code: NodeCode) -> str:
    if code not in _STATE_NAMES:
        raise UnknownStateError(code)
    return _STATE_NAMES[code]


def code_for_name(name: str) -> Optional[NodeCode]:
    """Resolve a full state name (case-insensitive) to its code."""
    return _CODES_BY_NAME.get(name.strip().lower())


def get_states_by_region(top: str, sub: Optional[str] = None) -> List[NodeCode]:
    """
    List states in a census region.

    With only `top`, every state in that region is returned; with `sub`,
    only states in that division. Order follows the region table.
    """
    return [
        code
        for code, regions in STATES_BY_REGION.items()
        if regions.top == top and (sub is None or regions.sub == sub)
    ]
