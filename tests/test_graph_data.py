"""
Tests for the static border and region tables.
"""

import unittest

from state_paths.errors import UnknownStateError
from state_paths.graph_data import (
    REGIONS,
    REGIONS_SUB_REGIONS,
    STATE_BORDERS,
    STATE_NAMES,
    STATES_BY_REGION,
    SUB_REGIONS,
    classify,
    code_for_name,
    full_name,
    get_borders,
    get_states_by_region,
    has_borders,
    neighbors,
)


class TestBorderTable(unittest.TestCase):
    """The border table is a symmetric relation over the contiguous states."""

    def test_borders_are_symmetric(self):
        for state, borders in STATE_BORDERS.items():
            for border in borders:
                self.assertIn(state, STATE_BORDERS[border], f"{state} -> {border}")

    def test_no_state_borders_itself_or_repeats(self):
        for state, borders in STATE_BORDERS.items():
            self.assertNotIn(state, borders)
            self.assertEqual(len(borders), len(set(borders)), state)

    def test_contiguous_states_only(self):
        self.assertEqual(len(STATE_BORDERS), 48)
        for code in ("AK", "HI", "DC", "PR", "GU"):
            self.assertFalse(has_borders(code))

    def test_four_corners_not_adjacent(self):
        self.assertNotIn("CO", neighbors("AZ"))
        self.assertNotIn("UT", neighbors("NM"))

    def test_neighbors_preserve_table_order(self):
        self.assertEqual(neighbors("OR"), ["WA", "CA", "ID", "NV"])

    def test_neighbors_of_unknown_state(self):
        with self.assertRaises(UnknownStateError) as ctx:
            neighbors("HI")
        self.assertEqual(ctx.exception.code, "HI")
        self.assertIsInstance(ctx.exception, KeyError)

    def test_get_borders_returns_copy(self):
        borders = get_borders()
        borders["OR"].append("XX")
        self.assertNotIn("XX", STATE_BORDERS["OR"])

    def test_table_is_read_only(self):
        with self.assertRaises(TypeError):
            STATE_BORDERS["XX"] = []


class TestNamesAndRegions(unittest.TestCase):
    def test_every_named_code_is_classified(self):
        self.assertEqual(len(STATE_NAMES), 59)
        self.assertEqual(set(STATE_NAMES), set(STATES_BY_REGION))

    def test_territories_are_unclassified(self):
        for code in ("AS", "FM", "GU", "MH", "MP", "PW", "PR", "VI"):
            self.assertEqual(classify(code), (None, None))

    def test_classification_uses_known_codes(self):
        for code, regions in STATES_BY_REGION.items():
            if regions.top is None:
                continue
            self.assertIn(regions.top, REGIONS)
            self.assertIn(regions.sub, SUB_REGIONS)
            self.assertIn(regions.sub, REGIONS_SUB_REGIONS[regions.top])

    def test_classify_unknown(self):
        with self.assertRaises(UnknownStateError):
            classify("ZZ")

    def test_full_name_and_reverse_lookup(self):
        self.assertEqual(full_name("NM"), "New Mexico")
        self.assertEqual(code_for_name("New Mexico"), "NM")
        self.assertEqual(code_for_name("  new mexico "), "NM")
        self.assertIsNone(code_for_name("Atlantis"))


class TestRegionQuery(unittest.TestCase):
    def test_mountain_states(self):
        self.assertEqual(
            get_states_by_region("W", "M"),
            ["AZ", "CO", "ID", "MT", "NV", "NM", "UT", "WY"],
        )

    def test_top_region_only(self):
        west = get_states_by_region("W")
        self.assertEqual(len(west), 13)
        self.assertIn("HI", west)
        self.assertIn("AZ", west)

    def test_pacific_includes_non_contiguous_states(self):
        self.assertEqual(get_states_by_region("W", "P"), ["AK", "CA", "HI", "OR", "WA"])

    def test_sub_region_must_match_top(self):
        # "NE" is both a top region and a sub region code
        self.assertEqual(get_states_by_region("MW", "NE"), [])
        self.assertEqual(
            get_states_by_region("NE", "NE"), ["CT", "ME", "MA", "NH", "RI", "VT"]
        )

    def test_unknown_region(self):
        self.assertEqual(get_states_by_region("XX"), [])

    def test_regions_cover_all_classified_states(self):
        classified = [c for c, r in STATES_BY_REGION.items() if r.top is not None]
        by_region = [c for top in REGIONS for c in get_states_by_region(top)]
        self.assertEqual(sorted(classified), sorted(by_region))
