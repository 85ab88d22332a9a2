from __future__ import annotations

import unittest

from contracts.coverage import Interval, Source
from range_coverage.evaluator import covers_both_axes, evaluate_sources


def _cam(d: tuple[int, int], l: tuple[int, int]) -> Source:
    return Source(distance=Interval(*d), light=Interval(*l))


# (name, target distance, target light, sources, expected)
SCENARIOS = [
    (
        "complementary_cameras_full_coverage",
        (1, 10),
        (100, 500),
        [_cam((1, 5), (100, 300)), _cam((6, 10), (301, 500))],
        True,
    ),
    (
        "distance_gap_at_5",
        (1, 10),
        (100, 500),
        [_cam((1, 4), (100, 500)), _cam((6, 10), (100, 500))],
        False,
    ),
    (
        "overlapping_ranges_merge",
        (1, 8),
        (50, 200),
        [_cam((1, 5), (50, 150)), _cam((4, 8), (120, 200))],
        True,
    ),
    (
        "light_upper_bound_not_reached",
        (1, 10),
        (100, 600),
        [_cam((1, 10), (100, 500))],
        False,
    ),
    (
        "no_sources",
        (1, 10),
        (100, 500),
        [],
        False,
    ),
    (
        "single_camera_covers_everything",
        (1, 100),
        (10, 1000),
        [_cam((1, 100), (10, 1000))],
        True,
    ),
    (
        "three_small_cameras",
        (1, 10),
        (1, 10),
        [_cam((1, 3), (1, 4)), _cam((4, 6), (5, 7)), _cam((7, 10), (8, 10))],
        True,
    ),
    (
        "light_gap_at_4",
        (1, 10),
        (1, 10),
        [_cam((1, 10), (1, 3)), _cam((1, 10), (5, 10))],
        False,
    ),
    (
        "adjacent_ranges_both_axes",
        (1, 6),
        (100, 200),
        [_cam((1, 3), (100, 150)), _cam((4, 6), (151, 200))],
        True,
    ),
    (
        "light_insufficient_only",
        (1, 10),
        (100, 200),
        [_cam((1, 10), (100, 150))],
        False,
    ),
    (
        "unordered_cameras",
        (1, 10),
        (10, 50),
        [_cam((6, 10), (30, 50)), _cam((1, 5), (10, 29))],
        True,
    ),
    (
        "disjoint_camera_ranges",
        (1, 3),
        (1, 3),
        [_cam((5, 10), (5, 10))],
        False,
    ),
]


class TestDualAxisScenarios(unittest.TestCase):
    def test_scenarios(self) -> None:
        for name, dist, light, sources, expected in SCENARIOS:
            with self.subTest(scenario=name):
                got = covers_both_axes(Interval(*dist), Interval(*light), sources)
                self.assertEqual(got, expected)

    def test_report_verdict_matches_boolean(self) -> None:
        for name, dist, light, sources, expected in SCENARIOS:
            with self.subTest(scenario=name):
                result = evaluate_sources(Interval(*dist), Interval(*light), sources)
                self.assertEqual(result.ok, expected)
                self.assertEqual(result.ok, len(result.errors) == 0)

    def test_sources_may_be_a_generator(self) -> None:
        gen = (s for s in [_cam((6, 10), (30, 50)), _cam((1, 5), (10, 29))])
        self.assertTrue(covers_both_axes(Interval(1, 10), Interval(10, 50), gen))

    def test_axes_are_independent(self) -> None:
        # Distance comes from camera A, light from camera B; both axes still pass.
        sources = [_cam((1, 10), (0, 0)), _cam((50, 60), (100, 200))]
        self.assertTrue(covers_both_axes(Interval(1, 10), Interval(100, 200), sources))


if __name__ == "__main__":
    unittest.main()
