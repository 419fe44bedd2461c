# SPDX-License-Identifier: MIT

import unittest

import pendulum

from support import make_task

from taskchart.service.geometry import MIN_BAR_WIDTH_PERCENT, GeometryProjector
from taskchart.service.timeline import compute_timeline_range


def january_range():
    timeline_range = compute_timeline_range(
        [make_task(1, start="2024-01-01", due="2024-01-05")]
    )
    assert timeline_range is not None
    return timeline_range


class TestGeometryProjector(unittest.TestCase):
    def setUp(self) -> None:
        self.projector = GeometryProjector(january_range(), width=400, row_height=36)

    def test_time_maps_linearly_onto_width(self) -> None:
        self.assertAlmostEqual(self.projector.x_for(pendulum.datetime(2024, 1, 1)), 0)
        self.assertAlmostEqual(self.projector.x_for(pendulum.datetime(2024, 1, 2)), 100)
        self.assertAlmostEqual(self.projector.x_for(pendulum.datetime(2024, 1, 5)), 400)

    def test_row_index_maps_to_row_center(self) -> None:
        self.assertEqual(self.projector.y_for(0), 18)
        self.assertEqual(self.projector.y_for(2), 90)

    def test_resized_surface_rescales_x(self) -> None:
        wider = GeometryProjector(january_range(), width=800, row_height=36)
        moment = pendulum.datetime(2024, 1, 2)
        self.assertAlmostEqual(wider.x_for(moment), 2 * self.projector.x_for(moment))

    def test_negative_width_is_treated_as_zero(self) -> None:
        projector = GeometryProjector(january_range(), width=-10)
        self.assertEqual(projector.x_for(pendulum.datetime(2024, 1, 5)), 0)

    def test_bar_is_expressed_in_percent_of_range(self) -> None:
        bar = self.projector.bar_for(
            make_task(7, start="2024-01-02", due="2024-01-03"), row_index=3
        )
        assert bar is not None
        self.assertEqual(bar["task_id"], 7)
        self.assertEqual(bar["row_index"], 3)
        self.assertAlmostEqual(bar["left_percent"], 25)
        self.assertAlmostEqual(bar["width_percent"], 25)

    def test_bar_width_is_floored_for_zero_duration_tasks(self) -> None:
        bar = self.projector.bar_for(
            make_task(1, start="2024-01-03", due="2024-01-03"), row_index=0
        )
        assert bar is not None
        self.assertEqual(bar["width_percent"], MIN_BAR_WIDTH_PERCENT)

    def test_bar_width_is_floored_when_due_precedes_start(self) -> None:
        bar = self.projector.bar_for(
            make_task(1, start="2024-01-04", due="2024-01-02"), row_index=0
        )
        assert bar is not None
        self.assertEqual(bar["width_percent"], MIN_BAR_WIDTH_PERCENT)

    def test_unscheduled_task_has_no_bar(self) -> None:
        self.assertIsNone(self.projector.bar_for(make_task(1), row_index=0))
        self.assertIsNone(
            self.projector.bar_for(make_task(1, due="2024-01-02"), row_index=0)
        )

    def test_zero_length_range_does_not_divide_by_zero(self) -> None:
        single_day = compute_timeline_range([make_task(1, start="2024-01-03")])
        assert single_day is not None
        projector = GeometryProjector(single_day, width=100)
        self.assertEqual(projector.x_for(pendulum.datetime(2024, 1, 3)), 0)
        bar = projector.bar_for(make_task(1, start="2024-01-03"), row_index=0)
        assert bar is not None
        self.assertEqual(bar["width_percent"], MIN_BAR_WIDTH_PERCENT)


if __name__ == "__main__":
    unittest.main(verbosity=2)
