# SPDX-License-Identifier: MIT

import unittest

import pendulum

from support import make_task

from taskchart.service.gantt import build_gantt_layout
from taskchart.service.timeline import NO_RANGE_LABEL


class TestBuildGanttLayout(unittest.TestCase):
    def test_parent_and_child(self) -> None:
        layout = build_gantt_layout(
            [
                make_task(1, start="2024-01-01", due="2024-01-05"),
                make_task(2, parent=1, start="2024-01-02", due="2024-01-03"),
            ],
            width=400,
        )
        self.assertEqual(
            [(row["task"]["id"], row["depth"], row["number"]) for row in layout["rows"]],
            [(1, 0, "1"), (2, 1, "1.1")],
        )
        timeline_range = layout["timeline_range"]
        assert timeline_range is not None
        self.assertEqual(timeline_range["start"], pendulum.datetime(2024, 1, 1))
        self.assertEqual(timeline_range["end"], pendulum.datetime(2024, 1, 5))
        self.assertEqual(layout["range_label"], "2024-01-01 to 2024-01-05")
        self.assertEqual(len(layout["ticks"]), 5)
        self.assertEqual([bar["task_id"] for bar in layout["bars"]], [1, 2])
        self.assertAlmostEqual(layout["bars"][0]["width_percent"], 100)

    def test_every_bar_is_at_least_one_percent_wide(self) -> None:
        layout = build_gantt_layout(
            [
                make_task(1, start="2024-01-01", due="2024-12-31"),
                make_task(2, start="2024-06-01", due="2024-06-01"),
                make_task(3, start="2024-06-01"),
            ],
            width=100,
        )
        self.assertEqual(len(layout["bars"]), 3)
        for bar in layout["bars"]:
            self.assertGreaterEqual(bar["width_percent"], 1)

    def test_unscheduled_rows_stay_in_outline_without_bar(self) -> None:
        layout = build_gantt_layout(
            [make_task(1, start="2024-01-01"), make_task(2)], width=100
        )
        self.assertEqual([row["task"]["id"] for row in layout["rows"]], [1, 2])
        self.assertEqual([bar["row_index"] for bar in layout["bars"]], [0])

    def test_no_scheduled_task_gives_empty_geometry(self) -> None:
        layout = build_gantt_layout(
            [
                make_task(1, start="not a date", due="2024-01-02"),
                make_task(2, due="2024-01-03", depends_on=[1]),
            ],
            width=400,
        )
        self.assertIsNone(layout["timeline_range"])
        self.assertEqual(layout["range_label"], NO_RANGE_LABEL)
        self.assertEqual(layout["ticks"], [])
        self.assertEqual(layout["bars"], [])
        self.assertEqual(layout["dependency_lines"], [])
        self.assertEqual(len(layout["rows"]), 2)

    def test_width_change_only_moves_pixel_geometry(self) -> None:
        tasks = [
            make_task(1, start="2024-01-01", due="2024-01-03"),
            make_task(2, start="2024-01-04", due="2024-01-05", depends_on=[1]),
        ]
        narrow = build_gantt_layout(tasks, width=200)
        wide = build_gantt_layout(tasks, width=400)
        self.assertEqual(narrow["bars"], wide["bars"])
        self.assertEqual(narrow["ticks"], wide["ticks"])
        self.assertAlmostEqual(
            wide["dependency_lines"][0]["x2"], 2 * narrow["dependency_lines"][0]["x2"]
        )

    def test_empty_project(self) -> None:
        layout = build_gantt_layout([], width=100)
        self.assertEqual(layout["rows"], [])
        self.assertIsNone(layout["timeline_range"])


if __name__ == "__main__":
    unittest.main(verbosity=2)
