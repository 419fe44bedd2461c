# SPDX-License-Identifier: MIT

import unittest

from support import make_task

from taskchart.service.order import sort_siblings


def names(tasks: list) -> list[str]:
    return [task["name"] for task in tasks]


class TestSortSiblings(unittest.TestCase):
    def test_earlier_start_comes_first(self) -> None:
        tasks = [
            make_task(1, "Late", start="2024-03-01"),
            make_task(2, "Early", start="2024-01-01"),
        ]
        self.assertEqual(names(sort_siblings(tasks)), ["Early", "Late"])

    def test_unscheduled_sorts_after_scheduled(self) -> None:
        tasks = [
            make_task(1, "Aardvark"),
            make_task(2, "Zebra", start="2030-12-31"),
            make_task(3, "Broken", start="not a date"),
        ]
        self.assertEqual(names(sort_siblings(tasks)), ["Zebra", "Aardvark", "Broken"])

    def test_equal_start_breaks_tie_on_name(self) -> None:
        tasks = [
            make_task(1, "Beta", start="2024-02-01"),
            make_task(2, "Alpha", start="2024-02-01"),
        ]
        self.assertEqual(names(sort_siblings(tasks)), ["Alpha", "Beta"])

    def test_name_tie_break_is_case_sensitive(self) -> None:
        tasks = [
            make_task(1, "alpha", start="2024-02-01"),
            make_task(2, "Beta", start="2024-02-01"),
        ]
        self.assertEqual(names(sort_siblings(tasks)), ["Beta", "alpha"])

    def test_exact_ties_keep_input_order(self) -> None:
        first = make_task(1, "Same", start="2024-02-01")
        second = make_task(2, "Same", start="2024-02-01")
        for _ in range(3):
            ordered = sort_siblings([first, second])
            self.assertEqual([task["id"] for task in ordered], [1, 2])

    def test_input_is_not_mutated(self) -> None:
        tasks = [make_task(1, "B", start="2024-02-02"), make_task(2, "A", start="2024-02-01")]
        sort_siblings(tasks)
        self.assertEqual([task["id"] for task in tasks], [1, 2])


if __name__ == "__main__":
    unittest.main(verbosity=2)
