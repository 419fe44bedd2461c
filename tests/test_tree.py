# SPDX-License-Identifier: MIT

import copy
import unittest

from support import make_task

from taskchart.service.tree import build_task_rows, group_by_parent


def outline(rows: list) -> list[tuple[int, int, str]]:
    return [(row["task"]["id"], row["depth"], row["number"]) for row in rows]


class TestBuildTaskRows(unittest.TestCase):
    def test_child_follows_parent_with_nested_number(self) -> None:
        tasks = [
            make_task(2, parent=1, start="2024-01-02", due="2024-01-03"),
            make_task(1, start="2024-01-01", due="2024-01-05"),
        ]
        self.assertEqual(outline(build_task_rows(tasks)), [(1, 0, "1"), (2, 1, "1.1")])

    def test_roots_with_equal_start_are_numbered_by_name(self) -> None:
        tasks = [
            make_task(1, "Beta", start="2024-02-01"),
            make_task(2, "Alpha", start="2024-02-01"),
        ]
        rows = build_task_rows(tasks)
        self.assertEqual(
            [(row["task"]["name"], row["number"]) for row in rows],
            [("Alpha", "1"), ("Beta", "2")],
        )

    def test_dangling_parent_is_left_out(self) -> None:
        tasks = [
            make_task(1, start="2024-01-01"),
            make_task(2, parent=99, start="2024-01-02"),
            make_task(3, parent=2, start="2024-01-03"),
        ]
        self.assertEqual(outline(build_task_rows(tasks)), [(1, 0, "1")])

    def test_numbers_reflect_sibling_positions_at_each_level(self) -> None:
        tasks = [
            make_task(1, "First", start="2024-01-01"),
            make_task(2, "Second", start="2024-01-02"),
            make_task(21, "c", parent=2, start="2024-01-05"),
            make_task(22, "a", parent=2, start="2024-01-03"),
            make_task(23, "b", parent=2, start="2024-01-04"),
            make_task(231, "deep", parent=21),
        ]
        rows = build_task_rows(tasks)
        self.assertEqual(
            outline(rows),
            [
                (1, 0, "1"),
                (2, 0, "2"),
                (22, 1, "2.1"),
                (23, 1, "2.2"),
                (21, 1, "2.3"),
                (231, 2, "2.3.1"),
            ],
        )
        numbers = [row["number"] for row in rows]
        self.assertEqual(len(numbers), len(set(numbers)))

    def test_depth_and_preorder_invariants(self) -> None:
        tasks = [
            make_task(1, start="2024-01-01"),
            make_task(2, parent=1, start="2024-01-02"),
            make_task(3, parent=2),
            make_task(4, start="2024-01-01", name="Zed"),
            make_task(5, parent=4),
            make_task(6, parent=1, start="2024-01-01"),
        ]
        rows = build_task_rows(tasks)
        position = {row["task"]["id"]: index for index, row in enumerate(rows)}
        depth = {row["task"]["id"]: row["depth"] for row in rows}

        for row in rows:
            task = row["task"]
            parent = task["parent_task_id"]
            if parent is None:
                self.assertEqual(row["depth"], 0)
                continue
            self.assertEqual(row["depth"], depth[parent] + 1)
            self.assertGreater(position[task["id"]], position[parent])
            # every row between parent and child belongs to the parent's subtree
            for between in rows[position[parent] + 1 : position[task["id"]]]:
                self.assertGreater(between["depth"], depth[parent])

    def test_unscheduled_roots_come_last(self) -> None:
        tasks = [
            make_task(1, "Aardvark"),
            make_task(2, "Zebra", start="2024-06-01"),
        ]
        self.assertEqual(outline(build_task_rows(tasks)), [(2, 0, "1"), (1, 0, "2")])

    def test_task_repeating_its_ancestor_id_is_skipped(self) -> None:
        tasks = [
            make_task(1, "Root", start="2024-01-01"),
            make_task(1, "Echo", parent=1, start="2024-01-02"),
            make_task(2, "Child", parent=1, start="2024-01-03"),
        ]
        rows = build_task_rows(tasks)
        self.assertEqual(
            [(row["task"]["name"], row["number"]) for row in rows],
            [("Root", "1"), ("Child", "1.1")],
        )

    def test_cycle_without_root_produces_no_rows(self) -> None:
        tasks = [make_task(1, parent=2), make_task(2, parent=1)]
        self.assertEqual(build_task_rows(tasks), [])

    def test_deep_chain_does_not_hit_recursion_limit(self) -> None:
        tasks = [make_task(0)] + [make_task(i, parent=i - 1) for i in range(1, 2000)]
        rows = build_task_rows(tasks)
        self.assertEqual(len(rows), 2000)
        self.assertEqual(rows[-1]["depth"], 1999)

    def test_empty_input(self) -> None:
        self.assertEqual(build_task_rows([]), [])

    def test_input_is_not_mutated_and_output_is_stable(self) -> None:
        tasks = [
            make_task(3, "Same", start="2024-01-01"),
            make_task(4, "Same", start="2024-01-01"),
            make_task(5, parent=3),
        ]
        before = copy.deepcopy(tasks)
        first = outline(build_task_rows(tasks))
        second = outline(build_task_rows(tasks))
        self.assertEqual(first, second)
        self.assertEqual(tasks, before)


class TestGroupByParent(unittest.TestCase):
    def test_roots_are_keyed_by_none(self) -> None:
        buckets = group_by_parent(
            [make_task(1), make_task(2, parent=1), make_task(3, parent=1)]
        )
        self.assertEqual([task["id"] for task in buckets[None]], [1])
        self.assertEqual([task["id"] for task in buckets[1]], [2, 3])


if __name__ == "__main__":
    unittest.main(verbosity=2)
