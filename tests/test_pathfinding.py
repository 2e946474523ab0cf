"""
Tests for the exhaustive backtracking trace.
"""

import pytest

from labyrinth.errors import NoEntryError, TraceLimitError
from labyrinth.maze import Maze, default_maze
from labyrinth.pathfinding import Add, Remove, is_balanced, record


class TestRecord:
    def test_corridor_trace(self, corridor):
        assert record(corridor) == [
            Add(1, 1), Add(2, 1), Add(3, 1), Remove(3, 1), Remove(2, 1), Remove(1, 1),
        ]

    def test_exit_ends_branch_immediately(self, corridor):
        steps = record(corridor)
        index = steps.index(Add(3, 1))
        assert steps[index + 1] == Remove(3, 1)

    def test_cells_are_revisited_from_sibling_branches(self, loop):
        """South is tried before east, then east is explored again."""
        assert record(loop) == [
            Add(1, 1),
            Add(1, 2), Add(2, 2), Add(2, 1), Remove(2, 1), Remove(2, 2), Remove(1, 2),
            Add(2, 1), Add(2, 2), Add(1, 2), Remove(1, 2), Remove(2, 2), Remove(2, 1),
            Remove(1, 1),
        ]

    def test_neighbour_order_is_north_south_east_west(self):
        maze = Maze.build("cross.labmap", "22422\n23332\n43134\n23332\n22422")
        firsts = [step for step in record(maze) if isinstance(step, Add)][1:]
        # first move from the entry goes north
        assert firsts[0] == Add(2, 1)

    def test_entry_only(self):
        maze = Maze.build("closed.labmap", "222\n212\n222")
        assert record(maze) == [Add(1, 1), Remove(1, 1)]

    def test_add_and_remove_are_distinct(self):
        assert Add(1, 1) != Remove(1, 1)
        assert Add(1, 1).position == (1, 1)

    def test_no_entry(self):
        maze = Maze("plain", ["222", "232", "222"])
        with pytest.raises(NoEntryError):
            record(maze)

    def test_unvalidated_ragged_grid_is_bounds_checked(self):
        maze = Maze("ragged", ["2222", "2133", "22"])
        steps = record(maze)
        assert steps[0] == Add(1, 1)
        assert is_balanced(steps)

    def test_step_cap(self, loop):
        with pytest.raises(TraceLimitError):
            record(loop, max_steps=5)

    def test_step_cap_at_exact_length(self, loop):
        assert len(record(loop, max_steps=14)) == 14


class TestBalance:
    def test_default_maze_trace_is_balanced(self):
        maze = default_maze()
        steps = record(maze)
        assert steps
        assert steps[0] == Add(*maze.entry)
        assert steps[-1] == Remove(*maze.entry)
        assert is_balanced(steps)

    def test_open_set_is_empty_after_trace(self, loop):
        current = set()
        for step in record(loop):
            if isinstance(step, Add):
                assert step.position not in current
                current.add(step.position)
            else:
                current.remove(step.position)
        assert not current

    def test_unbalanced_sequence(self):
        assert not is_balanced([Add(1, 1), Add(2, 1), Remove(1, 1)])
