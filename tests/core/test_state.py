"""
Tests for headings, augmented states and the move rule
"""

import pytest
from crucible.core.grid import Grid
from crucible.core.state import Heading, SearchState, successors


class TestHeading:
    """Rotations of cardinal headings"""

    @pytest.mark.parametrize("heading,left,right", [
        (Heading.NORTH, Heading.WEST, Heading.EAST),
        (Heading.EAST, Heading.NORTH, Heading.SOUTH),
        (Heading.SOUTH, Heading.EAST, Heading.WEST),
        (Heading.WEST, Heading.SOUTH, Heading.NORTH),
    ])
    def test_left_and_right(self, heading, left, right):
        assert heading.left() == left
        assert heading.right() == right

    @pytest.mark.parametrize("heading", list(Heading))
    def test_rotations_compose(self, heading):
        """Test left undoes right and four turns return to the start"""
        assert heading.left().right() == heading
        assert heading.left().left().left().left() == heading
        assert heading.left().left() == heading.opposite()
        assert heading.opposite() not in (heading.left(), heading.right())

    def test_deltas(self):
        assert Heading.NORTH.delta == (-1, 0)
        assert Heading.SOUTH.delta == (1, 0)
        assert Heading.EAST.delta == (0, 1)
        assert Heading.WEST.delta == (0, -1)


class TestSearchState:
    """Moves and identity of augmented states"""

    def test_move_forwards_decrements_budget(self):
        state = SearchState(1, 1, Heading.SOUTH, 3)

        moved = state.move_forwards()

        assert moved == SearchState(2, 1, Heading.SOUTH, 2)

    def test_move_forwards_with_no_budget(self):
        """Test a spent budget forbids further straight moves"""
        assert SearchState(1, 1, Heading.SOUTH, 0).move_forwards() is None

    @pytest.mark.parametrize("heading", [Heading.NORTH, Heading.WEST])
    def test_move_off_top_left_edge(self, heading):
        assert SearchState(0, 0, heading, 3).move_forwards() is None

    def test_turns_reset_budget(self):
        """Test a pivot keeps the cell, rotates the heading and restores the budget"""
        state = SearchState(2, 3, Heading.EAST, 0)

        assert state.turn_left(5) == SearchState(2, 3, Heading.NORTH, 5)
        assert state.turn_right(5) == SearchState(2, 3, Heading.SOUTH, 5)

    def test_identity_includes_heading_and_budget(self):
        """Test states at one cell differ by heading and budget"""
        states = {
            SearchState(0, 0, Heading.EAST, 3),
            SearchState(0, 0, Heading.EAST, 2),
            SearchState(0, 0, Heading.SOUTH, 3),
            SearchState(0, 0, Heading.EAST, 3),
        }

        assert len(states) == 3

    def test_state_is_immutable(self):
        state = SearchState(0, 0, Heading.EAST, 3)

        with pytest.raises(AttributeError):
            state.row = 4


class TestSuccessors:
    """The move rule generator"""

    def test_interior_state_has_three_successors(self, scenario_grid):
        """Test straight, left and right moves from the centre cell"""
        state = SearchState(1, 1, Heading.EAST, 3)

        result = dict((s, w) for w, s in successors(state, scenario_grid, 3))

        assert result == {
            SearchState(1, 2, Heading.EAST, 2): 9,
            SearchState(0, 1, Heading.NORTH, 2): 9,
            SearchState(2, 1, Heading.SOUTH, 2): 1,
        }

    def test_spent_budget_forces_turn(self, scenario_grid):
        state = SearchState(1, 1, Heading.EAST, 0)

        headings = {s.heading for _, s in successors(state, scenario_grid, 3)}

        assert headings == {Heading.NORTH, Heading.SOUTH}

    def test_out_of_bounds_moves_dropped(self, scenario_grid):
        """Test corner states only yield moves that stay on the grid"""
        state = SearchState(2, 2, Heading.EAST, 3)

        result = [s for _, s in successors(state, scenario_grid, 3)]

        assert result == [SearchState(1, 2, Heading.NORTH, 2)]

    def test_turn_budget_uses_max_straight(self, scenario_grid):
        state = SearchState(1, 1, Heading.EAST, 1)

        budgets = {s.heading: s.remaining for _, s in successors(state, scenario_grid, 7)}

        assert budgets == {Heading.EAST: 0, Heading.NORTH: 6, Heading.SOUTH: 6}

    @pytest.mark.parametrize("max_straight", [1, 3])
    def test_never_reverses(self, max_straight):
        """Test no generated move heads back the way the state faces"""
        grid = Grid([[1, 2, 3], [4, 5, 6], [7, 8, 9]])

        for row in range(3):
            for col in range(3):
                for heading in Heading:
                    for remaining in range(max_straight + 1):
                        state = SearchState(row, col, heading, remaining)
                        for weight, successor in successors(state, grid, max_straight):
                            assert successor.heading != heading.opposite()
                            assert abs(successor.row - row) + abs(successor.col - col) == 1
                            assert weight == grid.get(successor.row, successor.col)
                            assert 0 <= successor.remaining <= max_straight
