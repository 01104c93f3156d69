import pytest

from MCMC import (
    Direction,
    DIRECTIONS,
    State,
    InvalidDirectionError,
    InvalidStateError,
    to_coordinate,
    to_index,
    adjacent_state,
    are_adjacent,
    direction_of_movement,
)
from MCMC.grid import grid_size_for, check_state_index


def test_index_coordinate_mapping_on_3x3():
    expected = {
        1: (0, 0), 2: (0, 1), 3: (0, 2),
        4: (1, 0), 5: (1, 1), 6: (1, 2),
        7: (2, 0), 8: (2, 1), 9: (2, 2),
    }
    for index, coords in expected.items():
        assert to_coordinate(index, 3) == coords
        assert to_index(*coords) == index
        assert State.from_index(index, 3).index == index


def test_coordinate_mapping_other_grid_sizes():
    assert to_coordinate(6, 4) == (1, 1)
    assert to_coordinate(16, 4) == (3, 3)
    assert to_coordinate(3, 2) == (1, 0)


@pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (3, 0), (0, 3), (5, 5)])
def test_to_index_rejects_cells_outside_3x3(row, col):
    with pytest.raises(InvalidStateError):
        to_index(row, col)
    with pytest.raises(InvalidStateError):
        State(row, col).index


def test_adjacent_state_deltas_without_clipping():
    corner = State(0, 0)
    assert adjacent_state(corner, Direction.NORTH) == State(-1, 0)
    assert adjacent_state(corner, Direction.EAST) == State(0, 1)
    assert adjacent_state(corner, Direction.WEST) == State(0, -1)
    assert adjacent_state(corner, Direction.SOUTH) == State(1, 0)


def test_direction_order_is_fixed():
    assert DIRECTIONS == (Direction.NORTH, Direction.EAST, Direction.WEST, Direction.SOUTH)


def test_invalid_direction_raises():
    with pytest.raises(InvalidDirectionError):
        adjacent_state(State(1, 1), 7)
    with pytest.raises(ValueError):
        adjacent_state(State(1, 1), -1)


def test_are_adjacent():
    centre = State(1, 1)
    for neighbour in (State(0, 1), State(1, 2), State(1, 0), State(2, 1)):
        assert are_adjacent(centre, neighbour)
        assert are_adjacent(neighbour, centre)
    assert not are_adjacent(centre, centre)
    assert not are_adjacent(centre, State(0, 0))
    assert not are_adjacent(State(0, 2), State(1, 0))


def test_direction_of_movement():
    centre = State(1, 1)
    assert direction_of_movement(centre, State(0, 1)) == Direction.NORTH
    assert direction_of_movement(centre, State(2, 1)) == Direction.SOUTH
    assert direction_of_movement(centre, State(1, 2)) == Direction.EAST
    assert direction_of_movement(centre, State(1, 0)) == Direction.WEST
    with pytest.raises(InvalidStateError):
        direction_of_movement(centre, State(2, 2))


def test_states_compare_by_coordinates():
    assert State(2, 1) == State.from_index(8, 3)
    assert len({State(0, 0), State.from_index(1, 3)}) == 1


def test_grid_size_and_state_range():
    assert grid_size_for(9) == 3
    assert grid_size_for(10) == 3
    assert grid_size_for(16) == 4
    with pytest.raises(ValueError):
        grid_size_for(0)
    check_state_index(9, 3)
    with pytest.raises(InvalidStateError):
        check_state_index(10, 3)
    with pytest.raises(InvalidStateError):
        check_state_index(0, 3)
