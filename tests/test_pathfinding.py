"""Tests for neighbour generation and the best-first path search."""

from collections import deque

import pytest

from grid_walker.core.grid import Grid, OutOfRangeError
from grid_walker.systems.pathfinding.neighbors import are_neighbors, neighbors
from grid_walker.systems.pathfinding.search import PathSearch, find_path


def _coords(cells):
    return [c.coords for c in cells]


def _reachable(grid: Grid, start, end) -> bool:
    seen = {start}
    q = deque([start])
    while q:
        cur = q.popleft()
        if cur == end:
            return True
        for n in neighbors(grid, *cur):
            if n.coords not in seen:
                seen.add(n.coords)
                q.append(n.coords)
    return False


def _assert_valid_path(grid: Grid, path, start, end):
    assert path[0].coords == start
    assert path[-1].coords == end
    # The walker may start on an obstacle; nothing after it may be one.
    for cell in list(path)[1:]:
        assert not cell.blocked
    for a, b in zip(path, list(path)[1:]):
        assert are_neighbors(grid, a, b)


# ---------- Neighbours -------------------------------------------------------

def test_neighbors_order_in_open_grid():
    g = Grid(3, 3)
    assert _coords(neighbors(g, 1, 1)) == [
        (1, 0), (1, 2), (0, 1), (2, 1),
        (0, 0), (2, 2), (0, 2), (2, 0),
    ]


def test_neighbors_at_corner_stay_in_bounds():
    g = Grid(3, 3)
    assert _coords(neighbors(g, 0, 0)) == [(0, 1), (1, 0), (1, 1)]


def test_neighbors_skip_blocked_cells():
    g = Grid(3, 3, blocked={(1, 0), (2, 2)})
    result = _coords(neighbors(g, 1, 1))
    assert (1, 0) not in result
    assert (2, 2) not in result


def test_diagonal_requires_both_flanks():
    # One flank blocked is enough to forbid the diagonal.
    g = Grid(3, 3, blocked={(1, 0)})
    assert _coords(neighbors(g, 0, 0)) == [(0, 1)]


def test_neighbors_of_isolated_cell_is_empty():
    g = Grid(1, 1)
    assert neighbors(g, 0, 0) == []


# ---------- Search -----------------------------------------------------------

def test_open_grid_takes_diagonal():
    g = Grid(3, 3)
    path = find_path(g, (0, 0), (2, 2))
    assert path is not None
    assert path.coords() == [(0, 0), (1, 1), (2, 2)]
    assert path.cost == 4


def test_straight_line_cost():
    g = Grid(5, 1)
    path = find_path(g, (0, 0), (4, 0))
    assert path.coords() == [(0, 0), (1, 0), (2, 0), (3, 0), (4, 0)]
    assert path.cost == 4


def test_single_row_blocked_is_not_found():
    g = Grid(3, 1, blocked={(1, 0)})
    assert find_path(g, (0, 0), (2, 0)) is None


def test_start_sealed_by_corner_is_not_found():
    g = Grid(3, 3, blocked={(1, 0), (0, 1)})
    assert find_path(g, (0, 0), (2, 2)) is None


def test_corner_cut_forces_detour():
    g = Grid(3, 3, blocked={(1, 0)})
    path = find_path(g, (0, 0), (2, 0))
    assert path is not None
    _assert_valid_path(g, path, (0, 0), (2, 0))
    assert (1, 1) in path.coords()
    # (0,0) -> (1,1) cuts past (1,0), so the walker must go down first.
    assert path.coords()[1] == (0, 1)


def test_detour_around_wall():
    wall = {(2, y) for y in range(4)}
    g = Grid(5, 5, blocked=wall)
    path = find_path(g, (0, 0), (4, 0))
    assert path is not None
    _assert_valid_path(g, path, (0, 0), (4, 0))
    assert (2, 4) in path.coords()


def test_enclosed_goal_is_not_found():
    ring = {(x, y) for x in range(1, 4) for y in range(1, 4)} - {(2, 2)}
    g = Grid(5, 5, blocked=ring)
    assert find_path(g, (0, 0), (2, 2)) is None


def test_goal_reachable_only_by_corner_cut_is_not_found():
    g = Grid(5, 5, blocked={(2, 1), (2, 3), (1, 2), (3, 2)})
    assert find_path(g, (0, 0), (2, 2)) is None


def test_blocked_goal_is_not_found():
    g = Grid(3, 3, blocked={(2, 2)})
    assert find_path(g, (0, 0), (2, 2)) is None


def test_same_start_and_end():
    g = Grid(3, 3)
    path = find_path(g, (1, 1), (1, 1))
    assert path.coords() == [(1, 1)]
    assert path.cost == 0


def test_out_of_range_endpoints_raise():
    g = Grid(3, 3)
    with pytest.raises(OutOfRangeError):
        find_path(g, (0, 0), (3, 3))
    with pytest.raises(OutOfRangeError):
        find_path(g, (-1, 0), (1, 1))


def test_path_holds_no_search_state():
    g = Grid(4, 4)
    search = PathSearch(g)
    first = search.find_path((0, 0), (3, 3))
    second = search.find_path((3, 3), (0, 0))
    assert first.coords()[0] == (0, 0)
    assert second.coords()[0] == (3, 3)
    assert len(first) == len(second) == 4


@pytest.mark.parametrize("seed", range(25))
def test_random_grids_match_reachability(seed):
    g = Grid.random(15, 10, 0.3, seed=seed)
    start, end = (0, 0), (14, 9)
    path = find_path(g, start, end)
    assert (path is not None) == _reachable(g, start, end)
    if path is not None:
        _assert_valid_path(g, path, start, end)


def test_heuristic_ranking_expands_fewer_nodes():
    g = Grid(10, 10)
    uniform = PathSearch(g)
    guided = PathSearch(g, use_heuristic=True)
    p1 = uniform.find_path((0, 5), (9, 5))
    p2 = guided.find_path((0, 5), (9, 5))
    assert p1.cost == p2.cost == 9
    assert guided.expanded < uniform.expanded


@pytest.mark.parametrize("seed", range(10))
def test_heuristic_paths_are_valid(seed):
    g = Grid.random(12, 12, 0.25, seed=seed)
    path = find_path(g, (0, 0), (11, 11), use_heuristic=True)
    if path is not None:
        _assert_valid_path(g, path, (0, 0), (11, 11))
    else:
        assert not _reachable(g, (0, 0), (11, 11))
