import numpy as np
import pytest

from risk_map import (
    RiskMap,
    generate_random_risk_map,
    load_risk_map,
    lowest_total_risk,
    parse_risk_map,
    safest_path,
)

EXAMPLE = """\
1163751742
1381373672
2136511328
3694931569
7463417111
1319128137
1359912421
3125421639
1293138521
2311944581
"""


def test_example_lowest_risk():
    assert lowest_total_risk(parse_risk_map(EXAMPLE)) == 40


def test_example_tiled_lowest_risk():
    risk_map = parse_risk_map(EXAMPLE).tile(5)

    assert (risk_map.rows, risk_map.cols) == (50, 50)
    assert lowest_total_risk(risk_map) == 315


def test_heuristic_matches_plain_search():
    risk_map = parse_risk_map(EXAMPLE)

    assert lowest_total_risk(risk_map, use_heuristic=True) == 40


def test_tile_wraps_risk_above_nine():
    tiled = RiskMap([[8]]).tile(3)

    np.testing.assert_array_equal(tiled.risks, [[8, 9, 1], [9, 1, 2], [1, 2, 3]])


def test_tile_keeps_non_square_maps_aligned():
    tiled = RiskMap([[1, 2, 3]]).tile(2)

    np.testing.assert_array_equal(tiled.risks, [[1, 2, 3, 2, 3, 4], [2, 3, 4, 3, 4, 5]])


def test_small_grid_path():
    risk_map = RiskMap([[1, 9], [1, 1]])
    cost, path = safest_path(risk_map)

    assert cost == 2
    assert path == [(0, 0), (1, 0), (1, 1)]


def test_path_cost_counts_entered_cells_only():
    risk_map = parse_risk_map(EXAMPLE)
    cost, path = safest_path(risk_map)

    assert path[0] == risk_map.start
    assert path[-1] == risk_map.goal
    assert sum(int(risk_map.risks[row, col]) for row, col in path[1:]) == cost


def test_corner_transitions():
    risk_map = RiskMap([[1, 2], [3, 4]])

    assert risk_map.get_transitions((0, 0)) == [((1, 0), 3), ((0, 1), 2)]
    assert risk_map.get_transitions((1, 1)) == [((0, 1), 2), ((1, 0), 3)]


def test_single_cell_map_costs_nothing():
    assert lowest_total_risk(RiskMap([[7]])) == 0


@pytest.mark.parametrize("text", ["", "12\n123\n", "1a2\n345\n"])
def test_parse_rejects_malformed_input(text):
    with pytest.raises(ValueError):
        parse_risk_map(text)


def test_risk_out_of_range_rejected():
    with pytest.raises(ValueError):
        RiskMap([[0, 1], [1, 1]])


def test_load_risk_map(tmp_path):
    input_file = tmp_path / "map.txt"
    input_file.write_text(EXAMPLE)

    assert str(load_risk_map(input_file)) == EXAMPLE.strip()


def test_random_risk_map_is_reproducible():
    first = generate_random_risk_map(6, 4, seed=3)
    second = generate_random_risk_map(6, 4, seed=3)

    assert first.risks.shape == (6, 4)
    assert first.risks.min() >= 1 and first.risks.max() <= 9
    np.testing.assert_array_equal(first.risks, second.risks)
