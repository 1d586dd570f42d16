"""
This module contains the weighted grid ("risk map") search problem.

Classes:
    RiskMap: A grid of per-cell entry risks with orthogonal moves.

Functions:
    parse_risk_map(text: str) -> RiskMap:
        Build a risk map from lines of digits.

    load_risk_map(path) -> RiskMap:
        Read a risk map from a text file.

    generate_random_risk_map(rows: int, cols: int, seed: Optional[int] = None) -> RiskMap:
        Generate a random risk map with risks between 1 and 9.

    lowest_total_risk(risk_map: RiskMap, use_heuristic: bool = False) -> int:
        Minimum total risk from the top-left to the bottom-right corner.

    safest_path(risk_map: RiskMap) -> Tuple[int, List[Position]]:
        Minimum total risk and the positions along the path.

    main():
        Demonstrates the search on a random risk map.
"""

from pathlib import Path
from typing import List, Optional, Tuple, Union

import numpy as np

from general_search import search, search_with_path, uniform_cost_search
from general_state import Transition

Position = Tuple[int, int]

MAX_RISK = 9


class RiskMap:
    """
    Represents a grid where entering a cell costs its risk level.
    Attributes:
        risks (np.ndarray): 2-D integer array of risks, each between 1 and 9.
    Methods:
        tile(times: int = 5) -> 'RiskMap':
            Returns the enlarged map made of times x times increasingly risky copies.
        get_transitions(position: Position) -> List[Transition]:
            Returns the orthogonal neighbours of a position with their entry risk.
        is_goal(position: Position) -> bool:
            Checks if the position is the bottom-right corner.
    """

    def __init__(self, risks):
        risks = np.asarray(risks, dtype=np.int64)
        if risks.ndim != 2 or risks.size == 0:
            raise ValueError(f"Risk map must be a non-empty 2-D grid, got shape {risks.shape}")
        if risks.min() < 1 or risks.max() > MAX_RISK:
            raise ValueError(f"Risk levels must be between 1 and {MAX_RISK}")
        self.risks = risks

    @property
    def rows(self) -> int:
        return self.risks.shape[0]

    @property
    def cols(self) -> int:
        return self.risks.shape[1]

    @property
    def start(self) -> Position:
        return 0, 0

    @property
    def goal(self) -> Position:
        return self.rows - 1, self.cols - 1

    def tile(self, times: int = 5) -> 'RiskMap':
        """
        Build the full map: tile (i, j) is the original map with i + j added to every risk,
        where risks above 9 wrap around to 1.
        """
        tiles = [[(self.risks - 1 + i + j) % MAX_RISK + 1 for j in range(times)]
                 for i in range(times)]
        return RiskMap(np.block(tiles))

    def get_transitions(self, position: Position) -> List[Transition]:
        row, col = position
        transitions = []
        for next_row, next_col in ((row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)):
            if 0 <= next_row < self.rows and 0 <= next_col < self.cols:
                transitions.append(((next_row, next_col), int(self.risks[next_row, next_col])))
        return transitions

    def is_goal(self, position: Position) -> bool:
        return position == self.goal

    def manhattan_distance(self, position: Position) -> int:
        """ Lower bound on the remaining risk, since every cell costs at least 1. """
        goal_row, goal_col = self.goal
        return abs(goal_row - position[0]) + abs(goal_col - position[1])

    def __str__(self) -> str:
        return "\n".join("".join(str(risk) for risk in row) for row in self.risks)


def parse_risk_map(text: str) -> RiskMap:
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if not lines:
        raise ValueError("Empty risk map")
    if any(len(line) != len(lines[0]) for line in lines):
        raise ValueError("Risk map rows must all have the same length")
    if not all(line.isdigit() for line in lines):
        raise ValueError("Risk map rows must contain only digits")
    return RiskMap([[int(char) for char in line] for line in lines])


def load_risk_map(path: Union[str, Path]) -> RiskMap:
    return parse_risk_map(Path(path).read_text())


def generate_random_risk_map(rows: int, cols: int, seed: Optional[int] = None) -> RiskMap:
    rng = np.random.default_rng(seed)
    return RiskMap(rng.integers(1, MAX_RISK + 1, size=(rows, cols)))


def lowest_total_risk(risk_map: RiskMap, use_heuristic: bool = False) -> int:
    """
    Return the lowest total risk of any path from the top-left to the bottom-right corner.
    The starting cell is never entered, so its risk is not counted.
    """
    heuristic = risk_map.manhattan_distance if use_heuristic else None
    return search(risk_map.start, risk_map.is_goal, risk_map.get_transitions, heuristic=heuristic)


def safest_path(risk_map: RiskMap) -> Tuple[int, List[Position]]:
    return search_with_path(risk_map.start, risk_map.is_goal, risk_map.get_transitions)


def main():
    """ Main function to demonstrate the search on a random risk map. """
    risk_map = generate_random_risk_map(10, 10, seed=0)
    print("Risk map:")
    print(risk_map)

    result = uniform_cost_search(risk_map.start, risk_map.is_goal, risk_map.get_transitions)
    print(f"\nLowest total risk: {result.cost}")
    print(f"Path: {' -> '.join(str(position) for position in result.path)}")
    print(f"States expanded: {result.nodes_expanded}")


if __name__ == "__main__":
    main()
