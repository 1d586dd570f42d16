"""
    Runs every puzzle on its input file, prints the answers and checks them
    against the known expected values.

Functions:
    solve_cave_paths(text: str, allow_revisit: bool) -> int
    solve_risk_map(text: str, tiles: int) -> int
    solve_burrow(text: str, unfold: bool) -> int
    run_puzzle(puzzle: Puzzle) -> int:
        Solve one puzzle and check its answer.

Constants:
    PUZZLES: List[Puzzle]
        Every puzzle with its input file and expected answer.

    base_dir: Path
        Directory holding this module; inputs live in base_dir / "inputs".
"""

from collections import namedtuple
from functools import partial
from pathlib import Path

from tqdm import tqdm

from amphipod_burrow import minimum_energy, parse_burrow, unfold_burrow
from cave_paths import CaveSystem, count_paths
from risk_map import lowest_total_risk, parse_risk_map, safest_path
from utils import setup_logger
from visualize import plot_risk_path

Puzzle = namedtuple("Puzzle", ["name", "input_file", "solver", "expected"])


def solve_cave_paths(text: str, allow_revisit: bool = False) -> int:
    return count_paths(CaveSystem.parse(text), allow_revisit=allow_revisit)


def solve_risk_map(text: str, tiles: int = 1) -> int:
    risk_map = parse_risk_map(text)
    if tiles > 1:
        risk_map = risk_map.tile(tiles)
    return lowest_total_risk(risk_map)


def solve_burrow(text: str, unfold: bool = False) -> int:
    if unfold:
        text = unfold_burrow(text)
    return minimum_energy(parse_burrow(text))


class AnswerMismatchError(AssertionError):
    """ Raised when a puzzle answer differs from its expected value. """


# Puzzle inputs:
base_dir = Path(__file__).resolve().parent
input_dir = base_dir / "inputs"
plot_dir = base_dir / "plots"

PUZZLES = [
    Puzzle("day12 part 1 (test 1)", "day12-input-test1.txt", solve_cave_paths, 10),
    Puzzle("day12 part 1 (test 2)", "day12-input-test2.txt", solve_cave_paths, 19),
    Puzzle("day12 part 1 (test 3)", "day12-input-test3.txt", solve_cave_paths, 226),
    Puzzle("day12 part 2 (test 1)", "day12-input-test1.txt",
           partial(solve_cave_paths, allow_revisit=True), 36),
    Puzzle("day12 part 2 (test 2)", "day12-input-test2.txt",
           partial(solve_cave_paths, allow_revisit=True), 103),
    Puzzle("day12 part 2 (test 3)", "day12-input-test3.txt",
           partial(solve_cave_paths, allow_revisit=True), 3509),
    Puzzle("day15 part 1 (test)", "day15-input-test.txt", solve_risk_map, 40),
    Puzzle("day15 part 2 (test)", "day15-input-test.txt", partial(solve_risk_map, tiles=5), 315),
    Puzzle("day23 part 1 (test)", "day23-input-test.txt", solve_burrow, 12521),
    Puzzle("day23 part 2 (test)", "day23-input-test.txt", partial(solve_burrow, unfold=True), 44169),
]


def run_puzzle(puzzle: Puzzle, directory: Path = input_dir) -> int:
    """
    Solve one puzzle from its input file.

    Raises:
        AnswerMismatchError: If the answer differs from the expected value.
    """
    text = (directory / puzzle.input_file).read_text()
    answer = puzzle.solver(text)
    if puzzle.expected is not None and answer != puzzle.expected:
        raise AnswerMismatchError(f"{puzzle.name}: expected {puzzle.expected}, got {answer}")
    return answer


def main():
    logger = setup_logger("solve_puzzles")

    for puzzle in tqdm(PUZZLES, desc="Solving puzzles"):
        answer = run_puzzle(puzzle)
        logger.info(f"{puzzle.name}: {answer}")

    # Plot the day 15 path for inspection
    risk_map = parse_risk_map((input_dir / "day15-input-test.txt").read_text())
    _, path = safest_path(risk_map)
    output_file = plot_risk_path(risk_map, path, plot_dir / "day15_test_path.png")
    logger.info(f"Saved path plot to {output_file}")


if __name__ == "__main__":
    main()
