from collections import namedtuple
import logging

import numpy as np
from tqdm import tqdm

from general_search import uniform_cost_search
from risk_map import generate_random_risk_map
from utils import setup_logger

logger = logging.getLogger(__name__)

BenchmarkSummary = namedtuple("BenchmarkSummary", ["samples", "mean_expanded_dijkstra",
                                                   "mean_expanded_heuristic", "mean_cost"])


def compare_search_modes(samples: int = 20, rows: int = 30, cols: int = 30,
                         seed: int = 42) -> BenchmarkSummary:
    """
    Search random risk maps with and without the Manhattan heuristic.
    Both modes must agree on the cost; the summary reports how many states each expanded.
    """
    expanded_dijkstra = []
    expanded_heuristic = []
    costs = []

    for sample_idx in tqdm(range(samples), desc="Comparing search modes"):
        risk_map = generate_random_risk_map(rows, cols, seed=seed + sample_idx)
        plain = uniform_cost_search(risk_map.start, risk_map.is_goal, risk_map.get_transitions)
        guided = uniform_cost_search(risk_map.start, risk_map.is_goal, risk_map.get_transitions,
                                     heuristic=risk_map.manhattan_distance)
        if plain.cost != guided.cost:
            raise AssertionError(f"Sample {sample_idx}: Dijkstra found {plain.cost}, "
                                 f"heuristic search found {guided.cost}")
        logger.debug(f"Sample {sample_idx}: cost {plain.cost}, "
                     f"expanded {plain.nodes_expanded} vs {guided.nodes_expanded}")

        expanded_dijkstra.append(plain.nodes_expanded)
        expanded_heuristic.append(guided.nodes_expanded)
        costs.append(plain.cost)

    return BenchmarkSummary(samples,
                            float(np.mean(expanded_dijkstra)),
                            float(np.mean(expanded_heuristic)),
                            float(np.mean(costs)))


def main():
    bench_logger = setup_logger("benchmarks")
    for size in (10, 30, 60):
        bench_logger.info(f"Running benchmark on {size}x{size} risk maps...")
        summary = compare_search_modes(samples=20, rows=size, cols=size)
        bench_logger.info(f"- Mean cost: {summary.mean_cost:.1f}")
        bench_logger.info(f"- Mean states expanded (Dijkstra): {summary.mean_expanded_dijkstra:.1f}")
        bench_logger.info(f"- Mean states expanded (heuristic): {summary.mean_expanded_heuristic:.1f}")


if __name__ == "__main__":
    main()
