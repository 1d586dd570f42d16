"""
    This module implements a generic shortest-path search (uniform-cost / Dijkstra,
    optionally guided by a consistent heuristic) over any hashable, totally ordered state.

Functions:
    uniform_cost_search(initial_state, is_goal, get_transitions, heuristic=None,
    relax_on_tie=True) -> SearchResult:
        Run the search and return the cost, the path and search statistics.

    search(initial_state, is_goal, get_transitions, **options) -> int:
        Return the minimum total cost to reach a goal state.

    search_with_path(initial_state, is_goal, get_transitions, **options)
    -> Tuple[int, List[State]]:
        Return the minimum total cost and the sequence of states from initial to goal.

    solve(state: StateInterface, **options) -> SearchResult:
        Run the search on a state that implements StateInterface.

    reconstruct_path(node: SearchNode) -> List[State]:
        Rebuild the state sequence by following predecessor links.

Exceptions:
    SearchError: Base class for search failures.
    UnreachableGoalError: The frontier emptied without reaching a goal state.
    NegativeCostError: A transition reported a negative cost.
"""

import heapq
import logging
from collections import namedtuple
from typing import Any, Callable, Dict, List, Optional, Set, Tuple

from general_state import SearchNode, StateInterface, Transition

logger = logging.getLogger(__name__)

SearchResult = namedtuple("SearchResult", ["cost", "path", "nodes_expanded", "nodes_generated"])


class SearchError(Exception):
    """ Base class for errors raised by the search engine. """


class UnreachableGoalError(SearchError):
    """ Raised when every reachable state was expanded and none is a goal. """

    def __init__(self, initial_state: Any, nodes_expanded: int):
        super().__init__(f"No goal state reachable from {initial_state!r} "
                         f"({nodes_expanded} states expanded)")
        self.initial_state = initial_state
        self.nodes_expanded = nodes_expanded


class NegativeCostError(SearchError, ValueError):
    """ Raised when a transition enumerator returns a negative cost. """

    def __init__(self, state: Any, next_state: Any, cost: int):
        super().__init__(f"Negative transition cost {cost} from {state!r} to {next_state!r}")
        self.state = state
        self.next_state = next_state
        self.cost = cost


def uniform_cost_search(initial_state: Any,
                        is_goal: Callable[[Any], bool],
                        get_transitions: Callable[[Any], List[Transition]],
                        heuristic: Optional[Callable[[Any], int]] = None,
                        relax_on_tie: bool = True) -> SearchResult:
    """
    Find the cheapest path from the initial state to any state satisfying the goal predicate.

    :param initial_state: The state the search starts from.
    :param is_goal: Predicate deciding whether a state is a goal.
    :param get_transitions: Returns the (next_state, cost) pairs of a state. Costs must be >= 0.
    :param heuristic: Optional consistent lower bound on the remaining cost. None means Dijkstra.
    :param relax_on_tie: Replace a recorded predecessor when a new path is equally cheap (<=)
    instead of only when it is strictly cheaper (<). The returned cost is the same either way.
    :return: A SearchResult with the cost, the path and the search counters.
    :raises UnreachableGoalError: If no goal state is reachable.
    :raises NegativeCostError: If a transition has a negative cost.
    """
    estimate = heuristic if heuristic is not None else _zero_heuristic
    root = SearchNode(initial_state, 0)
    open_set, closed_set, node_dict = initialize_search_structures(root, estimate)
    nodes_generated = 1
    nodes_expanded = 0

    logger.debug("Starting search from %r", initial_state)
    while open_set:
        current_node = get_next_node(open_set, closed_set, node_dict)
        if current_node is None:
            continue

        if is_goal(current_node.state):
            logger.debug("Goal reached with cost %d after expanding %d states",
                         current_node.cost, nodes_expanded)
            return SearchResult(current_node.cost, reconstruct_path(current_node),
                                nodes_expanded, nodes_generated)

        closed_set.add(current_node.state)
        nodes_expanded += 1

        for neighbor_node in generate_neighbors(current_node, get_transitions, node_dict,
                                                closed_set, relax_on_tie):
            nodes_generated += 1
            node_dict[neighbor_node.state] = neighbor_node
            priority = neighbor_node.cost + estimate(neighbor_node.state)
            heapq.heappush(open_set, (priority, neighbor_node.state, neighbor_node.cost))

    logger.debug("Frontier exhausted after expanding %d states", nodes_expanded)
    raise UnreachableGoalError(initial_state, nodes_expanded)


def _zero_heuristic(_state: Any) -> int:
    return 0


def initialize_search_structures(root: SearchNode, estimate: Callable[[Any], int]) -> Tuple[
        List[Tuple[int, Any, int]], Set[Any], Dict[Any, SearchNode]]:
    """ Initialize the frontier, the closed set and the visited map for one search. """
    open_set: List[Tuple[int, Any, int]] = []
    closed_set: Set[Any] = set()
    node_dict = {root.state: root}
    heapq.heappush(open_set, (root.cost + estimate(root.state), root.state, root.cost))
    return open_set, closed_set, node_dict


def get_next_node(open_set, closed_set, node_dict) -> Optional[SearchNode]:
    """ Pop the cheapest frontier entry, or None if its state was already finalized. """
    _, state, _ = heapq.heappop(open_set)
    if state in closed_set:
        return None
    return node_dict[state]


def generate_neighbors(current_node: SearchNode,
                       get_transitions: Callable[[Any], List[Transition]],
                       node_dict: Dict[Any, SearchNode],
                       closed_set: Set[Any],
                       relax_on_tie: bool) -> List[SearchNode]:
    """ Relax every transition of the current node and return the improved neighbor nodes. """
    # A state may appear in several transitions; keep only its cheapest one.
    neighbors: Dict[Any, SearchNode] = {}
    for next_state, step_cost in get_transitions(current_node.state):
        if step_cost < 0:
            raise NegativeCostError(current_node.state, next_state, step_cost)
        if next_state in closed_set:
            continue

        candidate = current_node.cost + step_cost
        known = neighbors.get(next_state) or node_dict.get(next_state)
        if known is None or candidate < known.cost or (relax_on_tie and candidate == known.cost):
            neighbors[next_state] = SearchNode(next_state, candidate, current_node)
    return list(neighbors.values())


def reconstruct_path(node: SearchNode) -> List[Any]:
    """
    Reconstructs the path from the initial state to the given node.
    Args:
        node (SearchNode): The node from which to start reconstructing the path.
    Returns:
        List[State]: The states from the initial state to the node's state, both included.
    """

    path = [node.state]
    while node.parent:
        node = node.parent
        path.append(node.state)
    return path[::-1]


def search(initial_state: Any,
           is_goal: Callable[[Any], bool],
           get_transitions: Callable[[Any], List[Transition]],
           **options) -> int:
    """ Return the minimum total cost from the initial state to a goal state. """
    return uniform_cost_search(initial_state, is_goal, get_transitions, **options).cost


def search_with_path(initial_state: Any,
                     is_goal: Callable[[Any], bool],
                     get_transitions: Callable[[Any], List[Transition]],
                     **options) -> Tuple[int, List[Any]]:
    """ Return the minimum total cost and the states visited along an optimal path. """
    result = uniform_cost_search(initial_state, is_goal, get_transitions, **options)
    return result.cost, result.path


def solve(state: StateInterface, **options) -> SearchResult:
    """ Search from a state that knows its own goal test and transitions. """
    return uniform_cost_search(state, type(state).is_goal, type(state).get_transitions, **options)


def debug_print_path(result: SearchResult):
    """ Print the cost, the search counters and every state of a solution path. """
    print(f"\nSolution with cost {result.cost} "
          f"({result.nodes_expanded} states expanded, {result.nodes_generated} generated):")
    for step, state in enumerate(result.path):
        print(f"\nStep {step}:")
        print(state)
