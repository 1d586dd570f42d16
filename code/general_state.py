"""
This module contains the StateInterface and SearchNode classes,
which are used to represent general states and nodes in a shortest-path search.
"""

from typing import Any, List, Optional, Tuple

# A transition is a (successor state, incremental cost) pair.
Transition = Tuple[Any, int]


class StateInterface:
    """
    Interface for a state in a search problem.

    States are immutable values: a transition always builds a new state.
    They must be hashable (visited map keys) and totally ordered (frontier tie-break).
    """
    def is_goal(self) -> bool:
        """ Return True if the current state is a goal state. """
        raise NotImplementedError

    def get_transitions(self) -> List[Transition]:
        """ Return the (next state, cost) pairs reachable from the current state. """
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        """ Check if the current state is equal to another state. """
        return NotImplemented

    def __hash__(self) -> int:
        """ Return a hash value for the current state. """
        raise NotImplementedError

    def __lt__(self, other: object) -> bool:
        """ Order states by content so that equal-cost frontier entries pop deterministically. """
        return NotImplemented


class SearchNode:
    """
    A class used to represent an entry of the visited/best-known map.
    Attributes
    ----------
    state : Any
        The state associated with this node.
    cost : int
        The best known cost to reach this node from the initial state.
    parent : Optional[SearchNode]
        The predecessor on the best known path, None for the initial state.
    """

    def __init__(self, state: Any, cost: int, parent: Optional['SearchNode'] = None):
        self.state = state
        self.cost = cost
        self.parent = parent

    def __repr__(self) -> str:
        return f"SearchNode(state={self.state!r}, cost={self.cost})"
