"""
This module counts the paths through a cave system from "start" to "end".
Small caves (lowercase names) may be visited at most once per path, big caves
(uppercase names) any number of times. Optionally a single small cave may be visited twice.
"""

from collections import defaultdict
from typing import Dict, FrozenSet, List, Set

START = "start"
END = "end"


class CaveSystem:
    """
    Undirected graph of caves.
    Attributes:
        edges (Dict[str, Set[str]]): Neighbouring caves of every cave.
    """

    def __init__(self, edges: Dict[str, Set[str]]):
        self.edges = edges

    @classmethod
    def parse(cls, text: str) -> 'CaveSystem':
        edges: Dict[str, Set[str]] = defaultdict(set)
        for line in text.splitlines():
            line = line.strip()
            if not line:
                continue
            parts = line.split("-")
            if len(parts) != 2:
                raise ValueError(f"Invalid cave connection: {line!r}")
            for name in parts:
                if not (name.islower() or name.isupper()):
                    raise ValueError(f"Cave name must be all lowercase or all uppercase: {name!r}")
            a, b = parts
            if not is_small(a) and not is_small(b):
                # Two connected big caves allow infinitely many paths.
                raise ValueError(f"Big caves cannot be connected to each other: {line!r}")
            edges[a].add(b)
            edges[b].add(a)
        return cls(dict(edges))

    def neighbors(self, cave: str) -> List[str]:
        return sorted(self.edges.get(cave, ()))


def is_small(cave: str) -> bool:
    return cave.islower()


def count_paths(caves: CaveSystem, allow_revisit: bool = False) -> int:
    """
    Count the distinct paths from start to end.

    Uses an explicit stack of (cave, visited small caves, revisit still available) frames
    instead of recursion, so long paths cannot exhaust the call stack.
    """
    if START not in caves.edges:
        return 0

    count = 0
    stack = [(START, frozenset([START]), allow_revisit)]
    while stack:
        cave, visited, can_revisit = stack.pop()
        if cave == END:
            count += 1
            continue

        for next_cave in caves.neighbors(cave):
            if next_cave == START:
                continue
            if not is_small(next_cave):
                stack.append((next_cave, visited, can_revisit))
            elif next_cave not in visited:
                stack.append((next_cave, visited | {next_cave}, can_revisit))
            elif can_revisit and next_cave != END:
                stack.append((next_cave, visited, False))
    return count


def list_paths(caves: CaveSystem, allow_revisit: bool = False) -> List[List[str]]:
    """ Enumerate the paths counted by count_paths, in lexicographic order. """
    paths = []
    stack = [([START], frozenset([START]), allow_revisit)]
    while stack:
        path, visited, can_revisit = stack.pop()
        cave = path[-1]
        if cave == END:
            paths.append(path)
            continue
        for next_cave in caves.neighbors(cave):
            if next_cave == START:
                continue
            next_visited: FrozenSet[str] = visited
            next_revisit = can_revisit
            if is_small(next_cave):
                if next_cave not in visited:
                    next_visited = visited | {next_cave}
                elif can_revisit and next_cave != END:
                    next_revisit = False
                else:
                    continue
            stack.append((path + [next_cave], next_visited, next_revisit))
    return sorted(paths)
