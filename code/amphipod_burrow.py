"""
This module contains the amphipod burrow search problem: amphipods of four kinds
must be moved from the hallway and rooms into the room of their own kind
while spending as little energy as possible.

Classes:
    BurrowState: A configuration of the hallway and the four side rooms.

Functions:
    parse_burrow(text: str) -> BurrowState:
        Build the state from the burrow diagram.

    unfold_burrow(text: str) -> str:
        Insert the two folded lines of the diagram, doubling the room depth.

    minimum_energy(state: BurrowState) -> int:
        Least total energy needed to organize the amphipods.

    main():
        Solves the example burrow and prints every step of the solution.
"""

import re
from typing import List, Tuple

from general_search import SearchResult, debug_print_path, solve
from general_state import StateInterface, Transition

KINDS = "ABCD"
ENERGY_PER_STEP = {"A": 1, "B": 10, "C": 100, "D": 1000}
EMPTY = "."
HALLWAY_LEN = 11
ROOM_ENTRANCES = (2, 4, 6, 8)
HALLWAY_STOPS = tuple(i for i in range(HALLWAY_LEN) if i not in ROOM_ENTRANCES)

FOLDED_LINES = ["  #D#C#B#A#", "  #D#B#A#C#"]

EXAMPLE_BURROW = """\
#############
#...........#
###B#C#B#D###
  #A#D#C#A#
  #########
"""


class BurrowState(StateInterface):
    """
    Represents the burrow: an 11-place hallway above four rooms of equal depth.
    Attributes:
        hallway (str): One character per hallway place, "." when empty.
        rooms (Tuple[str, ...]): One string per room (A, B, C, D), listed from bottom to top,
        "." for an empty slot. Rooms fill from the bottom.
    Methods:
        get_transitions() -> List[Transition]:
            Returns every legal move with its energy cost.
        is_goal() -> bool:
            Checks if every room holds only amphipods of its own kind.
        __str__() -> str:
            Returns the burrow diagram.
    """

    def __init__(self, hallway: str, rooms: Tuple[str, ...]):
        if len(hallway) != HALLWAY_LEN:
            raise ValueError(f"Hallway must have {HALLWAY_LEN} places, got {len(hallway)}")
        if len(rooms) != len(KINDS) or len({len(room) for room in rooms}) != 1:
            raise ValueError("Burrow needs four rooms of equal depth")
        self.hallway = hallway
        self.rooms = tuple(rooms)
        self.depth = len(rooms[0])

    def get_transitions(self) -> List[Transition]:
        return self._moves_out_of_rooms() + self._moves_into_rooms()

    def _moves_out_of_rooms(self) -> List[Transition]:
        transitions = []
        for room_index, kind in enumerate(KINDS):
            room = self.rooms[room_index]
            occupied = room.index(EMPTY) if EMPTY in room else len(room)
            if occupied == 0 or all(amphipod == kind for amphipod in room[:occupied]):
                continue

            top = occupied - 1
            amphipod = room[top]
            entrance = ROOM_ENTRANCES[room_index]
            for target in HALLWAY_STOPS:
                if not self._hallway_clear(entrance, target):
                    continue
                steps = abs(target - entrance) + self.depth - top
                hallway = self.hallway[:target] + amphipod + self.hallway[target + 1:]
                rooms = self._replace_room(room_index, room[:top] + EMPTY + room[top + 1:])
                transitions.append((BurrowState(hallway, rooms), steps * ENERGY_PER_STEP[amphipod]))
        return transitions

    def _moves_into_rooms(self) -> List[Transition]:
        transitions = []
        for position, amphipod in enumerate(self.hallway):
            if amphipod == EMPTY:
                continue
            room_index = KINDS.index(amphipod)
            room = self.rooms[room_index]
            if EMPTY not in room or any(other not in (amphipod, EMPTY) for other in room):
                continue

            slot = room.index(EMPTY)
            entrance = ROOM_ENTRANCES[room_index]
            if position < entrance:
                path = self.hallway[position + 1:entrance + 1]
            else:
                path = self.hallway[entrance:position]
            if any(place != EMPTY for place in path):
                continue

            steps = abs(position - entrance) + self.depth - slot
            hallway = self.hallway[:position] + EMPTY + self.hallway[position + 1:]
            rooms = self._replace_room(room_index, room[:slot] + amphipod + room[slot + 1:])
            transitions.append((BurrowState(hallway, rooms), steps * ENERGY_PER_STEP[amphipod]))
        return transitions

    def _hallway_clear(self, entrance: int, target: int) -> bool:
        low, high = min(entrance, target), max(entrance, target)
        return all(place == EMPTY for place in self.hallway[low:high + 1])

    def _replace_room(self, room_index: int, room: str) -> Tuple[str, ...]:
        return self.rooms[:room_index] + (room,) + self.rooms[room_index + 1:]

    def is_goal(self) -> bool:
        return all(room == kind * self.depth for kind, room in zip(KINDS, self.rooms))

    def _key(self) -> Tuple[Tuple[str, ...], str]:
        return self.rooms, self.hallway

    def __str__(self) -> str:
        lines = ["#" * (HALLWAY_LEN + 2), f"#{self.hallway}#"]
        for level in reversed(range(self.depth)):
            cells = "#".join(room[level] for room in self.rooms)
            if level == self.depth - 1:
                lines.append(f"###{cells}###")
            else:
                lines.append(f"  #{cells}#")
        lines.append("  #########")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"BurrowState(hallway={self.hallway!r}, rooms={self.rooms!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BurrowState):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, BurrowState):
            return NotImplemented
        return self._key() < other._key()


def parse_burrow(text: str) -> BurrowState:
    """
    Parse the burrow diagram. The second line is the hallway, every following line
    with four cells is one level of the rooms, listed from top to bottom.
    """
    lines = text.splitlines()
    if len(lines) < 4 or not lines[1].startswith("#"):
        raise ValueError("Burrow diagram is too short")
    hallway = lines[1].strip().strip("#")
    if not re.fullmatch(r"[A-D.]*", hallway):
        raise ValueError(f"Hallway may hold only amphipods A-D and '.': {hallway!r}")
    if any(hallway[i:i + 1] not in ("", EMPTY) for i in ROOM_ENTRANCES):
        raise ValueError(f"Amphipod standing on a room entrance: {hallway!r}")

    levels = []
    for line in lines[2:]:
        cells = re.findall(r"[A-D.]", line)
        if not cells:
            continue
        if len(cells) != len(KINDS):
            raise ValueError(f"Room line must have four cells: {line!r}")
        levels.append(cells)
    if not levels:
        raise ValueError("Burrow diagram has no rooms")

    rooms = tuple("".join(level[i] for level in reversed(levels)) for i in range(len(KINDS)))
    for room in rooms:
        if EMPTY in room and room[room.index(EMPTY):] != EMPTY * (len(room) - room.index(EMPTY)):
            raise ValueError(f"Amphipod floating above an empty slot in room {room!r}")

    state = BurrowState(hallway, rooms)
    everything = hallway + "".join(rooms)
    for kind in KINDS:
        if everything.count(kind) != state.depth:
            raise ValueError(f"Expected {state.depth} amphipods of kind {kind}, "
                             f"found {everything.count(kind)}")
    return state


def unfold_burrow(text: str) -> str:
    lines = text.splitlines()
    return "\n".join(lines[:3] + FOLDED_LINES + lines[3:]) + "\n"


def organize(state: BurrowState) -> SearchResult:
    return solve(state)


def minimum_energy(state: BurrowState) -> int:
    """ Return the least energy required to move every amphipod into its own room. """
    return organize(state).cost


def main():
    """ Solve the example burrow, folded and unfolded, and print the solutions. """
    for text in (EXAMPLE_BURROW, unfold_burrow(EXAMPLE_BURROW)):
        initial_state = parse_burrow(text)
        print("Initial State:")
        print(initial_state)
        debug_print_path(organize(initial_state))


if __name__ == "__main__":
    main()
