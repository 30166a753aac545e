"""Absolute and relative door directions.

Rooms sit on an abstract compass: each has four absolute doors (east, south,
west, north) in a fixed cyclic order. Once a room is entered it also gets an
internal orientation where one absolute door is the ORIGIN (the way back) and
the other three are AHEAD, TO_RIGHT and TO_LEFT as seen by someone standing
with their back to the origin door. A room that always has a door "on the
left" keeps it there whatever its external rotation.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict


class Direction(Enum):
    """Cardinal direction of a door, in clockwise order."""
    EAST = "east"
    SOUTH = "south"
    WEST = "west"
    NORTH = "north"

    def opposite(self) -> 'Direction':
        """Return the direction a neighbour uses to lead back here."""
        return _ORDER[(_ORDER.index(self) + 2) % 4]

    def clockwise(self) -> 'Direction':
        return _ORDER[(_ORDER.index(self) + 1) % 4]

    def counterclockwise(self) -> 'Direction':
        return _ORDER[(_ORDER.index(self) - 1) % 4]


class Relative(Enum):
    """Internal orientation label of a door."""
    ORIGIN = "origin"
    AHEAD = "ahead"
    TO_LEFT = "to_left"
    TO_RIGHT = "to_right"


_ORDER = (Direction.EAST, Direction.SOUTH, Direction.WEST, Direction.NORTH)

DIRECTIONS = _ORDER

# Labels a room receives when it is entered through the keyed crest. The
# crest itself always becomes AHEAD and its opposite the ORIGIN.
ROTATIONS: Dict[Direction, Dict[Direction, Relative]] = {
    Direction.EAST: {
        Direction.EAST: Relative.AHEAD,
        Direction.SOUTH: Relative.TO_RIGHT,
        Direction.WEST: Relative.ORIGIN,
        Direction.NORTH: Relative.TO_LEFT,
    },
    Direction.SOUTH: {
        Direction.EAST: Relative.TO_LEFT,
        Direction.SOUTH: Relative.AHEAD,
        Direction.WEST: Relative.TO_RIGHT,
        Direction.NORTH: Relative.ORIGIN,
    },
    Direction.WEST: {
        Direction.EAST: Relative.ORIGIN,
        Direction.SOUTH: Relative.TO_LEFT,
        Direction.WEST: Relative.AHEAD,
        Direction.NORTH: Relative.TO_RIGHT,
    },
    Direction.NORTH: {
        Direction.EAST: Relative.TO_RIGHT,
        Direction.SOUTH: Relative.ORIGIN,
        Direction.WEST: Relative.TO_LEFT,
        Direction.NORTH: Relative.AHEAD,
    },
}


def orientation_for(crest: Direction) -> Dict[Direction, Relative]:
    """Return a fresh copy of the label mapping for an entry ``crest``."""
    return dict(ROTATIONS[crest])


__all__ = ["Direction", "Relative", "DIRECTIONS", "ROTATIONS", "orientation_for"]
