"""Room blueprint contract.

A blueprint is any ``Room`` subclass declaring:

    DOORS       exit count, 1..4
    has_left    door to the left of someone entering through the origin
    has_right   door to the right
    has_ahead   door straight ahead

The number of true flags must equal ``DOORS - 1``; the remaining door is
the origin (the way back). The generator never inspects a blueprint beyond
these four attributes, so concrete rooms are free to carry any content.

Example:

    class Crypt(Room):
        DOORS = 3
        has_left = True
        has_ahead = True
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

from .directions import DIRECTIONS, Direction, Relative


@dataclass
class DoorSlot:
    label: Optional[Relative] = None
    occupant: Optional["Room"] = None


class Room:
    DOORS = 4
    has_left = False
    has_right = False
    has_ahead = False

    def __init__(self):
        self.doors: Dict[Direction, DoorSlot] = {d: DoorSlot() for d in DIRECTIONS}

    def __repr__(self) -> str:
        return f"<{type(self).__name__} doors={self.DOORS}>"

    @property
    def category(self) -> int:
        return self.DOORS

    @property
    def is_oriented(self) -> bool:
        return all(slot.label is not None for slot in self.doors.values())

    def slot(self, direction: Direction) -> DoorSlot:
        return self.doors[direction]

    def crest_for(self, label: Relative) -> Optional[Direction]:
        """Return the absolute direction carrying ``label`` (None if unoriented)."""
        for direction, slot in self.doors.items():
            if slot.label is label:
                return direction
        return None

    @property
    def origin(self) -> Optional["Room"]:
        """Room this one was entered from; None for the entrance."""
        crest = self.crest_for(Relative.ORIGIN)
        return self.doors[crest].occupant if crest is not None else None

    def exit_labels(self) -> List[Relative]:
        """Outward relative doors in connection priority order."""
        labels = []
        if self.has_left:
            labels.append(Relative.TO_LEFT)
        if self.has_right:
            labels.append(Relative.TO_RIGHT)
        if self.has_ahead:
            labels.append(Relative.AHEAD)
        return labels

    def occupied_doors(self) -> Iterator[Tuple[Direction, "Room"]]:
        for direction, slot in self.doors.items():
            if slot.occupant is not None:
                yield direction, slot.occupant

    def neighbors(self) -> List["Room"]:
        return [room for _, room in self.occupied_doors()]

    def free_exits(self) -> List[Direction]:
        """Flagged outward doors still waiting for a room."""
        free = []
        for label in self.exit_labels():
            crest = self.crest_for(label)
            if crest is not None and self.doors[crest].occupant is None:
                free.append(crest)
        return free

    def leads_back(self) -> bool:
        """True when every occupied door is mirrored by its occupant."""
        for direction, room in self.occupied_doors():
            if room.doors[direction.opposite()].occupant is not self:
                return False
        return True


def contract_violation(blueprint) -> Optional[str]:
    """Describe why ``blueprint`` cannot be placed, or None when it conforms."""
    if not isinstance(blueprint, type) or not issubclass(blueprint, Room):
        return f"{blueprint!r} is not a Room subclass"
    doors = getattr(blueprint, "DOORS", None)
    if not isinstance(doors, int) or isinstance(doors, bool) or not 1 <= doors <= 4:
        return f"{blueprint.__name__}.DOORS must be an integer between 1 and 4, got {doors!r}"
    flags = (blueprint.has_left, blueprint.has_right, blueprint.has_ahead)
    if not all(isinstance(flag, bool) for flag in flags):
        return f"{blueprint.__name__} door flags must be booleans"
    if sum(flags) != doors - 1:
        return (
            f"{blueprint.__name__} declares {doors} doors but {sum(flags)} outward flags "
            f"(expected {doors - 1})"
        )
    return None


def conforms(blueprint) -> bool:
    return contract_violation(blueprint) is None


__all__ = ["Room", "DoorSlot", "conforms", "contract_violation"]
