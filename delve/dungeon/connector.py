"""Connect rooms so that every link goes both ways.

Each room has four absolute doors. Leaving a room through its east door
means entering the next one through its west door, and that door becomes the
next room's ORIGIN. The remaining labels follow from the same crest (see
``ROTATIONS``), so internal orientation never depends on external rotation.

Only the generator should call these; ``attach_child`` is the single entry
point for linking a placed room to a fresh one.
"""
from __future__ import annotations

from typing import Optional

from .directions import DIRECTIONS, Direction, Relative, orientation_for
from .errors import (
    AlreadyOrientedError,
    DuplicateRoomError,
    NoFreeSlotError,
    OrphanOrientationError,
    UnorientedRoomError,
)
from .rooms import Room


def bootstrap(room: Room, rng) -> Room:
    """Orient the entrance, which has no predecessor.

    A random direction serves as a synthetic crest; the slot opposite it is
    labelled ORIGIN but stays unoccupied.
    """
    if room.is_oriented:
        raise AlreadyOrientedError(f"{type(room).__name__} is already oriented; bootstrap applies only to the entrance")
    crest = rng.choice(DIRECTIONS)
    return assign_origin(room, None, crest)


def attach_child(room: Room, target: Room) -> Room:
    """Link ``target`` into the first free outward door of ``room``.

    Doors are tried in left, right, ahead order. Returns ``target`` with its
    orientation assigned and its origin door pointing back at ``room``.
    """
    if not room.is_oriented:
        raise UnorientedRoomError(f"{type(room).__name__} must be oriented before rooms are attached to it")
    if any(type(occupant) is type(target) for occupant in room.neighbors()):
        raise DuplicateRoomError(
            f"{type(room).__name__} already leads to a {type(target).__name__}; duplicate rooms not allowed"
        )
    crest = _claim_free_door(room, target)
    return assign_origin(target, room, crest)


def assign_origin(target: Room, origin_room: Optional[Room], crest: Optional[Direction]) -> Room:
    """Orient ``target`` as entered through ``crest`` from ``origin_room``.

    ``origin_room`` must already hold ``target`` behind ``crest``; passing a
    room without the crest would leave a one-way link.
    """
    if crest is None:
        if origin_room is not None:
            raise OrphanOrientationError(
                f"{type(origin_room).__name__} should lead to {type(target).__name__} "
                f"before {type(target).__name__} can lead back"
            )
        raise OrphanOrientationError(f"No crest given to orient {type(target).__name__}")
    if target.is_oriented:
        raise AlreadyOrientedError(f"{type(target).__name__} is already oriented")
    for direction, label in orientation_for(crest).items():
        slot = target.slot(direction)
        slot.label = label
        if label is Relative.ORIGIN:
            slot.occupant = origin_room
    return target


def _claim_free_door(room: Room, target: Room) -> Direction:
    for label in room.exit_labels():
        crest = room.crest_for(label)
        slot = room.slot(crest)
        if slot.occupant is None:
            slot.occupant = target
            return crest
    raise NoFreeSlotError(f"All doors for room {type(room).__name__} occupied. {type(target).__name__} not added.")


__all__ = ["bootstrap", "attach_child", "assign_origin"]
