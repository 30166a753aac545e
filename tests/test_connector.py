import random

import pytest

from delve.dungeon import (
    AlreadyOrientedError,
    Direction,
    DuplicateRoomError,
    NoFreeSlotError,
    OrphanOrientationError,
    Relative,
    UnorientedRoomError,
    assign_origin,
    attach_child,
    bootstrap,
)

from tests.dungeon_test_utils import (
    R11,
    R12,
    R13,
    R21,
    R22,
    R31,
    R4,
    EntranceRoom,
    ScriptedRng,
    origin_doors,
    oriented,
)


def test_bootstrap_orients_with_empty_origin():
    room = bootstrap(EntranceRoom(), ScriptedRng([Direction.SOUTH]))
    assert room.is_oriented
    assert room.doors[Direction.SOUTH].label is Relative.AHEAD
    assert room.doors[Direction.NORTH].label is Relative.ORIGIN
    assert room.doors[Direction.WEST].label is Relative.TO_RIGHT
    assert room.doors[Direction.EAST].label is Relative.TO_LEFT
    assert all(slot.occupant is None for slot in room.doors.values())


def test_bootstrap_direction_is_drawn_from_rng():
    seen = {bootstrap(EntranceRoom(), random.Random(s)).crest_for(Relative.AHEAD) for s in range(200)}
    assert seen == set(Direction)


def test_bootstrap_twice_fails():
    room = bootstrap(EntranceRoom(), ScriptedRng())
    with pytest.raises(AlreadyOrientedError):
        bootstrap(room, ScriptedRng())


def test_attach_child_links_both_ways():
    parent = bootstrap(R31(), ScriptedRng([Direction.EAST]))
    child = attach_child(parent, R11())
    # left of a room entered heading east is north
    assert parent.doors[Direction.NORTH].occupant is child
    assert child.doors[Direction.SOUTH].label is Relative.ORIGIN
    assert child.doors[Direction.SOUTH].occupant is parent
    assert child.doors[Direction.NORTH].label is Relative.AHEAD
    assert child.origin is parent
    assert parent.leads_back() and child.leads_back()


def test_attach_child_fills_left_right_ahead_in_order():
    hub = oriented(R4, Direction.WEST)
    first = attach_child(hub, R11())
    second = attach_child(hub, R12())
    third = attach_child(hub, R13())
    assert hub.doors[Direction.SOUTH].occupant is first
    assert hub.doors[Direction.NORTH].occupant is second
    assert hub.doors[Direction.WEST].occupant is third
    assert [origin_doors(r) for r in (first, second, third)] == [
        [Direction.NORTH],
        [Direction.SOUTH],
        [Direction.EAST],
    ]


def test_adding_one_room_too_much():
    room1 = bootstrap(R21(), ScriptedRng())
    attach_child(room1, R12())
    with pytest.raises(NoFreeSlotError):
        attach_child(room1, R13())


def test_adding_duplicate_rooms():
    room1 = bootstrap(R31(), ScriptedRng())
    room2 = R11()
    attach_child(room1, room2)
    with pytest.raises(DuplicateRoomError):
        attach_child(room1, room2)
    with pytest.raises(DuplicateRoomError):
        attach_child(room1, R11())


def test_duplicate_check_includes_origin_room():
    parent = bootstrap(R31(), ScriptedRng())
    child = attach_child(parent, R22())
    with pytest.raises(DuplicateRoomError):
        attach_child(child, R31())


def test_attach_to_unoriented_room_fails():
    with pytest.raises(UnorientedRoomError):
        attach_child(R31(), R11())


def test_assign_origin_requires_crest():
    parent = oriented(R31)
    with pytest.raises(OrphanOrientationError):
        assign_origin(R11(), parent, None)
    with pytest.raises(OrphanOrientationError):
        assign_origin(R11(), None, None)


def test_assign_origin_only_once():
    room = assign_origin(R11(), oriented(R31), Direction.SOUTH)
    with pytest.raises(AlreadyOrientedError):
        assign_origin(room, None, Direction.EAST)


@pytest.mark.parametrize("crest", list(Direction))
def test_every_crest_gives_one_of_each_label(crest):
    room = assign_origin(R4(), None, crest)
    labels = sorted(slot.label.value for slot in room.doors.values())
    assert labels == sorted(label.value for label in Relative)
