"""Public dungeon package interface."""

from .config import ROOM_TYPE_LIMIT, DungeonConfig  # noqa: F401
from .connector import assign_origin, attach_child, bootstrap  # noqa: F401
from .directions import DIRECTIONS, ROTATIONS, Direction, Relative  # noqa: F401
from .errors import (  # noqa: F401
    AlreadyOrientedError,
    ConfigurationError,
    DuplicateRoomError,
    DungeonError,
    NoFreeSlotError,
    OrphanOrientationError,
    StructuralError,
    UnorientedRoomError,
)
from .generator import Dungeon, check_catalog, generate  # noqa: F401
from .rooms import DoorSlot, Room, conforms, contract_violation  # noqa: F401
from .validation import analyze, check_connections, is_sound  # noqa: F401

__all__ = [
    "Dungeon",
    "DungeonConfig",
    "ROOM_TYPE_LIMIT",
    "generate",
    "check_catalog",
    "Room",
    "DoorSlot",
    "conforms",
    "contract_violation",
    "Direction",
    "Relative",
    "DIRECTIONS",
    "ROTATIONS",
    "bootstrap",
    "attach_child",
    "assign_origin",
    "analyze",
    "check_connections",
    "is_sound",
    "DungeonError",
    "ConfigurationError",
    "StructuralError",
    "DuplicateRoomError",
    "NoFreeSlotError",
    "OrphanOrientationError",
    "AlreadyOrientedError",
    "UnorientedRoomError",
]
