"""Exception hierarchy for dungeon generation.

Configuration errors are raised before any room is instantiated; structural
errors surface while rooms are being connected and indicate a broken
blueprint contract or a misuse of the connector.
"""
from __future__ import annotations


class DungeonError(Exception):
    """Base class for every generation failure."""


class ConfigurationError(DungeonError):
    def __init__(self, message: str, code: str):
        super().__init__(message)
        self.message = message
        self.code = code


class StructuralError(DungeonError):
    pass


class DuplicateRoomError(StructuralError):
    pass


class NoFreeSlotError(StructuralError):
    pass


class OrphanOrientationError(StructuralError):
    pass


class AlreadyOrientedError(StructuralError):
    pass


class UnorientedRoomError(StructuralError):
    pass


__all__ = [
    "DungeonError",
    "ConfigurationError",
    "StructuralError",
    "DuplicateRoomError",
    "NoFreeSlotError",
    "OrphanOrientationError",
    "AlreadyOrientedError",
    "UnorientedRoomError",
]
