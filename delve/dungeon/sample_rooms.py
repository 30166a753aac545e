"""Demonstration room catalog.

Used by ``run.py`` and ``scripts/diagnose_seeds.py``. The rooms carry no
content beyond their door layout; real games subclass ``Room`` with their
own descriptions, encounters and so on.
"""
from __future__ import annotations

from typing import Dict, List

from .rooms import Room


class Gatehouse(Room):
    DOORS = 2
    has_ahead = True


class Stairwell(Room):
    DOORS = 1


# Dead ends
class Armory(Room):
    DOORS = 1


class Crypt(Room):
    DOORS = 1


class Larder(Room):
    DOORS = 1


class Shrine(Room):
    DOORS = 1


class Cistern(Room):
    DOORS = 1


class Vault(Room):
    DOORS = 1


# Passages
class Corridor(Room):
    DOORS = 2
    has_left = True


class Gallery(Room):
    DOORS = 2
    has_right = True


class Bridge(Room):
    DOORS = 2
    has_ahead = True


class Kennel(Room):
    DOORS = 2
    has_ahead = True


# Hubs
class Crossroads(Room):
    DOORS = 3
    has_left = True
    has_right = True


class Library(Room):
    DOORS = 3
    has_left = True
    has_ahead = True


class Forge(Room):
    DOORS = 3
    has_right = True
    has_ahead = True


class GreatHall(Room):
    DOORS = 4
    has_left = True
    has_right = True
    has_ahead = True


class Catacomb(Room):
    DOORS = 4
    has_left = True
    has_right = True
    has_ahead = True


ENTRANCE_ROOM = Gatehouse
EXIT_ROOM = Stairwell

SAMPLE_CATALOG: List[type] = [
    Armory, Crypt, Larder, Shrine, Cistern, Vault,
    Corridor, Gallery, Bridge, Kennel,
    Crossroads, Library, Forge,
    GreatHall, Catacomb,
]

# Exactly one quota's worth per category; every blueprint is always used.
MINIMAL_CATALOG: List[type] = [
    Armory, Crypt, Larder, Shrine,
    Corridor, Gallery, Bridge,
    Crossroads, Library,
    GreatHall,
]

CATALOGS: Dict[str, List[type]] = {
    "sample": SAMPLE_CATALOG,
    "minimal": MINIMAL_CATALOG,
}
