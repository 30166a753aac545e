"""Dungeon builder.

Generation phases:
    * validate  - entrance/exit shape, duplicate or malformed blueprints, quota table.
    * partition - group the catalog by exit count, shuffle, cut each group to its quota.
    * grow      - orient the entrance, then walk the placed rooms in FIFO order; every
                  room with outward doors samples that many blueprints and attaches them.

Design invariants enforced by code & tests:
    * len(dungeon) == sum(quotas) + 2; the entrance is first and the exit is last.
    * Every occupied door is mirrored by the occupant through the opposite direction.
    * Every room but the entrance has exactly one ORIGIN door, occupied by its placer.

All state (pools, queue, rng, metrics) lives on the Dungeon instance, so
independent dungeons never share anything.

Public contract:
    Dungeon(catalog, entrance_room, exit_room, config=None, *, seed=None, rng=None)
    Attributes: rooms, config, seed, metrics, entrance, exit
    Sequence protocol over rooms (len, iteration, indexing).
"""
from __future__ import annotations

import random
import time
from dataclasses import replace
from typing import Any, Dict, Iterator, List, Optional, Sequence

from ..logging_utils import get_logger
from .config import DungeonConfig, apply_env_overrides
from .connector import attach_child, bootstrap
from .errors import ConfigurationError, DungeonError
from .metrics import init_metrics
from .rooms import Room, contract_violation
from .sampling import Pools, pool_shortfall, populate_types_and_shuffle, sample_rooms_for

log = get_logger("delve.dungeon")


def check_catalog(catalog: Sequence[type], entrance_room: type, exit_room: type) -> None:
    """Raise ConfigurationError unless the blueprints can be used for generation."""
    for role, blueprint in (("Entrance", entrance_room), ("Exit", exit_room)):
        problem = contract_violation(blueprint)
        if problem:
            raise ConfigurationError(f"{role} room invalid: {problem}", "contract")
    if not (entrance_room.DOORS == 2 and exit_room.DOORS == 1):
        raise ConfigurationError(
            "Entrance room must have two doors and exit must have one door!", "entrance_exit"
        )
    # Contract first: only Room subclasses are known to be hashable
    for blueprint in catalog:
        problem = contract_violation(blueprint)
        if problem:
            raise ConfigurationError(problem, "contract")
    if len(set(catalog)) != len(catalog):
        raise ConfigurationError("No duplicate classes allowed!", "duplicate")


class Dungeon:
    def __init__(
        self,
        catalog: Sequence[type],
        entrance_room: type,
        exit_room: type,
        config: DungeonConfig | None = None,
        *,
        seed: int | None = None,
        rng=None,
    ):
        # Copy so a shared config object is never mutated by a dungeon
        config = DungeonConfig() if config is None else replace(config, quotas=dict(config.quotas))
        if seed is not None:
            config.seed = seed
        self.config = apply_env_overrides(config)
        if self.config.seed is None:
            self.config.seed = random.randint(0, 2**31 - 1)
        self.seed = self.config.seed
        self._logger = log.bind(seed=self.seed)
        # Local RNG so external random usage does not affect generation
        self._rng = rng if rng is not None else random.Random(self.seed)
        self.entrance_room = entrance_room
        self.exit_room = exit_room
        self.rooms: List[Room] = []
        self.metrics: Dict[str, Any] = init_metrics() if self.config.enable_metrics else {}
        try:
            self._run_pipeline(list(catalog))
        except DungeonError as exc:
            self._logger.error(
                event="generation_failed",
                error=type(exc).__name__,
                code=getattr(exc, "code", None),
                detail=str(exc),
            )
            raise

    # ------------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self.rooms)

    def __iter__(self) -> Iterator[Room]:
        return iter(self.rooms)

    def __getitem__(self, index):
        return self.rooms[index]

    @property
    def entrance(self) -> Optional[Room]:
        return self.rooms[0] if self.rooms else None

    @property
    def exit(self) -> Optional[Room]:
        return self.rooms[-1] if self.rooms else None

    # ------------------------------------------------------------------
    # Generation pipeline
    # ------------------------------------------------------------------
    def _run_pipeline(self, catalog: List[type]):
        if self.config.enable_metrics:
            start = time.perf_counter()
            phase_times = self.metrics['phase_ms']

            def _phase(label, fn, *a, **k):
                ps = time.perf_counter(); r = fn(*a, **k); pe = time.perf_counter()
                phase_times[label] = int((pe - ps) * 1000)
                return r
        else:
            def _phase(label, fn, *a, **k):
                return fn(*a, **k)

        _phase('validate', self._validate, catalog)
        pools = _phase('partition', self._partition, catalog)
        _phase('grow', self._grow, pools)

        if self.config.enable_metrics:
            self._collect_counts()
            self.metrics['runtime_ms'] = round((time.perf_counter() - start) * 1000, 3)
        self._logger.info(
            event="dungeon_generated",
            rooms=len(self.rooms),
            exit=type(self.rooms[-1]).__name__,
        )

    def _validate(self, catalog: List[type]):
        check_catalog(catalog, self.entrance_room, self.exit_room)
        self.config.validate()

    def _partition(self, catalog: List[type]) -> Pools:
        candidates = [b for b in catalog if b is not self.entrance_room and b is not self.exit_room]
        pools = populate_types_and_shuffle(candidates, self.config.quotas, self._rng)
        missing = pool_shortfall(pools, self.config.quotas)
        if missing:
            detail = ", ".join(
                f"category {c} short by {n}" for c, n in sorted(missing.items())
            )
            raise ConfigurationError(
                f"Number of rooms for generating must be the same as room type limit ({detail})",
                "diversity",
            )
        return pools

    def _grow(self, pools: Pools):
        entrance = self.entrance_room()
        bootstrap(entrance, self._rng)
        self.rooms = [entrance]

        index = 0
        while index < len(self.rooms):
            current = self.rooms[index]
            index += 1
            if current.DOORS == 1:
                continue
            sampled = sample_rooms_for(
                current, pools, self.rooms, self.exit_room, self._rng,
                self.metrics if self.config.enable_metrics else None,
            )
            self._logger.debug(
                event="rooms_sampled",
                room=type(current).__name__,
                picks=",".join(b.__name__ for b in sampled),
            )
            for blueprint in sampled:
                child = attach_child(current, blueprint())
                self.rooms.append(child)
                self._logger.debug(
                    event="room_attached",
                    room=blueprint.__name__,
                    parent=type(current).__name__,
                    crest=_crest_between(current, child),
                )

    def _collect_counts(self):
        self.metrics['rooms_placed'] = len(self.rooms)
        for room in self.rooms:
            self.metrics[f'rooms_category_{room.DOORS}'] += 1
        for i, room in enumerate(self.rooms):
            if type(room) is self.exit_room:
                self.metrics['exit_index'] = i


def _crest_between(room: Room, child: Room) -> Optional[str]:
    for direction, occupant in room.occupied_doors():
        if occupant is child:
            return direction.value
    return None


def generate(
    catalog: Sequence[type],
    entrance_room: type,
    exit_room: type,
    config: DungeonConfig | None = None,
    *,
    seed: int | None = None,
    rng=None,
) -> Dungeon:
    """Build and return a fully connected Dungeon."""
    return Dungeon(catalog, entrance_room, exit_room, config, seed=seed, rng=rng)


__all__ = ["Dungeon", "generate", "check_catalog"]
