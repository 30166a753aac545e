"""Type pools and the per-room type-sampling policy.

Rooms are grouped by exit count ("category"): category 1 rooms are dead ends,
categories 3 and 4 are hubs. The policy decides which category each newly
opened door leads to:

  * no dead end is sampled until a hub has been placed;
  * a room may spawn at most ``DOORS - 2`` dead ends itself, so every
    branching room keeps at least one door leading onwards;
  * once only dead ends remain anywhere, that cap is lifted by one per pick
    so the leftovers can drain;
  * when every pool is empty the exit room fills the door, which by the
    quota balance happens exactly once, on the last door.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from .config import CATEGORIES
from .rooms import Room

Pools = Dict[int, List[type]]


def populate_types_and_shuffle(catalog: Sequence[type], quotas: Dict[int, int], rng) -> Pools:
    """Group ``catalog`` by category, shuffle each group and cut it to quota.

    The caller removes the dedicated entrance and exit blueprints first.
    """
    pools: Pools = {}
    for category in CATEGORIES:
        group = [blueprint for blueprint in catalog if blueprint.DOORS == category]
        rng.shuffle(group)
        pools[category] = group[: quotas[category]]
    return pools


def pool_shortfall(pools: Pools, quotas: Dict[int, int]) -> Dict[int, int]:
    """Return {category: missing} for every pool below its quota."""
    return {c: quotas[c] - len(pools[c]) for c in CATEGORIES if len(pools[c]) < quotas[c]}


def only_leaves_remain(pools: Pools) -> bool:
    return all(not pool for category, pool in pools.items() if category != 1)


def has_hub(rooms: Sequence[Room]) -> bool:
    return any(room.DOORS in (3, 4) for room in rooms)


def sample_rooms_for(
    origin_room: Room,
    pools: Pools,
    placed: Sequence[Room],
    exit_room: type,
    rng,
    metrics: Optional[Dict[str, Any]] = None,
) -> List[type]:
    """Pick blueprints for every outward door of ``origin_room``.

    All picks are drawn before any of them is placed, so the hub check only
    sees rooms already in ``placed``.
    """
    single_limit = origin_room.DOORS - 2
    sampled: List[type] = []
    hub_placed = has_hub(placed)

    for _ in range(origin_room.DOORS - 1):
        if only_leaves_remain(pools):
            single_limit += 1
            if metrics is not None and pools[1]:
                metrics['leaf_limit_lifts'] += 1

        permitted = [category for category in CATEGORIES if pools[category]]

        if 1 in permitted and (not hub_placed or single_limit < 1):
            permitted.remove(1)
            if metrics is not None:
                metrics['leaf_picks_blocked'] += 1

        category = rng.choice(permitted) if permitted else None

        if category == 1:
            single_limit -= 1

        if category is not None:
            sampled.append(pools[category].pop(0))
        else:
            sampled.append(exit_room)
    return sampled


__all__ = [
    "Pools",
    "populate_types_and_shuffle",
    "pool_shortfall",
    "only_leaves_remain",
    "has_hub",
    "sample_rooms_for",
]
