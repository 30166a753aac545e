"""Consumer-side structural checks for a generated dungeon.

The generator never calls these; they exist for tests, the diagnostics
script and any QA tooling that wants to confirm a dungeon is sound.
"""
from __future__ import annotations

from collections import Counter
from typing import Any, Dict, List, Optional, Sequence

from .directions import Relative
from .rooms import Room


def check_connections(rooms: Sequence[Room]) -> bool:
    """True when every room's occupied doors lead back to it."""
    return all(room.leads_back() for room in rooms)


def origin_issue(room: Room, is_entrance: bool) -> Optional[str]:
    """Describe what is wrong with ``room``'s ORIGIN door, if anything."""
    origins = [d for d, slot in room.doors.items() if slot.label is Relative.ORIGIN]
    if len(origins) != 1:
        return f"{len(origins)} origin doors"
    labels = Counter(slot.label for slot in room.doors.values())
    if any(labels[label] != 1 for label in Relative):
        return "labels not a permutation of origin/ahead/to_left/to_right"
    placer = room.slot(origins[0]).occupant
    if is_entrance:
        return "entrance origin door is occupied" if placer is not None else None
    if placer is None:
        return "origin door is empty"
    if placer.slot(origins[0].opposite()).occupant is not room:
        return f"origin points at {type(placer).__name__} which does not lead here"
    return None


def analyze(dungeon, quotas: Optional[Dict[int, int]] = None) -> Dict[str, Any]:
    """Collect invariant violations of ``dungeon`` (a Dungeon or list of rooms).

    Each key maps to a list of offending room indexes (empty when sound),
    except ``size`` which holds (expected, actual) on mismatch.
    """
    rooms: List[Room] = list(dungeon)
    if quotas is None:
        config = getattr(dungeon, "config", None)
        quotas = dict(config.quotas) if config is not None else None
    result: Dict[str, Any] = {
        "one_way_links": [],
        "bad_origins": [],
        "leaf_before_hub": [],
        "quota_overflow": [],
        "size": None,
    }
    first_hub = next((i for i, r in enumerate(rooms) if r.DOORS in (3, 4)), len(rooms))
    for i, room in enumerate(rooms):
        if not room.leads_back():
            result["one_way_links"].append(i)
        if origin_issue(room, is_entrance=(i == 0)):
            result["bad_origins"].append(i)
        # the final room is the exit, which is allowed anywhere after growth ends
        if room.DOORS == 1 and i < first_hub and i != len(rooms) - 1:
            result["leaf_before_hub"].append(i)
    if quotas is not None and rooms:
        # entrance and exit sit outside the quota table
        pooled = rooms[1:-1]
        per_category = Counter(room.DOORS for room in pooled)
        for category, limit in quotas.items():
            if per_category[category] > limit:
                result["quota_overflow"].extend(
                    i for i, room in enumerate(rooms[1:-1], start=1) if room.DOORS == category
                )
        expected = sum(quotas.values()) + 2
        if len(rooms) != expected:
            result["size"] = (expected, len(rooms))
    return result


def is_sound(report: Dict[str, Any]) -> bool:
    return all(not v for v in report.values())


__all__ = ["check_connections", "origin_issue", "analyze", "is_sound"]
