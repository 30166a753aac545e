"""Minimal structured logging helper.

Provides a lightweight wrapper around print() to emit key=value pairs with a
timestamp and level. Generation code logs discrete events (one line per
event) so the output stays easy to grep and parse.

Usage:
    from delve.logging_utils import get_logger
    log = get_logger("delve.dungeon")
    log.info(event="dungeon_generated", seed=42, rooms=12)

A dungeon logs many events for the same seed, so loggers can carry context:
    run_log = log.bind(seed=42)
    run_log.debug(event="room_attached", room="Forge")   # ... seed=42 ...

Bound fields come first on the line; a field passed at the call site wins
over a bound one of the same name. None values are dropped. Reserved keys:
level, ts.
"""

from __future__ import annotations

import json
import os
import sys
import time

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}


def _current_level() -> int:
    return LEVELS.get(os.getenv("DELVE_LOG_LEVEL", "info").lower(), 20)


def _json_mode() -> bool:
    return os.getenv("DELVE_LOG_JSON", "0") in ("1", "true", "TRUE", "yes", "on")


def _format(level: str, **fields):
    if _json_mode():
        rec = {k: v for k, v in fields.items() if v is not None}
        rec["level"] = level
        rec["ts"] = int(time.time())
        return json.dumps(rec, separators=(",", ":"), default=str)
    parts = [f"level={level}", f"ts={int(time.time())}"]
    for k, v in fields.items():
        if v is None:
            continue
        if isinstance(v, (int, float)):
            parts.append(f"{k}={v}")
        else:
            s = str(v).replace(" ", "_")
            parts.append(f"{k}={s}")
    return " ".join(parts)


class _Logger:
    def __init__(self, name: str | None = None, **bound):
        self.name = name or "delve"
        self.bound = bound

    def bind(self, **fields) -> "_Logger":
        """Return a logger for the same name that adds ``fields`` to every event."""
        return _Logger(self.name, **{**self.bound, **fields})

    def _log(self, lvl: str, **fields):
        if LEVELS[lvl] < _current_level():
            return
        fields = {**self.bound, **fields}
        if "logger" not in fields:
            fields["logger"] = self.name
        print(_format(lvl, **fields), file=sys.stdout if lvl != "error" else sys.stderr)

    def debug(self, **fields):
        self._log("debug", **fields)

    def info(self, **fields):
        self._log("info", **fields)

    def warn(self, **fields):
        self._log("warn", **fields)

    def error(self, **fields):
        self._log("error", **fields)


_LOGGER_CACHE = {}


def get_logger(name: str):
    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = _Logger(name)
    return _LOGGER_CACHE[name]


log = get_logger("delve")
