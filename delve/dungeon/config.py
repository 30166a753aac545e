import os
from dataclasses import dataclass, field
from typing import Dict, Optional

from .errors import ConfigurationError

# Max number of rooms sampled per exit-count category.
ROOM_TYPE_LIMIT = {1: 4, 2: 3, 3: 2, 4: 1}

CATEGORIES = (1, 2, 3, 4)


@dataclass
class DungeonConfig:
    quotas: Dict[int, int] = field(default_factory=lambda: dict(ROOM_TYPE_LIMIT))
    seed: Optional[int] = None
    enable_metrics: bool = True

    @property
    def total_rooms(self) -> int:
        """Rooms in a finished dungeon: every quota plus entrance and exit."""
        return sum(self.quotas.values()) + 2

    def validate(self) -> None:
        """Reject quota tables the growth loop cannot fill exactly.

        The entrance opens one slot and every category-k room opens k-1 more
        while consuming one, so the table balances only when
        sum(q[k] * (k - 2)) == 0.
        """
        if sorted(self.quotas) != list(CATEGORIES):
            raise ConfigurationError(
                f"Quota table must cover categories 1-4, got {sorted(self.quotas)}", "quota"
            )
        for category, limit in self.quotas.items():
            if not isinstance(limit, int) or isinstance(limit, bool) or limit < 0:
                raise ConfigurationError(
                    f"Quota for category {category} must be a non-negative integer, got {limit!r}", "quota"
                )
        balance = sum(limit * (category - 2) for category, limit in self.quotas.items())
        if balance != 0:
            raise ConfigurationError(
                f"Quota table {self.quotas} is unbalanced (slot surplus {balance}); "
                "the exit room could not be placed last",
                "quota",
            )


_TRUTHY_OFF = {"0", "false", "no", ""}


def apply_env_overrides(config: DungeonConfig) -> DungeonConfig:
    """Fill ``config`` from DUNGEON_* environment variables.

    DUNGEON_SEED only applies when no seed was given explicitly;
    DUNGEON_ENABLE_GENERATION_METRICS always wins when present.
    """
    env_seed = os.environ.get("DUNGEON_SEED")
    if config.seed is None and env_seed:
        try:
            config.seed = int(env_seed)
        except ValueError:
            raise ConfigurationError(f"DUNGEON_SEED must be an integer, got {env_seed!r}", "seed")
    if "DUNGEON_ENABLE_GENERATION_METRICS" in os.environ:
        val = os.environ.get("DUNGEON_ENABLE_GENERATION_METRICS", "").lower()
        config.enable_metrics = val not in _TRUTHY_OFF
    return config


__all__ = ["DungeonConfig", "ROOM_TYPE_LIMIT", "CATEGORIES", "apply_env_overrides"]
