from delve.dungeon import Dungeon, DungeonConfig

from tests.dungeon_test_utils import WIDE_CATALOG, EntranceRoom, ExitRoom, names


def _signature(d):
    return [
        (type(r).__name__, tuple((dir_.value, s.label.value) for dir_, s in r.doors.items()))
        for r in d
    ]


def test_same_seed_same_dungeon():
    runs = [Dungeon(WIDE_CATALOG, EntranceRoom, ExitRoom, seed=314159) for _ in range(3)]
    signatures = {tuple(_signature(d)) for d in runs}
    assert len(signatures) == 1, "Generation nondeterministic for fixed seed"


def test_different_seeds_vary():
    orders = {tuple(names(Dungeon(WIDE_CATALOG, EntranceRoom, ExitRoom, seed=s))) for s in range(20)}
    assert len(orders) > 1


def test_global_random_state_does_not_leak():
    import random

    random.seed(1)
    a = names(Dungeon(WIDE_CATALOG, EntranceRoom, ExitRoom, seed=77))
    random.seed(2)
    b = names(Dungeon(WIDE_CATALOG, EntranceRoom, ExitRoom, seed=77))
    assert a == b


def test_env_seed_used_when_none_given(monkeypatch):
    monkeypatch.setenv("DUNGEON_SEED", "4242")
    d = Dungeon(WIDE_CATALOG, EntranceRoom, ExitRoom)
    assert d.seed == 4242
    assert names(d) == names(Dungeon(WIDE_CATALOG, EntranceRoom, ExitRoom, seed=4242))


def test_explicit_seed_beats_env(monkeypatch):
    monkeypatch.setenv("DUNGEON_SEED", "4242")
    assert Dungeon(WIDE_CATALOG, EntranceRoom, ExitRoom, DungeonConfig(seed=5)).seed == 5
    assert Dungeon(WIDE_CATALOG, EntranceRoom, ExitRoom, seed=6).seed == 6


def test_metrics_flag_from_env(monkeypatch):
    monkeypatch.setenv("DUNGEON_ENABLE_GENERATION_METRICS", "0")
    assert Dungeon(WIDE_CATALOG, EntranceRoom, ExitRoom, seed=1).metrics == {}
    monkeypatch.setenv("DUNGEON_ENABLE_GENERATION_METRICS", "yes")
    d = Dungeon(WIDE_CATALOG, EntranceRoom, ExitRoom, DungeonConfig(enable_metrics=False), seed=1)
    assert d.metrics['rooms_placed'] == 12


def test_random_seed_recorded_when_absent():
    d = Dungeon(WIDE_CATALOG, EntranceRoom, ExitRoom)
    assert isinstance(d.seed, int)
    assert d.config.seed == d.seed
