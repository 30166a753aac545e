import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from tests.dungeon_test_utils import EXACT_CATALOG, ScriptedRng  # noqa: E402


def pytest_configure(config):  # register custom marker
    config.addinivalue_line("markers", "seed_sweep: generates many dungeons across a seed range")


@pytest.fixture(autouse=True)
def _clean_dungeon_env(monkeypatch):
    """Keep DUNGEON_* / DELVE_* variables from the outer shell out of tests."""
    for key in list(os.environ):
        if key.startswith("DUNGEON_") or key.startswith("DELVE_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture()
def exact_catalog():
    return list(EXACT_CATALOG)


@pytest.fixture()
def first_pick_rng():
    """Rng that never shuffles and always takes the first candidate."""
    return ScriptedRng()
