import importlib.util
import json
import os

import pytest

SCRIPT = os.path.join(os.path.dirname(__file__), "..", "scripts", "diagnose_seeds.py")


@pytest.fixture()
def diagnose():
    spec = importlib.util.spec_from_file_location("diagnose_seeds", SCRIPT)
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)
    return mod


def test_single_seed_report(diagnose):
    res = diagnose.run_for_seed(292372)
    assert res["ok"] is True
    assert res["rooms"] == 12
    assert set(res["issues"]) == {
        "one_way_links",
        "bad_origins",
        "leaf_before_hub",
        "quota_overflow",
        "size_mismatch",
        "exit_not_last",
    }


def test_main_prints_json_and_exits_zero(diagnose, capsys):
    assert diagnose.main(["1", "2", "3"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert [r["seed"] for r in data["results"]] == [1, 2, 3]
