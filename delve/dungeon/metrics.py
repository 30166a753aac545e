from typing import Any, Dict


def init_metrics() -> Dict[str, Any]:
    return {
        'rooms_placed': 0,
        'rooms_category_1': 0,
        'rooms_category_2': 0,
        'rooms_category_3': 0,
        'rooms_category_4': 0,
        'leaf_limit_lifts': 0,
        'leaf_picks_blocked': 0,
        'exit_index': -1,
        'runtime_ms': 0.0,
        'phase_ms': {},
    }
