from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml


DEFAULTS: Dict[str, Any] = {
    "VALIDATIONS_PATH": "23599610_validations.geojson",
    "SIGNS_PATH": "23599610_signs.geojson",
    "TOPOLOGY_PATH": "23599610_full_topology_data.geojson",
    "SCORE_THRESHOLD": 0.75,
    "EXPECTED_SIGN_TYPE": "MOTORWAY",
    "EXPECTED_GFR_GROUP": "Motorway",
    "PROXIMITY_RADIUS_M": 20.0,
    # functionalClass values treated as motorway-grade
    "MOTORWAY_CLASSES": [1, 2],
    "ACCESS_MODE_KEYS": [
        "auto",
        "bicycle",
        "bus",
        "carpool",
        "delivery",
        "emergencyVehicle",
        "motorcycle",
        "taxi",
        "truck",
        "throughTraffic",
    ],
    "PEDESTRIAN_DISABLE_MIN": 8,
}


def load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return dict(data)


def resolve_config(base_cfg: Dict[str, Any]) -> Dict[str, Any]:
    cfg = dict(base_cfg)
    for k, v in DEFAULTS.items():
        if cfg.get(k) is None:
            cfg[k] = v
    return cfg


__all__ = [
    "DEFAULTS",
    "load_yaml",
    "resolve_config",
]
