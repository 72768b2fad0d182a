"""Shared GeoJSON feature factories."""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import pytest

from roadcheck.geom import EARTH_RADIUS_M
from roadcheck.rules import RuleContext
from roadcheck.utils.config_resolve import resolve_config

SIGN_PREFIX = "urn:here::here:signs:"
TOPO_PREFIX = "urn:here::here:Topology:"

ALL_MODES = [
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
]


def metres_to_lon_deg_at_equator(metres: float) -> float:
    return math.degrees(metres / EARTH_RADIUS_M)


@pytest.fixture
def ctx() -> RuleContext:
    return RuleContext(config=resolve_config({}))


@pytest.fixture
def sign_feature() -> Callable[..., Dict[str, Any]]:
    def _make(
        num: int = 1001,
        sign_type: Optional[str] = "MOTORWAY",
        existence: Optional[float] = 0.9,
        classification: Optional[float] = 0.8,
        gfr: Optional[str] = "Motorway",
    ) -> Dict[str, Any]:
        scores = []
        if existence is not None:
            scores.append({"scoreType": "EXISTENCE", "score": existence})
        if classification is not None:
            scores.append({"scoreType": "CLASSIFICATION", "score": classification})
        return {
            "type": "Feature",
            "geometry": {"type": "Point", "coordinates": [8.68, 50.11]},
            "properties": {
                "id": f"{SIGN_PREFIX}{num}",
                "signType": sign_type,
                "gfrGroupName": gfr,
                "confidence": {"simpleScores": scores},
            },
        }

    return _make


@pytest.fixture
def topology_feature() -> Callable[..., Dict[str, Any]]:
    def _make(
        name: str,
        coords: List[List[float]],
        fc: Optional[List[int]] = None,
        roads: Optional[List[Any]] = None,
        access: Optional[List[Dict[str, Any]]] = None,
    ) -> Dict[str, Any]:
        props: Dict[str, Any] = {"id": f"{TOPO_PREFIX}{name}"}
        if fc is not None:
            props["functionalClass"] = [{"value": v} for v in fc]
        if roads is not None:
            props["roads"] = roads
        if access is not None:
            props["accessCharacteristics"] = access
        return {
            "type": "Feature",
            "geometry": {"type": "LineString", "coordinates": coords},
            "properties": props,
        }

    return _make


@pytest.fixture
def violation_feature() -> Callable[[str], Dict[str, Any]]:
    def _make(message: str) -> Dict[str, Any]:
        return {"type": "Feature", "geometry": None, "properties": {"Error Message": message}}

    return _make


@pytest.fixture
def write_fc(tmp_path: Path) -> Callable[[str, List[Dict[str, Any]]], Path]:
    def _write(name: str, features: List[Dict[str, Any]]) -> Path:
        p = tmp_path / name
        p.write_text(json.dumps({"type": "FeatureCollection", "features": features}), encoding="utf-8")
        return p

    return _write


def access_record(allowed: int) -> Dict[str, Any]:
    rec: Dict[str, Any] = {k: (i < allowed) for i, k in enumerate(ALL_MODES)}
    rec["pedestrian"] = True
    return rec
