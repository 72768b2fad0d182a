from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from roadcheck._io import DatasetLoadError
from roadcheck.ids import extract_sign_id, extract_topology_id

ERROR_MESSAGE_KEY = "Error Message"

SIGN_REQUIRED_FIELDS = ["id"]
TOPOLOGY_REQUIRED_FIELDS = ["id"]

STATUS_PASS = "pass"
STATUS_FAIL = "fail"
STATUS_INCONCLUSIVE = "inconclusive"


@dataclass(frozen=True)
class Violation:
    raw_message: str
    extracted_id: Optional[str] = None

    @staticmethod
    def from_feature(feature: Dict[str, Any], kind: str) -> "Violation":
        props = feature.get("properties") or {}
        msg = props.get(ERROR_MESSAGE_KEY)
        msg = msg if isinstance(msg, str) else ""
        extract = extract_sign_id if kind == "sign" else extract_topology_id
        return Violation(raw_message=msg, extracted_id=extract(msg))


@dataclass(frozen=True)
class ScoreEntry:
    score_type: str
    score: Optional[float]


@dataclass(frozen=True)
class Sign:
    id: str
    sign_type: Optional[str] = None
    gfr_group_name: Optional[str] = None
    simple_scores: Tuple[ScoreEntry, ...] = ()

    def score(self, score_type: str) -> Optional[ScoreEntry]:
        for s in self.simple_scores:
            if s.score_type == score_type:
                return s
        return None

    @staticmethod
    def from_feature(feature: Dict[str, Any]) -> "Sign":
        props = _properties(feature, SIGN_REQUIRED_FIELDS, "sign")
        confidence = props.get("confidence") or {}
        raw_scores = confidence.get("simpleScores") if isinstance(confidence, dict) else None
        scores: List[ScoreEntry] = []
        for item in raw_scores or []:
            if not isinstance(item, dict):
                continue
            value = _score_value(item.get("score"))
            scores.append(ScoreEntry(score_type=str(item.get("scoreType")), score=value))
        return Sign(
            id=str(props["id"]),
            sign_type=props.get("signType"),
            gfr_group_name=props.get("gfrGroupName"),
            simple_scores=tuple(scores),
        )


@dataclass(frozen=True)
class TopologySegment:
    id: str
    coordinates: Tuple[Tuple[float, float], ...] = ()
    functional_class: Tuple[int, ...] = ()
    access_characteristics: Optional[Tuple[Dict[str, Any], ...]] = None
    roads: Tuple[Any, ...] = ()

    def is_motorway(self, classes=(1, 2)) -> bool:
        return any(not isinstance(v, bool) and v in classes for v in self.functional_class)

    @staticmethod
    def from_feature(feature: Dict[str, Any]) -> "TopologySegment":
        props = _properties(feature, TOPOLOGY_REQUIRED_FIELDS, "topology")
        fc_values = []
        for fc in props.get("functionalClass") or []:
            if isinstance(fc, dict) and "value" in fc:
                fc_values.append(fc["value"])
        access = props.get("accessCharacteristics")
        return TopologySegment(
            id=str(props["id"]),
            coordinates=_coords_from_geometry(feature.get("geometry")),
            functional_class=tuple(fc_values),
            access_characteristics=tuple(access) if isinstance(access, list) else None,
            roads=tuple(props.get("roads") or ()),
        )


@dataclass
class Verdict:
    check: str
    entity_id: Optional[str]
    status: str
    reason: str
    lines: List[str] = field(default_factory=list)
    details: Dict[str, Any] = field(default_factory=dict)


def validate_required_fields(record: Dict[str, Any], required: List[str]) -> List[str]:
    missing = []
    for key in required:
        if record.get(key) in (None, ""):
            missing.append(key)
    return missing


def _properties(feature: Dict[str, Any], required: List[str], kind: str) -> Dict[str, Any]:
    props = feature.get("properties")
    if not isinstance(props, dict):
        raise DatasetLoadError(f"{kind} feature without properties")
    missing = validate_required_fields(props, required)
    if missing:
        raise DatasetLoadError(f"{kind} feature missing required fields: {missing}")
    return props


def _score_value(raw: Any) -> Optional[float]:
    # null, absent and non-numeric scores stay None
    if raw is None or isinstance(raw, bool):
        return None
    try:
        return float(raw)
    except (TypeError, ValueError):
        return None


def _coords_from_geometry(geom: Any) -> Tuple[Tuple[float, float], ...]:
    if not isinstance(geom, dict):
        return ()
    gtype = geom.get("type")
    coords = geom.get("coordinates") or []
    if gtype == "Point":
        coords = [coords] if coords else []
    elif gtype == "MultiLineString":
        coords = [p for part in coords for p in part]
    try:
        return tuple((float(p[0]), float(p[1])) for p in coords)
    except (TypeError, ValueError, IndexError) as e:
        raise DatasetLoadError(f"malformed {gtype} coordinates: {e}") from e


def example_sign_feature() -> Dict[str, Any]:
    return {
        "type": "Feature",
        "geometry": {"type": "Point", "coordinates": [13.3889, 52.5170]},
        "properties": {
            "id": "urn:here::here:signs:1234567",
            "signType": "MOTORWAY",
            "gfrGroupName": "Motorway",
            "confidence": {
                "simpleScores": [
                    {"scoreType": "EXISTENCE", "score": 0.9},
                    {"scoreType": "CLASSIFICATION", "score": 0.8},
                ]
            },
        },
    }


def example_topology_feature() -> Dict[str, Any]:
    return {
        "type": "Feature",
        "geometry": {"type": "LineString", "coordinates": [[13.3889, 52.5170], [13.3895, 52.5172]]},
        "properties": {
            "id": "urn:here::here:Topology:107037225",
            "functionalClass": [{"value": 3}],
            "accessCharacteristics": [
                {
                    "auto": True,
                    "bicycle": False,
                    "bus": True,
                    "carpool": True,
                    "delivery": True,
                    "emergencyVehicle": True,
                    "motorcycle": True,
                    "pedestrian": False,
                    "taxi": True,
                    "truck": True,
                    "throughTraffic": True,
                }
            ],
            "roads": [{"id": "urn:here::here:Road:88412"}],
        },
    }
