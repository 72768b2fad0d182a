from __future__ import annotations

from roadcheck._io import DatasetLoadError
from roadcheck.geom import EmptyGeometryError, centroid, haversine_distance
from roadcheck.ids import extract_sign_id, extract_topology_id
from roadcheck.resolver import EntityIndex, find, find_by_id
from roadcheck.schema import ScoreEntry, Sign, TopologySegment, Verdict, Violation

__version__ = "0.1.0"

__all__ = [
    "DatasetLoadError",
    "EmptyGeometryError",
    "EntityIndex",
    "ScoreEntry",
    "Sign",
    "TopologySegment",
    "Verdict",
    "Violation",
    "centroid",
    "extract_sign_id",
    "extract_topology_id",
    "find",
    "find_by_id",
    "haversine_distance",
]
