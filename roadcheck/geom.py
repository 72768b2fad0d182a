from __future__ import annotations
from typing import Sequence, Tuple, Union

import numpy as np
from shapely.geometry import MultiPoint

EARTH_RADIUS_M = 6371000.0

LonLat = Tuple[float, float]


class EmptyGeometryError(ValueError):
    pass


def centroid(coords: Sequence[Sequence[float]]) -> LonLat:
    """Vertex mean of [lon, lat] pairs.

    This is deliberately not the length-weighted centroid of the line; every
    vertex counts once.
    """
    if coords is None or len(coords) == 0:
        raise EmptyGeometryError("centroid of an empty coordinate sequence is undefined")
    c = MultiPoint([(float(p[0]), float(p[1])) for p in coords]).centroid
    return (c.x, c.y)


def haversine_distance(p1, p2) -> Union[float, np.ndarray]:
    """Great-circle distance in metres between [lon, lat] points.

    ``p2`` may be a single point or an (N, 2) array; the result follows its shape.
    """
    a1 = np.asarray(p1, dtype=np.float64)
    a2 = np.asarray(p2, dtype=np.float64)
    lon1, lat1 = a1[..., 0], a1[..., 1]
    lon2, lat2 = a2[..., 0], a2[..., 1]
    # abs() keeps d(p1, p2) bit-identical to d(p2, p1)
    dlat = np.radians(np.abs(lat2 - lat1))
    dlon = np.radians(np.abs(lon2 - lon1))
    a = np.sin(dlat / 2.0) ** 2 + np.cos(np.radians(lat1)) * np.cos(np.radians(lat2)) * np.sin(dlon / 2.0) ** 2
    a = np.clip(a, 0.0, 1.0)
    d = 2.0 * EARTH_RADIUS_M * np.arctan2(np.sqrt(a), np.sqrt(1.0 - a))
    if np.ndim(d) == 0:
        return float(d)
    return d


__all__ = ["EARTH_RADIUS_M", "EmptyGeometryError", "centroid", "haversine_distance"]
