from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, List
import json
import logging

LOG = logging.getLogger("roadcheck.io")


class DatasetLoadError(RuntimeError):
    """A reference collection could not be read or parsed; the run must stop."""


def load_features(path: Path) -> List[Dict[str, Any]]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise DatasetLoadError(f"cannot read {path}: {e}") from e
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DatasetLoadError(f"invalid json in {path}: {e}") from e
    if not isinstance(data, dict):
        raise DatasetLoadError(f"{path}: top level is not a FeatureCollection object")
    feats = data.get("features")
    if not isinstance(feats, list):
        raise DatasetLoadError(f"{path}: missing 'features' list")
    for i, f in enumerate(feats):
        if not isinstance(f, dict):
            raise DatasetLoadError(f"{path}: feature #{i} is not an object")
    LOG.debug("loaded %d features from %s", len(feats), path)
    return feats

