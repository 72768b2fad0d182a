from __future__ import annotations
import json
import logging
from typing import Any, Dict, List

import numpy as np

from roadcheck._report import fmt_value
from roadcheck.geom import EmptyGeometryError, centroid, haversine_distance
from roadcheck.rules.registry import BaseRule, register_rule
from roadcheck.schema import STATUS_FAIL, STATUS_INCONCLUSIVE, STATUS_PASS, Verdict, Violation

LOG = logging.getLogger("roadcheck.proximity")


@register_rule("proximity")
class TopologyProximityRule(BaseRule):
    """Looks for motorway-class segments whose centroid lies near the flagged one.

    Motorway means a functionalClass value in MOTORWAY_CLASSES ({1, 2}).
    """

    id_kind = "topology"

    def header_lines(self, number: int, violation: Violation) -> List[str]:
        shown = violation.extracted_id if violation.extracted_id is not None else "null"
        return [
            f"Checking validation for violation: {number}",
            f"Extracted current topology id: {shown}",
        ]

    def evaluate(self, violation: Violation) -> Verdict:
        topo_id = violation.extracted_id
        if topo_id is None:
            return self._no_id(violation)

        current = self.index.get(topo_id)
        if current is None:
            return self._verdict(
                STATUS_INCONCLUSIVE, "not_found", ["Current topology not found in the loaded data."], topo_id
            )

        classes = tuple(self._cfg("MOTORWAY_CLASSES", [1, 2]))
        classes_txt = " or ".join(str(c) for c in classes)
        if current.is_motorway(classes):
            return self._verdict(
                STATUS_PASS,
                "already_motorway",
                [
                    f"Current topology is classified as a motorway (functionalClass value is {classes_txt}). "
                    "No further checks needed."
                ],
                topo_id,
            )

        try:
            cur_c = centroid(current.coordinates)
        except EmptyGeometryError:
            return self._verdict(
                STATUS_INCONCLUSIVE, "no_geometry", [f"Current topology {topo_id} has no coordinates."], topo_id
            )

        lines = [f"current topology {topo_id} & centroid: [{fmt_value(cur_c[0])}, {fmt_value(cur_c[1])}]"]
        candidates = [t for t in self.collection if t.id != topo_id]
        radius = float(self._cfg("PROXIMITY_RADIUS_M", 20.0))
        radius_txt = f"{fmt_value(radius)}m"

        neighbours: List[Dict[str, Any]] = []
        for idx, cand, dist in self._near_candidates(candidates, cur_c, radius):
            motorway = cand.is_motorway(classes)
            if motorway and cand.roads:
                roads_txt = json.dumps(list(cand.roads), ensure_ascii=False)
                lines.append(
                    f"Candidate topology {idx} is within {radius_txt} and classified as motorway. "
                    f"Associated road(s): {roads_txt}"
                )
            elif motorway:
                lines.append(
                    f"Candidate topology {idx} is within {radius_txt} and classified as motorway "
                    "but has no associated road data."
                )
            else:
                lines.append(
                    f"Candidate topology {idx} is within {radius_txt} but not classified as a motorway "
                    f"(functionalClass value is not {classes_txt})."
                )
            neighbours.append(
                {
                    "index": idx,
                    "id": cand.id,
                    "distance_m": round(dist, 3),
                    "motorway": motorway,
                    "roads": list(cand.roads),
                }
            )

        centroid_out = [cur_c[0], cur_c[1]]
        if any(n["motorway"] for n in neighbours):
            return self._verdict(
                STATUS_FAIL, "motorway_neighbour", lines, topo_id, centroid=centroid_out, neighbours=neighbours
            )
        return self._verdict(
            STATUS_INCONCLUSIVE, "no_motorway_neighbour", lines, topo_id, centroid=centroid_out, neighbours=neighbours
        )

    def _near_candidates(self, candidates, origin, radius: float):
        idxs: List[int] = []
        pts: List[tuple] = []
        for idx, cand in enumerate(candidates):
            try:
                pts.append(centroid(cand.coordinates))
            except EmptyGeometryError:
                LOG.warning("candidate topology %s has no coordinates, skipped", cand.id)
                continue
            idxs.append(idx)
        if not pts:
            return []
        dists = haversine_distance(origin, np.asarray(pts, dtype=np.float64))
        out = []
        for idx, dist in zip(idxs, dists):
            if dist < radius:
                out.append((idx, candidates[idx], float(dist)))
        return out
