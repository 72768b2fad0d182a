from __future__ import annotations
import logging
from typing import List

from roadcheck.rules.registry import BaseRule, register_rule
from roadcheck.schema import STATUS_INCONCLUSIVE, STATUS_PASS, Verdict, Violation

LOG = logging.getLogger("roadcheck.access")

ACCESS_MODE_KEYS = [
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


def is_allowed(value) -> bool:
    if value is True:
        return True
    return isinstance(value, (int, float)) and not isinstance(value, bool) and value == 1


def count_allowed_modes(record: dict, keys: List[str]) -> int:
    allowed = 0
    for key in keys:
        LOG.debug("Key: %s, Value: %s", key, record.get(key))
        if is_allowed(record.get(key)):
            allowed += 1
    return allowed


@register_rule("access")
class AccessHeuristicRule(BaseRule):
    """Infers pedestrian access from how many vehicle modes a segment allows.

    The explicit pedestrian flag is ignored: a road open to nearly every
    vehicle mode is taken to be a high-speed artery.
    """

    id_kind = "topology"

    def evaluate(self, violation: Violation) -> Verdict:
        topo_id = violation.extracted_id
        if topo_id is None:
            return self._no_id(violation)

        topo = self.index.get(topo_id)
        if topo is None:
            return self._verdict(
                STATUS_INCONCLUSIVE, "not_found", [f"No topology feature found for id {topo_id}."], topo_id
            )

        records = topo.access_characteristics
        if not records or not isinstance(records[0], dict):
            return self._verdict(
                STATUS_INCONCLUSIVE,
                "no_access_data",
                [
                    "No accessCharacteristics data available",
                    f"Pedestrian access could not be determined for topology {topo_id}.",
                ],
                topo_id,
            )

        keys = list(self._cfg("ACCESS_MODE_KEYS", ACCESS_MODE_KEYS))
        disable_min = int(self._cfg("PEDESTRIAN_DISABLE_MIN", 8))
        allowed = count_allowed_modes(records[0], keys)
        access = "ENABLED" if allowed < disable_min else "DISABLED"
        lines = [
            f"Allowed vehicle types count (excluding pedestrian): {allowed}",
            f"Based on accessCharacteristics, pedestrian access SHOULD be {access} for topology {topo_id}.",
        ]
        return self._verdict(
            STATUS_PASS, f"pedestrian_{access.lower()}", lines, topo_id, allowed_count=allowed, pedestrian_access=access
        )

    def footer_lines(self, verdict: Verdict) -> List[str]:
        return [""]
