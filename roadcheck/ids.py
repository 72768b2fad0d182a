from __future__ import annotations
import re
from typing import Optional

SIGN_ID_RE = re.compile(r"urn:here::here:signs:\d+")
TOPOLOGY_ID_RE = re.compile(r"urn:here::here:Topology:\S+")


def _first_match(pattern: re.Pattern, text) -> Optional[str]:
    if not isinstance(text, str):
        return None
    m = pattern.search(text)
    return m.group(0) if m else None


def extract_sign_id(text) -> Optional[str]:
    return _first_match(SIGN_ID_RE, text)


def extract_topology_id(text) -> Optional[str]:
    return _first_match(TOPOLOGY_ID_RE, text)


__all__ = ["SIGN_ID_RE", "TOPOLOGY_ID_RE", "extract_sign_id", "extract_topology_id"]
