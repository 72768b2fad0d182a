from __future__ import annotations
from collections import Counter
from typing import Any, Dict, Iterable


def fmt_value(v: Any) -> str:
    if v is None:
        return "null"
    if isinstance(v, float) and v.is_integer():
        return str(int(v))
    return str(v)


def summarize(verdicts: Iterable) -> Dict[str, Any]:
    verdicts = list(verdicts)
    return {
        "total": len(verdicts),
        "by_status": dict(Counter(v.status for v in verdicts)),
        "by_reason": dict(Counter(v.reason for v in verdicts)),
    }
