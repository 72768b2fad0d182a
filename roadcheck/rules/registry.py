from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence, Type

from roadcheck.resolver import EntityIndex
from roadcheck.schema import STATUS_INCONCLUSIVE, Verdict, Violation


@dataclass
class RuleContext:
    config: Dict[str, Any] = field(default_factory=dict)


class BaseRule:
    check_id: str = ""
    # "sign" or "topology": selects the identifier grammar and the reference dataset
    id_kind: str = "topology"

    def __init__(self, ctx: RuleContext, collection: Sequence[Any]) -> None:
        self.ctx = ctx
        self.collection = tuple(collection)
        self.index = EntityIndex(self.collection, kind=self.id_kind)

    def evaluate(self, violation: Violation) -> Verdict:
        raise NotImplementedError

    def header_lines(self, number: int, violation: Violation) -> List[str]:
        return []

    def footer_lines(self, verdict: Verdict) -> List[str]:
        return []

    def _cfg(self, key: str, default: Any) -> Any:
        return self.ctx.config.get(key, default)

    def _verdict(self, status: str, reason: str, lines: List[str], entity_id: Optional[str], **details: Any) -> Verdict:
        return Verdict(
            check=self.check_id,
            entity_id=entity_id,
            status=status,
            reason=reason,
            lines=lines,
            details=details,
        )

    def _no_id(self, violation: Violation) -> Verdict:
        label = "sign" if self.id_kind == "sign" else "topology"
        return self._verdict(
            STATUS_INCONCLUSIVE,
            "no_id",
            [f"No {label} ID found in error message: {violation.raw_message}"],
            None,
        )


_REGISTRY: Dict[str, Type[BaseRule]] = {}


def register_rule(check_id: str) -> Callable[[Type[BaseRule]], Type[BaseRule]]:
    def _wrap(cls: Type[BaseRule]) -> Type[BaseRule]:
        cls.check_id = str(check_id).lower()
        _REGISTRY[cls.check_id] = cls
        return cls

    return _wrap


def get_rule(check_id: str) -> Optional[Type[BaseRule]]:
    return _REGISTRY.get(str(check_id).lower())


def list_rules() -> Dict[str, Type[BaseRule]]:
    return dict(_REGISTRY)
