from __future__ import annotations

from roadcheck.rules.registry import BaseRule, RuleContext, get_rule, list_rules, register_rule
from roadcheck.rules.sign_rule import SignRule
from roadcheck.rules.topology_proximity import TopologyProximityRule
from roadcheck.rules.access_heuristic import ACCESS_MODE_KEYS, AccessHeuristicRule, count_allowed_modes, is_allowed

__all__ = [
    "ACCESS_MODE_KEYS",
    "AccessHeuristicRule",
    "BaseRule",
    "RuleContext",
    "SignRule",
    "TopologyProximityRule",
    "count_allowed_modes",
    "get_rule",
    "is_allowed",
    "list_rules",
    "register_rule",
]
