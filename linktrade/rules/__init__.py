"""Validation gate rules.

How to add a new rule:
1) Create a new rule file in linktrade/rules/builtin (e.g., my_rule.py).
2) Implement a Rule with rule_id, priority, enabled, and validate().
3) Add it to build_builtin_rules() in linktrade/rules/builtin/__init__.py.

Rules run in (priority, rule_id) order and the first failure stops the gate.
"""

from .base import GateContext, Rule, build_gate_context
from .registry import RuleRegistry, get_default_registry, validate_all

__all__ = [
    "GateContext",
    "Rule",
    "build_gate_context",
    "RuleRegistry",
    "get_default_registry",
    "validate_all",
]
