from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..models import CandidateEntity
from .base import GateContext, Rule

logger = logging.getLogger(__name__)


class RuleRegistry:
    def __init__(self, rules: Optional[Iterable[Rule]] = None) -> None:
        self._rules: dict[str, Rule] = {}
        if rules:
            for rule in rules:
                self.register(rule)

    def register(self, rule: Rule) -> None:
        self._rules[rule.rule_id] = rule

    def unregister(self, rule_id: str) -> None:
        self._rules.pop(rule_id, None)

    def set_enabled(self, rule_id: str, enabled: bool) -> None:
        rule = self._rules.get(rule_id)
        if rule is not None:
            rule.enabled = enabled

    def get(self, rule_id: str) -> Optional[Rule]:
        return self._rules.get(rule_id)

    def list_rules(self) -> list[Rule]:
        return list(self._rules.values())


def validate_all(
    entity: CandidateEntity,
    ctx: GateContext,
    registry: Optional[RuleRegistry] = None,
) -> None:
    registry = registry or get_default_registry()
    enabled_rules = [rule for rule in registry.list_rules() if rule.enabled]
    for rule in sorted(enabled_rules, key=lambda rule: (rule.priority, rule.rule_id)):
        logger.debug("[GATE_RULE] rule_id=%s species=%s", rule.rule_id, entity.species)
        rule.validate(entity, ctx)


def get_default_registry() -> RuleRegistry:
    from .builtin import build_builtin_rules

    return RuleRegistry(build_builtin_rules())
