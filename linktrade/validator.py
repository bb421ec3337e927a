from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .models import CandidateEntity
from .rules import RuleRegistry, build_gate_context, validate_all

if TYPE_CHECKING:
    from .interfaces import RulesEngine


def validate_entity(
    entity: CandidateEntity,
    rules: "RulesEngine",
    enforce_legality: Optional[bool] = None,
    expected_format: Optional[str] = None,
    registry: Optional[RuleRegistry] = None,
) -> None:
    """Raise TradeError unless ``entity`` may be offered in a trade."""
    ctx = build_gate_context(
        rules,
        expected_format=expected_format,
        enforce_legality=enforce_legality,
    )
    validate_all(entity, ctx, registry)
