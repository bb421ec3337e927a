from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Protocol

from ..models import CandidateEntity

if TYPE_CHECKING:
    from ..interfaces import RulesEngine


@dataclass
class GateContext:
    rules: "RulesEngine"
    expected_format: str
    enforce_legality: bool = True


class Rule(Protocol):
    rule_id: str
    priority: int
    enabled: bool

    def validate(self, entity: CandidateEntity, ctx: GateContext) -> None:
        ...


def build_gate_context(
    rules: "RulesEngine",
    expected_format: Optional[str] = None,
    enforce_legality: Optional[bool] = None,
) -> GateContext:
    import config

    return GateContext(
        rules=rules,
        expected_format=expected_format if expected_format is not None else config.SUPPORTED_FORMAT,
        enforce_legality=(
            enforce_legality if enforce_legality is not None else config.ENFORCE_LEGALITY
        ),
    )
