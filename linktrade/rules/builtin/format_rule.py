from __future__ import annotations

from dataclasses import dataclass

from ...errors import FORMAT_MISMATCH, TradeError
from ...models import CandidateEntity
from ..base import GateContext


@dataclass
class FormatRule:
    rule_id: str = "format"
    priority: int = 10
    enabled: bool = True

    def validate(self, entity: CandidateEntity, ctx: GateContext) -> None:
        if entity.format != ctx.expected_format:
            raise TradeError(
                FORMAT_MISMATCH,
                f"Entity is not a {ctx.expected_format}",
                {"format": entity.format, "expected_format": ctx.expected_format},
            )
