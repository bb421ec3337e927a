from __future__ import annotations

from dataclasses import dataclass

from ...errors import LEGALITY_FAILURE, TradeError
from ...models import CandidateEntity
from ..base import GateContext


@dataclass
class LegalityRule:
    rule_id: str = "legality"
    priority: int = 30
    enabled: bool = True

    def validate(self, entity: CandidateEntity, ctx: GateContext) -> None:
        if not ctx.enforce_legality:
            return

        if not ctx.rules.analyze_legality(entity):
            raise TradeError(
                LEGALITY_FAILURE,
                "Provided Pokémon content is not legal, and cannot be traded!",
                {"species": entity.species, "form": entity.form},
            )
