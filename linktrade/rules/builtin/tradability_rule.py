from __future__ import annotations

from dataclasses import dataclass

from ...errors import TRADABILITY_BLOCK, TradeError
from ...models import CandidateEntity
from ..base import GateContext


@dataclass
class TradabilityRule:
    """Static block-list check; applies whether or not legality is enforced."""

    rule_id: str = "tradability"
    priority: int = 20
    enabled: bool = True

    def validate(self, entity: CandidateEntity, ctx: GateContext) -> None:
        if not ctx.rules.is_tradable(entity):
            raise TradeError(
                TRADABILITY_BLOCK,
                "Provided Pokémon content is blocked from trading!",
                {"species": entity.species, "form": entity.form},
            )
