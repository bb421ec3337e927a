from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING

from .models import CandidateEntity, IdentityOverrides, MaterializeResult, MaterializeStatus, Template

if TYPE_CHECKING:
    from .interfaces import RulesEngine

logger = logging.getLogger(__name__)


def apply_overrides(entity: CandidateEntity, overrides: IdentityOverrides) -> CandidateEntity:
    # SID, then TID, then OT.
    if overrides.secret_id is not None:
        entity = replace(entity, secret_id=overrides.secret_id)
    if overrides.trainer_id is not None:
        entity = replace(entity, trainer_id=overrides.trainer_id)
    if overrides.trainer_name is not None:
        entity = replace(entity, trainer_name=overrides.trainer_name)
    return entity


def materialize_entity(
    template: Template,
    overrides: IdentityOverrides,
    rules: "RulesEngine",
    generation: int,
) -> MaterializeResult:
    trainer = rules.get_trainer_info(generation)
    result = rules.materialize(template, trainer)
    if result.status is not MaterializeStatus.REGENERATED:
        logger.info(
            "[MATERIALIZE_BEST_EFFORT] species=%s status=%s",
            template.species_name or template.species,
            result.status.value,
        )
    return replace(result, entity=apply_overrides(result.entity, overrides))
