from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from .attachments import DecodeRejected
from .errors import (
    ADMISSION_FAILURE,
    FORMAT_MISMATCH,
    INVALID_TRADE_CODE,
    LEGALITY_FAILURE,
    NO_ATTACHMENT,
    TradeError,
)
from .interfaces import AttachmentDecoder, RulesEngine, TradeQueue
from .materializer import materialize_entity
from .models import (
    Admitted,
    Advisory,
    CandidateEntity,
    IntakeResult,
    PokeTradeType,
    Rejected,
    TradeRequest,
)
from .rules import RuleRegistry
from .spec_text import split_spec_text
from .templates import build_template, ensure_no_diagnostics
from .validator import validate_entity

logger = logging.getLogger(__name__)

# Text requests that fail these checks get their best attempt sent back.
_ADVISORY_CODES = frozenset({FORMAT_MISMATCH, LEGALITY_FAILURE})


class TradeIntakePipeline:
    """Turns a text set or an attachment into a queued link trade.

    Every collaborator is injected. The only side effect is the single
    ``queue.admit`` call made after the entity has cleared the gate.
    """

    def __init__(
        self,
        rules: RulesEngine,
        decoder: AttachmentDecoder,
        queue: TradeQueue,
        enforce_legality: Optional[bool] = None,
        generation: Optional[int] = None,
        expected_format: Optional[str] = None,
        registry: Optional[RuleRegistry] = None,
    ) -> None:
        import config

        self.rules = rules
        self.decoder = decoder
        self.queue = queue
        self.enforce_legality = (
            config.ENFORCE_LEGALITY if enforce_legality is None else enforce_legality
        )
        self.generation = config.GENERATION if generation is None else generation
        self.expected_format = config.SUPPORTED_FORMAT if expected_format is None else expected_format
        self.code_min = config.TRADE_CODE_MIN
        self.code_max = config.TRADE_CODE_MAX
        self.registry = registry

    # ------------------------------------------------------------------
    # entry points
    # ------------------------------------------------------------------
    def submit_text(
        self,
        content: str,
        requester_name: str,
        code: Optional[int] = None,
        is_privileged: bool = False,
    ) -> IntakeResult:
        try:
            self._check_code(code)
            split = split_spec_text(content)
            template = build_template(split, self.rules)
            ensure_no_diagnostics(template)
            result = materialize_entity(template, split.overrides, self.rules, self.generation)
        except TradeError as exc:
            return self._reject(requester_name, exc)

        entity = result.entity
        try:
            self._validate(entity)
        except TradeError as exc:
            if exc.code not in _ADVISORY_CODES:
                return self._reject(requester_name, exc)
            species = template.species_name or str(template.species)
            logger.warning(
                "[TRADE_INTAKE_ADVISORY] requester=%s species=%s code=%s status=%s",
                requester_name,
                species,
                exc.code,
                result.status.value,
            )
            return Advisory(
                entity=entity,
                error=exc,
                message=(
                    "Oops! I wasn't able to create something from that. "
                    f"Here's my best attempt for that {species}!"
                ),
            )

        return self._admit(code, requester_name, entity, is_privileged)

    def submit_attachment(
        self,
        blob: Optional[bytes],
        requester_name: str,
        code: Optional[int] = None,
        is_privileged: bool = False,
    ) -> IntakeResult:
        try:
            self._check_code(code)
            if blob is None:
                raise TradeError(NO_ATTACHMENT, "No attachment provided!")
            decoded = self.decoder.decode(blob)
            if isinstance(decoded, DecodeRejected):
                raise TradeError(
                    FORMAT_MISMATCH,
                    decoded.reason,
                    {"expected_format": self.expected_format},
                )
            entity = decoded.entity
            self._validate(entity)
        except TradeError as exc:
            return self._reject(requester_name, exc)

        return self._admit(code, requester_name, entity, is_privileged)

    # ------------------------------------------------------------------
    # internals
    # ------------------------------------------------------------------
    def _check_code(self, code: Optional[int]) -> None:
        if code is None:
            return
        if isinstance(code, bool) or not isinstance(code, int) or not (
            self.code_min <= code <= self.code_max
        ):
            raise TradeError(
                INVALID_TRADE_CODE,
                f"Trade code must be between {self.code_min} and {self.code_max}",
                {"code": code},
            )

    def _validate(self, entity: CandidateEntity) -> None:
        validate_entity(
            entity,
            self.rules,
            enforce_legality=self.enforce_legality,
            expected_format=self.expected_format,
            registry=self.registry,
        )

    def _admit(
        self,
        code: Optional[int],
        requester_name: str,
        entity: CandidateEntity,
        is_privileged: bool,
    ) -> IntakeResult:
        if code is None:
            code = self.queue.next_random_code()
        entity = replace(entity, party_stats=None)
        kind = PokeTradeType.SPECIFIC

        admission = self.queue.admit(code, requester_name, entity, is_privileged, kind)
        if not admission.ok:
            return self._reject(
                requester_name,
                TradeError(ADMISSION_FAILURE, admission.message, {"code": code}),
            )

        logger.info(
            "[TRADE_INTAKE_ADMITTED] requester=%s species=%s privileged=%s",
            requester_name,
            entity.species,
            is_privileged,
        )
        request = TradeRequest(
            code=code,
            requester_name=requester_name,
            entity=entity,
            is_privileged=is_privileged,
            kind=kind,
        )
        return Admitted(request=request, admission=admission)

    @staticmethod
    def _reject(requester_name: str, error: TradeError) -> Rejected:
        logger.warning(
            "[TRADE_INTAKE_REJECTED] requester=%s %s",
            requester_name,
            str(error),
        )
        return Rejected(error)
