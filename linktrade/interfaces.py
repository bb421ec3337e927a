"""Collaborator interfaces the intake pipeline is built against.

Concrete implementations (the legality engine, attachment download and
decoding, the live trade queue) live outside this package and are passed in.
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence, Tuple

from .attachments import DecodeResult
from .models import (
    CandidateEntity,
    MaterializeResult,
    PokeRoutineType,
    PokeTradeType,
    QueueAdmissionResult,
    Template,
)


class RulesEngine(Protocol):
    def parse_spec_text(self, text: str) -> Tuple[Template, Sequence[str]]:
        ...

    def get_trainer_info(self, generation: int) -> Any:
        ...

    def materialize(self, template: Template, trainer: Any) -> MaterializeResult:
        ...

    def analyze_legality(self, entity: CandidateEntity) -> bool:
        ...

    def is_tradable(self, entity: CandidateEntity) -> bool:
        ...


class AttachmentDecoder(Protocol):
    def decode(self, blob: bytes) -> DecodeResult:
        ...


class TradeQueue(Protocol):
    def next_random_code(self) -> int:
        ...

    def admit(
        self,
        code: int,
        requester_name: str,
        entity: CandidateEntity,
        is_privileged: bool,
        kind: PokeTradeType,
    ) -> QueueAdmissionResult:
        ...

    def describe_pending(self, routine: PokeRoutineType) -> str:
        ...

