from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from .errors import TradeError


class PokeTradeType(str, Enum):
    SPECIFIC = "specific"
    CLONE = "clone"
    DUMP = "dump"


class PokeRoutineType(str, Enum):
    LINK_TRADE = "link_trade"
    SURPRISE_TRADE = "surprise_trade"
    CLONE = "clone"
    DUMP = "dump"


class MaterializeStatus(str, Enum):
    REGENERATED = "regenerated"
    FAILED = "failed"


@dataclass(frozen=True)
class IdentityOverrides:
    """Trainer identity values pulled out of a text request.

    ``None`` means "no override"; the generator's default stays in place.
    """

    secret_id: Optional[int] = None
    trainer_id: Optional[int] = None
    trainer_name: Optional[str] = None

    def is_empty(self) -> bool:
        return self.secret_id is None and self.trainer_id is None and self.trainer_name is None


@dataclass
class SplitResult:
    description_lines: List[str] = field(default_factory=list)
    overrides: IdentityOverrides = field(default_factory=IdentityOverrides)
    invalid_lines: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class Template:
    species: int
    species_name: str = ""
    form: int = 0
    attributes: Mapping[str, Any] = field(default_factory=dict)
    invalid_lines: Tuple[str, ...] = ()


@dataclass(frozen=True)
class CandidateEntity:
    format: str
    species: int
    form: int = 0
    nickname: str = ""
    level: int = 1
    moves: Tuple[int, ...] = ()
    ability: int = 0
    nature: int = 0
    held_item: int = 0
    secret_id: int = 0
    trainer_id: int = 0
    trainer_name: str = ""
    origin_game: int = 0
    party_stats: Optional[Mapping[str, int]] = None
    extra: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class MaterializeResult:
    entity: CandidateEntity
    status: MaterializeStatus = MaterializeStatus.REGENERATED


@dataclass(frozen=True)
class TradeRequest:
    code: int
    requester_name: str
    entity: CandidateEntity
    is_privileged: bool = False
    kind: PokeTradeType = PokeTradeType.SPECIFIC
    routine: PokeRoutineType = PokeRoutineType.LINK_TRADE


@dataclass(frozen=True)
class QueueAdmissionResult:
    ok: bool
    message: str = ""
    position: Optional[int] = None


@dataclass(frozen=True)
class Admitted:
    request: TradeRequest
    admission: QueueAdmissionResult
    ok: bool = field(default=True, init=False)


@dataclass(frozen=True)
class Advisory:
    """Best-effort entity shown to the requester; never queued."""

    entity: CandidateEntity
    error: TradeError
    message: str
    ok: bool = field(default=False, init=False)


@dataclass(frozen=True)
class Rejected:
    error: TradeError
    ok: bool = field(default=False, init=False)


IntakeResult = Union[Admitted, Advisory, Rejected]


def serialize_entity(entity: CandidateEntity) -> Dict[str, Any]:
    payload = asdict(entity)
    payload["moves"] = list(entity.moves)
    if entity.party_stats is not None:
        payload["party_stats"] = dict(entity.party_stats)
    payload["extra"] = dict(entity.extra)
    return payload
