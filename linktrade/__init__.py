"""Link trade request intake: parse, materialize, validate and queue."""

from .attachments import Decoded, DecodeRejected, FormatNarrowingDecoder
from .errors import TradeError
from .models import (
    Admitted,
    Advisory,
    CandidateEntity,
    IdentityOverrides,
    PokeRoutineType,
    PokeTradeType,
    Rejected,
    Template,
    TradeRequest,
)
from .pipeline import TradeIntakePipeline
from .spec_text import split_spec_text, strip_code_block
from .trade_queue import LinkTradeQueue
from .validator import validate_entity

__all__ = [
    "Decoded",
    "DecodeRejected",
    "FormatNarrowingDecoder",
    "TradeError",
    "Admitted",
    "Advisory",
    "CandidateEntity",
    "IdentityOverrides",
    "PokeRoutineType",
    "PokeTradeType",
    "Rejected",
    "Template",
    "TradeRequest",
    "TradeIntakePipeline",
    "split_spec_text",
    "strip_code_block",
    "LinkTradeQueue",
    "validate_entity",
]
