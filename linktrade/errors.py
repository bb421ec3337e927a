from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class TradeError(Exception):
    code: str
    message: str
    details: Optional[Any] = None

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


PARSE_DIAGNOSTIC = "PARSE_DIAGNOSTIC"
FORMAT_MISMATCH = "FORMAT_MISMATCH"
TRADABILITY_BLOCK = "TRADABILITY_BLOCK"
LEGALITY_FAILURE = "LEGALITY_FAILURE"
ADMISSION_FAILURE = "ADMISSION_FAILURE"
NO_ATTACHMENT = "NO_ATTACHMENT"
INVALID_TRADE_CODE = "INVALID_TRADE_CODE"
BAD_ATTACHMENT_ENCODING = "BAD_ATTACHMENT_ENCODING"
