from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Union

from .models import CandidateEntity

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Decoded:
    entity: CandidateEntity


@dataclass(frozen=True)
class DecodeRejected:
    reason: str


DecodeResult = Union[Decoded, DecodeRejected]


class FormatNarrowingDecoder:
    """Decode attachment bytes and accept only one storage format.

    ``raw_decode`` turns bytes into an entity of whatever format it recognizes,
    returns ``None`` when it recognizes nothing, and may raise ``ValueError``
    on corrupt data.
    """

    def __init__(
        self,
        raw_decode: Callable[[bytes], Optional[CandidateEntity]],
        expected_format: str,
    ) -> None:
        self._raw_decode = raw_decode
        self.expected_format = expected_format

    def decode(self, blob: bytes) -> DecodeResult:
        if not blob:
            return DecodeRejected(f"No {self.expected_format} attachment provided!")
        try:
            entity = self._raw_decode(blob)
        except ValueError:
            logger.warning(
                "[ATTACHMENT_DECODE_FAILED] size=%d expected_format=%s",
                len(blob),
                self.expected_format,
                exc_info=True,
            )
            return DecodeRejected(f"No {self.expected_format} attachment provided!")
        if entity is None or entity.format != self.expected_format:
            logger.info(
                "[ATTACHMENT_FORMAT_MISMATCH] got=%s expected=%s",
                getattr(entity, "format", None),
                self.expected_format,
            )
            return DecodeRejected(f"No {self.expected_format} attachment provided!")
        return Decoded(entity)
