from __future__ import annotations

import re
from typing import Optional

from .models import IdentityOverrides, SplitResult

SECRET_ID_LABEL = "Secret Id:"
TRAINER_ID_LABEL = "Trainer Id:"
TRAINER_NAME_LABEL = "Trainer:"

U16_MAX = 0xFFFF
U32_MAX = 0xFFFFFFFF

_DIGITS = re.compile(r"[0-9]+")


def strip_code_block(text: str) -> str:
    """Remove backtick markup around a pasted set, keeping every content line."""
    return text.replace("`", "").strip()


def _parse_unsigned(value: str, upper: int) -> int:
    if not _DIGITS.fullmatch(value):
        raise ValueError(f"not an unsigned integer: {value!r}")
    number = int(value)
    if number > upper:
        raise ValueError(f"out of range (max {upper}): {value!r}")
    return number


def split_spec_text(text: str) -> SplitResult:
    """Split a raw request block into set lines, identity overrides and bad lines.

    Each line ends up in exactly one place. Override labels are matched as
    case-sensitive substrings; the value is whatever follows the first colon.
    A malformed override line is kept in ``invalid_lines`` and does not stop
    the remaining lines from being processed.
    """
    result = SplitResult()
    secret_id: Optional[int] = None
    trainer_id: Optional[int] = None
    trainer_name: Optional[str] = None

    for line in strip_code_block(text).split("\n"):
        value = line.partition(":")[2].strip()
        try:
            if SECRET_ID_LABEL in line:
                secret_id = _parse_unsigned(value, U16_MAX)
            elif TRAINER_ID_LABEL in line:
                trainer_id = _parse_unsigned(value, U32_MAX)
            elif TRAINER_NAME_LABEL in line:
                trainer_name = value
            else:
                result.description_lines.append(line)
        except ValueError:
            result.invalid_lines.append(line)

    result.overrides = IdentityOverrides(
        secret_id=secret_id,
        trainer_id=trainer_id,
        trainer_name=trainer_name,
    )
    return result
