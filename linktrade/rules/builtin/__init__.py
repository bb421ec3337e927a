from __future__ import annotations

from .format_rule import FormatRule
from .legality_rule import LegalityRule
from .tradability_rule import TradabilityRule


def build_builtin_rules() -> list:
    return [
        FormatRule(),
        TradabilityRule(),
        LegalityRule(),
    ]
