from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from .errors import PARSE_DIAGNOSTIC, TradeError
from .models import SplitResult, Template

if TYPE_CHECKING:
    from .interfaces import RulesEngine


def build_template(split: SplitResult, rules: "RulesEngine") -> Template:
    """Parse the description lines of ``split`` into a template.

    The returned template's ``invalid_lines`` holds the splitter's bad lines
    first, then whatever the parser could not read.
    """
    text = "\n".join(split.description_lines)
    template, parser_invalid = rules.parse_spec_text(text)
    diagnostics = tuple(split.invalid_lines) + tuple(parser_invalid)
    return replace(template, invalid_lines=diagnostics)


def ensure_no_diagnostics(template: Template) -> None:
    if template.invalid_lines:
        raise TradeError(
            PARSE_DIAGNOSTIC,
            "Unable to parse Showdown Set:\n" + "\n".join(template.invalid_lines),
            {"invalid_lines": list(template.invalid_lines)},
        )
