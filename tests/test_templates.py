import pytest

from linktrade.errors import PARSE_DIAGNOSTIC, TradeError
from linktrade.models import SplitResult, Template
from linktrade.spec_text import split_spec_text
from linktrade.templates import build_template, ensure_no_diagnostics


def test_description_lines_are_joined_for_the_parser(rules):
    split = split_spec_text("Pikachu\nSecret Id: 1\nAbility: Static\nLevel: 50")
    template = build_template(split, rules)

    assert rules.parsed_texts == ["Pikachu\nAbility: Static\nLevel: 50"]
    assert template.species == 25
    assert template.invalid_lines == ()
    ensure_no_diagnostics(template)


def test_splitter_lines_come_before_parser_lines(rules):
    split = split_spec_text("Pikachu\nWobble wobble\nTrainer Id: x\nSecret Id: y")
    template = build_template(split, rules)

    assert template.invalid_lines == ("Trainer Id: x", "Secret Id: y", "Wobble wobble")


def test_diagnostics_message_lists_every_line():
    template = Template(species=25, invalid_lines=("bad one", "bad two"))

    with pytest.raises(TradeError) as excinfo:
        ensure_no_diagnostics(template)

    assert excinfo.value.code == PARSE_DIAGNOSTIC
    assert excinfo.value.message == "Unable to parse Showdown Set:\nbad one\nbad two"
    assert excinfo.value.details == {"invalid_lines": ["bad one", "bad two"]}


def test_unknown_species_is_a_parser_diagnostic(rules):
    template = build_template(SplitResult(description_lines=["Missingno"]), rules)

    assert template.invalid_lines == ("Missingno",)
