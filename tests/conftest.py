from __future__ import annotations

import pytest

from linktrade.models import (
    CandidateEntity,
    MaterializeResult,
    MaterializeStatus,
    QueueAdmissionResult,
    Template,
)
from linktrade.attachments import FormatNarrowingDecoder
from linktrade.pipeline import TradeIntakePipeline

SPECIES = {"Pikachu": 25, "Mew": 151, "Zacian": 888, "Eternatus": 890}
_ATTRIBUTE_PREFIXES = ("Ability:", "Level:", "EVs:", "IVs:", "Shiny:", "- ")


class FakeRulesEngine:
    """Small stand-in for the legality engine, with call recording."""

    def __init__(self, output_format="PK8"):
        self.output_format = output_format
        self.illegal_species = set()
        self.blocked_species = set()
        self.failing_species = set()
        self.calls = []
        self.parsed_texts = []

    def parse_spec_text(self, text):
        self.parsed_texts.append(text)
        lines = text.split("\n")
        invalid = []
        species_name = lines[0].strip() if lines else ""
        species = SPECIES.get(species_name, 0)
        if not species:
            invalid.append(lines[0] if lines else "")
        attributes = {}
        for line in lines[1:]:
            if not line.strip() or line.rstrip().endswith(" Nature"):
                continue
            if line.startswith(_ATTRIBUTE_PREFIXES):
                key, _, value = line.partition(":")
                attributes[key.strip()] = value.strip()
                continue
            invalid.append(line)
        return Template(species=species, species_name=species_name, attributes=attributes), invalid

    def get_trainer_info(self, generation):
        self.calls.append(("trainer", generation))
        return {"generation": generation, "sid": 1111, "tid": 222222, "ot": "SysBot"}

    def materialize(self, template, trainer):
        self.calls.append(("materialize", template.species))
        entity = CandidateEntity(
            format=self.output_format,
            species=template.species,
            level=int(template.attributes.get("Level", 100)),
            secret_id=trainer["sid"],
            trainer_id=trainer["tid"],
            trainer_name=trainer["ot"],
            party_stats={"hp": 35, "atk": 55},
        )
        status = (
            MaterializeStatus.FAILED
            if template.species in self.failing_species
            else MaterializeStatus.REGENERATED
        )
        return MaterializeResult(entity=entity, status=status)

    def analyze_legality(self, entity):
        self.calls.append(("legality", entity.species))
        return entity.species not in self.illegal_species

    def is_tradable(self, entity):
        self.calls.append(("tradable", entity.species))
        return entity.species not in self.blocked_species


class RecordingQueue:
    def __init__(self, random_code=8185, accept=True, message="Added"):
        self.random_code = random_code
        self.accept = accept
        self.message = message
        self.admitted = []
        self.code_draws = 0

    def next_random_code(self):
        self.code_draws += 1
        return self.random_code

    def admit(self, code, requester_name, entity, is_privileged, kind):
        self.admitted.append((code, requester_name, entity, is_privileged, kind))
        return QueueAdmissionResult(self.accept, self.message, 1 if self.accept else None)

    def describe_pending(self, routine):
        return "\n".join(name for _, name, _, _, _ in self.admitted) or "Nobody in queue."


def pk8_bytes(species: int, fmt: str = "PK8") -> bytes:
    return f"{fmt}:{species}".encode()


def raw_decode(blob: bytes):
    try:
        fmt, species = blob.decode().split(":")
    except (UnicodeDecodeError, ValueError):
        raise ValueError("unreadable attachment")
    if fmt not in ("PK8", "PK7", "PB7"):
        return None
    return CandidateEntity(format=fmt, species=int(species), party_stats={"hp": 1})


@pytest.fixture
def rules():
    return FakeRulesEngine()


@pytest.fixture
def queue():
    return RecordingQueue()


@pytest.fixture
def decoder():
    return FormatNarrowingDecoder(raw_decode, "PK8")


@pytest.fixture
def pipeline(rules, decoder, queue):
    return TradeIntakePipeline(rules, decoder, queue, enforce_legality=True)
