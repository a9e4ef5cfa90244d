from __future__ import annotations

from cvd_platform.domain.entities.material import (
    DEFAULT_MATERIAL,
    DEFAULT_MATERIAL_CODES,
    Material,
)
from cvd_platform.domain.entities.prediction import (
    KnownOutcome,
    OutcomeLabel,
    PredictionParams,
    UnrecognizedOutcome,
    outcome_tone,
    parse_outcome,
)


def test_parse_outcome_recognizes_canonical_labels() -> None:
    outcome = parse_outcome("no yield")

    assert outcome == KnownOutcome(OutcomeLabel.NO_YIELD)
    assert outcome.value == "no yield"


def test_parse_outcome_keeps_unknown_labels_verbatim() -> None:
    outcome = parse_outcome("Excellent!")

    assert isinstance(outcome, UnrecognizedOutcome)
    assert outcome.value == "Excellent!"


def test_outcome_tone() -> None:
    assert outcome_tone(parse_outcome("excellent")) == "success"
    assert outcome_tone(parse_outcome("qualified")) == "warning"
    assert outcome_tone(parse_outcome("no yield")) == "danger"
    assert outcome_tone(parse_outcome("mystery")) == "neutral"


def test_params_wire_names_are_camel_case(valid_params) -> None:
    wire = valid_params.to_wire()

    assert wire["substrateType"] == "Sapphire"
    assert wire["hArRatio"] == 0.1
    assert wire["saltAddition"] == "yes"
    assert PredictionParams.from_wire(wire) == valid_params


def test_from_wire_ignores_unknown_keys() -> None:
    params = PredictionParams.from_wire({"reactionTime": 10, "colour": "blue"})

    assert params.reaction_time == 10
    assert params.substrate_type == ""


def test_with_remarks_returns_new_record(make_record) -> None:
    record = make_record("1")

    updated = record.with_remarks("good film")

    assert updated.remarks == "good film"
    assert record.remarks is None
    assert updated.id == record.id


def test_default_material_and_codes() -> None:
    assert DEFAULT_MATERIAL is Material.WS2
    assert DEFAULT_MATERIAL_CODES["mos2"] == "MoS2"
    assert DEFAULT_MATERIAL_CODES["ws2"] == "WSe2"
    assert Material.MOSE2.info.full_name == "Molybdenum Diselenide"
