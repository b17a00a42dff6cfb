"""Unit tests for the instrument table."""

import pytest

from chord_diagram.errors import InvalidInstrument, UnknownInstrument
from chord_diagram.instruments import (
    GUITAR,
    INSTRUMENTS,
    MANDOLIN,
    TUNING_FAMILIES,
    UKULELE,
    instrument_names,
    resolve_instrument,
)

EXPECTED = {
    "guitar": (GUITAR, ""),
    "guitalele": (GUITAR, "\\transpose c' g' "),
    "ukulele": (UKULELE, ""),
    "baritone": (UKULELE, "\\transpose c' f "),
    "mandolin": (MANDOLIN, ""),
    "cajun": (MANDOLIN, "\\transpose f g "),
    "mandola": (MANDOLIN, "\\transpose c' g "),
}


@pytest.mark.parametrize("name", sorted(EXPECTED))
def test_resolve_every_instrument(name: str) -> None:
    family, transposition = EXPECTED[name]
    spec = resolve_instrument(name)
    assert spec.name == name
    assert spec.family is family
    assert spec.transposition == transposition


def test_instrument_names_in_display_order() -> None:
    assert instrument_names() == [
        "guitar",
        "guitalele",
        "ukulele",
        "baritone",
        "mandolin",
        "cajun",
        "mandola",
    ]


def test_every_family_is_one_of_three_presets() -> None:
    assert {spec.family for spec in INSTRUMENTS.values()} == set(TUNING_FAMILIES)


def test_family_include_matches_tuning() -> None:
    assert GUITAR.tuning == "#guitar-tuning"
    assert GUITAR.fretboards_include == '\\include "predefined-guitar-fretboards.ly"'
    assert UKULELE.fretboards_include == '\\include "predefined-ukulele-fretboards.ly"'
    assert MANDOLIN.fretboards_include == '\\include "predefined-mandolin-fretboards.ly"'


@pytest.mark.parametrize("name", ["banjo", "Guitar", "GUITAR", " guitar", ""])
def test_unknown_instrument_rejected(name: str) -> None:
    with pytest.raises(UnknownInstrument, match="Not a valid instrument"):
        resolve_instrument(name)


def test_invalid_instrument_alias() -> None:
    with pytest.raises(InvalidInstrument):
        resolve_instrument("viola")


def test_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        INSTRUMENTS["banjo"] = INSTRUMENTS["guitar"]  # type: ignore[index]


def test_baritone_output_label() -> None:
    assert resolve_instrument("baritone").label == "baritone-ukulele"
    assert resolve_instrument("cajun").label == "cajun"


def test_resolve_with_custom_table() -> None:
    table = {"uke": INSTRUMENTS["ukulele"]}
    assert resolve_instrument("uke", table) is INSTRUMENTS["ukulele"]
    with pytest.raises(UnknownInstrument):
        resolve_instrument("ukulele", table)
