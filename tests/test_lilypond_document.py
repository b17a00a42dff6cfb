"""Unit tests for LilyPond document assembly."""

import pytest

from chord_diagram.config import DiagramConfig
from chord_diagram.diagram_models import DiagramRequest
from chord_diagram.errors import InvalidArgument
from chord_diagram.instruments import resolve_instrument
from chord_diagram.lilypond_document import build_document, build_preamble

GUITAR_C = """\\version "2.22.1"

#(set-global-staff-size 60)

#(ly:set-option 'crop #t)

chord = \\chordmode {
  c1
}

\\include "predefined-guitar-fretboards.ly"

\\score {
  <<
  \\new ChordNames {
    \\chord
  }

  \\new FretBoards {
    \\set Staff.stringTunings = #guitar-tuning
    \\chord
  }
  >>

  \\layout {}
}
"""


def _request(instrument: str, *chords: str, size: int = 60) -> DiagramRequest:
    return DiagramRequest(instrument=resolve_instrument(instrument), chords=chords, size=size)


def _config() -> DiagramConfig:
    return DiagramConfig(lilypond_path=None)


def test_guitar_c_document_exact() -> None:
    assert build_document(_request("guitar", "C"), _config()) == GUITAR_C


def test_guitar_has_no_transposition() -> None:
    document = build_document(_request("guitar", "C"), _config())
    assert "\\transpose" not in document
    assert "\\set Staff.stringTunings = #guitar-tuning" in document


def test_cajun_fretboard_is_transposed_f_to_g() -> None:
    document = build_document(_request("cajun", "Am"), _config())
    assert "  a1:m\n" in document
    assert '\\include "predefined-mandolin-fretboards.ly"' in document
    assert "\\set Staff.stringTunings = #mandolin-tuning" in document
    assert "    \\transpose f g \\chord\n" in document


def test_transposition_applies_to_fretboards_only() -> None:
    document = build_document(_request("baritone", "G"), _config())
    chord_names, fretboards = document.split("\\new FretBoards")
    assert "\\transpose" not in chord_names
    assert "\\transpose c' f \\chord" in fretboards


@pytest.mark.parametrize(
    ("instrument", "include"),
    [
        ("guitalele", "predefined-guitar-fretboards.ly"),
        ("ukulele", "predefined-ukulele-fretboards.ly"),
        ("mandola", "predefined-mandolin-fretboards.ly"),
    ],
)
def test_include_follows_family(instrument: str, include: str) -> None:
    document = build_document(_request(instrument, "C"), _config())
    assert f'\\include "{include}"' in document


def test_chord_sequence_in_order() -> None:
    document = build_document(_request("ukulele", "C", "Am", "F", "G7"), _config())
    assert "chord = \\chordmode {\n  c1 a1:m f1 g1:7\n}" in document


def test_custom_size() -> None:
    document = build_document(_request("guitar", "C", size=24), _config())
    assert "#(set-global-staff-size 24)" in document


def test_version_from_config() -> None:
    config = DiagramConfig(lilypond_path=None, lilypond_version="2.24.0")
    document = build_document(_request("guitar", "C"), config)
    assert document.startswith('\\version "2.24.0"\n')


def test_preamble_enables_crop() -> None:
    preamble = build_preamble(60, "2.22.1")
    assert "#(ly:set-option 'crop #t)" in preamble


def test_request_rejects_non_positive_size() -> None:
    with pytest.raises(InvalidArgument, match="Invalid size: 0"):
        _request("guitar", "C", size=0)


def test_default_filename() -> None:
    assert _request("guitar", "C", "Am", "G7").default_filename() == "guitar-C-Am-G7.png"
    assert _request("baritone", "C").default_filename() == "baritone-ukulele-C.png"
