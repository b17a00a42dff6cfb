"""Build the LilyPond source for a chord diagram."""

from __future__ import annotations

from chord_diagram.chord_translator import chords_code
from chord_diagram.config import DiagramConfig
from chord_diagram.diagram_models import DiagramRequest


def build_preamble(size: int, lilypond_version: str) -> str:
    """Version statement, staff size and the crop option that yields ``.cropped.png``."""
    return f"""\\version "{lilypond_version}"

#(set-global-staff-size {size})

#(ly:set-option 'crop #t)
"""


def build_document(request: DiagramRequest, config: DiagramConfig | None = None) -> str:
    """
    Assemble a complete LilyPond file for *request*.

    The score has two parallel staves: chord names as typed, and fretboards
    drawn with the instrument family tuning. The instrument's transposition is
    applied to the fretboard staff only.
    """
    config = config or DiagramConfig(lilypond_path=None)
    instrument = request.instrument
    family = instrument.family

    preamble = build_preamble(request.size, config.lilypond_version)

    return f"""{preamble}
chord = \\chordmode {{
  {chords_code(request.chords)}
}}

{family.fretboards_include}

\\score {{
  <<
  \\new ChordNames {{
    \\chord
  }}

  \\new FretBoards {{
    \\set Staff.stringTunings = {family.tuning}
    {instrument.transposition}\\chord
  }}
  >>

  \\layout {{}}
}}
"""
