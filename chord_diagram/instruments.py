"""Instrument table: tuning preset and fretboard transposition for each supported instrument."""

from collections.abc import Mapping
from types import MappingProxyType

from chord_diagram.diagram_models import InstrumentSpec, TuningFamily
from chord_diagram.errors import UnknownInstrument

# ── Tuning families ─────────────────────────────────────────────────────────

GUITAR = TuningFamily(
    name="guitar",
    tuning="#guitar-tuning",
    fretboards_include='\\include "predefined-guitar-fretboards.ly"',
)
UKULELE = TuningFamily(
    name="ukulele",
    tuning="#ukulele-tuning",
    fretboards_include='\\include "predefined-ukulele-fretboards.ly"',
)
MANDOLIN = TuningFamily(
    name="mandolin",
    tuning="#mandolin-tuning",
    fretboards_include='\\include "predefined-mandolin-fretboards.ly"',
)

TUNING_FAMILIES: tuple[TuningFamily, ...] = (GUITAR, UKULELE, MANDOLIN)

# ── Instruments ─────────────────────────────────────────────────────────────
#
# Instruments tuned relative to a family borrow its predefined fretboards and
# transpose the chords on the fretboard staff only, so chord names stay as typed.

_INSTRUMENT_LIST: tuple[InstrumentSpec, ...] = (
    InstrumentSpec("guitar", GUITAR),
    # ADGCEA, a fourth above the guitar.
    InstrumentSpec("guitalele", GUITAR, "\\transpose c' g' "),
    InstrumentSpec("ukulele", UKULELE),
    # DGBE, a fourth below the ukulele: C is drawn with the F shape.
    InstrumentSpec("baritone", UKULELE, "\\transpose c' f ", output_label="baritone-ukulele"),
    InstrumentSpec("mandolin", MANDOLIN),
    # FCGD, a whole step below standard mandolin tuning.
    InstrumentSpec("cajun", MANDOLIN, "\\transpose f g "),
    # CGDA, a fifth below the mandolin.
    InstrumentSpec("mandola", MANDOLIN, "\\transpose c' g "),
)

INSTRUMENTS: Mapping[str, InstrumentSpec] = MappingProxyType(
    {spec.name: spec for spec in _INSTRUMENT_LIST}
)


def instrument_names() -> list[str]:
    """Supported instrument names in display order."""
    return list(INSTRUMENTS)


def resolve_instrument(
    name: str,
    table: Mapping[str, InstrumentSpec] = INSTRUMENTS,
) -> InstrumentSpec:
    """
    Look up an instrument by its exact, case-sensitive name.

    Raises:
        UnknownInstrument: If *name* is not in *table*.
    """
    try:
        return table[name]
    except KeyError:
        raise UnknownInstrument(name) from None
