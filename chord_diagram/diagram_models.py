"""Data models shared by the chord translator, the document builder and the exporter."""

from dataclasses import dataclass, field

from chord_diagram.config import DEFAULT_SIZE, validate_size

#: LilyPond duration used for every chord; whole notes give one diagram per chord.
OCTAVE_MARKER = "1"


@dataclass(frozen=True)
class NotationFragment:
    """
    One chord name translated to LilyPond ``\\chordmode`` syntax.

    Attributes:
        root:       Lowercase root letter, e.g. ``"b"``.
        accidental: ``"is"`` (sharp), ``"es"`` (flat) or ``""``.
        suffix:     Quality/extension copied verbatim from the chord name.
        octave:     Duration marker appended to every chord.
    """

    root: str
    accidental: str = ""
    suffix: str = ""
    octave: str = OCTAVE_MARKER

    @property
    def code(self) -> str:
        """LilyPond code, e.g. ``bes1:maj7``."""
        pitch = f"{self.root}{self.accidental}{self.octave}"
        return f"{pitch}:{self.suffix}" if self.suffix else pitch

    def __str__(self) -> str:
        return self.code


@dataclass(frozen=True)
class TuningFamily:
    """A string tuning preset that LilyPond ships predefined fretboards for."""

    name: str
    tuning: str
    fretboards_include: str


@dataclass(frozen=True)
class InstrumentSpec:
    """
    A supported instrument.

    Attributes:
        name:          Name accepted on the command line.
        family:        Tuning preset the fretboard is drawn with.
        transposition: LilyPond prefix applied to the fretboard staff only.
                       Empty when the instrument uses the family tuning as is.
        output_label:  Prefix of the default image filename.
    """

    name: str
    family: TuningFamily
    transposition: str = ""
    output_label: str = ""

    @property
    def label(self) -> str:
        return self.output_label or self.name


@dataclass(frozen=True)
class DiagramRequest:
    """Validated input for one diagram: instrument, chords in order, staff size."""

    instrument: InstrumentSpec
    chords: tuple[str, ...] = field(default_factory=tuple)
    size: int = DEFAULT_SIZE

    def __post_init__(self) -> None:
        validate_size(self.size)

    def default_filename(self) -> str:
        """``<instrument>-<chord>-...png``, e.g. ``baritone-ukulele-C-G7.png``."""
        return "-".join((self.instrument.label, *self.chords)) + ".png"
