"""ChordTranslator: validates chord names and converts them to LilyPond chord-mode code."""

import re
from collections.abc import Iterable

from chord_diagram.diagram_models import NotationFragment
from chord_diagram.errors import InvalidChordToken

# Root A-G, optional sharp/flat, then any letters or digits.
# Nonsense suffixes such as "sus99" pass; LilyPond reports them itself.
CHORD_PATTERN = re.compile(r"^[A-G][#b]?[A-Za-z0-9]*$", re.IGNORECASE)

#: Accidental characters and their LilyPond (Dutch) note-name endings.
ACCIDENTALS: dict[str, str] = {"#": "is", "b": "es"}


def is_valid_chord(token: str) -> bool:
    """Return True when *token* looks like a chord name."""
    return CHORD_PATTERN.fullmatch(token) is not None


def validate_chord(token: str) -> str:
    """
    Check a single chord name.

    Returns:
        The token unchanged.

    Raises:
        InvalidChordToken: If the token does not match ``CHORD_PATTERN``.
    """
    if not is_valid_chord(token):
        raise InvalidChordToken(token)
    return token


def validate_chords(tokens: Iterable[str]) -> tuple[str, ...]:
    """Validate chord names in order, stopping at the first bad one."""
    return tuple(validate_chord(token) for token in tokens)


def translate_chord(token: str) -> NotationFragment:
    """
    Translate a validated chord name into a NotationFragment.

    The first character becomes the lowercase root. A ``#`` or ``b`` in second
    position becomes ``is``/``es``; any other character is left for the suffix.
    Whatever follows is kept verbatim as the chord-mode modifier.

        >>> translate_chord("D#sus2").code
        'dis1:sus2'
        >>> translate_chord("G7").code
        'g1:7'
    """
    root = token[0].lower()
    accidental = ACCIDENTALS.get(token[1:2], "")
    rest = token[2:] if accidental else token[1:]
    return NotationFragment(root=root, accidental=accidental, suffix=rest)


def chords_code(tokens: Iterable[str]) -> str:
    """Translate chord names and join them with single spaces, keeping order."""
    return " ".join(translate_chord(token).code for token in tokens)
