"""chord-diagram: render fretboard chord diagrams for lute-family instruments via LilyPond."""

__version__ = "0.1.1"
PROGRAM_NAME = "chord-diagram"
