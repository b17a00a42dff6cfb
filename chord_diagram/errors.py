"""Exception types raised while building and rendering chord diagrams."""


class ChordDiagramError(Exception):
    """Base class for every failure the CLI reports before exiting."""


class InvalidArgument(ChordDiagramError, ValueError):
    """A command-line value is missing or out of range."""


class UnknownInstrument(ChordDiagramError, ValueError):
    """The instrument name is not in the instrument table."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Not a valid instrument: {name}")
        self.name = name


InvalidInstrument = UnknownInstrument


class InvalidChordToken(ChordDiagramError, ValueError):
    """A chord argument does not look like a chord name."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Not a valid chord name: {token}")
        self.token = token


class MissingExternalTool(ChordDiagramError, FileNotFoundError):
    """LilyPond could not be found on the host."""


class RenderFailure(ChordDiagramError, RuntimeError):
    """
    LilyPond exited with an error or produced no image.

    Attributes:
        stderr:     Standard error captured from the renderer, unmodified.
        returncode: Renderer exit status (0 when it succeeded but wrote no PNG).
    """

    def __init__(self, message: str, stderr: str = "", returncode: int = 0) -> None:
        super().__init__(message)
        self.stderr = stderr
        self.returncode = returncode
