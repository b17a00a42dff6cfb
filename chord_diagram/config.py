"""
Configuration for chord-diagram.

Holds the LilyPond language version written into generated files, the
default staff size and the location of the ``lilypond`` executable.
"""

from __future__ import annotations

import os
import shutil
from collections.abc import Mapping
from dataclasses import dataclass, field

from chord_diagram.errors import InvalidArgument

#: Environment variable that overrides the LilyPond executable lookup.
LILYPOND_ENV_VAR = "CHORD_DIAGRAM_LILYPOND"

DEFAULT_SIZE = 60
LILYPOND_VERSION = "2.22.1"


def find_lilypond(environ: Mapping[str, str] | None = None) -> str | None:
    """
    Locate the LilyPond executable.

    ``CHORD_DIAGRAM_LILYPOND`` wins when set; otherwise ``lilypond`` is
    searched on PATH (``lilypond.exe`` on Windows).
    """
    env = os.environ if environ is None else environ
    override = env.get(LILYPOND_ENV_VAR)
    if override:
        return shutil.which(override) or override
    return shutil.which("lilypond")


@dataclass(frozen=True)
class DiagramConfig:
    """Settings built once at startup and passed to the builder and exporter."""

    lilypond_path: str | None = field(default_factory=find_lilypond)
    lilypond_version: str = LILYPOND_VERSION

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> DiagramConfig:
        """Build a config, resolving LilyPond from *environ* (default: ``os.environ``)."""
        return cls(lilypond_path=find_lilypond(environ))

    def has_lilypond(self) -> bool:
        """Check if LilyPond is available."""
        return (
            self.lilypond_path is not None
            and os.path.isfile(self.lilypond_path)
            and os.access(self.lilypond_path, os.X_OK)
        )


def validate_size(size: int) -> int:
    """
    Check a staff size.

    Raises:
        InvalidArgument: If *size* is zero or negative.
    """
    if size <= 0:
        raise InvalidArgument(f"Invalid size: {size}")
    return size
