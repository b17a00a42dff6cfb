"""DiagramExporter: compiles generated LilyPond source into a cropped PNG chord diagram."""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import tempfile
from pathlib import Path

from chord_diagram.config import DiagramConfig
from chord_diagram.diagram_models import DiagramRequest
from chord_diagram.errors import MissingExternalTool, RenderFailure
from chord_diagram.lilypond_document import build_document

logger = logging.getLogger(__name__)

SCRIPT_STEM = "chord-diagram"


class DiagramExporter:
    """
    Writes a LilyPond file into a private temporary directory, runs LilyPond on
    it and copies the cropped PNG to its destination.

    Usage as a context manager ensures the temporary directory (source, PDF
    and PNG products) is removed whether or not rendering succeeded:

        with DiagramExporter(config) as exporter:
            exporter.export(request, "guitar-C.png")
    """

    def __init__(self, config: DiagramConfig | None = None) -> None:
        self.config = config or DiagramConfig()
        self._temp_dirs: list[str] = []

    def _require_lilypond(self) -> str:
        path = self.config.lilypond_path
        if path is None or not self.config.has_lilypond():
            raise MissingExternalTool("No LilyPond on the system")
        return path

    def write_source(self, request: DiagramRequest) -> Path:
        """
        Write the LilyPond source for *request* into a fresh temporary directory.

        Returns:
            Path to the ``.ly`` file.
        """
        temp_dir = tempfile.mkdtemp(prefix="chord_diagram_")
        self._temp_dirs.append(temp_dir)

        script_path = Path(temp_dir) / f"{SCRIPT_STEM}.ly"
        script_path.write_text(build_document(request, self.config), encoding="utf-8")
        return script_path

    def render(self, script_path: Path) -> Path:
        """
        Run LilyPond on *script_path* and return the cropped PNG it produced.

        LilyPond is pointed at the source directory and writes ``<stem>.pdf``,
        ``<stem>.cropped.pdf`` and ``<stem>.cropped.png`` there.

        Raises:
            MissingExternalTool: If LilyPond is not installed.
            RenderFailure: If LilyPond exits non-zero or writes no PNG.
        """
        lilypond = self._require_lilypond()
        output_dir = script_path.parent
        command = [lilypond, "-o", str(output_dir), str(script_path)]

        logger.debug("Running %s", " ".join(command))
        result = subprocess.run(command, capture_output=True, text=True, check=False)

        if result.returncode != 0:
            logger.debug("LilyPond exited with status %d", result.returncode)
            raise RenderFailure(
                f"LilyPond failed with exit status {result.returncode}",
                stderr=result.stderr,
                returncode=result.returncode,
            )

        png_path = output_dir / f"{script_path.stem}.cropped.png"
        if not png_path.exists():
            logger.debug("LilyPond reported success but %s is missing", png_path)
            raise RenderFailure(
                f"LilyPond did not produce '{png_path.name}'",
                stderr=result.stderr,
            )
        return png_path

    def export(self, request: DiagramRequest, output_path: str | os.PathLike[str]) -> Path:
        """
        Full pipeline: write source, render, copy the image to *output_path*.

        Returns:
            The path the image was copied to.
        """
        script_path = self.write_source(request)
        png_path = self.render(script_path)

        destination = Path(output_path)
        shutil.copyfile(png_path, destination)
        logger.info("Wrote chord diagram to %s", destination)
        return destination

    def cleanup(self) -> None:
        """Remove all temporary directories created during rendering."""
        for temp_dir in self._temp_dirs:
            shutil.rmtree(temp_dir, ignore_errors=True)
        self._temp_dirs.clear()

    def __enter__(self) -> "DiagramExporter":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.cleanup()
