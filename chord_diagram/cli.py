"""chord-diagram CLI entry point."""

import logging
import os
import sys
from pathlib import Path
from typing import NoReturn

import click

from chord_diagram import PROGRAM_NAME, __version__
from chord_diagram.chord_translator import validate_chords
from chord_diagram.config import DEFAULT_SIZE, DiagramConfig, validate_size
from chord_diagram.diagram_exporter import DiagramExporter
from chord_diagram.diagram_models import DiagramRequest
from chord_diagram.errors import (
    InvalidArgument,
    InvalidChordToken,
    MissingExternalTool,
    RenderFailure,
    UnknownInstrument,
)
from chord_diagram.instruments import instrument_names, resolve_instrument
from chord_diagram.lilypond_document import build_document

CHORD_EXAMPLES = ["C", "Am", "G7", "Dsus2"]


def _usage_epilog() -> str:
    """Instrument list and chord examples shown under ``--help``."""
    instruments = "\n".join(f"  * {name}" for name in instrument_names())
    examples = "\n".join(f"  * {chord}" for chord in CHORD_EXAMPLES)
    return (
        f"\b\nInstruments:\n{instruments}\n\n"
        "`baritone` means baritone ukuleles. `cajun` is mandolins with cajun tuning.\n\n"
        f"\b\nChord examples:\n{examples}\n\n"
        "Each chord is a separate command-line parameter, separated by a space."
    )


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _fail(message: str, ctx: click.Context | None = None) -> NoReturn:
    """Print *message* (and the help text, if *ctx* is given) to stderr and exit 1."""
    click.echo(message, err=True)
    if ctx is not None:
        click.echo(err=True)
        click.echo(ctx.get_help(), err=True)
    sys.exit(1)


# ── CLI command ────────────────────────────────────────────────────────────────

@click.command(
    name=PROGRAM_NAME,
    context_settings={"help_option_names": ["-h", "--help"]},
    epilog=_usage_epilog(),
)
@click.version_option(__version__, "-v", "--version", prog_name=PROGRAM_NAME)
@click.argument("instrument", required=False)
@click.argument("chords", nargs=-1)
@click.option(
    "--output",
    "-o",
    default=None,
    metavar="PATH",
    help=(
        "Destination file. Defaults to <instrument>-<chord>-...png in the current "
        "directory; with --lilypond, the LilyPond source is written here instead of stdout."
    ),
)
@click.option(
    "--lilypond",
    "-ly",
    "generate_code",
    is_flag=True,
    help="Emit the generated LilyPond source instead of rendering an image.",
)
@click.option(
    "--size",
    "-s",
    type=int,
    default=DEFAULT_SIZE,
    show_default=True,
    help="Global staff size of the diagram (positive integer).",
)
@click.option("--debug", is_flag=True, help="Log renderer commands and results to stderr.")
@click.pass_context
def main(
    ctx: click.Context,
    instrument: str | None,
    chords: tuple[str, ...],
    output: str | None,
    generate_code: bool,
    size: int,
    debug: bool,
) -> None:
    """
    Draw fretboard chord diagrams for INSTRUMENT with LilyPond.

    \b
    Examples:
      chord-diagram guitar C Am G7
      chord-diagram -o cajun.png cajun Am D
      chord-diagram --lilypond ukulele Dsus2
    """
    _configure_logging(debug)
    config = DiagramConfig.from_env()

    if not config.has_lilypond():
        _fail("No LilyPond on the system")

    try:
        validate_size(size)
    except InvalidArgument as exc:
        _fail(str(exc))

    if instrument is None or not chords:
        click.echo(ctx.get_help(), err=True)
        sys.exit(1)

    try:
        spec = resolve_instrument(instrument)
    except UnknownInstrument as exc:
        _fail(str(exc), ctx)

    try:
        valid_chords = validate_chords(chords)
    except InvalidChordToken as exc:
        _fail(str(exc))

    request = DiagramRequest(instrument=spec, chords=valid_chords, size=size)

    # ── LilyPond source only ────────────────────────────────────────────────
    if generate_code:
        document = build_document(request, config)
        if output is None:
            click.echo(document, nl=False)
            return
        try:
            Path(output).write_text(document, encoding="utf-8")
        except OSError as exc:
            _fail(f"Could not write '{output}': {exc}")
        return

    # ── Render image ────────────────────────────────────────────────────────
    output_path = output if output is not None else os.path.join(os.getcwd(), request.default_filename())

    with DiagramExporter(config) as exporter:
        try:
            exporter.export(request, output_path)
        except RenderFailure as exc:
            if exc.stderr:
                click.echo(exc.stderr, err=True, nl=not exc.stderr.endswith("\n"))
            else:
                click.echo(str(exc), err=True)
            sys.exit(1)
        except MissingExternalTool as exc:
            _fail(str(exc))
        except OSError as exc:
            _fail(f"Could not write '{output_path}': {exc}")


def run() -> None:
    """
    Console script entry point.

    Runs ``main`` outside click's standalone mode so that usage errors
    (unknown option, missing option value, non-integer size) exit with
    status 1 like every other failure instead of click's default 2.
    """
    try:
        status = main.main(prog_name=PROGRAM_NAME, standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        sys.exit(1)
    except click.Abort:
        click.echo("Aborted!", err=True)
        sys.exit(1)
    sys.exit(status if isinstance(status, int) else 0)


if __name__ == "__main__":
    run()
