#!/usr/bin/env python3
"""
nepali_font_converter.cli.cli

Typer-based CLI for converting text between legacy Nepali fonts and Unicode.

The conversion itself is performed by the remote font service; this CLI
detects the source font, splits the input into same-font runs and prints the
converted text.

Examples
--------
List supported fonts:

    nepali-font-convert fonts

Convert Preeti text to Unicode:

    NEPALI_FONT_SERVICE_URL=https://example.org/convert \\
        nepali-font-convert convert "g]kfnL" --font Preeti --to UNICODE
"""

from __future__ import annotations

import logging
import traceback
from typing import TYPE_CHECKING

import typer

from nepali_font_converter.errors import FontConverterError

if TYPE_CHECKING:
    from nepali_font_converter.config import ServiceSettings

app = typer.Typer(
    name="nepali-font-convert",
    help="Convert Nepali text between legacy fonts and Unicode.",
    no_args_is_help=True,
)

SERVICE_URL_HELP = "Conversion service URL (overrides NEPALI_FONT_SERVICE_URL)."
CLIENT_ID_HELP = "Client identifier sent with every request."
TIMEOUT_HELP = "Per-request timeout in seconds."
FONT_HELP = "Installed font name the text is written in."
EXIT_REMOTE_FAILURE = 2


def _print_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly error.

    Parameters
    ----------
    exc : Exception
        Exception raised by a command.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"✗ {type(exc).__name__}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _settings(
    service_url: str | None,
    client_id: str | None,
    timeout: float | None,
) -> ServiceSettings:
    from nepali_font_converter.config import load_settings

    return load_settings(
        conversion_url=service_url,
        client_id=client_id,
        timeout_seconds=timeout,
    )


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging."),
) -> None:
    """Initialize shared CLI state."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("fonts")
def fonts_cmd() -> None:
    """List supported fonts as KEY, installed name and label."""
    from nepali_font_converter.fonts.registry import DEFAULT_REGISTRY

    for entry in DEFAULT_REGISTRY:
        typer.echo(f"{entry.key}\t{entry.local_name}\t{entry.label}")


@app.command("detect")
def detect_cmd(
    text: str = typer.Argument(..., help="Text to classify."),
    font: str = typer.Option("Mangal", "--font", help=FONT_HELP),
) -> None:
    """Print the source font key the text would be converted from."""
    from nepali_font_converter.api import detect_source_font

    key = detect_source_font(text, font)
    typer.echo(key if key is not None else "unsupported")


@app.command("targets")
def targets_cmd(
    text: str = typer.Argument(..., help="Text to offer targets for."),
    font: str = typer.Option("Mangal", "--font", help=FONT_HELP),
) -> None:
    """Print the labels the text can be converted into."""
    from nepali_font_converter.api import target_fonts_for

    for label in target_fonts_for(text, font):
        typer.echo(label)


@app.command("convert")
def convert_cmd(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Text to convert."),
    font: str = typer.Option(..., "--font", help=FONT_HELP),
    to: str = typer.Option(
        ..., "--to", help="Target font as key, installed name or label."
    ),
    service_url: str | None = typer.Option(None, "--service-url", help=SERVICE_URL_HELP),
    client_id: str | None = typer.Option(None, "--client-id", help=CLIENT_ID_HELP),
    timeout: float | None = typer.Option(None, "--timeout", min=0.1, help=TIMEOUT_HELP),
) -> None:
    """Convert text through the remote font service.

    Parameters
    ----------
    ctx : typer.Context
        Typer context containing global options.
    text : str
        Text to convert.
    font : str
        Installed font name of ``text``.
    to : str
        Destination font.

    Notes
    -----
    - Runs whose font cannot be resolved are left unchanged.
    - Exits with code 2 when the service reported a failure.
    """
    debug: bool = bool(ctx.obj.get("debug", False))

    try:
        from nepali_font_converter.api import convert_text

        settings = _settings(service_url, client_id, timeout)
        result = convert_text(text, font, to, settings)
    except FontConverterError as exc:
        raise typer.Exit(code=_print_error(exc, debug))
    except Exception as exc:
        # Unexpected crash: still show a clean message; debug prints traceback.
        raise typer.Exit(code=_print_error(exc, debug))

    typer.echo(result.text)
    typer.echo(f"font: {', '.join(result.font_names)}", err=True)
    if result.session.notice is not None:
        typer.echo(result.session.notice.message, err=True)
        raise typer.Exit(code=EXIT_REMOTE_FAILURE)


@app.command("probe")
def probe_cmd(
    ctx: typer.Context,
    service_url: str | None = typer.Option(None, "--service-url", help=SERVICE_URL_HELP),
    client_id: str | None = typer.Option(None, "--client-id", help=CLIENT_ID_HELP),
    timeout: float | None = typer.Option(None, "--timeout", min=0.1, help=TIMEOUT_HELP),
) -> None:
    """Check that the conversion service is reachable."""
    debug: bool = bool(ctx.obj.get("debug", False))

    try:
        from nepali_font_converter.api import probe

        available = probe(_settings(service_url, client_id, timeout))
    except FontConverterError as exc:
        raise typer.Exit(code=_print_error(exc, debug))

    if not available:
        typer.echo(
            "✗ The remote font service is currently unavailable, "
            "please try again later.",
            err=True,
        )
        raise typer.Exit(code=EXIT_REMOTE_FAILURE)
    typer.echo("✓ Service available")


if __name__ == "__main__":
    app()
