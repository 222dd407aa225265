"""
Voice Memo Transcriber.

CLI entry point. Parses arguments, runs the handler, and turns failures into
a message and an exit code. Cancelling a prompt ends the run quietly.
"""

import asyncio
from pathlib import Path

import httpx
import typer

from voice_memo.dependencies import get_config, get_handler
from voice_memo.domain import SUMMARIZATION_PRESETS
from voice_memo.exceptions import UserCancelled, VoiceMemoError
from voice_memo.logging import setup_logging

logger = setup_logging()

app = typer.Typer(
    name="voice-memo",
    help="Transcribe voice memos with AssemblyAI and process them with Gemini.",
    no_args_is_help=True,
)


async def _run(audio_path: Path, diarize: bool | None, speakers: int | None) -> None:
    config = get_config()
    async with httpx.AsyncClient() as http_client:
        handler = get_handler(config, http_client)
        await handler.process(audio_path, diarize=diarize, speakers=speakers)


@app.command()
def transcribe(
    audio_path: Path = typer.Argument(..., help="Voice memo audio file"),
    diarize: bool | None = typer.Option(
        None,
        "--diarize/--no-diarize",
        help="Identify different speakers (asked interactively when omitted)",
    ),
    speakers: int | None = typer.Option(
        None, "--speakers", "-s", help="Expected number of speakers (1-10)"
    ),
) -> None:
    """
    Transcribe a voice memo and send the text to the clipboard, Bear or Gemini.
    """
    try:
        asyncio.run(_run(audio_path, diarize, speakers))
    except UserCancelled:
        logger.info("Run cancelled by user")
        raise typer.Exit(code=0)
    except VoiceMemoError as e:
        logger.error("Run failed", extra={"error": str(e)})
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.command()
def presets() -> None:
    """
    List the Gemini processing presets.
    """
    for preset in SUMMARIZATION_PRESETS:
        typer.echo(f"{preset.name}: {preset.description}")

