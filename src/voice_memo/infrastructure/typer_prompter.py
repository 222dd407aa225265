"""Terminal implementation of the Prompter interface."""

from collections.abc import Sequence

import typer

from voice_memo.domain.models import Destination, SummarizationPreset
from voice_memo.exceptions import UserCancelled

from .interfaces import Prompter


class TyperPrompter(Prompter):
    """Asks questions on the terminal. Ctrl-C, EOF or choice 0 cancel."""

    def ask_secret(self, title: str, message: str) -> str:
        typer.secho(title, bold=True)
        try:
            return typer.prompt(message, default="", hide_input=True, show_default=False)
        except typer.Abort as e:
            raise UserCancelled() from e

    def confirm_diarization(self) -> bool:
        typer.secho("Speaker Diarization", bold=True)
        try:
            return typer.confirm(
                "Would you like to identify different speakers in the audio?"
            )
        except typer.Abort as e:
            raise UserCancelled() from e

    def ask_speaker_count(self, default: str = "2") -> str:
        typer.secho("Number of Speakers", bold=True)
        try:
            return typer.prompt("How many speakers are in the audio? (1-10)", default=default)
        except typer.Abort as e:
            raise UserCancelled() from e

    def choose_destination(
        self, title: str, message: str, choices: Sequence[Destination]
    ) -> Destination:
        return self._choose(title, message, [c.value for c in choices], choices)

    def choose_preset(
        self, presets: Sequence[SummarizationPreset]
    ) -> SummarizationPreset:
        labels = [f"{p.name} - {p.description}" for p in presets]
        return self._choose(
            "Process with Gemini AI",
            "Choose how to process the transcript:",
            labels,
            presets,
        )

    def notify(self, title: str, body: str) -> None:
        typer.secho(title, fg=typer.colors.GREEN, bold=True)
        typer.echo(body)

    def _choose(self, title, message, labels, values):
        typer.secho(title, bold=True)
        typer.echo(message)
        for index, label in enumerate(labels, start=1):
            typer.echo(f"  {index}. {label}")
        typer.echo("  0. Cancel")

        while True:
            try:
                selected = typer.prompt("Choice", type=int)
            except typer.Abort as e:
                raise UserCancelled() from e
            if selected == 0:
                raise UserCancelled()
            if 1 <= selected <= len(values):
                return values[selected - 1]
            typer.secho(f"Enter a number between 0 and {len(values)}", err=True)
