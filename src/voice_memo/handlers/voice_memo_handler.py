"""Handler for transcribing a voice memo and delivering the result."""

from collections.abc import Callable
from pathlib import Path

from voice_memo.config import AppConfig
from voice_memo.domain import (
    SUMMARIZATION_PRESETS,
    Destination,
    TranscriptBuilder,
    TranscriptionOptions,
    TranscriptionOutcome,
)
from voice_memo.domain.credentials import (
    ASSEMBLYAI_API_KEY,
    GEMINI_API_KEY,
    CredentialResolver,
)
from voice_memo.domain.job_poller import JobPoller
from voice_memo.domain.models import parse_speaker_count
from voice_memo.exceptions import AudioFileError
from voice_memo.infrastructure.interfaces import (
    Clipboard,
    NoteService,
    Prompter,
    SummarizationService,
    TranscriptionService,
)
from voice_memo.logging import setup_logging

logger = setup_logging()

TRANSCRIPT_DESTINATIONS = (Destination.SUMMARIZE, Destination.CLIPBOARD, Destination.NOTE)
PROCESSED_DESTINATIONS = (Destination.CLIPBOARD, Destination.NOTE)


class VoiceMemoHandler:
    """Orchestrates upload, transcription, optional summarization and delivery."""

    def __init__(
        self,
        config: AppConfig,
        credentials: CredentialResolver,
        prompter: Prompter,
        transcriber_factory: Callable[[str], TranscriptionService],
        summarizer_factory: Callable[[str], SummarizationService],
        clipboard: Clipboard,
        notes: NoteService,
        poller_factory: Callable[[TranscriptionService], JobPoller] | None = None,
        transcript_builder: TranscriptBuilder | None = None,
    ):
        self._config = config
        self._credentials = credentials
        self._prompter = prompter
        self._transcriber_factory = transcriber_factory
        self._summarizer_factory = summarizer_factory
        self._clipboard = clipboard
        self._notes = notes
        self._poller_factory = poller_factory or (
            lambda service: JobPoller(service, config.polling)
        )
        self._builder = transcript_builder or TranscriptBuilder()

    async def process(
        self,
        audio_path: Path,
        diarize: bool | None = None,
        speakers: int | None = None,
    ) -> TranscriptionOutcome:
        """
        Transcribes a voice memo and hands the text to the chosen destination.

        Args:
            audio_path: Local audio file.
            diarize: Pre-answers the diarization question when not None.
            speakers: Pre-answers the speaker count question when not None.

        Returns:
            TranscriptionOutcome describing what was produced and where it went.

        Raises:
            UserCancelled: If the user dismisses any prompt.
            VoiceMemoError: For every failure along the way.
        """
        api_key = self._credentials.resolve(ASSEMBLYAI_API_KEY)
        options = self._ask_options(diarize, speakers)
        options.validate_speakers()
        audio_data = self._read_audio(audio_path)

        logger.info(
            "Processing voice memo",
            extra={
                "file_name": audio_path.name,
                "size_bytes": len(audio_data),
                "speaker_labels": options.speaker_labels,
            },
        )

        transcriber = self._transcriber_factory(api_key)
        audio_url = await transcriber.upload(audio_data)
        job_id = await transcriber.submit(audio_url, options)
        logger.info("Transcription requested", extra={"job_id": job_id})

        job = await self._poller_factory(transcriber).wait_for_completion(job_id)
        transcript = self._builder.build(job)

        return await self._deliver(job_id, transcript)

    def _ask_options(
        self, diarize: bool | None, speakers: int | None
    ) -> TranscriptionOptions:
        if diarize is None:
            diarize = self._prompter.confirm_diarization()
        if not diarize:
            return TranscriptionOptions(speaker_labels=False)
        if speakers is None:
            speakers = parse_speaker_count(self._prompter.ask_speaker_count())
        return TranscriptionOptions(speaker_labels=True, speakers_expected=speakers)

    def _read_audio(self, audio_path: Path) -> bytes:
        if not audio_path.is_file():
            raise AudioFileError(str(audio_path), "file does not exist")
        try:
            audio_data = audio_path.read_bytes()
        except OSError as e:
            raise AudioFileError(str(audio_path), "could not read file data", e) from e
        if not audio_data:
            raise AudioFileError(str(audio_path), "file is empty")
        return audio_data

    async def _deliver(self, job_id: str, transcript: str) -> TranscriptionOutcome:
        destination = self._prompter.choose_destination(
            "Transcription Complete",
            "What would you like to do with the transcription?",
            TRANSCRIPT_DESTINATIONS,
        )
        logger.info("Destination chosen", extra={"destination": destination.name})

        if destination == Destination.CLIPBOARD:
            self._copy(transcript, "The transcription has been copied to your clipboard")
        elif destination == Destination.NOTE:
            self._save_note(transcript)
        else:
            return await self._summarize_and_deliver(job_id, transcript)

        return TranscriptionOutcome(
            job_id=job_id, transcript=transcript, destination=destination
        )

    async def _summarize_and_deliver(
        self, job_id: str, transcript: str
    ) -> TranscriptionOutcome:
        preset = self._prompter.choose_preset(SUMMARIZATION_PRESETS)
        api_key = self._credentials.resolve(GEMINI_API_KEY)
        summary = await self._summarizer_factory(api_key).summarize(transcript, preset)

        destination = self._prompter.choose_destination(
            "AI Processing Complete",
            "What would you like to do with the processed text?",
            PROCESSED_DESTINATIONS,
        )
        if destination == Destination.CLIPBOARD:
            self._copy(summary, "The processed text has been copied to your clipboard")
        else:
            self._save_note(summary, transcript)

        return TranscriptionOutcome(
            job_id=job_id,
            transcript=transcript,
            destination=destination,
            preset_name=preset.name,
            summary=summary,
        )

    def _copy(self, text: str, body: str) -> None:
        self._clipboard.copy(text)
        self._prompter.notify("Copied to Clipboard", body)

    def _save_note(self, text: str, original_text: str | None = None) -> None:
        self._notes.create_note(
            self._config.note.title, self._builder.build_note(text, original_text)
        )
        self._prompter.notify(
            "Saved to Bear", "The transcription has been saved as a new note in Bear"
        )
