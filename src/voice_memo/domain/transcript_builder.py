"""Formatting of finished transcripts and note bodies."""

from voice_memo.exceptions import TranscriptionFailedError

from .models import TranscriptionJob, Utterance


class TranscriptBuilder:
    """Builds readable text from completed transcription jobs."""

    def build(self, job: TranscriptionJob) -> str:
        """
        Builds the transcript text for a completed job.

        Args:
            job: A snapshot with status completed.

        Returns:
            Speaker-labeled text when diarization was requested, the flat
            transcript otherwise.

        Raises:
            TranscriptionFailedError: If the job carries no text at all.
        """
        if job.speaker_labels and job.utterances:
            return self._format(job.utterances)
        if job.text is None:
            raise TranscriptionFailedError("Transcription returned no text")
        return job.text

    def build_note(self, text: str, original_text: str | None = None) -> str:
        """Combines a processed text with its source transcript for a note."""
        if not original_text:
            return text
        return (
            f"## Gemini Processed Result\n\n{text}\n\n---\n\n"
            f"## Full Transcription\n\n{original_text}"
        )

    def _format(self, utterances: list[Utterance]) -> str:
        """Formats utterances into a readable transcript."""
        return "\n\n".join(f"Speaker {u.speaker}: {u.text}" for u in utterances)
