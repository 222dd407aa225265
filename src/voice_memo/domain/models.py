"""Domain models for voice memo transcription."""

from enum import Enum

from pydantic import BaseModel, model_validator

from voice_memo.exceptions import InvalidSpeakerCountError

MIN_SPEAKERS = 1
MAX_SPEAKERS = 10


class JobStatus(str, Enum):
    """Status reported by AssemblyAI for a transcript."""

    QUEUED = "queued"
    PROCESSING = "processing"
    COMPLETED = "completed"
    ERROR = "error"


class TranscriptionOptions(BaseModel, frozen=True):
    """
    Options sent along with a transcription request.

    A speaker count is only kept when speaker labels are requested, so a
    count supplied together with speaker_labels=False is dropped.
    """

    speaker_labels: bool = False
    speakers_expected: int | None = None

    @model_validator(mode="before")
    @classmethod
    def _drop_count_without_labels(cls, data):
        if isinstance(data, dict) and not data.get("speaker_labels"):
            data = {**data, "speakers_expected": None}
        return data

    def validate_speakers(self) -> None:
        """
        Checks the speaker count invariant.

        Raises:
            InvalidSpeakerCountError: If diarization is requested without a
                count in [1, 10].
        """
        if not self.speaker_labels:
            return
        count = self.speakers_expected
        if count is None or not MIN_SPEAKERS <= count <= MAX_SPEAKERS:
            raise InvalidSpeakerCountError(count)


def parse_speaker_count(raw: str) -> int:
    """Parses a user-entered speaker count, rejecting anything outside 1-10."""
    try:
        count = int(raw.strip())
    except (AttributeError, ValueError) as e:
        raise InvalidSpeakerCountError(raw) from e
    if not MIN_SPEAKERS <= count <= MAX_SPEAKERS:
        raise InvalidSpeakerCountError(count)
    return count


class Utterance(BaseModel, frozen=True):
    """A single speaker utterance from transcription."""

    speaker: str
    text: str


class TranscriptionJob(BaseModel, frozen=True):
    """
    Snapshot of a transcript as returned by one status check.

    Snapshots are replaced wholesale on every poll and never patched.
    """

    id: str
    status: JobStatus
    speaker_labels: bool = False
    text: str | None = None
    utterances: list[Utterance] | None = None
    error: str | None = None

    @classmethod
    def from_response(cls, data: dict) -> "TranscriptionJob":
        """Builds a snapshot from a decoded GET /transcript/{id} body."""
        return cls(
            id=data["id"],
            status=JobStatus(data["status"]),
            speaker_labels=bool(data.get("speaker_labels")),
            text=data.get("text"),
            utterances=data.get("utterances"),
            error=data.get("error"),
        )


class SummarizationPreset(BaseModel, frozen=True):
    """A named prompt and sampling temperature for the Gemini call."""

    name: str
    description: str
    system_prompt: str
    temperature: float


class Destination(str, Enum):
    """Where the user chose to send a finished text."""

    SUMMARIZE = "Process with Gemini AI"
    CLIPBOARD = "Copy to Clipboard"
    NOTE = "Save to Bear"


class TranscriptionOutcome(BaseModel, frozen=True):
    """Result of one end-to-end run."""

    job_id: str
    transcript: str
    destination: Destination | None = None
    preset_name: str | None = None
    summary: str | None = None
