"""Custom exceptions for the voice memo transcriber."""


class VoiceMemoError(Exception):
    """Base class for failures surfaced to the user."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class UserCancelled(Exception):
    """Raised when the user dismisses a prompt. Ends the flow without an error."""


class CredentialMissingError(VoiceMemoError):
    """Raised when a required API key is neither stored nor entered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"API key '{name}' is required")


class AudioFileError(VoiceMemoError):
    """Raised when the audio file cannot be used as upload input."""

    def __init__(self, path: str, reason: str, cause: Exception | None = None):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read audio file '{path}': {reason}", cause)


class InvalidSpeakerCountError(VoiceMemoError):
    """Raised when the expected speaker count is missing or outside 1-10."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(
            f"Please enter a valid number of speakers (1-10), got {value!r}"
        )


class UploadFailedError(VoiceMemoError):
    """Raised when the audio upload does not return HTTP 200."""

    def __init__(self, status_code: int | None, cause: Exception | None = None):
        self.status_code = status_code
        super().__init__(f"Upload failed with status {status_code}", cause)


class UploadUrlMissingError(VoiceMemoError):
    """Raised when the upload response carries no upload URL."""

    def __init__(self, cause: Exception | None = None):
        super().__init__("No upload URL in response", cause)


class SubmitFailedError(VoiceMemoError):
    """Raised when the transcription request does not return HTTP 200."""

    def __init__(self, status_code: int | None, cause: Exception | None = None):
        self.status_code = status_code
        super().__init__(
            f"Transcription request failed with status {status_code}", cause
        )


class SubmitIdMissingError(VoiceMemoError):
    """Raised when the transcription request response carries no job id."""

    def __init__(self, cause: Exception | None = None):
        super().__init__("No transcription ID in response", cause)


class StatusCheckFailedError(VoiceMemoError):
    """Raised when a transcript status check cannot be completed."""

    def __init__(self, status_code: int | None, cause: Exception | None = None):
        self.status_code = status_code
        super().__init__(f"Status check failed with status {status_code}", cause)


class TranscriptionFailedError(VoiceMemoError):
    """Raised when the remote service reports the job as failed."""

    def __init__(self, message: str | None):
        self.remote_message = message
        super().__init__(message or "Transcription failed")


class TranscriptionTimeoutError(VoiceMemoError):
    """Raised when polling ends without the job reaching a terminal state."""

    def __init__(self, job_id: str, attempts: int):
        self.job_id = job_id
        self.attempts = attempts
        super().__init__(
            f"Transcription timed out after {attempts} status checks (job '{job_id}')"
        )


class NoSummaryCandidateError(VoiceMemoError):
    """Raised when Gemini returns no usable candidate."""

    def __init__(self):
        super().__init__("No response from Gemini API")


class SummarizationRequestError(VoiceMemoError):
    """Raised when the Gemini request itself fails."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message, cause)


class NoteCreationError(VoiceMemoError):
    """Raised when the note app URL could not be opened."""

    def __init__(self, url: str, cause: Exception | None = None):
        self.url = url
        super().__init__("Could not open the note app to create a note", cause)


class ClipboardError(VoiceMemoError):
    """Raised when text could not be copied to the clipboard."""

    def __init__(self, cause: Exception | None = None):
        super().__init__("Could not copy text to the clipboard", cause)
