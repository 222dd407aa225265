"""Abstract interface for transcription service operations."""

from abc import ABC, abstractmethod

from voice_memo.domain.models import TranscriptionJob, TranscriptionOptions


class TranscriptionService(ABC):
    """Abstract base class for speech-to-text backends."""

    @abstractmethod
    async def upload(self, audio_data: bytes) -> str:
        """
        Uploads raw audio bytes.

        Args:
            audio_data: Raw audio file bytes, non-empty.

        Returns:
            Remote URL of the uploaded audio.

        Raises:
            UploadFailedError: If the service does not answer with HTTP 200.
            UploadUrlMissingError: If the response has no upload URL.
        """
        pass

    @abstractmethod
    async def submit(self, audio_url: str, options: TranscriptionOptions) -> str:
        """
        Requests transcription of previously uploaded audio.

        Returns:
            The id assigned to the new transcript.

        Raises:
            InvalidSpeakerCountError: If the options are invalid. No request is made.
            SubmitFailedError: If the service does not answer with HTTP 200.
            SubmitIdMissingError: If the response has no id.
        """
        pass

    @abstractmethod
    async def check_status(self, job_id: str) -> TranscriptionJob:
        """
        Fetches the current state of a transcript.

        Raises:
            StatusCheckFailedError: If the status could not be retrieved.
        """
        pass
