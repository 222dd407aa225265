"""AssemblyAI implementation of the TranscriptionService interface."""

import httpx

from voice_memo.config import AssemblyAIConfig
from voice_memo.domain.models import TranscriptionJob, TranscriptionOptions
from voice_memo.exceptions import (
    StatusCheckFailedError,
    SubmitFailedError,
    SubmitIdMissingError,
    UploadFailedError,
    UploadUrlMissingError,
)
from voice_memo.logging import setup_logging

from .interfaces import TranscriptionService

logger = setup_logging()


class AssemblyAITranscriber(TranscriptionService):
    """Handles the upload, submit and status calls of the AssemblyAI v2 REST API."""

    def __init__(self, client: httpx.AsyncClient, api_key: str, config: AssemblyAIConfig):
        self._client = client
        self._api_key = api_key
        self._base_url = config.base_url.rstrip("/")
        self._upload_timeout = config.upload_timeout_seconds
        self._request_timeout = config.request_timeout_seconds

    async def upload(self, audio_data: bytes) -> str:
        try:
            response = await self._client.post(
                f"{self._base_url}/upload",
                content=audio_data,
                headers={
                    "Authorization": self._api_key,
                    "Content-Type": "application/octet-stream",
                },
                timeout=self._upload_timeout,
            )
        except httpx.HTTPError as e:
            logger.exception("Audio upload request failed")
            raise UploadFailedError(None, e) from e

        logger.info(
            "Upload response received",
            extra={"status_code": response.status_code, "size_bytes": len(audio_data)},
        )
        if response.status_code != 200:
            raise UploadFailedError(response.status_code)

        try:
            upload_url = _json_object(response).get("upload_url")
        except ValueError as e:
            raise UploadUrlMissingError(e) from e
        if not upload_url:
            raise UploadUrlMissingError()
        return upload_url

    async def submit(self, audio_url: str, options: TranscriptionOptions) -> str:
        options.validate_speakers()
        body = build_transcript_request(audio_url, options)
        logger.info("Requesting transcription", extra={"request_body": body})

        try:
            response = await self._client.post(
                f"{self._base_url}/transcript",
                json=body,
                headers={"Authorization": self._api_key},
                timeout=self._request_timeout,
            )
        except httpx.HTTPError as e:
            logger.exception("Transcription request failed")
            raise SubmitFailedError(None, e) from e

        logger.info(
            "Transcription request response received",
            extra={"status_code": response.status_code},
        )
        if response.status_code != 200:
            raise SubmitFailedError(response.status_code)

        try:
            job_id = _json_object(response).get("id")
        except ValueError as e:
            raise SubmitIdMissingError(e) from e
        if not job_id:
            raise SubmitIdMissingError()
        return job_id

    async def check_status(self, job_id: str) -> TranscriptionJob:
        try:
            response = await self._client.get(
                f"{self._base_url}/transcript/{job_id}",
                headers={"Authorization": self._api_key},
                timeout=self._request_timeout,
            )
        except httpx.HTTPError as e:
            logger.exception("Status check request failed", extra={"job_id": job_id})
            raise StatusCheckFailedError(None, e) from e

        if response.status_code != 200:
            logger.error(
                "Status check failed",
                extra={"job_id": job_id, "status_code": response.status_code},
            )
            raise StatusCheckFailedError(response.status_code)

        try:
            return TranscriptionJob.from_response(_json_object(response))
        except (ValueError, KeyError) as e:
            logger.exception("Unexpected status payload", extra={"job_id": job_id})
            raise StatusCheckFailedError(response.status_code, e) from e


def build_transcript_request(audio_url: str, options: TranscriptionOptions) -> dict:
    """Builds the POST /transcript body."""
    body = {
        "audio_url": audio_url,
        "language_detection": True,
        "punctuate": True,
        "format_text": True,
        "speaker_labels": options.speaker_labels,
    }
    if options.speaker_labels and options.speakers_expected:
        body["speakers_expected"] = options.speakers_expected
    return body


def _json_object(response: httpx.Response) -> dict:
    """Decodes a response body that must be a JSON object."""
    payload = response.json()
    if not isinstance(payload, dict):
        raise ValueError(f"Expected a JSON object, got {type(payload).__name__}")
    return payload
