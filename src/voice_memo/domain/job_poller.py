"""Drives a submitted transcript to a terminal state."""

import asyncio
from collections.abc import Awaitable, Callable

from voice_memo.config import PollingConfig
from voice_memo.exceptions import TranscriptionFailedError, TranscriptionTimeoutError
from voice_memo.infrastructure.interfaces import TranscriptionService
from voice_memo.logging import setup_logging

from .models import JobStatus, TranscriptionJob

logger = setup_logging()


class JobPoller:
    """Polls transcript status at a fixed interval for a bounded number of checks."""

    def __init__(
        self,
        service: TranscriptionService,
        config: PollingConfig,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self._service = service
        self._max_attempts = config.max_attempts
        self._interval = config.interval_seconds
        self._sleep = sleep

    async def wait_for_completion(self, job_id: str) -> TranscriptionJob:
        """
        Checks the job until it completes, fails, or the attempts run out.

        Args:
            job_id: Id returned by the submission.

        Returns:
            The completed job snapshot.

        Raises:
            TranscriptionFailedError: On the first error status, without waiting.
            TranscriptionTimeoutError: After max_attempts non-terminal checks.
            StatusCheckFailedError: If a status check fails.
        """
        for attempt in range(1, self._max_attempts + 1):
            logger.info(
                "Checking transcript status",
                extra={
                    "job_id": job_id,
                    "attempt": attempt,
                    "max_attempts": self._max_attempts,
                },
            )
            job = await self._service.check_status(job_id)

            if job.status == JobStatus.COMPLETED:
                logger.info("Transcript completed", extra={"job_id": job_id})
                return job
            if job.status == JobStatus.ERROR:
                logger.error(
                    "Transcript failed",
                    extra={"job_id": job_id, "remote_error": job.error},
                )
                raise TranscriptionFailedError(job.error)

            await self._sleep(self._interval)

        raise TranscriptionTimeoutError(job_id, self._max_attempts)
