from __future__ import annotations

import asyncio

import pytest

from voice_memo.config import PollingConfig
from voice_memo.domain.job_poller import JobPoller
from voice_memo.domain.models import JobStatus, TranscriptionJob
from voice_memo.exceptions import (
    StatusCheckFailedError,
    TranscriptionFailedError,
    TranscriptionTimeoutError,
)
from voice_memo.infrastructure.interfaces import TranscriptionService


class ScriptedService(TranscriptionService):
    """Answers status checks from a fixed sequence of snapshots."""

    def __init__(self, snapshots):  # noqa: ANN001
        self._snapshots = list(snapshots)
        self.checks = 0

    async def upload(self, audio_data: bytes) -> str:
        raise AssertionError("not used")

    async def submit(self, audio_url, options) -> str:  # noqa: ANN001
        raise AssertionError("not used")

    async def check_status(self, job_id: str) -> TranscriptionJob:
        snapshot = self._snapshots[self.checks]
        self.checks += 1
        if isinstance(snapshot, Exception):
            raise snapshot
        return snapshot


class RecordingSleep:
    def __init__(self):
        self.delays: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


def _job(status: JobStatus, **fields) -> TranscriptionJob:
    return TranscriptionJob(id="job-1", status=status, **fields)


def _run(coro):  # noqa: ANN001
    return asyncio.run(coro)


def test_returns_completed_snapshot_after_two_waits():
    service = ScriptedService(
        [
            _job(JobStatus.PROCESSING),
            _job(JobStatus.PROCESSING),
            _job(JobStatus.COMPLETED, text="done"),
        ]
    )
    sleep = RecordingSleep()

    job = _run(JobPoller(service, PollingConfig(), sleep).wait_for_completion("job-1"))

    assert job.text == "done"
    assert service.checks == 3
    assert sleep.delays == [3.0, 3.0]
    assert sum(sleep.delays) >= 6


def test_queued_is_treated_as_in_progress():
    service = ScriptedService([_job(JobStatus.QUEUED), _job(JobStatus.COMPLETED, text="x")])
    sleep = RecordingSleep()

    _run(JobPoller(service, PollingConfig(), sleep).wait_for_completion("job-1"))

    assert service.checks == 2
    assert sleep.delays == [3.0]


def test_times_out_after_exactly_forty_checks():
    service = ScriptedService([_job(JobStatus.PROCESSING)] * 41)
    sleep = RecordingSleep()

    with pytest.raises(TranscriptionTimeoutError) as exc_info:
        _run(JobPoller(service, PollingConfig(), sleep).wait_for_completion("job-1"))

    assert service.checks == 40
    assert exc_info.value.attempts == 40
    assert exc_info.value.job_id == "job-1"
    assert sleep.delays == [3.0] * 40


def test_error_on_first_check_fails_without_waiting():
    service = ScriptedService([_job(JobStatus.ERROR, error="Audio file is corrupt")])
    sleep = RecordingSleep()

    with pytest.raises(TranscriptionFailedError) as exc_info:
        _run(JobPoller(service, PollingConfig(), sleep).wait_for_completion("job-1"))

    assert str(exc_info.value) == "Audio file is corrupt"
    assert service.checks == 1
    assert sleep.delays == []


def test_error_without_message_uses_generic_text():
    service = ScriptedService([_job(JobStatus.ERROR)])

    with pytest.raises(TranscriptionFailedError, match="Transcription failed"):
        _run(JobPoller(service, PollingConfig(), RecordingSleep()).wait_for_completion("job-1"))


def test_status_check_failure_is_not_retried():
    service = ScriptedService(
        [_job(JobStatus.PROCESSING), StatusCheckFailedError(503), _job(JobStatus.COMPLETED)]
    )
    sleep = RecordingSleep()

    with pytest.raises(StatusCheckFailedError):
        _run(JobPoller(service, PollingConfig(), sleep).wait_for_completion("job-1"))

    assert service.checks == 2


def test_respects_configured_bounds():
    service = ScriptedService([_job(JobStatus.PROCESSING)] * 5)
    sleep = RecordingSleep()
    config = PollingConfig(max_attempts=3, interval_seconds=0.5)

    with pytest.raises(TranscriptionTimeoutError):
        _run(JobPoller(service, config, sleep).wait_for_completion("job-1"))

    assert service.checks == 3
    assert sleep.delays == [0.5, 0.5, 0.5]
