import pytest

from voice_memo.domain import JobStatus, TranscriptBuilder, TranscriptionJob, Utterance
from voice_memo.exceptions import TranscriptionFailedError


def _completed(**fields) -> TranscriptionJob:
    return TranscriptionJob(id="job-1", status=JobStatus.COMPLETED, **fields)


def test_diarized_transcript_joins_speakers_with_blank_lines():
    job = _completed(
        speaker_labels=True,
        text="Hi Bye",
        utterances=[Utterance(speaker="A", text="Hi"), Utterance(speaker="B", text="Bye")],
    )

    assert TranscriptBuilder().build(job) == "Speaker A: Hi\n\nSpeaker B: Bye"


def test_flat_transcript_when_speakers_not_requested():
    job = _completed(
        speaker_labels=False,
        text="Hi Bye",
        utterances=[Utterance(speaker="A", text="Hi Bye")],
    )

    assert TranscriptBuilder().build(job) == "Hi Bye"


def test_falls_back_to_text_when_utterances_missing():
    job = _completed(speaker_labels=True, text="Only text")

    assert TranscriptBuilder().build(job) == "Only text"


def test_missing_text_raises():
    with pytest.raises(TranscriptionFailedError, match="no text"):
        TranscriptBuilder().build(_completed())


def test_note_body_with_original_has_both_sections():
    note = TranscriptBuilder().build_note("Summary here", "Speaker A: Hi")

    assert note == (
        "## Gemini Processed Result\n\nSummary here\n\n---\n\n"
        "## Full Transcription\n\nSpeaker A: Hi"
    )


def test_note_body_without_original_is_the_text():
    assert TranscriptBuilder().build_note("Just text") == "Just text"
