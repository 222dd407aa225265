"""Domain layer exports."""

from .models import (
    Destination,
    JobStatus,
    SummarizationPreset,
    TranscriptionJob,
    TranscriptionOptions,
    TranscriptionOutcome,
    Utterance,
)
from .presets import SUMMARIZATION_PRESETS, get_preset
from .transcript_builder import TranscriptBuilder

__all__ = [
    "Destination",
    "JobStatus",
    "SummarizationPreset",
    "TranscriptionJob",
    "TranscriptionOptions",
    "TranscriptionOutcome",
    "Utterance",
    "SUMMARIZATION_PRESETS",
    "get_preset",
    "TranscriptBuilder",
]
