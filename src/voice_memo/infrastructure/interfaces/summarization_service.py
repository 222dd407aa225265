"""Abstract interface for summarization operations."""

from abc import ABC, abstractmethod

from voice_memo.domain.models import SummarizationPreset


class SummarizationService(ABC):
    """Abstract base class for generative-text backends."""

    @abstractmethod
    async def summarize(self, text: str, preset: SummarizationPreset) -> str:
        """
        Transforms a transcript according to a preset.

        Args:
            text: The transcript text.
            preset: Prompt and temperature to apply.

        Returns:
            The generated text.

        Raises:
            NoSummaryCandidateError: If the model returned no candidate.
            SummarizationRequestError: If the request failed.
        """
        pass
