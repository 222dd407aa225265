"""Abstract interface for user interaction."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from voice_memo.domain.models import Destination, SummarizationPreset


class Prompter(ABC):
    """
    Asks the user for decisions and input.

    Every method raises UserCancelled when the user dismisses the prompt.
    """

    @abstractmethod
    def ask_secret(self, title: str, message: str) -> str:
        """Asks for a secret value. May return an empty string."""
        pass

    @abstractmethod
    def confirm_diarization(self) -> bool:
        """Asks whether speakers should be identified."""
        pass

    @abstractmethod
    def ask_speaker_count(self, default: str = "2") -> str:
        """Asks for the expected speaker count as raw text."""
        pass

    @abstractmethod
    def choose_destination(
        self, title: str, message: str, choices: Sequence[Destination]
    ) -> Destination:
        """Asks where a finished text should go."""
        pass

    @abstractmethod
    def choose_preset(
        self, presets: Sequence[SummarizationPreset]
    ) -> SummarizationPreset:
        """Asks which summarization preset to apply."""
        pass

    @abstractmethod
    def notify(self, title: str, body: str) -> None:
        """Shows a short confirmation."""
        pass
