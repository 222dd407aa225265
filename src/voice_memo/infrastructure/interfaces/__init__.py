"""Infrastructure interface exports."""

from .credential_store import CredentialStore
from .delivery import Clipboard, NoteService
from .prompter import Prompter
from .summarization_service import SummarizationService
from .transcription_service import TranscriptionService

__all__ = [
    "Clipboard",
    "CredentialStore",
    "NoteService",
    "Prompter",
    "SummarizationService",
    "TranscriptionService",
]
