"""Infrastructure layer exports."""

from .assemblyai_transcriber import AssemblyAITranscriber
from .bear_notes import BearNoteService
from .dotenv_credentials import DotenvCredentialStore
from .gemini_summarizer import GeminiSummarizer
from .pasteboard import PbcopyClipboard
from .typer_prompter import TyperPrompter

__all__ = [
    "AssemblyAITranscriber",
    "BearNoteService",
    "DotenvCredentialStore",
    "GeminiSummarizer",
    "PbcopyClipboard",
    "TyperPrompter",
]
