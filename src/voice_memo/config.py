"""Application configuration loaded from environment variables."""

import os
from pathlib import Path

from pydantic import BaseModel


class AssemblyAIConfig(BaseModel, frozen=True):
    """AssemblyAI API configuration."""

    base_url: str = "https://api.assemblyai.com/v2"
    upload_timeout_seconds: float = 120.0
    request_timeout_seconds: float = 30.0


class PollingConfig(BaseModel, frozen=True):
    """Transcript status polling bounds."""

    max_attempts: int = 40
    interval_seconds: float = 3.0


class GeminiConfig(BaseModel, frozen=True):
    """Gemini generative-text configuration."""

    base_url: str = "https://generativelanguage.googleapis.com"
    model_name: str = "gemini-2.0-flash-exp"


class NoteConfig(BaseModel, frozen=True):
    """Note app URL scheme configuration."""

    title: str = "Voice Memo Transcription"
    url_scheme_base: str = "bear://x-callback-url/create"


class CredentialConfig(BaseModel, frozen=True):
    """Location of the persisted API keys."""

    file_path: Path = Path("~/.config/voice-memo/credentials.env")


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    assemblyai: AssemblyAIConfig = AssemblyAIConfig()
    polling: PollingConfig = PollingConfig()
    gemini: GeminiConfig = GeminiConfig()
    note: NoteConfig = NoteConfig()
    credentials: CredentialConfig = CredentialConfig()
    log_level: str = "INFO"


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        assemblyai=AssemblyAIConfig(
            base_url=os.getenv("ASSEMBLYAI_BASE_URL", "https://api.assemblyai.com/v2"),
        ),
        gemini=GeminiConfig(
            model_name=os.getenv("GEMINI_MODEL", "gemini-2.0-flash-exp"),
        ),
        credentials=CredentialConfig(
            file_path=Path(
                os.getenv(
                    "VOICE_MEMO_CREDENTIALS_FILE",
                    "~/.config/voice-memo/credentials.env",
                )
            ).expanduser(),
        ),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )
