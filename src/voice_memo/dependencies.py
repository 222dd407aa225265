"""Dependency injection configuration for the voice memo transcriber."""

import httpx
from google import genai

from voice_memo.config import AppConfig, load_config
from voice_memo.domain.credentials import CredentialResolver
from voice_memo.handlers import VoiceMemoHandler
from voice_memo.infrastructure import (
    AssemblyAITranscriber,
    BearNoteService,
    DotenvCredentialStore,
    GeminiSummarizer,
    PbcopyClipboard,
    TyperPrompter,
)
from voice_memo.infrastructure.interfaces import (
    CredentialStore,
    SummarizationService,
    TranscriptionService,
)


def get_config() -> AppConfig:
    """Returns the configuration for this run."""
    return load_config()


def get_credential_store(config: AppConfig) -> CredentialStore:
    """Returns the configured credential store."""
    return DotenvCredentialStore(config.credentials.file_path)


def get_transcriber_factory(config: AppConfig, http_client: httpx.AsyncClient):
    """Returns a factory binding the AssemblyAI key into a transcriber."""

    def build(api_key: str) -> TranscriptionService:
        return AssemblyAITranscriber(http_client, api_key, config.assemblyai)

    return build


def get_summarizer_factory(config: AppConfig):
    """Returns a factory binding the Gemini key into a summarizer."""

    def build(api_key: str) -> SummarizationService:
        client = genai.Client(
            api_key=api_key,
            http_options={"base_url": config.gemini.base_url},
        )
        return GeminiSummarizer(client, config.gemini.model_name)

    return build


def get_handler(config: AppConfig, http_client: httpx.AsyncClient) -> VoiceMemoHandler:
    """Returns the configured voice memo handler."""
    prompter = TyperPrompter()
    return VoiceMemoHandler(
        config=config,
        credentials=CredentialResolver(get_credential_store(config), prompter),
        prompter=prompter,
        transcriber_factory=get_transcriber_factory(config, http_client),
        summarizer_factory=get_summarizer_factory(config),
        clipboard=PbcopyClipboard(),
        notes=BearNoteService(config.note.url_scheme_base),
    )
