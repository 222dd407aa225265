"""Resolution of API keys from the store or the user."""

from voice_memo.exceptions import CredentialMissingError
from voice_memo.infrastructure.interfaces import CredentialStore, Prompter

ASSEMBLYAI_API_KEY = "ASSEMBLYAI_API_KEY"
GEMINI_API_KEY = "GEMINI_API_KEY"

_LABELS = {
    ASSEMBLYAI_API_KEY: "AssemblyAI",
    GEMINI_API_KEY: "Gemini",
}


class CredentialResolver:
    """Returns stored keys, asking for and saving them when absent."""

    def __init__(self, store: CredentialStore, prompter: Prompter):
        self._store = store
        self._prompter = prompter

    def resolve(self, name: str) -> str:
        """
        Resolves an API key.

        Raises:
            UserCancelled: If the user dismisses the prompt.
            CredentialMissingError: If the user submits an empty key.
        """
        secret = self._store.get(name)
        if secret:
            return secret

        label = _LABELS.get(name, name)
        secret = self._prompter.ask_secret(
            f"{label} API Key Required",
            f"Please enter your {label} API key",
        ).strip()
        if not secret:
            raise CredentialMissingError(name)

        self._store.set(name, secret)
        return secret
