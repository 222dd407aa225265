"""Abstract interface for API key storage."""

from abc import ABC, abstractmethod


class CredentialStore(ABC):
    """Persists secret API keys between runs."""

    @abstractmethod
    def get(self, name: str) -> str | None:
        """Returns the stored secret, or None when absent."""
        pass

    @abstractmethod
    def set(self, name: str, secret: str) -> None:
        """Stores a secret under the given name."""
        pass
