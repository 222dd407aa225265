"""Abstract interfaces for result destinations."""

from abc import ABC, abstractmethod


class Clipboard(ABC):
    """System clipboard."""

    @abstractmethod
    def copy(self, text: str) -> None:
        pass


class NoteService(ABC):
    """External note-taking app."""

    @abstractmethod
    def create_note(self, title: str, text: str) -> None:
        """
        Creates a new note.

        Raises:
            NoteCreationError: If the note app could not be reached.
        """
        pass
