"""Bear implementation of the NoteService interface."""

import webbrowser
from urllib.parse import quote

from voice_memo.exceptions import NoteCreationError
from voice_memo.logging import setup_logging

from .interfaces import NoteService

logger = setup_logging()

# Characters left unescaped by JavaScript's encodeURIComponent.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_uri_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def build_create_url(base_url: str, title: str, text: str) -> str:
    """Builds a Bear x-callback-url that creates and opens a new note."""
    return (
        f"{base_url}?title={encode_uri_component(title)}"
        f"&text={encode_uri_component(text)}&open_note=yes"
    )


class BearNoteService(NoteService):
    """Creates notes in Bear through its URL scheme."""

    def __init__(self, base_url: str, opener=webbrowser.open):
        self._base_url = base_url
        self._opener = opener

    def create_note(self, title: str, text: str) -> None:
        url = build_create_url(self._base_url, title, text)
        try:
            opened = self._opener(url)
        except webbrowser.Error as e:
            logger.exception("Opening note URL failed")
            raise NoteCreationError(url, e) from e
        if not opened:
            logger.error("Note URL was not handled", extra={"text_length": len(text)})
            raise NoteCreationError(url)
        logger.info("Note created", extra={"title": title})
