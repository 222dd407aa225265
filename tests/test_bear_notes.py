from urllib.parse import parse_qs, urlsplit

import pytest

from voice_memo.exceptions import NoteCreationError
from voice_memo.infrastructure.bear_notes import (
    BearNoteService,
    build_create_url,
    encode_uri_component,
)

BASE = "bear://x-callback-url/create"


def test_reserved_characters_round_trip():
    text = "Speaker A: a=1 & b=2\n\nSpeaker B: 50% done? #tag +plus é"

    url = build_create_url(BASE, "Voice Memo Transcription", text)
    params = parse_qs(urlsplit(url).query, keep_blank_values=True)

    assert params["text"] == [text]
    assert params["title"] == ["Voice Memo Transcription"]
    assert params["open_note"] == ["yes"]


def test_encoding_matches_encode_uri_component():
    assert encode_uri_component("Voice Memo") == "Voice%20Memo"
    assert encode_uri_component("a&b=c\n") == "a%26b%3Dc%0A"
    assert encode_uri_component("it's (ok)!*~") == "it's%20(ok)!*~"


def test_create_note_opens_url():
    opened = []

    def opener(url):  # noqa: ANN001
        opened.append(url)
        return True

    BearNoteService(BASE, opener=opener).create_note("Title", "Body")

    assert opened == [f"{BASE}?title=Title&text=Body&open_note=yes"]


def test_create_note_raises_when_url_not_handled():
    service = BearNoteService(BASE, opener=lambda url: False)

    with pytest.raises(NoteCreationError):
        service.create_note("Title", "Body")
