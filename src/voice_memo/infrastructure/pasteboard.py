"""Clipboard implementation backed by pbcopy."""

import subprocess

from voice_memo.exceptions import ClipboardError
from voice_memo.logging import setup_logging

from .interfaces import Clipboard

logger = setup_logging()


class PbcopyClipboard(Clipboard):
    """Copies text to the macOS pasteboard."""

    def __init__(self, command: str = "pbcopy"):
        self._command = command

    def copy(self, text: str) -> None:
        try:
            subprocess.run([self._command], input=text.encode("utf-8"), check=True)
        except (OSError, subprocess.CalledProcessError) as e:
            logger.exception("Clipboard copy failed", extra={"command": self._command})
            raise ClipboardError(e) from e
