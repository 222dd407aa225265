"""Dotenv-file implementation of the CredentialStore interface."""

import os
from pathlib import Path

from dotenv import dotenv_values, set_key

from voice_memo.logging import setup_logging

from .interfaces import CredentialStore

logger = setup_logging()


class DotenvCredentialStore(CredentialStore):
    """Reads keys from the environment, then from a private dotenv file."""

    def __init__(self, file_path: Path):
        self._file_path = file_path

    def get(self, name: str) -> str | None:
        value = os.getenv(name)
        if value:
            return value
        if not self._file_path.is_file():
            return None
        return dotenv_values(self._file_path).get(name) or None

    def set(self, name: str, secret: str) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        if not self._file_path.exists():
            self._file_path.touch(mode=0o600)
        set_key(self._file_path, name, secret)
        logger.info(
            "API key saved",
            extra={"credential_name": name, "file_path": str(self._file_path)},
        )
