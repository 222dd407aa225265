"""Allows running the CLI with ``python -m voice_memo``."""

from voice_memo.main import app

app(prog_name="voice-memo")
