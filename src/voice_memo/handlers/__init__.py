"""Handler exports."""

from .voice_memo_handler import VoiceMemoHandler

__all__ = ["VoiceMemoHandler"]
