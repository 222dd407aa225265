"""
Voice memo transcription.

Uploads a voice memo to AssemblyAI, waits for the transcript, optionally
post-processes it with Gemini, and delivers the text to the clipboard or Bear.
"""

__version__ = "0.1.0"
