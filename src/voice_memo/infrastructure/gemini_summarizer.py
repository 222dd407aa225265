"""Gemini implementation of the SummarizationService interface."""

from google import genai
from google.genai import types

from voice_memo.domain.models import SummarizationPreset
from voice_memo.exceptions import NoSummaryCandidateError, SummarizationRequestError
from voice_memo.logging import setup_logging

from .interfaces import SummarizationService

logger = setup_logging()

TOP_K = 40
TOP_P = 0.95
MAX_OUTPUT_TOKENS = 8192


class GeminiSummarizer(SummarizationService):
    """Summarization service using Google Gemini's generateContent."""

    def __init__(self, client: genai.Client, model_name: str):
        self._client = client
        self._model_name = model_name

    async def summarize(self, text: str, preset: SummarizationPreset) -> str:
        """
        Runs the transcript through Gemini with the preset's instruction.

        Args:
            text: The transcript text, sent as user content.
            preset: Supplies the system instruction and temperature.

        Returns:
            Text of the first candidate.

        Raises:
            NoSummaryCandidateError: If no candidate text came back.
            SummarizationRequestError: If the Gemini API call fails.
        """
        try:
            response = await self._client.aio.models.generate_content(
                model=self._model_name,
                contents=build_contents(text),
                config=build_generation_config(preset),
            )
        except Exception as e:
            logger.exception("Gemini API call failed", extra={"preset": preset.name})
            raise SummarizationRequestError(
                f"Gemini request failed: {e}", cause=e
            ) from e

        summary = _first_candidate_text(response)
        if summary is None:
            logger.error("Gemini returned no candidates", extra={"preset": preset.name})
            raise NoSummaryCandidateError()

        logger.info(
            "Summarization completed",
            extra={"preset": preset.name, "summary_length": len(summary)},
        )
        return summary


def build_contents(text: str) -> list[types.Content]:
    return [types.Content(role="user", parts=[types.Part(text=text)])]


def build_generation_config(preset: SummarizationPreset) -> types.GenerateContentConfig:
    """Sampling is fixed except for the preset's temperature."""
    return types.GenerateContentConfig(
        system_instruction=types.Content(
            role="user", parts=[types.Part(text=preset.system_prompt)]
        ),
        temperature=preset.temperature,
        top_k=TOP_K,
        top_p=TOP_P,
        max_output_tokens=MAX_OUTPUT_TOKENS,
        response_mime_type="text/plain",
    )


def _first_candidate_text(response) -> str | None:
    candidates = getattr(response, "candidates", None)
    if not candidates:
        return None
    content = candidates[0].content
    if content is None or not content.parts:
        return None
    return content.parts[0].text
