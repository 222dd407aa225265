from __future__ import annotations

import asyncio
from types import SimpleNamespace

import pytest
from google.genai import types

from voice_memo.domain import get_preset
from voice_memo.exceptions import NoSummaryCandidateError, SummarizationRequestError
from voice_memo.infrastructure.gemini_summarizer import (
    GeminiSummarizer,
    build_generation_config,
)


class StubModels:
    def __init__(self, response=None, error: Exception | None = None):  # noqa: ANN001
        self.response = response
        self.error = error
        self.calls: list[dict] = []

    async def generate_content(self, **kwargs):  # noqa: ANN003
        self.calls.append(kwargs)
        if self.error:
            raise self.error
        return self.response


def _client(models: StubModels):
    return SimpleNamespace(aio=SimpleNamespace(models=models))


def _response(*texts: str):
    return types.GenerateContentResponse(
        candidates=[
            types.Candidate(content=types.Content(role="model", parts=[types.Part(text=t)]))
            for t in texts
        ]
    )


def _run(coro):  # noqa: ANN001
    return asyncio.run(coro)


def test_meeting_minutes_request_uses_preset_prompt_and_temperature():
    models = StubModels(response=_response("Minutes"))
    preset = get_preset("Meeting Minutes")

    summary = _run(
        GeminiSummarizer(_client(models), "gemini-2.0-flash-exp").summarize(
            "Speaker A: Hi", preset
        )
    )

    assert summary == "Minutes"
    call = models.calls[0]
    assert call["model"] == "gemini-2.0-flash-exp"
    assert call["contents"][0].role == "user"
    assert call["contents"][0].parts[0].text == "Speaker A: Hi"
    config = call["config"]
    assert config.temperature == 0.2
    assert config.system_instruction.parts[0].text == preset.system_prompt
    assert config.top_k == 40
    assert config.top_p == 0.95
    assert config.max_output_tokens == 8192
    assert config.response_mime_type == "text/plain"


def test_only_temperature_varies_between_presets():
    summarize = build_generation_config(get_preset("Summarize"))
    analysis = build_generation_config(get_preset("Content Analysis"))

    assert summarize.temperature == 0.3
    assert analysis.temperature == 0.4
    assert summarize.model_dump(exclude={"temperature", "system_instruction"}) == (
        analysis.model_dump(exclude={"temperature", "system_instruction"})
    )


def test_returns_first_candidate():
    models = StubModels(response=_response("first", "second"))

    summary = _run(
        GeminiSummarizer(_client(models), "m").summarize("text", get_preset("Summarize"))
    )

    assert summary == "first"


@pytest.mark.parametrize(
    "response",
    [
        types.GenerateContentResponse(candidates=[]),
        types.GenerateContentResponse(),
        types.GenerateContentResponse(candidates=[types.Candidate()]),
    ],
)
def test_missing_candidates_raise(response):
    models = StubModels(response=response)

    with pytest.raises(NoSummaryCandidateError):
        _run(GeminiSummarizer(_client(models), "m").summarize("text", get_preset("Summarize")))


def test_transport_failure_is_wrapped():
    boom = ConnectionError("network down")
    models = StubModels(error=boom)

    with pytest.raises(SummarizationRequestError) as exc_info:
        _run(GeminiSummarizer(_client(models), "m").summarize("text", get_preset("Summarize")))

    assert exc_info.value.cause is boom
