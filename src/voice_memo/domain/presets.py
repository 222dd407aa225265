"""Fixed catalog of Gemini summarization presets."""

from .models import SummarizationPreset

SUMMARIZATION_PRESETS: tuple[SummarizationPreset, ...] = (
    SummarizationPreset(
        name="Summarize",
        description="Create a concise summary with key points",
        system_prompt=(
            "You are an expert at summarizing conversations and transcripts. "
            "Create a clear, concise summary that captures the main points, key "
            "decisions, and important details. Format your response with clear "
            "sections for: Summary, Key Points, Action Items (if any), and "
            "Notable Quotes."
        ),
        temperature=0.3,
    ),
    SummarizationPreset(
        name="Meeting Minutes",
        description="Format as professional meeting minutes",
        system_prompt=(
            "You are a professional meeting transcriptionist. Convert this "
            "transcript into properly formatted meeting minutes. Include: Date, "
            "Participants (identified by speaker numbers), Agenda Items (inferred "
            "from discussion), Decisions Made, Action Items, and Next Steps. Use "
            "professional business formatting."
        ),
        temperature=0.2,
    ),
    SummarizationPreset(
        name="Content Analysis",
        description="Deep analysis of content and discussion",
        system_prompt=(
            "You are an expert content analyst. Provide a detailed analysis of "
            "this transcript including: Main Themes, Sentiment Analysis, "
            "Discussion Patterns, Key Insights, Areas of Agreement/Disagreement, "
            "and Recommendations. Support your analysis with specific examples "
            "from the transcript."
        ),
        temperature=0.4,
    ),
    SummarizationPreset(
        name="Action Items",
        description="Extract and organize action items",
        system_prompt=(
            "You are an executive assistant focused on action items. Review this "
            "transcript and extract all action items, tasks, and commitments. "
            "Format each item with: Owner (speaker number if available), Task, "
            "Timeline (if mentioned), and Context. Sort by priority if possible."
        ),
        temperature=0.2,
    ),
)


def get_preset(name: str) -> SummarizationPreset:
    """
    Looks up a preset by its exact name.

    Raises:
        KeyError: If no preset has that name.
    """
    for preset in SUMMARIZATION_PRESETS:
        if preset.name == name:
            return preset
    raise KeyError(name)
