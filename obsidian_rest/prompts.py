"""Static prompt templates offered to MCP clients."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PromptTemplate:
    name: str
    description: str
    text: str
    placeholder: str

    def render(self, value: str) -> str:
        """Substitute ``value`` for the placeholder (first occurrence only)."""
        return self.text.replace(self.placeholder, value, 1)


NOTE_SUMMARIZATION_PROMPT = PromptTemplate(
    name="note_summarization",
    description="Generate summaries for long notes",
    placeholder="{{note_content}}",
    text="""You are an expert note summarizer. Your task is to create a concise and informative summary of the provided note.

Focus on capturing the main ideas, key points, and important details. Organize the information in a structured way.

Here are some guidelines:
1. Start with a brief overview of what the note is about
2. Include the most important concepts/ideas discussed
3. Highlight any actionable items or conclusions
4. Preserve the original meaning and intent of the note
5. Use clear, concise language

The summary should be complete enough that someone reading it would understand the core content without having to refer to the original note.

Note to summarize:
{{note_content}}""",
)
