"""Rich-text rendering for question prompts and feedback lines."""

from __future__ import annotations

from quiz_challenge.constants.ui_constants import CORRECT_ANSWER_TEMPLATE
from quiz_challenge.core.markdown_renderer import renderer


def render_prompt(prompt: str, font_size: int = 14) -> str:
    """Render a question prompt as HTML sized for the question label.

    Args:
        prompt: The question text (supports Markdown)
        font_size: Font size in points for the prompt (default 14)

    Returns:
        HTML string ready for a rich-text ``QLabel``
    """
    body = renderer.render_fragment(prompt or "(No question text)")
    return f'<div style="font-size: {font_size}pt; font-weight: 600;">{body}</div>'


def render_correct_answer(answer: str) -> str:
    """Render the "Correct Answer: X" line with the answer emphasised."""
    return renderer.render_inline(CORRECT_ANSWER_TEMPLATE.format(answer=_escape_markdown(answer)))


def _escape_markdown(text: str) -> str:
    for char in ("\\", "*", "_", "`", "[", "]"):
        text = text.replace(char, f"\\{char}")
    return text
