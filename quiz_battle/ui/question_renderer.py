"""Question rendering utilities for displaying quiz prompts."""

from __future__ import annotations

from quiz_battle.core.markdown_renderer import renderer


def render_prompt_html(prompt: str, font_size: int = 14) -> str:
    """Render a question prompt as rich text for a QLabel.

    Args:
        prompt: The question text (supports Markdown)
        font_size: Font size in points for the prompt (default 14)

    Returns:
        HTML string ready for a label in rich-text mode
    """
    fragment = renderer.render_fragment(prompt)
    return f'<div style="font-size: {font_size}pt; font-weight: 600;">{fragment}</div>'
