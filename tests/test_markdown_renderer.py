"""Tests for prompt rendering."""

from quiz_battle.core.markdown_renderer import MarkdownRenderer
from quiz_battle.ui.question_renderer import render_prompt_html


def test_renders_markdown_emphasis():
    html = MarkdownRenderer().render_fragment("Which IC is the **AND** gate?")
    assert "<strong>AND</strong>" in html


def test_raw_html_is_escaped():
    html = MarkdownRenderer().render_fragment("<script>alert(1)</script>")
    assert "<script>" not in html


def test_empty_prompt_placeholder():
    assert "No content provided" in MarkdownRenderer().render_fragment("   ")


def test_prompt_html_carries_font_size():
    html = render_prompt_html("What does the 7400 IC represent?", font_size=18)
    assert "font-size: 18pt" in html
    assert "7400 IC" in html
