"""Unit tests for placeholder substitution and fragment rendering."""

import pytest

from md_video_embed.utils.fragments import render_markdown_fragment, replace_text_params


@pytest.mark.unit
class TestReplaceTextParams:
    """Test replace_text_params."""

    @pytest.mark.parametrize(
        "template",
        ["Play {{ title }}", "Play {{title}}", "Play {{   title   }}", "Play {{\ttitle }}"],
    )
    def test_whitespace_inside_braces_ignored(self, template: str) -> None:
        """Test every spacing variant is substituted."""
        assert replace_text_params(template, {"title": "Intro"}) == "Play Intro"

    def test_all_occurrences_replaced(self) -> None:
        """Test repeated placeholders are all substituted."""
        result = replace_text_params("{{ title }} / {{title}}", {"title": "A"})

        assert result == "A / A"

    def test_unknown_placeholder_untouched(self) -> None:
        """Test placeholders without a value stay in place."""
        result = replace_text_params("{{ title }} by {{ author }}", {"title": "A"})

        assert result == "A by {{ author }}"

    def test_value_inserted_verbatim(self) -> None:
        """Test values are not escaped or interpreted."""
        result = replace_text_params("{{ title }}", {"title": r"<b>\1 & **x**</b>"})

        assert result == r"<b>\1 & **x**</b>"

    def test_no_placeholders(self) -> None:
        """Test text without placeholders is returned unchanged."""
        assert replace_text_params("Plain text", {"title": "A"}) == "Plain text"

    def test_idempotent(self) -> None:
        """Test substituting twice gives the same result as once."""
        once = replace_text_params("Watch {{ title }}", {"title": "My Video"})

        assert replace_text_params(once, {"title": "My Video"}) == once

    def test_key_is_regex_escaped(self) -> None:
        """Test keys containing regex metacharacters match literally."""
        assert replace_text_params("{{ a.b }} {{ aXb }}", {"a.b": "1"}) == "1 {{ aXb }}"

    def test_non_string_values(self) -> None:
        """Test non-string values are converted with str."""
        assert replace_text_params("Start at {{ start }}s", {"start": 30}) == "Start at 30s"


@pytest.mark.unit
class TestRenderMarkdownFragment:
    """Test render_markdown_fragment."""

    def test_paragraph_is_stripped(self) -> None:
        """Test trailing whitespace is removed."""
        assert render_markdown_fragment("Hello") == "<p>Hello</p>"

    def test_inline_markup(self) -> None:
        """Test links and emphasis are rendered."""
        result = render_markdown_fragment("See [privacy](/privacy) and **this**.")

        assert '<a href="/privacy">privacy</a>' in result
        assert "<strong>this</strong>" in result

    def test_raw_html_escaped(self) -> None:
        """Test fragments are rendered with the escaping renderer."""
        result = render_markdown_fragment("<script>alert(1)</script>")

        assert "<script>" not in result
        assert "&lt;script&gt;" in result

    def test_empty_input(self) -> None:
        """Test an empty fragment renders to an empty string."""
        assert render_markdown_fragment("") == ""
