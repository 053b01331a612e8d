"""
Tests for GitHub-style alert rendering
"""

from mdpdf.alerts import render_alerts


class TestRenderAlerts:
    """Tests for render_alerts()."""

    def test_warning_with_custom_title(self):
        text = "> [!WARNING] Careful\n> This is line one.\n> This is line two."
        assert render_alerts(text) == (
            '<div class="markdown-alert markdown-alert-warning">\n'
            '<p class="markdown-alert-title">⚠️ Careful</p>\n'
            '<p>This is line one. This is line two.</p>\n'
            '</div>'
        )

    def test_default_title(self):
        result = render_alerts("> [!TIP]\n> Use the cache.")
        assert '<p class="markdown-alert-title">💡 Tip</p>' in result
        assert "<p>Use the cache.</p>" in result

    def test_info_aliases_note(self):
        info = render_alerts("> [!INFO]\n> text")
        note = render_alerts("> [!NOTE]\n> text")
        assert info == note
        assert 'class="markdown-alert markdown-alert-note"' in info

    def test_danger_aliases_caution(self):
        assert "markdown-alert-caution" in render_alerts("> [!DANGER]\n> Do not.")

    def test_kind_is_case_insensitive(self):
        assert "markdown-alert-important" in render_alerts("> [!important]\n> Read this.")

    def test_marker_without_space_after_quote(self):
        assert "markdown-alert-note" in render_alerts(">[!NOTE]\n>text")

    def test_unknown_kind_is_left_alone(self):
        text = "> [!FOO]\n> Not an alert."
        assert render_alerts(text) == text

    def test_plain_blockquote_is_left_alone(self):
        text = "> Just a quote\n> over two lines"
        assert render_alerts(text) == text

    def test_marker_inside_running_blockquote_is_left_alone(self):
        text = "> Plain quote\n> [!NOTE]\n> body"
        assert render_alerts(text) == text

    def test_marker_after_blank_line_opens_alert(self):
        result = render_alerts("> Plain quote\n\n> [!NOTE]\n> body")
        assert result.startswith("> Plain quote\n\n<div class=\"markdown-alert markdown-alert-note\">")

    def test_blank_quote_line_separates_paragraphs(self):
        result = render_alerts("> [!NOTE]\n> First paragraph\n> continues.\n>\n> Second one.")
        assert "<p>First paragraph continues.</p>\n<p>Second one.</p>" in result

    def test_block_ends_at_first_unquoted_line(self):
        result = render_alerts("> [!NOTE]\n> inside\nOutside text\n> plain quote")
        assert result.endswith("</div>\nOutside text\n> plain quote")
        assert "Outside" not in result.split("</div>")[0]

    def test_header_only_at_end_of_input(self):
        assert render_alerts("> [!CAUTION]") == (
            '<div class="markdown-alert markdown-alert-caution">\n'
            '<p class="markdown-alert-title">🛑 Caution</p>\n'
            '</div>'
        )

    def test_inline_markdown_in_title_and_body(self):
        result = render_alerts("> [!NOTE] About `config`\n> Use **bold** text.")
        assert "About <code>config</code>" in result
        assert "<p>Use <strong>bold</strong> text.</p>" in result

    def test_consecutive_alerts(self):
        result = render_alerts("> [!NOTE]\n> one\n> [!TIP]\n> two")
        # The second marker line is part of the first alert body
        assert result.count('<div class="markdown-alert') == 1
        result = render_alerts("> [!NOTE]\n> one\n\n> [!TIP]\n> two")
        assert result.count('<div class="markdown-alert') == 2

    def test_fenced_alert_syntax_is_not_converted(self):
        text = "```\n> [!NOTE]\n> # Not a heading\n```"
        assert render_alerts(text) == text

    def test_surrounding_text_is_preserved(self):
        text = "# Title\n\n> [!NOTE]\n> body\n\nAfter"
        result = render_alerts(text)
        assert result.startswith("# Title\n\n<div")
        assert result.endswith("</div>\n\nAfter")

    def test_idempotent(self):
        once = render_alerts("> [!WARNING] Careful\n> body\n\ntext")
        assert render_alerts(once) == once
