#!/usr/bin/env python3
"""
Markdown to HTML rendering helpers built on Python-Markdown.

MIT License - Copyright (c) 2025 Markdown to PDF Converter
"""

import html
import re

import markdown

BODY_EXTENSIONS = ["tables", "fenced_code", "sane_lists"]

_SINGLE_PARAGRAPH_RE = re.compile(r"^<p>(.*)</p>$", re.DOTALL)
# Leading text that would otherwise start a block (list, heading, quote, rule)
_ORDERED_MARKER_RE = re.compile(r"^(\d+)([.)])(?=\s)")
_BULLET_MARKER_RE = re.compile(r"^([-+*#>])(?=\s)")
_THEMATIC_BREAK_RE = re.compile(r"^([-*_])(?:[ \t]*\1){2,}[ \t]*$")


def render_inline(fragment: str) -> str:
    """Render inline markdown (emphasis, code spans, links) to HTML.

    The paragraph wrapper Python-Markdown adds around a single block is
    removed so the result can sit inside other elements.
    """
    source = fragment.strip()
    if _THEMATIC_BREAK_RE.match(source):
        source = re.sub(r"[-*_]", r"\\\g<0>", source)
    else:
        source = _ORDERED_MARKER_RE.sub(r"\1\\\2", source)
        source = _BULLET_MARKER_RE.sub(r"\\\1", source)
    rendered = markdown.markdown(source).strip()
    match = _SINGLE_PARAGRAPH_RE.match(rendered)
    if match and "<p>" not in match.group(1):
        return match.group(1)
    return rendered


def render_body(text: str) -> str:
    """Render a preprocessed markdown document body to HTML."""
    return markdown.markdown(text, extensions=BODY_EXTENSIONS)


def build_html_document(body_html: str, css: str, title: str) -> str:
    """Wrap rendered body HTML into a standalone page with embedded CSS."""
    return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{html.escape(title)}</title>
    <style>
{css}
    </style>
</head>
<body>
{body_html}
</body>
</html>
"""
