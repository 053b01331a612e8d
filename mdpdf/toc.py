#!/usr/bin/env python3
"""
Table of contents generation for the [[toc]] marker.

The outline links and the anchors placed before each heading come from the
same heading scan, so every link resolves to an anchor.

MIT License - Copyright (c) 2025 Markdown to PDF Converter
"""

import html
from typing import List

from .headings import TOC_MARKER, Heading, scan_headings
from .rendering import render_inline

DEFAULT_TOC_TITLE = "Table of contents"


def render_outline(headings: List[Heading]) -> str:
    """Render headings as nested <ul> lists of anchor links."""
    min_level = min(heading.level for heading in headings)
    current = min_level - 1
    parts: List[str] = []

    for heading in headings:
        if heading.level > current:
            # Skipped levels get an empty item so nesting stays balanced
            parts.append("<ul><li>" * (heading.level - current - 1) + "<ul>")
        else:
            parts.append("</li>" + "</ul></li>" * (current - heading.level))
        current = heading.level
        parts.append(f'<li><a href="#{heading.slug}">{render_inline(heading.title)}</a>')

    parts.append("</li>" + "</ul></li>" * (current - min_level) + "</ul>")
    return "\n".join(parts)


def render_toc_container(headings: List[Heading], title: str = DEFAULT_TOC_TITLE) -> str:
    return (
        '<nav class="table-of-contents">\n'
        f'<p class="toc-title">{html.escape(title)}</p>\n'
        f"{render_outline(headings)}\n"
        "</nav>"
    )


def inject_anchors(markdown: str, headings: List[Heading]) -> str:
    """Insert an empty anchor element on the line before each heading."""
    lines = markdown.split("\n")
    for heading in reversed(headings):
        lines.insert(heading.line_index, f'<a id="{heading.slug}"></a>')
    return "\n".join(lines)


def render_toc(markdown: str, toc_start: int = 1, toc_depth: int = 3,
               title: str = DEFAULT_TOC_TITLE) -> str:
    """Replace every [[toc]] marker with an outline of the document headings.

    Headings with toc_start <= level <= toc_depth are listed and receive an
    anchor. Text without a marker is returned unchanged; when no heading
    qualifies the markers are simply removed.
    """
    if TOC_MARKER not in markdown:
        return markdown

    headings = scan_headings(markdown, toc_start, toc_depth)
    if not headings:
        return markdown.replace(TOC_MARKER, "")

    container = render_toc_container(headings, title)
    return inject_anchors(markdown, headings).replace(TOC_MARKER, container)
