#!/usr/bin/env python3
"""
GitHub-style alert callouts.

Converts blockquotes opened by a marker such as ``> [!WARNING]`` into styled
HTML containers:

    > [!WARNING] Careful
    > This is line one.
    > This is line two.

becomes a ``markdown-alert markdown-alert-warning`` div whose title reads
"Careful". Blockquotes with any other marker are left alone.

MIT License - Copyright (c) 2025 Markdown to PDF Converter
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, NamedTuple, Optional

from .headings import is_fence
from .rendering import render_inline


class AlertStyle(NamedTuple):
    css_class: str
    title: str
    icon: str


_NOTE = AlertStyle("markdown-alert-note", "Note", "ℹ️")
_CAUTION = AlertStyle("markdown-alert-caution", "Caution", "🛑")

ALERT_STYLES = {
    "NOTE": _NOTE,
    "TIP": AlertStyle("markdown-alert-tip", "Tip", "💡"),
    "IMPORTANT": AlertStyle("markdown-alert-important", "Important", "❗"),
    "WARNING": AlertStyle("markdown-alert-warning", "Warning", "⚠️"),
    "CAUTION": _CAUTION,
    "INFO": _NOTE,
    "DANGER": _CAUTION,
}

ALERT_HEADER_RE = re.compile(
    r"^\s*>\s*\[!(" + "|".join(ALERT_STYLES) + r")\][ \t]*(.*?)\s*$",
    re.IGNORECASE,
)
_QUOTE_PREFIX_RE = re.compile(r"^\s*> ?")


class _State(Enum):
    OUTSIDE = "outside"
    IN_ALERT_HEADER = "in_alert_header"
    IN_ALERT_BODY = "in_alert_body"


@dataclass
class AlertBlock:
    kind: str
    custom_title: Optional[str] = None
    paragraphs: List[str] = field(default_factory=list)

    @property
    def style(self) -> Optional[AlertStyle]:
        return ALERT_STYLES.get(self.kind.upper())


def is_quote_line(line: str) -> bool:
    return line.lstrip().startswith(">")


def render_alert_block(block: AlertBlock) -> str:
    style = block.style
    title = render_inline(block.custom_title) if block.custom_title else style.title
    lines = [
        f'<div class="markdown-alert {style.css_class}">',
        f'<p class="markdown-alert-title">{style.icon} {title}</p>',
    ]
    lines.extend(f"<p>{render_inline(paragraph)}</p>" for paragraph in block.paragraphs)
    lines.append("</div>")
    return "\n".join(lines)


class _AlertParser:
    """Line state machine: Outside -> InAlertHeader -> InAlertBody -> Outside."""

    def __init__(self):
        self.state = _State.OUTSIDE
        self.in_fence = False
        self.output: List[str] = []
        self.block: Optional[AlertBlock] = None
        self.paragraph: List[str] = []
        self.after_quote = False

    def feed(self, line: str) -> None:
        if self.state is _State.OUTSIDE:
            self._outside(line)
        elif is_quote_line(line):
            self.state = _State.IN_ALERT_BODY
            self._body(_QUOTE_PREFIX_RE.sub("", line, count=1))
        else:
            self._finish_block()
            self._outside(line)

    def close(self) -> str:
        if self.state is not _State.OUTSIDE:
            self._finish_block()
        return "\n".join(self.output)

    def _outside(self, line: str) -> None:
        if is_fence(line):
            self.in_fence = not self.in_fence
        elif not self.in_fence:
            # A marker only opens an alert on the first line of a blockquote
            match = None if self.after_quote else ALERT_HEADER_RE.match(line)
            if match and match.group(1).upper() in ALERT_STYLES:
                self.block = AlertBlock(match.group(1), match.group(2) or None)
                self.paragraph = []
                self.state = _State.IN_ALERT_HEADER
                return
        self.after_quote = not self.in_fence and is_quote_line(line)
        self.output.append(line)

    def _body(self, text: str) -> None:
        if text.strip():
            self.paragraph.append(text.strip())
        else:
            self._end_paragraph()

    def _end_paragraph(self) -> None:
        if self.paragraph:
            self.block.paragraphs.append(" ".join(self.paragraph))
            self.paragraph = []

    def _finish_block(self) -> None:
        self._end_paragraph()
        self.output.append(render_alert_block(self.block))
        self.block = None
        self.state = _State.OUTSIDE


def render_alerts(markdown: str) -> str:
    """Replace every alert blockquote with its HTML container."""
    parser = _AlertParser()
    for line in markdown.split("\n"):
        parser.feed(line)
    return parser.close()
