#!/usr/bin/env python3
"""
Heading extraction from raw markdown.

Walks the document line by line, ignoring fenced code blocks, and collects
ATX headings within a level range together with their anchor slugs.

MIT License - Copyright (c) 2025 Markdown to PDF Converter
"""

import re
from dataclasses import dataclass
from typing import Iterator, List, Tuple

from .slugs import SlugRegistry, slugify

TOC_MARKER = "[[toc]]"

HEADING_RE = re.compile(r"^(#{1,6}) +(.+?)\s*$")
_CLOSING_HASHES_RE = re.compile(r"\s+#+$")


@dataclass
class Heading:
    """A heading retained for the table of contents."""
    level: int
    title: str
    slug: str
    line_index: int


def is_fence(line: str) -> bool:
    return line.strip().startswith("```")


def iter_unfenced_lines(lines: List[str]) -> Iterator[Tuple[int, str]]:
    """Yield (index, line) for every line outside fenced code blocks.

    Fence delimiter lines themselves are not yielded. A fence closes on the
    next line starting with three backticks, whatever follows them.
    """
    in_fence = False
    for index, line in enumerate(lines):
        if is_fence(line):
            in_fence = not in_fence
            continue
        if not in_fence:
            yield index, line


def parse_heading(line: str):
    """Return (level, title) for an ATX heading line, or None."""
    match = HEADING_RE.match(line)
    if not match:
        return None
    title = _CLOSING_HASHES_RE.sub("", match.group(2)).strip()
    if not title or set(title) == {"#"}:
        return None
    return len(match.group(1)), title


def scan_headings(markdown: str, min_level: int = 1, max_level: int = 6) -> List[Heading]:
    """Collect headings with min_level <= level <= max_level in document order.

    Slugs are unique within the returned list. An inverted range yields no
    headings.
    """
    headings: List[Heading] = []
    if min_level > max_level:
        return headings

    registry = SlugRegistry()
    for index, line in iter_unfenced_lines(markdown.split("\n")):
        if line.strip() == TOC_MARKER:
            continue
        parsed = parse_heading(line)
        if parsed is None:
            continue
        level, title = parsed
        if not min_level <= level <= max_level:
            continue
        base = slugify(title) or f"section-{len(headings) + 1}"
        headings.append(Heading(level, title, registry.unique(base), index))

    return headings
