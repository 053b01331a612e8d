#!/usr/bin/env python3
"""
Heading slug generation.

MIT License - Copyright (c) 2025 Markdown to PDF Converter
"""

import re
from typing import Dict, Set

_TAG_RE = re.compile(r"<[^>]+>")
# Keep letters, digits, whitespace and hyphens; \w would also keep underscores
_DISALLOWED_RE = re.compile(r"[^\w\s-]|_")
_WHITESPACE_RE = re.compile(r"\s+")
_HYPHENS_RE = re.compile(r"-+")


def slugify(title: str) -> str:
    """Turn a heading title into a URL-safe anchor id.

    The result may be empty when the title holds no letters or digits.
    """
    slug = title.lower()
    slug = _TAG_RE.sub("", slug)
    slug = _DISALLOWED_RE.sub("", slug)
    slug = _WHITESPACE_RE.sub("-", slug)
    slug = _HYPHENS_RE.sub("-", slug)
    return slug.strip("-")


class SlugRegistry:
    """Hands out unique anchor ids for one document pass."""

    def __init__(self):
        self._counts: Dict[str, int] = {}
        self._issued: Set[str] = set()

    def unique(self, base: str) -> str:
        """Return `base` on first use, then `base-2`, `base-3`, ..."""
        count = self._counts.get(base, 0) + 1
        candidate = base if count == 1 else f"{base}-{count}"
        # A literal "Setup 2" heading may already own "setup-2"
        while candidate in self._issued:
            count += 1
            candidate = f"{base}-{count}"
        self._counts[base] = count
        self._issued.add(candidate)
        return candidate
