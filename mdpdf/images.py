#!/usr/bin/env python3
"""
Inline local images referenced from markdown as base64 data URIs.

MIT License - Copyright (c) 2025 Markdown to PDF Converter
"""

import base64
import re
from pathlib import Path
from typing import Optional, Union

from .console import ConsoleLogger

MIME_TYPES = {
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".svg": "image/svg+xml",
    ".webp": "image/webp",
    ".bmp": "image/bmp",
    ".ico": "image/x-icon",
}
DEFAULT_MIME_TYPE = "application/octet-stream"

# ![alt](path) or ![alt](path "title")
MARKDOWN_IMAGE_RE = re.compile(
    r'!\[([^\]]*)\]\(\s*([^)\s]+)(?:\s+(?:"[^"]*"|\'[^\']*\'))?\s*\)'
)
REMOTE_PREFIXES = ("http://", "https://", "data:")


def guess_mime_type(path: Path) -> str:
    return MIME_TYPES.get(path.suffix.lower(), DEFAULT_MIME_TYPE)


def to_data_uri(path: Path) -> str:
    """Read a file and encode it as a data URI."""
    payload = base64.b64encode(path.read_bytes()).decode("ascii")
    return f"data:{guess_mime_type(path)};base64,{payload}"


def embed_images(markdown: str, base_dir: Union[str, Path],
                 logger: Optional[ConsoleLogger] = None) -> str:
    """Rewrite local image references to embedded data URIs.

    Remote and already inlined images are skipped. Missing or unreadable
    files leave the reference unchanged and are reported as warnings.
    """
    base_dir = Path(base_dir)

    def _replace(match: re.Match) -> str:
        alt_text, img_path = match.group(1), match.group(2)
        if img_path.startswith(REMOTE_PREFIXES):
            return match.group(0)

        full_path = Path(img_path)
        if not full_path.is_absolute():
            full_path = base_dir / full_path

        if not full_path.is_file():
            if logger:
                logger.warning(f"Image not found: {full_path}")
            return match.group(0)

        try:
            data_uri = to_data_uri(full_path)
        except OSError as e:
            if logger:
                logger.warning(f"Failed to embed image {img_path}: {e}")
            return match.group(0)

        if logger:
            logger.debug(f"Embedded image: {img_path}")
        return f"![{alt_text}]({data_uri})"

    return MARKDOWN_IMAGE_RE.sub(_replace, markdown)
