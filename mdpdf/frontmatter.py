#!/usr/bin/env python3
"""
YAML front matter support.

A document may start with a ``---`` delimited YAML block whose keys override
the configured conversion options for that document only.

MIT License - Copyright (c) 2025 Markdown to PDF Converter
"""

from datetime import date
from typing import Any, Dict, Optional, Tuple

import yaml

from .console import ConsoleLogger


def normalize_key(key: Any) -> str:
    return str(key).strip().lower().replace("-", "_")


def split_front_matter(text: str, logger: Optional[ConsoleLogger] = None) -> Tuple[Dict[str, Any], str]:
    """Separate a leading YAML front matter block from the markdown body.

    Returns (metadata, body). Without a valid block the metadata is empty and
    the text is returned unchanged.
    """
    src = text.lstrip("\ufeff")
    lines = src.split("\n")
    if not lines or lines[0].strip() != "---":
        return {}, text

    end_idx = None
    for idx in range(1, len(lines)):
        if lines[idx].strip() in ("---", "..."):
            end_idx = idx
            break
    if end_idx is None:
        return {}, text

    try:
        metadata = yaml.safe_load("\n".join(lines[1:end_idx]))
    except yaml.YAMLError as e:
        if logger:
            logger.warning(f"Ignoring invalid front matter: {e}")
        return {}, text

    if metadata is None:
        metadata = {}
    if not isinstance(metadata, dict):
        if logger:
            logger.warning("Ignoring front matter that is not a mapping")
        return {}, text

    body = "\n".join(lines[end_idx + 1:]).lstrip("\n")
    return {normalize_key(k): v for k, v in metadata.items()}, body


def merge_options(base: Dict[str, Any], front_matter: Dict[str, Any]) -> Dict[str, Any]:
    """Overlay front matter on the configured options."""
    merged = dict(base)
    merged.update({normalize_key(k): v for k, v in front_matter.items()})
    return merged


def template_variables(front_matter: Dict[str, Any]) -> Dict[str, str]:
    """Expose scalar front matter values as {{KEY}} template variables."""
    return {
        normalize_key(key).upper(): str(value)
        for key, value in front_matter.items()
        if isinstance(value, (str, int, float, date)) and not isinstance(value, bool)
    }
