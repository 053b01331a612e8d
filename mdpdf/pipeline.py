#!/usr/bin/env python3
"""
Markdown preprocessing pipeline run before HTML rendering.

MIT License - Copyright (c) 2025 Markdown to PDF Converter
"""

from pathlib import Path
from typing import Optional, Union

from .alerts import render_alerts
from .console import ConsoleLogger
from .images import embed_images
from .toc import DEFAULT_TOC_TITLE, render_toc


def preprocess_markdown(markdown: str, base_dir: Union[str, Path],
                        toc_start: int = 1, toc_depth: int = 3,
                        toc_title: str = DEFAULT_TOC_TITLE,
                        logger: Optional[ConsoleLogger] = None) -> str:
    """Apply image inlining, table of contents and alerts, in that order."""
    processed = embed_images(markdown, base_dir, logger)
    processed = render_toc(processed, toc_start, toc_depth, toc_title)
    return render_alerts(processed)
