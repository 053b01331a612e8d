"""
Markdown to PDF converter package.
Converts markdown files to PDF with templates, table of contents, alerts and
embedded images.

MIT License - Copyright (c) 2025 Markdown to PDF Converter
"""

__version__ = "1.0.0"

from .alerts import render_alerts
from .images import embed_images
from .toc import render_toc
from .pipeline import preprocess_markdown
from .config import Config, get_user_config_dir, get_user_templates_dir
from .converter import MarkdownToPDFConverter
from .dependencies import DependencyChecker, check_dependencies

__all__ = [
    "render_alerts",
    "embed_images",
    "render_toc",
    "preprocess_markdown",
    "Config",
    "get_user_config_dir",
    "get_user_templates_dir",
    "MarkdownToPDFConverter",
    "DependencyChecker",
    "check_dependencies",
]
