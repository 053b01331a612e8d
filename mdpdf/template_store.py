#!/usr/bin/env python3
"""
Template lookup and loading.

A template is a directory holding any of header.html, footer.html,
template.css and logo.png. Templates are searched in the user templates
directory first, then among the templates bundled with the package.

MIT License - Copyright (c) 2025 Markdown to PDF Converter
"""

import base64
import re
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Dict, List, Optional

from .console import ConsoleLogger

PROJECT_TEMPLATES_DIR = Path(__file__).parent / "templates"

EMPTY_HEADER_FOOTER = "<div></div>"

FRENCH_MONTHS = [
    "janvier", "février", "mars", "avril", "mai", "juin",
    "juillet", "août", "septembre", "octobre", "novembre", "décembre",
]

DEFAULT_CSS = """
/* === Body === */
body {
    font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;
    font-size: 11pt;
    line-height: 1.6;
    color: #333;
}

/* === Headings === */
h1 {
    color: #2C5F8D;
    font-size: 24pt;
    margin-top: 0;
    margin-bottom: 20px;
    border-bottom: 3px solid #2C5F8D;
    padding-bottom: 10px;
}

h2 {
    color: #2C5F8D;
    font-size: 18pt;
    margin-top: 30px;
    margin-bottom: 15px;
}

h3 {
    color: #4A90E2;
    font-size: 14pt;
    margin-top: 20px;
    margin-bottom: 10px;
}

/* === Paragraphs === */
p {
    margin-bottom: 12px;
    text-align: justify;
}

/* === Lists === */
ul > li {
    margin-bottom: 10px;
}

ul > li > ul {
    margin-top: 5px;
    margin-bottom: 0;
}

ul > li:last-child {
    margin-bottom: 0;
}

/* === Tables === */
table {
    border-collapse: collapse;
    width: 100%;
    margin: 20px 0;
    border: 1px solid #000;
    page-break-inside: avoid;
}

th, td {
    border: 1px solid #000;
    padding: 8px 12px;
    text-align: left;
}

th {
    background-color: #f5f5f5;
    font-weight: bold;
    color: #2C5F8D;
}

tr:nth-child(even) {
    background-color: #fafafa;
}

img {
    max-width: 100%;
    height: auto;
}

/* === Pagination === */
h1, h2, h3 {
    page-break-after: avoid;
}

p, li {
    page-break-inside: avoid;
}
"""

# Always included before the template stylesheet so templates can override it
COMPONENT_CSS = """
/* === Table of contents === */
.table-of-contents {
    margin: 20px 0 30px;
    page-break-after: always;
}

.table-of-contents .toc-title {
    font-size: 16pt;
    font-weight: 600;
    color: #2C5F8D;
}

.table-of-contents ul {
    list-style: none;
    padding-left: 1.2em;
}

.table-of-contents > ul {
    padding-left: 0;
}

.table-of-contents a {
    color: inherit;
    text-decoration: none;
}

/* === GitHub-style alerts === */
.markdown-alert {
    padding: 12px 16px;
    margin: 16px 0;
    border-left: 4px solid;
    border-radius: 4px;
    page-break-inside: avoid;
}

.markdown-alert p {
    margin: 4px 0;
    text-align: left;
}

.markdown-alert-title {
    font-weight: 600;
    margin-bottom: 4px !important;
}

.markdown-alert-note {
    border-left-color: #0969da;
    background-color: #ddf4ff;
}
.markdown-alert-note .markdown-alert-title { color: #0969da; }

.markdown-alert-tip {
    border-left-color: #1a7f37;
    background-color: #dafbe1;
}
.markdown-alert-tip .markdown-alert-title { color: #1a7f37; }

.markdown-alert-important {
    border-left-color: #8250df;
    background-color: #eddeff;
}
.markdown-alert-important .markdown-alert-title { color: #8250df; }

.markdown-alert-warning {
    border-left-color: #9a6700;
    background-color: #fff8c5;
}
.markdown-alert-warning .markdown-alert-title { color: #9a6700; }

.markdown-alert-caution {
    border-left-color: #cf222e;
    background-color: #ffebe9;
}
.markdown-alert-caution .markdown-alert-title { color: #cf222e; }
"""


class TemplateNotFoundError(LookupError):
    """Raised when a template exists in none of the template directories."""


@dataclass
class TemplateFiles:
    name: str
    root: Path

    @property
    def header(self) -> Path:
        return self.root / "header.html"

    @property
    def footer(self) -> Path:
        return self.root / "footer.html"

    @property
    def css(self) -> Path:
        return self.root / "template.css"

    @property
    def logo(self) -> Path:
        return self.root / "logo.png"


def format_date(day: Optional[date] = None) -> str:
    """Format a date the French way, e.g. '05 mars 2025'."""
    day = day or date.today()
    return f"{day.day:02d} {FRENCH_MONTHS[day.month - 1]} {day.year}"


def load_html_template(template_path: Path, variables: Dict[str, str]) -> str:
    """Read an HTML fragment and substitute its {{VAR}} placeholders.

    Unknown placeholders are replaced by an empty string. A missing file
    yields an empty fragment.
    """
    if not template_path.is_file():
        return ""
    content = template_path.read_text(encoding="utf-8")
    return re.sub(r"\{\{\s*([A-Za-z0-9_]+)\s*\}\}",
                  lambda m: variables.get(m.group(1)) or "", content)


def load_logo(logo_path: Path, logger: Optional[ConsoleLogger] = None) -> Optional[str]:
    """Load a PNG logo as a data URI, or None if it does not exist."""
    if not logo_path.is_file():
        if logger:
            logger.warning(f"Logo not found: {logo_path}")
        return None
    payload = base64.b64encode(logo_path.read_bytes()).decode("ascii")
    return f"data:image/png;base64,{payload}"


class TemplateStore:
    """Finds templates in the user directory, then in the bundled one."""

    def __init__(self, user_dir: Path, project_dir: Path = PROJECT_TEMPLATES_DIR):
        self.roots = [("user", Path(user_dir)), ("project", Path(project_dir))]

    def find(self, name: str) -> TemplateFiles:
        for _, root in self.roots:
            candidate = root / name
            if candidate.is_dir():
                return TemplateFiles(name, candidate)
        searched = ", ".join(str(root) for _, root in self.roots)
        raise TemplateNotFoundError(f"Template not found: {name} (searched {searched})")

    def list_templates(self) -> Dict[str, List[str]]:
        """Return template names per origin ('user', 'project')."""
        found: Dict[str, List[str]] = {}
        for origin, root in self.roots:
            if root.is_dir():
                found[origin] = sorted(p.name for p in root.iterdir() if p.is_dir())
            else:
                found[origin] = []
        return found
