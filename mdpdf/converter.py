#!/usr/bin/env python3
"""
Markdown to PDF converter using Puppeteer approach (inspired by md-to-pdf).
This uses Playwright (Python equivalent of Puppeteer) to print the rendered
HTML with header and footer templates.

MIT License - Copyright (c) 2025 Markdown to PDF Converter
"""

import re
import sys
import asyncio
import traceback
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple
from playwright.async_api import async_playwright
from colorama import Fore, Style

from . import __version__
from .config import Config, parse_bool, parse_level
from .console import ConsoleLogger
from .dependencies import check_dependencies
from .frontmatter import merge_options, split_front_matter, template_variables
from .pipeline import preprocess_markdown
from .rendering import build_html_document, render_body
from .toc import DEFAULT_TOC_TITLE
from .template_store import (
    COMPONENT_CSS,
    DEFAULT_CSS,
    EMPTY_HEADER_FOOTER,
    TemplateStore,
    format_date,
    load_html_template,
    load_logo,
)

_MARGIN_RE = re.compile(r'^(-?\d+(?:\.\d+)?(?:[eE][+-]?\d+)?)\s*(cm|in|mm|pt|px)?$')


@dataclass
class RenderJob:
    """Everything the PDF engine needs for one document."""
    source: Path
    output_pdf: Path
    title: str
    html: str
    header_html: str
    footer_html: str
    display_header_footer: bool
    margins: Dict[str, str]


class MarkdownToPDFConverter:
    """Markdown to PDF converter using Playwright (Puppeteer approach)."""

    def __init__(self, config: Optional[Config] = None, debug: bool = False):
        """Initialize the converter."""
        self.config = config or Config()
        self.logger = ConsoleLogger(debug)
        self.templates = TemplateStore(self.config.get_templates_dir())

    def _validate_margin(self, margin_str: str) -> str:
        """Validate and normalize a single margin value."""
        match = _MARGIN_RE.match(margin_str.strip())
        if not match:
            raise ValueError(f"Invalid margin format: '{margin_str}'. Use format like '1in', '2.5cm', '10mm', etc.")

        value_str, unit = match.groups()
        value = float(value_str)

        # Set default unit to 'in' if not specified
        if not unit:
            unit = 'in'

        # Convert to inches for validation
        if unit == 'cm':
            value_inches = value / 2.54
        elif unit == 'mm':
            value_inches = value / 25.4
        elif unit == 'pt':
            value_inches = value / 72
        elif unit == 'px':
            value_inches = value / 96  # Assuming 96 DPI
        else:  # 'in'
            value_inches = value

        # Validate range: minimum 0 inches, maximum 3 inches
        if value_inches < 0:
            raise ValueError(f"Margin cannot be negative: '{margin_str}'. Minimum value is 0.")
        elif value_inches > 3:
            raise ValueError(f"Margin too large: '{margin_str}'. Maximum value is 3 inches (7.62cm).")

        return f"{value:g}{unit}"

    def _parse_margins(self, page_margins: str) -> Dict[str, str]:
        """Parse margin string into individual margin values."""
        margin_parts = page_margins.split()

        if len(margin_parts) == 1:
            # All margins same
            margin = self._validate_margin(margin_parts[0])
            return {'top': margin, 'right': margin, 'bottom': margin, 'left': margin}
        elif len(margin_parts) == 2:
            # Vertical and horizontal
            vertical = self._validate_margin(margin_parts[0])
            horizontal = self._validate_margin(margin_parts[1])
            return {'top': vertical, 'right': horizontal, 'bottom': vertical, 'left': horizontal}
        elif len(margin_parts) == 4:
            # Top, right, bottom, left
            return {
                'top': self._validate_margin(margin_parts[0]),
                'right': self._validate_margin(margin_parts[1]),
                'bottom': self._validate_margin(margin_parts[2]),
                'left': self._validate_margin(margin_parts[3])
            }
        else:
            raise ValueError(f"Invalid margin format: '{page_margins}'. Use 1, 2, or 4 values.")

    def _resolve_margins(self, options: Dict[str, Any], header: bool, footer: bool) -> Dict[str, str]:
        """Explicit margins win; otherwise leave room for header and footer."""
        if options.get("margins"):
            return self._parse_margins(str(options["margins"]))
        return {
            'top': '100px' if header else '25mm',
            'right': '25mm',
            'bottom': '120px' if footer else '25mm',
            'left': '25mm',
        }

    def _extract_title(self, md_file: Path, content: str) -> str:
        """Extract the document title from markdown content.

        Preference order:
        1) First ATX H1 heading starting with '# '
        2) Setext H1 style (line followed by '===')
        3) Humanized filename stem
        """
        # 1) ATX H1: lines that start with '# ' but not '## '
        for line in content.splitlines():
            stripped = line.strip()
            if stripped.startswith('# '):
                heading_text = stripped[2:].strip()
                if heading_text:
                    return heading_text

        # 2) Setext H1: a line followed by a line of '=' (at least 3)
        lines = content.splitlines()
        for i in range(len(lines) - 1):
            current_line = lines[i].strip()
            if current_line and re.fullmatch(r"={3,}", lines[i + 1].strip()):
                return current_line

        # 3) Fallback to humanized filename stem
        stem = md_file.stem.replace('_', ' ').replace('-', ' ').strip()
        return stem.title() if stem else md_file.stem

    def _resolve_path(self, value: Any, md_file: Path) -> Path:
        """Resolve an option path against the document directory, then the cwd."""
        path = Path(str(value)).expanduser()
        if path.is_absolute():
            return path
        beside_document = md_file.parent / path
        if beside_document.exists():
            return beside_document
        return Path.cwd() / path

    def _output_path(self, md_file: Path, options: Dict[str, Any]) -> Path:
        if options.get("output"):
            return Path(str(options["output"])).expanduser()
        output_dir = options.get("output_dir")
        if output_dir:
            output_dir = Path(str(output_dir)).expanduser()
            output_dir.mkdir(parents=True, exist_ok=True)
            return output_dir / f"{md_file.stem}.pdf"
        return Path.cwd() / f"{md_file.stem}.pdf"

    def _load_css(self, options: Dict[str, Any], css_file: Path, md_file: Path) -> str:
        if options.get("css"):
            custom_css = self._resolve_path(options["css"], md_file)
            if custom_css.is_file():
                self.logger.debug(f"Using stylesheet: {custom_css}")
                return COMPONENT_CSS + custom_css.read_text(encoding="utf-8")
            self.logger.warning(f"Stylesheet not found: {custom_css}")

        if css_file.is_file():
            css = css_file.read_text(encoding="utf-8")
            self.logger.debug(f"Template CSS loaded ({len(css)} characters)")
            return COMPONENT_CSS + css

        self.logger.warning("Template CSS not found, using default style")
        return COMPONENT_CSS + DEFAULT_CSS

    def prepare_document(self, md_file: Path, overrides: Optional[Dict[str, Any]] = None) -> RenderJob:
        """Build the HTML page and print settings for a markdown file.

        Front matter overrides the configuration; `overrides` (per-call CLI
        values such as --output) win over both.
        """
        content = md_file.read_text(encoding="utf-8")
        front_matter, body = split_front_matter(content, self.logger)
        options = merge_options(self.config.to_dict(), front_matter)
        options.update(overrides or {})

        template = self.templates.find(str(options.get("template") or "default"))
        self.logger.debug(f"Template: {template.name} ({template.root})")

        logo_path = self._resolve_path(options["logo"], md_file) if options.get("logo") else template.logo
        title = str(options.get("title") or self._extract_title(md_file, body))

        variables = template_variables(front_matter)
        variables.update({
            "LOGO": load_logo(logo_path, self.logger) or "",
            "DATE": str(front_matter.get("date") or format_date()),
            "TITLE": title,
        })

        header = parse_bool(options.get("header", True))
        footer = parse_bool(options.get("footer", True))
        header_html = load_html_template(template.header, variables) if header else EMPTY_HEADER_FOOTER
        footer_html = load_html_template(template.footer, variables) if footer else EMPTY_HEADER_FOOTER
        self.logger.debug(f"Header {'loaded' if header else 'disabled'}, footer {'loaded' if footer else 'disabled'}")

        processed = preprocess_markdown(
            body,
            md_file.parent,
            toc_start=parse_level(options.get("toc_start", 1), "toc_start"),
            toc_depth=parse_level(options.get("toc_depth", 3), "toc_depth"),
            toc_title=str(options.get("toc_title") or DEFAULT_TOC_TITLE),
            logger=self.logger,
        )
        css = self._load_css(options, template.css, md_file)
        html = build_html_document(render_body(processed), css, title)

        return RenderJob(
            source=md_file,
            output_pdf=self._output_path(md_file, options),
            title=title,
            html=html,
            header_html=header_html,
            footer_html=footer_html,
            display_header_footer=header or footer,
            margins=self._resolve_margins(options, header, footer),
        )

    async def _convert_html_to_pdf(self, job: RenderJob) -> None:
        """Print the prepared HTML to PDF using Playwright (Puppeteer approach)."""
        async with async_playwright() as p:
            browser = await p.chromium.launch(headless=True)
            try:
                page = await browser.new_page()
                await page.set_content(job.html, wait_until='networkidle')
                await page.pdf(
                    path=str(job.output_pdf),
                    format='A4',
                    margin=job.margins,
                    display_header_footer=job.display_header_footer,
                    header_template=job.header_html,
                    footer_template=job.footer_html,
                    print_background=True,
                    tagged=True,
                )
            finally:
                await browser.close()

    def render_pdf(self, job: RenderJob) -> None:
        # Run async function in sync context
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
        try:
            loop.run_until_complete(self._convert_html_to_pdf(job))
        finally:
            loop.close()

    def convert_file(self, md_file: Path, overrides: Optional[Dict[str, Any]] = None) -> Path:
        """Convert one markdown file to PDF and return the PDF path."""
        self.logger.info(f"Converting {md_file.name}...")
        job = self.prepare_document(md_file, overrides)
        job.output_pdf.parent.mkdir(parents=True, exist_ok=True)
        self.logger.debug(f"Output: {job.output_pdf}, margins: {job.margins}")
        self.render_pdf(job)
        self.logger.success(f"PDF generated: {job.output_pdf}")
        return job.output_pdf

    def convert_all(self, md_files: Sequence[Path], overrides: Optional[Dict[str, Any]] = None) -> Tuple[int, int]:
        """Convert files one after the other; a failing file does not stop the batch.

        Returns (converted, failed) counts.
        """
        converted = 0
        failed = 0

        for md_file in md_files:
            if not md_file.is_file():
                self.logger.error(f"File not found: {md_file}")
                failed += 1
                continue
            try:
                self.convert_file(md_file, overrides)
                converted += 1
            except Exception as e:
                self.logger.error(f"Error converting {md_file.name}: {e}")
                self.logger.error(traceback.format_exc().rstrip())
                failed += 1

        self.logger.success(f"Conversion complete: {converted} files converted, {failed} files failed ({len(md_files)} total)")
        return converted, failed

    def print_templates(self) -> None:
        """Print available templates per origin."""
        listing = self.templates.list_templates()
        labels = {
            "user": f"User templates ({self.templates.roots[0][1]})",
            "project": "Bundled templates",
        }
        print(f"\n{Fore.CYAN}Available templates:{Style.RESET_ALL}")
        for origin, names in listing.items():
            if names:
                print(f"\n  {labels[origin]}:")
                for name in names:
                    print(f"    - {name}")
        print()


def collect_markdown_files(paths: List[str]) -> List[Path]:
    """Use the given paths, or every *.md file of the current directory."""
    if paths:
        return [Path(p).resolve() for p in paths]
    return sorted(Path.cwd().glob("*.md"))


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        prog="mdpdf",
        description="Convert markdown files to PDF with templates, table of contents and alerts",
    )
    parser.add_argument("files", nargs="*", help="Markdown files to convert (default: every *.md in the current directory)")
    parser.add_argument("--template", help="Template name (default: default)")
    parser.add_argument("--no-header", dest="header", action="store_false", default=None, help="Disable the page header")
    parser.add_argument("--no-footer", dest="footer", action="store_false", default=None, help="Disable the page footer")
    parser.add_argument("--logo", help="Logo image used by the header template")
    parser.add_argument("--css", help="Stylesheet replacing the template CSS")
    parser.add_argument("-o", "--output", help="Output PDF path (single input file only)")
    parser.add_argument("--output-dir", help="Directory receiving the PDF files (default: current directory)")
    parser.add_argument("--toc-start", type=int, help="Highest heading level listed in the table of contents (default: 1)")
    parser.add_argument("--toc-depth", type=int, help="Deepest heading level listed in the table of contents (default: 3)")
    parser.add_argument("--toc-title", help="Title displayed above the table of contents")
    parser.add_argument("--margins", help="Page margins in CSS format, e.g. '1in 0.75in'. Range: 0-3 inches. Use 1, 2, or 4 values. Units: in, cm, mm, pt, px")
    parser.add_argument("--list-templates", action="store_true", help="List available templates and exit")
    parser.add_argument("--check-deps", action="store_true", help="Check required dependencies and exit")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging for detailed output")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    args = parser.parse_args(argv)

    if args.check_deps:
        sys.exit(0 if check_dependencies() else 1)

    config = Config({
        "template": args.template,
        "header": args.header,
        "footer": args.footer,
        "logo": str(Path(args.logo).resolve()) if args.logo else None,
        "css": str(Path(args.css).resolve()) if args.css else None,
        "output_dir": args.output_dir,
        "toc_start": args.toc_start,
        "toc_depth": args.toc_depth,
        "toc_title": args.toc_title,
        "margins": args.margins,
    })
    converter = MarkdownToPDFConverter(config, debug=args.debug)

    if args.list_templates:
        converter.print_templates()
        return

    md_files = collect_markdown_files(args.files)
    if not md_files:
        converter.logger.info("No markdown files found in the current directory.")
        return
    if args.output and len(md_files) > 1:
        parser.error("--output can only be used with a single input file")

    converter.logger.info(f"Found {len(md_files)} markdown files: {[f.name for f in md_files]}")
    overrides = {"output": args.output} if args.output else None
    _, failed = converter.convert_all(md_files, overrides)
    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
