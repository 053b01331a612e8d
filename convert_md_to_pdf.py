#!/usr/bin/env python3
"""
Convert markdown files to PDF with templates, table of contents and alerts.

Usage:
  python3 convert_md_to_pdf.py document.md
  python3 convert_md_to_pdf.py doc1.md doc2.md --template qualiopi
  python3 convert_md_to_pdf.py --no-header --no-footer
"""

from mdpdf.converter import main


if __name__ == "__main__":
    main()
