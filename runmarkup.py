#!/usr/bin/env python3
"""
Run Markup - Word run formatting to XHTML

Simple usage:
    python runmarkup.py document.docx         # Outputs document.html
    python runmarkup.py /folder/path          # Converts all .docx files in folder
    python runmarkup.py file.docx --fragment  # Body markup only
"""

import sys
from pathlib import Path

# Add src to path for development
src_path = Path(__file__).parent / "src"
if src_path.exists():
    sys.path.insert(0, str(src_path))

from run_markup.cli import app

if __name__ == "__main__":
    app()
