"""
Script Extractor

Isolates the typed script block of a component document.
Markup and style regions are ignored entirely.
"""
import re
from typing import List, Tuple

# Only the typed variant is recognized. A bare <script> yields nothing.
SCRIPT_OPEN_PATTERN = re.compile(r'<script lang="ts">')
SCRIPT_CLOSE_MARKER = "</script>"


def extract_script(document_text: str) -> Tuple[str, int]:
    """
    Return the script block text and the document line it starts on.

    Script-local line i maps to document line i + line_offset.
    Without an opening marker the script text is empty.
    """
    script_lines: List[str] = []
    in_script = False
    line_offset = 0

    for index, line in enumerate(document_text.split("\n")):
        if SCRIPT_OPEN_PATTERN.search(line):
            in_script = True
            line_offset = index + 1
            continue

        if SCRIPT_CLOSE_MARKER in line:
            in_script = False
            continue

        if in_script:
            script_lines.append(line + "\n")

    return "".join(script_lines), line_offset
