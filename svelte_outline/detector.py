"""
Function Detector & Hierarchy Builder

Scans script text line by line, tracking brace depth, and reports
arrow-function bindings with their nesting level.

Design principles:
- Regex only, no tokenizer (braces inside strings and comments count)
- One detection per line at most
- Never raises; unbalanced braces give best-effort levels
"""
import re
from typing import List

from .data_structures import Detection

# name = [async] (params) => ...   |   name = [async] param => ...
ARROW_BINDING = re.compile(
    r"(?:const|let)\s+([A-Za-z0-9_]+)\s*=\s*(?:async\s*)?(?:\([^)]*\)|[A-Za-z0-9_]+)\s*=>"
)

FUNCTION_PATTERNS = [ARROW_BINDING]


def _update_brace_stack(line: str, line_index: int, brace_stack: List[int]) -> None:
    for char in line:
        if char == "{":
            brace_stack.append(line_index)
        elif char == "}" and brace_stack:
            brace_stack.pop()


def _match_line(line: str):
    for pattern in FUNCTION_PATTERNS:
        match = pattern.search(line)
        if match:
            return match
    return None


def detect_functions(script_text: str, line_offset: int = 0) -> List[Detection]:
    """
    Detect function bindings in script text.

    Brace updates for a line are applied before the line is matched,
    so a binding sees the depth after its own opening brace. That brace
    is discounted, hence the minus one.
    """
    detections: List[Detection] = []
    brace_stack: List[int] = []

    for i, line in enumerate(script_text.split("\n")):
        _update_brace_stack(line, i, brace_stack)

        match = _match_line(line)
        if match is None:
            continue

        detections.append(Detection(
            name=match.group(1),
            line=i + line_offset,
            column=match.start(),
            nesting_level=max(0, len(brace_stack) - 1),
        ))

    return detections
