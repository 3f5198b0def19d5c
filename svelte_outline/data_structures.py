"""
Data structures for outline results.

All structures are immutable and deterministic.
"""
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Detection:
    """One function binding found in a component's script block."""

    name: str
    line: int  # 0-based, in the original document
    column: int  # 0-based offset of the match within the line
    nesting_level: int

    @property
    def position(self) -> Tuple[int, int]:
        """(line, column) pair for cursor navigation."""
        return (self.line, self.column)
