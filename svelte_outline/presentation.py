"""
Presentation Layer

Turn Detections into display rows.
One row per detection, order preserved, indentation from nesting level.
No tree is built: nesting only affects the label.
"""
import json
from dataclasses import dataclass
from typing import Dict, List, Mapping, Tuple

from .data_structures import Detection

INDENT = "  "
FUNCTION_ICON = "🔧"

NAVIGATION_COMMAND = "svelteFunctionOutline.gotoLine"


@dataclass(frozen=True)
class OutlineRow:
    detection: Detection
    label: str

    @property
    def target(self) -> Tuple[int, int]:
        return navigation_target(self.detection)

    @property
    def command(self) -> Dict[str, object]:
        """Navigation command a host dispatches when the row is selected."""
        line, column = self.target
        return {
            "command":   NAVIGATION_COMMAND,
            "title":     "Go to Function",
            "arguments": [line, column],
        }


def navigation_target(detection: Detection) -> Tuple[int, int]:
    """0-based (line, column) in the document the detection came from."""
    return detection.position


def _build_label(detection: Detection) -> str:
    return INDENT * detection.nesting_level + FUNCTION_ICON + " " + detection.name


def build_rows(detections: List[Detection]) -> List[OutlineRow]:
    return [
        OutlineRow(detection=d, label=_build_label(d))
        for d in detections
    ]


def render_text(rows: List[OutlineRow]) -> str:
    if not rows:
        return "No functions found."

    # 1-based positions for humans
    return "\n".join(
        f"{row.detection.line + 1:>5}:{row.detection.column + 1:<4} {row.label}"
        for row in rows
    )


def _detection_dict(detection: Detection) -> Dict[str, object]:
    return {
        "name":          detection.name,
        "line":          detection.line,
        "column":        detection.column,
        "nesting_level": detection.nesting_level,
    }


def render_json(outlines: Mapping[object, List[Detection]]) -> str:
    payload = [
        {
            "path":      str(path),
            "functions": [_detection_dict(d) for d in detections],
        }
        for path, detections in outlines.items()
    ]
    return json.dumps(payload, indent=2, ensure_ascii=False)
