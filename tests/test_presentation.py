"""
Unit tests for svelte_outline.presentation.

Test philosophy:
    - One row per detection, order preserved
    - Nesting only changes the label indentation
    - Navigation targets point back into the original document
"""
import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))


from svelte_outline.data_structures import Detection
from svelte_outline.presentation import (
    FUNCTION_ICON,
    INDENT,
    NAVIGATION_COMMAND,
    build_rows,
    navigation_target,
    render_json,
    render_text,
)


def _detection(name="handle", line=3, column=2, nesting_level=0):
    return Detection(name=name, line=line, column=column, nesting_level=nesting_level)


# ---------------------------------------------------------------------------
# Rows
# ---------------------------------------------------------------------------

class TestBuildRows:

    def test_one_row_per_detection_in_order(self):
        detections = [_detection("z"), _detection("a"), _detection("m")]
        rows = build_rows(detections)
        assert [r.detection for r in rows] == detections

    def test_top_level_label(self):
        row = build_rows([_detection("load")])[0]
        assert row.label == f"{FUNCTION_ICON} load"

    def test_nested_label_is_indented(self):
        row = build_rows([_detection("inner", nesting_level=2)])[0]
        assert row.label == INDENT * 2 + f"{FUNCTION_ICON} inner"

    def test_empty_input(self):
        assert build_rows([]) == []

    def test_navigation_target(self):
        detection = _detection(line=10, column=4)
        assert navigation_target(detection) == (10, 4)
        assert build_rows([detection])[0].target == (10, 4)
        assert navigation_target(detection) == detection.position

    def test_command_carries_position(self):
        row = build_rows([_detection(line=7, column=1)])[0]
        assert row.command["command"] == NAVIGATION_COMMAND
        assert row.command["arguments"] == [7, 1]

    def test_detections_not_mutated(self):
        detection = _detection(nesting_level=1)
        build_rows([detection])
        assert detection == _detection(nesting_level=1)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

class TestRender:

    def test_text_empty(self):
        assert render_text([]) == "No functions found."

    def test_text_one_line_per_row(self):
        rows = build_rows([_detection("a", line=0, column=0), _detection("b", line=1, column=2, nesting_level=1)])
        lines = render_text(rows).split("\n")

        assert len(lines) == 2
        assert lines[0].endswith(f"{FUNCTION_ICON} a")
        assert lines[1].endswith(f"{INDENT}{FUNCTION_ICON} b")

    def test_text_positions_are_one_based(self):
        text = render_text(build_rows([_detection(line=4, column=6)]))
        assert text.lstrip().startswith("5:7")

    def test_json_structure(self):
        outlines = {"src/App.svelte": [_detection("a", line=1, column=0, nesting_level=0)]}
        payload = json.loads(render_json(outlines))

        assert payload == [
            {
                "path": "src/App.svelte",
                "functions": [
                    {"name": "a", "line": 1, "column": 0, "nesting_level": 0},
                ],
            }
        ]

    def test_json_empty(self):
        assert json.loads(render_json({})) == []
