"""
Orchestrator

Glue layer. Wires the extractor and detector together and feeds them
documents from the filesystem or from Git history.
No matching, no brace tracking.
"""
from pathlib import Path, PurePosixPath
from typing import Dict, List, Optional

from .data_structures import Detection
from .detector import detect_functions
from .extractor import extract_script
from .revision import GitRevisionReader

TARGET_SUFFIX = ".svelte"

SKIP_DIRS = {"node_modules", "__pycache__", "build", "dist"}


def is_target_document(path) -> bool:
    """Applicability is decided by file extension only."""
    return str(path).endswith(TARGET_SUFFIX)


def outline_document(document_text: str, is_target_dialect: bool = True) -> List[Detection]:
    """
    Run one analysis pass over a document snapshot.

    Pure: no I/O, no state kept between calls.
    """
    if not is_target_dialect:
        return []

    script_text, line_offset = extract_script(document_text)
    return detect_functions(script_text, line_offset)


def _read_text(file_path: Path) -> str:
    return file_path.read_text(encoding="utf-8", errors="replace")


def outline_file(file_path: Path) -> List[Detection]:
    return outline_document(_read_text(file_path), is_target_document(file_path))


def _is_skipped(rel_path: Path) -> bool:
    return any(p.startswith(".") or p in SKIP_DIRS for p in rel_path.parts[:-1])


def _iter_documents(root: Path) -> List[Path]:
    return sorted(
        file_path
        for file_path in root.rglob(f"*{TARGET_SUFFIX}")
        if file_path.is_file() and not _is_skipped(file_path.relative_to(root))
    )


def outline_path(path: Path) -> Dict[Path, List[Detection]]:
    """
    Outline a single document or every component under a directory.

    A file is always analyzed, and yields no detections unless it has
    the target suffix. Directories are walked in sorted order, skipping
    hidden and dependency/build folders.
    """
    target = Path(path).resolve()

    if not target.exists():
        raise ValueError(f"Path does not exist: {target}")

    if target.is_file():
        return {target: outline_file(target)}

    return {file_path: outline_file(file_path) for file_path in _iter_documents(target)}


def _nearest_existing_dir(target: Path) -> Path:
    candidate = target if target.is_dir() else target.parent
    while not candidate.is_dir() and candidate != candidate.parent:
        candidate = candidate.parent
    return candidate


def outline_revision(
    path: Path,
    rev: str = "HEAD",
    repo_path: Optional[Path] = None,
) -> Dict[str, List[Detection]]:
    """
    Outline documents as they were at a Git revision.

    path may name a file (which need not exist in the work tree any more)
    or a directory. Keys are repository-relative paths.
    """
    target = Path(path).absolute()

    if repo_path is None:
        repo_path = _nearest_existing_dir(target)

    reader = GitRevisionReader(str(repo_path))

    if target.is_dir():
        rel_dir = PurePosixPath(reader.relative_path(str(target)))
        rel_paths = [
            p for p in reader.list_files(rev, suffix=TARGET_SUFFIX, directory=str(target))
            if not _is_skipped(PurePosixPath(p).relative_to(rel_dir))
        ]
    else:
        rel_paths = [reader.relative_path(str(target))]

    outlines: Dict[str, List[Detection]] = {}
    for rel_path in rel_paths:
        text = reader.read_file(str(reader.top_level / rel_path), rev=rev)
        outlines[rel_path] = outline_document(text, is_target_document(rel_path))

    return outlines
