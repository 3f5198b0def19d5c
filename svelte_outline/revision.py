"""
Git revision snapshots.

Handles:
- Repository validation using subprocess (no GitPython dependency)
- Reading a document as it was at a given revision
- Listing component files tracked at a revision

Read-only: never touches the index or work tree.
"""

import subprocess
from pathlib import Path
from typing import List, Optional, Tuple


class GitRevisionReader:
    """Reads file snapshots from a Git repository."""

    def __init__(self, repo_path: str):
        self.repo_path = Path(repo_path).resolve()
        if not self.repo_path.is_dir():
            raise ValueError(f"Not a Git repository: {repo_path}")

        result = subprocess.run(
            ["git", "rev-parse", "--show-toplevel"],
            cwd=self.repo_path,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
        if result.returncode != 0:
            raise ValueError(f"Not a Git repository: {repo_path}")

        self.top_level = Path(result.stdout.strip()).resolve()

    def _run_git(self, args: List[str], check: bool = True) -> Tuple[int, str, str]:
        result = subprocess.run(
            ["git"] + args,
            cwd=self.top_level,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
        if check and result.returncode != 0:
            raise RuntimeError(
                f"Git command failed: {' '.join(args)}\n{result.stderr}"
            )
        return result.returncode, result.stdout, result.stderr

    def relative_path(self, path: str) -> str:
        """Repository-relative POSIX path; relative input is taken from repo_path."""
        candidate = Path(path)
        if not candidate.is_absolute():
            candidate = self.repo_path / candidate
        try:
            return candidate.resolve().relative_to(self.top_level).as_posix()
        except ValueError:
            raise ValueError(f"Path is outside the repository: {path}")

    def resolve_revision(self, rev: str = "HEAD") -> str:
        code, stdout, _ = self._run_git(
            ["rev-parse", "--verify", "--quiet", f"{rev}^{{commit}}"], check=False
        )
        if code != 0:
            raise ValueError(f"Unknown revision: {rev}")
        return stdout.strip()

    def read_file(self, path: str, rev: str = "HEAD") -> str:
        """
        Return the text of path at rev.

        Raises ValueError if the revision or the path does not exist there.
        """
        sha = self.resolve_revision(rev)
        rel_path = self.relative_path(path)

        code, stdout, _ = self._run_git(["show", f"{sha}:{rel_path}"], check=False)
        if code != 0:
            raise ValueError(f"Path not found at {rev}: {rel_path}")
        return stdout

    def list_files(
        self,
        rev: str = "HEAD",
        suffix: str = "",
        directory: Optional[str] = None,
    ) -> List[str]:
        """Tracked files at rev, repository-relative, sorted."""
        sha = self.resolve_revision(rev)
        args = ["ls-tree", "-r", "-z", "--name-only", sha]
        if directory is not None:
            rel_dir = self.relative_path(directory)
            if rel_dir != ".":
                args += ["--", rel_dir]
        _, stdout, _ = self._run_git(args)

        return sorted(
            line for line in stdout.split("\0")
            if line and line.endswith(suffix)
        )


def read_revision(repo_path: str, path: str, rev: str = "HEAD") -> str:
    reader = GitRevisionReader(repo_path)
    return reader.read_file(path, rev=rev)
