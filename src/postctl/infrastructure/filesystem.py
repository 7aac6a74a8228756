"""Filesystem operations for post content.

INVARIANT: Files are truth, and a written post is never overwritten.
New posts are new files; :func:`write_post_file` refuses to clobber.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from postctl.domain.post import Post

# Section description files read by the site generator; not posts.
SECTION_INDEX_STEM = "_index"

# Directories to skip when discovering content files.
_SKIP_DIRS = frozenset({".git", ".postctl", "node_modules"})


# ---------------------------------------------------------------------------
# File I/O
# ---------------------------------------------------------------------------


def read_post_text(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def read_post_file(path: Path) -> Post:
    """Read and parse a post file."""
    return Post.from_text(read_post_text(path))


def write_post_file(path: Path, content: str) -> None:
    """Write a new post file, creating parent directories.

    Raises:
        FileExistsError: If *path* already exists.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("x", encoding="utf-8") as fh:
        fh.write(content)


# ---------------------------------------------------------------------------
# Path resolution
# ---------------------------------------------------------------------------


def resolve_post_path(
    content_root: Path,
    slug: str,
    *,
    section: str | None = None,
    extension: str = ".md",
) -> Path:
    """Resolve ``{content_root}/{section}/{slug}{extension}``.

    Raises:
        ValueError: If the result escapes *content_root*.
    """
    path = content_root
    if section:
        path = path / section
    result = path / f"{slug}{extension}"

    root_resolved = content_root.resolve()
    if not result.resolve().is_relative_to(root_resolved):
        msg = f"Path escapes content root: {result}"
        raise ValueError(msg)

    return result


def find_post_files(
    content_root: Path,
    *,
    extensions: Iterable[str] = (".md",),
) -> list[Path]:
    """Discover all post files under *content_root*.

    Skips hidden and tooling directories and section ``_index`` files.
    """
    if not content_root.is_dir():
        return []

    suffixes = frozenset(extensions)
    results: list[Path] = []
    for path in content_root.rglob("*"):
        if not path.is_file() or path.suffix not in suffixes:
            continue
        rel_parts = path.relative_to(content_root).parts
        if any(part in _SKIP_DIRS or part.startswith(".") for part in rel_parts):
            continue
        if path.stem == SECTION_INDEX_STEM:
            continue
        results.append(path)

    return sorted(results)
