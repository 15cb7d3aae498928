"""Depth-bounded folder tree rendering for the README structure section."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Collection, List

_INDENT = "  "
_BRANCH = "├── "


def render_tree(
    root_path: str | Path,
    max_depth: int = 2,
    *,
    base: Path | None = None,
    sort_entries: bool = True,
    exclude: Collection[str] = (),
) -> str | None:
    """Render ``root_path`` as an indented tree, or ``None`` when it is not a directory.

    The header line repeats ``root_path`` as given. Entries at ``max_depth``
    are listed but not expanded. With ``sort_entries`` disabled the order is
    whatever the filesystem listing returns.
    """
    label = Path(root_path).as_posix()
    directory = base / root_path if base is not None else Path(root_path)
    if not directory.is_dir():
        return None

    lines: List[str] = [f"{label}/"]
    _walk(directory, 1, max_depth, lines, sort_entries, frozenset(exclude))
    return "\n".join(lines).rstrip()


def _walk(
    directory: Path,
    level: int,
    max_depth: int,
    lines: List[str],
    sort_entries: bool,
    exclude: frozenset[str],
) -> None:
    if level > max_depth:
        return

    with os.scandir(directory) as iterator:
        entries = [entry for entry in iterator if entry.name not in exclude]
    if sort_entries:
        entries.sort(key=lambda entry: entry.name)

    for entry in entries:
        lines.append(f"{_INDENT * level}{_BRANCH}{entry.name}")
        if entry.is_dir():
            _walk(Path(entry.path), level + 1, max_depth, lines, sort_entries, exclude)


__all__ = ["render_tree"]
