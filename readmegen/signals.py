"""Readers for the on-disk signals a README is inferred from."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, FrozenSet, List, Optional

from .config import ReadmeGenConfig
from .logging import get_logger
from .models import ManifestData, ProjectSignals
from .tree import render_tree

MARKER_FILES = ("index.html", "style.css", "script.js")

_logger = get_logger("signals")


class ManifestNotFoundError(FileNotFoundError):
    """Raised when the project has no manifest to read."""


class ManifestError(ValueError):
    """Raised when the manifest exists but is not a JSON object."""


def load_manifest(path: Path) -> ManifestData:
    """Parse ``package.json``-style metadata into a :class:`ManifestData`."""
    if not path.is_file():
        raise ManifestNotFoundError(f"No {path.name} found in {path.parent}.")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ManifestError(f"Failed to parse {path.name}: {exc}") from exc
    if not isinstance(data, dict):
        raise ManifestError(f"{path.name} must contain a JSON object at the root")

    return ManifestData(
        name=_optional_str(data.get("name")),
        description=_optional_str(data.get("description")),
        license=_optional_str(data.get("license")),
        dependencies=_string_mapping(data.get("dependencies")),
        dev_dependencies=_string_mapping(data.get("devDependencies")),
        scripts=_string_mapping(data.get("scripts")),
    )


def read_env_variables(path: Path) -> List[str]:
    """Return declaration lines from an env example file, skipping comments and blanks."""
    if not path.is_file():
        return []

    declarations: List[str] = []
    # Undecodable bytes are kept as U+FFFD.
    for raw_line in path.read_text(encoding="utf-8", errors="replace").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        declarations.append(line)
    return declarations


def detect_markers(root: Path) -> FrozenSet[str]:
    """Return which well-known marker files exist directly under ``root``."""
    return frozenset(name for name in MARKER_FILES if (root / name).exists())


def collect_signals(root: Path, config: ReadmeGenConfig) -> ProjectSignals:
    """Read every input for ``root``. The manifest is read first and is mandatory."""
    manifest = load_manifest(root / config.manifest)
    _logger.debug(
        "Manifest declares %d dependencies, %d dev dependencies, %d scripts",
        len(manifest.dependencies),
        len(manifest.dev_dependencies),
        len(manifest.scripts),
    )

    env_path = root / config.env_file
    env_vars = read_env_variables(env_path)
    if not env_vars:
        _logger.debug("No environment declarations found in %s", env_path.name)

    markers = detect_markers(root)
    tree = render_tree(
        config.tree.root,
        config.tree.depth,
        base=root,
        sort_entries=config.tree.sort,
        exclude=config.tree.exclude,
    )
    if tree is None:
        _logger.debug("Skipping folder structure; %s is not a directory", config.tree.root)

    return ProjectSignals(manifest=manifest, env_vars=env_vars, markers=markers, tree=tree)


def _optional_str(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value
    return None


def _string_mapping(value: Any) -> Dict[str, str]:
    if not isinstance(value, dict):
        return {}
    return {str(key): str(item) for key, item in value.items()}


__all__ = [
    "MARKER_FILES",
    "ManifestError",
    "ManifestNotFoundError",
    "collect_signals",
    "detect_markers",
    "load_manifest",
    "read_env_variables",
]
