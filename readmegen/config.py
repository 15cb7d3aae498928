"""Configuration loading for readmegen (.readmegen.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .models import TechTag

CONFIG_FILENAME = ".readmegen.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class TreeConfig:
    """Folder structure section settings."""

    root: str = "src"
    depth: int = 2
    sort: bool = True
    exclude: List[str] = field(default_factory=list)


@dataclass
class CommandOverrides:
    """Install/run commands that replace the inferred ones."""

    install: Optional[str] = None
    run: Optional[str] = None


@dataclass
class ReadmeDefaults:
    """Fallback text used when the manifest leaves fields empty."""

    title: str = "Project Name"
    description: str = "A modern application with clean architecture."
    license: str = "MIT"
    templates_dir: Optional[Path] = None


@dataclass
class ReadmeGenConfig:
    """Represents the settings defined in .readmegen.yml."""

    root: Path
    output: str = "README.md"
    manifest: str = "package.json"
    env_file: str = ".env.example"
    tree: TreeConfig = field(default_factory=TreeConfig)
    include_tags: List[TechTag] = field(default_factory=list)
    commands: CommandOverrides = field(default_factory=CommandOverrides)
    readme: ReadmeDefaults = field(default_factory=ReadmeDefaults)


def load_config(config_path: Path) -> ReadmeGenConfig:
    """Load configuration from a project directory or an explicit config file."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return ReadmeGenConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = ReadmeGenConfig(root=root)
    config.output = _as_str(data.get("output")) or config.output
    config.manifest = _as_str(data.get("manifest")) or config.manifest
    config.env_file = _as_str(data.get("env_file")) or config.env_file

    tree_data = _as_dict(data.get("tree"))
    if tree_data:
        tree = config.tree
        tree.root = _as_str(tree_data.get("root")) or tree.root
        depth = _as_int(tree_data.get("depth"))
        if depth is not None:
            if depth < 1:
                raise ConfigError("tree.depth must be at least 1")
            tree.depth = depth
        sort = _as_bool(tree_data.get("sort"))
        if sort is not None:
            tree.sort = sort
        tree.exclude = _as_str_list(tree_data.get("exclude"))

    stack_data = _as_dict(data.get("stack"))
    if stack_data:
        config.include_tags = _parse_tags(_as_str_list(stack_data.get("include")))

    commands_data = _as_dict(data.get("commands"))
    if commands_data:
        config.commands = CommandOverrides(
            install=_as_str(commands_data.get("install")),
            run=_as_str(commands_data.get("run")),
        )

    readme_data = _as_dict(data.get("readme"))
    if readme_data:
        readme = config.readme
        readme.title = _as_str(readme_data.get("title")) or readme.title
        readme.description = _as_str(readme_data.get("description")) or readme.description
        readme.license = _as_str(readme_data.get("license")) or readme.license
        templates_dir = _as_str(readme_data.get("templates_dir"))
        readme.templates_dir = root / templates_dir if templates_dir else None

    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return {} if loaded is None else loaded


def _parse_tags(names: Sequence[str]) -> List[TechTag]:
    tags: List[TechTag] = []
    for name in names:
        try:
            tag = TechTag.parse(name)
        except ValueError as exc:
            raise ConfigError(f"stack.include: {exc}") from exc
        if tag not in tags:
            tags.append(tag)
    return tags


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "CommandOverrides",
    "ConfigError",
    "ReadmeDefaults",
    "ReadmeGenConfig",
    "TreeConfig",
    "load_config",
]
