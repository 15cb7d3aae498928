"""Composes inferred project facts into the final README markdown."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Sequence

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from ..config import ReadmeDefaults
from ..inference.descriptions import describe
from ..models import CommandSet, ManifestData, TechStack, ordered_stack

TEMPLATE_NAME = "readme.md.j2"
_DEFAULT_TEMPLATES_DIR = Path(__file__).with_name("templates")


class ReadmeAssembler:
    """Renders README sections in a fixed order, omitting empty ones.

    Section order: header, features, tech stack, getting started, scripts,
    environment variables, folder structure, license. Header, tech stack,
    getting started and license are always present.
    """

    def __init__(self, templates_dir: Path | None = None) -> None:
        self.templates_dir = templates_dir
        self._env = self._create_env(templates_dir)

    def assemble(
        self,
        manifest: ManifestData,
        stack: TechStack,
        commands: CommandSet,
        features: Sequence[str],
        env_vars: Sequence[str],
        tree: Optional[str],
        *,
        defaults: ReadmeDefaults | None = None,
    ) -> str:
        defaults = defaults or ReadmeDefaults()
        context = {
            "title": manifest.name or defaults.title,
            "description": manifest.description or defaults.description,
            "features": list(features),
            "stack": self._stack_rows(stack),
            "commands": commands,
            "scripts": list(manifest.scripts.items()),
            "env_vars": list(env_vars),
            "tree": tree,
            "license": manifest.license or defaults.license,
        }
        rendered = self._env.get_template(TEMPLATE_NAME).render(**context)
        return rendered.rstrip("\n") + "\n"

    @staticmethod
    def _stack_rows(stack: TechStack) -> List[Dict[str, str]]:
        return [{"name": tag.value, "description": describe(tag)} for tag in ordered_stack(stack)]

    @staticmethod
    def _create_env(templates_dir: Path | None) -> Environment:
        directories = []
        if templates_dir is not None:
            directories.append(str(templates_dir))
        directories.append(str(_DEFAULT_TEMPLATES_DIR))
        return Environment(
            loader=FileSystemLoader(directories),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )


def assemble_readme(
    manifest: ManifestData,
    stack: TechStack,
    commands: CommandSet,
    features: Sequence[str],
    env_vars: Sequence[str],
    tree: Optional[str],
    *,
    defaults: ReadmeDefaults | None = None,
) -> str:
    """Render a README with the bundled template."""
    return ReadmeAssembler().assemble(
        manifest, stack, commands, features, env_vars, tree, defaults=defaults
    )


__all__ = ["ReadmeAssembler", "TEMPLATE_NAME", "assemble_readme"]
