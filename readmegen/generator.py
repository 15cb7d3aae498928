"""Pipeline orchestration: collect signals, infer, assemble, write."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import List

from .config import ReadmeGenConfig, load_config
from .inference import infer_commands, infer_stack, synthesize_features
from .logging import get_logger
from .models import CommandSet, ProjectSignals, TechStack, ordered_stack
from .rendering import ReadmeAssembler
from .signals import collect_signals


@dataclass
class Inference:
    """Everything derived from a project's signals before rendering."""

    stack: TechStack
    commands: CommandSet
    features: List[str] = field(default_factory=list)


@dataclass
class GenerationOutcome:
    """Result of a README generation run."""

    path: Path
    content: str
    written: bool


class ReadmeGenerator:
    """Coordinates README generation for a single project directory."""

    def __init__(
        self,
        config: ReadmeGenConfig | None = None,
        assembler: ReadmeAssembler | None = None,
    ) -> None:
        self._config = config
        self._assembler = assembler
        self.logger = get_logger("generator")

    def load_config(self, root: Path) -> ReadmeGenConfig:
        if self._config is not None:
            return replace(self._config, root=root)
        return load_config(root)

    def collect(self, root: Path, config: ReadmeGenConfig) -> ProjectSignals:
        return collect_signals(root, config)

    def infer(self, signals: ProjectSignals, config: ReadmeGenConfig) -> Inference:
        manifest = signals.manifest
        stack = infer_stack(
            manifest.dependencies,
            manifest.dev_dependencies,
            signals.markers,
            extra=config.include_tags,
        )
        commands = infer_commands(
            stack,
            install=config.commands.install,
            run=config.commands.run,
        )
        features = synthesize_features(stack, manifest.scripts, signals.env_vars, signals.tree)
        self.logger.debug(
            "Inferred stack: %s", ", ".join(tag.value for tag in ordered_stack(stack))
        )
        self.logger.debug("Commands: install=%r run=%r", commands.install, commands.run)
        return Inference(stack=stack, commands=commands, features=features)

    def build(self, signals: ProjectSignals, config: ReadmeGenConfig) -> str:
        """Render README content from already-collected signals. Performs no I/O."""
        inference = self.infer(signals, config)
        assembler = self._assembler or ReadmeAssembler(config.readme.templates_dir)
        return assembler.assemble(
            signals.manifest,
            inference.stack,
            inference.commands,
            inference.features,
            signals.env_vars,
            signals.tree,
            defaults=config.readme,
        )

    def inspect(self, path: str) -> Inference:
        """Return the inference for ``path`` without rendering or writing."""
        root = Path(path).expanduser().resolve()
        config = self.load_config(root)
        return self.infer(self.collect(root, config), config)

    def run(self, path: str, *, dry_run: bool = False) -> GenerationOutcome:
        """Generate the README for ``path`` and write it unless ``dry_run``."""
        root = Path(path).expanduser().resolve()
        if not root.is_dir():
            raise NotADirectoryError(f"Project path is not a directory: {path}")
        self.logger.info("Generating README for %s", root)

        config = self.load_config(root)
        signals = self.collect(root, config)
        content = self.build(signals, config)

        readme_path = root / config.output
        if dry_run:
            self.logger.debug("Dry run; not writing %s", readme_path)
            return GenerationOutcome(path=readme_path, content=content, written=False)

        readme_path.write_text(content, encoding="utf-8")
        self.logger.info("README written to %s", readme_path)
        return GenerationOutcome(path=readme_path, content=content, written=True)


__all__ = ["GenerationOutcome", "Inference", "ReadmeGenerator"]
