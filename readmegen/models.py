"""Core data models shared across readmegen components."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional


class TechTag(Enum):
    """Closed vocabulary of technologies the inferencer can recognise.

    Declaration order is the order tags are rendered in.
    """

    REACT = "React"
    NEXTJS = "Nextjs"
    VUE = "Vue"
    EXPRESS = "Express"
    MONGOOSE = "Mongoose"
    FLASK = "Flask"
    DJANGO = "Django"
    TAILWINDCSS = "Tailwindcss"
    TYPESCRIPT = "Typescript"
    VITE = "Vite"
    NODEJS = "Nodejs"
    HTML = "HTML"
    CSS = "CSS"
    JAVASCRIPT = "JavaScript"
    PYTHON = "Python"

    @classmethod
    def parse(cls, name: str) -> "TechTag":
        """Return the tag whose name matches ``name`` case-insensitively."""
        lookup = name.strip().lower()
        for tag in cls:
            if tag.value.lower() == lookup:
                return tag
        raise ValueError(f"Unknown technology tag: {name!r}")

    def __str__(self) -> str:
        return self.value


TechStack = FrozenSet[TechTag]

_TAG_ORDER: Dict[TechTag, int] = {tag: index for index, tag in enumerate(TechTag)}


def ordered_stack(stack: Iterable[TechTag]) -> List[TechTag]:
    """Return ``stack`` in vocabulary order so rendering is deterministic."""
    return sorted(set(stack), key=_TAG_ORDER.__getitem__)


@dataclass(frozen=True)
class ManifestData:
    """Project metadata read from the manifest file."""

    name: Optional[str] = None
    description: Optional[str] = None
    license: Optional[str] = None
    dependencies: Mapping[str, str] = field(default_factory=dict)
    dev_dependencies: Mapping[str, str] = field(default_factory=dict)
    scripts: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class CommandSet:
    """Install and run commands shown in the getting-started section."""

    install: str
    run: str


@dataclass(frozen=True)
class ProjectSignals:
    """Everything read from disk for one project; inputs to the pure pipeline."""

    manifest: ManifestData
    env_vars: List[str] = field(default_factory=list)
    markers: FrozenSet[str] = frozenset()
    tree: Optional[str] = None


__all__ = [
    "CommandSet",
    "ManifestData",
    "ProjectSignals",
    "TechStack",
    "TechTag",
    "ordered_stack",
]
