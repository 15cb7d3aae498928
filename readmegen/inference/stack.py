"""Technology stack inference from dependency names and marker files."""

from __future__ import annotations

from typing import Collection, Iterable, Mapping, Set

from ..models import TechStack, TechTag

# Package name (lowercase) -> tag it implies.
DEPENDENCY_RULES: tuple[tuple[str, TechTag], ...] = (
    ("react", TechTag.REACT),
    ("next", TechTag.NEXTJS),
    ("vue", TechTag.VUE),
    ("express", TechTag.EXPRESS),
    ("mongoose", TechTag.MONGOOSE),
    ("flask", TechTag.FLASK),
    ("django", TechTag.DJANGO),
    ("tailwindcss", TechTag.TAILWINDCSS),
    ("typescript", TechTag.TYPESCRIPT),
    ("vite", TechTag.VITE),
    # Terminal colouring library, taken as a sign of a Node.js tool.
    ("chalk", TechTag.NODEJS),
)

_FRONTEND_MARKER = "index.html"

# Only consulted when the frontend marker is present.
_ASSET_MARKERS: tuple[tuple[str, TechTag], ...] = (
    ("style.css", TechTag.CSS),
    ("script.js", TechTag.JAVASCRIPT),
)


def infer_stack(
    dependencies: Mapping[str, str],
    dev_dependencies: Mapping[str, str],
    markers: Collection[str] = frozenset(),
    *,
    extra: Iterable[TechTag] = (),
) -> TechStack:
    """Return the set of technologies implied by the project signals.

    The result always contains :attr:`TechTag.JAVASCRIPT`.
    """
    names = {name.lower() for name in (*dependencies, *dev_dependencies)}
    stack: Set[TechTag] = {tag for package, tag in DEPENDENCY_RULES if package in names}

    if _FRONTEND_MARKER in markers:
        stack.add(TechTag.HTML)
        stack.update(tag for marker, tag in _ASSET_MARKERS if marker in markers)

    stack.update(extra)
    stack.add(TechTag.JAVASCRIPT)
    return frozenset(stack)


__all__ = ["DEPENDENCY_RULES", "infer_stack"]
