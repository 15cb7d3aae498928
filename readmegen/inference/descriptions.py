"""One-line descriptions for the tech stack table."""

from __future__ import annotations

from typing import Dict

from ..models import TechTag

FALLBACK_DESCRIPTION = "Used in this project"

_DESCRIPTIONS: Dict[TechTag, str] = {
    TechTag.REACT: "Frontend framework for building UIs",
    TechTag.NEXTJS: "React framework for SSR and static site generation",
    TechTag.VUE: "Progressive frontend framework",
    TechTag.EXPRESS: "Backend web framework for Node.js",
    TechTag.NODEJS: "JavaScript runtime for backend development",
    TechTag.FLASK: "Python micro web framework",
    TechTag.DJANGO: "Python web framework with built-in features",
    TechTag.MONGOOSE: "MongoDB ODM for Node.js",
    TechTag.TAILWINDCSS: "Utility-first CSS framework",
    TechTag.TYPESCRIPT: "Typed superset of JavaScript",
    TechTag.VITE: "Frontend build tool and dev server",
    TechTag.HTML: "Markup language for web pages",
    TechTag.CSS: "Styling language for web pages",
    TechTag.JAVASCRIPT: "Programming language for web apps",
    TechTag.PYTHON: "General-purpose programming language",
}


def describe(tag: TechTag | str) -> str:
    """Return the table description for ``tag``, or a generic fallback."""
    if isinstance(tag, str):
        try:
            tag = TechTag.parse(tag)
        except ValueError:
            return FALLBACK_DESCRIPTION
    if not isinstance(tag, TechTag):
        return FALLBACK_DESCRIPTION
    return _DESCRIPTIONS.get(tag, FALLBACK_DESCRIPTION)


__all__ = ["FALLBACK_DESCRIPTION", "describe"]
