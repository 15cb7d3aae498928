"""Feature bullet synthesis from the stack and auxiliary project signals."""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, List, Mapping, Optional, Sequence

from ..models import TechStack, TechTag


@dataclass(frozen=True)
class FeatureRule:
    """Emits ``text`` when every tag in ``requires`` is in the stack."""

    requires: FrozenSet[TechTag]
    text: str

    def matches(self, stack: TechStack) -> bool:
        return self.requires <= stack


FEATURE_RULES: tuple[FeatureRule, ...] = (
    FeatureRule(frozenset({TechTag.REACT}), "⚛️ Built with React for component-driven UI"),
    FeatureRule(frozenset({TechTag.EXPRESS}), "🚀 Fast and lightweight backend using Express"),
    FeatureRule(frozenset({TechTag.NEXTJS}), "⚡ Server-rendered React app using Next.js"),
    FeatureRule(frozenset({TechTag.FLASK}), "🔥 Python backend powered by Flask"),
    FeatureRule(frozenset({TechTag.DJANGO}), "🧰 Structured web backend using Django"),
    FeatureRule(frozenset({TechTag.VUE}), "🔋 Reactive front-end with Vue.js"),
    FeatureRule(frozenset({TechTag.TAILWINDCSS}), "🎨 Utility-first styling using Tailwind CSS"),
    FeatureRule(frozenset({TechTag.TYPESCRIPT}), "🔐 Type-safe codebase using TypeScript"),
    FeatureRule(
        frozenset({TechTag.HTML, TechTag.CSS, TechTag.JAVASCRIPT}),
        "🧱 Built using vanilla HTML, CSS & JS",
    ),
)

ENV_FEATURE = "🔐 Configurable via environment variables"
DEV_SERVER_FEATURE = "💻 Dev server available via `npm run dev`"
STRUCTURE_FEATURE = "📂 Modular project structure"


def synthesize_features(
    stack: TechStack,
    scripts: Mapping[str, str],
    env_vars: Sequence[str],
    tree: Optional[str],
) -> List[str]:
    """Return feature bullets in rule order; empty when nothing applies."""
    features = [rule.text for rule in FEATURE_RULES if rule.matches(stack)]
    if env_vars:
        features.append(ENV_FEATURE)
    if "dev" in scripts:
        features.append(DEV_SERVER_FEATURE)
    if tree is not None:
        features.append(STRUCTURE_FEATURE)
    return features


__all__ = [
    "DEV_SERVER_FEATURE",
    "ENV_FEATURE",
    "FEATURE_RULES",
    "FeatureRule",
    "STRUCTURE_FEATURE",
    "synthesize_features",
]
