"""Rule tables that turn project signals into stack, commands and features."""

from __future__ import annotations

from .commands import COMMAND_RULES, CommandRule, infer_commands
from .descriptions import FALLBACK_DESCRIPTION, describe
from .features import FEATURE_RULES, FeatureRule, synthesize_features
from .stack import DEPENDENCY_RULES, infer_stack

__all__ = [
    "COMMAND_RULES",
    "CommandRule",
    "DEPENDENCY_RULES",
    "FALLBACK_DESCRIPTION",
    "FEATURE_RULES",
    "FeatureRule",
    "describe",
    "infer_commands",
    "infer_stack",
    "synthesize_features",
]
