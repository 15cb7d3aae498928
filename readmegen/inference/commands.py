"""Install/run command inference as an ordered, first-match rule table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Optional

from ..models import CommandSet, TechStack, TechTag

_PIP_INSTALL = "pip install -r requirements.txt"
_NPM_INSTALL = "npm install"


@dataclass(frozen=True)
class CommandRule:
    """Fires when the stack contains any of ``triggers``."""

    triggers: FrozenSet[TechTag]
    commands: CommandSet

    def matches(self, stack: TechStack) -> bool:
        return not self.triggers.isdisjoint(stack)


COMMAND_RULES: tuple[CommandRule, ...] = (
    CommandRule(frozenset({TechTag.FLASK}), CommandSet(_PIP_INSTALL, "flask run")),
    CommandRule(
        frozenset({TechTag.PYTHON, TechTag.DJANGO}),
        CommandSet(_PIP_INSTALL, "python manage.py runserver"),
    ),
    CommandRule(frozenset({TechTag.NEXTJS}), CommandSet(_NPM_INSTALL, "npm run dev")),
    CommandRule(frozenset({TechTag.VITE}), CommandSet(_NPM_INSTALL, "npm run dev")),
    CommandRule(frozenset({TechTag.REACT}), CommandSet(_NPM_INSTALL, "npm start")),
    CommandRule(frozenset({TechTag.VUE}), CommandSet(_NPM_INSTALL, "npm run serve")),
)

DEFAULT_COMMANDS = CommandSet(_NPM_INSTALL, "npm run dev")


def infer_commands(
    stack: TechStack,
    *,
    install: Optional[str] = None,
    run: Optional[str] = None,
) -> CommandSet:
    """Return commands from the first matching rule; explicit overrides win."""
    inferred = next(
        (rule.commands for rule in COMMAND_RULES if rule.matches(stack)),
        DEFAULT_COMMANDS,
    )
    if install is None and run is None:
        return inferred
    return CommandSet(install=install or inferred.install, run=run or inferred.run)


__all__ = ["COMMAND_RULES", "CommandRule", "DEFAULT_COMMANDS", "infer_commands"]
