"""content.commands

Every input the player can type.

Decouples short CLI keys from action handling:
- player commands wrap one GameAction offered by core.availability
- system commands (exit, help) never reach the engine
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Union

from core.actions import ApplyForJob, BuyBeer, GameAction, Go, Sleep, Work
from core.availability import available_actions
from core.state import GameState
from core.world import LOCATION_NAMES, POSITION_TITLES, Location


class SystemAction(Enum):
    EXIT = "exit"
    HELP = "help"


@dataclass(frozen=True)
class SystemCommand:
    action: SystemAction


@dataclass(frozen=True)
class PlayerCommand:
    action: GameAction


Command = Union[SystemCommand, PlayerCommand]

SYSTEM_KEYS = {
    SystemAction.EXIT: "x",
    SystemAction.HELP: "help",
}

GO_KEYS = {
    Location.STREETS: "o",
    Location.HOTEL: "h",
    Location.BREWERY: "r",
}

GO_DESCRIPTIONS = {
    Location.STREETS: "Go outside.",
    Location.HOTEL: "Go into the hotel.",
    Location.BREWERY: "Go into the brewery.",
}


def available_system_actions() -> List[SystemAction]:
    return [SystemAction.EXIT, SystemAction.HELP]


def available_commands(state: GameState) -> List[Command]:
    out: List[Command] = [SystemCommand(action=a) for a in available_system_actions()]
    out.extend(PlayerCommand(action=a) for a in available_actions(state))
    return out


def command_key(command: Command) -> str:
    if isinstance(command, SystemCommand):
        return SYSTEM_KEYS[command.action]

    action = command.action
    if isinstance(action, ApplyForJob):
        return "a"
    if isinstance(action, BuyBeer):
        return "b"
    if isinstance(action, Go):
        return GO_KEYS[action.destination]
    if isinstance(action, Sleep):
        return "s"
    if isinstance(action, Work):
        return "w"
    raise TypeError(f"Unhandled action: {action!r}")


def command_description(command: Command) -> str:
    if isinstance(command, SystemCommand):
        if command.action == SystemAction.EXIT:
            return "Exit."
        return "Show/hide this help."

    action = command.action
    if isinstance(action, ApplyForJob):
        title = POSITION_TITLES[action.position]
        return f"Apply for a job as a {title} at {action.employer.name}."
    if isinstance(action, BuyBeer):
        return f"Buy a beer. (${action.cost})"
    if isinstance(action, Go):
        return GO_DESCRIPTIONS.get(action.destination, f"Go to {LOCATION_NAMES[action.destination]}.")
    if isinstance(action, Sleep):
        return "Sleep." if action.cost is None else f"Sleep. (${action.cost})"
    if isinstance(action, Work):
        return f"Work a shift at {action.job.business.name}. (+${action.job.pay})"
    raise TypeError(f"Unhandled action: {action!r}")


def sorted_commands(commands: List[Command]) -> List[Command]:
    """Player commands by key, then system commands by key."""
    return sorted(commands, key=lambda c: (isinstance(c, SystemCommand), command_key(c)))
