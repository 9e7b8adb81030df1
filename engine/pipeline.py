"""engine.pipeline

Core turn flow (headless).

Responsibilities:
- Route a Command: system commands change the session, player commands go to core
- Apply the action through core.effects.apply_turn
- Produce a JSON-ready turn log (before/after snapshots + new events)

This layer is UI-agnostic.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Tuple

from content.commands import Command, PlayerCommand, SystemAction, SystemCommand
from content.schemas import command_to_dict, event_to_dict, state_to_dict
from core.effects import apply_turn
from core.state import GameState, new_game

from .config import EngineConfig


@dataclass(frozen=True)
class Session:
    """GameState plus the bits only the front end cares about."""
    state: GameState
    show_help: bool = True
    done: bool = False
    turn: int = 0


def start_session(config: EngineConfig) -> Session:
    state = new_game(balance=int(config.starting_balance), location=config.starting_location)
    return Session(state=state, show_help=bool(config.show_help), done=False, turn=0)


def apply_system_action(session: Session, action: SystemAction) -> Session:
    if action == SystemAction.EXIT:
        return replace(session, done=True)
    if action == SystemAction.HELP:
        return replace(session, show_help=not session.show_help)
    raise TypeError(f"Unhandled system action: {action!r}")


def play_turn(
    *,
    session: Session,
    command: Command,
    config: EngineConfig,
) -> Tuple[Session, Dict[str, Any]]:
    """Apply one command.

    Returns (new_session, turn_log). System commands do not advance the turn
    counter and leave the game state untouched.
    """
    before = session.state

    if isinstance(command, SystemCommand):
        new_session = apply_system_action(session, command.action)
        log: Dict[str, Any] = {
            "turn": int(session.turn),
            "day": int(before.day),
            "command": command_to_dict(command),
            "events": [],
        }
        return new_session, log

    if not isinstance(command, PlayerCommand):
        raise TypeError(f"Unhandled command: {command!r}")

    after = apply_turn(before, command.action, strict=bool(config.strict_actions))
    new_events = after.event_log[len(before.event_log):]

    new_session = replace(session, state=after, turn=int(session.turn) + 1)

    log = {
        "turn": int(new_session.turn),
        "day": int(before.day),
        "command": command_to_dict(command),
        "before": state_to_dict(before, with_events=False),
        "after": state_to_dict(after, with_events=False),
        "events": [event_to_dict(ev) for ev in new_events],
    }
    return new_session, log
