"""content.parsing

Map one line of player input to a Command.

Only commands available right now are accepted; anything else raises
UnknownCommand so the caller can ask again.
"""

from __future__ import annotations

from typing import Dict, List

from core.state import GameState

from .commands import Command, available_commands, command_key


class UnknownCommand(ValueError):
    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(f"Unknown command: {raw!r}")


def normalize_input(s: str) -> str:
    return (s or "").strip().lower()


def command_map(commands: List[Command]) -> Dict[str, Command]:
    return {command_key(c): c for c in commands}


def parse_command(raw: str, state: GameState) -> Command:
    key = normalize_input(raw)
    cmd = command_map(available_commands(state)).get(key)
    if cmd is None:
        raise UnknownCommand(raw.strip() if raw else "")
    return cmd
