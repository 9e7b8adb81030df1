"""core
Deterministic game-state engine (UI independent).
"""

from .availability import available_actions
from .effects import IllegalAction, apply_turn
from .state import GameState, PlayerState, events_since, new_game

API_VERSION = "core-v1-20261019"

__all__ = [
    "API_VERSION",
    "GameState",
    "IllegalAction",
    "PlayerState",
    "apply_turn",
    "available_actions",
    "events_since",
    "new_game",
]
