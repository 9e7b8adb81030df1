"""engine.config

Engine configuration passed from UI.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from core.world import STARTING_BALANCE, STARTING_LOCATION, Location


@dataclass(frozen=True)
class EngineConfig:
    starting_balance: int = STARTING_BALANCE
    starting_location: Location = STARTING_LOCATION
    strict_actions: bool = False
    show_help: bool = True
    max_turns: int = 500


def config_to_dict(cfg: EngineConfig) -> Dict[str, Any]:
    return {
        "starting_balance": int(cfg.starting_balance),
        "starting_location": cfg.starting_location.value,
        "strict_actions": bool(cfg.strict_actions),
        "show_help": bool(cfg.show_help),
        "max_turns": int(cfg.max_turns),
    }
