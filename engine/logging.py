"""engine.logging

Small helpers for storing run logs.

A run log is JSON-serializable so it can be exported and read later.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List

from content.schemas import state_to_dict
from core.state import GameState

from .config import EngineConfig, config_to_dict


def make_run_export(
    *,
    config: EngineConfig,
    initial_state: GameState,
    turn_logs: List[Dict[str, Any]],
    final_state: GameState,
) -> Dict[str, Any]:
    return {
        "version": 1,
        "config": config_to_dict(config),
        "initial_state": state_to_dict(initial_state),
        "turn_logs": list(turn_logs),
        "final_state": state_to_dict(final_state, with_events=False),
        "event_count": len(final_state.event_log),
    }


def dumps_run_export(obj: Dict[str, Any]) -> str:
    return json.dumps(obj, ensure_ascii=False, indent=2, sort_keys=True)
