"""engine.sim_runner

Headless runner for quick sanity checks.

Feeds a fixed script of command keys through the same parse -> play_turn
path the UIs use. Deterministic, no input needed.

Run:
  python -m engine.sim_runner
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from content.parsing import parse_command
from content.render import render_events, render_summary
from core.state import events_since

from .config import EngineConfig
from .logging import dumps_run_export, make_run_export
from .pipeline import play_turn, start_session

# Two nights at the hotel, a job application and one shift.
DEFAULT_SCRIPT: List[str] = [
    "o", "r", "a",         # day 1: walk to the brewery and apply
    "o", "h", "s",         # back to the hotel, sleep
    "o", "r", "b",         # day 2: hired on the way out, one beer
    "o", "h", "s",         # sleep again
    "o", "r", "w", "b",    # day 3: first shift, beer after work
]


def run_headless_sim(keys: Optional[Sequence[str]] = None, config: Optional[EngineConfig] = None) -> Dict[str, Any]:
    """Run a scripted session and return summary.

    Raises content.parsing.UnknownCommand if a key is not available at its
    point in the script.
    """
    cfg = config or EngineConfig(strict_actions=True)
    script = list(DEFAULT_SCRIPT if keys is None else keys)

    session = start_session(cfg)
    initial_state = session.state
    logs: List[Dict[str, Any]] = []
    output: List[str] = []
    cursor = 0

    for key in script[: int(cfg.max_turns)]:
        command = parse_command(key, session.state)
        session, log = play_turn(session=session, command=command, config=cfg)
        logs.append(log)

        events, cursor = events_since(session.state, cursor)
        output.extend(render_events(events))
        if session.done:
            break

    return {
        "turns": int(session.turn),
        "final": session.state,
        "logs": logs,
        "output": output,
        "export": make_run_export(config=cfg, initial_state=initial_state, turn_logs=logs, final_state=session.state),
    }


def main() -> None:
    res = run_headless_sim()
    for line in res["output"]:
        print(line)
    for line in render_summary(res["final"]):
        print(line)
    print()
    print(dumps_run_export(res["export"]))


if __name__ == "__main__":
    main()
