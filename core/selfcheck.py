"""
core.selfcheck
Minimal "it runs" proof for the core engine.

Run:
  python -m core.selfcheck
"""

from __future__ import annotations

from dataclasses import asdict

from .actions import ApplyForJob, BuyBeer, Go, Sleep, Work
from .availability import available_actions
from .effects import apply_turn
from .replay import replay
from .state import GameState, new_game
from .world import TENUNDA_BREWING, Location, Position


def _check_replay(state: GameState) -> None:
    r = replay(state.event_log)
    assert r.day == state.day
    assert r.balance == state.player_state.balance
    assert r.location == state.player_state.location
    assert r.job == state.player_state.job
    assert tuple(r.job_applications) == state.player_state.job_applications


def run_week_smoke() -> None:
    state = new_game()
    assert state.day == 1 and state.player_state.balance == 1000

    # walk to the brewery and apply
    state = apply_turn(state, Go(destination=Location.STREETS))
    state = apply_turn(state, Go(destination=Location.BREWERY))
    state = apply_turn(state, ApplyForJob(employer=TENUNDA_BREWING, position=Position.SERVER))
    assert state.player_state.job is None
    assert len(state.player_state.job_applications) == 1

    for _ in range(7):
        # back to the hotel to sleep
        state = apply_turn(state, Go(destination=Location.STREETS))
        state = apply_turn(state, Go(destination=Location.HOTEL))
        state = apply_turn(state, Sleep(cost=120), strict=True)

        # morning: go to the brewery, work if due, have one beer
        state = apply_turn(state, Go(destination=Location.STREETS))
        state = apply_turn(state, Go(destination=Location.BREWERY))
        for action in available_actions(state):
            if isinstance(action, Work):
                state = apply_turn(state, action, strict=True)
        state = apply_turn(state, BuyBeer(cost=6), strict=True)

        # invariants
        _check_replay(state)
        assert not any(isinstance(a, Work) for a in available_actions(state))

    assert state.day == 8
    assert state.player_state.job is not None
    assert state.player_state.job.next_work_day == state.day + 1

    print("OK: one-week core smoke test passed.")
    print("Final player state:", asdict(state.player_state))
    print("Events logged:", len(state.event_log))


if __name__ == "__main__":
    run_week_smoke()
