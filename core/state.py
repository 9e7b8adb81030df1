"""
core.state
Core domain data models (UI independent).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .actions import BalanceChanged, DayChanged, Event, LocationChanged
from .world import STARTING_BALANCE, STARTING_LOCATION, Job, JobApplication, Location


@dataclass(frozen=True)
class PlayerState:
    """Everything the player owns.

    Balance has no floor; it may go negative.
    job_applications keeps submission order, the hiring sweep relies on it.
    """

    balance: int
    location: Location
    job: Optional[Job] = None
    job_applications: Tuple[JobApplication, ...] = ()


@dataclass(frozen=True)
class GameState:
    """Whole game at one point in time.

    Sequences are tuples, so a transition can never reach back into an earlier
    state; callers always rebind to the returned value.
    """

    day: int
    player_state: PlayerState
    event_log: Tuple[Event, ...] = ()

    @classmethod
    def new(cls, *, balance: int = STARTING_BALANCE, location: Location = STARTING_LOCATION) -> "GameState":
        return new_game(balance=balance, location=location)


def new_game(*, balance: int = STARTING_BALANCE, location: Location = STARTING_LOCATION) -> GameState:
    """Start state with bootstrap events so a renderer has something on first paint."""
    player_state = PlayerState(balance=int(balance), location=location, job=None, job_applications=())
    initial_log: Tuple[Event, ...] = (
        DayChanged(to=1),
        BalanceChanged(to=player_state.balance),
        LocationChanged(to=player_state.location),
    )
    return GameState(day=1, player_state=player_state, event_log=initial_log)


def events_since(state: GameState, cursor: int) -> Tuple[List[Event], int]:
    """Return (events appended after cursor, new cursor)."""
    start = max(0, int(cursor))
    return list(state.event_log[start:]), len(state.event_log)
