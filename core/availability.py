"""
core.availability
Which actions the player may take right now.

This is the only legality gate: the engine applies whatever it is given.
"""

from __future__ import annotations

from typing import List, Optional

from .actions import ApplyForJob, BuyBeer, GameAction, Go, Sleep, Work
from .state import GameState
from .world import (
    BREWERY_BEER_COST,
    HOTEL_BEER_COST,
    HOTEL_ROOM_COST,
    TENUNDA_BREWING,
    Location,
    Position,
)


def available_actions(state: GameState, location: Optional[Location] = None) -> List[GameAction]:
    """Legal actions at `location` (defaults to where the player stands).

    Work comes first when due, then the location's fixed menu. Callers may
    re-sort for display.
    """
    player = state.player_state
    here = player.location if location is None else location

    out: List[GameAction] = []

    employed_here = False
    job = player.job
    if job is not None and job.business.location == here:
        employed_here = True
        if int(job.next_work_day) == int(state.day):
            out.append(Work(job=job))

    applied_here = any(app.business.location == here for app in player.job_applications)

    if here == Location.BREWERY:
        out.append(BuyBeer(cost=BREWERY_BEER_COST))
        out.append(Go(destination=Location.STREETS))
        # one pending application per employer keeps removal-by-value unambiguous
        if not employed_here and not applied_here:
            out.append(ApplyForJob(employer=TENUNDA_BREWING, position=Position.SERVER))
    elif here == Location.HOTEL:
        out.append(BuyBeer(cost=HOTEL_BEER_COST))
        out.append(Go(destination=Location.STREETS))
        out.append(Sleep(cost=HOTEL_ROOM_COST))
    elif here == Location.STREETS:
        out.append(Go(destination=Location.BREWERY))
        out.append(Go(destination=Location.HOTEL))
    else:
        raise TypeError(f"Unhandled location: {here!r}")

    return out


def is_available(state: GameState, action: GameAction) -> bool:
    return action in available_actions(state)
