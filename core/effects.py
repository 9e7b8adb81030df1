"""
core.effects
Turn rules:
- hiring sweep (pending applications become jobs once a day has passed)
- action application
- the three field mutators, each paired with exactly one event

Every function here is pure: it takes a GameState and returns a new one.
"""

from __future__ import annotations

from dataclasses import replace
from typing import List, Optional

from .actions import (
    AppliedForJob,
    ApplyForJob,
    BalanceChanged,
    BuyBeer,
    DayChanged,
    DrankBeer,
    Event,
    GameAction,
    Go,
    Hired,
    LocationChanged,
    Sleep,
    Slept,
    Work,
    Worked,
)
from .availability import is_available
from .state import GameState
from .world import Business, Job, JobApplication, Location, Position, pay_for


class IllegalAction(ValueError):
    """Raised in strict mode when an action is not currently offered."""

    def __init__(self, action: GameAction, message: str = "") -> None:
        self.action = action
        super().__init__(message or f"Action not available: {action!r}")


def apply_turn(state: GameState, action: GameAction, *, strict: bool = False) -> GameState:
    """One turn: hiring sweep, then the player's action.

    With strict=True the action must be among available_actions() of the
    post-sweep state, otherwise IllegalAction is raised and nothing changes.
    """
    state = hire_due_applications(state)
    if strict and not is_available(state, action):
        raise IllegalAction(action)
    return apply_player_action(state, action)


def hire_due_applications(state: GameState) -> GameState:
    """Promote every application submitted before today, oldest first."""
    for application in list(state.player_state.job_applications):
        if int(application.application_day) < int(state.day):
            state = withdraw_application(state, application)
            state = hire_for_job(state, application)
    return state


def apply_player_action(state: GameState, action: GameAction) -> GameState:
    if isinstance(action, ApplyForJob):
        return apply_for_job(state, action.employer, action.position)
    if isinstance(action, BuyBeer):
        return change_balance(drink_beer(state), -int(action.cost))
    if isinstance(action, Go):
        return change_location(state, action.destination)
    if isinstance(action, Sleep):
        state = sleep(state)
        if action.cost is not None:
            state = change_balance(state, -int(action.cost))
        return state
    if isinstance(action, Work):
        return work(state, action.job)
    raise TypeError(f"Unhandled action: {action!r}")


# -------------------------
# Building blocks
# -------------------------


def push_event(state: GameState, event: Event) -> GameState:
    return replace(state, event_log=(*state.event_log, event))


def apply_for_job(state: GameState, employer: Business, position: Position) -> GameState:
    player = state.player_state
    application = JobApplication(business=employer, position=position, application_day=int(state.day))
    player = replace(player, job_applications=(*player.job_applications, application))
    state = replace(state, player_state=player)
    return push_event(state, AppliedForJob(employer=employer, position=position))


def change_balance(state: GameState, delta: int) -> GameState:
    to = int(state.player_state.balance) + int(delta)
    state = replace(state, player_state=replace(state.player_state, balance=to))
    return push_event(state, BalanceChanged(to=to))


def change_day(state: GameState, delta: int) -> GameState:
    to = int(state.day) + int(delta)
    state = replace(state, day=to)
    return push_event(state, DayChanged(to=to))


def change_location(state: GameState, to: Location) -> GameState:
    state = replace(state, player_state=replace(state.player_state, location=to))
    return push_event(state, LocationChanged(to=to))


def drink_beer(state: GameState) -> GameState:
    return push_event(state, DrankBeer())


def sleep(state: GameState) -> GameState:
    return change_day(push_event(state, Slept()), 1)


def update_job(state: GameState, job: Optional[Job]) -> GameState:
    return replace(state, player_state=replace(state.player_state, job=job))


def withdraw_application(state: GameState, application: JobApplication) -> GameState:
    """Remove the first pending application equal to `application`."""
    pending: List[JobApplication] = list(state.player_state.job_applications)
    pending.remove(application)
    return replace(state, player_state=replace(state.player_state, job_applications=tuple(pending)))


def hire_for_job(state: GameState, application: JobApplication) -> GameState:
    # replaces whatever job the player held
    job = Job(
        business=application.business,
        position=application.position,
        next_work_day=int(state.day) + 1,
        pay=pay_for(application.position),
    )
    return push_event(update_job(state, job), Hired(job=job))


def work(state: GameState, job: Job) -> GameState:
    """Work the job carried by the action; that job, advanced, becomes the current one."""
    job, pay = job.work()
    state = push_event(update_job(state, job), Worked(job=job))
    return change_balance(state, pay)
