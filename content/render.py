"""content.render

Plain-text rendering of state, events and the command list.

Pure string builders; printing (terminal) or markdown (Streamlit) is up to
the caller.
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

from core.actions import (
    AppliedForJob,
    BalanceChanged,
    DayChanged,
    DrankBeer,
    Event,
    Hired,
    LocationChanged,
    Slept,
    Worked,
)
from core.state import GameState
from core.world import POSITION_TITLES, Job, Location

from .commands import Command, SystemCommand, command_description, command_key, sorted_commands

SEPARATOR = "****************"

LOCATION_SENTENCES = {
    Location.BREWERY: "You are at the Tenunda Brewery.",
    Location.HOTEL: "You are at the Tenunda Hotel.",
    Location.STREETS: "You are on the streets of Tenunda.",
}


def money(amount: int) -> str:
    amount = int(amount)
    if amount < 0:
        return f"-${-amount}"
    return f"${amount}"


def day_line(day: int) -> str:
    return f"It is Day {int(day)}."


def balance_line(balance: int) -> str:
    return f"You have {money(balance)}."


def location_line(location: Location) -> str:
    return LOCATION_SENTENCES[location]


def job_line(job: Job) -> str:
    title = POSITION_TITLES[job.position]
    return f"You work as a {title} at {job.business.name}. Next shift: Day {job.next_work_day}."


def render_summary(state: GameState) -> List[str]:
    player = state.player_state
    lines = [SEPARATOR, day_line(state.day), balance_line(player.balance), location_line(player.location)]
    if player.job is not None:
        lines.append(job_line(player.job))
    for app in player.job_applications:
        lines.append(f"Waiting to hear back from {app.business.name} (applied on Day {app.application_day}).")
    return lines


def render_event(ev: Event) -> str:
    if isinstance(ev, AppliedForJob):
        return f"You applied for a job as a {POSITION_TITLES[ev.position]} at {ev.employer.name}."
    if isinstance(ev, BalanceChanged):
        return balance_line(ev.to)
    if isinstance(ev, DayChanged):
        return day_line(ev.to)
    if isinstance(ev, DrankBeer):
        return "Cheers!"
    if isinstance(ev, Hired):
        title = POSITION_TITLES[ev.job.position]
        return (
            f"You were hired as a {title} at {ev.job.business.name}. "
            f"Your first shift is on Day {ev.job.next_work_day}."
        )
    if isinstance(ev, LocationChanged):
        return location_line(ev.to)
    if isinstance(ev, Slept):
        return "You slept."
    if isinstance(ev, Worked):
        return f"You worked a shift at {ev.job.business.name}. Next shift: Day {ev.job.next_work_day}."
    raise TypeError(f"Unhandled event: {ev!r}")


def render_events(events: Iterable[Event]) -> List[str]:
    return [render_event(ev) for ev in events]


def render_feed(events: Iterable[Event], day: int) -> List[Tuple[int, str]]:
    """(day, line) pairs. `day` is the day before the first event; a DayChanged
    moves it forward for itself and the events after it.
    """
    out: List[Tuple[int, str]] = []
    for ev in events:
        if isinstance(ev, DayChanged):
            day = int(ev.to)
        out.append((int(day), render_event(ev)))
    return out


def render_commands(commands: List[Command]) -> List[str]:
    """Help listing: player commands first, system commands in their own block."""
    if not commands:
        return ["No actions currently available."]

    lines = ["Available actions:"]
    system: List[Command] = []
    for c in sorted_commands(commands):
        if isinstance(c, SystemCommand):
            system.append(c)
            continue
        lines.append(f"   {command_key(c)}: {command_description(c)}")
    lines.append("")
    for c in system:
        lines.append(f"   {command_key(c)}: {command_description(c)}")
    return lines
