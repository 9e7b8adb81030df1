"""
core.replay
Rebuild player-visible state from an event log.

The log is the audit trail: folding it from the start must land on the same
day, balance and location as the live state. Job and pending applications are
recoverable too, since Hired/Worked/AppliedForJob carry their payloads.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .actions import (
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
from .world import Job, JobApplication, Location


@dataclass
class ReplayState:
    day: int = 0
    balance: int = 0
    location: Optional[Location] = None
    job: Optional[Job] = None
    job_applications: List[JobApplication] = field(default_factory=list)


def replay(events: Iterable[Event]) -> ReplayState:
    out = ReplayState()
    for ev in events:
        apply_event(out, ev)
    return out


def apply_event(out: ReplayState, ev: Event) -> None:
    if isinstance(ev, DayChanged):
        out.day = int(ev.to)
    elif isinstance(ev, BalanceChanged):
        out.balance = int(ev.to)
    elif isinstance(ev, LocationChanged):
        out.location = ev.to
    elif isinstance(ev, AppliedForJob):
        out.job_applications.append(
            JobApplication(business=ev.employer, position=ev.position, application_day=out.day)
        )
    elif isinstance(ev, Hired):
        for app in out.job_applications:
            if app.business == ev.job.business and app.position == ev.job.position:
                out.job_applications.remove(app)
                break
        out.job = ev.job
    elif isinstance(ev, Worked):
        out.job = ev.job
    elif isinstance(ev, (DrankBeer, Slept)):
        pass
    else:
        raise TypeError(f"Unhandled event: {ev!r}")
