"""content.schemas

JSON-ready dict views of engine values, for run logs and the debug page.

Every action/event dict carries a "type" key naming its variant. Export only:
runs are never loaded back.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from core.actions import (
    ACTION_TYPES,
    EVENT_TYPES,
    AppliedForJob,
    ApplyForJob,
    BalanceChanged,
    BuyBeer,
    DayChanged,
    Event,
    GameAction,
    Go,
    Hired,
    LocationChanged,
    Sleep,
    Work,
    Worked,
)
from core.state import GameState, PlayerState
from core.world import Business, Job, JobApplication

from .commands import Command, SystemCommand


def business_to_dict(b: Business) -> Dict[str, Any]:
    return {"name": str(b.name), "location": b.location.value}


def job_to_dict(job: Optional[Job]) -> Optional[Dict[str, Any]]:
    if job is None:
        return None
    return {
        "business": business_to_dict(job.business),
        "position": job.position.value,
        "next_work_day": int(job.next_work_day),
        "pay": int(job.pay),
    }


def application_to_dict(app: JobApplication) -> Dict[str, Any]:
    return {
        "business": business_to_dict(app.business),
        "position": app.position.value,
        "application_day": int(app.application_day),
    }


def action_to_dict(action: GameAction) -> Dict[str, Any]:
    if not isinstance(action, ACTION_TYPES):
        raise TypeError(f"Unhandled action: {action!r}")

    out: Dict[str, Any] = {"type": type(action).__name__}
    if isinstance(action, ApplyForJob):
        out["employer"] = business_to_dict(action.employer)
        out["position"] = action.position.value
    elif isinstance(action, (BuyBeer, Sleep)):
        out["cost"] = None if action.cost is None else int(action.cost)
    elif isinstance(action, Go):
        out["destination"] = action.destination.value
    elif isinstance(action, Work):
        out["job"] = job_to_dict(action.job)
    return out


def event_to_dict(ev: Event) -> Dict[str, Any]:
    if not isinstance(ev, EVENT_TYPES):
        raise TypeError(f"Unhandled event: {ev!r}")

    out: Dict[str, Any] = {"type": type(ev).__name__}
    if isinstance(ev, AppliedForJob):
        out["employer"] = business_to_dict(ev.employer)
        out["position"] = ev.position.value
    elif isinstance(ev, (BalanceChanged, DayChanged)):
        out["to"] = int(ev.to)
    elif isinstance(ev, LocationChanged):
        out["to"] = ev.to.value
    elif isinstance(ev, (Hired, Worked)):
        out["job"] = job_to_dict(ev.job)
    return out


def command_to_dict(command: Command) -> Dict[str, Any]:
    if isinstance(command, SystemCommand):
        return {"kind": "system", "action": command.action.value}
    return {"kind": "player", "action": action_to_dict(command.action)}


def player_to_dict(p: PlayerState) -> Dict[str, Any]:
    return {
        "balance": int(p.balance),
        "location": p.location.value,
        "job": job_to_dict(p.job),
        "job_applications": [application_to_dict(a) for a in p.job_applications],
    }


def state_to_dict(state: GameState, *, with_events: bool = True) -> Dict[str, Any]:
    out: Dict[str, Any] = {
        "day": int(state.day),
        "player_state": player_to_dict(state.player_state),
    }
    if with_events:
        out["event_log"] = [event_to_dict(ev) for ev in state.event_log]
    return out
