"""
core.actions
Closed sets of player actions and the events they produce.

Both are plain frozen dataclasses grouped under a Union alias; the engine
dispatches on the concrete class.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .world import Business, Job, Location, Position


# -------------------------
# Player actions
# -------------------------


@dataclass(frozen=True)
class ApplyForJob:
    employer: Business
    position: Position


@dataclass(frozen=True)
class BuyBeer:
    """Price is fixed when the action is offered; the engine trusts it."""
    cost: int


@dataclass(frozen=True)
class Go:
    destination: Location


@dataclass(frozen=True)
class Sleep:
    cost: Optional[int] = None


@dataclass(frozen=True)
class Work:
    job: Job


GameAction = Union[ApplyForJob, BuyBeer, Go, Sleep, Work]

ACTION_TYPES = (ApplyForJob, BuyBeer, Go, Sleep, Work)


# -------------------------
# Events
# -------------------------


@dataclass(frozen=True)
class AppliedForJob:
    employer: Business
    position: Position


@dataclass(frozen=True)
class BalanceChanged:
    to: int


@dataclass(frozen=True)
class DayChanged:
    to: int


@dataclass(frozen=True)
class DrankBeer:
    pass


@dataclass(frozen=True)
class Hired:
    job: Job


@dataclass(frozen=True)
class LocationChanged:
    to: Location


@dataclass(frozen=True)
class Slept:
    pass


@dataclass(frozen=True)
class Worked:
    job: Job


Event = Union[
    AppliedForJob,
    BalanceChanged,
    DayChanged,
    DrankBeer,
    Hired,
    LocationChanged,
    Slept,
    Worked,
]

EVENT_TYPES = (
    AppliedForJob,
    BalanceChanged,
    DayChanged,
    DrankBeer,
    Hired,
    LocationChanged,
    Slept,
    Worked,
)
