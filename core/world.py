"""
core.world
Fixed world topology: locations, businesses, positions, prices and pay.

Kept in core so balancing lives in one place, but UI can still display labels.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Tuple


class Location(Enum):
    BREWERY = "tenunda_brewery"
    HOTEL = "tenunda_hotel"
    STREETS = "tenunda_streets"


class Position(Enum):
    SERVER = "server"


@dataclass(frozen=True)
class Business:
    name: str
    location: Location


TENUNDA_BREWING = Business(name="Tenunda Brewing", location=Location.BREWERY)

STARTING_BALANCE = 1000
STARTING_LOCATION = Location.HOTEL

BREWERY_BEER_COST = 6
HOTEL_BEER_COST = 10
HOTEL_ROOM_COST = 120

PAY: Dict[Position, int] = {
    Position.SERVER: 200,
}

LOCATION_NAMES: Dict[Location, str] = {
    Location.BREWERY: "Tenunda Brewery",
    Location.HOTEL: "Tenunda Hotel",
    Location.STREETS: "the streets of Tenunda",
}

POSITION_TITLES: Dict[Position, str] = {
    Position.SERVER: "Server",
}


def pay_for(position: Position) -> int:
    return int(PAY[position])


# -------------------------
# Employment
# -------------------------


@dataclass(frozen=True)
class JobApplication:
    """A pending offer. Compared by value when the hiring sweep removes it."""
    business: Business
    position: Position
    application_day: int


@dataclass(frozen=True)
class Job:
    business: Business
    position: Position
    next_work_day: int
    pay: int

    def work(self) -> Tuple["Job", int]:
        """Return (job advanced to the next work day, pay earned)."""
        return replace(self, next_work_day=int(self.next_work_day) + 1), int(self.pay)
