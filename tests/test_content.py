"""
Content Tests
=============

Command keys, input parsing, text rendering and dict views.
"""

import json
from dataclasses import replace

import pytest

from content.commands import (
    PlayerCommand,
    SystemAction,
    SystemCommand,
    available_commands,
    command_description,
    command_key,
    sorted_commands,
)
from content.parsing import UnknownCommand, parse_command
from content.render import money, render_commands, render_event, render_events, render_feed, render_summary
from content.schemas import action_to_dict, event_to_dict, state_to_dict
from core.actions import (
    AppliedForJob,
    ApplyForJob,
    BuyBeer,
    DrankBeer,
    Go,
    Hired,
    Sleep,
    Work,
)
from core.effects import apply_turn
from core.state import new_game
from core.world import TENUNDA_BREWING, Job, Location, Position

JOB = Job(business=TENUNDA_BREWING, position=Position.SERVER, next_work_day=3, pay=200)


def _at(location):
    state = new_game()
    return replace(state, player_state=replace(state.player_state, location=location))


class TestCommands:

    def test_keys(self):
        assert command_key(PlayerCommand(BuyBeer(cost=6))) == "b"
        assert command_key(PlayerCommand(Sleep(cost=None))) == "s"
        assert command_key(PlayerCommand(Work(job=JOB))) == "w"
        assert command_key(PlayerCommand(ApplyForJob(TENUNDA_BREWING, Position.SERVER))) == "a"
        assert command_key(PlayerCommand(Go(Location.STREETS))) == "o"
        assert command_key(PlayerCommand(Go(Location.HOTEL))) == "h"
        assert command_key(PlayerCommand(Go(Location.BREWERY))) == "r"
        assert command_key(SystemCommand(SystemAction.EXIT)) == "x"
        assert command_key(SystemCommand(SystemAction.HELP)) == "help"

    def test_descriptions_show_price(self):
        assert command_description(PlayerCommand(BuyBeer(cost=10))) == "Buy a beer. ($10)"
        assert command_description(PlayerCommand(Sleep(cost=120))) == "Sleep. ($120)"
        assert command_description(PlayerCommand(Sleep(cost=None))) == "Sleep."
        assert command_description(PlayerCommand(Go(Location.STREETS))) == "Go outside."

    @pytest.mark.parametrize("location", list(Location))
    def test_keys_unique_per_location(self, location):
        keys = [command_key(c) for c in available_commands(_at(location))]
        assert len(keys) == len(set(keys))

    def test_sorted_player_first(self):
        cmds = sorted_commands(available_commands(_at(Location.HOTEL)))
        assert [command_key(c) for c in cmds] == ["b", "o", "s", "help", "x"]


class TestParsing:

    def test_parse_available(self):
        cmd = parse_command("  B ", _at(Location.HOTEL))
        assert cmd == PlayerCommand(BuyBeer(cost=10))

    def test_parse_system(self):
        assert parse_command("x", new_game()) == SystemCommand(SystemAction.EXIT)

    def test_unavailable_key(self):
        with pytest.raises(UnknownCommand) as exc:
            parse_command("w", new_game())
        assert exc.value.raw == "w"
        assert str(exc.value) == "Unknown command: 'w'"

    def test_empty_input(self):
        with pytest.raises(UnknownCommand):
            parse_command("", new_game())


class TestRender:

    def test_money(self):
        assert money(994) == "$994"
        assert money(-20) == "-$20"

    def test_bootstrap_events(self):
        assert render_events(new_game().event_log) == [
            "It is Day 1.",
            "You have $1000.",
            "You are at the Tenunda Hotel.",
        ]

    def test_event_lines(self):
        assert render_event(DrankBeer()) == "Cheers!"
        assert render_event(AppliedForJob(TENUNDA_BREWING, Position.SERVER)) == (
            "You applied for a job as a Server at Tenunda Brewing."
        )
        assert "first shift is on Day 3" in render_event(Hired(job=JOB))

    def test_unknown_event(self):
        with pytest.raises(TypeError):
            render_event(object())

    def test_summary(self):
        lines = render_summary(new_game())
        assert lines[1:] == ["It is Day 1.", "You have $1000.", "You are at the Tenunda Hotel."]

    def test_commands_listing(self):
        lines = render_commands(available_commands(_at(Location.STREETS)))
        assert lines == [
            "Available actions:",
            "   h: Go into the hotel.",
            "   r: Go into the brewery.",
            "",
            "   help: Show/hide this help.",
            "   x: Exit.",
        ]

    def test_no_commands(self):
        assert render_commands([]) == ["No actions currently available."]

    def test_feed_days_follow_day_changes(self):
        before = new_game()
        after = apply_turn(before, Sleep(cost=120))
        feed = render_feed(after.event_log[len(before.event_log):], before.day)
        assert feed == [
            (1, "You slept."),
            (2, "It is Day 2."),
            (2, "You have $880."),
        ]

    def test_feed_without_day_change_keeps_day(self):
        feed = render_feed([DrankBeer()], 4)
        assert feed == [(4, "Cheers!")]


class TestSchemas:

    def test_action_dicts(self):
        assert action_to_dict(BuyBeer(cost=6)) == {"type": "BuyBeer", "cost": 6}
        assert action_to_dict(Sleep()) == {"type": "Sleep", "cost": None}
        assert action_to_dict(Go(Location.HOTEL)) == {"type": "Go", "destination": "tenunda_hotel"}

    def test_event_dicts(self):
        assert event_to_dict(DrankBeer()) == {"type": "DrankBeer"}
        assert event_to_dict(Hired(job=JOB))["job"]["next_work_day"] == 3

    def test_state_is_json_ready(self):
        state = apply_turn(new_game(), Sleep(cost=120))
        d = state_to_dict(state)
        assert d["day"] == 2
        assert d["player_state"]["balance"] == 880
        assert d["event_log"][-1] == {"type": "BalanceChanged", "to": 880}
        json.dumps(d)

    def test_rejects_foreign_values(self):
        with pytest.raises(TypeError):
            action_to_dict("nope")
        with pytest.raises(TypeError):
            event_to_dict("nope")
