"""
Turn Engine Tests
=================

apply_turn: the hiring sweep, each action's effect and event trail, and
strict-mode rejection.
"""

from dataclasses import replace

import pytest

from core.actions import (
    AppliedForJob,
    ApplyForJob,
    BalanceChanged,
    BuyBeer,
    DayChanged,
    DrankBeer,
    Go,
    Hired,
    LocationChanged,
    Sleep,
    Slept,
    Work,
    Worked,
)
from core.availability import available_actions
from core.effects import IllegalAction, apply_turn, hire_due_applications
from core.state import GameState, new_game
from core.world import TENUNDA_BREWING, Job, JobApplication, Location, Position

APPLY = ApplyForJob(employer=TENUNDA_BREWING, position=Position.SERVER)


def _walk_to_brewery(state):
    state = apply_turn(state, Go(destination=Location.STREETS))
    return apply_turn(state, Go(destination=Location.BREWERY))


class TestNewGame:

    def test_initial_state(self):
        state = GameState.new()
        assert state.day == 1
        assert state.player_state.balance == 1000
        assert state.player_state.location == Location.HOTEL
        assert state.player_state.job is None
        assert state.player_state.job_applications == ()

    def test_bootstrap_events(self):
        state = new_game()
        assert state.event_log == (
            DayChanged(to=1),
            BalanceChanged(to=1000),
            LocationChanged(to=Location.HOTEL),
        )

    def test_overrides(self):
        state = new_game(balance=50, location=Location.STREETS)
        assert state.player_state.balance == 50
        assert state.event_log[1:] == (BalanceChanged(to=50), LocationChanged(to=Location.STREETS))


class TestActions:

    def test_buy_beer_at_brewery(self):
        state = _walk_to_brewery(new_game())
        state = apply_turn(state, BuyBeer(cost=6))
        assert state.player_state.balance == 994
        assert state.event_log[-2:] == (DrankBeer(), BalanceChanged(to=994))

    def test_go(self):
        state = apply_turn(new_game(), Go(destination=Location.STREETS))
        assert state.player_state.location == Location.STREETS
        assert state.event_log[-1] == LocationChanged(to=Location.STREETS)

    def test_paid_sleep(self):
        state = apply_turn(new_game(), Sleep(cost=120))
        assert state.day == 2
        assert state.player_state.balance == 880
        assert state.event_log[-3:] == (Slept(), DayChanged(to=2), BalanceChanged(to=880))

    def test_free_sleep(self):
        before = new_game()
        state = apply_turn(before, Sleep(cost=None))
        assert state.day == 2
        assert state.player_state.balance == 1000
        assert state.event_log[len(before.event_log):] == (Slept(), DayChanged(to=2))

    def test_sleep_appends_exactly_one_day_change(self):
        before = new_game()
        after = apply_turn(before, Sleep(cost=120))
        new_events = after.event_log[len(before.event_log):]
        assert [e for e in new_events if isinstance(e, DayChanged)] == [DayChanged(to=before.day + 1)]

    def test_apply_for_job(self):
        state = _walk_to_brewery(new_game())
        state = apply_turn(state, APPLY)
        assert state.player_state.job_applications == (
            JobApplication(business=TENUNDA_BREWING, position=Position.SERVER, application_day=1),
        )
        assert state.event_log[-1] == AppliedForJob(employer=TENUNDA_BREWING, position=Position.SERVER)

    def test_work_uses_the_job_on_the_action(self):
        job = Job(business=TENUNDA_BREWING, position=Position.SERVER, next_work_day=1, pay=200)
        state = new_game()
        state = replace(state, player_state=replace(state.player_state, location=Location.BREWERY, job=job))

        state = apply_turn(state, Work(job=job))

        worked = replace(job, next_work_day=2)
        assert state.player_state.job == worked
        assert state.player_state.balance == 1200
        assert state.event_log[-2:] == (Worked(job=worked), BalanceChanged(to=1200))

    def test_balance_may_go_negative(self):
        state = new_game(balance=5)
        state = apply_turn(state, BuyBeer(cost=10))
        assert state.player_state.balance == -5
        assert state.event_log[-1] == BalanceChanged(to=-5)

    def test_unknown_action_type(self):
        with pytest.raises(TypeError):
            apply_turn(new_game(), "dance")


class TestImmutability:

    def test_input_state_untouched(self):
        before = new_game()
        log_len = len(before.event_log)
        after = apply_turn(before, Sleep(cost=120))
        assert after is not before
        assert before.day == 1
        assert before.player_state.balance == 1000
        assert len(before.event_log) == log_len

    def test_application_list_not_shared(self):
        state = _walk_to_brewery(new_game())
        after = apply_turn(state, APPLY)
        assert state.player_state.job_applications == ()
        assert len(after.player_state.job_applications) == 1

    def test_sequences_are_tuples(self):
        state = apply_turn(_walk_to_brewery(new_game()), APPLY)
        assert isinstance(state.event_log, tuple)
        assert isinstance(state.player_state.job_applications, tuple)
        later = apply_turn(state, BuyBeer(cost=6))
        assert later.player_state.job_applications == state.player_state.job_applications
        with pytest.raises(AttributeError):
            later.player_state.job_applications.append(None)


class TestHiring:

    def test_no_same_day_hire(self):
        state = apply_turn(_walk_to_brewery(new_game()), APPLY)
        # more turns on day 1
        state = apply_turn(state, BuyBeer(cost=6))
        state = apply_turn(state, Go(destination=Location.STREETS))
        assert state.player_state.job is None
        assert len(state.player_state.job_applications) == 1
        assert not any(isinstance(e, Hired) for e in state.event_log)

    def test_scenario_apply_sleep_hire(self):
        state = new_game()
        state = apply_turn(state, Go(destination=Location.STREETS))
        state = apply_turn(state, Go(destination=Location.BREWERY))
        state = apply_turn(state, APPLY)
        state = apply_turn(state, Sleep(cost=None))
        assert state.day == 2
        assert state.player_state.job is None
        balance = state.player_state.balance

        state = apply_turn(state, Go(destination=Location.STREETS))

        job = Job(business=TENUNDA_BREWING, position=Position.SERVER, next_work_day=3, pay=200)
        assert state.player_state.job == job
        assert state.player_state.job_applications == ()
        assert state.player_state.balance == balance
        assert state.event_log[-2:] == (Hired(job=job), LocationChanged(to=Location.STREETS))

    def test_hire_replaces_existing_job(self):
        old = Job(business=TENUNDA_BREWING, position=Position.SERVER, next_work_day=9, pay=999)
        app = JobApplication(business=TENUNDA_BREWING, position=Position.SERVER, application_day=1)
        state = new_game()
        state = replace(
            state,
            day=2,
            player_state=replace(state.player_state, job=old, job_applications=(app,)),
        )
        state = hire_due_applications(state)
        assert state.player_state.job.next_work_day == 3
        assert state.player_state.job.pay == 200

    def test_sweep_is_oldest_first_and_skips_todays(self):
        first = JobApplication(business=TENUNDA_BREWING, position=Position.SERVER, application_day=1)
        second = JobApplication(business=TENUNDA_BREWING, position=Position.SERVER, application_day=2)
        today = JobApplication(business=TENUNDA_BREWING, position=Position.SERVER, application_day=3)
        state = new_game()
        state = replace(
            state,
            day=3,
            player_state=replace(state.player_state, job_applications=(first, second, today)),
        )
        state = hire_due_applications(state)
        hired = [e for e in state.event_log if isinstance(e, Hired)]
        assert len(hired) == 2
        assert state.player_state.job_applications == (today,)

    def test_work_shift_after_hire(self):
        state = apply_turn(_walk_to_brewery(new_game()), APPLY)
        state = apply_turn(state, Sleep(cost=None))     # day 2
        state = apply_turn(state, BuyBeer(cost=6))      # hired, first shift day 3
        assert not any(isinstance(a, Work) for a in available_actions(state))
        state = apply_turn(state, Sleep(cost=None))     # day 3
        work = next(a for a in available_actions(state) if isinstance(a, Work))
        state = apply_turn(state, work)
        assert state.player_state.job.next_work_day == 4
        assert not any(isinstance(a, Work) for a in available_actions(state))


class TestStrict:

    def test_rejects_unavailable_action(self):
        state = new_game()
        with pytest.raises(IllegalAction) as exc:
            apply_turn(state, BuyBeer(cost=6), strict=True)
        assert exc.value.action == BuyBeer(cost=6)

    def test_illegal_action_is_value_error(self):
        assert issubclass(IllegalAction, ValueError)

    def test_accepts_available_action(self):
        state = apply_turn(new_game(), BuyBeer(cost=10), strict=True)
        assert state.player_state.balance == 990

    def test_strict_goes_through_is_available(self, monkeypatch):
        monkeypatch.setattr("core.effects.is_available", lambda state, action: True)
        state = apply_turn(new_game(), BuyBeer(cost=6), strict=True)
        assert state.player_state.balance == 994

    def test_rejects_apply_once_hired(self):
        app = JobApplication(business=TENUNDA_BREWING, position=Position.SERVER, application_day=1)
        state = new_game()
        state = replace(
            state,
            day=2,
            player_state=replace(state.player_state, location=Location.BREWERY, job_applications=(app,)),
        )
        with pytest.raises(IllegalAction):
            apply_turn(state, APPLY, strict=True)
