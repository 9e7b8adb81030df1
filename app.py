"""Tenunda (Streamlit)

UI/Experience

Principles:
- UI only renders + triggers.
- Core domain and engine are pure Python modules.
- Every button is one available command; the engine never sees anything else.

Run locally: streamlit run app.py
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List

import streamlit as st

import core
from content.commands import (
    PlayerCommand,
    SystemAction,
    SystemCommand,
    available_commands,
    command_description,
    command_key,
    sorted_commands,
)
from content.render import money, render_feed, render_summary
from content.schemas import state_to_dict
from core.world import LOCATION_NAMES, STARTING_BALANCE, Location

from engine.config import EngineConfig, config_to_dict
from engine.logging import dumps_run_export, make_run_export
from engine.pipeline import Session, play_turn, start_session


APP_TITLE = "Tenunda"
APP_SUBTITLE = "A small town, a hotel, a brewery. Spend, sleep, find work."
APP_VERSION = "1.0.0"
BUILD_ID = "v1.0-20261019"

st.set_page_config(page_title=APP_TITLE, page_icon="🍺", layout="wide", initial_sidebar_state="expanded")

CSS = """
<style>
.block-container {padding-top: 3.2rem; padding-bottom: 2rem;}
section[data-testid="stSidebar"] .block-container {padding-top: 2.0rem;}
.card {
  border: 1px solid rgba(255,255,255,0.08);
  border-radius: 16px;
  padding: 14px 16px;
  background: rgba(255,255,255,0.03);
}
hr.soft {border: none; border-top: 1px solid rgba(255,255,255,0.08); margin: 1rem 0;}
.small {font-size: 13px; opacity:.75;}
</style>
"""

st.markdown(CSS, unsafe_allow_html=True)


# =========================
# Helpers
# =========================


def _now_id() -> str:
    return datetime.utcnow().strftime("%Y%m%d%H%M%S%f")


def _config() -> EngineConfig:
    ss = st.session_state
    return EngineConfig(
        starting_balance=int(ss.starting_balance),
        starting_location=Location(ss.starting_location),
        strict_actions=bool(ss.strict_actions),
    )


# =========================
# Session State
# =========================


def _ensure_state() -> None:
    ss = st.session_state
    if "run_id" not in ss:
        ss.run_id = _now_id()
    if "started" not in ss:
        ss.started = False
    if "starting_balance" not in ss:
        ss.starting_balance = STARTING_BALANCE
    if "starting_location" not in ss:
        ss.starting_location = Location.HOTEL.value
    if "strict_actions" not in ss:
        ss.strict_actions = True

    if "engine_config" not in ss:
        ss.engine_config = None
    if "session" not in ss:
        ss.session = None
    if "initial_state" not in ss:
        ss.initial_state = None

    if "cursor" not in ss:
        ss.cursor = 0
    if "feed" not in ss:
        ss.feed = []
    if "logs" not in ss:
        ss.logs = []


def _reset_run() -> None:
    ss = st.session_state
    for k in list(ss.keys()):
        del ss[k]
    _ensure_state()


def _start_run() -> None:
    ss = st.session_state
    cfg = _config()
    session = start_session(cfg)

    ss.engine_config = cfg
    ss.session = session
    ss.initial_state = session.state
    ss.started = True
    ss.cursor = 0
    ss.feed = []
    ss.logs = []
    _drain_events(int(session.state.day))


def _drain_events(day: int) -> None:
    """Move events past the cursor into the on-screen feed, starting from `day`."""
    ss = st.session_state
    events, ss.cursor = core.events_since(ss.session.state, int(ss.cursor))
    for ev_day, text in render_feed(events, day):
        ss.feed.append({"day": ev_day, "text": text})


def _run_command(cmd: Any) -> None:
    ss = st.session_state
    day = int(ss.session.state.day)
    session, log = play_turn(session=ss.session, command=cmd, config=ss.engine_config)
    ss.session = session
    ss.logs.append(log)
    _drain_events(day)


# =========================
# UI Pages
# =========================


def page_setup() -> None:
    st.title(APP_TITLE)
    st.caption(APP_SUBTITLE)

    c = st.container()
    with c:
        st.markdown("""
        ### How to play
        - Every button is one turn. Walking, drinking and sleeping all count.
        - Beer is cheaper at the brewery than at the hotel. A room costs money.
        - Apply for a job at the brewery. You hear back after a night's sleep,
          and your first shift is the day after that.
        - Nothing stops your balance from going below zero.
        """)


def page_run() -> None:
    ss = st.session_state
    session: Session = ss.session
    state = session.state
    player = state.player_state

    st.title(APP_TITLE)
    st.caption(APP_SUBTITLE)

    a, b, c, d = st.columns([1.0, 1.0, 1.6, 1.6])
    a.metric("Day", int(state.day))
    b.metric("Balance", money(player.balance))
    c.metric("Location", LOCATION_NAMES[player.location])
    job_label = "—" if player.job is None else f"{player.job.business.name} (Day {player.job.next_work_day})"
    d.metric("Job / next shift", job_label)

    st.markdown("<hr class='soft'/>", unsafe_allow_html=True)

    if session.done:
        st.success("You left Tenunda. Goodbye!")
        return

    cmds = [x for x in sorted_commands(available_commands(state)) if isinstance(x, PlayerCommand)]
    st.markdown("### What now?")
    if not cmds:
        st.info("No actions currently available.")
    cols = st.columns(max(1, len(cmds)))
    for i, cmd in enumerate(cmds):
        with cols[i]:
            label = f"{command_key(cmd)} · {command_description(cmd)}"
            if st.button(label, key=f"cmd_{ss.cursor}_{i}", use_container_width=True):
                _run_command(cmd)
                st.rerun()

    st.markdown("<hr class='soft'/>", unsafe_allow_html=True)

    left, right = st.columns([1.4, 1.0])
    with left:
        st.markdown("### What happened")
        feed: List[Dict[str, Any]] = list(ss.feed)
        for item in reversed(feed[-25:]):
            st.markdown(f"<div class='small'>Day {item['day']}</div>{item['text']}", unsafe_allow_html=True)
    with right:
        st.markdown("<div class='card'>", unsafe_allow_html=True)
        st.markdown("#### Summary")
        st.markdown("\n\n".join(render_summary(state)[1:]))
        st.markdown("</div>", unsafe_allow_html=True)

    if st.button("Leave town", key="exit"):
        _run_command(SystemCommand(action=SystemAction.EXIT))
        st.rerun()


def page_history() -> None:
    ss = st.session_state
    st.title("History")
    st.caption("Turn logs for this run.")

    logs = list(ss.get("logs", []))
    if not logs:
        st.info("No turns yet.")
        return

    for item in reversed(logs):
        cmd = item.get("command") or {}
        label = (cmd.get("action") or {}).get("type") if cmd.get("kind") == "player" else cmd.get("action")
        st.markdown("<div class='card'>", unsafe_allow_html=True)
        st.markdown(f"#### Turn {item.get('turn')} · Day {item.get('day')} · {label}")
        for ev in item.get("events", []):
            st.markdown(f"- `{ev.get('type')}`")
        st.markdown("</div>", unsafe_allow_html=True)
        st.write("")


def page_debug() -> None:
    ss = st.session_state
    st.title("Debug")

    st.subheader("API")
    st.code(core.API_VERSION)

    st.subheader("EngineConfig")
    st.json(config_to_dict(ss.engine_config) if ss.engine_config else {})

    st.subheader("GameState")
    st.json(state_to_dict(ss.session.state) if ss.session else {})


def export_controls() -> None:
    ss = st.session_state
    st.sidebar.markdown("---")
    st.sidebar.markdown("### Run export")

    data = b""
    if ss.get("started") and ss.get("session") is not None:
        payload = make_run_export(
            config=ss.engine_config,
            initial_state=ss.initial_state,
            turn_logs=list(ss.logs),
            final_state=ss.session.state,
        )
        payload["meta"] = {
            "app": APP_TITLE,
            "version": APP_VERSION,
            "build": BUILD_ID,
            "exported_at": datetime.utcnow().isoformat() + "Z",
        }
        data = dumps_run_export(payload).encode("utf-8")

    st.sidebar.download_button(
        "Download run log",
        data=data,
        file_name=f"tenunda_run_{ss.get('run_id', 'run')}.json",
        mime="application/json",
        disabled=not bool(ss.get("started")),
    )


# =========================
# Sidebar
# =========================


def sidebar() -> str:
    ss = st.session_state

    st.sidebar.markdown(f"**{APP_TITLE}**  ")
    st.sidebar.markdown(f"v{APP_VERSION} · {BUILD_ID}")

    st.sidebar.markdown("---")

    ss.starting_balance = st.sidebar.number_input(
        "Starting balance", value=int(ss.starting_balance), step=50, disabled=ss.started
    )
    loc_values = [loc.value for loc in Location]
    loc_ix = loc_values.index(ss.starting_location) if ss.starting_location in loc_values else 0
    ss.starting_location = st.sidebar.selectbox(
        "Start at",
        loc_values,
        index=loc_ix,
        format_func=lambda v: LOCATION_NAMES[Location(v)],
        disabled=ss.started,
    )
    ss.strict_actions = st.sidebar.checkbox("Strict actions", value=bool(ss.strict_actions), disabled=ss.started)

    cols = st.sidebar.columns(2)
    with cols[0]:
        if st.button("Start", disabled=ss.started, use_container_width=True):
            _start_run()
            st.rerun()
    with cols[1]:
        if st.button("Reset", use_container_width=True):
            _reset_run()
            st.rerun()

    export_controls()

    st.sidebar.markdown("---")
    page = st.sidebar.radio("Page", ["Play", "History", "Debug"], index=0)
    return page


# =========================
# Main
# =========================


def main() -> None:
    _ensure_state()
    page = sidebar()

    ss = st.session_state

    if not ss.started:
        page_setup()
        return

    if ss.engine_config is None or ss.session is None:
        st.error("Run config/state missing. Press Reset.")
        return

    if page == "Play":
        try:
            page_run()
        except core.IllegalAction as e:
            st.error(f"That is not possible right now: {e}")
    elif page == "History":
        page_history()
    else:
        page_debug()


if __name__ == "__main__":
    main()
