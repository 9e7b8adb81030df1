"""engine.console

Terminal front end: render -> read a line -> apply, until the player exits.

I/O is injected so the loop can be driven from tests.

Run:
  python -m engine.console
"""

from __future__ import annotations

from typing import Callable, Optional

from content.commands import available_commands
from content.parsing import UnknownCommand, parse_command
from content.render import render_commands, render_events, render_summary
from core.state import events_since

from .config import EngineConfig
from .pipeline import Session, play_turn, start_session

PROMPT = "> "


def run_console(
    *,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
    config: Optional[EngineConfig] = None,
) -> Session:
    cfg = config or EngineConfig()
    session = start_session(cfg)
    cursor = 0

    while not session.done and session.turn < int(cfg.max_turns):
        events, cursor = events_since(session.state, cursor)
        for line in render_events(events):
            write(line)
        write("")
        for line in render_summary(session.state):
            write(line)
        write("")
        if session.show_help:
            for line in render_commands(available_commands(session.state)):
                write(line)
            write("")

        while True:
            try:
                raw = read_line(PROMPT)
            except EOFError:
                raw = "x"
            try:
                command = parse_command(raw, session.state)
                break
            except UnknownCommand as e:
                write(str(e))

        session, _ = play_turn(session=session, command=command, config=cfg)

    write("Goodbye!")
    return session


def main() -> None:
    run_console()


if __name__ == "__main__":
    main()
