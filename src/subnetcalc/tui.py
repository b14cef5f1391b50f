# src/subnetcalc/tui.py
from __future__ import annotations

import sys
from typing import Callable, Optional, Protocol

from rich.console import Console, RenderableType
from rich.live import Live

from .app import ApplicationState
from .config import AppCfg
from .logging import get_logger, hold_console_logging
from .keys import Key
from .render import render
from .terminal import KeyReader, TerminalError, raw_mode

log = get_logger()


class KeySource(Protocol):
    def poll(self, timeout: float) -> Optional[Key]: ...


def run_loop(
    state: ApplicationState,
    keys: KeySource,
    draw: Callable[[RenderableType], None],
    *,
    timeout: float,
) -> ApplicationState:
    """
    render -> poll -> handle at most one key, until 'q'. The poll is the only
    place the loop waits.
    """
    while True:
        draw(render(state))
        key = keys.poll(timeout)
        if key is None:
            continue
        if not state.handle_key(key):
            return state


def run(cfg: AppCfg, *, console: Optional[Console] = None, stdin_fd: Optional[int] = None) -> ApplicationState:
    """Take over the terminal, run the calculator, and give the terminal back."""
    if stdin_fd is None:
        try:
            stdin_fd = sys.stdin.fileno()
        except (AttributeError, ValueError) as e:
            raise TerminalError(f"stdin is not a terminal: {e}") from e
    console = console or Console()
    state = ApplicationState()

    log.info("Session started")
    # exits unwind in reverse: screen and cursor first, then tty attributes, then held logs
    with hold_console_logging(), raw_mode(stdin_fd), Live(
        console=console,
        screen=True,
        auto_refresh=False,
        redirect_stdout=False,
        redirect_stderr=False,
    ) as live:
        def draw(frame: RenderableType) -> None:
            live.update(frame, refresh=True)

        run_loop(state, KeyReader(stdin_fd), draw, timeout=cfg.poll_timeout)
    log.info("Session ended")
    return state
