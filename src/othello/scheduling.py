"""
How the bot's move gets scheduled.

The Game never waits for the bot. It hands a callback to a Scheduler and carries on; the callback runs later (or right away).
"""

import asyncio
from typing import Callable, Protocol

Callback = Callable[[], object]


class Handle(Protocol):
    """Same shape as asyncio.TimerHandle"""

    def cancel(self) -> None: ...


Scheduler = Callable[[float, Callback], Handle]


class DoneHandle:
    """Handle for a callback that already ran. Nothing left to cancel."""

    def cancel(self) -> None:
        pass


def run_immediately(delay: float, callback: Callback) -> Handle:
    """Ignore the delay. Used where nobody watches the bot think (the HTTP service)."""
    callback()
    return DoneHandle()


def asyncio_scheduler(delay: float, callback: Callback) -> Handle:
    """Resume on the running event loop after `delay` seconds. Must be called from within that loop."""
    loop = asyncio.get_running_loop()
    return loop.call_later(delay, callback)
