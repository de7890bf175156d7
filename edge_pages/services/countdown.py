"""
Countdown arithmetic and the repeating timer that drives it.

The timer is a scheduled-task handle: it re-arms itself on the running event
loop every ``period`` seconds and cancels itself on the first tick where the
target has passed, after rendering the terminal frame exactly once.
"""

import asyncio
import logging
import time
from collections.abc import Callable

from edge_pages.models.countdown import CountdownFrame, CountdownParts

logger = logging.getLogger(__name__)

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR


def now_ms() -> int:
    return int(time.time() * MS_PER_SECOND)


def compute_remaining(target_ms: int, current_ms: int) -> CountdownParts | None:
    """Split the distance to the target into whole units, None once it is negative."""
    distance = target_ms - current_ms
    if distance < 0:
        return None

    return CountdownParts(
        days=distance // MS_PER_DAY,
        hours=(distance % MS_PER_DAY) // MS_PER_HOUR,
        minutes=(distance % MS_PER_HOUR) // MS_PER_MINUTE,
        seconds=(distance % MS_PER_MINUTE) // MS_PER_SECOND,
    )


class CountdownTimer:
    """Repeating countdown tick with one-shot cancellation."""

    def __init__(
        self,
        target_ms: int,
        render: Callable[[CountdownFrame], None],
        *,
        final_message: str,
        period: float = 1.0,
        clock: Callable[[], int] = now_ms,
    ):
        self.target_ms = target_ms
        self.render = render
        self.final_message = final_message
        self.period = period
        self._clock = clock
        self._loop: asyncio.AbstractEventLoop | None = None
        self._handle: asyncio.TimerHandle | None = None
        self._finished = False
        self._stopped = asyncio.Event()

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def scheduled(self) -> bool:
        return self._handle is not None

    def start(self) -> None:
        """Arm the first tick on the running loop, one period from now."""
        if self._finished:
            return
        self._loop = asyncio.get_running_loop()
        self._schedule()

    def tick(self) -> CountdownFrame | None:
        """Render one frame, or nothing once the countdown has finished."""
        if self._finished:
            return None

        parts = compute_remaining(self.target_ms, self._clock())
        if parts is None:
            frame = CountdownFrame(finished=True, message=self.final_message)
            self.cancel()
            logger.info("Countdown reached its target")
        else:
            frame = CountdownFrame(parts=parts)

        self.render(frame)
        return frame

    def cancel(self) -> None:
        """Stop ticking. Safe to call more than once."""
        self._finished = True
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        self._stopped.set()

    async def wait(self) -> None:
        await self._stopped.wait()

    def _schedule(self) -> None:
        self._handle = self._loop.call_later(self.period, self._fire)

    def _fire(self) -> None:
        self._handle = None
        self.tick()
        if not self._finished:
            self._schedule()
