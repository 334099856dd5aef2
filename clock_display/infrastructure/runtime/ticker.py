"""Repeating asyncio ticker."""

import asyncio
import inspect
from collections.abc import Awaitable, Callable

import structlog

from clock_display.domain.errors import ClockDisplayError, InvalidClockFieldError, TickerStateError
from clock_display.infrastructure.observability.metrics import tick_failures_total, ticks_total

logger = structlog.get_logger()

TickCallback = Callable[[], Awaitable[None] | None]


class Ticker:
    """Invokes a callback once per interval on the running event loop.

    The cadence is measured against the loop's monotonic clock. When a tick
    runs late, the missed intervals are coalesced into that single call
    instead of being replayed.
    """

    def __init__(
        self,
        callback: TickCallback,
        interval_seconds: float = 1.0,
        max_ticks: int | None = None,
    ) -> None:
        if interval_seconds <= 0:
            raise TickerStateError(f"Interval must be > 0, got {interval_seconds}")
        if max_ticks is not None and max_ticks < 1:
            raise TickerStateError(f"max_ticks must be >= 1, got {max_ticks}")
        self._callback = callback
        self._interval = interval_seconds
        self._max_ticks = max_ticks
        self._task: asyncio.Task[None] | None = None
        self._tick_count = 0

    @property
    def interval_seconds(self) -> float:
        return self._interval

    @property
    def tick_count(self) -> int:
        return self._tick_count

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start ticking; must be called with a running event loop."""
        if self.is_running:
            raise TickerStateError("Ticker already started")
        self._task = asyncio.get_running_loop().create_task(self._run())
        logger.debug("ticker_started", interval_seconds=self._interval, max_ticks=self._max_ticks)

    async def stop(self) -> None:
        """Cancel the ticking task and wait for it to finish."""
        task, self._task = self._task, None
        if task is None:
            return
        if not task.done():
            task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        logger.debug("ticker_stopped", tick_count=self._tick_count)

    async def wait(self) -> None:
        """Wait until the ticker finishes on its own (max_ticks reached)."""
        if self._task is not None:
            await asyncio.shield(self._task)

    async def __aenter__(self) -> "Ticker":
        self.start()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.stop()

    async def _run(self) -> None:
        loop = asyncio.get_running_loop()
        next_deadline = loop.time() + self._interval

        while self._max_ticks is None or self._tick_count < self._max_ticks:
            delay = next_deadline - loop.time()
            if delay > 0:
                await asyncio.sleep(delay)

            await self._fire()

            next_deadline += self._interval
            now = loop.time()
            if next_deadline <= now:
                missed = int((now - next_deadline) // self._interval) + 1
                next_deadline += missed * self._interval
                logger.debug("ticks_coalesced", missed=missed)

    async def _fire(self) -> None:
        self._tick_count += 1
        try:
            result = self._callback()
            if inspect.isawaitable(result):
                await result
            ticks_total.inc()
        except Exception as e:
            error_code = _classify_error(e)
            tick_failures_total.labels(error_code=error_code).inc()
            logger.error(
                "tick_failed",
                tick=self._tick_count,
                error_code=error_code,
                error=str(e),
                exc_info=True,
            )


def _classify_error(error: Exception) -> str:
    """Classify a tick error into an error code."""
    if isinstance(error, InvalidClockFieldError):
        return "INVALID_CLOCK_FIELD"
    if isinstance(error, ClockDisplayError):
        return "CLOCK_ERROR"
    if isinstance(error, OSError):
        return "OUTPUT_WRITE_ERROR"
    return "INTERNAL_ERROR"
