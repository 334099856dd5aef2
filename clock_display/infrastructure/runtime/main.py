"""Main entrypoint."""

import asyncio
import signal
from typing import TextIO

import structlog

from clock_display.application.services.observable_state import ObservableClockState
from clock_display.application.services.updaters import build_updater
from clock_display.application.use_cases.apply_tick import run as apply_tick
from clock_display.application.use_cases.apply_tick import run_shared as apply_shared_tick
from clock_display.domain.entities import ClockState
from clock_display.domain.ports import ClockPort
from clock_display.infrastructure.config.settings import Settings
from clock_display.infrastructure.observability.logging import configure_logging
from clock_display.infrastructure.runtime.clock import SystemClock
from clock_display.infrastructure.runtime.health import start_metrics_server
from clock_display.infrastructure.runtime.ticker import Ticker
from clock_display.interfaces.display.terminal import build_display

logger = structlog.get_logger()


async def run_clock(
    settings: Settings,
    clock: ClockPort | None = None,
    stream: TextIO | None = None,
    shutdown_event: asyncio.Event | None = None,
) -> ClockState:
    """Run the clock until shutdown or max_ticks; return the final state."""
    clock = clock if clock is not None else SystemClock(settings.timezone)
    shutdown_event = shutdown_event if shutdown_event is not None else asyncio.Event()
    updater = build_updater(settings.updater, clock, settings.fixed_reading(), settings.timezone)
    display = build_display(settings.display_format, stream, clock)

    shared: ObservableClockState | None = None
    state = settings.initial_state()

    if settings.shared_state:
        shared = ObservableClockState(state)
        unsubscribe = shared.subscribe(display.show)

        def on_tick() -> None:
            apply_shared_tick(shared, updater, clock)

    else:
        unsubscribe = None

        def on_tick() -> None:
            nonlocal state
            state = apply_tick(state, updater, clock, display)

    logger.info(
        "clock_starting",
        updater=settings.updater.value,
        shared_state=settings.shared_state,
        display_format=settings.display_format.value,
        interval_seconds=settings.tick_interval_seconds,
        max_ticks=settings.max_ticks,
        timezone=settings.timezone,
    )
    display.show(state)

    ticker = Ticker(on_tick, settings.tick_interval_seconds, settings.max_ticks)
    try:
        async with ticker:
            await _wait_first(ticker.wait(), shutdown_event.wait())
    finally:
        if unsubscribe is not None:
            unsubscribe()
        display.close()

    final_state = shared.state if shared is not None else state
    logger.info("clock_stopped", tick_count=ticker.tick_count, state=final_state.to_dict())
    return final_state


async def _wait_first(*aws) -> None:
    """Wait for the first awaitable to finish and cancel the rest."""
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    try:
        done, _ = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
        for task in done:
            task.result()
    finally:
        for task in tasks:
            if not task.done():
                task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)


async def main_loop(shutdown_event: asyncio.Event) -> None:
    """Main event loop."""
    settings = Settings()
    configure_logging(settings.log_level, settings.log_json)
    logger.info(
        "settings_loaded",
        log_level=settings.log_level,
        metrics_enabled=settings.metrics_enabled,
        prometheus_port=settings.prometheus_port,
    )

    start_metrics_server(settings)

    await run_clock(settings, shutdown_event=shutdown_event)


def main() -> None:
    """Entrypoint."""
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    shutdown_event = asyncio.Event()

    def signal_handler() -> None:
        logger.info("shutdown_signal_received")
        shutdown_event.set()

    for sig in (signal.SIGTERM, signal.SIGINT):
        loop.add_signal_handler(sig, signal_handler)

    try:
        loop.run_until_complete(main_loop(shutdown_event))
    except KeyboardInterrupt:
        pass
    finally:
        loop.close()


if __name__ == "__main__":
    main()
