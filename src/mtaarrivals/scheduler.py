"""One-shot and watch-mode execution of the arrivals display."""

import logging
import sys
import time
from datetime import datetime
from typing import Callable, Optional, TextIO

from .config import ArrivalsConfig
from .exceptions import FeedError, NoMatchError, UsageError
from .presenter import format_timestamp, render_arrivals
from .tracker import ArrivalsTracker

logger = logging.getLogger(__name__)

CLEAR_SCREEN = "\033[H\033[2J"


class RefreshScheduler:
    """Runs the fetch, resolve and render sequence once or on a fixed interval."""

    def __init__(
        self,
        config: ArrivalsConfig,
        tracker: ArrivalsTracker,
        out: Optional[TextIO] = None,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
        wall_clock: Callable[[], datetime] = datetime.now,
    ):
        self.config = config
        self.tracker = tracker
        self.out = out if out is not None else sys.stdout
        self._sleep = sleep
        self._clock = clock
        self._wall_clock = wall_clock

    def run(self) -> None:
        """Run in the mode selected by the config. Watch mode only returns on interrupt."""
        if self.config.watch:
            self.watch()
        else:
            self.run_once()

    def run_once(self) -> bool:
        """
        Perform a single fetch and display.

        Feed and lookup failures are reported to the output, never raised.

        Returns:
            True if a table was rendered.
        """
        try:
            snapshot = self.tracker.fetch_snapshot()
        except FeedError as e:
            logger.info(f"Feed fetch failed: {e}")
            self._print(f"Error fetching feed: {e}")
            return False

        if not snapshot.arrivals:
            self._print("No upcoming arrivals found.")
            return False

        arrivals = list(snapshot.arrivals)
        if self.config.station:
            try:
                arrivals = self.tracker.arrivals_for_station(self.config.station, snapshot)
            except NoMatchError as e:
                logger.info(str(e))
                self._print(str(e))
                return False

        self._print(render_arrivals(arrivals, self.tracker.directory))
        return True

    def watch(self) -> None:
        """
        Refresh the display every ``refresh_interval`` seconds until interrupted.

        Raises:
            UsageError: If no station query is configured.
        """
        if not self.config.station:
            raise UsageError("watch mode requires a station name or stop ID")

        interval = self.config.refresh_interval
        logger.info(f"Watching '{self.config.station}' every {interval} seconds")

        next_tick = self._clock()
        first = True
        while True:
            if not first:
                self.out.write(CLEAR_SCREEN)
            first = False

            self.run_once()
            self._print_footer()

            # Fixed cadence: schedule from the previous deadline, not from now
            next_tick += interval
            delay = next_tick - self._clock()
            if delay < 0:
                logger.debug(f"Tick overran interval by {-delay:.1f}s")
                next_tick = self._clock()
                delay = 0
            self._sleep(delay)

    def _print_footer(self) -> None:
        self._print(f"\nLast updated: {format_timestamp(self._wall_clock())}")
        self._print("Watch mode active. Press Ctrl+C to exit.")
        self._print(f"Refreshing every {self.config.refresh_interval:g} seconds...")
        self.out.flush()

    def _print(self, text: str) -> None:
        self.out.write(text + "\n")
