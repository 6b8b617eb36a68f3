"""Dashboard — chart state, CLI flags and the main loop wiring.

DashboardState owns the two sample windows, the x-axis bounds and the
rate sampler; the scheduler mutates it once per tick and the renderer
only reads it. Dashboard parses flags, takes over the terminal and runs
the loop until 'q' (or Ctrl+C).
"""

from __future__ import annotations

import logging
import signal
import sys
from argparse import ArgumentParser, Namespace
from typing import TextIO

from netchart.render import DashboardRenderer, Dataset, Y_BOUNDS, Y_LABELS, format_bound
from netchart.scheduler import TickScheduler, TICK_INTERVAL_S
from netchart.stats import (
    DEFAULT_INTERFACE_PREFIX, MockCounters, NetworkStats, RateSampler,
)
from netchart.terminal import KeyReader, terminal_session
from netchart.window import SlidingWindowBuffer, WindowBounds, WINDOW_SAMPLES

log = logging.getLogger(__name__)


# ---- state ----

class DashboardState:
    """Both rate windows plus the visible x range."""

    def __init__(self, sampler: RateSampler, capacity: int = WINDOW_SAMPLES):
        self.sampler = sampler
        self.download = SlidingWindowBuffer(capacity)
        self.upload = SlidingWindowBuffer(capacity)
        self.bounds = WindowBounds(0.0, float(capacity))

    def tick(self) -> tuple[float, float]:
        """Take one sample and slide both windows forward by one."""
        dl, ul = self.sampler.current_rate()
        self.bounds.advance(1.0)
        self.download.push(self.bounds.hi, dl)
        self.upload.push(self.bounds.hi, ul)
        log.debug("tick x=%g dl=%.3f MB ul=%.3f MB", self.bounds.hi, dl, ul)
        return dl, ul

    def datasets(self) -> list[Dataset]:
        return [
            Dataset("DSpeed", self.download.snapshot(), color="cyan", marker="dot"),
            Dataset("USpeed", self.upload.snapshot(), color="yellow", marker="braille"),
        ]

    def x_labels(self) -> tuple[str, str, str]:
        return (format_bound(self.bounds.lo), format_bound(self.bounds.midpoint),
                format_bound(self.bounds.hi))


# ---- dashboard ----

def parse_args(argv: list[str] | None = None) -> Namespace:
    parser = ArgumentParser(description="Terminal download/upload chart for one interface")
    parser.add_argument("--interface", default=DEFAULT_INTERFACE_PREFIX,
                        help=f"Interface name prefix, case-insensitive (default: {DEFAULT_INTERFACE_PREFIX})")
    parser.add_argument("--mock", action="store_true",
                        help="Use random test traffic (no live interface needed)")
    parser.add_argument("--log-file", default=None,
                        help="Write logs to this file (default: no logging)")
    parser.add_argument("--no-frame", action="store_true",
                        help="Hide the chart border")
    return parser.parse_args(argv)


class Dashboard:
    """Live download/upload chart for one network interface.

    Lifecycle:
        1. __init__() parses args (unless given) and builds the state
        2. run() takes over the terminal and blocks in the tick loop
        3. 'q' or Ctrl+C ends the loop; the terminal is always restored
    """

    def __init__(self, argv: list[str] | None = None, *, args: Namespace | None = None,
                 stdin: TextIO | None = None, stdout: TextIO | None = None):
        self.args = args if args is not None else parse_args(argv)

        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

        if self.args.mock:
            log.info("reading counters from mock traffic on %r", self.args.interface)
            stats = NetworkStats(MockCounters(self.args.interface))
        else:
            log.info("reading counters from psutil")
            stats = NetworkStats()
        self.state = DashboardState(RateSampler(stats, self.args.interface))
        self.renderer = DashboardRenderer(frame=not self.args.no_frame)

        self._drawing = False
        self._redraw_pending = False

    def render(self) -> None:
        # plotext keeps one global figure; a resize landing mid-draw only
        # flags another pass instead of clearing the figure being built
        if self._drawing:
            self._redraw_pending = True
            return
        self._drawing = True
        try:
            self._redraw_pending = True
            while self._redraw_pending:
                self._redraw_pending = False
                self.renderer.draw(
                    self.stdout,
                    self.state.datasets(),
                    self.state.bounds.as_tuple(),
                    self.state.x_labels(),
                    Y_BOUNDS,
                    Y_LABELS,
                )
        finally:
            self._drawing = False

    def on_resize(self, signum, frame) -> None:
        self.render()

    def run(self) -> int:
        """Blocking main loop. Returns the number of ticks taken."""
        log.info("starting: interface prefix %r, known interfaces %s",
                 self.args.interface, self.state.sampler.stats.names())
        keys = KeyReader(self.stdin)
        scheduler = TickScheduler(self.render, keys.wait, self.state.tick,
                                  interval=TICK_INTERVAL_S)

        ticks = 0
        with terminal_session(self.stdin, self.stdout):
            previous = signal.signal(signal.SIGWINCH, self.on_resize)
            try:
                ticks = scheduler.run()
            except KeyboardInterrupt:
                ticks = scheduler.ticks
            finally:
                signal.signal(signal.SIGWINCH, previous)
        log.info("exiting after %d ticks", ticks)
        return ticks


def configure_logging(path: str | None) -> None:
    """Log to a file if asked; the terminal itself belongs to the chart."""
    if path:
        logging.basicConfig(
            filename=path,
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    else:
        logging.getLogger("netchart").addHandler(logging.NullHandler())


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_file)
    Dashboard(args=args).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
