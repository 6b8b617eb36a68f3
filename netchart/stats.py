"""Interface byte counters and the per-tick rate sampler.

NetworkStats wraps a counter reader (psutil by default) and turns the
cumulative RX/TX totals it reports into per-refresh deltas. RateSampler
picks one interface by name prefix and converts its deltas to MB.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable, Iterable

import psutil

log = logging.getLogger(__name__)

MB = 1024 * 1024
DEFAULT_INTERFACE_PREFIX = "en0"

# {interface: (rx_bytes_total, tx_bytes_total)}, in provider order
Counters = dict[str, tuple[int, int]]


# ---- counter readers ----

def read_psutil_counters() -> Counters:
    """Per-NIC totals from psutil, in the order the OS lists them."""
    per_nic = psutil.net_io_counters(pernic=True)
    return {name: (c.bytes_recv, c.bytes_sent) for name, c in per_nic.items()}


def read_proc_net_dev(path: str = "/proc/net/dev") -> Counters:
    """Per-NIC totals parsed from /proc/net/dev (Linux only)."""
    result: Counters = {}
    with open(path) as f:
        for line in f:
            if ":" not in line:
                continue
            iface, data = line.split(":", 1)
            parts = data.split()
            if len(parts) < 9:
                continue
            result[iface.strip()] = (int(parts[0]), int(parts[8]))   # rx bytes, tx bytes
    return result


class MockCounters:
    """Fake reader: one interface with random traffic up to ``peak`` bytes per call."""

    def __init__(self, interface: str = DEFAULT_INTERFACE_PREFIX, peak: float = 8 * MB,
                 rng: random.Random | None = None):
        self.interface = interface
        self.peak = peak
        self._rng = rng or random.Random()
        self._rx = 0
        self._tx = 0

    def __call__(self) -> Counters:
        self._rx += int(self._rng.uniform(0, self.peak))
        self._tx += int(self._rng.uniform(0, self.peak / 4))
        return {self.interface: (self._rx, self._tx)}


# ---- stats source ----

@dataclass(frozen=True)
class InterfaceData:
    received: int           # bytes since previous refresh
    transmitted: int
    total_received: int
    total_transmitted: int


class NetworkStats:
    """Per-interface byte deltas between consecutive refresh() calls."""

    def __init__(self, read_counters: Callable[[], Counters] = read_psutil_counters):
        self._read = read_counters
        self._data: dict[str, InterfaceData] = {}
        for name, (rx, tx) in self._read().items():
            self._data[name] = InterfaceData(0, 0, rx, tx)

    def refresh(self, remove_missing: bool = True) -> None:
        """Re-read counters. Interfaces that vanished are dropped unless remove_missing is False."""
        current = self._read()
        data: dict[str, InterfaceData] = {}
        for name, (rx, tx) in current.items():
            prev = self._data.get(name)
            if prev is None:
                data[name] = InterfaceData(0, 0, rx, tx)
                continue
            # counters can go backwards on interface reset; never report negative traffic
            data[name] = InterfaceData(
                received=max(0, rx - prev.total_received),
                transmitted=max(0, tx - prev.total_transmitted),
                total_received=rx,
                total_transmitted=tx,
            )
        if not remove_missing:
            for name, prev in self._data.items():
                if name not in data:
                    data[name] = InterfaceData(0, 0, prev.total_received, prev.total_transmitted)
        self._data = data

    def iterate(self) -> list[tuple[str, InterfaceData]]:
        return list(self._data.items())

    def names(self) -> list[str]:
        return list(self._data)


def find_interface(entries: Iterable[tuple[str, InterfaceData]],
                   prefix: str) -> tuple[str, InterfaceData] | None:
    """First entry whose name starts with prefix, ignoring case."""
    prefix = prefix.lower()
    for name, data in entries:
        if name.lower().startswith(prefix):
            return name, data
    return None


# ---- rate sampler ----

class RateSampler:
    """Download/upload in MB for the interval since the previous sample."""

    def __init__(self, stats: NetworkStats, prefix: str = DEFAULT_INTERFACE_PREFIX):
        self.stats = stats
        self.prefix = prefix
        self._matched: str | None = None

    def current_rate(self) -> tuple[float, float]:
        self.stats.refresh(True)
        hit = find_interface(self.stats.iterate(), self.prefix)
        if hit is None:
            if self._matched is not None:
                log.info("interface %s is gone; reporting zero rate", self._matched)
                self._matched = None
            log.debug("no interface matches %r; reporting zero rate", self.prefix)
            return 0.0, 0.0

        name, data = hit
        if name != self._matched:
            log.info("sampling interface %s (prefix %r)", name, self.prefix)
            self._matched = name
        return data.received / MB, data.transmitted / MB

    @property
    def interface(self) -> str | None:
        """Name of the interface matched by the last sample, if any."""
        return self._matched
