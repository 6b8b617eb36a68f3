"""Sliding time-series window — fixed-capacity sample buffers and x-axis bounds."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterator, NamedTuple

WINDOW_SAMPLES = 60


class Sample(NamedTuple):
    """One chart point: tick index on x, rate on y."""
    x: float
    y: float


class SlidingWindowBuffer:
    """Ordered run of exactly ``capacity`` samples.

    Starts full of zero-rate samples at x = 0..capacity-1. Every push
    evicts the oldest sample, so the length never changes.
    """

    def __init__(self, capacity: int = WINDOW_SAMPLES):
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        self.capacity = capacity
        self._points: deque[Sample] = deque(
            (Sample(float(x), 0.0) for x in range(capacity)), maxlen=capacity,
        )

    def push(self, x: float, y: float) -> None:
        if not self._points:
            raise IndexError("push on an empty window buffer")
        self._points.popleft()
        self._points.append(Sample(float(x), float(y)))

    def snapshot(self) -> tuple[Sample, ...]:
        return tuple(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Sample]:
        return iter(self.snapshot())

    def __repr__(self) -> str:
        first = self._points[0] if self._points else None
        last = self._points[-1] if self._points else None
        return f"SlidingWindowBuffer(capacity={self.capacity}, first={first}, last={last})"


@dataclass
class WindowBounds:
    """Visible x-axis range; both ends move together."""
    lo: float = 0.0
    hi: float = float(WINDOW_SAMPLES)

    def advance(self, step: float = 1.0) -> None:
        self.lo += step
        self.hi += step

    @property
    def midpoint(self) -> float:
        return (self.lo + self.hi) / 2.0

    def as_tuple(self) -> tuple[float, float]:
        return (self.lo, self.hi)
