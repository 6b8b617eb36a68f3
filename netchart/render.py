"""plotext chart renderer for the download/upload window."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, TextIO

import plotext as plt

Y_BOUNDS = (0.0, 10.0)
Y_LABELS = ("0M/s", "5M/s", "10M/s")


@dataclass(frozen=True)
class Dataset:
    """One line series on the chart."""
    label: str
    points: Sequence[tuple[float, float]]
    color: str = "default"
    marker: str = "braille"


def format_bound(value: float) -> str:
    """Axis label for an x bound: 1.0 -> "1", 30.5 -> "30.5"."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


class DashboardRenderer:
    """Draws a framed two-series line chart.

    Reads its inputs only; repeated draws of the same data produce the
    same frame.
    """

    def __init__(self, size: tuple[int, int] | None = None, frame: bool = True):
        self.size = size
        self.frame = frame

    def build(self, datasets: Sequence[Dataset], x_bounds: tuple[float, float],
              x_labels: Sequence[str], y_bounds: tuple[float, float] = Y_BOUNDS,
              y_labels: Sequence[str] = Y_LABELS) -> str:
        plt.clf()
        plt.theme("clear")
        if self.size is None:
            plt.plotsize(None, None)
        else:
            plt.plotsize(*self.size)

        for ds in datasets:
            if not ds.points:
                continue
            xs = [p[0] for p in ds.points]
            ys = [p[1] for p in ds.points]
            plt.plot(xs, ys, label=ds.label, color=ds.color, marker=ds.marker)

        x_lo, x_hi = x_bounds
        y_lo, y_hi = y_bounds
        plt.frame(self.frame)
        plt.xticks([x_lo, (x_lo + x_hi) / 2.0, x_hi], list(x_labels))
        plt.yticks([y_lo, (y_lo + y_hi) / 2.0, y_hi], list(y_labels))
        plt.xlim(x_lo, x_hi)
        plt.ylim(y_lo, y_hi)
        plt.grid(True, False)
        plt.xlabel("X Axis")
        plt.ylabel("Y Axis")
        return plt.build().rstrip()

    def draw(self, out: TextIO, datasets: Sequence[Dataset], x_bounds: tuple[float, float],
             x_labels: Sequence[str], y_bounds: tuple[float, float] = Y_BOUNDS,
             y_labels: Sequence[str] = Y_LABELS) -> None:
        chart = self.build(datasets, x_bounds, x_labels, y_bounds, y_labels)
        # cursor-home then clear-to-end: repaint without flicker
        out.write("\033[H" + chart + "\033[J")
        out.flush()
