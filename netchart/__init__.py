"""netchart — live terminal chart of one interface's download/upload rate.

Modules, leaf first: window (sample buffers), stats (byte counters and
rate sampling), scheduler (tick loop), render (plotext chart), terminal
(keyboard and screen), dashboard (wiring and CLI).
"""

__version__ = "0.1.0"
