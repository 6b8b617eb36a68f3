from netchart.stats import MB


class FakeClock:
    """Manually advanced stand-in for time.monotonic."""

    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class ScriptedInput:
    """Plays back (delay, key) events against a FakeClock.

    A key of None means the wait times out: the clock moves by the full
    timeout. Otherwise the clock moves by delay and the key is returned.
    """

    def __init__(self, clock, events):
        self.clock = clock
        self.events = list(events)
        self.timeouts = []

    def __call__(self, timeout):
        self.timeouts.append(timeout)
        if not self.events:
            raise AssertionError("input script exhausted")
        delay, key = self.events.pop(0)
        if key is None:
            self.clock.advance(timeout)
            return None
        assert delay <= timeout
        self.clock.advance(delay)
        return key


class ScriptedCounters:
    """Counter reader returning one prepared snapshot per call; repeats the last."""

    def __init__(self, *snapshots):
        self.snapshots = list(snapshots)
        self.calls = 0

    def __call__(self):
        idx = min(self.calls, len(self.snapshots) - 1)
        self.calls += 1
        return dict(self.snapshots[idx])


class FixedSampler:
    """RateSampler stand-in returning a constant (download, upload) pair."""

    def __init__(self, rate=(0.0, 0.0)):
        self.rate = rate
        self.calls = 0

    def current_rate(self):
        self.calls += 1
        return self.rate


def mb(value):
    return int(value * MB)
