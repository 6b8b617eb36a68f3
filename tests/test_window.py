import pytest

from netchart.window import Sample, SlidingWindowBuffer, WindowBounds, WINDOW_SAMPLES


def test_initial_buffer_is_zero_filled():
    buf = SlidingWindowBuffer()
    snap = buf.snapshot()
    assert len(buf) == WINDOW_SAMPLES == 60
    assert [s.x for s in snap] == [float(x) for x in range(60)]
    assert all(s.y == 0.0 for s in snap)


def test_push_evicts_oldest_and_appends():
    buf = SlidingWindowBuffer(3)
    buf.push(3.0, 1.5)
    assert buf.snapshot() == (Sample(1.0, 0.0), Sample(2.0, 0.0), Sample(3.0, 1.5))


def test_length_constant_across_pushes():
    buf = SlidingWindowBuffer()
    for i in range(200):
        assert len(buf) == 60
        buf.push(60.0 + i, float(i))
        assert len(buf) == 60


def test_contents_stay_sorted_by_x():
    buf = SlidingWindowBuffer(5)
    for i in range(1, 12):
        buf.push(4.0 + i, 0.5)
        xs = [s.x for s in buf]
        assert xs == sorted(xs)


def test_push_on_empty_buffer_fails():
    buf = SlidingWindowBuffer(0)
    with pytest.raises(IndexError):
        buf.push(1.0, 1.0)


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        SlidingWindowBuffer(-1)


def test_snapshot_is_detached_from_buffer():
    buf = SlidingWindowBuffer(2)
    snap = buf.snapshot()
    buf.push(2.0, 9.0)
    assert snap == (Sample(0.0, 0.0), Sample(1.0, 0.0))


def test_samples_are_immutable():
    s = Sample(1.0, 2.0)
    with pytest.raises(AttributeError):
        s.x = 5.0


def test_bounds_advance_keeps_width():
    bounds = WindowBounds()
    assert bounds.as_tuple() == (0.0, 60.0)
    for i in range(1, 10):
        bounds.advance()
        assert bounds.as_tuple() == (float(i), 60.0 + i)
        assert bounds.hi - bounds.lo == 60.0
    assert bounds.midpoint == 39.0
