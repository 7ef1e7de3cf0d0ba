"""Tests for FrameClock."""

import pytest

from tinytown.core.clock import FrameClock


class FakeTime:
    """Controllable millisecond time source."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now


class TestFrameClock:
    """Tests for elapsed-time measurement."""

    def test_first_tick_without_start_is_zero(self):
        clock = FrameClock(time_source=FakeTime())
        assert clock.tick() == 0.0

    def test_tick_converts_ms_to_units(self):
        """60ms should be one time unit by default."""
        fake = FakeTime()
        clock = FrameClock(time_source=fake)
        clock.start()
        fake.now += 120
        assert clock.tick() == pytest.approx(2.0)

    def test_tick_measures_since_previous_tick(self):
        fake = FakeTime()
        clock = FrameClock(time_source=fake)
        clock.start()
        fake.now += 60
        clock.tick()
        fake.now += 30
        assert clock.tick() == pytest.approx(0.5)
        assert clock.elapsed == pytest.approx(1.5)
        assert clock.frame_count == 2

    def test_time_going_backwards_is_clamped(self):
        fake = FakeTime()
        clock = FrameClock(time_source=fake)
        clock.start()
        fake.now -= 500
        assert clock.tick() == 0.0

    def test_custom_time_unit(self):
        fake = FakeTime()
        clock = FrameClock(time_unit_ms=1000.0, time_source=fake)
        clock.start()
        fake.now += 250
        assert clock.tick() == pytest.approx(0.25)

    def test_reset(self):
        fake = FakeTime()
        clock = FrameClock(time_source=fake)
        clock.start()
        fake.now += 600
        clock.tick()
        clock.reset()
        assert clock.elapsed == 0.0
        assert clock.frame_count == 0
        assert clock.tick() == 0.0

    def test_format_time(self):
        fake = FakeTime()
        clock = FrameClock(time_source=fake)
        clock.start()
        fake.now += 90
        clock.tick()
        assert clock.format_time() == "1.5u (frame 1)"

    def test_ms_to_units(self):
        assert FrameClock().ms_to_units(30) == pytest.approx(0.5)
