"""Tests for FrameClock."""

import pytest

from dragaim.core.clock import FrameClock


class TestFrameClock:
    """Test elapsed-time measurement."""

    def test_first_tick_is_zero(self) -> None:
        """Test the first tick has no previous reference."""
        clock = FrameClock(time_source=lambda: 42.0)
        assert clock.tick() == 0.0

    def test_elapsed_between_ticks(self) -> None:
        """Test successive ticks report deltas."""
        times = iter([1.0, 1.016, 1.05])
        clock = FrameClock(time_source=lambda: next(times))
        clock.tick()
        assert clock.tick() == pytest.approx(0.016)
        assert clock.tick() == pytest.approx(0.034)

    def test_reset(self) -> None:
        """Test reset makes the next tick start fresh."""
        times = iter([1.0, 2.0, 5.0])
        clock = FrameClock(time_source=lambda: next(times))
        clock.tick()
        clock.tick()
        clock.reset()
        assert clock.tick() == 0.0

    def test_default_source_is_monotonic(self) -> None:
        """Test the default clock never goes backwards."""
        clock = FrameClock()
        clock.tick()
        assert clock.tick() >= 0.0

    def test_started_tracks_first_tick(self) -> None:
        """Test started flips on the first tick and clears on reset."""
        clock = FrameClock(time_source=lambda: 3.0)
        assert clock.started is False
        clock.tick()
        assert clock.started is True
        clock.reset()
        assert clock.started is False
