import numpy as np
import pytest

from noisewave.core.animation import AnimationDriver


class FakeRenderer:
    def __init__(self):
        self.times = []

    def __call__(self, surface, field, time):
        self.times.append(time)


def test_time_starts_at_zero_and_increments_per_frame(surface):
    renderer = FakeRenderer()
    driver = AnimationDriver(surface, np.zeros((2, 2)), renderer=renderer)
    assert driver.time == 0
    driver.run_frames(3)
    assert renderer.times == [0, 1, 2]
    assert driver.time == 3


def test_on_frame_sees_updated_time(surface):
    seen = []
    driver = AnimationDriver(surface, np.zeros((1, 1)), renderer=FakeRenderer(), on_frame=seen.append)
    driver.tick()
    driver.tick()
    assert seen == [1, 2]


def test_default_renderer_draws_field(surface):
    driver = AnimationDriver(surface, np.zeros((3, 2)))
    driver.tick()
    assert len(surface.paths) == 3


def test_not_running_until_started(surface):
    driver = AnimationDriver(surface, np.zeros((1, 1)), renderer=FakeRenderer())
    assert not driver.is_running
    driver.stop()
    assert not driver.is_running


def test_start_and_stop(qapp, surface):
    driver = AnimationDriver(surface, np.zeros((1, 1)), renderer=FakeRenderer())
    driver.start()
    assert driver.is_running
    assert driver._timer.isActive()
    driver.start()
    driver.stop()
    assert not driver.is_running
    assert not driver._timer.isActive()


def test_tick_rearms_timer_only_while_running(qapp, surface):
    driver = AnimationDriver(surface, np.zeros((1, 1)), renderer=FakeRenderer(), interval_ms=1000)
    driver.start()
    driver._timer.stop()
    driver.tick()
    assert driver._timer.isActive()
    assert driver._timer.interval() == 1000
    driver.stop()
    driver.tick()
    assert not driver._timer.isActive()
    assert driver.time == 2


def test_frames_run_on_event_loop(qapp, surface):
    from PySide6.QtCore import QEventLoop, QTimer

    renderer = FakeRenderer()
    loop = QEventLoop()

    def on_frame(t):
        if t >= 3:
            driver.stop()
            loop.quit()

    driver = AnimationDriver(surface, np.zeros((1, 1)), renderer=renderer, on_frame=on_frame, interval_ms=1)
    QTimer.singleShot(5000, loop.quit)
    driver.start()
    loop.exec()
    assert renderer.times == [0, 1, 2]
    assert not driver.is_running


def test_failing_frame_stops_the_driver(qapp, surface):
    def broken(surface, field, time):
        raise RuntimeError("boom")

    driver = AnimationDriver(surface, np.zeros((1, 1)), renderer=broken)
    driver.start()
    with pytest.raises(RuntimeError):
        driver.tick()
    assert not driver.is_running
    assert not driver._timer.isActive()
    assert driver.time == 0

    driver.renderer = FakeRenderer()
    driver.start()
    assert driver.is_running
    assert driver._timer.isActive()
    driver.stop()


def test_failing_on_frame_stops_the_driver(qapp, surface):
    def on_frame(t):
        raise ValueError("bad frame")

    driver = AnimationDriver(surface, np.zeros((1, 1)), renderer=FakeRenderer(), on_frame=on_frame)
    driver.start()
    with pytest.raises(ValueError):
        driver.tick()
    assert not driver.is_running
    assert not driver._timer.isActive()
