from veggie_catch.core import ManualTickSource, SessionClock


def test_start_resets_and_runs():
    source = ManualTickSource()
    clock = SessionClock(source, duration=3)
    clock.time_remaining = 0
    clock.start(lambda: None)
    assert clock.time_remaining == 3
    assert clock.running
    assert source.running


def test_counts_down_and_stops_itself():
    source = ManualTickSource()
    clock = SessionClock(source, duration=3)
    expirations = []
    clock.start(lambda: expirations.append(clock.tick()))

    source.fire(2)
    assert clock.time_remaining == 1
    assert expirations == [False, False]

    source.fire()
    assert clock.time_remaining == 0
    assert expirations == [False, False, True]
    assert not clock.running
    assert not source.running

    # 已停止
    assert source.fire(5) == 0
    assert clock.tick() is False
    assert clock.time_remaining == 0


def test_stop_cancels_source():
    source = ManualTickSource()
    clock = SessionClock(source, duration=15)
    clock.start(clock.tick)
    clock.stop()
    assert not clock.running
    assert not source.running
    clock.stop()
