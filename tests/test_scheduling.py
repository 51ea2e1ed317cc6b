import threading
import time

from veggie_catch.core import IntervalTickSource, ManualTickSource


def test_manual_source_fires_only_while_running():
    source = ManualTickSource()
    calls = []
    assert source.fire() == 0

    source.start(lambda: calls.append(1))
    assert source.fire(3) == 3
    source.stop()
    assert source.fire(3) == 0
    assert len(calls) == 3


def test_manual_source_stop_inside_callback():
    source = ManualTickSource()
    source.start(source.stop)
    assert source.fire(5) == 1
    assert not source.running


def test_interval_source_calls_and_stops():
    source = IntervalTickSource(0.01)
    count = []
    reached = threading.Event()

    def callback():
        count.append(1)
        if len(count) >= 3:
            reached.set()

    source.start(callback)
    assert reached.wait(timeout=5)
    source.stop()
    assert not source.running

    time.sleep(0.05)
    settled = len(count)
    time.sleep(0.05)
    assert len(count) == settled


def test_interval_source_can_stop_from_its_own_thread():
    source = IntervalTickSource(0.01)
    done = threading.Event()

    def callback():
        source.stop()
        done.set()

    source.start(callback)
    assert done.wait(timeout=5)
    assert not source.running


def test_restart_replaces_previous_thread():
    source = IntervalTickSource(0.01)
    first, second = [], []
    source.start(lambda: first.append(1))
    source.start(lambda: second.append(1))
    time.sleep(0.1)
    source.stop()
    frozen = len(first)
    time.sleep(0.05)
    assert len(first) == frozen
    assert second
