import numpy as np
import pytest

from veggie_catch.config import Settings
from veggie_catch.core import FallingItem, GameSession, ManualTickSource, build_catalog
from veggie_catch.rendering import RenderSink


class RecordingRenderSink(RenderSink):
    """記錄所有通知，供斷言使用"""

    def __init__(self):
        self.calls = []

    def _record(self, name, *args):
        self.calls.append((name, args))

    def create_item(self, item_id, kind, lane, y):
        self._record('create_item', item_id, kind, lane, y)

    def update_item(self, item_id, y):
        self._record('update_item', item_id, y)

    def remove_item(self, item_id):
        self._record('remove_item', item_id)

    def set_catcher(self, lane):
        self._record('set_catcher', lane)

    def set_reaction(self, text, polarity):
        self._record('set_reaction', text, polarity)

    def clear_reaction(self):
        self._record('clear_reaction')

    def set_display(self, score, time_remaining, level):
        self._record('set_display', score, time_remaining, level)

    def named(self, name):
        return [args for call, args in self.calls if call == name]


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def catalog(settings):
    return build_catalog(settings.catalog, settings.catalog_mode)


@pytest.fixture
def sink():
    return RecordingRenderSink()


@pytest.fixture
def ends():
    return []


@pytest.fixture
def session(settings, sink, ends):
    return GameSession(
        settings,
        rng=np.random.default_rng(7),
        tick_source=ManualTickSource(),
        countdown_source=ManualTickSource(),
        render_sink=sink,
        on_end=lambda score, level: ends.append((score, level)),
    )


def drop_into_band(session, kind, lane, speed=2.0):
    """放一個下一個 tick 就會進入接取區間的物品"""
    y = session.settings.catch_start_y - speed + 1.0
    item = FallingItem(kind=kind, lane=lane, y=y, speed=speed)
    session._items.append(item)
    return item


def catch(session, kind):
    """在籃子車道放入物品並推進一個 tick"""
    item = drop_into_band(session, kind, session.catcher_lane)
    session.tick()
    return item
