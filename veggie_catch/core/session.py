"""
遊戲主狀態機
"""

import logging
import threading
from functools import partial
from typing import Callable, List, Optional, Tuple

import numpy as np

from ..config.settings import Settings
from ..config.constants import LANE_CENTER, LANE_NAMES
from .catalog import Catalog, build_catalog
from .clock import SessionClock
from .collision import CollisionDetector, PhysicsStep
from .difficulty import DifficultyCurve, apply_score
from .entities import (
    CatcherState, FallingItem, SessionPhase, SessionState, SessionStats,
)
from .reaction import ReactionDisplay, ReactionEvent
from .scheduling import ManualTickSource, TickSource
from .spawner import Spawner

logger = logging.getLogger(__name__)

EndCallback = Callable[[int, int], None]


class GameSession:
    """
    單局遊戲的擁有者

    狀態: IDLE -> ACTIVE -> ENDED -> IDLE
    - tick(): 生成 -> 物理 -> 難度 -> 通知
    - 倒數計時由獨立來源驅動，歸零時自動 stop()
    - 所有狀態變更由同一把可重入鎖序列化
    """

    def __init__(self, settings: Settings = None, *,
                 catalog: Catalog = None,
                 rng: np.random.Generator = None,
                 tick_source: TickSource = None,
                 countdown_source: TickSource = None,
                 render_sink=None,
                 on_end: EndCallback = None):
        self.settings = settings or Settings()
        self.catalog = catalog or build_catalog(self.settings.catalog,
                                                self.settings.catalog_mode)
        self.rng = rng if rng is not None else np.random.default_rng(self.settings.seed)

        self.spawner = Spawner(self.catalog, self.rng,
                               spawn_y=self.settings.spawn_y,
                               base_speed=self.settings.base_speed,
                               speed_per_level=self.settings.speed_per_level)
        self.physics = PhysicsStep(CollisionDetector(self.settings.catch_start_y,
                                                     self.settings.catch_end_y,
                                                     self.settings.offscreen_y))
        self.difficulty = DifficultyCurve.from_settings(self.settings)

        self.tick_source = tick_source or ManualTickSource()
        self.clock = SessionClock(countdown_source or ManualTickSource(),
                                  self.settings.session_seconds)
        self.reaction = ReactionDisplay(self.settings.reaction_ticks)
        self.render_sink = render_sink
        self._on_end = on_end

        self.phase = SessionPhase.IDLE
        self.state = SessionState(time_remaining=self.settings.session_seconds,
                                  spawn_cadence=self.settings.base_spawn_cadence)
        self.catcher = CatcherState()
        self.stats = SessionStats()
        self._items: List[FallingItem] = []
        self._lock = threading.RLock()
        # 每次 start() 遞增，舊一局遺留的回呼以此辨認
        self._run_id = 0

    # ------------------------------------------------------------------
    # 外部接口
    # ------------------------------------------------------------------
    def set_game_end_callback(self, callback: Optional[EndCallback]):
        self._on_end = callback

    def set_render_sink(self, sink):
        with self._lock:
            self.render_sink = sink

    @property
    def active(self) -> bool:
        return self.phase is SessionPhase.ACTIVE

    @property
    def catcher_lane(self) -> int:
        return self.catcher.lane

    @property
    def items(self) -> Tuple[FallingItem, ...]:
        with self._lock:
            return tuple(self._items)

    def start(self):
        """開始新的一局，已在進行中則忽略"""
        with self._lock:
            if self.active:
                return

            for item in self._items:
                self._notify('remove_item', item.item_id)
            self._items = []

            self.state = SessionState(
                score=0,
                level=1,
                time_remaining=self.settings.session_seconds,
                active=True,
                spawn_cadence=self.settings.base_spawn_cadence,
                tick_count=0,
            )
            self.stats = SessionStats()
            self.catcher.reset()
            if self.reaction.showing:
                self.reaction.clear()
                self._notify('clear_reaction')

            self.phase = SessionPhase.ACTIVE
            self._run_id += 1
            self._notify('set_catcher', LANE_CENTER)
            self._notify_display()

            self.clock.start(partial(self._on_countdown, self._run_id))
            self.tick_source.start(partial(self._on_tick, self._run_id))
            logger.info("遊戲開始 (%d 秒)", self.settings.session_seconds)

    def stop(self):
        """結束本局並通知最終分數，未進行中則忽略"""
        with self._lock:
            if not self.active:
                return
            self.phase = SessionPhase.ENDED
            self.state.active = False

            self.tick_source.stop()
            self.clock.stop()
            if self.reaction.showing:
                self.reaction.clear()
                self._notify('clear_reaction')

            final_score, final_level = self.state.score, self.state.level
            callback = self._on_end
            logger.info("遊戲結束: 分數 %d, 等級 %d", final_score, final_level)

        if callback is not None:
            callback(final_score, final_level)

        with self._lock:
            # callback 可能已重新 start()
            if self.phase is SessionPhase.ENDED:
                self.phase = SessionPhase.IDLE

    def on_input_command(self, lane: int):
        """移動籃子，同車道或未進行中時忽略"""
        if not CatcherState.is_valid_lane(lane):
            raise ValueError(f"無效的車道: {lane!r}")
        lane = int(lane)
        with self._lock:
            if not self.active or self.catcher.lane == lane:
                return
            self.catcher.lane = lane
            self.stats.commands += 1
            self._notify('set_catcher', lane)
            logger.debug("籃子移至 %s", LANE_NAMES[lane])

    def tick(self):
        """推進一個 tick"""
        with self._lock:
            if not self.active:
                return
            state = self.state
            state.tick_count += 1

            # 1. 生成
            if state.tick_count % state.spawn_cadence == 0:
                item = self.spawner.spawn(state.level)
                self._items.append(item)
                self.stats.spawned += 1
                self._notify('create_item', item.item_id, item.kind, item.lane, item.y)

            # 2. 物理與碰撞
            result = self.physics.advance(self._items, self.catcher.lane)
            self._items = result.remaining
            for item in result.remaining:
                self._notify('update_item', item.item_id, item.y)
            for item in result.caught:
                self._handle_catch(item)
            for item in result.missed:
                self.stats.missed += 1
                self._notify('remove_item', item.item_id)
                logger.debug("漏接 %s #%d", item.kind.name, item.item_id)

            # 3. 難度
            self._adjust_difficulty()

            # 4. 反應訊息到期
            if self.reaction.expire(state.tick_count):
                self._notify('clear_reaction')

    # ------------------------------------------------------------------
    # 內部
    # ------------------------------------------------------------------
    def _handle_catch(self, item: FallingItem):
        self.state.score = apply_score(self.state.score, item.kind)
        self.stats.caught += 1
        if item.kind.is_penalty:
            self.stats.penalties_caught += 1

        event = ReactionEvent.for_catch(item.kind.is_penalty)
        self.reaction.show(event, self.state.tick_count)

        self._notify('remove_item', item.item_id)
        self._notify('set_reaction', event.text, event.polarity)
        self._notify_display()
        logger.debug("接住 %s (%+d) -> 分數 %d",
                     item.kind.name, item.kind.score_delta, self.state.score)

    def _adjust_difficulty(self):
        new_level = self.difficulty.level_for(self.state.score)
        if new_level == self.state.level:
            return
        logger.info("等級 %d -> %d", self.state.level, new_level)
        self.state.level = new_level
        self.state.spawn_cadence = self.difficulty.cadence_for(new_level)
        self._notify_display()

    def _on_tick(self, run_id: int):
        with self._lock:
            if run_id == self._run_id:
                self.tick()

    def _on_countdown(self, run_id: int):
        with self._lock:
            if not self.active or run_id != self._run_id:
                return
            expired = self.clock.tick()
            self.state.time_remaining = self.clock.time_remaining
            self._notify_display()
        if expired:
            self.stop()

    def _notify_display(self):
        self._notify('set_display', self.state.score,
                     self.state.time_remaining, self.state.level)

    def _notify(self, method: str, *args):
        if self.render_sink is None:
            return
        getattr(self.render_sink, method)(*args)
