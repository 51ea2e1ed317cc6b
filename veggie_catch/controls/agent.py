"""
輸入來源: 鍵盤與自動代理
"""

from typing import Dict, Iterable, Optional, Type

import numpy as np

from ..config.constants import LANES, LANE_LEFT, LANE_CENTER, LANE_RIGHT


class Controller:
    """
    輸入來源基類

    每個 tick 被詢問一次，回傳想要的車道或 None (不動)。
    """

    name = "Controller"

    def reset_episode(self):
        """重置回合狀態"""
        pass

    def select_lane(self, session) -> Optional[int]:
        raise NotImplementedError

    def drive(self, session):
        """詢問並把結果送進遊戲"""
        lane = self.select_lane(session)
        if lane is not None:
            session.on_input_command(lane)


class StayBot(Controller):
    """永遠待在中央"""

    name = "StayBot"

    def select_lane(self, session) -> Optional[int]:
        return None


class RandomBot(Controller):
    """每隔固定 tick 隨機換車道"""

    name = "RandomBot"

    def __init__(self, seed: Optional[int] = None, every: int = 30):
        self.seed = seed
        self.every = every
        self.rng = np.random.default_rng(seed)
        self._calls = 0

    def reset_episode(self):
        self._calls = 0

    def select_lane(self, session) -> Optional[int]:
        self._calls += 1
        if self._calls % self.every:
            return None
        return int(self.rng.integers(0, len(LANES)))


class LaneFollowerBot(Controller):
    """追最接近籃子的好物品，並閃避同車道較近的懲罰物"""

    name = "LaneFollowerBot"

    def select_lane(self, session) -> Optional[int]:
        catch_end = session.physics.detector.catch_end_y
        pending = [item for item in session.items if item.y < catch_end]
        if not pending:
            return None

        goods = [item for item in pending if not item.kind.is_penalty]
        target = max(goods, key=lambda item: item.y).lane if goods else session.catcher_lane

        if self._threatened(pending, target):
            safe = [lane for lane in self._preference(session.catcher_lane)
                    if not self._threatened(pending, lane)]
            if safe:
                target = safe[0]
        return target

    @staticmethod
    def _threatened(pending, lane: int) -> bool:
        """該車道最近的物品是否為懲罰物"""
        in_lane = [item for item in pending if item.lane == lane]
        if not in_lane:
            return False
        return max(in_lane, key=lambda item: item.y).kind.is_penalty

    @staticmethod
    def _preference(current: int) -> Iterable[int]:
        # 先留在原地，再考慮距離較近的車道
        return sorted(LANES, key=lambda lane: (abs(lane - current), lane))


class KeyboardController(Controller):
    """鍵盤控制: 左右鍵移動一格，1/2/3 或 A/S/D 直接選車道"""

    name = "Keyboard"

    def __init__(self):
        import pygame

        self.step_keys = {pygame.K_LEFT: -1, pygame.K_RIGHT: 1}
        self.direct_keys = {
            pygame.K_1: LANE_LEFT, pygame.K_2: LANE_CENTER, pygame.K_3: LANE_RIGHT,
            pygame.K_a: LANE_LEFT, pygame.K_s: LANE_CENTER, pygame.K_d: LANE_RIGHT,
        }
        self._pending: Optional[int] = None

    def feed_keys(self, keys, current_lane: int):
        """處理本幀按鍵，最後一個有效按鍵為準"""
        lane = current_lane if self._pending is None else self._pending
        for key in keys:
            if key in self.direct_keys:
                lane = self.direct_keys[key]
            elif key in self.step_keys:
                lane = min(max(lane + self.step_keys[key], LANE_LEFT), LANE_RIGHT)
        if lane != current_lane:
            self._pending = lane

    def select_lane(self, session) -> Optional[int]:
        lane, self._pending = self._pending, None
        return lane


BOT_REGISTRY: Dict[str, Type[Controller]] = {
    StayBot.name: StayBot,
    RandomBot.name: RandomBot,
    LaneFollowerBot.name: LaneFollowerBot,
}


def create_bot(name: str, seed: Optional[int] = None) -> Controller:
    """依名稱建立代理"""
    if name not in BOT_REGISTRY:
        raise ValueError(f"未知的代理類型: {name}")
    if name == RandomBot.name:
        return RandomBot(seed=seed)
    return BOT_REGISTRY[name]()
