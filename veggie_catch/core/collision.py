"""
碰撞檢測與物理步進
"""

from dataclasses import dataclass, field
from typing import List

from ..config.constants import CATCH_START_Y, CATCH_END_Y, OFFSCREEN_Y
from .entities import FallingItem


class CollisionDetector:
    """接取區間 + 車道比對的碰撞檢測器"""

    def __init__(self, catch_start_y: float = CATCH_START_Y,
                 catch_end_y: float = CATCH_END_Y,
                 offscreen_y: float = OFFSCREEN_Y):
        self.catch_start_y = catch_start_y
        self.catch_end_y = catch_end_y
        self.offscreen_y = offscreen_y

    def in_catch_band(self, y: float) -> bool:
        """是否位於籃子的接取區間 (開區間)"""
        return self.catch_start_y < y < self.catch_end_y

    def check_catch(self, item: FallingItem, catcher_lane: int) -> bool:
        """
        檢測物品是否被接住

        Args:
            item: 掉落物
            catcher_lane: 籃子所在車道

        Returns:
            是否發生碰撞
        """
        return self.in_catch_band(item.y) and item.lane == catcher_lane

    def is_off_screen(self, y: float) -> bool:
        """是否已掉出畫面"""
        return y > self.offscreen_y


@dataclass
class StepResult:
    """一次物理步進的結果"""
    remaining: List[FallingItem] = field(default_factory=list)
    caught: List[FallingItem] = field(default_factory=list)
    missed: List[FallingItem] = field(default_factory=list)


class PhysicsStep:
    """每 tick 推進所有掉落物並判定接取/漏接"""

    def __init__(self, detector: CollisionDetector = None):
        self.detector = detector or CollisionDetector()

    def advance(self, items: List[FallingItem], catcher_lane: int) -> StepResult:
        # 建立新列表而非就地刪除，避免迭代中移除造成跳過
        result = StepResult()
        for item in items:
            item.y += item.speed

            if self.detector.check_catch(item, catcher_lane):
                result.caught.append(item)
            elif self.detector.is_off_screen(item.y):
                result.missed.append(item)
            else:
                result.remaining.append(item)
        return result
