"""
接取反應訊息
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..config.constants import REACTION_GOOD_TEXT, REACTION_BAD_TEXT


class Polarity(Enum):
    GOOD = "good"
    BAD = "bad"


@dataclass(frozen=True)
class ReactionEvent:
    text: str
    polarity: Polarity

    @classmethod
    def for_catch(cls, is_penalty: bool) -> 'ReactionEvent':
        if is_penalty:
            return cls(REACTION_BAD_TEXT, Polarity.BAD)
        return cls(REACTION_GOOD_TEXT, Polarity.GOOD)


class ReactionDisplay:
    """
    以 tick 為單位的顯示期限

    新事件會覆蓋舊事件並重新計時，由遊戲 tick 檢查是否到期。
    """

    def __init__(self, duration_ticks: int = 30):
        self.duration_ticks = duration_ticks
        self.current: Optional[ReactionEvent] = None
        self.deadline: Optional[int] = None

    @property
    def showing(self) -> bool:
        return self.current is not None

    def show(self, event: ReactionEvent, now_tick: int):
        self.current = event
        self.deadline = now_tick + self.duration_ticks

    def expire(self, now_tick: int) -> bool:
        """到期則清除，回傳是否剛清除"""
        if self.current is None or now_tick < self.deadline:
            return False
        self.clear()
        return True

    def clear(self):
        self.current = None
        self.deadline = None
