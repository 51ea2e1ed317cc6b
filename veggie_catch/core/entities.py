"""
遊戲狀態與實體
"""

import numbers
from dataclasses import dataclass
from enum import Enum

from ..config.constants import LANE_CENTER, LANES, BASE_SPAWN_CADENCE, SESSION_SECONDS
from .catalog import ItemKind


@dataclass
class FallingItem:
    """掉落中的物品，只有 y 會被物理步進修改"""
    kind: ItemKind
    lane: int
    y: float
    speed: float
    item_id: int = 0


@dataclass
class CatcherState:
    """籃子位置"""
    lane: int = LANE_CENTER

    def reset(self):
        self.lane = LANE_CENTER

    @staticmethod
    def is_valid_lane(lane) -> bool:
        # bool 也是 Integral，需排除
        return (isinstance(lane, numbers.Integral) and not isinstance(lane, bool)
                and lane in LANES)


class SessionPhase(Enum):
    IDLE = "idle"
    ACTIVE = "active"
    ENDED = "ended"


@dataclass
class SessionState:
    """單局遊戲狀態"""
    score: int = 0
    level: int = 1
    time_remaining: int = SESSION_SECONDS
    active: bool = False
    spawn_cadence: int = BASE_SPAWN_CADENCE
    tick_count: int = 0


@dataclass
class SessionStats:
    """單局統計"""
    spawned: int = 0
    caught: int = 0
    penalties_caught: int = 0
    missed: int = 0
    commands: int = 0

    def as_dict(self) -> dict:
        return {
            'spawned': self.spawned,
            'caught': self.caught,
            'penalties_caught': self.penalties_caught,
            'missed': self.missed,
            'commands': self.commands,
        }
