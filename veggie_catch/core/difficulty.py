"""
分數與難度曲線
"""

from ..config.constants import (
    BASE_SPEED, SPEED_PER_LEVEL, POINTS_PER_LEVEL,
    BASE_SPAWN_CADENCE, CADENCE_STEP, MIN_SPAWN_CADENCE,
)
from .catalog import ItemKind


def apply_score(score: int, kind: ItemKind) -> int:
    """加上物品分數，最低為 0"""
    return max(0, score + kind.score_delta)


def derive_level(score: int, points_per_level: int = POINTS_PER_LEVEL) -> int:
    """等級 = floor(score / points_per_level) + 1，分數下降時等級也會下降"""
    return score // points_per_level + 1


def derive_spawn_cadence(level: int,
                         base: int = BASE_SPAWN_CADENCE,
                         step: int = CADENCE_STEP,
                         floor: int = MIN_SPAWN_CADENCE) -> int:
    """生成間隔 (tick)，隨等級遞減，最低 floor"""
    return max(floor, base - level * step)


def item_speed(level: int, base_speed: float = BASE_SPEED,
               speed_per_level: float = SPEED_PER_LEVEL) -> float:
    """物品每 tick 的下落距離"""
    return base_speed + level * speed_per_level


class DifficultyCurve:
    """綁定一組參數的難度曲線"""

    def __init__(self, points_per_level: int = POINTS_PER_LEVEL,
                 base_cadence: int = BASE_SPAWN_CADENCE,
                 cadence_step: int = CADENCE_STEP,
                 min_cadence: int = MIN_SPAWN_CADENCE):
        self.points_per_level = points_per_level
        self.base_cadence = base_cadence
        self.cadence_step = cadence_step
        self.min_cadence = min_cadence

    @classmethod
    def from_settings(cls, settings) -> 'DifficultyCurve':
        return cls(settings.points_per_level, settings.base_spawn_cadence,
                   settings.cadence_step, settings.min_spawn_cadence)

    def level_for(self, score: int) -> int:
        return derive_level(score, self.points_per_level)

    def cadence_for(self, level: int) -> int:
        return derive_spawn_cadence(level, self.base_cadence,
                                    self.cadence_step, self.min_cadence)
