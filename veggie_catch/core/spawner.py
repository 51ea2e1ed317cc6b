"""
物品生成器
"""

import itertools
import logging

import numpy as np

from ..config.constants import SPAWN_Y, BASE_SPEED, SPEED_PER_LEVEL, LANES
from .catalog import Catalog
from .difficulty import item_speed
from .entities import FallingItem

logger = logging.getLogger(__name__)


class Spawner:
    """依物品表權重與均勻車道生成掉落物"""

    def __init__(self, catalog: Catalog, rng: np.random.Generator,
                 spawn_y: float = SPAWN_Y,
                 base_speed: float = BASE_SPEED,
                 speed_per_level: float = SPEED_PER_LEVEL):
        self.catalog = catalog
        self.rng = rng
        self.spawn_y = spawn_y
        self.base_speed = base_speed
        self.speed_per_level = speed_per_level
        self._ids = itertools.count(1)

    def spawn(self, level: int) -> FallingItem:
        """
        生成一個掉落物

        Args:
            level: 生成當下的等級，速度在此時固定

        Returns:
            新的 FallingItem
        """
        kind = self.catalog.draw(self.rng)
        lane = int(self.rng.integers(0, len(LANES)))
        speed = item_speed(level, self.base_speed, self.speed_per_level)
        item = FallingItem(kind=kind, lane=lane, y=float(self.spawn_y), speed=speed,
                           item_id=next(self._ids))
        logger.debug("生成 %s #%d 於車道 %d (速度 %.1f)", kind.name, item.item_id, lane, speed)
        return item
