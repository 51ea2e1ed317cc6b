"""
效果管理系統
"""

from typing import List, Tuple, Dict
from dataclasses import dataclass
from ..config.constants import (
    CATCH_EFFECT_RADIUS_INIT, CATCH_EFFECT_RADIUS_GROW, CATCH_EFFECT_ALPHA_DECAY,
    THEME_COLORS,
)


@dataclass
class CatchEffect:
    """接取時擴散的圓圈"""
    x: float
    y: float
    color: Tuple[int, int, int]
    radius: float = CATCH_EFFECT_RADIUS_INIT
    alpha: float = 255
    active: bool = True

    def update(self, dt: float = 1.0):
        self.radius += CATCH_EFFECT_RADIUS_GROW * dt
        self.alpha -= CATCH_EFFECT_ALPHA_DECAY * dt

        if self.alpha <= 0:
            self.alpha = 0
            self.active = False

    def is_alive(self) -> bool:
        return self.active

    def render_data(self) -> Dict:
        """獲取渲染數據"""
        return {
            'x': self.x,
            'y': self.y,
            'radius': self.radius,
            'alpha': int(self.alpha),
            'color': self.color
        }


class EffectManager:
    """效果管理器"""

    def __init__(self):
        self.effects: List[CatchEffect] = []

    def add_catch(self, x: float, y: float, good: bool = True):
        """添加接取效果"""
        color = THEME_COLORS['reaction_good'] if good else THEME_COLORS['reaction_bad']
        self.effects.append(CatchEffect(x=x, y=y, color=color))

    def update(self, dt: float = 1.0):
        """更新並清理死亡的效果"""
        for effect in self.effects:
            effect.update(dt)
        self.effects = [e for e in self.effects if e.is_alive()]

    def get_render_data(self) -> List[Dict]:
        return [effect.render_data() for effect in self.effects]

    def clear(self):
        self.effects.clear()

    def active_count(self) -> int:
        return len(self.effects)
