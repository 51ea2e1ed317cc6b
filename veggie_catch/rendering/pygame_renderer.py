"""
Pygame渲染器實現
"""

from typing import Dict, Optional, Tuple

import pygame

from ..config.constants import *
from ..core.catalog import ItemKind
from ..core.reaction import Polarity
from .effects import EffectManager
from .renderer import RenderSink


class PygameRenderer(RenderSink):
    """Pygame渲染器，同時是遊戲核心的渲染接收端"""

    def __init__(self, enable_effects: bool = True):
        self.screen = None
        self.clock = None
        self.fonts = {}
        self.width = FIELD_WIDTH
        self.height = FIELD_HEIGHT + HUD_HEIGHT
        self.background = None
        self.effect_manager = EffectManager() if enable_effects else None

        # 接收端狀態
        self.items: Dict[int, Tuple[ItemKind, int, float]] = {}
        self.catcher_lane = LANE_CENTER
        self.reaction: Optional[Tuple[str, Polarity]] = None
        self.display = (0, SESSION_SECONDS, 1)
        self.banner: Optional[str] = None

    def init(self, title: str = ""):
        """初始化Pygame"""
        pygame.init()
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()
        self._init_fonts()
        self.background = self._create_background()

    def _init_fonts(self):
        """初始化字體"""
        try:
            self.fonts['small'] = pygame.font.SysFont(FONT_FAMILY_PRIMARY, FONT_SIZE_SMALL)
            self.fonts['medium'] = pygame.font.SysFont(FONT_FAMILY_PRIMARY, FONT_SIZE_MEDIUM, bold=True)
            self.fonts['large'] = pygame.font.SysFont(FONT_FAMILY_PRIMARY, FONT_SIZE_LARGE, bold=True)
        except (pygame.error, OSError):
            self.fonts['small'] = pygame.font.Font(None, FONT_SIZE_SMALL)
            self.fonts['medium'] = pygame.font.Font(None, FONT_SIZE_MEDIUM)
            self.fonts['large'] = pygame.font.Font(None, FONT_SIZE_LARGE)

    def _create_background(self) -> pygame.Surface:
        """車道與接取區背景"""
        surface = pygame.Surface((self.width, self.height))
        surface.fill(THEME_COLORS['background'])

        band = pygame.Rect(0, HUD_HEIGHT + int(CATCH_START_Y),
                           self.width, int(CATCH_END_Y - CATCH_START_Y))
        pygame.draw.rect(surface, THEME_COLORS['catch_band'], band)

        lane_width = self.width // len(LANES)
        for i in range(1, len(LANES)):
            x = i * lane_width
            pygame.draw.line(surface, THEME_COLORS['lane_divider'],
                             (x, HUD_HEIGHT), (x, self.height), 2)
        return surface

    # ========== RenderSink ==========
    def create_item(self, item_id, kind, lane, y):
        self.items[item_id] = (kind, lane, y)

    def update_item(self, item_id, y):
        if item_id in self.items:
            kind, lane, _ = self.items[item_id]
            self.items[item_id] = (kind, lane, y)

    def remove_item(self, item_id):
        self.items.pop(item_id, None)

    def set_catcher(self, lane):
        self.catcher_lane = lane

    def set_reaction(self, text, polarity):
        self.reaction = (text, polarity)
        if self.effect_manager is not None:
            self.effect_manager.add_catch(LANE_ITEM_X[self.catcher_lane],
                                          HUD_HEIGHT + CATCHER_Y,
                                          good=polarity is Polarity.GOOD)

    def clear_reaction(self):
        self.reaction = None

    def set_display(self, score, time_remaining, level):
        self.display = (score, time_remaining, level)

    # ========== 繪製 ==========
    def draw_frame(self):
        """繪製一幀"""
        self.screen.blit(self.background, (0, 0))

        for kind, lane, y in list(self.items.values()):
            self._draw_item(kind, lane, y)
        self._draw_catcher()

        if self.effect_manager is not None:
            self.effect_manager.update()
            for data in self.effect_manager.get_render_data():
                self._draw_effect(data)

        self._draw_hud()
        # 倒數執行緒可能同時清除反應訊息，只讀一次
        reaction = self.reaction
        if reaction:
            text, polarity = reaction
            color = (THEME_COLORS['reaction_good'] if polarity is Polarity.GOOD
                     else THEME_COLORS['reaction_bad'])
            self.draw_text(text, self.width // 2, HUD_HEIGHT + CATCHER_Y - 70,
                           size='large', color=color, center=True)
        if self.banner:
            self.draw_text(self.banner, self.width // 2, self.height // 2,
                           size='medium', color=THEME_COLORS['text_dark'], center=True)

    def _draw_item(self, kind: ItemKind, lane: int, y: float):
        x = LANE_ITEM_X[lane]
        screen_y = HUD_HEIGHT + int(y)
        if screen_y < HUD_HEIGHT - ITEM_RADIUS:
            return
        pygame.draw.circle(self.screen, kind.color, (x, screen_y), ITEM_RADIUS)
        if kind.is_penalty:
            pygame.draw.circle(self.screen, (40, 40, 40), (x, screen_y), ITEM_RADIUS, 3)
        self.draw_text(kind.icon, x, screen_y, size='small',
                       color=THEME_COLORS['text_primary'], center=True)

    def _draw_catcher(self):
        x = LANE_ITEM_X[self.catcher_lane] - CATCHER_WIDTH // 2
        rect = pygame.Rect(x, HUD_HEIGHT + CATCHER_Y, CATCHER_WIDTH, CATCHER_HEIGHT)
        pygame.draw.rect(self.screen, THEME_COLORS['catcher'], rect, border_radius=8)

    def _draw_effect(self, data: Dict):
        if data['alpha'] <= 0:
            return
        radius = int(data['radius'])
        surface = pygame.Surface((radius * 2, radius * 2), pygame.SRCALPHA)
        pygame.draw.circle(surface, (*data['color'], data['alpha']), (radius, radius), radius, 3)
        self.screen.blit(surface, (int(data['x']) - radius, int(data['y']) - radius))

    def _draw_hud(self):
        panel = pygame.Rect(0, 0, self.width, HUD_HEIGHT)
        pygame.draw.rect(self.screen, THEME_COLORS['hud_panel'], panel)
        score, time_remaining, level = self.display
        self.draw_text(f"Score {score}", 10, 8, size='medium')
        self.draw_text(f"Time {time_remaining}", 10, 34, size='small')
        self.draw_text(f"Lv {level}", self.width - 70, 8, size='medium')

    def draw_text(self, text: str, x: int, y: int,
                  size: str = 'medium', color: Tuple[int, int, int] = None,
                  center: bool = False):
        """繪製文字"""
        if color is None:
            color = THEME_COLORS['text_primary']

        font = self.fonts.get(size, self.fonts['medium'])
        surface = font.render(text, True, color)

        if center:
            rect = surface.get_rect(center=(x, y))
            self.screen.blit(surface, rect)
        else:
            self.screen.blit(surface, (x, y))

    def present(self):
        """呈現畫面"""
        pygame.display.flip()

    def handle_events(self) -> Dict:
        """處理事件"""
        events = {
            'quit': False,
            'space': False,
            'keys': []
        }

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                events['quit'] = True
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    events['quit'] = True
                elif event.key == pygame.K_SPACE:
                    events['space'] = True
                events['keys'].append(event.key)

        return events

    def tick(self, fps: float):
        """控制幀率"""
        if self.clock:
            self.clock.tick(fps)

    def cleanup(self):
        """清理資源"""
        pygame.quit()
