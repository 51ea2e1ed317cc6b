"""
遊戲常數定義
"""

# ========== 車道 ==========
LANE_LEFT = 0
LANE_CENTER = 1
LANE_RIGHT = 2
LANES = (LANE_LEFT, LANE_CENTER, LANE_RIGHT)
LANE_NAMES = {LANE_LEFT: "left", LANE_CENTER: "center", LANE_RIGHT: "right"}

# ========== 場地幾何 (每 tick 位移單位) ==========
SPAWN_Y = -50.0
CATCH_START_Y = 420.0
CATCH_END_Y = 480.0
OFFSCREEN_Y = 500.0

# ========== 速度與難度 ==========
BASE_SPEED = 1.0
SPEED_PER_LEVEL = 0.5
POINTS_PER_LEVEL = 1000
BASE_SPAWN_CADENCE = 60
CADENCE_STEP = 5
MIN_SPAWN_CADENCE = 20

# ========== 時間 ==========
SESSION_SECONDS = 15
TICK_RATE = 60
REACTION_DURATION = 0.5  # 秒

# ========== 物品表 ==========
# 參考分佈的累積斷點 (對應權重 4:3:2:2，但數值不完全相同)
REFERENCE_BREAKPOINTS = (0.40, 0.70, 0.85, 1.00)

DEFAULT_CATALOG = [
    {"name": "carrot", "icon": "C", "score_delta": 100, "is_penalty": False,
     "weight": 4, "color": (255, 140, 0)},
    {"name": "cucumber", "icon": "U", "score_delta": 200, "is_penalty": False,
     "weight": 3, "color": (80, 180, 60)},
    {"name": "tomato", "icon": "T", "score_delta": 300, "is_penalty": False,
     "weight": 2, "color": (220, 40, 40)},
    {"name": "pancake", "icon": "!", "score_delta": -500, "is_penalty": True,
     "weight": 2, "color": (200, 160, 90)},
]

# ========== 反應訊息 ==========
REACTION_GOOD_TEXT = "Yum~"
REACTION_BAD_TEXT = "Yikes!"

# ========== 畫面 ==========
FIELD_WIDTH = 300
FIELD_HEIGHT = 500
HUD_HEIGHT = 60
LANE_ITEM_X = (50, 150, 250)      # 物品中心 x
CATCHER_Y = 450
CATCHER_WIDTH = 80
CATCHER_HEIGHT = 30
ITEM_RADIUS = 18

FONT_FAMILY_PRIMARY = "Arial"
FONT_SIZE_SMALL = 16
FONT_SIZE_MEDIUM = 22
FONT_SIZE_LARGE = 36

THEME_COLORS = {
    'background': (250, 245, 230),
    'lane_divider': (225, 215, 190),
    'catch_band': (240, 230, 200),
    'catcher': (150, 100, 50),
    'hud_panel': (40, 40, 40),
    'text_primary': (255, 255, 255),
    'text_dark': (40, 40, 40),
    'reaction_good': (40, 160, 60),
    'reaction_bad': (210, 50, 50),
}

# ========== 效果 ==========
CATCH_EFFECT_RADIUS_INIT = 10
CATCH_EFFECT_RADIUS_GROW = 2.5
CATCH_EFFECT_ALPHA_DECAY = 12
