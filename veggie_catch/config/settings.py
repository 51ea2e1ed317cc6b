"""
配置管理系統
"""

import copy
import json
import logging
from pathlib import Path
from typing import Dict, Any, List, Optional

import yaml

from . import constants

logger = logging.getLogger(__name__)


class Settings:
    """配置管理類"""

    def __init__(self):
        # 時間
        self.session_seconds = constants.SESSION_SECONDS
        self.tick_rate = constants.TICK_RATE
        self.reaction_duration = constants.REACTION_DURATION

        # 速度與難度
        self.base_speed = constants.BASE_SPEED
        self.speed_per_level = constants.SPEED_PER_LEVEL
        self.points_per_level = constants.POINTS_PER_LEVEL
        self.base_spawn_cadence = constants.BASE_SPAWN_CADENCE
        self.cadence_step = constants.CADENCE_STEP
        self.min_spawn_cadence = constants.MIN_SPAWN_CADENCE

        # 場地幾何
        self.spawn_y = constants.SPAWN_Y
        self.catch_start_y = constants.CATCH_START_Y
        self.catch_end_y = constants.CATCH_END_Y
        self.offscreen_y = constants.OFFSCREEN_Y

        # 物品表
        self.catalog_mode = "breakpoints"  # "breakpoints" 或 "weights"
        self.catalog: List[Dict[str, Any]] = copy.deepcopy(constants.DEFAULT_CATALOG)
        self.seed: Optional[int] = None

        # 視窗
        self.enable_effects = True
        self.window_title = "Veggie Catch"

        # 模擬
        self.sim_episodes = 50
        self.sim_bots = ["LaneFollowerBot", "RandomBot", "StayBot"]
        self.sim_output_dir = "results_sim"
        self.generate_plots = True

    @property
    def reaction_ticks(self) -> int:
        """反應訊息顯示的 tick 數"""
        return max(1, int(round(self.reaction_duration * self.tick_rate)))

    def load_from_file(self, config_path: str):
        """從文件載入配置"""
        path = Path(config_path)

        if path.suffix == '.yaml' or path.suffix == '.yml':
            with open(path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f) or {}
        elif path.suffix == '.json':
            with open(path, 'r', encoding='utf-8') as f:
                config = json.load(f)
        else:
            raise ValueError(f"不支援的配置文件格式: {path.suffix}")

        # 更新配置
        for key, value in config.items():
            if hasattr(self, key) and key != 'reaction_ticks':
                setattr(self, key, value)
            else:
                logger.warning("忽略未知的配置項: %s", key)

    def to_dict(self) -> Dict[str, Any]:
        """轉為可序列化的字典"""
        return {
            'session_seconds': self.session_seconds,
            'tick_rate': self.tick_rate,
            'reaction_duration': self.reaction_duration,
            'base_speed': self.base_speed,
            'speed_per_level': self.speed_per_level,
            'points_per_level': self.points_per_level,
            'base_spawn_cadence': self.base_spawn_cadence,
            'cadence_step': self.cadence_step,
            'min_spawn_cadence': self.min_spawn_cadence,
            'spawn_y': self.spawn_y,
            'catch_start_y': self.catch_start_y,
            'catch_end_y': self.catch_end_y,
            'offscreen_y': self.offscreen_y,
            'catalog_mode': self.catalog_mode,
            'catalog': [
                {**kind, 'color': list(kind['color'])} if 'color' in kind else dict(kind)
                for kind in self.catalog
            ],
            'seed': self.seed,
            'enable_effects': self.enable_effects,
            'window_title': self.window_title,
            'sim_episodes': self.sim_episodes,
            'sim_bots': list(self.sim_bots),
            'sim_output_dir': self.sim_output_dir,
            'generate_plots': self.generate_plots,
        }

    def save_to_file(self, config_path: str):
        """保存配置到文件"""
        config = self.to_dict()
        path = Path(config_path)

        if path.suffix == '.yaml' or path.suffix == '.yml':
            with open(path, 'w', encoding='utf-8') as f:
                yaml.dump(config, f, default_flow_style=False, allow_unicode=True,
                          sort_keys=False)
        elif path.suffix == '.json':
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(config, f, indent=2, ensure_ascii=False)
        else:
            raise ValueError(f"不支援的配置文件格式: {path.suffix}")

    def validate(self) -> bool:
        """驗證配置的有效性，無法運行的配置直接拋出 ValueError"""
        if self.session_seconds <= 0:
            raise ValueError(f"session_seconds 必須為正數: {self.session_seconds}")
        if self.tick_rate <= 0:
            raise ValueError(f"tick_rate 必須為正數: {self.tick_rate}")
        if self.min_spawn_cadence < 1:
            raise ValueError(f"min_spawn_cadence 至少為 1: {self.min_spawn_cadence}")
        if self.base_spawn_cadence < self.min_spawn_cadence:
            raise ValueError("base_spawn_cadence 不可小於 min_spawn_cadence")
        if self.points_per_level <= 0:
            raise ValueError(f"points_per_level 必須為正數: {self.points_per_level}")
        if not self.catch_start_y < self.catch_end_y:
            raise ValueError("接取區間上下界顛倒")
        if self.offscreen_y < self.catch_end_y:
            raise ValueError("offscreen_y 必須位於接取區間之後")
        if self.catalog_mode not in ("breakpoints", "weights"):
            raise ValueError(f"未知的 catalog_mode: {self.catalog_mode}")
        if not self.catalog:
            raise ValueError("物品表不可為空")
        for kind in self.catalog:
            if kind.get('weight', 0) <= 0:
                raise ValueError(f"物品權重必須為正數: {kind.get('name')}")

        if self.catalog_mode == "breakpoints" and len(self.catalog) != len(constants.REFERENCE_BREAKPOINTS):
            logger.warning("物品數量與參考斷點不符，改用權重比例抽樣")
            self.catalog_mode = "weights"

        if self.base_speed <= 0:
            logger.warning("base_speed=%s 非正數，物品可能無法落下", self.base_speed)

        return True


def load_settings(config_path: str = None) -> Settings:
    """載入配置的便捷函數"""
    settings = Settings()

    if config_path and Path(config_path).exists():
        settings.load_from_file(config_path)
    elif config_path:
        logger.warning("配置文件不存在，使用預設值: %s", config_path)

    settings.validate()
    return settings
