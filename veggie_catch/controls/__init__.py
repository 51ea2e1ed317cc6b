"""輸入來源模組"""

from .agent import (
    Controller, StayBot, RandomBot, LaneFollowerBot, KeyboardController,
    BOT_REGISTRY, create_bot,
)
from .stabilizer import (
    POSE_LANES, pose_to_lane, PredictionStabilizer, StabilizedPrediction, PoseInputAdapter,
)

__all__ = [
    'Controller', 'StayBot', 'RandomBot', 'LaneFollowerBot', 'KeyboardController',
    'BOT_REGISTRY', 'create_bot',
    'POSE_LANES', 'pose_to_lane', 'PredictionStabilizer', 'StabilizedPrediction',
    'PoseInputAdapter',
]
