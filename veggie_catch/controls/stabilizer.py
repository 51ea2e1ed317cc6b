"""
姿勢分類結果穩定化與車道對應
"""

from collections import deque
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence, Tuple

import numpy as np

from ..config.constants import LANE_LEFT, LANE_CENTER, LANE_RIGHT

POSE_LANES: Dict[str, int] = {
    "left": LANE_LEFT,
    "center": LANE_CENTER,
    "front": LANE_CENTER,
    "right": LANE_RIGHT,
    # 韓文版分類模型的標籤
    "왼쪽": LANE_LEFT,
    "정면": LANE_CENTER,
    "오른쪽": LANE_RIGHT,
}


def pose_to_lane(label: Optional[str]) -> Optional[int]:
    """姿勢標籤轉車道，未知標籤回傳 None"""
    if not label:
        return None
    return POSE_LANES.get(label.strip().lower(), POSE_LANES.get(label.strip()))


@dataclass
class StabilizedPrediction:
    class_name: Optional[str]
    probability: float


class PredictionStabilizer:
    """
    對連續幾幀的分類機率取平均

    平均後最高的類別機率 >= threshold 才更新輸出，
    否則維持上一個穩定結果。
    """

    def __init__(self, threshold: float = 0.7, smoothing_frames: int = 3):
        if not 0.0 < threshold <= 1.0:
            raise ValueError(f"threshold 必須介於 (0, 1]: {threshold}")
        if smoothing_frames < 1:
            raise ValueError(f"smoothing_frames 至少為 1: {smoothing_frames}")
        self.threshold = threshold
        self.smoothing_frames = smoothing_frames
        self.history = deque(maxlen=smoothing_frames)
        self.class_names: Optional[Tuple[str, ...]] = None
        self.current = StabilizedPrediction(None, 0.0)

    def stabilize(self, predictions: Sequence[Tuple[str, float]]) -> StabilizedPrediction:
        """
        Args:
            predictions: [(類別名稱, 機率), ...]，每幀順序需一致

        Returns:
            穩定化後的預測
        """
        names = tuple(name for name, _ in predictions)
        if names != self.class_names:
            # 類別集合改變，舊的歷史不再可比
            self.history.clear()
            self.class_names = names
        self.history.append(np.array([prob for _, prob in predictions], dtype=float))

        if len(self.history) < self.smoothing_frames:
            return self.current

        mean = np.mean(np.stack(self.history), axis=0)
        best = int(np.argmax(mean))
        if mean[best] >= self.threshold:
            self.current = StabilizedPrediction(names[best], float(mean[best]))
        return self.current

    def reset(self):
        self.history.clear()
        self.class_names = None
        self.current = StabilizedPrediction(None, 0.0)


class PoseInputAdapter:
    """
    把分類器輸出接到 on_input_command

    每幀都送出目前的穩定結果，重複的車道由 on_input_command 忽略。
    """

    def __init__(self, on_lane: Callable[[int], None],
                 stabilizer: PredictionStabilizer = None):
        self.on_lane = on_lane
        self.stabilizer = stabilizer or PredictionStabilizer()

    def handle_prediction(self, predictions: Sequence[Tuple[str, float]]) -> Optional[int]:
        """回傳送出的車道，未送出則為 None"""
        stable = self.stabilizer.stabilize(predictions)
        lane = pose_to_lane(stable.class_name)
        if lane is None:
            return None
        self.on_lane(lane)
        return lane

    def reset(self):
        self.stabilizer.reset()
