"""
倒數計時器
"""

from ..config.constants import SESSION_SECONDS
from .scheduling import TickSource, Callback


class SessionClock:
    """與渲染迴圈獨立的每秒倒數，歸零時自行停止"""

    def __init__(self, source: TickSource, duration: int = SESSION_SECONDS):
        self.source = source
        self.duration = duration
        self.time_remaining = duration
        self.running = False

    def start(self, callback: Callback):
        """重置剩餘時間並開始倒數，callback 每秒被呼叫一次"""
        self.stop()
        self.time_remaining = self.duration
        self.running = True
        self.source.start(callback)

    def tick(self) -> bool:
        """
        倒數一秒

        Returns:
            是否剛好歸零
        """
        if not self.running:
            return False
        self.time_remaining = max(0, self.time_remaining - 1)
        if self.time_remaining == 0:
            self.stop()
            return True
        return False

    def stop(self):
        if self.running:
            self.running = False
        # 來源可能已被別處啟動，一律停止
        self.source.stop()
