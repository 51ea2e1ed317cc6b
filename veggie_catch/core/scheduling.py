"""
可注入的 tick 來源
"""

import threading
from abc import ABC, abstractmethod
from typing import Callable, Optional

Callback = Callable[[], None]


class TickSource(ABC):
    """tick 來源抽象基類"""

    @abstractmethod
    def start(self, callback: Callback):
        """開始定期呼叫 callback"""
        pass

    @abstractmethod
    def stop(self):
        """停止呼叫，重複呼叫無副作用"""
        pass

    @property
    @abstractmethod
    def running(self) -> bool:
        pass


class ManualTickSource(TickSource):
    """由呼叫端手動觸發的 tick 來源 (測試、無頭模擬、pygame 主迴圈)"""

    def __init__(self):
        self._callback: Optional[Callback] = None
        self.start_count = 0

    def start(self, callback: Callback):
        self._callback = callback
        self.start_count += 1

    def stop(self):
        self._callback = None

    @property
    def running(self) -> bool:
        return self._callback is not None

    def fire(self, count: int = 1) -> int:
        """
        觸發 count 次，中途被停止則提前結束

        Returns:
            實際觸發的次數
        """
        fired = 0
        for _ in range(count):
            callback = self._callback
            if callback is None:
                break
            callback()
            fired += 1
        return fired


class IntervalTickSource(TickSource):
    """背景執行緒，每 interval 秒呼叫一次"""

    def __init__(self, interval: float = 1.0, name: str = "interval-tick"):
        self.interval = interval
        self.name = name
        self._thread: Optional[threading.Thread] = None
        self._stop_event: Optional[threading.Event] = None

    def start(self, callback: Callback):
        if self._thread is not None:
            self.stop()
        self._stop_event = threading.Event()
        self._thread = threading.Thread(
            target=self._run, args=(callback, self._stop_event),
            name=self.name, daemon=True,
        )
        self._thread.start()

    def _run(self, callback: Callback, stop_event: threading.Event):
        while not stop_event.wait(self.interval):
            callback()

    def stop(self):
        if self._thread is None:
            return
        # 不 join: stop 可能由 callback 所在執行緒呼叫
        self._stop_event.set()
        self._thread = None
        self._stop_event = None

    @property
    def running(self) -> bool:
        return self._thread is not None
