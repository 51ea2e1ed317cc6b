"""
抽象渲染接口
"""

from abc import ABC, abstractmethod

from ..core.catalog import ItemKind
from ..core.reaction import Polarity


class RenderSink(ABC):
    """渲染接收端抽象基類，核心只透過此接口通知畫面"""

    @abstractmethod
    def create_item(self, item_id: int, kind: ItemKind, lane: int, y: float):
        """新增掉落物"""
        pass

    @abstractmethod
    def update_item(self, item_id: int, y: float):
        """更新掉落物位置"""
        pass

    @abstractmethod
    def remove_item(self, item_id: int):
        """移除掉落物"""
        pass

    @abstractmethod
    def set_catcher(self, lane: int):
        """移動籃子"""
        pass

    @abstractmethod
    def set_reaction(self, text: str, polarity: Polarity):
        """顯示反應訊息"""
        pass

    @abstractmethod
    def clear_reaction(self):
        """清除反應訊息"""
        pass

    @abstractmethod
    def set_display(self, score: int, time_remaining: int, level: int):
        """更新分數、時間、等級"""
        pass


class NullRenderSink(RenderSink):
    """不做任何事的接收端 (無頭模式)"""

    def create_item(self, item_id, kind, lane, y):
        pass

    def update_item(self, item_id, y):
        pass

    def remove_item(self, item_id):
        pass

    def set_catcher(self, lane):
        pass

    def set_reaction(self, text, polarity):
        pass

    def clear_reaction(self):
        pass

    def set_display(self, score, time_remaining, level):
        pass
