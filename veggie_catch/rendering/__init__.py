"""渲染系統模組"""

from .renderer import RenderSink, NullRenderSink
from .effects import EffectManager, CatchEffect

__all__ = ['RenderSink', 'NullRenderSink', 'EffectManager', 'CatchEffect']
