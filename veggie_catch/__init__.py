"""Veggie Catch - 三車道接物小遊戲核心"""

from .core import GameSession, SessionPhase
from .config import Settings, load_settings

__version__ = "0.3.0"

__all__ = ['GameSession', 'SessionPhase', 'Settings', 'load_settings']
