"""核心遊戲系統"""

from .catalog import ItemKind, Catalog, build_catalog
from .entities import FallingItem, CatcherState, SessionState, SessionStats, SessionPhase
from .spawner import Spawner
from .collision import CollisionDetector, PhysicsStep, StepResult
from .difficulty import (
    apply_score, derive_level, derive_spawn_cadence, item_speed, DifficultyCurve,
)
from .clock import SessionClock
from .scheduling import TickSource, ManualTickSource, IntervalTickSource
from .reaction import Polarity, ReactionEvent, ReactionDisplay
from .session import GameSession

__all__ = [
    'ItemKind', 'Catalog', 'build_catalog',
    'FallingItem', 'CatcherState', 'SessionState', 'SessionStats', 'SessionPhase',
    'Spawner', 'CollisionDetector', 'PhysicsStep', 'StepResult',
    'apply_score', 'derive_level', 'derive_spawn_cadence', 'item_speed', 'DifficultyCurve',
    'SessionClock', 'TickSource', 'ManualTickSource', 'IntervalTickSource',
    'Polarity', 'ReactionEvent', 'ReactionDisplay', 'GameSession',
]
