"""
物品表與加權抽樣
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from ..config.constants import DEFAULT_CATALOG, REFERENCE_BREAKPOINTS


@dataclass(frozen=True)
class ItemKind:
    """掉落物種類 (不可變)"""
    name: str
    icon: str
    score_delta: int
    is_penalty: bool
    weight: int
    color: Tuple[int, int, int] = (200, 200, 200)

    @classmethod
    def from_dict(cls, data: Dict) -> 'ItemKind':
        return cls(
            name=data['name'],
            icon=data.get('icon', data['name'][:1].upper()),
            score_delta=int(data['score_delta']),
            is_penalty=bool(data.get('is_penalty', data['score_delta'] < 0)),
            weight=int(data['weight']),
            color=tuple(data.get('color', (200, 200, 200))),
        )


class Catalog:
    """
    固定的物品表，支援加權隨機抽樣

    thresholds 為累積機率斷點；給定 [0,1) 的均勻亂數 u，
    選中第一個 threshold > u 的物品。
    """

    def __init__(self, kinds: Iterable[ItemKind],
                 breakpoints: Optional[Sequence[float]] = None):
        self.kinds: Tuple[ItemKind, ...] = tuple(kinds)
        if not self.kinds:
            raise ValueError("物品表不可為空")
        if any(kind.weight <= 0 for kind in self.kinds):
            raise ValueError("物品權重必須為正數")

        if breakpoints is None:
            weights = np.array([kind.weight for kind in self.kinds], dtype=float)
            self.thresholds = np.cumsum(weights) / weights.sum()
        else:
            thresholds = np.asarray(breakpoints, dtype=float)
            if len(thresholds) != len(self.kinds):
                raise ValueError(
                    f"斷點數量 ({len(thresholds)}) 與物品數量 ({len(self.kinds)}) 不符")
            if np.any(np.diff(thresholds) <= 0) or not np.isclose(thresholds[-1], 1.0):
                raise ValueError("斷點必須嚴格遞增且以 1.0 結尾")
            self.thresholds = thresholds
        self.uses_breakpoints = breakpoints is not None

    def __len__(self) -> int:
        return len(self.kinds)

    def __iter__(self):
        return iter(self.kinds)

    @property
    def total_weight(self) -> int:
        return sum(kind.weight for kind in self.kinds)

    def probabilities(self) -> np.ndarray:
        """各物品的抽中機率"""
        return np.diff(self.thresholds, prepend=0.0)

    def pick(self, u: float) -> ItemKind:
        """由 [0,1) 均勻亂數選出物品"""
        index = int(np.searchsorted(self.thresholds, u, side='right'))
        # 浮點誤差保護
        return self.kinds[min(index, len(self.kinds) - 1)]

    def draw(self, rng: np.random.Generator) -> ItemKind:
        """加權隨機抽樣"""
        return self.pick(rng.random())

    def by_name(self, name: str) -> ItemKind:
        for kind in self.kinds:
            if kind.name == name:
                return kind
        raise KeyError(name)

    def non_penalty_kinds(self) -> List[ItemKind]:
        return [kind for kind in self.kinds if not kind.is_penalty]


def build_catalog(entries: Optional[List[Dict]] = None, mode: str = "breakpoints") -> Catalog:
    """從配置字典建立物品表"""
    kinds = [ItemKind.from_dict(entry) for entry in (entries or DEFAULT_CATALOG)]
    if mode == "breakpoints":
        return Catalog(kinds, breakpoints=REFERENCE_BREAKPOINTS)
    if mode == "weights":
        return Catalog(kinds)
    raise ValueError(f"未知的抽樣模式: {mode}")
