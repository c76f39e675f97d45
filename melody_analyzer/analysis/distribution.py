"""Fixed-category percentage distributions.

A distribution is a tuple of percentages indexed by the declaration order of
a closed category enum, so iteration order is stable and the values sum to
100 (or are all zero).
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Dict, List, Tuple, Type, Union

import numpy as np


@dataclass(frozen=True)
class CategoryDistribution:
    """Percentages per category of ``categories``."""

    percentages: Tuple[float, ...]

    categories: ClassVar[Type[Enum]]

    def __post_init__(self):
        if len(self.percentages) != len(self.categories):
            raise ValueError(
                f"Expected {len(self.categories)} values, got {len(self.percentages)}"
            )

    @classmethod
    def empty(cls):
        return cls(tuple(0.0 for _ in cls.categories))

    @classmethod
    def from_weights(cls, weights: np.ndarray):
        """Normalize raw per-category weights to percentages."""
        total = float(np.sum(weights))
        if total <= 0:
            return cls.empty()
        return cls(tuple(float(w) for w in weights / total * 100.0))

    @classmethod
    def index_of(cls, category: Enum) -> int:
        return list(cls.categories).index(category)

    def __getitem__(self, key: Union[Enum, str]) -> float:
        category = key if isinstance(key, self.categories) else self.categories(key)
        return self.percentages[self.index_of(category)]

    @property
    def total(self) -> float:
        return float(sum(self.percentages))

    def as_dict(self) -> Dict[str, float]:
        """Ordered {category key: percentage} mapping."""
        return {c.value: p for c, p in zip(self.categories, self.percentages)}

    def dominant(self, n: int = 3) -> List[Enum]:
        """Up to n non-zero categories by descending share (ties keep order)."""
        ranked = sorted(
            (c for c, p in zip(self.categories, self.percentages) if p > 0),
            key=lambda c: -self.percentages[self.index_of(c)],
        )
        return ranked[:n]
