from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from .direction import Direction

Reward = float


@dataclass(frozen=True)
class Experience:
    """一步 SARSA 五元组 (s, a, r, s', a')；坐标为 (x, y)。"""
    state: Tuple[int, int]
    action: Direction
    reward: Reward
    next_state: Tuple[int, int]
    next_action: Direction
