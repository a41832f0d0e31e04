# -*- coding: utf-8 -*-
# 路径：gridsarsa/algorithms/sarsa_agent.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional, Tuple
import logging

from gridsarsa.domain_object import Direction, Position, Reward
from gridsarsa.utils.policy_ops import greedy_from_q

QKey = Tuple[Position, Direction]


def _get_logger():
    return logging.getLogger("RLLogger")


@dataclass
class SarsaConfig:
    alpha: float = 0.1
    gamma: float = 0.99
    # True: 按 (s1.x, s2.y, a1) 写回，复现旧版行为
    legacy_key_mixing: bool = False

    def __post_init__(self):
        if not 0.0 < self.alpha <= 1.0:
            raise ValueError(f"alpha 应在 (0, 1] 内，实际为 {self.alpha}")
        if not 0.0 <= self.gamma <= 1.0:
            raise ValueError(f"gamma 应在 [0, 1] 内，实际为 {self.gamma}")


class SarsaAgent:
    """
    表格型一步 SARSA：
      Q(s,a) ← Q(s,a)·(1−α) + α·(r + γ·Q(s',a'))

    Q 表为 {(position, direction): value}，首次访问时插入 0.0，键只增不删。
    动作选择为纯 greedy，不做 ε 探索。
    """

    def __init__(self, cfg: Optional[SarsaConfig] = None) -> None:
        self.cfg = cfg if cfg is not None else SarsaConfig()
        self.alpha = self.cfg.alpha
        self.gamma = self.cfg.gamma
        self.q: Dict[QKey, float] = {}

    def __len__(self) -> int:
        return len(self.q)

    def value(self, pos: Position, d: Direction) -> float:
        return self.q.setdefault((pos, d), 0.0)

    def greedy(self, pos: Position) -> Direction:
        q_s = {d: self.value(pos, d) for d in Direction.all()}
        return greedy_from_q(q_s, Direction.all())

    def update(
        self,
        s1: Position,
        a1: Direction,
        r: Reward,
        s2: Position,
        a2: Direction,
    ) -> float:
        """执行一次 SARSA 更新，返回 TD 误差 δ = r + γ·Q(s2,a2) − Q(s1,a1)。"""
        q_next = self.value(s2, a2)
        q_now = self.value(s1, a1)
        new_q = q_now * (1.0 - self.alpha) + (q_next * self.gamma + r) * self.alpha

        key = ((s1[0], s2[1]), a1) if self.cfg.legacy_key_mixing else (s1, a1)
        self.q[key] = new_q

        delta = r + self.gamma * q_next - q_now
        _get_logger().debug("[SARSA] %s %s -> %.6f (δ=%.3e)", key[0], a1.name, new_q, delta)
        return delta

    def q_table(self) -> Dict[QKey, float]:
        """Q 表快照，按 (y, x, 方向) 排序。"""
        items = sorted(self.q.items(), key=lambda kv: (kv[0][0][1], kv[0][0][0], kv[0][1].value))
        return dict(items)
