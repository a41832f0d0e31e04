# -*- coding: utf-8 -*-
from __future__ import annotations
from typing import Dict, List, Optional

from gridsarsa.domain_object import Direction


def greedy_from_q(
    q_s: Dict[Direction, float],
    order: Optional[List[Direction]] = None,
) -> Direction:
    """
    严格取最大值；完全相等时按 order 中靠前的动作。
    缺失的动作视为 0.0（与 Q 表惰性初始化一致）。
    """
    order = order or Direction.all()
    best = order[0]
    best_q = q_s.get(best, 0.0)
    for d in order[1:]:
        q = q_s.get(d, 0.0)
        if q > best_q:
            best, best_q = d, q
    return best
