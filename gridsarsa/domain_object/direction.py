from enum import Enum
from typing import List, Tuple


class Direction(Enum):
    LEFT = 0
    RIGHT = 1
    UP = 2
    DOWN = 3

    @staticmethod
    def all() -> List["Direction"]:
        # 固定顺序：greedy 并列时靠前者胜出
        return [Direction.LEFT, Direction.RIGHT, Direction.UP, Direction.DOWN]

    @property
    def delta(self) -> Tuple[int, int]:
        """(dx, dy)；UP 使 y 减小。"""
        return _DELTAS[self]


_DELTAS = {
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
}
