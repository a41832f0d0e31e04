from .cell import Cell
from .direction import Direction
from .experience import Experience, Reward
from typing import Tuple

Position = Tuple[int, int]  # (x, y)
