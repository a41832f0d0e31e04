# -*- coding: utf-8 -*-
from __future__ import annotations

from collections import deque
from typing import Optional, Set
import numpy as np

from .domain_object import Cell, Direction, Position, Reward

# 参考布局（4 列 × 3 行）
WIDTH, HEIGHT = 4, 3
WALL: Position = (2, 1)
TRAP: Position = (3, 2)
GOAL: Position = (3, 0)
START: Position = (0, 2)
STEP_PENALTY: float = 0.001


class Board:
    """
    固定尺寸的格子棋盘，底层为扁平 numpy 数组，下标 y * width + x。

    约定：
      - 尺寸在构造时确定；
      - freeze() 之后数组只读，任何写入都会抛出 ValueError。
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"棋盘尺寸必须为正：{width}x{height}")
        self.w, self.h = width, height
        self.cells = np.full(width * height, Cell.EMPTY.value, dtype=np.int8)

    def in_bounds(self, pos: Position) -> bool:
        x, y = pos
        return 0 <= x < self.w and 0 <= y < self.h

    def index(self, pos: Position) -> int:
        if not self.in_bounds(pos):
            raise ValueError(f"坐标 {pos} 超出 {self.w}x{self.h} 棋盘")
        x, y = pos
        return y * self.w + x

    def place(self, pos: Position, cell: Cell) -> None:
        self.cells[self.index(pos)] = cell.value

    def freeze(self) -> "Board":
        self.cells.flags.writeable = False
        return self

    def __getitem__(self, pos: Position) -> Cell:
        return Cell(int(self.cells[self.index(pos)]))


class GridWorld:
    """
    确定性网格世界：一个墙、一个陷阱、一个终点，布局固定。

    约定：
      - 越界方向的移动在该轴上原地不动；
      - 目标格为墙时整步回退；
      - 只有 GOAL 是终止态，TRAP 默认不终止（absorbing_trap=True 可改）。
    """

    def __init__(self, *, start: Position = START, absorbing_trap: bool = False):
        board = Board(WIDTH, HEIGHT)
        board.place(WALL, Cell.WALL)
        board.place(TRAP, Cell.TRAP)
        board.place(GOAL, Cell.GOAL)
        self.board = board.freeze()

        assert self.board.in_bounds(start), "起点不在网格内"
        self.start: Position = start
        self.absorbing_trap = absorbing_trap
        self.s: Position = start

    # -----------------------------
    # 公共接口
    # -----------------------------
    @property
    def position(self) -> Position:
        return self.s

    def reset(self) -> Position:
        """回到起点。"""
        self.s = self.start
        return self.s

    def step(self, direction: Direction) -> None:
        self.s = self._move(self.s, direction)

    def reward(self) -> Reward:
        """当前格子的分数减去固定步长惩罚（终止步也扣）。"""
        return self.board[self.s].score - STEP_PENALTY

    def is_terminal(self) -> bool:
        cell = self.board[self.s]
        if cell == Cell.GOAL:
            return True
        return self.absorbing_trap and cell == Cell.TRAP

    def cell_at(self, pos: Position) -> Cell:
        return self.board[pos]

    def render(self) -> str:
        rows = []
        for y in range(self.board.h):
            row = []
            for x in range(self.board.w):
                row.append("@" if (x, y) == self.s else self.board[(x, y)].glyph)
            rows.append("".join(row) + "\n")
        return "".join(rows)

    def path_exists(self, start: Optional[Position] = None, goal: Position = GOAL) -> bool:
        """BFS：按确定性移动规则，从 start 能否到达 goal。"""
        src = self.start if start is None else start
        seen: Set[Position] = {src}
        queue = deque([src])
        while queue:
            s = queue.popleft()
            if s == goal:
                return True
            for d in Direction.all():
                ns = self._move(s, d)
                if ns not in seen:
                    seen.add(ns)
                    queue.append(ns)
        return False

    # -----------------------------
    # 内部
    # -----------------------------
    def _move(self, s: Position, d: Direction) -> Position:
        dx, dy = d.delta
        x, y = s
        nx = max(0, min(self.board.w - 1, x + dx))
        ny = max(0, min(self.board.h - 1, y + dy))
        # 撞墙：整步回退
        if self.board[(nx, ny)] == Cell.WALL:
            return s
        return nx, ny
