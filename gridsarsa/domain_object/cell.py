from enum import Enum


class Cell(Enum):
    EMPTY = 0
    WALL = 1
    GOAL = 2
    TRAP = 3

    @property
    def score(self) -> float:
        return _SCORES[self]

    @property
    def glyph(self) -> str:
        return _GLYPHS[self]


_SCORES = {Cell.EMPTY: 0.0, Cell.WALL: 0.0, Cell.GOAL: 1.0, Cell.TRAP: -1.0}
_GLYPHS = {Cell.EMPTY: ".", Cell.WALL: "#", Cell.GOAL: "G", Cell.TRAP: "T"}
