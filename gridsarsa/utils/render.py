from ..grid_world import GridWorld
from ..domain_object import Cell, Direction, Position
from .policy_ops import greedy_from_q
import logging
from typing import Dict, List, Optional, Tuple

# 统一拿到命名 logger（与 LoggerManager 内一致）
def _get_logger():
    return logging.getLogger("RLLogger")

QTable = Dict[Tuple[Position, Direction], float]


def _q_by_position(Q: QTable) -> Dict[Position, Dict[Direction, float]]:
    out: Dict[Position, Dict[Direction, float]] = {}
    for (pos, d), v in Q.items():
        out.setdefault(pos, {})[d] = v
    return out


def render_board(env: GridWorld):
    for line in env.render().splitlines():
        _get_logger().info(line)


def format_q_table(Q: QTable, ndigits: int = 4) -> List[str]:
    """每个 (position, direction) 一行，供逐步日志输出。"""
    return [f"({x},{y}) {d.name:<5} {v: .{ndigits}f}" for ((x, y), d), v in Q.items()]


def render_action_values_grid(
    env: GridWorld,
    Q: QTable,
    ndigits: int = 3,
    pad: int = 7,
    h_gap: int = 1,
    missing: Optional[str] = None,
) -> List[str]:
    """
    每个格子渲染成带边框的小盒子，上/左右/下 分别是 UP、LEFT RIGHT、DOWN 的 Q 值：
        ┌───────────────┐
        │      UP       │
        │ LEFT    RIGHT │
        │     DOWN      │
        └───────────────┘
    墙与终点只画标记（# / G）；陷阱不是终止态，照常显示数值。
    返回渲染出的行，同时写入日志。
    """
    by_pos = _q_by_position(Q)
    _get_logger().info("[Action Values]")

    def fmt(v: Optional[float]) -> str:
        if v is None:
            return ("" if missing is None else str(missing)).rjust(pad)
        return f"{v: .{ndigits}f}".rjust(pad)

    inner = pad * 2 + 1
    horiz = "─" * inner
    gap = " " * h_gap

    lines: List[str] = []
    for y in range(env.board.h):
        top_border, top, mid, bot, bot_border = [], [], [], [], []
        for x in range(env.board.w):
            cell = env.cell_at((x, y))
            if cell in (Cell.WALL, Cell.GOAL):
                top.append("│" + " " * inner + "│")
                mid.append("│" + cell.glyph.center(inner) + "│")
                bot.append("│" + " " * inner + "│")
            else:
                q_s = by_pos.get((x, y), {})
                top.append("│" + fmt(q_s.get(Direction.UP)).center(inner) + "│")
                mid.append("│" + f"{fmt(q_s.get(Direction.LEFT))} {fmt(q_s.get(Direction.RIGHT))}" + "│")
                bot.append("│" + fmt(q_s.get(Direction.DOWN)).center(inner) + "│")
            top_border.append("┌" + horiz + "┐")
            bot_border.append("└" + horiz + "┘")

        for row in (top_border, top, mid, bot, bot_border):
            lines.append(gap.join(row))

    for line in lines:
        _get_logger().info(line)
    return lines


def render_policy_grid(env: GridWorld, Q: QTable) -> List[str]:
    """按 Q 表的 greedy 动作画箭头；未访问的格子同样按并列规则取 LEFT。"""
    arrow = {Direction.UP: "↑", Direction.RIGHT: "→", Direction.DOWN: "↓", Direction.LEFT: "←"}
    by_pos = _q_by_position(Q)
    _get_logger().info("[Policy]")
    lines: List[str] = []
    for y in range(env.board.h):
        row = []
        for x in range(env.board.w):
            cell = env.cell_at((x, y))
            if cell in (Cell.WALL, Cell.GOAL):
                row.append(cell.glyph)
                continue
            row.append(arrow[greedy_from_q(by_pos.get((x, y), {}))])
        lines.append(" ".join(row))
        _get_logger().info(lines[-1])
    return lines
