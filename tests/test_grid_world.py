"""Tests for the grid world environment and its board."""

from typing import Tuple

import pytest

from gridsarsa.domain_object import Cell, Direction, Experience, Position
from gridsarsa.grid_world import (
    Board,
    GridWorld,
    GOAL,
    START,
    STEP_PENALTY,
    TRAP,
    WALL,
)


class TestCellAndDirection:
    def test_scores(self):
        assert Cell.GOAL.score == 1.0
        assert Cell.TRAP.score == -1.0
        assert Cell.EMPTY.score == 0.0
        assert Cell.WALL.score == 0.0

    def test_direction_order_is_fixed(self):
        assert Direction.all() == [Direction.LEFT, Direction.RIGHT, Direction.UP, Direction.DOWN]

    def test_position_alias_and_experience(self):
        assert Position == Tuple[int, int]
        e = Experience((0, 2), Direction.LEFT, -0.001, (0, 2), Direction.RIGHT)
        assert e.next_state == (0, 2)

    def test_up_decreases_y(self):
        assert Direction.UP.delta == (0, -1)
        assert Direction.DOWN.delta == (0, 1)


class TestBoard:
    def test_reference_layout(self, env):
        assert env.cell_at(WALL) == Cell.WALL
        assert env.cell_at(TRAP) == Cell.TRAP
        assert env.cell_at(GOAL) == Cell.GOAL
        cells = [env.cell_at((x, y)) for y in range(3) for x in range(4)]
        assert cells.count(Cell.WALL) == 1
        assert cells.count(Cell.TRAP) == 1
        assert cells.count(Cell.GOAL) == 1
        assert cells.count(Cell.EMPTY) == 9

    def test_flat_index_is_row_major(self):
        board = Board(4, 3)
        assert board.index((0, 0)) == 0
        assert board.index((3, 0)) == 3
        assert board.index((0, 1)) == 4
        assert board.index((2, 2)) == 10

    def test_placing_outside_small_board_raises(self):
        board = Board(2, 2)
        with pytest.raises(ValueError):
            board.place(GOAL, Cell.GOAL)

    def test_non_positive_dimensions_raise(self):
        with pytest.raises(ValueError):
            Board(0, 3)

    def test_frozen_board_rejects_writes(self, env):
        with pytest.raises(ValueError):
            env.board.place((0, 0), Cell.TRAP)
        assert env.cell_at((0, 0)) == Cell.EMPTY

    def test_start_outside_board_fails(self):
        with pytest.raises(AssertionError):
            GridWorld(start=(4, 0))


class TestStep:
    def test_starts_at_reference_start(self, env):
        assert env.position == START == (0, 2)

    @pytest.mark.parametrize(
        "pos, direction",
        [
            ((0, 2), Direction.LEFT),
            ((0, 2), Direction.DOWN),
            ((0, 0), Direction.UP),
            ((0, 0), Direction.LEFT),
            ((3, 1), Direction.RIGHT),
            ((1, 2), Direction.DOWN),
        ],
    )
    def test_edge_moves_are_noops(self, pos, direction):
        env = GridWorld(start=pos)
        env.step(direction)
        assert env.position == pos
        env.step(direction)
        assert env.position == pos

    def test_never_leaves_board(self, env):
        for d in Direction.all():
            for _ in range(5):
                env.step(d)
                x, y = env.position
                assert 0 <= x < 4
                assert 0 <= y < 3

    @pytest.mark.parametrize(
        "pos, direction",
        [
            ((1, 1), Direction.RIGHT),
            ((3, 1), Direction.LEFT),
            ((2, 0), Direction.DOWN),
            ((2, 2), Direction.UP),
        ],
    )
    def test_wall_reverts_move(self, pos, direction):
        env = GridWorld(start=pos)
        env.step(direction)
        assert env.position == pos

    def test_plain_moves(self, env):
        env.step(Direction.RIGHT)
        assert env.position == (1, 2)
        env.step(Direction.UP)
        assert env.position == (1, 1)
        env.step(Direction.UP)
        assert env.position == (1, 0)

    def test_step_returns_none(self, env):
        assert env.step(Direction.RIGHT) is None

    def test_reset_restores_start(self, env):
        env.step(Direction.RIGHT)
        assert env.reset() == START
        assert env.position == START


class TestReward:
    def test_goal_reward(self):
        assert GridWorld(start=GOAL).reward() == pytest.approx(1.0 - 0.001)

    def test_trap_reward(self):
        assert GridWorld(start=TRAP).reward() == pytest.approx(-1.0 - 0.001)

    def test_empty_reward(self, env):
        assert env.reward() == pytest.approx(-0.001)
        assert STEP_PENALTY == 0.001

    def test_entering_goal_rewards(self):
        env = GridWorld(start=(3, 1))
        env.step(Direction.UP)
        assert env.position == GOAL
        assert env.reward() == pytest.approx(0.999)


class TestTerminal:
    def test_goal_is_terminal(self):
        assert GridWorld(start=GOAL).is_terminal()

    def test_start_is_not_terminal(self, env):
        assert not env.is_terminal()

    def test_trap_is_not_terminal_by_default(self):
        assert not GridWorld(start=TRAP).is_terminal()

    def test_absorbing_trap_opt_in(self):
        assert GridWorld(start=TRAP, absorbing_trap=True).is_terminal()

    def test_path_from_start_to_goal_exists(self, env):
        assert env.path_exists()
        assert env.path_exists(start=(2, 2))

    def test_wall_is_unreachable(self, env):
        assert not env.path_exists(goal=WALL)


class TestRender:
    def test_initial_render(self, env):
        assert env.render() == "...G\n..#.\n@..T\n"

    def test_agent_overrides_cell_glyph(self):
        assert GridWorld(start=GOAL).render() == "...@\n..#.\n...T\n"

    def test_render_has_no_side_effects(self, env):
        env.render()
        assert env.position == START
