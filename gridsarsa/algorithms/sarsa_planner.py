# -*- coding: utf-8 -*-
# 路径：gridsarsa/algorithms/sarsa_planner.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from gridsarsa.utils.logger_manager import LoggerManager
from gridsarsa.utils.timing import record_time_decorator
from gridsarsa.utils.render import render_board, format_q_table
from gridsarsa.domain_object import Experience
from gridsarsa.grid_world import GridWorld
from gridsarsa.algorithms.sarsa_agent import SarsaAgent


@dataclass
class SarsaRunConfig:
    num_episodes: int = 1
    max_steps_per_episode: int = 100
    log_dir: str = "logs/sarsa"
    use_tensorboard: bool = True
    render_every_step: bool = True   # 每步输出棋盘与整张 Q 表


@dataclass
class EpisodeResult:
    episode: int
    steps: int
    episode_return: float
    reached_goal: bool
    history: List[Experience] = field(default_factory=list)


class SarsaPlanner:
    """
    驱动循环：持有 agent，每集新建一个 GridWorld。
    每步：act(a) → r → s' → a' = greedy(s') → update(s, a, r, s', a')。
    终止条件：到达终点，或用完步数预算。
    """
    def __init__(
        self,
        agent: Optional[SarsaAgent] = None,
        cfg: Optional[SarsaRunConfig] = None,
        *,
        absorbing_trap: bool = False,
    ) -> None:
        self.cfg = cfg if cfg is not None else SarsaRunConfig()
        # SarsaAgent 定义了 __len__，空表为假值，不能用 or
        self.agent = agent if agent is not None else SarsaAgent()
        self.absorbing_trap = absorbing_trap
        self.logger = LoggerManager(self.cfg.log_dir, self.cfg.use_tensorboard)
        self.env: Optional[GridWorld] = None
        self._episode_idx = 0
        self._global_step = 0

    def run_episode(self, max_steps: Optional[int] = None) -> EpisodeResult:
        max_steps = self.cfg.max_steps_per_episode if max_steps is None else max_steps
        self.env = env = GridWorld(absorbing_trap=self.absorbing_trap)
        agent = self.agent

        s = env.reset()
        a = agent.greedy(s)
        ep_ret = 0.0
        history: List[Experience] = []
        reached = False

        for t in range(max_steps):
            if self.cfg.render_every_step:
                render_board(env)
                for line in format_q_table(agent.q_table()):
                    self.logger.log(line)
                self.logger.log(f"Act: {a.name}")

            env.step(a)
            r = env.reward()
            ep_ret += r
            s_next = env.position
            a_next = agent.greedy(s_next)
            if self.cfg.render_every_step:
                self.logger.log(f"Rwd: {r:.3f}")

            delta = agent.update(s, a, r, s_next, a_next)
            history.append(Experience(s, a, r, s_next, a_next))
            self.logger.add_scalar("SARSA/td_error_abs", abs(float(delta)), self._global_step)
            self._global_step += 1

            s, a = s_next, a_next
            if env.is_terminal():
                reached = True
                if self.cfg.render_every_step:
                    render_board(env)
                self.logger.log(f"GOAL! t={t}")
                break

        result = EpisodeResult(
            episode=self._episode_idx,
            steps=len(history),
            episode_return=ep_ret,
            reached_goal=reached,
            history=history,
        )
        self.logger.add_scalar("episode/return", ep_ret, self._episode_idx)
        self.logger.add_scalar("episode/length", result.steps, self._episode_idx)
        self.logger.log(
            f"[EP {self._episode_idx}] len={result.steps} return={ep_ret:.3f} goal={reached} |Q|={len(agent)}"
        )
        self._episode_idx += 1
        return result

    @record_time_decorator("SARSA")
    def train(self, num_episodes: Optional[int] = None) -> List[EpisodeResult]:
        n = self.cfg.num_episodes if num_episodes is None else num_episodes
        return [self.run_episode() for _ in range(n)]

    def close(self):
        self.logger.close()
