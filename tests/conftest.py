"""
Shared pytest fixtures for gridsarsa tests.
"""

import pytest

from gridsarsa.grid_world import GridWorld
from gridsarsa.algorithms.sarsa_agent import SarsaAgent, SarsaConfig
from gridsarsa.algorithms.sarsa_planner import SarsaPlanner, SarsaRunConfig


@pytest.fixture
def env():
    return GridWorld()


@pytest.fixture
def agent():
    return SarsaAgent(SarsaConfig(alpha=0.1, gamma=0.99))


@pytest.fixture
def make_planner(tmp_path):
    """Build planners logging into tmp_path; closes their handlers afterwards."""
    planners = []

    def _make(agent=None, **kwargs):
        kwargs.setdefault("use_tensorboard", False)
        kwargs.setdefault("render_every_step", False)
        cfg = SarsaRunConfig(log_dir=str(tmp_path / "logs"), **kwargs)
        planner = SarsaPlanner(agent, cfg)
        planners.append(planner)
        return planner

    yield _make
    for p in planners:
        p.close()
