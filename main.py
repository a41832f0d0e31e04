# -*- coding: utf-8 -*-
from gridsarsa.algorithms.sarsa_agent import SarsaAgent, SarsaConfig
from gridsarsa.algorithms.sarsa_planner import SarsaPlanner, SarsaRunConfig
from gridsarsa.utils.render import render_policy_grid, render_action_values_grid
from gridsarsa.utils.timing import out_profile

# -----------------------------
# 参考驱动：1 集 × 最多 100 步，纯 greedy SARSA
# -----------------------------
if __name__ == "__main__":
    cfg = SarsaRunConfig(num_episodes=1, max_steps_per_episode=100, log_dir="logs/sarsa")
    planner = SarsaPlanner(SarsaAgent(SarsaConfig(alpha=0.1, gamma=0.99)), cfg)

    results = planner.train()
    render_policy_grid(planner.env, planner.agent.q_table())
    render_action_values_grid(planner.env, planner.agent.q_table())
    profile_path = out_profile(cfg.log_dir)
    planner.logger.log(f"time profile written to {profile_path}")
    planner.close()

    for res in results:
        print(f"episode {res.episode}: steps={res.steps} return={res.episode_return:.3f} goal={res.reached_goal}")
