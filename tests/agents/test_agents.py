import random

from maze_search.agents import GreedyAgent, RandomAgent, SearchAgent
from maze_search.games.maze import (
    BeamSearchSolver,
    ChokudaiSearchSolver,
    MazeConfig,
    MazeGame,
    greedy_action,
)


CONFIG = MazeConfig(height=5, width=5, end_turn=8)


def test_random_agent_picks_legal_actions():
    game = MazeGame(CONFIG)
    agent = RandomAgent(game, rng=random.Random(0))
    state = game.reset(seed=1)
    while not state.is_terminal:
        action = agent.act(state)
        assert action in state.legal_actions()
        state, _, _, _ = game.step(action)


def test_random_agent_is_reproducible():
    game = MazeGame(CONFIG)
    state = game.reset(seed=2)
    first = [RandomAgent(game, rng=random.Random(5)).act(state) for _ in range(3)]
    assert len(set(first)) == 1


def test_greedy_agent_matches_greedy_action():
    game = MazeGame(CONFIG)
    state = game.reset(seed=4)
    agent = GreedyAgent()
    assert agent.act(state) == greedy_action(state)
    assert agent.last_result is not None
    assert agent.last_result.depth == 1


def test_search_agent_keeps_last_result():
    game = MazeGame(CONFIG)
    state = game.reset(seed=0)
    agent = SearchAgent(ChokudaiSearchSolver(beam_width=2, beam_depth=4, beam_num=2))
    action = agent.act(state)
    assert action in state.legal_actions()
    assert agent.last_result.action == action
    assert agent.last_result.rounds == 2
    agent.reset()
    assert agent.last_result is None


def test_search_agent_with_zero_budget_still_plays():
    game = MazeGame(CONFIG)
    agent = SearchAgent(BeamSearchSolver(beam_width=3, time_threshold_ms=0))
    state = game.reset(seed=3)
    while not state.is_terminal:
        state, _, _, _ = game.step(agent.act(state))
        assert agent.last_result.fallback
    assert state.turn == CONFIG.end_turn
