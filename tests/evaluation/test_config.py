import tempfile
from pathlib import Path

import pytest
import yaml

from maze_search.agents import GreedyAgent, RandomAgent, SearchAgent
from maze_search.evaluation import BenchmarkConfig, create_agent, load_config
from maze_search.games.maze import BeamSearchSolver, ChokudaiSearchSolver, MazeConfig, MazeGame


def write_yaml(tmp_dir, data):
    path = Path(tmp_dir) / "config.yaml"
    with path.open("w") as f:
        yaml.safe_dump(data, f)
    return path


def test_load_config_from_yaml():
    data = {
        "game": {"height": 6, "width": 7, "end_turn": 12},
        "policy": {"type": "chokudai_timed", "beam_width": 2, "beam_depth": 12, "time_threshold_ms": 5},
        "benchmark": {"num_games": 3, "seed_offset": 100},
        "logging": {"verbose": False, "use_wandb": False},
        "results": {"save_dir": "./results/"},
    }
    with tempfile.TemporaryDirectory() as tmp_dir:
        config = load_config(write_yaml(tmp_dir, data))
    assert config.game == MazeConfig(height=6, width=7, end_turn=12)
    assert config.policy["type"] == "chokudai_timed"
    assert config.num_games == 3
    assert config.seed_offset == 100
    assert not config.verbose
    assert config.save_dir == "./results/"


def test_defaults_for_missing_sections():
    config = BenchmarkConfig.from_dict({})
    assert config.game == MazeConfig()
    assert config.policy == {"type": "greedy"}
    assert config.num_games == 100


def test_missing_file_and_unknown_policy():
    with pytest.raises(FileNotFoundError):
        load_config("does/not/exist.yaml")
    with pytest.raises(ValueError):
        BenchmarkConfig.from_dict({"policy": {"type": "minimax"}})


def test_sample_configs_load():
    configs_dir = Path(__file__).resolve().parents[2] / "configs"
    for path in sorted(configs_dir.glob("*.yaml")):
        config = load_config(path)
        agent = create_agent(config.policy, MazeGame(config.game))
        assert agent is not None


@pytest.mark.parametrize(
    "policy, agent_type, solver_type",
    [
        ({"type": "random", "seed": 1}, RandomAgent, None),
        ({"type": "greedy"}, GreedyAgent, None),
        ({"type": "beam", "beam_width": 5, "beam_depth": 10}, SearchAgent, BeamSearchSolver),
        ({"type": "beam_timed", "beam_width": 5, "time_threshold_ms": 10}, SearchAgent, BeamSearchSolver),
        ({"type": "chokudai", "beam_width": 2, "beam_num": 3}, SearchAgent, ChokudaiSearchSolver),
        ({"type": "chokudai_timed", "beam_width": 2, "time_threshold_ms": 10}, SearchAgent, ChokudaiSearchSolver),
    ],
)
def test_create_agent(policy, agent_type, solver_type):
    game = MazeGame(MazeConfig(height=4, width=4, end_turn=6))
    agent = create_agent(policy, game)
    assert isinstance(agent, agent_type)
    if solver_type is not None:
        assert isinstance(agent.solver, solver_type)
    state = game.reset(seed=0)
    assert agent.act(state) in state.legal_actions()


def test_chokudai_depth_defaults_to_episode_length():
    game = MazeGame(MazeConfig(height=4, width=4, end_turn=6))
    agent = create_agent({"type": "chokudai", "beam_width": 1, "beam_num": 1}, game)
    assert agent.solver.beam_depth == 6


def test_create_agent_unknown_type():
    with pytest.raises(ValueError):
        create_agent({"type": "mcts"}, MazeGame())
