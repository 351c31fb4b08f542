import pytest

from config.dashboard_config import DashboardConfig
from tournament_leaderboard.logging import logger as logger_module
from tournament_leaderboard.models import PlayerRecord


@pytest.fixture(autouse=True, scope="session")
def quiet_logger(tmp_path_factory):
    """Route the global logger's file output into a temp directory."""
    log_dir = tmp_path_factory.mktemp("logs")
    logger_module._logger_instance = logger_module.DashboardLogger(
        DashboardConfig(log_dir=str(log_dir))
    )
    yield
    logger_module._logger_instance = None


def make_record(player: str, **overrides) -> PlayerRecord:
    values = {
        "rank": 1,
        "player": player,
        "rating_mu": 25.0,
        "rating_sigma": 2.0,
        "wins": 6,
        "draws": 0,
        "losses": 6,
        "games": 12,
        "win_rate": 0.5,
    }
    values.update(overrides)
    return PlayerRecord(**values)


@pytest.fixture
def records():
    return [
        make_record("Alpha", rank=1, rating_mu=34.1, wins=10, draws=1, losses=1, win_rate=0.85),
        make_record("Beta", rank=2, rating_mu=30.2, wins=8, draws=1, losses=3, win_rate=0.6),
        make_record("Gamma", rank=3, rating_mu=30.2, wins=5, draws=2, losses=3, games=10, win_rate=0.5),
        make_record("Delta", rank=4, rating_mu=22.0, wins=4, draws=2, losses=6, win_rate=0.4),
        make_record("alphabet", rank=5, rating_mu=18.5, wins=3, draws=1, losses=5, games=9, win_rate=0.3),
        make_record("Epsilon", rank=6, rating_mu=12.0, wins=1, draws=0, losses=11, win_rate=0.0833),
    ]


RESULTS_CSV = """rank,player,rating_mu,rating_sigma,wins,draws,losses,games,win_rate
1,Alpha,31.42,1.87,9,1,2,12,0.75
2,Beta,27.5,2.01,3,1,6,10,0.3
3,Gamma,20.0,2.5,5,2,5,12,0.4166666666666667
"""


@pytest.fixture
def data_dir(tmp_path):
    """A data directory with results, a config index and configs."""
    (tmp_path / "final_standings.csv").write_text(RESULTS_CSV)
    prompts = tmp_path / "prompt_collection"
    prompts.mkdir()
    (prompts / "Alpha_gpt4o.yml").write_text(
        "agent0:\n"
        "  model:\n"
        "    provider: openai\n"
        "    name: gpt-4o\n"
        "  prompts:\n"
        "    system_prompt: Always cooperate.\n"
        "    step_wise_prompt: Your move.\n"
        "agent1:\n"
        "  model:\n"
        "    provider: openai\n"
        "    name: gpt-4o-mini\n"
    )
    (prompts / "Beta.yml").write_text("agent0: [unclosed\n")
    (tmp_path / "player_configs.json").write_text('["Alpha_gpt4o.yml", "Beta.yml", "notes.txt"]')
    return tmp_path
