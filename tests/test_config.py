#!filepath: tests/test_config.py
from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from wagersim import AppConfig
from wagersim.config.simulation_config import GeneticConfig, SimulationConfig
from wagersim.utils.errors import ConfigError


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("WAGERSIM_SEED", raising=False)
    monkeypatch.delenv("WAGERSIM_LOG_LEVEL", raising=False)


def test_load_default_base_yml():
    cfg = AppConfig.load()

    assert cfg.simulation.salt_mine_amount == 100.0
    assert cfg.simulation.tournament_balance == 1000.0
    assert cfg.simulation.seed is None
    assert cfg.genetic.mutation_rate == 0.05
    assert cfg.log.level == "INFO"


def test_load_custom_yaml(tmp_path: Path):
    path = tmp_path / "cfg.yml"
    path.write_text(
        "simulation:\n"
        "  salt_mine_amount: 250\n"
        "  seed: 7\n"
        "genetic:\n"
        "  mutation_rate: 0.2\n",
        encoding="utf-8",
    )

    cfg = AppConfig.load(str(path))

    assert cfg.simulation.salt_mine_amount == 250.0
    assert cfg.simulation.tournament_balance == 1000.0
    assert cfg.simulation.seed == 7
    assert cfg.genetic.mutation_rate == 0.2
    assert cfg.log.dir == "logs"


def test_missing_file_raises(tmp_path: Path):
    with pytest.raises(ConfigError, match="Config file not found"):
        AppConfig.load(str(tmp_path / "nope.yml"))


def test_env_overrides_seed_and_level(monkeypatch):
    monkeypatch.setenv("WAGERSIM_SEED", "11")
    monkeypatch.setenv("WAGERSIM_LOG_LEVEL", "DEBUG")

    cfg = AppConfig.load()

    assert cfg.simulation.seed == 11
    assert cfg.genetic.seed == 11
    assert cfg.log.level == "DEBUG"


@pytest.mark.parametrize("rate", [-0.1, 1.5])
def test_mutation_rate_out_of_range(rate):
    with pytest.raises(ValidationError):
        GeneticConfig(mutation_rate=rate)


def test_balances_must_be_at_least_one():
    with pytest.raises(ValidationError):
        SimulationConfig(salt_mine_amount=0)

    with pytest.raises(ValidationError):
        SimulationConfig(tournament_balance=-5)
