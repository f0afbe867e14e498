"""Tests for configuration loading (config/settings.py)."""

import logging

import pytest

from config.settings import Config, GameConfig, LoggingConfig, SimulationConfig, load_config, save_config
from utils.logging import LOG_LEVEL_ENV, resolve_level


class TestConfig:
    """Test configuration defaults and validation."""

    def test_defaults(self):
        config = Config()
        assert config.game.dealer_stand_total == 17
        assert config.game.dealer_hits_soft_17
        assert config.game.seed is None
        assert config.simulation.agent == "dealer"
        assert config.logging.level == "WARNING"

    @pytest.mark.parametrize("total", [1, 22])
    def test_invalid_stand_total(self, total):
        with pytest.raises(ValueError):
            GameConfig(dealer_stand_total=total)

    def test_invalid_agent(self):
        with pytest.raises(ValueError):
            SimulationConfig(agent="card_counter")

    def test_invalid_num_games(self):
        with pytest.raises(ValueError):
            SimulationConfig(num_games=0)

    def test_log_level_normalized(self):
        assert LoggingConfig(level="debug").level == "DEBUG"
        with pytest.raises(ValueError):
            LoggingConfig(level="loud")


class TestConfigFiles:
    """Test YAML load and save."""

    def test_save_then_load(self, tmp_path):
        config = Config(
            game=GameConfig(dealer_stand_total=16, dealer_hits_soft_17=False, seed=99),
            simulation=SimulationConfig(num_games=25, agent="random"),
            logging=LoggingConfig(level="INFO"),
        )
        path = tmp_path / "nested" / "blackjack.yaml"
        save_config(config, path)

        assert load_config(path) == config

    def test_partial_file_keeps_defaults(self, tmp_path):
        path = tmp_path / "partial.yaml"
        path.write_text("game:\n  seed: 5\n")

        config = load_config(path)
        assert config.game.seed == 5
        assert config.game.dealer_stand_total == 17
        assert config.simulation == SimulationConfig()

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == Config()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_unknown_key_rejected(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("game:\n  decks: 6\n")
        with pytest.raises(TypeError):
            load_config(path)


class TestLogLevel:
    """Test log level resolution."""

    def test_env_overrides_config(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
        assert resolve_level("ERROR") == logging.DEBUG

    def test_config_level(self, monkeypatch):
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
        assert resolve_level("info") == logging.INFO

    def test_default_level(self, monkeypatch):
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
        assert resolve_level() == logging.WARNING
