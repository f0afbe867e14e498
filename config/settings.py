"""Configuration settings for blackjack."""

from dataclasses import asdict, dataclass, field
from pathlib import Path

import yaml

AGENT_CHOICES = ("dealer", "random", "stand")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class GameConfig:
    """Game rules configuration."""

    dealer_stand_total: int = 17
    dealer_hits_soft_17: bool = True
    seed: int | None = None

    def __post_init__(self) -> None:
        if not 2 <= self.dealer_stand_total <= 21:
            raise ValueError(f"dealer_stand_total must be in [2, 21], got {self.dealer_stand_total}")


@dataclass
class SimulationConfig:
    """Automated play configuration."""

    num_games: int = 1000
    agent: str = "dealer"  # dealer, random, stand

    def __post_init__(self) -> None:
        if self.num_games < 1:
            raise ValueError(f"num_games must be positive, got {self.num_games}")
        if self.agent not in AGENT_CHOICES:
            raise ValueError(f"Unknown agent '{self.agent}', expected one of {', '.join(AGENT_CHOICES)}")


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"

    def __post_init__(self) -> None:
        self.level = self.level.upper()
        if self.level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level '{self.level}'")


@dataclass
class Config:
    """Complete configuration."""

    game: GameConfig = field(default_factory=GameConfig)
    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | Path) -> Config:
    """Load configuration from YAML file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    config = Config()

    if "game" in data:
        config.game = GameConfig(**data["game"])
    if "simulation" in data:
        config.simulation = SimulationConfig(**data["simulation"])
    if "logging" in data:
        config.logging = LoggingConfig(**data["logging"])

    return config


def save_config(config: Config, path: str | Path) -> None:
    """Save configuration to YAML file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "game": asdict(config.game),
        "simulation": asdict(config.simulation),
        "logging": asdict(config.logging),
    }

    with open(path, "w") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)


# Default configuration
DEFAULT_CONFIG = Config()
