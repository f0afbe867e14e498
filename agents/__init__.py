"""Player agents for decision making."""

from agents.base import BaseAgent
from agents.random_agent import DealerMimicAgent, RandomAgent, StandAgent

__all__ = ["BaseAgent", "DealerMimicAgent", "RandomAgent", "StandAgent"]
