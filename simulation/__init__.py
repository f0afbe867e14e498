"""Simulation engine for running blackjack sessions."""

from simulation.runner import GameRunner, SessionResult

__all__ = ["GameRunner", "SessionResult"]
