"""Shared pytest fixtures for blackjack tests."""

from random import Random

import pytest

from blackjack.cards import Deck
from blackjack.game import BlackjackGame


@pytest.fixture
def rng():
    """Provide a reproducible random source."""
    return Random(42)


@pytest.fixture
def fresh_deck():
    """An unshuffled 52-card deck."""
    return Deck(seed=0)


@pytest.fixture
def seeded_game(rng):
    """A shuffled game with no cards dealt yet."""
    return BlackjackGame(rng=rng)


@pytest.fixture(params=[0, 1, 7, 123])
def seed(request):
    """Parametrize over a handful of seeds."""
    return request.param
