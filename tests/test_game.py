"""Tests for game flow and outcome resolution (blackjack/game.py)."""

import pytest

from agents.base import BaseAgent
from agents.random_agent import DealerMimicAgent, StandAgent
from blackjack.cards import NUM_CARDS, Deck, OutOfCardsError
from blackjack.game import (
    BlackjackGame,
    GameAbortedError,
    GameNotOverError,
    GameOverError,
    GameStatus,
    Outcome,
)
from blackjack.hand import Hand
from blackjack.table import Action
from tests.helpers.card_utils import make_cards_from_strings, make_game


class TestNewGame:
    """Test game construction and the opening deal."""

    def test_initial_state(self, seeded_game):
        assert seeded_game.status == GameStatus.ACTIVE
        assert not seeded_game.done
        assert len(seeded_game.deck) == NUM_CARDS
        assert len(seeded_game.player) == 0
        assert len(seeded_game.dealer) == 0

    def test_deck_is_shuffled(self, seeded_game):
        assert list(seeded_game.deck) != list(Deck(seed=0))

    def test_same_seed_same_deck(self):
        assert list(BlackjackGame(seed=11).deck) == list(BlackjackGame(seed=11).deck)

    def test_opening_deal_alternates(self):
        game = make_game(player=["Ts", "9h"], dealer=["2s", "3d"], draws=["4c"])
        assert game.player.cards == tuple(make_cards_from_strings(["Ts", "9h"]))
        assert game.dealer.cards == tuple(make_cards_from_strings(["2s", "3d"]))
        assert game.player.total == 19
        assert game.dealer.total == 5
        assert len(game.deck) == 1

    def test_opening_deal_only_once(self):
        game = make_game(player=["Ts", "9h"], dealer=["2s", "3d"], draws=["4c", "5c", "6c", "7c"])
        with pytest.raises(RuntimeError):
            game.deal_opening()


class TestHit:
    """Test dealing single cards."""

    def test_hit_appends_and_rescores(self):
        game = make_game(player=["As", "5h"], dealer=["Kd", "7c"], draws=["Kh"])
        assert (game.player.total, game.player.soft) == (16, True)

        card = game.hit(game.player)

        assert str(card) == "K♥"
        assert len(game.player) == 3
        assert (game.player.total, game.player.soft) == (16, False)
        assert not game.done

    def test_hit_dealer_hand(self):
        game = make_game(player=["Ts", "9h"], dealer=["2s", "3d"], draws=["4c"])
        game.hit(game.dealer)
        assert game.dealer.total == 9

    def test_hit_foreign_hand_rejected(self, seeded_game):
        with pytest.raises(ValueError):
            seeded_game.hit(Hand())

    def test_hit_empty_deck_raises(self):
        game = make_game(player=["Ts", "2h"], dealer=["Kd", "7c"])
        with pytest.raises(OutOfCardsError):
            game.hit_player()
        assert len(game.player) == 2

    def test_player_bust_resolves_game(self):
        game = make_game(player=["Ts", "6h"], dealer=["Kd", "7c"], draws=["9s", "2c"])

        game.hit_player()

        assert game.player.total == 25
        assert game.done
        assert game.status == GameStatus.RESOLVED
        # Dealer does not draw on a player bust
        assert len(game.dealer) == 2
        assert len(game.deck) == 1
        assert game.result() == Outcome.PLAYER_BUST

    def test_no_hits_after_resolution(self):
        game = make_game(player=["Ts", "9h"], dealer=["Kd", "7c"], draws=["2c"])
        game.stand()
        with pytest.raises(GameOverError):
            game.hit_player()
        with pytest.raises(GameOverError):
            game.hit(game.dealer)
        assert len(game.deck) == 1

    def test_no_stand_after_bust(self):
        game = make_game(player=["Ts", "6h"], dealer=["Kd", "7c"], draws=["9s"])
        game.hit_player()
        with pytest.raises(GameOverError):
            game.stand()


class TestStand:
    """Test dealer resolution."""

    def test_dealer_hits_soft_17(self):
        game = make_game(player=["Ts", "9h"], dealer=["As", "6d"], draws=["Kc", "2c"])

        game.stand()

        assert game.done
        assert len(game.dealer) == 3
        assert (game.dealer.total, game.dealer.soft) == (17, False)
        assert len(game.deck) == 1

    def test_dealer_stands_on_hard_17(self):
        game = make_game(player=["Ts", "9h"], dealer=["Kd", "7d"], draws=["5c"])
        game.stand()
        assert len(game.dealer) == 2
        assert game.dealer.total == 17
        assert len(game.deck) == 1

    def test_dealer_stands_on_soft_17_when_configured(self):
        game = make_game(
            player=["Ts", "9h"],
            dealer=["As", "6d"],
            draws=["Kc"],
            dealer_hits_soft_17=False,
        )
        game.stand()
        assert len(game.dealer) == 2
        assert game.result() == Outcome.PLAYER_WIN

    def test_dealer_draws_until_17(self):
        game = make_game(player=["Ts", "9h"], dealer=["2s", "3d"], draws=["4c", "5h", "2h", "3h", "Kc"])

        game.stand()

        assert [str(c) for c in game.dealer] == ["2♠", "3♦", "4♣", "5♥", "2♥", "3♥"]
        assert game.dealer.total == 19
        assert len(game.deck) == 1

    def test_stand_without_cards_left_aborts(self):
        game = make_game(player=["Ts", "9h"], dealer=["2s", "3d"])
        with pytest.raises(OutOfCardsError):
            game.stand()

        assert game.done
        assert game.status == GameStatus.ABORTED
        assert game.table_state().valid_actions == []
        with pytest.raises(GameAbortedError):
            game.result()
        with pytest.raises(GameOverError):
            game.hit_player()

    def test_deck_runs_out_mid_draw(self):
        game = make_game(player=["Ts", "9h"], dealer=["2s", "3d"], draws=["4c", "5h"])
        with pytest.raises(OutOfCardsError):
            game.stand()
        assert game.dealer.total == 14
        with pytest.raises(GameAbortedError):
            game.result()


class TestResult:
    """Test outcome classification."""

    def test_result_before_resolution(self, seeded_game):
        with pytest.raises(GameNotOverError):
            seeded_game.result()

    def test_dealer_bust(self):
        game = make_game(player=["Ts", "2h"], dealer=["Kd", "6c"], draws=["8s"])
        game.stand()
        assert game.dealer.total == 24
        assert game.result() == Outcome.PLAYER_WIN_DEALER_BUST

    def test_blackjack_push(self):
        game = make_game(player=["As", "Kh"], dealer=["Ad", "Qc"], draws=["2c"])
        game.stand()
        assert len(game.dealer) == 2
        assert game.result() == Outcome.BLACKJACK_PUSH

    def test_three_card_21_push_uses_blackjack_case(self):
        game = make_game(player=["7s", "7h"], dealer=["Kd", "4c"], draws=["7d", "7c"])
        game.hit_player()
        game.stand()
        assert game.player.total == 21
        assert game.dealer.total == 21
        assert game.result() == Outcome.BLACKJACK_PUSH

    def test_dealer_higher(self):
        game = make_game(player=["Ts", "7h"], dealer=["Kd", "9c"])
        game.stand()
        assert game.result() == Outcome.DEALER_WIN

    def test_player_higher(self):
        game = make_game(player=["Ts", "Kh"], dealer=["Kd", "8c"])
        game.stand()
        assert game.result() == Outcome.PLAYER_WIN

    def test_equal_totals_push(self):
        game = make_game(player=["Ts", "8h"], dealer=["Kd", "8c"])
        game.stand()
        assert game.result() == Outcome.PUSH

    def test_result_is_repeatable(self):
        game = make_game(player=["Ts", "8h"], dealer=["Kd", "8c"])
        game.stand()
        assert game.result() == game.result() == Outcome.PUSH

    @pytest.mark.parametrize(
        "outcome,message,score",
        [
            (Outcome.PLAYER_WIN_DEALER_BUST, "You win! Dealer bust.", 1),
            (Outcome.BLACKJACK_PUSH, "You both hit blackjack! You Tie.", 0),
            (Outcome.PLAYER_BUST, "You lose! You bust.", -1),
            (Outcome.DEALER_WIN, "You lose! Dealer has a higher score.", -1),
            (Outcome.PLAYER_WIN, "You win! You have a higher score.", 1),
            (Outcome.PUSH, "Push. You have the same score as the dealer.", 0),
        ],
    )
    def test_outcome_messages(self, outcome, message, score):
        assert str(outcome) == message
        assert outcome.score == score


class _ScriptedAgent(BaseAgent):
    def __init__(self, actions) -> None:
        super().__init__("Scripted")
        self.actions = list(actions)
        self.seen = []

    def decide(self, table_state):
        self.seen.append(table_state)
        return self.actions.pop(0)


class TestPlay:
    """Test complete games driven by an agent."""

    def test_dealer_mimic_hits_to_17(self):
        game = BlackjackGame(deck=Deck.from_cards(make_cards_from_strings(["Ts", "Kd", "6h", "7c", "5c"])))

        result = game.play(DealerMimicAgent())

        assert result.player_total == 21
        assert result.dealer_total == 17
        assert result.player_hits == 1
        assert result.outcome == Outcome.PLAYER_WIN
        assert len(result.player_cards) == 3

    def test_stand_agent(self):
        game = BlackjackGame(deck=Deck.from_cards(make_cards_from_strings(["Ts", "Kd", "6h", "9c"])))
        result = game.play(StandAgent())
        assert result.player_hits == 0
        assert result.outcome == Outcome.DEALER_WIN

    def test_agent_sees_valid_actions(self):
        game = make_game(player=["Ts", "6h"], dealer=["Kd", "7c"], draws=["2c", "3c"])
        agent = _ScriptedAgent([Action.HIT, Action.STAND])

        result = game.play(agent)

        assert [s.valid_actions for s in agent.seen] == [[Action.HIT, Action.STAND]] * 2
        assert agent.seen[0].player.total == 16
        assert agent.seen[1].player.total == 18
        assert result.outcome == Outcome.PLAYER_WIN

    def test_play_stops_on_bust(self):
        game = make_game(player=["Ts", "6h"], dealer=["Kd", "7c"], draws=["9s"])
        result = game.play(_ScriptedAgent([Action.HIT]))
        assert result.outcome == Outcome.PLAYER_BUST
        assert result.dealer_total == 17

    def test_invalid_action_stands(self):
        game = make_game(player=["Ts", "9h"], dealer=["Kd", "7c"])
        result = game.play(_ScriptedAgent([None]))
        assert game.done
        assert result.outcome == Outcome.PLAYER_WIN

    def test_table_state_after_resolution(self):
        game = make_game(player=["Ts", "9h"], dealer=["Kd", "7c"])
        game.stand()
        state = game.table_state()
        assert state.done
        assert state.valid_actions == []
        assert str(state.dealer) == "K♦, 7♣"
        assert str(state.dealer_upcard) == "K♦"

    def test_seeded_games_complete(self, seed):
        result = BlackjackGame(seed=seed).play(DealerMimicAgent())
        assert result.player_total >= 17
        assert result.outcome in Outcome
