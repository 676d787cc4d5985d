"""
Tests for the game orchestrator.

These tests verify:
- Dealing private and community cards
- The pot goes to the showdown winner
- Rounds end early when everyone else folds
- Seeded games are reproducible
"""

import pytest
from holdem.agents.random_agent import CallAgent
from holdem.config import GameSettings
from holdem.core.game import TexasHoldemGame
from holdem.core.rules import BetState, GamePhase
from holdem.core.showdown import resolve_showdown


def call_agents(n):
    return [CallAgent(str(i)) for i in range(n)]


class TestGameSetup:
    """Tests for game initialization."""

    def test_players_created(self, three_player_settings):
        game = TexasHoldemGame(three_player_settings)
        assert game.num_players == 3
        assert all(p.chips == 1000 for p in game.players)
        assert game.human.is_human
        assert not game.players[1].is_human
        assert game.phase == GamePhase.WAITING

    def test_default_settings(self):
        game = TexasHoldemGame()
        assert game.num_players == 5
        assert game.human.chips == 1000

    def test_agents_must_match_players(self, three_player_settings):
        with pytest.raises(ValueError):
            TexasHoldemGame(three_player_settings, agents=call_agents(2))


class TestPlayRound:
    """Tests for a full round."""

    def test_cards_dealt(self, three_player_settings):
        game = TexasHoldemGame(three_player_settings, agents=call_agents(3))
        game.play_round()

        assert all(len(p.cards) == 2 for p in game.players)
        assert len(game.community_cards) == 5
        # Two private cards each, three burns, five community cards
        assert game.deck.remaining == 52 - 2 * 3 - 3 - 5

        dealt = [c for p in game.players for c in p.cards] + game.community_cards
        assert len(set(dealt)) == len(dealt)

    def test_round_recorded(self, three_player_settings):
        game = TexasHoldemGame(three_player_settings, agents=call_agents(3))
        result = game.play_round()

        assert game.round_number == 1
        assert game.history == [result]
        assert game.phase == GamePhase.ROUND_OVER
        assert len(result.scores) == 3

    def test_winner_matches_showdown(self, three_player_settings):
        game = TexasHoldemGame(three_player_settings, agents=call_agents(3))
        result = game.play_round()
        assert result.winner == resolve_showdown(result.scores, result.bets)

    def test_pot_goes_to_winner(self, three_player_settings, scripted):
        agents = [scripted("0", [50]), scripted("1"), scripted("2")]
        game = TexasHoldemGame(three_player_settings, agents=agents)
        result = game.play_round()

        assert result.pot == 150
        assert game.players[result.winner].chips == 1100
        assert sum(p.chips for p in game.players) == 3000

    def test_everyone_else_folds(self, three_player_settings, scripted):
        agents = [scripted("0", [10]), scripted("1", [-1]), scripted("2", [-1])]
        game = TexasHoldemGame(three_player_settings, agents=agents)
        result = game.play_round()

        assert result.winner == 0
        assert result.showdown.decided_by == "fold"
        assert result.pot == 10
        assert game.community_cards == []
        assert game.human.chips == 1000
        # No further betting rounds once a single player is left
        assert [len(a.views) for a in agents] == [1, 1, 1]

    def test_folded_players_stay_out(self, three_player_settings, scripted):
        agents = [scripted("0"), scripted("1", [-1]), scripted("2")]
        game = TexasHoldemGame(three_player_settings, agents=agents)
        result = game.play_round()

        assert len(agents[1].views) == 1
        assert len(agents[0].views) == 4
        assert result.winner != 1
        assert result.bets[1].is_folded

    def test_starting_better_rotates(self, three_player_settings, scripted):
        agents = [scripted(str(i)) for i in range(3)]
        game = TexasHoldemGame(three_player_settings, agents=agents)
        game.play_round()
        assert agents[0].views[0].players_visited == 0

        game.play_round()
        # Round two starts with seat 1
        assert agents[1].views[4].players_visited == 0
        assert agents[0].views[4].players_visited == 2

    def test_events(self, three_player_settings):
        events = []
        game = TexasHoldemGame(
            three_player_settings,
            agents=call_agents(3),
            on_event=lambda name, details: events.append(name),
        )
        game.play_round()

        assert events[0] == "deal"
        for name in ("flop", "turn", "river", "bets_in"):
            assert name in events
        assert events.index("flop") < events.index("turn") < events.index("river")
        assert events[-1] == "showdown"


class TestShowdown:
    """Tests for pot award at showdown."""

    def test_tie_goes_to_first_tied_player(self, three_player_settings, cards):
        game = TexasHoldemGame(three_player_settings, agents=call_agents(3))
        game.round_number = 1
        game.community_cards = cards("2s 4d 6c Jh Ks")
        game.players[0].cards = cards("9h 8c")
        game.players[1].cards = cards("9c 8h")
        game.players[2].cards = cards("Qh Qd")
        game.bets = [BetState.bet(20), BetState.bet(20), BetState.folded()]
        game.pot = 60

        result = game._showdown()

        assert result.showdown.tied == [0, 1]
        assert result.winner == 0
        assert game.players[0].chips == 1060


class TestGameState:
    """Tests for game state and game over."""

    def test_is_over(self, three_player_settings):
        game = TexasHoldemGame(three_player_settings)
        assert not game.is_over
        game.human.chips = 0
        assert game.is_over

    def test_state_hides_other_cards(self, three_player_settings):
        game = TexasHoldemGame(three_player_settings, agents=call_agents(3))
        game.play_round()
        state = game.get_state(for_seat=0)

        assert state["round"] == 1
        assert "cards" in state["players"][0]
        assert "cards" not in state["players"][1]
        assert len(state["board"]) == 5

    def test_seeded_games_match(self):
        settings = GameSettings(num_players=4, starting_chips=500, seed=11)
        game1 = TexasHoldemGame(settings)
        game2 = TexasHoldemGame(settings)

        for _ in range(3):
            assert game1.play_round().to_dict() == game2.play_round().to_dict()
        assert [p.chips for p in game1.players] == [p.chips for p in game2.players]
