"""
Tests for turn order, game over detection and scoring.
"""

import unittest

from cathedral.board import Address, Board, Direction, Owner
from cathedral.game import CathedralGame, GameResult, GameSettings, IllegalMoveError
from cathedral.pieces import Building
from tests.utils_game_states import CATHEDRAL, build_state


class TestTurnOrder(unittest.TestCase):

    def test_church_builds_first(self):
        game = CathedralGame()
        self.assertEqual(game.next_turn, Owner.CHURCH)
        self.assertFalse(game.cathedral_built)

        game.place(Building.CATHEDRAL, Owner.CHURCH, Direction.NORTH, Address(4, 4))
        self.assertTrue(game.cathedral_built)
        self.assertEqual(game.next_turn, Owner.DARK)

        game.place(Building.TAVERN, Owner.DARK, Direction.NORTH, Address(0, 0))
        self.assertEqual(game.next_turn, Owner.LIGHT)
        game.place(Building.TAVERN, Owner.LIGHT, Direction.NORTH, Address(9, 9))
        self.assertEqual(game.next_turn, Owner.DARK)

    def test_delayed_cathedral(self):
        game = CathedralGame(GameSettings(delayed_cathedral=True))
        self.assertEqual(game.next_turn, Owner.DARK)

        game.place(Building.TAVERN, Owner.DARK, Direction.NORTH, Address(0, 0))
        self.assertEqual(game.next_turn, Owner.LIGHT)
        game.place(Building.TAVERN, Owner.LIGHT, Direction.NORTH, Address(9, 9))
        self.assertEqual(game.next_turn, Owner.CHURCH)
        with self.assertRaises(IllegalMoveError):
            game.place(Building.STABLE, Owner.DARK, Direction.NORTH, Address(5, 0))

        game.place(Building.CATHEDRAL, Owner.CHURCH, Direction.NORTH, Address(4, 4))
        self.assertEqual(game.next_turn, Owner.DARK)

    def test_settings_are_carried(self):
        settings = GameSettings(delayed_cathedral=True, auto_build=True)
        self.assertEqual(CathedralGame(settings).settings, settings)
        self.assertEqual(CathedralGame().settings, GameSettings())

    def test_player_without_moves_is_skipped(self):
        # Dark has only a square left and nowhere left to build it
        game = build_state([CATHEDRAL], next_turn=Owner.LIGHT, unbuilt={
            Owner.LIGHT: [Building.TAVERN, Building.STABLE],
            Owner.DARK: [Building.SQUARE],
        }, claimed={Owner.LIGHT: [
            a for a in Board().addresses()
            if a.row >= 2 and a not in CATHEDRAL.addresses()
        ] + [Address(col, 0) for col in range(0, 10, 2)]})
        self.assertFalse(game.can_make_move(Owner.DARK))

        game.place(Building.TAVERN, Owner.LIGHT, Direction.NORTH, Address(0, 9))
        self.assertEqual(game.next_turn, Owner.LIGHT)

        game.place(Building.STABLE, Owner.LIGHT, Direction.NORTH, Address(0, 0))
        self.assertIsNone(game.next_turn)
        self.assertTrue(game.is_over)


class TestGameOver(unittest.TestCase):
    """Test the winner calculation."""

    def test_no_result_while_moves_remain(self):
        self.assertIsNone(CathedralGame().calculate_winner())
        game = build_state([CATHEDRAL], next_turn=Owner.DARK)
        self.assertIsNone(game.calculate_winner())

    def test_tie(self):
        game = build_state([CATHEDRAL], next_turn=None, unbuilt={Owner.LIGHT: [], Owner.DARK: []})
        self.assertEqual(game.calculate_winner(), GameResult(None, 0))

    def test_lower_score_wins_with_losers_total(self):
        game = build_state([], next_turn=None,
                           unbuilt={Owner.LIGHT: [], Owner.DARK: [Building.TAVERN, Building.STABLE]},
                           claimed={Owner.LIGHT: list(Board().addresses())})
        self.assertEqual(game.scores(), {Owner.LIGHT: 0, Owner.DARK: 3})
        self.assertEqual(game.calculate_winner(), GameResult(Owner.LIGHT, 3))

    def test_equal_scores_are_a_tie(self):
        # Checkerboard territory leaves no two adjacent tiles for either player
        game = build_state([], next_turn=None,
                           unbuilt={Owner.LIGHT: [Building.BRIDGE], Owner.DARK: [Building.INN]},
                           claimed={
                               Owner.LIGHT: [a for a in Board().addresses() if (a.col + a.row) % 2 == 0],
                               Owner.DARK: [a for a in Board().addresses() if (a.col + a.row) % 2 == 1],
                           })
        self.assertEqual(game.scores(), {Owner.LIGHT: 3, Owner.DARK: 3})
        self.assertEqual(game.calculate_winner(), GameResult(None, 0))

    def test_own_territory_still_counts_as_a_move(self):
        game = build_state([], next_turn=Owner.LIGHT,
                           unbuilt={Owner.LIGHT: [Building.BRIDGE], Owner.DARK: [Building.INN]},
                           claimed={Owner.LIGHT: list(Board().addresses())})
        self.assertFalse(game.can_make_move(Owner.DARK))
        self.assertTrue(game.can_make_move(Owner.LIGHT))
        self.assertIsNone(game.calculate_winner())

    def test_player_score(self):
        game = CathedralGame()
        self.assertEqual(game.player_score(Owner.LIGHT), 41)
        self.assertEqual(game.player_score(Owner.DARK), 41)


class TestChurchQueries(unittest.TestCase):

    def test_church_has_no_inventory_or_score(self):
        game = CathedralGame()
        with self.assertRaises(ValueError):
            game.unbuilt_buildings(Owner.CHURCH)
        with self.assertRaises(ValueError):
            game.remaining_buildings(Owner.CHURCH)
        with self.assertRaises(ValueError):
            game.player_score(Owner.CHURCH)
        with self.assertRaises(ValueError):
            game.claimed_addresses(Owner.CHURCH)
        with self.assertRaises(ValueError):
            game.can_make_move(Owner.CHURCH)


if __name__ == '__main__':
    unittest.main()
