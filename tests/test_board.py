"""
Tests for board geometry: owners, directions, addresses, tiles and the board grid.
"""

import unittest

import numpy as np

from cathedral.board import CARDINAL_DIRECTIONS, Address, Board, Direction, Owner, Tile
from cathedral.pieces import Building, Piece
from tests.utils_game_states import picture


class TestOwner(unittest.TestCase):

    def test_players_and_church(self):
        self.assertTrue(Owner.LIGHT.is_player)
        self.assertTrue(Owner.DARK.is_player)
        self.assertFalse(Owner.CHURCH.is_player)

    def test_opponents(self):
        self.assertEqual(Owner.LIGHT.opponent, Owner.DARK)
        self.assertEqual(Owner.DARK.opponent, Owner.LIGHT)
        with self.assertRaises(ValueError):
            Owner.CHURCH.opponent


class TestAddress(unittest.TestCase):
    """Test address neighbors and rotation."""

    def test_neighbors(self):
        neighbors = Address(5, 5).neighbors()
        self.assertEqual(len(neighbors), 8)
        self.assertEqual(set(neighbors), {
            Address(col, row)
            for col in (4, 5, 6) for row in (4, 5, 6)
            if (col, row) != (5, 5)
        })

    def test_neighbors_are_not_bounds_filtered(self):
        neighbors = Address(0, 0).neighbors()
        self.assertEqual(len(neighbors), 8)
        self.assertIn(Address(-1, -1), neighbors)
        self.assertEqual(sum(n.is_on_board() for n in neighbors), 3)

    def test_rotation_formulas(self):
        address = Address(2, 1)
        self.assertEqual(address.rotated(Direction.NORTH), Address(2, 1))
        self.assertEqual(address.rotated(Direction.EAST), Address(-1, 2))
        self.assertEqual(address.rotated(Direction.SOUTH), Address(-2, -1))
        self.assertEqual(address.rotated(Direction.WEST), Address(1, -2))

    def test_four_rotations_is_identity(self):
        for direction in CARDINAL_DIRECTIONS:
            address = Address(3, -2)
            for _ in range(4):
                address = address.rotated(direction)
            self.assertEqual(address, Address(3, -2), direction)

    def test_east_then_west_cancel(self):
        address = Address(1, 3)
        self.assertEqual(address.rotated(Direction.EAST).rotated(Direction.WEST), address)

    def test_on_board(self):
        self.assertTrue(Address(0, 0).is_on_board())
        self.assertTrue(Address(9, 9).is_on_board())
        self.assertFalse(Address(-1, 0).is_on_board())
        self.assertFalse(Address(0, 10).is_on_board())

    def test_code_and_description(self):
        self.assertEqual(Address(3, 2).code, "32")
        self.assertEqual(str(Address(3, 2)), " 3, 2")
        self.assertEqual(str(Address(-1, 10)), "-1,10")
        with self.assertRaises(ValueError):
            Address(-1, 0).code

    def test_hashable_by_value(self):
        self.assertEqual(len({Address(1, 2), Address(1, 2), Address(2, 1)}), 2)


class TestTile(unittest.TestCase):

    def test_free_tile(self):
        tile = Tile()
        self.assertTrue(tile.is_free)
        self.assertFalse(tile.is_built)
        self.assertEqual(tile.symbol, ".")

    def test_claimed_tile(self):
        tile = Tile(owner=Owner.DARK)
        self.assertFalse(tile.is_free)
        self.assertFalse(tile.is_built)
        self.assertEqual(tile.symbol, "d")

    def test_built_tile_takes_piece_owner(self):
        piece = Piece(Owner.LIGHT, Building.TAVERN, Direction.NORTH, Address(0, 0))
        tile = Tile.built(piece)
        self.assertEqual(tile.owner, Owner.LIGHT)
        self.assertTrue(tile.is_built)
        self.assertEqual(tile.symbol, "L")

    def test_built_tile_owner_must_match(self):
        piece = Piece(Owner.LIGHT, Building.TAVERN, Direction.NORTH, Address(0, 0))
        with self.assertRaises(ValueError):
            Tile(owner=Owner.DARK, piece=piece)


class TestBoard(unittest.TestCase):
    """Test the Board class."""

    def test_board_initialization(self):
        board = Board()
        self.assertEqual(board.grid.shape, (10, 10))
        self.assertTrue(np.all(board.grid == 0))
        self.assertTrue(all(board[a].is_free for a in board.addresses()))
        self.assertEqual(len(list(board.addresses())), 100)

    def test_empty_board_picture(self):
        self.assertEqual(str(Board()), picture("""
              0 1 2 3 4 5 6 7 8 9
            0 . . . . . . . . . .
            1 . . . . . . . . . .
            2 . . . . . . . . . .
            3 . . . . . . . . . .
            4 . . . . . . . . . .
            5 . . . . . . . . . .
            6 . . . . . . . . . .
            7 . . . . . . . . . .
            8 . . . . . . . . . .
            9 . . . . . . . . . .
        """))

    def test_set_and_get_tile(self):
        board = Board()
        piece = Piece(Owner.DARK, Building.TAVERN, Direction.NORTH, Address(4, 2))
        board[Address(4, 2)] = Tile.built(piece)
        board[Address(5, 2)] = Tile(owner=Owner.LIGHT)

        self.assertEqual(board[Address(4, 2)], Tile(Owner.DARK, piece))
        self.assertEqual(board.piece_at(Address(4, 2)), piece)
        self.assertEqual(board.owner_at(Address(5, 2)), Owner.LIGHT)
        self.assertFalse(board.is_built(Address(5, 2)))
        self.assertEqual(board.grid[2, 4], Owner.DARK.value)
        self.assertEqual(board.rows()[2], "....Dl....")

    def test_off_board_access_raises(self):
        board = Board()
        with self.assertRaises(IndexError):
            board[Address(10, 0)]
        with self.assertRaises(IndexError):
            board[Address(0, -1)] = Tile()


if __name__ == '__main__':
    unittest.main()
