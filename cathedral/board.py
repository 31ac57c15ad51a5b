"""
Cathedral board implementation with 10x10 grid and tile ownership state.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Iterator, List, Optional

import numpy as np

if TYPE_CHECKING:
    from .pieces import Piece


BOARD_SIZE = 10


class Owner(Enum):
    """Piece and territory owner enumeration."""
    LIGHT = 1
    DARK = 2
    CHURCH = 3

    @property
    def is_player(self) -> bool:
        """Whether this owner is a player (light or dark) rather than the church."""
        return self is not Owner.CHURCH

    @property
    def opponent(self) -> 'Owner':
        """The opposing player. Only player owners have opponents."""
        if self is Owner.LIGHT:
            return Owner.DARK
        if self is Owner.DARK:
            return Owner.LIGHT
        raise ValueError("Only player owners have opponents")

    @property
    def display_name(self) -> str:
        return self.name.capitalize()


PLAYER_OWNERS = (Owner.LIGHT, Owner.DARK)


# Rotation matrices acting on (col, row) column vectors.
_ROTATIONS = {
    0: np.array([[1, 0], [0, 1]], dtype=int),    # (c, r)
    1: np.array([[0, -1], [1, 0]], dtype=int),   # (-r, c)
    2: np.array([[-1, 0], [0, -1]], dtype=int),  # (-c, -r)
    3: np.array([[0, 1], [-1, 0]], dtype=int),   # (r, -c)
}


class Direction(Enum):
    """Cardinal direction a building faces."""
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @property
    def rotation(self) -> np.ndarray:
        """2x2 matrix mapping a north-facing (col, row) offset into this direction."""
        return _ROTATIONS[self.value]

    @property
    def is_sideways(self) -> bool:
        """East and west swap a building's width and height."""
        return self in (Direction.EAST, Direction.WEST)

    @property
    def code(self) -> str:
        """Single character log code."""
        return self.name[0].lower()

    @property
    def display_name(self) -> str:
        return self.name.capitalize()


CARDINAL_DIRECTIONS = tuple(Direction)


@dataclass(frozen=True)
class Address:
    """A (col, row) grid address. Off-board values are allowed transiently."""
    col: int
    row: int

    def neighbors(self) -> List['Address']:
        """The 8 king-move neighbors, clockwise from north. Not bounds-filtered."""
        col, row = self.col, self.row
        return [
            Address(col, row - 1),
            Address(col + 1, row - 1),
            Address(col + 1, row),
            Address(col + 1, row + 1),
            Address(col, row + 1),
            Address(col - 1, row + 1),
            Address(col - 1, row),
            Address(col - 1, row - 1),
        ]

    def rotated(self, direction: Direction) -> 'Address':
        """Rotate this offset from north into the given direction."""
        col, row = direction.rotation @ np.array((self.col, self.row))
        return Address(int(col), int(row))

    def translated(self, other: 'Address') -> 'Address':
        return Address(self.col + other.col, self.row + other.row)

    def is_on_board(self) -> bool:
        return 0 <= self.col < BOARD_SIZE and 0 <= self.row < BOARD_SIZE

    @property
    def code(self) -> str:
        """Two digit log code, column then row."""
        if not self.is_on_board():
            raise ValueError(f"Address {self} has no log code")
        return f"{self.col}{self.row}"

    def __str__(self) -> str:
        return f"{self.col:>2},{self.row:>2}"


@dataclass(frozen=True)
class Tile:
    """
    A single board tile.

    A tile with an owner but no piece is claimed territory; a tile with no
    owner is free.
    """
    owner: Optional[Owner] = None
    piece: Optional['Piece'] = None

    def __post_init__(self):
        if self.piece is not None and self.owner is not self.piece.owner:
            raise ValueError("Built tile must be owned by its piece's owner")

    @classmethod
    def built(cls, piece: 'Piece') -> 'Tile':
        return cls(owner=piece.owner, piece=piece)

    @property
    def is_built(self) -> bool:
        return self.piece is not None

    @property
    def is_free(self) -> bool:
        return self.owner is None

    @property
    def symbol(self) -> str:
        """Board picture symbol: upper case built, lower case claimed, '.' free."""
        if self.owner is None:
            return "."
        letter = self.owner.name[0]
        return letter if self.is_built else letter.lower()


class Board:
    """
    Cathedral game board.

    The board is a 10x10 grid where the ownership grid holds:
    - 0 for a free tile
    - 1-3 for the owning Owner (LIGHT, DARK, CHURCH)
    Built tiles additionally reference the piece standing on them.
    """

    SIZE = BOARD_SIZE

    def __init__(self):
        self.grid = np.zeros((self.SIZE, self.SIZE), dtype=int)
        self._pieces: List[List[Optional['Piece']]] = [
            [None] * self.SIZE for _ in range(self.SIZE)
        ]

    def is_valid_address(self, address: Address) -> bool:
        """Check if address is within board bounds."""
        return 0 <= address.col < self.SIZE and 0 <= address.row < self.SIZE

    def _check(self, address: Address) -> None:
        if not self.is_valid_address(address):
            raise IndexError(f"Address {address} is off the board")

    def __getitem__(self, address: Address) -> Tile:
        self._check(address)
        value = self.grid[address.row, address.col]
        owner = Owner(int(value)) if value else None
        return Tile(owner=owner, piece=self._pieces[address.row][address.col])

    def __setitem__(self, address: Address, tile: Tile) -> None:
        self._check(address)
        self.grid[address.row, address.col] = tile.owner.value if tile.owner else 0
        self._pieces[address.row][address.col] = tile.piece

    def owner_at(self, address: Address) -> Optional[Owner]:
        value = self.grid[address.row, address.col]
        return Owner(int(value)) if value else None

    def piece_at(self, address: Address) -> Optional['Piece']:
        return self._pieces[address.row][address.col]

    def is_built(self, address: Address) -> bool:
        return self._pieces[address.row][address.col] is not None

    def addresses(self) -> Iterator[Address]:
        """All on-board addresses, row by row."""
        for row in range(self.SIZE):
            for col in range(self.SIZE):
                yield Address(col, row)

    def rows(self) -> List[str]:
        """Each row as a string of tile symbols."""
        return [
            "".join(self[Address(col, row)].symbol for col in range(self.SIZE))
            for row in range(self.SIZE)
        ]

    def __str__(self) -> str:
        """Board picture with column header and row labels."""
        lines = [" " + "".join(f" {col}" for col in range(self.SIZE))]
        for row, symbols in enumerate(self.rows()):
            lines.append(str(row) + "".join(f" {symbol}" for symbol in symbols))
        return "\n".join(lines)
