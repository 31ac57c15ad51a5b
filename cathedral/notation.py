"""Move log parsing and serialization.

A move log is one move per line. Each move is a 2 character building code,
a 1 character direction code and a 2 digit address (column then row), for
example ``TOw32`` for a tower facing west anchored at column 3, row 2. The
owner of a move is not recorded; it is implied by the turn order on replay.
"""
from __future__ import annotations

from typing import Iterable, List, Tuple

from .board import Address, Direction
from .pieces import Building, Piece

Move = Tuple[Building, Direction, Address]

BUILDINGS_BY_CODE = {building.code: building for building in Building}
DIRECTIONS_BY_CODE = {direction.code: direction for direction in Direction}

MOVE_LENGTH = 5


class LogParseError(ValueError):
    """Raised for a move log entry that can't be decoded."""


def parse_address(code: str) -> Address:
    """Convert a 2 digit address code (e.g. "32") to an Address."""
    if len(code) != 2 or not all(ch in "0123456789" for ch in code):
        raise LogParseError(f"Invalid address code '{code}'")
    return Address(int(code[0]), int(code[1]))


def parse_move(line: str) -> Move:
    """Decode a single move log entry into (building, direction, address)."""
    entry = line.strip()
    if len(entry) != MOVE_LENGTH:
        raise LogParseError(f"Invalid move '{entry}': expected {MOVE_LENGTH} characters")

    building = BUILDINGS_BY_CODE.get(entry[:2])
    if building is None:
        raise LogParseError(f"Invalid building code in move '{entry}'")
    direction = DIRECTIONS_BY_CODE.get(entry[2])
    if direction is None:
        raise LogParseError(f"Invalid direction code in move '{entry}'")
    return building, direction, parse_address(entry[3:])


def parse_log(text: str) -> List[Move]:
    moves: List[Move] = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            moves.append(parse_move(line))
        except LogParseError as e:
            raise LogParseError(f"line {line_number}: {e}") from e
    return moves


def format_move(building: Building, direction: Direction, address: Address) -> str:
    return f"{building.code}{direction.code}{address.code}"


def format_log(pieces: Iterable[Piece]) -> str:
    return "\n".join(format_move(p.building, p.direction, p.address) for p in pieces)
