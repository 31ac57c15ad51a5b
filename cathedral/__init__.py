"""
Cathedral game engine package.

This package contains the core rules for Cathedral, including:
- Board, tile and address geometry
- Building catalog and per-owner footprints
- Legal move generation
- Territory capture, turn order and scoring
- Move log notation and replay
"""

from .board import CARDINAL_DIRECTIONS, Address, Board, Direction, Owner, Tile
from .game import (
    CathedralGame, GameResult, GameSettings, IllegalMoveError,
    PlacementResult, RegionClaim,
)
from .move_generator import LegalMoveGenerator
from .notation import LogParseError, format_log, parse_log, parse_move
from .pieces import PLAYER_BUILDINGS, Building, Piece

__all__ = [
    'Address', 'Board', 'Direction', 'Owner', 'Tile', 'CARDINAL_DIRECTIONS',
    'Building', 'Piece', 'PLAYER_BUILDINGS',
    'LegalMoveGenerator',
    'CathedralGame', 'GameResult', 'GameSettings', 'IllegalMoveError',
    'PlacementResult', 'RegionClaim',
    'LogParseError', 'format_log', 'parse_log', 'parse_move',
]
