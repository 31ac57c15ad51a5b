"""
Pydantic schemas for Cathedral game state, configuration and moves.
"""

from .game_config import GameConfig, GameSettingsModel, PlayerType
from .game_state import GameSnapshot, PlayerState, restore_game, snapshot_game
from .move import MoveRequest, Owner, PieceModel, Position

__all__ = [
    "GameConfig",
    "GameSettingsModel",
    "PlayerType",
    "GameSnapshot",
    "PlayerState",
    "restore_game",
    "snapshot_game",
    "MoveRequest",
    "Owner",
    "PieceModel",
    "Position"
]
