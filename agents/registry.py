"""
Player registry for Cathedral.
"""

from __future__ import annotations

from typing import Optional, Union

from agents.gameplay_protocol import PlayerProtocol
from agents.human_agent import LocalHuman
from agents.random_agent import RandomComputer
from cathedral.board import Owner
from cathedral.game import CathedralGame
from schemas.game_config import GameConfig, PlayerType


def build_player(kind: Union[PlayerType, str], game: CathedralGame, owner: Owner,
                 seed: Optional[int] = None) -> PlayerProtocol:
    try:
        kind = PlayerType(kind)
    except ValueError:
        raise ValueError(f"Unknown player type: {kind}") from None

    if kind is PlayerType.LOCAL_HUMAN:
        return LocalHuman(game, owner)
    if kind is PlayerType.RANDOM_COMPUTER:
        return RandomComputer(game, owner, seed=seed)
    raise ValueError(f"Unknown player type: {kind}")


def build_players(config: GameConfig, game: CathedralGame, seed: Optional[int] = None):
    """Build the (light, dark) players described by a game config."""
    light = build_player(config.light_player, game, Owner.LIGHT, seed=seed)
    dark = build_player(config.dark_player, game, Owner.DARK,
                        seed=None if seed is None else seed + 1)
    return light, dark
