"""
Player contracts for driving a Cathedral game.
"""

from __future__ import annotations

from typing import ClassVar, Protocol

from cathedral.pieces import Piece


class PlayerProtocol(Protocol):
    """
    Minimal player contract: an id, a display name, built with (game, owner).
    """

    player_id: ClassVar[str]

    @property
    def name(self) -> str:
        ...


class ComputerProtocol(PlayerProtocol, Protocol):
    """
    A player that picks its own moves.

    next_move() must only be called when the player has a legal move.
    """

    def next_move(self) -> Piece:
        ...
