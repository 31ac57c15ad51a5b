"""
Game state snapshot schemas
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from cathedral.board import PLAYER_OWNERS
from cathedral.game import CathedralGame
from cathedral.notation import BUILDINGS_BY_CODE

from .game_config import GameSettingsModel
from .move import Owner, PieceModel, Position


class PlayerState(BaseModel):
    """A player's inventory and territory."""
    owner: Owner
    unbuilt: List[str] = Field(description="Codes of buildings not yet built")
    claimed: List[Position] = Field(description="Claimed but unbuilt addresses")
    score: int = Field(ge=0, description="Total size of unbuilt buildings")


class GameSnapshot(BaseModel):
    """Full state of a game."""
    settings: GameSettingsModel
    board: List[str] = Field(description="10 rows of tile symbols")
    players: List[PlayerState] = Field(min_length=2, max_length=2)
    built_pieces: List[PieceModel]
    build_history: List[PieceModel]
    cathedral_built: bool
    next_turn: Optional[Owner] = None
    log: str = Field(description="Move log, one move per line")

    def player(self, owner: Owner) -> PlayerState:
        for state in self.players:
            if state.owner == owner:
                return state
        raise ValueError(f"No state for {owner.value}")


def snapshot_game(game: CathedralGame) -> GameSnapshot:
    """Capture the complete state of a game."""
    players = []
    for owner in PLAYER_OWNERS:
        players.append(PlayerState(
            owner=Owner.from_engine(owner),
            unbuilt=sorted(b.code for b in game.remaining_buildings(owner)),
            claimed=[Position.from_address(a) for a in sorted(
                game.claimed_addresses(owner), key=lambda a: (a.row, a.col))],
            score=game.player_score(owner),
        ))

    history = game.build_history
    built = sorted(game.built_pieces, key=history.index)
    return GameSnapshot(
        settings=GameSettingsModel.from_settings(game.settings),
        board=game.board.rows(),
        players=players,
        built_pieces=[PieceModel.from_piece(p) for p in built],
        build_history=[PieceModel.from_piece(p) for p in history],
        cathedral_built=game.cathedral_built,
        next_turn=Owner.from_engine(game.next_turn) if game.next_turn else None,
        log=game.log,
    )


def restore_game(snapshot: GameSnapshot) -> CathedralGame:
    """
    Rebuild a game from a snapshot.

    Raises:
        ValueError: If the snapshot is inconsistent
    """
    unbuilt = {}
    claimed = {}
    for owner in PLAYER_OWNERS:
        state = snapshot.player(Owner.from_engine(owner))
        for code in state.unbuilt:
            if code not in BUILDINGS_BY_CODE:
                raise ValueError(f"Unknown building code '{code}'")
        unbuilt[owner] = [BUILDINGS_BY_CODE[code] for code in state.unbuilt]
        claimed[owner] = [position.to_address() for position in state.claimed]

    game = CathedralGame.restore(
        snapshot.settings.to_settings(),
        unbuilt=unbuilt,
        built_pieces=[p.to_piece() for p in snapshot.built_pieces],
        build_history=[p.to_piece() for p in snapshot.build_history],
        cathedral_built=snapshot.cathedral_built,
        claimed=claimed,
        next_turn=snapshot.next_turn.to_engine() if snapshot.next_turn else None,
    )
    if game.board.rows() != snapshot.board:
        raise ValueError("Snapshot board doesn't match its pieces and claims")
    return game
