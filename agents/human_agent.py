"""
Local human player whose moves arrive from the UI.
"""

from cathedral.board import Owner
from cathedral.game import CathedralGame, IllegalMoveError, PlacementResult
from schemas.move import MoveRequest


class LocalHuman:
    """A human playing on this device."""

    player_id = "LocalHuman"

    def __init__(self, game: CathedralGame, owner: Owner):
        if not owner.is_player:
            raise ValueError("The church can't be a player")
        self.game = game
        self.owner = owner

    @property
    def name(self) -> str:
        return self.owner.display_name

    def play(self, request: MoveRequest) -> PlacementResult:
        """
        Build the requested move for this player.

        Raises:
            IllegalMoveError: If it isn't this player's turn or the move is illegal
        """
        if self.game.next_turn is not self.owner:
            raise IllegalMoveError(f"Not {self.name}'s turn to build")
        return self.game.place(request.to_building(), self.owner,
                               request.to_direction(), request.to_address())
