"""
Random computer player for Cathedral that builds uniformly at random.
"""

from typing import Any, Dict, Optional

import numpy as np

from cathedral.board import Owner
from cathedral.game import CathedralGame
from cathedral.pieces import Building, Piece


class RandomComputer:
    """
    Computer player that selects moves uniformly at random.

    A random placeable building is chosen first, then a random legal
    placement of it. When the church is due to build, the cathedral is
    placed on its behalf.
    """

    player_id = "RandomComputer"

    def __init__(self, game: CathedralGame, owner: Owner, seed: Optional[int] = None):
        """
        Initialize random computer.

        Args:
            game: The game being played
            owner: The player owner, must be light or dark
            seed: Random seed for reproducible behavior
        """
        if not owner.is_player:
            raise ValueError("The church can't be a player")
        self.game = game
        self.owner = owner
        self.rng = np.random.RandomState(seed)

    @property
    def name(self) -> str:
        return "Random Computer"

    def next_move(self) -> Piece:
        """
        Determine the next random move.

        Raises:
            ValueError: If the game is over, it's the other player's turn,
                or there is no legal move

        Returns:
            The piece to build
        """
        next_owner = self.game.next_turn
        if next_owner is None:
            raise ValueError("The game is over")

        if next_owner is Owner.CHURCH:
            return self._random_placement(Owner.CHURCH, Building.CATHEDRAL)

        if next_owner is not self.owner:
            raise ValueError(f"Not {self.owner.display_name}'s turn")

        placeable = sorted(
            (b for b, can_build in self.game.unbuilt_buildings(self.owner).items() if can_build),
            key=lambda b: b.value,
        )
        if not placeable:
            raise ValueError(f"{self.owner.display_name} has no legal move")

        building = placeable[self.rng.randint(0, len(placeable))]
        return self._random_placement(self.owner, building)

    def _random_placement(self, owner: Owner, building: Building) -> Piece:
        legal_moves = self.game.move_generator.get_legal_moves(self.game, owner, building)
        if not legal_moves:
            raise ValueError(f"No legal placement for {owner.display_name} {building.display_name}")
        return legal_moves[self.rng.randint(0, len(legal_moves))]

    def get_action_info(self) -> Dict[str, Any]:
        """Get information about the player."""
        return {
            "name": self.name,
            "type": self.player_id,
            "description": "Builds a random placeable building at a random legal placement"
        }
