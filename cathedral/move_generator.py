"""
Legal move generator for the Cathedral game.
"""

import logging
import os
import time
from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional

from .board import CARDINAL_DIRECTIONS, Owner
from .pieces import Building, Piece

if TYPE_CHECKING:
    from .game import CathedralGame

logger = logging.getLogger(__name__)

# Debug flag for move generation timing (controlled via environment variable)
MOVEGEN_DEBUG = bool(os.getenv("CATHEDRAL_MOVEGEN_DEBUG", ""))


class LegalMoveGenerator:
    """
    Generates legal placements by scanning every board address and direction.

    Legality of a single placement is decided by CathedralGame.can_place;
    this class only enumerates the 100 x 4 candidates per building.
    """

    def iter_legal_moves(self, game: 'CathedralGame', owner: Owner,
                         building: Building) -> Iterator[Piece]:
        """Yield every legal placement of one building, row by row."""
        for address in game.board.addresses():
            for direction in CARDINAL_DIRECTIONS:
                if game.can_place(building, owner, direction, address):
                    yield Piece(owner, building, direction, address)

    def has_legal_move(self, game: 'CathedralGame', owner: Owner, building: Building) -> bool:
        """Whether the building can be placed anywhere on the board."""
        return next(self.iter_legal_moves(game, owner, building), None) is not None

    def has_legal_moves(self, game: 'CathedralGame', owner: Owner,
                        buildings: Optional[Iterable[Building]] = None) -> bool:
        """Whether any of the owner's remaining buildings can be placed."""
        if buildings is None:
            buildings = self._candidate_buildings(game, owner)
        return any(self.has_legal_move(game, owner, building) for building in buildings)

    def get_legal_moves(self, game: 'CathedralGame', owner: Owner,
                        building: Optional[Building] = None) -> List[Piece]:
        """
        Get all legal placements for an owner.

        Args:
            game: Current game state
            owner: Owner to generate placements for
            building: Restrict to one building (default: all remaining buildings)

        Returns:
            List of legal placements as pieces
        """
        start = time.perf_counter()
        buildings = [building] if building is not None else self._candidate_buildings(game, owner)

        legal_moves: List[Piece] = []
        for candidate in buildings:
            legal_moves.extend(self.iter_legal_moves(game, owner, candidate))

        elapsed_ms = (time.perf_counter() - start) * 1000.0
        if MOVEGEN_DEBUG:
            logger.info(f"MoveGen: owner={owner.name}, buildings={len(buildings)}, "
                        f"legal_moves={len(legal_moves)}, elapsed_ms={elapsed_ms:.2f}")
        logger.debug(f"Legal move generation: {len(legal_moves)} moves for owner={owner.name}")
        return legal_moves

    @staticmethod
    def _candidate_buildings(game: 'CathedralGame', owner: Owner) -> List[Building]:
        if owner is Owner.CHURCH:
            return [] if game.cathedral_built else [Building.CATHEDRAL]
        return sorted(game.remaining_buildings(owner), key=lambda b: b.value)
