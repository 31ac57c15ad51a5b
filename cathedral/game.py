"""
Main Cathedral game engine: placement, territory capture, turn order and scoring.
"""

import logging
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, NamedTuple, Optional, Set

from .board import PLAYER_OWNERS, Address, Board, Direction, Owner, Tile
from .move_generator import LegalMoveGenerator
from .notation import LogParseError, format_log, parse_log
from .pieces import PLAYER_BUILDINGS, Building, Piece

logger = logging.getLogger(__name__)

# Captures are not evaluated until more than this many pieces have been built,
# so the cathedral and each player's opening piece never trigger one.
CAPTURE_EXEMPT_BUILDS = 3


class IllegalMoveError(ValueError):
    """Raised when a caller places out of turn or places an illegal building."""


@dataclass(frozen=True)
class GameSettings:
    """
    Per-game rule settings, fixed at game creation.

    Attributes:
        delayed_cathedral: The church places the cathedral after both players'
            opening pieces instead of first
        auto_build: Reserved for callers that auto-complete the last builds;
            carried with the game but not acted on by the engine
    """
    delayed_cathedral: bool = False
    auto_build: bool = False


class PlacementResult(NamedTuple):
    """Tiles newly claimed and opponent pieces destroyed by a placement."""
    claimed: FrozenSet[Address]
    destroyed: FrozenSet[Piece]


class GameResult(NamedTuple):
    """Winner (None on a tie) and the losing player's remaining building total."""
    winner: Optional[Owner]
    score: int


@dataclass(frozen=True)
class RegionClaim:
    """Outcome of an enclosure search from one starting tile."""
    success: bool
    claimed: FrozenSet[Address] = frozenset()
    destroyed: Optional[Piece] = None


FAILED_CLAIM = RegionClaim(success=False)


class CathedralGame:
    """
    Main Cathedral game engine.

    Owns the board, both players' unbuilt inventories, claimed territory,
    build history and the turn pointer. All mutation goes through place().
    """

    def __init__(self, settings: Optional[GameSettings] = None):
        self.settings = settings or GameSettings()
        self.board = Board()
        self.move_generator = LegalMoveGenerator()
        self._unbuilt: Dict[Owner, Set[Building]] = {
            owner: set(PLAYER_BUILDINGS) for owner in PLAYER_OWNERS
        }
        self._claimed: Dict[Owner, Set[Address]] = {owner: set() for owner in PLAYER_OWNERS}
        self._built_pieces: Set[Piece] = set()
        self._build_history: List[Piece] = []
        self.cathedral_built = False
        self.next_turn: Optional[Owner] = (
            Owner.DARK if self.settings.delayed_cathedral else Owner.CHURCH
        )

    @classmethod
    def from_log(cls, log: str, settings: Optional[GameSettings] = None) -> Optional['CathedralGame']:
        """
        Replay a move log from an empty game.

        The owner of each move is whoever is next to move. Returns None if the
        log is malformed or continues after the game has ended. A well-formed
        move that is illegal raises IllegalMoveError.
        """
        try:
            moves = parse_log(log)
        except LogParseError as e:
            logger.warning(f"Rejected move log: {e}")
            return None

        game = cls(settings)
        for line_number, (building, direction, address) in enumerate(moves, start=1):
            owner = game.next_turn
            if owner is None:
                logger.warning(f"Rejected move log: move {line_number} follows the end of the game")
                return None
            game.place(building, owner, direction, address)
        return game

    @classmethod
    def restore(cls, settings: GameSettings, *,
                unbuilt: Dict[Owner, Iterable[Building]],
                built_pieces: Iterable[Piece],
                build_history: Iterable[Piece],
                cathedral_built: bool,
                claimed: Dict[Owner, Iterable[Address]],
                next_turn: Optional[Owner]) -> 'CathedralGame':
        """
        Rebuild a game from a full state snapshot.

        The board is re-stamped from the built pieces and claimed addresses.

        Raises:
            ValueError: If the state is internally inconsistent
        """
        game = cls(settings)
        game.cathedral_built = cathedral_built
        game.next_turn = next_turn
        game._build_history = list(build_history)

        for owner in PLAYER_OWNERS:
            buildings = set(unbuilt.get(owner, ()))
            if Building.CATHEDRAL in buildings:
                raise ValueError("The cathedral can't be in a player's inventory")
            game._unbuilt[owner] = buildings

        if cathedral_built != any(p.owner is Owner.CHURCH for p in game._build_history):
            raise ValueError("Cathedral flag doesn't match the build history")

        for piece in built_pieces:
            if piece not in game._build_history:
                raise ValueError(f"Built piece {piece} missing from build history")
            if piece.owner.is_player:
                if piece.building in game._unbuilt[piece.owner]:
                    raise ValueError(f"Built piece {piece} is still in its owner's inventory")
                if any(p.owner is piece.owner and p.building is piece.building
                       for p in game._built_pieces):
                    raise ValueError(f"{piece.owner.display_name} has two {piece.building.display_name} pieces built")
            for address in piece.addresses():
                if not game.board.is_valid_address(address) or game.board.owner_at(address) is not None:
                    raise ValueError(f"Built piece {piece} overlaps another tile or leaves the board")
                game.board[address] = Tile.built(piece)
            game._built_pieces.add(piece)

        for owner in PLAYER_OWNERS:
            for address in claimed.get(owner, ()):
                if not game.board.is_valid_address(address) or game.board.owner_at(address) is not None:
                    raise ValueError(f"Claimed address {address} is off the board or already owned")
                game.board[address] = Tile(owner=owner)
                game._claimed[owner].add(address)

        return game

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def built_pieces(self) -> FrozenSet[Piece]:
        return frozenset(self._built_pieces)

    @property
    def build_history(self) -> List[Piece]:
        return list(self._build_history)

    @property
    def light_claimed(self) -> FrozenSet[Address]:
        return frozenset(self._claimed[Owner.LIGHT])

    @property
    def dark_claimed(self) -> FrozenSet[Address]:
        return frozenset(self._claimed[Owner.DARK])

    def claimed_addresses(self, owner: Owner) -> FrozenSet[Address]:
        self._require_player(owner, "claim territory")
        return frozenset(self._claimed[owner])

    def remaining_buildings(self, owner: Owner) -> FrozenSet[Building]:
        """Buildings the player has yet to build."""
        self._require_player(owner, "have unbuilt buildings")
        return frozenset(self._unbuilt[owner])

    @property
    def is_over(self) -> bool:
        return self.next_turn is None

    @property
    def log(self) -> str:
        """The build history as a move log, one move per line."""
        return format_log(self._build_history)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def unbuilt_buildings(self, owner: Owner) -> Dict[Building, bool]:
        """
        Get the player's unbuilt buildings mapped to whether each can still be
        built somewhere on the board.
        """
        self._require_player(owner, "have unbuilt buildings")
        return {
            building: self.move_generator.has_legal_move(self, owner, building)
            for building in self._unbuilt[owner]
        }

    def can_make_move(self, owner: Owner) -> bool:
        """Whether a player can build any of their remaining buildings."""
        self._require_player(owner, "make moves")
        return self.move_generator.has_legal_moves(self, owner)

    def can_place(self, building: Building, owner: Owner,
                  direction: Optional[Direction] = None,
                  address: Optional[Address] = None) -> bool:
        """
        Check if an owner can build a building.

        With a direction and address, checks that exact placement. Without
        them, checks whether the building fits anywhere on the board.
        """
        if direction is None and address is None:
            return self.move_generator.has_legal_move(self, owner, building)
        if direction is None or address is None:
            raise ValueError("Direction and address must be given together")

        if owner.is_player != building.is_player_building:
            return False

        # Inventory check
        if owner is Owner.CHURCH:
            if self.cathedral_built:
                return False
        elif building not in self._unbuilt[owner]:
            return False

        board = self.board
        if not board.is_valid_address(address):
            return False

        for target in building.blueprint(owner, direction, address):
            if not board.is_valid_address(target):
                return False
            tile_owner = board.owner_at(target)
            if tile_owner is None:
                continue
            # Only free tiles and the owner's own unbuilt claimed land can be built on
            if tile_owner is not owner or board.is_built(target):
                return False

        return True

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def place(self, building: Building, owner: Owner, direction: Direction,
              address: Address) -> PlacementResult:
        """
        Build a building for the owner whose turn it is, then resolve captures
        and advance the turn.

        Raises:
            IllegalMoveError: If it is not the owner's turn or the placement
                is illegal

        Returns:
            PlacementResult with the newly claimed addresses and destroyed pieces
        """
        if self.next_turn is not owner:
            raise IllegalMoveError(f"Not {owner.display_name}'s turn to build")
        if not self.can_place(building, owner, direction, address):
            raise IllegalMoveError(
                f"Can't build {owner.display_name} {building.display_name} "
                f"facing {direction.display_name} at {address}"
            )

        piece = Piece(owner, building, direction, address)
        self._built_pieces.add(piece)
        self._build_history.append(piece)

        footprint = piece.addresses()
        for target in footprint:
            self.board[target] = Tile.built(piece)
            if owner.is_player:
                self._claimed[owner].discard(target)

        logger.debug(f"Built {piece} (move {len(self._build_history)})")

        if owner is Owner.CHURCH:
            self.cathedral_built = True
            self.next_turn = Owner.DARK
            return PlacementResult(frozenset(), frozenset())

        self._unbuilt[owner].discard(building)

        total_claimed: Set[Address] = set()
        total_destroyed: Set[Piece] = set()
        if len(self._build_history) > CAPTURE_EXEMPT_BUILDS:
            for target in footprint:
                for neighbor in target.neighbors():
                    if not self.board.is_valid_address(neighbor):
                        continue
                    region = self._claim_region(owner, neighbor)
                    total_claimed |= region.claimed
                    if region.destroyed is not None:
                        total_destroyed.add(region.destroyed)

        if total_claimed:
            logger.debug(f"{owner.display_name} claimed {len(total_claimed)} tiles, "
                         f"destroyed {len(total_destroyed)} pieces")

        self._advance_turn(owner)
        return PlacementResult(frozenset(total_claimed), frozenset(total_destroyed))

    def place_piece(self, piece: Piece) -> PlacementResult:
        """Place a piece chosen by a player strategy."""
        return self.place(piece.building, piece.owner, piece.direction, piece.address)

    def _advance_turn(self, owner: Owner) -> None:
        opponent = owner.opponent
        if self.settings.delayed_cathedral and len(self._build_history) == 2:
            self.next_turn = Owner.CHURCH
        elif self.can_make_move(opponent):
            self.next_turn = opponent
        elif self.can_make_move(owner):
            # Opponent has no legal move and is skipped
            self.next_turn = owner
        else:
            self.next_turn = None
        logger.debug(f"Next turn: {self.next_turn.display_name if self.next_turn else 'game over'}")

    # ------------------------------------------------------------------
    # Capture
    # ------------------------------------------------------------------

    def _claim_region(self, owner: Owner, start: Address) -> RegionClaim:
        """Find an enclosed region from start and, if found, commit it for owner."""
        region = self.find_region(owner, start)
        if not region.success:
            return FAILED_CLAIM

        # Destroy first so the destroyed piece's tiles are free to claim
        if region.destroyed is not None:
            self._destroy_piece(region.destroyed)

        for address in region.claimed:
            self._claim(owner, address)
        return region

    def find_region(self, owner: Owner, start: Address) -> RegionClaim:
        """
        Search the 8-connected region around start that owner would enclose.

        The region is bounded by the board edge and the owner's built pieces.
        It succeeds only if every tile in it is free or belongs to one single
        non-owner piece; any claimed territory or a second piece fails the
        whole region.
        """
        board = self.board
        claimed: Set[Address] = set()
        destroyed: Optional[Piece] = None
        stack = [start]
        queued = {start}

        while stack:
            address = stack.pop()
            tile = board[address]

            if tile.is_free:
                pass
            elif destroyed is not None:
                if tile.piece != destroyed:
                    return FAILED_CLAIM
            elif tile.owner is owner or not tile.is_built:
                return FAILED_CLAIM
            else:
                destroyed = tile.piece

            claimed.add(address)

            for neighbor in address.neighbors():
                if neighbor in queued or not board.is_valid_address(neighbor):
                    continue
                if board.owner_at(neighbor) is owner and board.is_built(neighbor):
                    continue
                queued.add(neighbor)
                stack.append(neighbor)

        return RegionClaim(success=True, claimed=frozenset(claimed), destroyed=destroyed)

    def _claim(self, owner: Owner, address: Address) -> None:
        if self.board.owner_at(address) is not None:
            raise IllegalMoveError(f"Can only claim unclaimed tiles, {address} is owned")
        self.board[address] = Tile(owner=owner)
        self._claimed[owner].add(address)

    def _destroy_piece(self, piece: Piece) -> None:
        """Remove a piece from the board and return it to its owner's inventory."""
        for address in piece.addresses():
            self.board[address] = Tile()
        if piece.owner.is_player:
            self._unbuilt[piece.owner].add(piece.building)
        self._built_pieces.discard(piece)
        logger.debug(f"Destroyed {piece}")

    # ------------------------------------------------------------------
    # Scoring
    # ------------------------------------------------------------------

    def player_score(self, owner: Owner) -> int:
        """Total size of a player's unbuilt buildings. Lower is better."""
        self._require_player(owner, "have a score")
        return sum(building.size for building in self._unbuilt[owner])

    def scores(self) -> Dict[Owner, int]:
        return {owner: self.player_score(owner) for owner in PLAYER_OWNERS}

    def calculate_winner(self) -> Optional[GameResult]:
        """
        Calculate who won the game.

        Returns:
            None while either player can still move. Otherwise a GameResult
            whose winner is the player with the lower score (None on a tie)
            and whose score is the loser's total (0 on a tie).
        """
        if self.can_make_move(Owner.DARK) or self.can_make_move(Owner.LIGHT):
            return None

        light_score = self.player_score(Owner.LIGHT)
        dark_score = self.player_score(Owner.DARK)
        if light_score < dark_score:
            return GameResult(Owner.LIGHT, dark_score)
        if light_score > dark_score:
            return GameResult(Owner.DARK, light_score)
        return GameResult(None, 0)

    @staticmethod
    def _require_player(owner: Owner, action: str) -> None:
        if not owner.is_player:
            raise ValueError(f"The church can't {action}")

    def __str__(self) -> str:
        return str(self.board)
