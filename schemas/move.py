"""
Pydantic schemas for moves and placed pieces.
"""

from enum import Enum

from pydantic import BaseModel, Field

from cathedral.board import Address, Direction
from cathedral.board import Owner as EngineOwner
from cathedral.notation import BUILDINGS_BY_CODE, DIRECTIONS_BY_CODE
from cathedral.pieces import Building, Piece


class Owner(str, Enum):
    """Owner enumeration."""
    LIGHT = "LIGHT"
    DARK = "DARK"
    CHURCH = "CHURCH"

    def to_engine(self) -> EngineOwner:
        return EngineOwner[self.value]

    @classmethod
    def from_engine(cls, owner: EngineOwner) -> 'Owner':
        return cls(owner.name)


BUILDING_CODE_PATTERN = "^(" + "|".join(sorted(BUILDINGS_BY_CODE)) + ")$"
DIRECTION_CODE_PATTERN = "^[" + "".join(sorted(DIRECTIONS_BY_CODE)) + "]$"


class Position(BaseModel):
    """Position on the board."""
    col: int = Field(..., ge=0, le=9)
    row: int = Field(..., ge=0, le=9)

    def to_address(self) -> Address:
        return Address(self.col, self.row)

    @classmethod
    def from_address(cls, address: Address) -> 'Position':
        return cls(col=address.col, row=address.row)


class MoveRequest(BaseModel):
    """Request to build a building."""
    building: str = Field(..., pattern=BUILDING_CODE_PATTERN, description="Two character building code")
    direction: str = Field(..., pattern=DIRECTION_CODE_PATTERN, description="Direction code: n, e, s or w")
    col: int = Field(..., ge=0, le=9, description="Column of the anchor")
    row: int = Field(..., ge=0, le=9, description="Row of the anchor")

    class Config:
        json_schema_extra = {
            "example": {
                "building": "TO",
                "direction": "w",
                "col": 3,
                "row": 2
            }
        }

    def to_building(self) -> Building:
        return BUILDINGS_BY_CODE[self.building]

    def to_direction(self) -> Direction:
        return DIRECTIONS_BY_CODE[self.direction]

    def to_address(self) -> Address:
        return Address(self.col, self.row)


class PieceModel(MoveRequest):
    """A piece that was built."""
    owner: Owner

    class Config:
        json_schema_extra = {
            "example": {
                "owner": "DARK",
                "building": "TO",
                "direction": "w",
                "col": 3,
                "row": 2
            }
        }

    def to_piece(self) -> Piece:
        return Piece(self.owner.to_engine(), self.to_building(), self.to_direction(), self.to_address())

    @classmethod
    def from_piece(cls, piece: Piece) -> 'PieceModel':
        return cls(
            owner=Owner.from_engine(piece.owner),
            building=piece.building.code,
            direction=piece.direction.code,
            col=piece.address.col,
            row=piece.address.row,
        )
