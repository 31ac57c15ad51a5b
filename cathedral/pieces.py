"""
Cathedral building catalog with all 12 building shapes and their rotations.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, List, Tuple

import numpy as np

from .board import CARDINAL_DIRECTIONS, Address, Direction, Owner


@dataclass
class BuildingShape:
    """North-facing shape definition for a building."""
    name: str
    code: str
    shape: np.ndarray  # 2D array indexed [row, col], 1 where a tile is covered
    size: int  # Number of tiles covered

    def __post_init__(self):
        """Validate shape after initialization."""
        if self.shape.ndim != 2:
            raise ValueError("Building shape must be 2D")
        if np.sum(self.shape) != self.size:
            raise ValueError("Building shape sum must equal size")
        if len(self.code) != 2:
            raise ValueError("Building code must be 2 characters")

    @property
    def height(self) -> int:
        return self.shape.shape[0]

    @property
    def width(self) -> int:
        return self.shape.shape[1]


def shape_to_offsets(shape: np.ndarray) -> np.ndarray:
    """
    Convert a numpy shape array to an (n, 2) array of (col, row) offsets.

    Args:
        shape: 2D numpy array with 1s where tiles are covered

    Returns:
        Offsets of covered tiles, anchored at the shape's top-left corner
    """
    rows, cols = np.nonzero(shape)
    return np.column_stack((cols, rows)).astype(int)


class Building(Enum):
    """Enumeration of all Cathedral building types."""
    TAVERN = 1      # 1 tile
    STABLE = 2      # 2 tiles in line
    INN = 3         # 3 tiles in L shape
    BRIDGE = 4      # 3 tiles in line
    SQUARE = 5      # 2x2 square
    ABBEY = 6       # S shape, mirrored for dark
    MANOR = 7       # T shape
    TOWER = 8       # W shape
    INFIRMARY = 9   # + shape
    CASTLE = 10     # C shape
    ACADEMY = 11    # F shape, mirrored for dark
    CATHEDRAL = 12  # Church only

    @property
    def is_player_building(self) -> bool:
        """Whether this building belongs to the players, i.e. is not the cathedral."""
        return self is not Building.CATHEDRAL

    @property
    def width(self) -> int:
        return BUILDING_SHAPES[self].width

    @property
    def height(self) -> int:
        return BUILDING_SHAPES[self].height

    @property
    def size(self) -> int:
        return BUILDING_SHAPES[self].size

    @property
    def code(self) -> str:
        return BUILDING_SHAPES[self].code

    @property
    def display_name(self) -> str:
        return BUILDING_SHAPES[self].name

    def dimensions(self, direction: Direction) -> Tuple[int, int]:
        """(width, height) of the bounding box when facing a direction."""
        if direction.is_sideways:
            return self.height, self.width
        return self.width, self.height

    def blueprint(self, owner: Owner, direction: Direction, anchor: Address) -> FrozenSet[Address]:
        """
        Absolute addresses covered by this building.

        Args:
            owner: Owner of the building; must be the church exactly when the
                building is the cathedral
            direction: Direction the building faces
            anchor: Board address of the shape's origin offset

        Returns:
            Set of covered addresses (may include off-board addresses)
        """
        if owner.is_player != self.is_player_building:
            raise ValueError(f"Can't get blueprint for {owner.display_name} {self.display_name}")
        offsets = ALL_BLUEPRINTS[(self, owner, direction)]
        return frozenset(
            Address(col, row).translated(anchor) for col, row in offsets
        )


PLAYER_BUILDINGS = frozenset(b for b in Building if b.is_player_building)


BUILDING_SHAPES: Dict[Building, BuildingShape] = {
    Building.TAVERN: BuildingShape("Tavern", "TA", np.array([[1]]), 1),
    Building.STABLE: BuildingShape("Stable", "ST", np.array([[1], [1]]), 2),
    Building.INN: BuildingShape("Inn", "IN", np.array([[1, 1], [1, 0]]), 3),
    Building.BRIDGE: BuildingShape("Bridge", "BR", np.array([[1], [1], [1]]), 3),
    Building.SQUARE: BuildingShape("Square", "SQ", np.array([[1, 1], [1, 1]]), 4),
    Building.ABBEY: BuildingShape("Abbey", "AB", np.array([[1, 0], [1, 1], [0, 1]]), 4),
    Building.MANOR: BuildingShape("Manor", "MA", np.array([[1, 0], [1, 1], [1, 0]]), 4),
    Building.TOWER: BuildingShape("Tower", "TO", np.array([[1, 0, 0], [1, 1, 0], [0, 1, 1]]), 5),
    Building.INFIRMARY: BuildingShape("Infirmary", "IF", np.array([[0, 1, 0], [1, 1, 1], [0, 1, 0]]), 5),
    Building.CASTLE: BuildingShape("Castle", "CS", np.array([[1, 1], [1, 0], [1, 1]]), 5),
    Building.ACADEMY: BuildingShape("Academy", "AC", np.array([[0, 1, 0], [1, 1, 0], [0, 1, 1]]), 5),
    Building.CATHEDRAL: BuildingShape("Cathedral", "CA", np.array([[0, 1, 0], [1, 1, 1], [0, 1, 0], [0, 1, 0]]), 6),
}

# Dark builds the mirror image of these light shapes.
DARK_SHAPES: Dict[Building, np.ndarray] = {
    Building.ABBEY: np.array([[0, 1], [1, 1], [1, 0]]),
    Building.ACADEMY: np.array([[0, 1, 0], [0, 1, 1], [1, 1, 0]]),
}


# Global registry of rotated offsets keyed by (building, owner, direction)
ALL_BLUEPRINTS: Dict[Tuple[Building, Owner, Direction], List[Tuple[int, int]]] = {}


def base_shape(building: Building, owner: Owner) -> np.ndarray:
    """The north-facing shape array a given owner builds."""
    if owner is Owner.DARK and building in DARK_SHAPES:
        return DARK_SHAPES[building]
    return BUILDING_SHAPES[building].shape


def init_blueprints():
    """
    Initialize the global ALL_BLUEPRINTS registry.

    Offsets are rotated with each direction's rotation matrix; translation by
    the anchor happens in Building.blueprint.
    """
    if ALL_BLUEPRINTS:
        return  # Already initialized

    for building in Building:
        owners = (Owner.CHURCH,) if not building.is_player_building else (Owner.LIGHT, Owner.DARK)
        for owner in owners:
            offsets = shape_to_offsets(base_shape(building, owner))
            for direction in CARDINAL_DIRECTIONS:
                rotated = offsets @ direction.rotation.T
                ALL_BLUEPRINTS[(building, owner, direction)] = [
                    (int(col), int(row)) for col, row in rotated
                ]


@dataclass(frozen=True)
class Piece:
    """A building placed on the board. Compared and hashed by value."""
    owner: Owner
    building: Building
    direction: Direction
    address: Address

    def addresses(self) -> FrozenSet[Address]:
        """The set of addresses this piece covers."""
        return self.building.blueprint(self.owner, self.direction, self.address)

    @property
    def log(self) -> str:
        """Move log entry: building code, direction code, address code."""
        return f"{self.building.code}{self.direction.code}{self.address.code}"

    def __str__(self) -> str:
        return (f"{self.owner.display_name} {self.building.display_name} "
                f"facing {self.direction.display_name} at {self.address}")


# Initialize on import (after Building is defined)
init_blueprints()
