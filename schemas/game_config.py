"""
Pydantic schemas for game configuration.
"""

from enum import Enum

from pydantic import BaseModel, Field

from cathedral.game import GameSettings


class PlayerType(str, Enum):
    """Types of players in a game."""
    LOCAL_HUMAN = "LocalHuman"
    RANDOM_COMPUTER = "RandomComputer"


class GameSettingsModel(BaseModel):
    """Per-game rule settings."""
    delayed_cathedral: bool = Field(default=False, description="Church builds after both opening pieces")
    auto_build: bool = Field(default=False, description="Reserved for auto-completing the last builds")

    def to_settings(self) -> GameSettings:
        return GameSettings(delayed_cathedral=self.delayed_cathedral, auto_build=self.auto_build)

    @classmethod
    def from_settings(cls, settings: GameSettings) -> 'GameSettingsModel':
        return cls(delayed_cathedral=settings.delayed_cathedral, auto_build=settings.auto_build)


class GameConfig(GameSettingsModel):
    """Configuration for a Cathedral match."""
    light_player: PlayerType = PlayerType.LOCAL_HUMAN
    dark_player: PlayerType = PlayerType.LOCAL_HUMAN

    class Config:
        json_schema_extra = {
            "example": {
                "light_player": "LocalHuman",
                "dark_player": "RandomComputer",
                "delayed_cathedral": False,
                "auto_build": False
            }
        }
