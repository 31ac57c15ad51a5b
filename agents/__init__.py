"""
Cathedral players: local humans and computer strategies.
"""

from .gameplay_protocol import ComputerProtocol, PlayerProtocol
from .human_agent import LocalHuman
from .random_agent import RandomComputer
from .registry import build_player, build_players

__all__ = [
    'ComputerProtocol', 'PlayerProtocol',
    'LocalHuman', 'RandomComputer',
    'build_player', 'build_players',
]
