"""
Core module of Mini Pong game
"""

from mini_pong.core.commands import Command
from mini_pong.core.commands import CommandType
from mini_pong.core.entities import Ball
from mini_pong.core.entities import Paddle
from mini_pong.core.entities import Side
from mini_pong.core.simulation import SimulationState

__all__ = [
    "Ball",
    "Paddle",
    "Side",
    "Command",
    "CommandType",
    "SimulationState",
]
