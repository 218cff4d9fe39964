"""
Mini Pong utilities
"""

from mini_pong.utils.config import GameConfig
from mini_pong.utils.config import game_config

__all__ = ["game_config", "GameConfig"]
