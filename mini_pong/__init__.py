"""
Mini Pong: a two-paddle ball game
"""

__version__ = "0.1.0"
