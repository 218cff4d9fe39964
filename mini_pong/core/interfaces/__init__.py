"""
Protocols describing the host collaborators of the simulation
"""

from mini_pong.core.interfaces.renderer import RendererProtocol

__all__ = ["RendererProtocol"]
