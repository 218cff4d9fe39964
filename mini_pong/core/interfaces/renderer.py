"""
Renderer protocol - defines interface for different rendering backends
"""

from typing import Any
from typing import Protocol

from mini_pong.core.commands import Command


class RendererProtocol(Protocol):
    """
    Protocol for renderer implementations.

    The host loop only talks to the renderer through this interface, so a
    headless renderer can stand in for the PyGame one.
    """

    def render_game_state(self, game_state: dict[str, Any]) -> None:
        """
        Render a single frame.

        Args:
            game_state: Snapshot returned by SimulationState.get_game_state()
        """
        ...

    def poll_commands(self) -> list[Command]:
        """
        Drain pending input events.

        Returns:
            Commands in the order their key-down events arrived
        """
        ...

    def present(self) -> None:
        """Show the rendered frame"""
        ...

    def cleanup(self) -> None:
        """Clean up renderer resources"""
        ...
