"""
Keyboard input handling for Mini Pong
"""

import pygame

from mini_pong.core.commands import Command
from mini_pong.core.entities import Side
from mini_pong.utils.config import GameConfig


class InputManager:
    """Translates raw PyGame events into simulation commands"""

    def __init__(self, config: GameConfig):
        layout = config.get_keyboard_layout()
        self.layout = layout

        self.key_mapping: dict[int, Command] = {
            layout.left_keys["up"]: Command.move_up(Side.LEFT),
            layout.left_keys["down"]: Command.move_down(Side.LEFT),
            layout.right_keys["up"]: Command.move_up(Side.RIGHT),
            layout.right_keys["down"]: Command.move_down(Side.RIGHT),
            pygame.K_SPACE: Command.serve(),
            pygame.K_p: Command.toggle_play(),
            pygame.K_ESCAPE: Command.quit(),
        }

    def command_for_event(self, event: pygame.event.Event) -> Command | None:
        """Returns the command bound to an event, or None if it is not bound"""
        if event.type == pygame.QUIT:
            return Command.quit()
        if event.type == pygame.KEYDOWN:
            return self.key_mapping.get(event.key)
        return None

    def commands_for_events(self, events: list[pygame.event.Event]) -> list[Command]:
        commands = []
        for event in events:
            command = self.command_for_event(event)
            if command is not None:
                commands.append(command)
        return commands

    def get_control_info(self) -> dict[str, str]:
        """Get human-readable control descriptions"""
        names = self.layout.display_names
        return {
            "Left paddle": f"{names['up']}/{names['down']}",
            "Right paddle": "Up/Down arrows",
            "Serve": "SPACE",
            "Play/Pause": "P",
            "Quit": "ESC",
        }
