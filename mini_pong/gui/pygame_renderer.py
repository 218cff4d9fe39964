"""
PyGame renderer for Mini Pong
"""

from typing import Any

import pygame

from mini_pong.core.commands import Command
from mini_pong.gui.input import InputManager
from mini_pong.utils.config import GameConfig


class PygameRenderer:
    """PyGame-based renderer for Mini Pong"""

    def __init__(self, config: GameConfig):
        """Initialize PyGame, the window and fonts"""
        self.config = config
        self.width = config.SCREEN_WIDTH
        self.height = config.SCREEN_HEIGHT

        pygame.init()

        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption(config.WINDOW_TITLE)

        self.input_manager = InputManager(config)

        self.background_color: tuple[int, int, int] = config.BACKGROUND_COLOR
        self.ball_color: tuple[int, int, int] = config.BALL_COLOR
        self.paddle_color: tuple[int, int, int] = config.PADDLE_COLOR
        self.line_color: tuple[int, int, int] = config.LINE_COLOR
        self.text_color: tuple[int, int, int] = (255, 255, 255)

        self.font_large = pygame.font.Font(None, 74)
        self.font_small = pygame.font.Font(None, 36)

    def clear_screen(self) -> None:
        self.screen.fill(self.background_color)

    def draw_field(self) -> None:
        """Draw the center line"""
        center_x = self.width // 2
        pygame.draw.line(self.screen, self.line_color, (center_x, 0), (center_x, self.height), 1)

    def draw_paddle(self, center: tuple[float, float], size: tuple[float, float]) -> None:
        width, height = size
        rect = pygame.Rect(
            int(center[0] - width / 2), int(center[1] - height / 2), int(width), int(height)
        )
        pygame.draw.rect(self.screen, self.paddle_color, rect)

    def draw_ball(self, position: tuple[float, float], radius: float) -> None:
        pos = (int(position[0]), int(position[1]))
        pygame.draw.circle(self.screen, self.ball_color, pos, int(radius))

    def draw_pause_screen(self) -> None:
        """Draw pause overlay"""
        overlay = pygame.Surface((self.width, self.height))
        overlay.set_alpha(128)
        overlay.fill((0, 0, 0))
        self.screen.blit(overlay, (0, 0))

        pause_surface = self.font_large.render("PAUSE", True, self.text_color)
        pause_rect = pause_surface.get_rect()
        pause_rect.center = (self.width // 2, self.height // 2)
        self.screen.blit(pause_surface, pause_rect)

        instructions = "SPACE to serve, P to resume"
        inst_surface = self.font_small.render(instructions, True, self.text_color)
        inst_rect = inst_surface.get_rect()
        inst_rect.center = (self.width // 2, self.height // 2 + 60)
        self.screen.blit(inst_surface, inst_rect)

    def render_game_state(self, game_state: dict[str, Any]) -> None:
        """Render the complete game state"""
        self.clear_screen()

        paddle_size = game_state["paddle_size"]
        self.draw_paddle(game_state["left_paddle"], paddle_size)
        self.draw_paddle(game_state["right_paddle"], paddle_size)
        self.draw_ball(game_state["ball_position"], game_state["ball_radius"])

        self.draw_field()

        if not game_state["playing"]:
            self.draw_pause_screen()

    def poll_commands(self) -> list[Command]:
        return self.input_manager.commands_for_events(pygame.event.get())

    def present(self) -> None:
        pygame.display.flip()

    def cleanup(self) -> None:
        """Clean up PyGame resources"""
        pygame.quit()
