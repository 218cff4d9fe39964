"""
Tests for the PyGame renderer, using SDL's dummy video driver
"""

import pygame
import pytest

from mini_pong.core.simulation import SimulationState
from mini_pong.gui.pygame_renderer import PygameRenderer
from mini_pong.utils.config import GameConfig


@pytest.fixture
def renderer(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    renderer = PygameRenderer(GameConfig(SCREEN_WIDTH=640, SCREEN_HEIGHT=480))
    yield renderer
    renderer.cleanup()


class TestPygameRenderer:
    """Tests for PygameRenderer class"""

    def test_window_size(self, renderer: PygameRenderer):
        """Test the window uses the configured dimensions"""
        assert renderer.screen.get_size() == (640, 480)

    def test_draws_paddles_and_ball(self, renderer: PygameRenderer):
        """Test entities are drawn where the snapshot puts them"""
        sim = SimulationState(renderer.config, seed=0)
        sim.playing = True
        sim.ball.x, sim.ball.y = 200.0, 100.0

        renderer.render_game_state(sim.get_game_state())

        white = pygame.Color(255, 255, 255)
        left_x, left_y = sim.left_paddle.x, sim.left_paddle.center_y
        assert renderer.screen.get_at((int(left_x), int(left_y))) == white
        assert renderer.screen.get_at((200, 100)) == white
        assert renderer.screen.get_at((10, 10)) == pygame.Color(0, 0, 0)

    def test_poll_commands_maps_queued_events(self, renderer: PygameRenderer):
        """Test queued key events come back as commands"""
        pygame.event.clear()
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))

        commands = renderer.poll_commands()

        assert [command.type.value for command in commands] == ["serve"]
