"""
Tests for Mini Pong game entities
"""

import numpy as np
import pytest

from mini_pong.core.entities import Ball, Paddle, Side
from mini_pong.utils.config import GameConfig


@pytest.fixture
def config() -> GameConfig:
    return GameConfig()


class TestSide:
    """Tests for the Side lookup"""

    def test_left_x_is_margin(self, config: GameConfig) -> None:
        """Test left paddles sit one margin from the left edge"""
        assert Side.LEFT.x(config) == config.PADDLE_MARGIN

    def test_right_x_mirrors_left(self, config: GameConfig) -> None:
        """Test right paddles sit one margin from the right edge"""
        assert Side.RIGHT.x(config) == config.SCREEN_WIDTH - config.PADDLE_MARGIN

    def test_x_follows_screen_width(self) -> None:
        """Test the lookup uses the configured screen width"""
        wide = GameConfig(SCREEN_WIDTH=1280, SCREEN_HEIGHT=720)
        assert Side.RIGHT.x(wide) == 1230.0


class TestPaddle:
    """Tests for Paddle class"""

    def test_creation(self, config: GameConfig) -> None:
        """Test paddle creation"""
        paddle = Paddle(Side.LEFT, 300.0, config)
        assert paddle.center_y == 300.0
        assert paddle.x == config.PADDLE_MARGIN
        assert paddle.width == config.PADDLE_WIDTH
        assert paddle.height == config.PADDLE_HEIGHT

    def test_move_by(self, config: GameConfig) -> None:
        """Test relative movement"""
        paddle = Paddle(Side.RIGHT, 300.0, config)
        paddle.move_by(-25.0)
        assert paddle.center_y == 275.0

    def test_move_up_and_down(self, config: GameConfig) -> None:
        """Test single key-press movement uses the move speed"""
        paddle = Paddle(Side.LEFT, 300.0, config)
        paddle.move_up()
        assert paddle.center_y == 300.0 - config.PADDLE_MOVE_SPEED
        paddle.move_down()
        paddle.move_down()
        assert paddle.center_y == 300.0 + config.PADDLE_MOVE_SPEED

    def test_clamp_top(self, config: GameConfig) -> None:
        """Test paddle cannot leave through the top"""
        paddle = Paddle(Side.LEFT, 300.0, config)
        paddle.move_by(-10_000.0)
        assert paddle.center_y == config.PADDLE_HEIGHT / 2

    def test_clamp_bottom(self, config: GameConfig) -> None:
        """Test paddle cannot leave through the bottom"""
        paddle = Paddle(Side.LEFT, 300.0, config)
        paddle.move_by(10_000.0)
        assert paddle.center_y == config.SCREEN_HEIGHT - config.PADDLE_HEIGHT / 2

    def test_clamp_invariant_random_moves(self, config: GameConfig) -> None:
        """Test edges stay on screen after every move of a random sequence"""
        rng = np.random.default_rng(1234)
        paddle = Paddle(Side.RIGHT, 300.0, config)

        for delta in rng.uniform(-200.0, 200.0, size=2000):
            paddle.move_by(float(delta))
            assert paddle.center_y - paddle.height / 2 >= 0
            assert paddle.center_y + paddle.height / 2 <= config.SCREEN_HEIGHT

    def test_get_rect(self, config: GameConfig) -> None:
        """Test the rectangle is centered on the paddle"""
        paddle = Paddle(Side.LEFT, 300.0, config)
        left, top, width, height = paddle.get_rect()
        assert left == paddle.x - paddle.width / 2
        assert top == 300.0 - paddle.height / 2
        assert (width, height) == (paddle.width, paddle.height)


class TestBall:
    """Tests for Ball class"""

    def test_advance(self, config: GameConfig) -> None:
        """Test position update"""
        ball = Ball(100.0, 200.0, 3.0, -2.0, config)
        ball.advance()
        assert ball.position() == (103.0, 198.0)

    def test_reflect_top_wall(self, config: GameConfig) -> None:
        """Test a ball breaching the top wall turns downward"""
        ball = Ball(400.0, config.BALL_RADIUS - 1, 3.0, -2.0, config)
        ball.advance()
        assert ball.reflect_vertical_if_needed() is True
        assert ball.vy == 2.0
        assert ball.vx == 3.0

    def test_reflect_bottom_wall(self, config: GameConfig) -> None:
        """Test a ball breaching the bottom wall turns upward"""
        ball = Ball(400.0, config.SCREEN_HEIGHT - config.BALL_RADIUS + 1, 3.0, 2.0, config)
        ball.advance()
        assert ball.reflect_vertical_if_needed() is True
        assert ball.vy == -2.0
        assert ball.vx == 3.0

    def test_no_reflection_mid_screen(self, config: GameConfig) -> None:
        """Test nothing happens away from the walls"""
        ball = Ball(400.0, 300.0, 3.0, 2.0, config)
        assert ball.reflect_vertical_if_needed() is False
        assert ball.vy == 2.0

    def test_out_of_bounds_left(self, config: GameConfig) -> None:
        """Test a ball fully past the left edge is out"""
        ball = Ball(-config.BALL_RADIUS - 1, 300.0, 0.0, 0.0, config)
        assert ball.is_out_of_bounds()

    def test_out_of_bounds_right(self, config: GameConfig) -> None:
        """Test a ball fully past the right edge is out"""
        ball = Ball(config.SCREEN_WIDTH + config.BALL_RADIUS + 1, 300.0, 0.0, 0.0, config)
        assert ball.is_out_of_bounds()

    def test_in_bounds_center(self, config: GameConfig) -> None:
        """Test a centered ball is in play"""
        ball = Ball(config.SCREEN_WIDTH / 2, 300.0, 0.0, 0.0, config)
        assert not ball.is_out_of_bounds()

    def test_partially_off_screen_still_in_play(self, config: GameConfig) -> None:
        """Test a ball straddling the edge is not out yet"""
        ball = Ball(0.0, 300.0, 0.0, 0.0, config)
        assert not ball.is_out_of_bounds()

    def test_collides_at_paddle_center(self, config: GameConfig) -> None:
        """Test a ball centered on a paddle collides"""
        paddle = Paddle(Side.LEFT, 300.0, config)
        ball = Ball(paddle.x, paddle.center_y, 0.0, 0.0, config)
        assert ball.collides_with(paddle)

    def test_no_collision_far_horizontally(self, config: GameConfig) -> None:
        """Test a ball beyond half width plus radius does not collide"""
        paddle = Paddle(Side.LEFT, 300.0, config)
        gap = paddle.width / 2 + config.BALL_RADIUS + 1
        ball = Ball(paddle.x + gap, paddle.center_y, 0.0, 0.0, config)
        assert not ball.collides_with(paddle)

    def test_touching_edges_do_not_collide(self, config: GameConfig) -> None:
        """Test the overlap test is strict"""
        paddle = Paddle(Side.RIGHT, 300.0, config)
        gap = paddle.width / 2 + config.BALL_RADIUS
        ball = Ball(paddle.x - gap, paddle.center_y, 0.0, 0.0, config)
        assert not ball.collides_with(paddle)

    def test_bounding_box_corner_collides(self, config: GameConfig) -> None:
        """Test a corner overlap counts even where a true circle would miss"""
        paddle = Paddle(Side.LEFT, 300.0, config)
        r = config.BALL_RADIUS
        # Circle center 0.9r away on both axes from the paddle corner: distance > r
        x = paddle.x + paddle.width / 2 + 0.9 * r
        y = paddle.center_y + paddle.height / 2 + 0.9 * r
        ball = Ball(x, y, 0.0, 0.0, config)
        assert ball.collides_with(paddle)

    def test_serve_recenters(self, config: GameConfig) -> None:
        """Test serving puts the ball back at screen center"""
        ball = Ball(10.0, 20.0, 0.0, 0.0, config)
        ball.serve(np.random.default_rng(0))
        assert ball.position() == (config.SCREEN_WIDTH / 2, config.SCREEN_HEIGHT / 2)

    def test_serve_distribution_bounds(self, config: GameConfig) -> None:
        """Test serve speeds stay in range and both directions occur"""
        rng = np.random.default_rng(42)
        ball = Ball(0.0, 0.0, 0.0, 0.0, config)
        signs = set()

        for _ in range(10_000):
            ball.serve(rng)
            assert 3.0 <= abs(ball.vx) < 4.0
            assert -3.0 <= ball.vy < 3.0
            signs.add(ball.vx > 0)

        assert signs == {True, False}

    def test_serve_reproducible_with_seed(self, config: GameConfig) -> None:
        """Test the same seed gives the same serve"""
        first = Ball(0.0, 0.0, 0.0, 0.0, config)
        second = Ball(0.0, 0.0, 0.0, 0.0, config)
        first.serve(np.random.default_rng(7))
        second.serve(np.random.default_rng(7))
        assert first.velocity() == second.velocity()
