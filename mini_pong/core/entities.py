"""
Mini Pong game entities: paddles and ball
"""

from enum import Enum

import numpy as np

from mini_pong.utils.config import GameConfig


class Side(Enum):
    """Screen side a paddle is attached to"""

    LEFT = "left"
    RIGHT = "right"

    def x(self, config: GameConfig) -> float:
        """Fixed horizontal center of a paddle on this side"""
        if self is Side.LEFT:
            return config.PADDLE_MARGIN
        return config.SCREEN_WIDTH - config.PADDLE_MARGIN


class Paddle:
    """Player paddle, moving vertically along its side of the screen"""

    def __init__(self, side: Side, center_y: float, config: GameConfig):
        self.side = side
        self.config = config
        self.width = config.PADDLE_WIDTH
        self.height = config.PADDLE_HEIGHT
        self.move_speed = config.PADDLE_MOVE_SPEED
        self.center_y = center_y
        self.constrain_position()

    @property
    def x(self) -> float:
        return self.side.x(self.config)

    def constrain_position(self) -> None:
        """Keeps the top and bottom edges inside the screen"""
        half_height = self.height / 2
        max_center = self.config.SCREEN_HEIGHT - half_height
        self.center_y = max(half_height, min(max_center, self.center_y))

    def move_by(self, delta: float) -> None:
        """Moves the paddle vertically, clamped to the screen"""
        self.center_y += delta
        self.constrain_position()

    def move_up(self) -> None:
        self.move_by(-self.move_speed)

    def move_down(self) -> None:
        self.move_by(self.move_speed)

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the paddle rectangle (left, top, width, height)"""
        return (self.x - self.width / 2, self.center_y - self.height / 2, self.width, self.height)


class Ball:
    """Game ball"""

    def __init__(self, x: float, y: float, vx: float, vy: float, config: GameConfig):
        self.x = x
        self.y = y
        self.vx = vx
        self.vy = vy
        self.config = config
        self.radius = config.BALL_RADIUS

    def advance(self) -> None:
        """Moves the ball by one tick of velocity"""
        self.x += self.vx
        self.y += self.vy

    def reflect_vertical_if_needed(self) -> bool:
        """Bounces off the top or bottom wall when the ball penetrates it"""
        if self.y - self.radius < 0 or self.y + self.radius > self.config.SCREEN_HEIGHT:
            self.vy = -self.vy
            return True
        return False

    def is_out_of_bounds(self) -> bool:
        """True once the ball has fully left the screen horizontally"""
        return self.x + self.radius < 0 or self.x - self.radius > self.config.SCREEN_WIDTH

    def collides_with(self, paddle: Paddle) -> bool:
        """
        Bounding-box overlap between the ball and a paddle.

        The ball is treated as its bounding square [x-r, x+r] x [y-r, y+r], so
        corners register slightly earlier than an exact circle test would.
        """
        r = self.radius
        half_w = paddle.width / 2
        half_h = paddle.height / 2
        return (
            self.y - r < paddle.center_y + half_h
            and self.y + r > paddle.center_y - half_h
            and self.x - r < paddle.x + half_w
            and self.x + r > paddle.x - half_w
        )

    def serve(self, rng: np.random.Generator) -> None:
        """Recenters the ball and draws a new random velocity"""
        self.x = self.config.SCREEN_WIDTH / 2
        self.y = self.config.SCREEN_HEIGHT / 2

        cfg = self.config
        speed_x = float(rng.uniform(cfg.SERVE_SPEED_X_MIN, cfg.SERVE_SPEED_X_MAX))
        if rng.random() < 0.5:
            speed_x = -speed_x
        self.vx = speed_x
        self.vy = float(rng.uniform(-cfg.SERVE_SPEED_Y_MAX, cfg.SERVE_SPEED_Y_MAX))

    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    def velocity(self) -> tuple[float, float]:
        return (self.vx, self.vy)
