"""
Simulation state for Mini Pong: owns the paddles, the ball and the play/pause flag
"""

from typing import Any

import numpy as np

from mini_pong.core.commands import Command
from mini_pong.core.commands import CommandType
from mini_pong.core.entities import Ball
from mini_pong.core.entities import Paddle
from mini_pong.core.entities import Side
from mini_pong.utils.config import GameConfig
from mini_pong.utils.config import game_config


class SimulationState:
    """
    Pure state machine advanced by explicit calls.

    The host calls `tick()` once per fixed-rate frame and `apply()` once per
    key-down command, then reads entity state back to render it.
    """

    def __init__(self, config: GameConfig | None = None, seed: int | None = None):
        self.config = config if config is not None else game_config.model_copy()
        self.rng = np.random.default_rng(seed)
        self.playing = False

        center_y = self.config.SCREEN_HEIGHT / 2
        self.paddles = {
            Side.LEFT: Paddle(Side.LEFT, center_y, self.config),
            Side.RIGHT: Paddle(Side.RIGHT, center_y, self.config),
        }
        self.ball = Ball(self.config.SCREEN_WIDTH / 2, center_y, 0.0, 0.0, self.config)

    @property
    def left_paddle(self) -> Paddle:
        return self.paddles[Side.LEFT]

    @property
    def right_paddle(self) -> Paddle:
        return self.paddles[Side.RIGHT]

    def move_paddle(self, side: Side, delta: float) -> None:
        """Moves one paddle; accepted whether or not the game is playing"""
        self.paddles[side].move_by(delta)

    def toggle_play(self) -> None:
        self.playing = not self.playing

    def serve(self) -> None:
        """Re-serves the ball from center and starts playing"""
        self.ball.serve(self.rng)
        self.playing = True

    def tick(self) -> dict[str, list]:
        """Runs one simulation step and returns the events that occurred"""
        events: dict[str, list] = {
            "wall_bounces": [],
            "paddle_hits": [],
            "out_of_bounds": [],
        }
        if not self.playing:
            return events

        ball = self.ball
        ball.advance()

        if ball.reflect_vertical_if_needed():
            wall = "top" if ball.y < self.config.SCREEN_HEIGHT / 2 else "bottom"
            events["wall_bounces"].append(wall)

        hits = [side for side, paddle in self.paddles.items() if ball.collides_with(paddle)]
        if hits:
            # One negation even if both paddles register in the same tick
            ball.vx = -ball.vx
            events["paddle_hits"].extend(hits)

        if ball.is_out_of_bounds():
            exit_side = Side.LEFT if ball.x < 0 else Side.RIGHT
            events["out_of_bounds"].append(exit_side)
            ball.serve(self.rng)
            self.playing = False

        return events

    def apply(self, command: Command) -> bool:
        """
        Applies a key-down command.

        Returns False for QUIT, which is a request to the host rather than a
        change of simulation state, and True for everything else.
        """
        if command.type == CommandType.QUIT:
            return False

        if command.type == CommandType.MOVE_UP:
            self.paddles[command.side].move_up()  # type: ignore[index]
        elif command.type == CommandType.MOVE_DOWN:
            self.paddles[command.side].move_down()  # type: ignore[index]
        elif command.type == CommandType.SERVE:
            self.serve()
        elif command.type == CommandType.TOGGLE_PLAY:
            self.toggle_play()

        return True

    def get_game_state(self) -> dict[str, Any]:
        """Returns a read-only snapshot of everything the renderer needs"""
        return {
            "ball_position": self.ball.position(),
            "ball_velocity": self.ball.velocity(),
            "ball_radius": self.ball.radius,
            "left_paddle": (self.left_paddle.x, self.left_paddle.center_y),
            "right_paddle": (self.right_paddle.x, self.right_paddle.center_y),
            "paddle_size": (self.config.PADDLE_WIDTH, self.config.PADDLE_HEIGHT),
            "playing": self.playing,
            "field_bounds": (0, self.config.SCREEN_WIDTH, 0, self.config.SCREEN_HEIGHT),
        }
