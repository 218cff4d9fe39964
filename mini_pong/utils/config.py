"""
Mini Pong configuration with Pydantic validation
"""

import json
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pygame
from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationError
from pydantic import field_validator
from pydantic import model_validator


@dataclass
class KeyboardLayout:
    """Keys driving the left paddle for a given keyboard layout"""

    name: str
    left_keys: dict[str, int]
    right_keys: dict[str, int]
    display_names: dict[str, str]


ARROW_KEYS = {"up": pygame.K_UP, "down": pygame.K_DOWN}

KEYBOARD_LAYOUTS = {
    "qwerty": KeyboardLayout(
        name="QWERTY",
        left_keys={"up": pygame.K_w, "down": pygame.K_s},
        right_keys=ARROW_KEYS,
        display_names={"up": "W", "down": "S"},
    ),
    "azerty": KeyboardLayout(
        name="AZERTY",
        left_keys={"up": pygame.K_z, "down": pygame.K_s},  # Z instead of W
        right_keys=ARROW_KEYS,
        display_names={"up": "Z", "down": "S"},
    ),
    "qwertz": KeyboardLayout(
        name="QWERTZ",
        left_keys={"up": pygame.K_w, "down": pygame.K_s},
        right_keys=ARROW_KEYS,
        display_names={"up": "W", "down": "S"},
    ),
}


class GameConfig(BaseModel):
    """Main game configuration with Pydantic validation"""

    model_config = {"validate_assignment": True}

    # Screen
    SCREEN_WIDTH: int = Field(default=800, gt=0, description="Screen width in pixels")
    SCREEN_HEIGHT: int = Field(default=600, gt=0, description="Screen height in pixels")

    # Paddles
    PADDLE_WIDTH: float = Field(default=15.0, gt=0, description="Paddle width in pixels")
    PADDLE_HEIGHT: float = Field(default=50.0, gt=0, description="Paddle height in pixels")
    PADDLE_MOVE_SPEED: float = Field(default=10.0, gt=0, description="Pixels per key press")
    PADDLE_MARGIN: float = Field(
        default=50.0, ge=0, description="Distance from screen edge to paddle center"
    )

    # Ball
    BALL_RADIUS: float = Field(default=10.0, gt=0, description="Ball radius in pixels")
    SERVE_SPEED_X_MIN: float = Field(default=3.0, gt=0, description="Min horizontal serve speed")
    SERVE_SPEED_X_MAX: float = Field(default=4.0, gt=0, description="Max horizontal serve speed")
    SERVE_SPEED_Y_MAX: float = Field(default=3.0, ge=0, description="Max vertical serve speed")

    # Keyboard layout
    KEYBOARD_LAYOUT: str = Field(default="qwerty", description="Keyboard layout name")

    # Display
    WINDOW_TITLE: str = Field(default="Mini Pong", description="Window title")
    FPS: int = Field(default=60, gt=0, description="Simulation ticks per second")
    BACKGROUND_COLOR: tuple[int, int, int] = Field(default=(0, 0, 0), description="RGB color")
    BALL_COLOR: tuple[int, int, int] = Field(default=(255, 255, 255), description="RGB color")
    PADDLE_COLOR: tuple[int, int, int] = Field(default=(255, 255, 255), description="RGB color")
    LINE_COLOR: tuple[int, int, int] = Field(default=(255, 255, 255), description="RGB color")

    @field_validator("KEYBOARD_LAYOUT")
    @classmethod
    def validate_keyboard_layout(cls, v: str) -> str:
        """Validate keyboard layout exists"""
        if v not in KEYBOARD_LAYOUTS:
            raise ValueError(
                f"Unknown keyboard layout '{v}'. Available: {list(KEYBOARD_LAYOUTS.keys())}"
            )
        return v

    @model_validator(mode="after")
    def validate_screen_dimensions(self) -> "GameConfig":
        """Validate the screen is large enough for both paddles and the ball"""
        min_width = 2 * (self.PADDLE_MARGIN + self.PADDLE_WIDTH) + 2 * self.BALL_RADIUS
        if self.SCREEN_WIDTH < min_width:
            raise ValueError(f"SCREEN_WIDTH must be at least {min_width} pixels")

        min_height = max(self.PADDLE_HEIGHT, 2 * self.BALL_RADIUS)
        if self.SCREEN_HEIGHT < min_height:
            raise ValueError(f"SCREEN_HEIGHT must be at least {min_height} pixels")

        return self

    @model_validator(mode="after")
    def validate_serve_speed_range(self) -> "GameConfig":
        """Validate that the horizontal serve range is not inverted"""
        if self.SERVE_SPEED_X_MAX <= self.SERVE_SPEED_X_MIN:
            raise ValueError(
                f"SERVE_SPEED_X_MAX ({self.SERVE_SPEED_X_MAX}) must be greater than "
                f"SERVE_SPEED_X_MIN ({self.SERVE_SPEED_X_MIN})"
            )
        return self

    def __setattr__(self, name: str, value: Any) -> None:
        # Model validators run after the field is stored, so undo a rejected assignment
        if name not in type(self).model_fields:
            super().__setattr__(name, value)
            return

        previous = self.__dict__[name]
        try:
            super().__setattr__(name, value)
        except ValidationError:
            self.__dict__[name] = previous
            raise

    def update_from(self, other: "GameConfig") -> None:
        """Copy every field of an already validated config in one step"""
        self.__dict__.update(other.__dict__)

    def get_keyboard_layout(self) -> KeyboardLayout:
        """Get the current keyboard layout configuration"""
        return KEYBOARD_LAYOUTS.get(self.KEYBOARD_LAYOUT, KEYBOARD_LAYOUTS["qwerty"])

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization"""
        return self.model_dump()

    def save_to_file(self, filepath: str = "mini_pong_config.json") -> None:
        """Save configuration to a JSON file"""
        with open(Path(filepath), "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str = "mini_pong_config.json") -> "GameConfig":
        """Load configuration from a JSON file"""
        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path) as f:
            config_dict = json.load(f)

        return cls(**config_dict)

    def reset_to_defaults(self) -> None:
        """Reset all fields to their default values"""
        self.update_from(type(self)())


def validate_game_config(config: GameConfig) -> list[str]:
    """
    Return soft warnings for settings that are legal but make for a poor game.

    Hard errors are already rejected by pydantic on construction and assignment.
    """
    warnings: list[str] = []

    if config.SCREEN_WIDTH < 320 or config.SCREEN_HEIGHT < 240:
        warnings.append(
            f"Screen too small ({config.SCREEN_WIDTH}x{config.SCREEN_HEIGHT}), "
            "recommended at least 320x240"
        )

    if config.PADDLE_HEIGHT > config.SCREEN_HEIGHT / 2:
        warnings.append(
            f"PADDLE_HEIGHT ({config.PADDLE_HEIGHT}) covers more than half the screen height"
        )

    if config.PADDLE_MOVE_SPEED >= config.PADDLE_HEIGHT:
        warnings.append(
            f"PADDLE_MOVE_SPEED ({config.PADDLE_MOVE_SPEED}) is not smaller than the paddle height"
        )

    # A ball faster than its diameter can step over a paddle in one tick
    if config.SERVE_SPEED_X_MAX > 2 * config.BALL_RADIUS + config.PADDLE_WIDTH:
        warnings.append(
            f"SERVE_SPEED_X_MAX ({config.SERVE_SPEED_X_MAX}) may let the ball pass through paddles"
        )

    return warnings


# Global default configuration
game_config = GameConfig()


def load_config_from_file(filepath: str = "mini_pong_config.json") -> bool:
    """Load configuration from file into global game_config"""
    try:
        loaded_config = GameConfig.load_from_file(filepath)
    except FileNotFoundError:
        return False
    except (OSError, ValueError) as e:
        print(f"Error loading config: {e}")
        return False

    game_config.update_from(loaded_config)
    return True


def _change_values(obj: GameConfig, **kwargs: Any) -> dict[str, Any]:
    """Helper to change config values temporarily, validated as a whole"""
    old_values = {name: getattr(obj, name) for name in kwargs}
    obj.update_from(GameConfig.model_validate({**obj.model_dump(), **kwargs}))
    return old_values


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)"""
    old_values: dict[str, Any] = {}
    try:
        old_values = _change_values(game_config, **kwargs)
        yield
    finally:
        _change_values(game_config, **old_values)
