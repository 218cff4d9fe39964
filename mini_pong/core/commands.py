"""
Discrete player commands fed into the simulation
"""

from dataclasses import dataclass
from enum import Enum

from mini_pong.core.entities import Side


class CommandType(Enum):
    """Available command types"""

    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    SERVE = "serve"
    TOGGLE_PLAY = "toggle_play"
    QUIT = "quit"


@dataclass(frozen=True)
class Command:
    """A single key-down command; movement commands carry the paddle side"""

    type: CommandType
    side: Side | None = None

    def __post_init__(self) -> None:
        is_move = self.type in (CommandType.MOVE_UP, CommandType.MOVE_DOWN)
        if is_move and self.side is None:
            raise ValueError(f"{self.type.value} requires a paddle side")
        if not is_move and self.side is not None:
            raise ValueError(f"{self.type.value} does not take a paddle side")

    @classmethod
    def move_up(cls, side: Side) -> "Command":
        return cls(CommandType.MOVE_UP, side)

    @classmethod
    def move_down(cls, side: Side) -> "Command":
        return cls(CommandType.MOVE_DOWN, side)

    @classmethod
    def serve(cls) -> "Command":
        return cls(CommandType.SERVE)

    @classmethod
    def toggle_play(cls) -> "Command":
        return cls(CommandType.TOGGLE_PLAY)

    @classmethod
    def quit(cls) -> "Command":
        return cls(CommandType.QUIT)
