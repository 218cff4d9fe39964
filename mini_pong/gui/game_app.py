"""
Main game application with PyGame GUI
"""

import sys
import traceback

import pygame

from mini_pong.core.commands import Command
from mini_pong.core.commands import CommandType
from mini_pong.core.interfaces.renderer import RendererProtocol
from mini_pong.core.simulation import SimulationState
from mini_pong.utils.config import GameConfig
from mini_pong.utils.config import game_config


class FixedStepTimer:
    """Turns variable frame times into a whole number of fixed-rate ticks"""

    # Avoids a spiral of catch-up ticks after a long stall (window drag, breakpoint)
    MAX_STEPS_PER_FRAME = 5

    def __init__(self, fps: int):
        self.step = 1.0 / fps
        self.accumulator = 0.0

    def advance(self, elapsed: float) -> int:
        """Adds elapsed seconds and returns how many ticks are due"""
        self.accumulator += elapsed
        steps = 0
        while self.accumulator >= self.step and steps < self.MAX_STEPS_PER_FRAME:
            self.accumulator -= self.step
            steps += 1
        if steps == self.MAX_STEPS_PER_FRAME:
            self.accumulator = min(self.accumulator, self.step)
        return steps


class PongApp:
    """Host loop: feeds key commands and fixed-rate ticks into the simulation"""

    def __init__(
        self,
        config: GameConfig | None = None,
        renderer: RendererProtocol | None = None,
        seed: int | None = None,
    ) -> None:
        self.config = config if config is not None else game_config
        self.simulation = SimulationState(self.config, seed=seed)

        if renderer is None:
            from mini_pong.gui.pygame_renderer import PygameRenderer

            renderer = PygameRenderer(self.config)
        self.renderer = renderer

        self.timer = FixedStepTimer(self.config.FPS)
        self.clock = pygame.time.Clock()
        self.running = True

        print("Mini Pong initialized successfully!")

    def handle_command(self, command: Command) -> None:
        """Route one command to the simulation, stopping the app on QUIT"""
        if not self.simulation.apply(command):
            self.running = False
            return

        if command.type == CommandType.SERVE:
            ball = self.simulation.ball
            print(f"Serve: velocity ({ball.vx:.2f}, {ball.vy:.2f})")
        elif command.type == CommandType.TOGGLE_PLAY:
            print("Playing" if self.simulation.playing else "Paused")

    def update(self, elapsed: float) -> None:
        """Run every simulation tick that is due after `elapsed` seconds"""
        for _ in range(self.timer.advance(elapsed)):
            events = self.simulation.tick()
            for side in events["out_of_bounds"]:
                print(f"Point scored: ball left through the {side.value} side")

    def run_frame(self, elapsed: float) -> None:
        """Process input, update and render one frame"""
        for command in self.renderer.poll_commands():
            self.handle_command(command)
            if not self.running:
                return

        self.update(elapsed)
        self.renderer.render_game_state(self.simulation.get_game_state())
        self.renderer.present()

    def run(self) -> None:
        """Main application loop"""
        print("Starting Mini Pong...")

        try:
            while self.running:
                elapsed = self.clock.tick(self.config.FPS) / 1000.0
                self.run_frame(elapsed)
        finally:
            self.cleanup()

    def cleanup(self) -> None:
        """Clean up resources"""
        print("Cleaning up resources...")
        self.renderer.cleanup()
        print("Mini Pong closed properly.")


def main() -> None:
    """Main entry point"""
    try:
        app = PongApp()
        app.run()
    except KeyboardInterrupt:
        print("\nUser interruption")
    except Exception as e:
        print(f"Fatal error: {e}")
        traceback.print_exc()
        pygame.quit()
        sys.exit(1)


if __name__ == "__main__":
    main()
