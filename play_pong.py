#!/usr/bin/env python3
"""
Main script to launch Mini Pong with PyGame graphical interface
"""

import argparse

from mini_pong.gui.game_app import main
from mini_pong.utils.config import game_config
from mini_pong.utils.config import load_config_from_file
from mini_pong.utils.config import validate_game_config


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Mini Pong")
    parser.add_argument(
        "--config", default="mini_pong_config.json", help="JSON configuration file to load"
    )
    return parser.parse_args()


if __name__ == "__main__":
    args = parse_args()

    print("=== MINI PONG ===")
    print()

    if load_config_from_file(args.config):
        print(f"Loaded configuration from {args.config}")
    for warning in validate_game_config(game_config):
        print(f"Warning: {warning}")

    names = game_config.get_keyboard_layout().display_names
    print("CONTROLS:")
    print(f"  Left paddle: {names['up']}/{names['down']}")
    print("  Right paddle: Arrow keys")
    print("  SPACE: Serve")
    print("  P: Play/Pause")
    print("  ESC: Quit")
    print()

    main()
