"""The game: loading a level, running the main loop and the command entry point."""

from __future__ import annotations

import argparse
import os
import random
import signal
import sys
import time
from pathlib import Path

from .components import GameState
from .controls import KeyState, process_input
from .populate import populate_world
from .render import close_window, open_window
from .scene import SceneError, load_scene
from .tilemap import MapError, load_map
from .timing import FrameClock, update
from .world import World

MAP_FILE = "map.txt"
SCENE_FILE = "scene.json"


class Game:
    """One level: its world, keyboard state and score."""

    def __init__(self, data_dir="data", rng=None):
        self.data_dir = Path(data_dir)
        self.rng = rng if rng is not None else random.Random()
        self.world = World()
        self.keys = KeyState()
        self.score = 0
        self.tile_map = []
        self.templates = []

    def load(self) -> None:
        """Read the tile map and the scene description from the data directory."""
        self.tile_map = load_map(self.data_dir / MAP_FILE)
        self.templates = load_scene(self.data_dir / SCENE_FILE)

    def restart(self) -> None:
        """Reset the score and rebuild the world from the loaded level."""
        self.score = 0
        populate_world(self.world, self.tile_map, self.templates)

    def step(self, state, delta_time) -> GameState:
        """Advance the game by one frame in the given state; return the next state."""
        state = GameState(state)
        if state is GameState.RESUME:
            state = GameState.RUN
        if state is GameState.RUN:
            self.score = update(self.world, self.keys, delta_time, self.score, self.rng)
        if state is GameState.RESTART:
            state = GameState.PAUSE
            self.restart()
        return state

    def run(self, renderer, clock) -> int:
        """Load the level and loop until the player closes the game; return the score."""
        self.load()
        self.restart()
        clock.reset()
        print(self.score)

        state = GameState.RUN
        frames = seconds = total_frames = 0
        elapsed = 0.0
        while True:
            started = time.perf_counter()
            state = process_input(self.keys, state)
            state, delta_time = clock.delay(state)
            state = self.step(state, delta_time)
            if state is GameState.CLOSE:
                break
            renderer.render(self.world)

            elapsed += time.perf_counter() - started
            frames += 1
            if elapsed >= 1.0:
                seconds += 1
                total_frames += frames
                print(
                    f"seconds: {seconds} | microseconds: {int(elapsed * 1_000_000)} "
                    f"| FPS: {frames} | average: {total_frames // seconds}"
                )
                elapsed = 0.0
                frames = 0
        return self.score


def write_kill_script(path, pid) -> Path:
    """Write a shell script that terminates the process pid."""
    path = Path(path)
    path.write_text(f"kill -15 {pid}", encoding="ascii")
    return path


def _terminate(signum, frame):
    raise SystemExit(0)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="gridsnatch",
        description="Walk the grid and snatch the collectibles.",
    )
    parser.add_argument("--data-dir", default="data", help="directory holding map.txt and scene.json")
    parser.add_argument("--kill-script", default="kill.sh", help="where to write the kill script")
    args = parser.parse_args(argv)

    write_kill_script(args.kill_script, os.getpid())
    previous = signal.signal(signal.SIGTERM, _terminate)
    try:
        game = Game(args.data_dir, random.Random())
        try:
            game.load()
        except (MapError, SceneError) as error:
            print(error, file=sys.stderr)
            return 1
        try:
            renderer = open_window()
        except RuntimeError as error:
            print(error, file=sys.stderr)
            return 1
        try:
            game.run(renderer, FrameClock())
        finally:
            close_window()
        return 0
    finally:
        signal.signal(signal.SIGTERM, previous)