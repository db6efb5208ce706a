import itertools
import time

import numpy as np
from termcolor import colored

from config import LifeConfig
from display import clear_term, display, render
from game_of_life import Grid


def seed_grid(config, rng=None):
    """Build the starting board described by ``config``."""
    rng = np.random.default_rng(config.seed) if rng is None else rng
    return Grid.create(config.rows, config.cols).randomize(config.density, rng)


def animate(grid, config, stream=None, sleep=time.sleep, generations=None, should_stop=None):
    """
    Advance, render, pause and clear, yielding each grid once it is shown.

    Runs forever unless ``generations`` caps the number of ticks or
    ``should_stop`` returns True before a tick.
    """
    counter = itertools.count() if generations is None else range(generations)
    for _ in counter:
        if should_stop is not None and should_stop():
            return
        grid = grid.tick()
        display(render(grid, config.alive_glyph, config.dead_glyph), stream)
        sleep(config.frame_delay)
        clear_term(stream)
        yield grid


def main(config=None):
    config = config or LifeConfig()
    grid = seed_grid(config)
    print(
        colored("Seeded", "green", attrs=["bold"])
        + f" {config.rows}x{config.cols} grid, density {config.density}, "
        + f"{grid.count_alive()} alive (seed={config.seed})"
    )

    generation = 0
    try:
        for generation, grid in enumerate(animate(grid, config), start=1):
            pass
    except KeyboardInterrupt:
        print(colored("Stopped", "yellow") + f" after {generation} generations, {grid.count_alive()} alive")


if __name__ == "__main__":
    main()
