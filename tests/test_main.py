# tests/test_main.py
import io

import numpy as np
import pytest

import main
from config import LifeConfig
from display import CLEAR_SCREEN
from game_of_life import Grid, InvalidDimensions


def test_default_config():
    config = LifeConfig()

    assert (config.rows, config.cols) == (25, 50)
    assert config.density == 0.5
    assert config.frame_delay_ms == 150
    assert config.frame_delay == pytest.approx(0.15)
    assert (config.alive_glyph, config.dead_glyph) == ("O", "·")


@pytest.mark.parametrize(
    "kwargs, error",
    [
        ({"rows": 0}, InvalidDimensions),
        ({"cols": 0}, InvalidDimensions),
        ({"density": 1.2}, ValueError),
        ({"frame_delay_ms": -1}, ValueError),
        ({"alive_glyph": "x", "dead_glyph": "x"}, ValueError),
        ({"dead_glyph": ".."}, ValueError),
    ],
)
def test_config_rejects_bad_values(kwargs, error):
    with pytest.raises(error):
        LifeConfig(**kwargs)


def test_seed_grid_is_reproducible():
    config = LifeConfig(rows=6, cols=8, seed=5)

    a = main.seed_grid(config)
    b = main.seed_grid(config)

    assert a == b
    assert (a.rows, a.cols) == (6, 8)


def test_seed_grid_uses_injected_rng():
    config = LifeConfig(rows=4, cols=4, density=0.3)

    a = main.seed_grid(config, np.random.default_rng(9))
    b = main.seed_grid(config, np.random.default_rng(9))

    assert a == b


def test_animate_stops_after_generations():
    config = LifeConfig(rows=5, cols=5, frame_delay_ms=20, alive_glyph="#", dead_glyph=".")
    grid = Grid.create(5, 5).set_pattern(np.ones((1, 3)), 1, 0)
    out = io.StringIO()
    pauses = []

    shown = list(main.animate(grid, config, stream=out, sleep=pauses.append, generations=2))

    assert len(shown) == 2
    assert shown[0].alive_positions() == {(0, 1), (1, 1), (2, 1)}
    assert shown[1] == grid
    assert pauses == [0.02, 0.02]
    frames = out.getvalue().split(CLEAR_SCREEN + "\n")
    assert frames[0] == ".#...\n.#...\n.#...\n.....\n.....\n\n"
    assert frames[-1] == ""


def test_animate_honours_stop_callback():
    config = LifeConfig(rows=3, cols=3, frame_delay_ms=0)
    calls = []

    def stop():
        calls.append(1)
        return len(calls) > 3

    shown = list(main.animate(Grid.create(3, 3), config, stream=io.StringIO(),
                              sleep=lambda s: None, should_stop=stop))

    assert len(shown) == 3


def test_main_stops_on_interrupt(monkeypatch, capsys):
    def interrupted(grid, config):
        yield grid.tick()
        raise KeyboardInterrupt

    monkeypatch.setattr(main, "animate", interrupted)

    main.main(LifeConfig(rows=4, cols=4, seed=1))

    out = capsys.readouterr().out
    assert "Seeded" in out
    assert "Stopped" in out
    assert "after 1 generations" in out
