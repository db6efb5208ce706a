import sys

from config import ALIVE_GLYPH, DEAD_GLYPH

CLEAR_SCREEN = "\x1b[2J"


def render(grid, alive=ALIVE_GLYPH, dead=DEAD_GLYPH):
    """Return the grid as text, one line per row."""
    board = grid.as_array()
    return "".join(
        "".join(alive if c else dead for c in row) + "\n" for row in board
    )


def display(frame, stream=None):
    """Write a whole frame to the stream in one go."""
    stream = sys.stdout if stream is None else stream
    stream.write(frame + "\n")
    stream.flush()


def clear_term(stream=None):
    stream = sys.stdout if stream is None else stream
    stream.write(CLEAR_SCREEN + "\n")
    stream.flush()
