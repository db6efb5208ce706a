import numpy as np


class InvalidDimensions(ValueError):
    """Grid dimensions (or a cell buffer) that cannot describe a grid."""


class IndexOutOfRange(IndexError):
    """A position or linear index that falls outside the grid."""


def _frozen(cells):
    cells = np.array(cells, dtype=bool).reshape(-1)
    cells.flags.writeable = False
    return cells


class Grid:
    """
    A bounded Game of Life board.

    Cells live in a flat, read-only boolean array indexed by
    ``row * cols + col``. Every operation that "changes" the board returns
    a new Grid; the previous one is never touched.
    """

    def __init__(self, cells, rows, cols):
        if rows <= 0 or cols <= 0:
            raise InvalidDimensions(f"grid needs rows > 0 and cols > 0, got {rows}x{cols}")
        cells = _frozen(cells)
        if cells.size != rows * cols:
            raise InvalidDimensions(
                f"{cells.size} cells cannot fill a {rows}x{cols} grid"
            )
        self.cells = cells
        self.rows = rows
        self.cols = cols

    @classmethod
    def create(cls, rows, cols):
        """Return an all-dead grid."""
        if rows <= 0 or cols <= 0:
            raise InvalidDimensions(f"grid needs rows > 0 and cols > 0, got {rows}x{cols}")
        return cls(np.zeros(rows * cols, dtype=bool), rows, cols)

    def __len__(self):
        return self.cells.size

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self.rows == other.rows
            and self.cols == other.cols
            and np.array_equal(self.cells, other.cells)
        )

    def __repr__(self):
        return f"Grid(rows={self.rows}, cols={self.cols}, alive={self.count_alive()})"

    # ---------- coordinates ----------
    def pos_to_idx(self, pos):
        r, c = pos
        if not (0 <= r < self.rows and 0 <= c < self.cols):
            raise IndexOutOfRange(f"position {pos} outside {self.rows}x{self.cols} grid")
        return r * self.cols + c

    def idx_to_pos(self, idx):
        if not 0 <= idx < self.cells.size:
            raise IndexOutOfRange(f"index {idx} outside grid of {self.cells.size} cells")
        return (idx // self.cols, idx % self.cols)

    def as_array(self):
        """Read-only (rows, cols) view of the cells."""
        return self.cells.reshape(self.rows, self.cols)

    # ---------- construction ----------
    def update(self, new_cells):
        """Return a grid with the same dimensions holding ``new_cells``."""
        return Grid(new_cells, self.rows, self.cols)

    def randomize(self, probability, rng):
        """
        Return a grid where each cell is alive with ``probability``.

        ``rng`` is a ``numpy.random.Generator``; seed it for reproducible boards.
        """
        if not 0.0 <= probability <= 1.0:
            raise ValueError(f"probability must be within [0, 1], got {probability}")
        return self.update(rng.random(self.cells.size) < probability)

    def set_pattern(self, pattern, row, col):
        """Return a grid with a smaller 0/1 array stamped at (row, col)."""
        pattern = np.asarray(pattern, dtype=bool)
        h, w = pattern.shape
        if row < 0 or col < 0 or row + h > self.rows or col + w > self.cols:
            raise IndexOutOfRange(
                f"{h}x{w} pattern at ({row}, {col}) does not fit a {self.rows}x{self.cols} grid"
            )
        board = self.as_array().copy()
        board[row:row + h, col:col + w] = pattern
        return self.update(board)

    # ---------- rules ----------
    def is_alive(self, pos):
        return bool(self.cells[self.pos_to_idx(pos)])

    def count_live_neighbors(self, pos):
        r, c = pos
        self.pos_to_idx(pos)
        min_row, max_row = max(r - 1, 0), min(r + 1, self.rows - 1)
        min_col, max_col = max(c - 1, 0), min(c + 1, self.cols - 1)

        count = 0
        for nr in range(min_row, max_row + 1):
            for nc in range(min_col, max_col + 1):
                if (nr, nc) == (r, c):
                    continue
                if self.is_alive((nr, nc)):
                    count += 1
        return count

    def should_live(self, pos):
        live_neighbors = self.count_live_neighbors(pos)
        return live_neighbors == 3 or (self.is_alive(pos) and live_neighbors == 2)

    def neighbor_counts(self):
        """Live-neighbor count for every cell, as a (rows, cols) int array."""
        # Zero padding keeps the world bounded: nothing wraps around the edges.
        padded = np.pad(self.as_array().astype(np.uint8), 1)
        return sum(
            padded[1 + i:1 + i + self.rows, 1 + j:1 + j + self.cols]
            for i in (-1, 0, 1)
            for j in (-1, 0, 1)
            if (i, j) != (0, 0)
        )

    def next_generation(self):
        """Compute the following generation from this one."""
        board = self.as_array()
        neighbors = self.neighbor_counts()
        birth = (neighbors == 3) & ~board
        survive = ((neighbors == 2) | (neighbors == 3)) & board
        return self.update(birth | survive)

    def tick(self):
        """Advance the simulation by one generation."""
        return self.update(self.next_generation().cells)

    # ---------- stats ----------
    def count_alive(self):
        """Return number of live cells."""
        return int(np.count_nonzero(self.cells))

    def alive_positions(self):
        return {self.idx_to_pos(int(i)) for i in np.flatnonzero(self.cells)}
