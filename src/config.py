from dataclasses import dataclass

from game_of_life import InvalidDimensions

ROWS = 25
COLS = 50
DENSITY = 0.5            # chance a cell starts alive
FRAME_DELAY_MS = 150
ALIVE_GLYPH = "O"
DEAD_GLYPH = "·"    # middle dot


@dataclass(frozen=True)
class LifeConfig:
    rows: int = ROWS
    cols: int = COLS
    density: float = DENSITY
    frame_delay_ms: int = FRAME_DELAY_MS
    alive_glyph: str = ALIVE_GLYPH
    dead_glyph: str = DEAD_GLYPH
    seed: int | None = None

    def __post_init__(self):
        if self.rows <= 0 or self.cols <= 0:
            raise InvalidDimensions(f"grid needs rows > 0 and cols > 0, got {self.rows}x{self.cols}")
        if not 0.0 <= self.density <= 1.0:
            raise ValueError(f"density must be within [0, 1], got {self.density}")
        if self.frame_delay_ms < 0:
            raise ValueError(f"frame_delay_ms cannot be negative, got {self.frame_delay_ms}")
        if len(self.alive_glyph) != 1 or len(self.dead_glyph) != 1:
            raise ValueError("glyphs must be single characters")
        if self.alive_glyph == self.dead_glyph:
            raise ValueError("alive and dead glyphs must differ")

    @property
    def frame_delay(self):
        """Pause between generations, in seconds."""
        return self.frame_delay_ms / 1000
