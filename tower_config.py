"""Gameplay constants for the tower stacker."""
from dataclasses import dataclass
from typing import Tuple

Color = Tuple[int, int, int]

# Block colors: sky blue, pink, gold, lime, orange, purple, beige, violet, maroon, dark blue
PALETTE: Tuple[Color, ...] = (
    (102, 191, 255),
    (255, 109, 194),
    (255, 203, 0),
    (0, 158, 47),
    (255, 161, 0),
    (200, 122, 255),
    (211, 176, 131),
    (135, 60, 190),
    (190, 33, 55),
    (0, 82, 172),
)


@dataclass(frozen=True)
class GameConfig:
    block_height: float = 30.0
    initial_block_width: float = 200.0
    initial_speed: float = 150.0
    speed_increment: float = 15.0
    screen_width: float = 800.0
    screen_height: float = 600.0
    perfect_threshold_pixels: float = 5.0
    preview_count: int = 3
    miss_overlap_fraction: float = 0.1
    base_offset: float = 100.0      # screen bottom -> top of the base block
    speed_ramp_every: int = 5       # tower heights at which speed ramps
    target_fps: int = 60
    palette: Tuple[Color, ...] = PALETTE

    def __post_init__(self):
        for name in ("block_height", "initial_block_width", "screen_width", "screen_height"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)!r}")
        if self.initial_speed < 0 or self.speed_increment < 0:
            raise ValueError("speeds must be non-negative")
        if self.initial_block_width >= self.screen_width:
            raise ValueError("initial_block_width must be smaller than screen_width")
        if self.preview_count < 1:
            raise ValueError(f"preview_count must be at least 1, got {self.preview_count}")
        if not 0.0 <= self.miss_overlap_fraction < 1.0:
            raise ValueError(f"miss_overlap_fraction must be in [0, 1), got {self.miss_overlap_fraction}")
        if self.speed_ramp_every < 1:
            raise ValueError("speed_ramp_every must be at least 1")
        if not self.palette:
            raise ValueError("palette must not be empty")

    @property
    def base_y(self) -> float:
        """Top Y coordinate of the base block."""
        return self.screen_height - self.base_offset

    def color_at(self, index: int) -> Color:
        return self.palette[index % len(self.palette)]


CONFIG = GameConfig()
