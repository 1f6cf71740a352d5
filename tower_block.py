"""Block model: an axis-aligned rectangle that slides horizontally"""
from dataclasses import dataclass, replace
from tower_config import Color


@dataclass
class Block:
    left: float
    top: float
    width: float
    height: float
    color: Color = (255, 255, 255)
    speed: float = 0.0
    is_moving: bool = False

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def move(self, dt: float, direction: int = 1):
        if self.is_moving:
            self.left += self.speed * direction * dt

    def move_left(self, dt: float):
        self.left -= self.speed * dt

    def move_right(self, dt: float):
        self.left += self.speed * dt

    def set_position(self, x: float, y: float):
        self.left = x
        self.top = y

    def trimmed(self, left: float, width: float) -> "Block":
        """Return a placed (non-moving) copy cut down to [left, left+width]."""
        return replace(self, left=left, width=width, is_moving=False)
