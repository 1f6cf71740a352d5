"""
Tower Stacker game controller
=============================

Owns the whole session: the tower (stack), the upcoming blocks (queue) and
the score history (newest-first list), plus the moving block and the score.

  • update(dt, inputs) advances one frame: pause/restart handling, block
    movement with edge bounce, and the drop → overlap → trim → score path.
  • draw(canvas) emits primitive draw calls for the frame. It only reads state.

Nothing here imports pygame; the window, clock, keyboard and surfaces are
wired up in main.py / tower_input.py / tower_render.py.

Scoring
-------
  • Perfect drop (overlap within perfect_threshold_pixels of the block width):
    50 + 10 × combo, where combo counts consecutive perfect drops.
  • Otherwise: 10 + floor(10 × overlap / width), combo resets.
  • Overlap below miss_overlap_fraction of the width counts as a miss.
  • Every speed_ramp_every blocks of tower height the slide speed goes up
    by speed_increment.
"""
from __future__ import annotations
import enum
import logging
import math
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List, Optional, Protocol, Tuple

from tower_block import Block
from tower_config import CONFIG, Color, GameConfig
from tower_history import ScoreHistory
from tower_layout import Dims, compute_dims
from tower_queue import BlockQueue
from tower_stack import Tower

log = logging.getLogger("tower.game")

Rect = Tuple[float, float, float, float]

# Display colors
RAYWHITE = (245, 245, 245)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
RED = (230, 41, 55)
GOLD = (255, 203, 0)
GRAY = (130, 130, 130)
LIGHTGRAY = (200, 200, 200)
DARKGRAY = (80, 80, 80)
DARKBLUE = (0, 82, 172)
DARKGREEN = (0, 117, 44)

PREVIEW_WIDTH_SCALE = 0.4
PREVIEW_HEIGHT_SCALE = 0.6

CONTROLS = (
    ("SPACE - Drop Block", 20),
    ("P - Pause", 20),
    ("R - Restart (when game over)", 18),
)


class Action(enum.Enum):
    DROP = "drop"
    PAUSE = "pause"
    RESTART = "restart"
    QUIT = "quit"


@dataclass(frozen=True)
class FrameInput:
    """Actions whose key went down during this frame."""
    pressed: FrozenSet[Action] = frozenset()

    @classmethod
    def of(cls, *actions: Action) -> "FrameInput":
        return cls(frozenset(actions))

    def was_pressed(self, action: Action) -> bool:
        return action in self.pressed


NO_INPUT = FrameInput()


class Canvas(Protocol):
    def fill_rect(self, rect: Rect, color: Color, alpha: Optional[float] = None) -> None: ...
    def outline_rect(self, rect: Rect, color: Color, thickness: int = 1) -> None: ...
    def text(self, text: str, pos: Tuple[float, float], size: int, color: Color) -> None: ...


@dataclass(frozen=True)
class PlacementResult:
    overlap_start: float
    overlap_end: float
    perfect: bool = False
    points: int = 0
    game_over: bool = False

    @property
    def overlap_width(self) -> float:
        return max(0.0, self.overlap_end - self.overlap_start)


@dataclass(frozen=True)
class HudState:
    score: int
    height: int
    best_score: int
    combo: int
    games_played: int
    preview: List[Block] = field(default_factory=list)
    is_paused: bool = False
    is_game_over: bool = False


def overlap(current: Block, below: Block) -> Tuple[float, float]:
    """Horizontal overlap span of two blocks; end <= start means they miss."""
    return max(current.left, below.left), min(current.right, below.right)


class GameController:
    def __init__(self, config: GameConfig = CONFIG, history: Optional[ScoreHistory] = None):
        self.config = config
        self.dims: Dims = compute_dims(config)
        self.tower = Tower()
        self.queue = BlockQueue()
        self.history = history if history is not None else ScoreHistory()

        self.current_block: Optional[Block] = None
        self.score = 0
        self.consecutive_perfects = 0
        self.speed = config.initial_speed
        self.direction = 1
        self.is_game_over = False
        self.is_paused = False

        self.initialize_game()

    # ---------- Session lifecycle ----------
    def initialize_game(self):
        cfg = self.config
        self.tower.clear()
        self.queue.clear()
        self.score = 0
        self.consecutive_perfects = 0
        self.speed = cfg.initial_speed
        self.direction = 1
        self.is_game_over = False
        self.is_paused = False

        base = Block(
            cfg.screen_width / 2 - cfg.initial_block_width / 2,
            cfg.base_y,
            cfg.initial_block_width,
            cfg.block_height,
            cfg.color_at(0),
            speed=0.0,
            is_moving=False,
        )
        self.tower.push(base)

        self.generate_upcoming(cfg.preview_count)
        self.spawn_next()
        log.info("New game (games played so far: %d)", self.history.count)

    def reset(self):
        self.initialize_game()

    # ---------- Queue ----------
    def generate_upcoming(self, count: int):
        cfg = self.config
        for _ in range(count):
            width = cfg.initial_block_width if self.tower.is_empty() else self.tower.top().width
            color = cfg.color_at(self.tower.height + len(self.queue))
            self.queue.enqueue(Block(0.0, 0.0, width, cfg.block_height, color, speed=self.speed))

    def spawn_next(self) -> Block:
        if len(self.queue) == 0:
            log.warning("Block queue ran dry; generating one block on demand")
            self.generate_upcoming(1)

        block = self.queue.dequeue()
        block.set_position(0.0, self.config.base_y - self.tower.height * self.config.block_height)
        block.is_moving = True
        block.speed = self.speed
        self.current_block = block

        self.generate_upcoming(1)
        return block

    # ---------- Per-frame update ----------
    def update(self, dt: float, inputs: FrameInput = NO_INPUT):
        if self.is_game_over:
            if inputs.was_pressed(Action.RESTART):
                self.reset()
            return

        if inputs.was_pressed(Action.PAUSE):
            self.is_paused = not self.is_paused
            log.debug("Paused" if self.is_paused else "Resumed")

        if self.is_paused:
            return

        self.update_block_movement(dt)

        if inputs.was_pressed(Action.DROP):
            self.drop_block()

    def update_block_movement(self, dt: float):
        block = self.current_block
        if block is None or not block.is_moving:
            return
        block.left += self.speed * self.direction * dt

        # bounce off the screen edges
        if block.right >= self.config.screen_width:
            self.direction = -1
        elif block.left <= 0:
            self.direction = 1

    # ---------- Drop / trim / score ----------
    def drop_block(self) -> Optional[PlacementResult]:
        block = self.current_block
        if block is None or not block.is_moving:
            return None
        block.is_moving = False
        return self._trim_and_stack(block)

    def _trim_and_stack(self, block: Block) -> PlacementResult:
        cfg = self.config
        if self.tower.is_empty():
            self.tower.push(block)
            self.score += 10
            self.spawn_next()
            return PlacementResult(block.left, block.right, points=10)

        start, end = overlap(block, self.tower.top())
        if end <= start:
            self._game_over()
            return PlacementResult(start, end, game_over=True)

        width = end - start
        if width < cfg.miss_overlap_fraction * block.width:
            self._game_over()
            return PlacementResult(start, end, game_over=True)

        self.tower.push(block.trimmed(start, width))

        perfect = abs(width - block.width) < cfg.perfect_threshold_pixels
        if perfect:
            self.consecutive_perfects += 1
            points = 50 + 10 * self.consecutive_perfects
        else:
            self.consecutive_perfects = 0
            points = 10 + math.floor(10 * width / block.width)
        self.score += points

        if self.tower.height % cfg.speed_ramp_every == 0:
            self.speed += cfg.speed_increment
            log.debug("Speed up to %.1f at height %d", self.speed, self.tower.height)

        log.debug("Placed block %d: overlap %.1f..%.1f (+%d%s)",
                  self.tower.height - 1, start, end, points, ", perfect" if perfect else "")
        self.spawn_next()
        return PlacementResult(start, end, perfect=perfect, points=points)

    def _game_over(self):
        self.is_game_over = True
        rec = self.history.record_game(self.score, self.tower.height - 1)
        log.info("Game over: score %d, height %d (best %d over %d games)",
                 rec.score, rec.height, self.history.best_score(), self.history.count)

    # ---------- Read-only views ----------
    def hud(self) -> HudState:
        return HudState(
            score=self.score,
            height=self.tower.height - 1,
            best_score=self.history.best_score(),
            combo=self.consecutive_perfects,
            games_played=self.history.count,
            preview=self.queue.preview(self.config.preview_count),
            is_paused=self.is_paused,
            is_game_over=self.is_game_over,
        )

    # ---------- Drawing ----------
    def draw(self, canvas: Canvas):
        d = self.dims
        hud = self.hud()

        canvas.fill_rect((0, 0, d.total_w, d.total_h), RAYWHITE)

        for block in self.tower.snapshot():
            _draw_block(canvas, block)
        if not hud.is_game_over and self.current_block is not None:
            _draw_block(canvas, self.current_block)

        self._draw_ui(canvas, hud)
        self._draw_preview(canvas, hud.preview)
        self._draw_instructions(canvas)

        if hud.is_game_over:
            self._draw_game_over(canvas, hud)
        if hud.is_paused:
            canvas.text("PAUSED", (d.center_x - 100, d.center_y - 20), 40, RED)

    def _draw_ui(self, canvas: Canvas, hud: HudState):
        d = self.dims
        canvas.text(f"Score: {hud.score}", d.score_pos, 30, DARKBLUE)
        canvas.text(f"Height: {hud.height}", d.height_pos, 25, DARKGREEN)
        if hud.best_score > 0:
            canvas.text(f"Best: {hud.best_score}", d.best_pos, 20, GRAY)
        if hud.combo > 0:
            canvas.text(f"PERFECT x{hud.combo}!", d.combo_pos, 25, GOLD)
        canvas.text(f"Games: {hud.games_played}", d.games_pos, 20, GRAY)

    def _draw_preview(self, canvas: Canvas, preview: Iterable[Block]):
        d = self.dims
        canvas.text("Next Blocks:", d.preview_label_pos, 20, DARKGRAY)
        for i, block in enumerate(preview):
            rect = (
                d.preview_x,
                d.preview_y + i * d.preview_step,
                block.width * PREVIEW_WIDTH_SCALE,
                self.config.block_height * PREVIEW_HEIGHT_SCALE,
            )
            canvas.fill_rect(rect, block.color)
            canvas.outline_rect(rect, BLACK, 1)

    def _draw_instructions(self, canvas: Canvas):
        d = self.dims
        y = d.legend_y
        for label, size in CONTROLS:
            canvas.text(label, (d.legend_x, y), size, DARKGRAY)
            y += 30

    def _draw_game_over(self, canvas: Canvas, hud: HudState):
        d = self.dims
        cx, cy = d.center_x, d.center_y
        canvas.fill_rect((0, 0, d.total_w, d.total_h), BLACK, alpha=0.7)
        canvas.text("GAME OVER!", (cx - 150, cy - 100), 50, RED)
        canvas.text(f"Final Score: {hud.score}", (cx - 120, cy - 30), 30, WHITE)
        canvas.text(f"Tower Height: {hud.height}", (cx - 120, cy + 10), 25, WHITE)
        canvas.text(f"Best Score: {hud.best_score}", (cx - 110, cy + 45), 25, GOLD)
        canvas.text("Press R to Restart", (cx - 120, cy + 100), 25, LIGHTGRAY)

        # leaderboard down the right-hand side
        y = cy - 100
        for line in self.history.format_top(3).splitlines():
            canvas.text(line, (d.total_w - 230, y), 18, LIGHTGRAY)
            y += 22


def _draw_block(canvas: Canvas, block: Block):
    rect = (block.left, block.top, block.width, block.height)
    canvas.fill_rect(rect, block.color)
    canvas.outline_rect(rect, BLACK, 2)
