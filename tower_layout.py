# tower_layout.py
from dataclasses import dataclass
from tower_config import CONFIG, GameConfig


@dataclass
class Dims:
    total_w: int
    total_h: int
    margin: int
    center_x: int
    center_y: int
    score_pos: tuple
    height_pos: tuple
    best_pos: tuple
    combo_pos: tuple
    games_pos: tuple
    preview_label_pos: tuple
    preview_x: int
    preview_y: int
    preview_step: int
    legend_x: int
    legend_y: int


def compute_dims(config: GameConfig = CONFIG) -> Dims:
    w = int(config.screen_width)
    h = int(config.screen_height)
    margin = 20

    center_x = w // 2
    center_y = h // 2

    return Dims(
        total_w=w, total_h=h, margin=margin,
        center_x=center_x, center_y=center_y,
        score_pos=(margin, 20),
        height_pos=(margin, 60),
        best_pos=(margin, 95),
        combo_pos=(center_x - 80, 100),
        games_pos=(w - 150, 20),
        preview_label_pos=(w - 180, 60),
        preview_x=w - 170,
        preview_y=100,
        preview_step=40,
        legend_x=margin,
        legend_y=h - 80,
    )
