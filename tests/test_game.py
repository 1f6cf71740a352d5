from __future__ import annotations

import pytest

from tower_block import Block
from tower_config import GameConfig
from tower_game import Action, FrameInput, GameController, overlap


def test_initial_state(game: GameController, config: GameConfig) -> None:
    assert game.tower.height == 1
    base = game.tower.top()
    assert (base.left, base.width, base.top) == (300.0, 200.0, 500.0)
    assert not base.is_moving

    cur = game.current_block
    assert cur.is_moving
    assert (cur.left, cur.top) == (0.0, 470.0)
    assert cur.speed == config.initial_speed
    assert cur.color == config.palette[1]
    assert len(game.queue) == config.preview_count
    assert game.score == 0 and game.consecutive_perfects == 0
    assert not game.is_game_over and not game.is_paused


def test_overlap_span() -> None:
    below = Block(0.0, 0.0, 40.0, 30.0)
    assert overlap(Block(10.0, 0.0, 40.0, 30.0), below) == (10.0, 40.0)
    start, end = overlap(Block(60.0, 0.0, 40.0, 30.0), below)
    assert end <= start


def test_partial_overlap_trims_block(game: GameController, align) -> None:
    align(game, 50.0)
    result = game.drop_block()

    assert not result.game_over and not result.perfect
    assert (result.overlap_start, result.overlap_end) == (350.0, 500.0)
    placed = game.tower.top()
    assert (placed.left, placed.width) == (350.0, 150.0)
    assert not placed.is_moving
    # 10 + floor(10 * 150 / 200)
    assert result.points == 17 and game.score == 17
    assert game.consecutive_perfects == 0


def test_no_overlap_ends_game(game: GameController) -> None:
    game.current_block.left = 600.0
    result = game.drop_block()

    assert result.game_over
    assert game.is_game_over
    assert game.tower.height == 1
    assert game.history.count == 1
    rec = game.history.records()[0]
    assert (rec.score, rec.height) == (0, 0)


def test_small_overlap_counts_as_miss() -> None:
    game = GameController(GameConfig(initial_block_width=100.0))
    assert game.tower.top().left == 350.0
    game.current_block.left = 441.0  # overlap 441..450 = 9 < 10% of 100

    result = game.drop_block()
    assert result.game_over and result.overlap_width == pytest.approx(9.0)
    assert game.is_game_over and game.history.count == 1


def test_small_but_sufficient_overlap_is_placed() -> None:
    game = GameController(GameConfig(initial_block_width=100.0))
    game.current_block.left = 430.0  # overlap 20

    result = game.drop_block()
    assert not result.game_over
    assert game.tower.top().width == pytest.approx(20.0)
    assert game.score == 12


def test_perfect_stack_combo(game: GameController, align) -> None:
    align(game)
    first = game.drop_block()
    assert first.perfect and first.points == 60
    assert game.consecutive_perfects == 1

    align(game)
    second = game.drop_block()
    assert second.perfect and second.points == 70
    assert game.consecutive_perfects == 2
    assert game.score == 130


def test_near_perfect_within_threshold(game: GameController, align) -> None:
    align(game, 4.0)
    result = game.drop_block()
    assert result.perfect
    assert game.tower.top().width == pytest.approx(196.0)


def test_imperfect_drop_resets_combo(game: GameController, align) -> None:
    align(game)
    game.drop_block()
    align(game)
    game.drop_block()
    assert game.consecutive_perfects == 2

    align(game, 20.0)
    result = game.drop_block()
    assert not result.perfect
    assert game.consecutive_perfects == 0
    # 10 + floor(10 * 180 / 200)
    assert result.points == 19
    assert game.score == 60 + 70 + 19


def test_speed_ramps_every_five_blocks(game: GameController, config: GameConfig, align) -> None:
    speeds = []
    for _ in range(14):
        align(game)
        game.drop_block()
        speeds.append(game.speed)

    # tower heights 2..15 after each drop
    assert speeds[2] == config.initial_speed                            # height 4
    assert speeds[3] == config.initial_speed + 15.0                     # height 5
    assert speeds[7] == config.initial_speed + 15.0                     # height 9
    assert speeds[8] == config.initial_speed + 30.0                     # height 10
    assert speeds[13] == config.initial_speed + 45.0                    # height 15
    assert game.current_block.speed == game.speed


def test_spawn_position_follows_tower_height(game: GameController, config: GameConfig, align) -> None:
    for _ in range(3):
        align(game)
        game.drop_block()
    cur = game.current_block
    assert cur.top == config.base_y - game.tower.height * config.block_height
    assert cur.left == 0.0 and cur.is_moving


def test_spawn_keeps_queue_length(game: GameController) -> None:
    before = len(game.queue)
    game.spawn_next()
    assert len(game.queue) == before


def test_spawn_recovers_from_empty_queue(game: GameController) -> None:
    game.queue.clear()
    block = game.spawn_next()
    assert block is game.current_block and block.is_moving
    assert len(game.queue) == 1


def test_generated_blocks_follow_tower_top(game: GameController, align) -> None:
    align(game, 50.0)
    game.drop_block()
    game.generate_upcoming(1)
    newest = game.queue.preview(len(game.queue))[-1]
    assert newest.width == 150.0
    assert not newest.is_moving


def test_empty_tower_drop_awards_flat_points(game: GameController) -> None:
    game.tower.clear()
    result = game.drop_block()
    assert not result.game_over and result.points == 10
    assert game.tower.height == 1
    assert game.score == 10
    assert game.current_block.is_moving


def test_second_drop_without_spawn_is_ignored(game: GameController) -> None:
    game.current_block.is_moving = False
    assert game.drop_block() is None
    assert game.tower.height == 1 and game.score == 0


def test_movement_and_bounce(game: GameController) -> None:
    game.update(1.0)
    assert game.current_block.left == 150.0
    assert game.direction == 1

    game.current_block.left = 590.0
    game.update(0.1)
    assert game.current_block.right >= 800.0
    assert game.direction == -1
    game.update(0.1)
    assert game.current_block.left == pytest.approx(590.0)

    game.current_block.left = 10.0
    game.update(0.1)
    assert game.current_block.left == pytest.approx(-5.0)
    assert game.direction == 1


def test_drop_via_update(game: GameController, align) -> None:
    align(game)
    game.update(0.0, FrameInput.of(Action.DROP))
    assert game.tower.height == 2
    assert game.score == 60


def test_pause_freezes_everything(game: GameController) -> None:
    game.update(1.0, FrameInput.of(Action.PAUSE))
    assert game.is_paused
    assert game.current_block.left == 0.0

    game.update(1.0, FrameInput.of(Action.DROP))
    assert game.tower.height == 1
    assert game.current_block.left == 0.0

    game.update(0.5, FrameInput.of(Action.PAUSE))
    assert not game.is_paused
    assert game.current_block.left == 75.0


def test_game_over_ignores_everything_but_restart(game: GameController) -> None:
    game.current_block.left = 600.0
    game.drop_block()
    assert game.is_game_over

    left = game.current_block.left
    game.update(1.0, FrameInput.of(Action.DROP, Action.PAUSE))
    assert game.is_game_over and not game.is_paused
    assert game.current_block.left == left
    assert game.history.count == 1


def test_restart_resets_session_but_keeps_history(game: GameController, config: GameConfig, align) -> None:
    for _ in range(5):
        align(game)
        game.drop_block()
    assert game.speed > config.initial_speed
    game.current_block.left = 700.0
    game.direction = -1
    game.drop_block()
    assert game.is_game_over
    final = game.score

    game.update(0.0, FrameInput.of(Action.RESTART))
    assert not game.is_game_over
    assert game.score == 0 and game.consecutive_perfects == 0
    assert game.tower.height == 1
    assert game.speed == config.initial_speed and game.direction == 1
    assert len(game.queue) == config.preview_count
    assert game.history.count == 1
    assert game.history.best_score() == final
    assert game.history.best_height() == 5


def test_tower_height_invariant_over_a_session(game: GameController, align) -> None:
    for offset in (0.0, 10.0, -5.0, 30.0, 0.0, 2.0):
        align(game, offset)
        game.drop_block()
        assert game.tower.height == len(game.tower.snapshot())
        assert game.tower.height >= 1


def test_history_shared_across_controllers() -> None:
    first = GameController()
    first.current_block.left = 600.0
    first.drop_block()

    second = GameController(history=first.history)
    assert second.history.count == 1
