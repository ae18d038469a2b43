import math
import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from coursekit.breakout.game import Game, load_best_results, save_best_results  # noqa: E402
from coursekit.breakout.objects import GameObject  # noqa: E402
from coursekit.breakout.resources import Resources  # noqa: E402

BACKGROUND_COLOR = (10, 20, 30)

IMAGES = {
    "whiteBall.png": ((20, 20), (250, 250, 250)),
    "blackBall.png": ((20, 20), (5, 5, 5)),
    "yellowBrick.png": ((45, 45), (200, 200, 0)),
    "redBrick.png": ((45, 45), (200, 0, 0)),
    "purpleBrick.png": ((45, 45), (120, 0, 120)),
    "blueBrick.png": ((45, 45), (0, 0, 200)),
    "greenBrick.png": ((45, 45), (0, 200, 0)),
    "background.png": ((720, 960), BACKGROUND_COLOR),
    "paddle.png": ((100, 20), (100, 100, 100)),
}


@pytest.fixture
def resources(tmp_path):
    directory = tmp_path / "resources"
    directory.mkdir()
    for name, (size, color) in IMAGES.items():
        surface = pygame.Surface(size)
        surface.fill(color)
        pygame.image.save(surface, str(directory / name))
    return Resources(directory)


@pytest.fixture
def now():
    return [0.0]


@pytest.fixture
def game(resources, tmp_path, now):
    return Game(
        pygame.Surface((720, 960)),
        resources,
        random.Random(1),
        tmp_path / "best.txt",
        clock=lambda: now[0],
    )


def key(code):
    return pygame.event.Event(pygame.KEYDOWN, key=code)


def far_brick(resources, hits=5):
    return GameObject(resources.texture("redBrick"), 600.0, 100.0, hits)


def test_best_results_round_trip(tmp_path):
    path = tmp_path / "scores.txt"
    save_best_results(path, 12, 4)
    assert load_best_results(path) == (12, 4)


def test_missing_best_results_are_zero(tmp_path):
    assert load_best_results(tmp_path / "absent.txt") == (0, 0)


def test_game_reads_stored_best_results(resources, tmp_path):
    path = tmp_path / "best.txt"
    save_best_results(path, 7, 3)
    game = Game(pygame.Surface((720, 960)), resources, random.Random(0), path)
    assert (game.best_score, game.best_level) == (7, 3)
    assert game.best_text == "HIGH SCORE: 7 SCORE, 3 LEVELS"


def test_initial_state(game, resources):
    assert game.score_text == "YOUR SCORE: 0"
    assert game.level_text == "CURRENT LEVEL: 0"
    assert resources.sound("background").get_volume() == pytest.approx(0.05)


def test_first_update_creates_level_and_speeds_up(game):
    before = game.ball_velocity.length()
    game.update()
    assert game.level == 1
    assert len(game.bricks) == 20
    assert game.ball_velocity.length() / before == pytest.approx(1.15)


def test_brick_hit_scores_and_bounces(game, resources):
    brick = GameObject(resources.texture("redBrick"), 350.0, 700.0, 2)
    game.bricks = [brick]
    game.ball_position = pygame.Vector2(362.0, 681.0)
    game.ball_velocity = pygame.Vector2(0.0, 1.0)
    game.update()
    assert game.score == 1
    assert brick.hits == 1
    assert game.bricks == [brick]
    assert game.ball_velocity.y == pytest.approx(-1.0)
    assert game.score_text == "YOUR SCORE: 1"


def test_destroyed_brick_is_removed(game, resources):
    target = GameObject(resources.texture("blueBrick"), 350.0, 700.0, 1)
    other = far_brick(resources)
    game.bricks = [target, other]
    game.ball_position = pygame.Vector2(362.0, 681.0)
    game.ball_velocity = pygame.Vector2(0.0, 1.0)
    game.update()
    assert game.bricks == [other]
    assert game.score == 1


def test_buffed_ball_hits_harder(game, resources):
    brick = GameObject(resources.texture("redBrick"), 350.0, 700.0, 5)
    game.bricks = [brick]
    game.buff.apply()
    game.ball_position = pygame.Vector2(362.0, 681.0)
    game.ball_velocity = pygame.Vector2(0.0, 1.0)
    game.update()
    assert game.buff_applied is True
    assert game.score == 3
    assert brick.hits == 2


def test_buff_expires_and_ball_turns_white(game, resources, now):
    game.bricks = [far_brick(resources)]
    game.buff.apply()
    game.ball_velocity = pygame.Vector2(0.0, 0.0)
    game.update()
    assert game.ball.texture is resources.texture("blackBall")
    now[0] += 10.0
    game.update()
    assert game.buff.active is False
    assert game.ball.texture is resources.texture("whiteBall")


def test_wall_reverses_horizontal_velocity(game, resources):
    game.bricks = [far_brick(resources)]
    game.ball_position = pygame.Vector2(-1.0, 400.0)
    game.ball_velocity = pygame.Vector2(0.1, 0.0)
    game.update()
    assert game.ball_velocity.x == pytest.approx(-0.1)


def test_centered_paddle_hit_goes_straight_up(game, resources):
    game.bricks = [far_brick(resources)]
    game.ball_position = pygame.Vector2(360.0, 885.0)
    game.ball_velocity = pygame.Vector2(0.0, 1.0)
    game.update()
    assert game.ball_velocity.x == pytest.approx(0.0, abs=1e-9)
    assert game.ball_velocity.y == pytest.approx(-1.0)


def test_off_center_paddle_hit_keeps_speed_and_goes_left(game, resources):
    game.bricks = [far_brick(resources)]
    game.ball_position = pygame.Vector2(330.0, 885.0)
    game.ball_velocity = pygame.Vector2(0.0, 1.0)
    game.update()
    assert game.ball_velocity.length() == pytest.approx(1.0)
    assert game.ball_velocity.x < 0
    assert game.ball_velocity.y < 0


def test_losing_the_ball_ends_game_and_saves(game, resources, tmp_path):
    game.bricks = [far_brick(resources)]
    game.score = 4
    game.ball_position = pygame.Vector2(350.0, 950.0)
    game.update()
    assert game.active is False
    assert load_best_results(tmp_path / "best.txt") == (game.best_score, game.best_level)
    assert game.best_score == 4


def test_pause_freezes_ball(game, resources):
    game.bricks = [far_brick(resources)]
    game.handle_event(key(pygame.K_ESCAPE))
    position = pygame.Vector2(game.ball_position)
    game.update()
    assert game.paused is True
    assert game.ball_position == position


def test_pause_menu_resume(game):
    game.handle_event(key(pygame.K_ESCAPE))
    game.handle_event(key(pygame.K_RETURN))
    assert game.paused is False


def test_pause_menu_new_game(game, resources):
    game.bricks = [far_brick(resources)]
    game.score = 9
    game.handle_event(key(pygame.K_ESCAPE))
    game.handle_event(key(pygame.K_DOWN))
    game.handle_event(key(pygame.K_RETURN))
    assert game.paused is False
    assert game.score == 0
    assert game.level == 1
    assert len(game.bricks) == 20
    assert tuple(game.ball_velocity) == pytest.approx((0.1, -0.1))


def test_pause_menu_exit(game):
    game.handle_event(key(pygame.K_ESCAPE))
    game.handle_event(key(pygame.K_UP))
    game.handle_event(key(pygame.K_RETURN))
    assert game.running is False


def test_end_menu_starts_new_game(game):
    game.active = False
    game.handle_event(key(pygame.K_RETURN))
    assert game.active is True
    assert game.level == 1


def test_end_menu_exit(game):
    game.active = False
    game.handle_event(key(pygame.K_UP))
    game.handle_event(key(pygame.K_RETURN))
    assert game.running is False


def test_quit_event_stops_game(game):
    game.handle_event(pygame.event.Event(pygame.QUIT))
    assert game.running is False


def test_mouse_moves_paddle_within_window(game):
    game.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(1000, 5), rel=(0, 0), buttons=(0, 0, 0)))
    assert game.paddle.x == 720 - game.paddle.width
    game.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(-50, 5), rel=(0, 0), buttons=(0, 0, 0)))
    assert game.paddle.x == 0


def test_toggle_volume_cycles(game, resources):
    volumes = [game.toggle_volume() for _ in range(12)]
    assert volumes[:10] == sorted(volumes[:10], reverse=True)
    assert volumes[9] == 0
    assert volumes[10] > volumes[9]
    assert resources.sound("background").get_volume() == pytest.approx(volumes[-1] / 100)


def test_render_playing_field_draws_background(game, resources):
    game.bricks = [far_brick(resources)]
    game.render()
    assert tuple(game.screen.get_at((700, 10)))[:3] == BACKGROUND_COLOR


def test_render_pause_menu_highlights_first_button(game):
    game.handle_event(key(pygame.K_ESCAPE))
    game.render()
    assert tuple(game.screen.get_at((256, 294)))[:3] == (255, 0, 0)


def test_render_end_menu_clears_screen(game):
    game.active = False
    game.render()
    assert tuple(game.screen.get_at((5, 5)))[:3] == (0, 0, 0)
    assert tuple(game.screen.get_at((256, 324)))[:3] == (255, 0, 0)
    assert math.isfinite(game.ball_velocity.length())