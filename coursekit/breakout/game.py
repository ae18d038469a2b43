"""The brick-breaking game: ball physics, bricks, scoring, power-ups and menus."""

from __future__ import annotations

import logging
import math
import random
from collections.abc import Callable
from pathlib import Path

import pygame

from coursekit.breakout.blocks import generate_blocks, hits_for_color
from coursekit.breakout.buff import Buff
from coursekit.breakout.menus import EndMenu, PauseMenu
from coursekit.breakout.objects import GameObject, follow_mouse
from coursekit.breakout.resources import Resources

log = logging.getLogger(__name__)

BEST_RESULTS_FILE = "best_results.txt"

BALL_START = (350.0, 820.0)
BALL_VELOCITY = (0.1, -0.1)
PADDLE_START = (320.0, 900.0)
SPEEDUP = 1.15
MAX_BOUNCE_ANGLE = math.pi / 3

MAX_BLOCKS = 20
MIN_BLOCK_Y = 40.0
MAX_BLOCK_Y = 520.0
BLOCK_OFFSET_X = 40.0

BUFF_CHANCE = 17
BUFFED_HITS = 3

FONT_NAME = "font"
TEXT_SIZE = 28
BRICK_TEXT_SIZE = 24
BUFF_TEXT = "BALL IN FIRE"
BUFF_TEXT_SIZE = 64
BUFF_TEXT_OUTLINE = 5

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (255, 0, 0)

BACKGROUND_VOLUME = 5
BUFF_VOLUME = 200
MAX_VOLUME = 100.0
VOLUME_STEP = 10.0

SOUND_NAMES = ("collision", "blockDestroyed", "newLevel", "gameOver", "buff", "background")


def load_best_results(path: str | Path = BEST_RESULTS_FILE) -> tuple[int, int]:
    """Read '<score> <level>'; missing or unreadable values count as 0."""
    try:
        tokens = Path(path).read_text(encoding="utf-8").split()
    except OSError:
        return 0, 0
    values: list[int] = []
    for token in tokens[:2]:
        try:
            values.append(int(token))
        except ValueError:
            break
    values.extend([0] * (2 - len(values)))
    return values[0], values[1]


def save_best_results(path: str | Path, score: int, level: int) -> None:
    """Store the best score and level as '<score> <level>'."""
    try:
        Path(path).write_text(f"{score} {level}", encoding="utf-8")
    except OSError:
        log.warning("Failed to save best results to %s", path)


def _set_volume(sound, percent: float) -> None:
    sound.set_volume(min(max(percent, 0.0), MAX_VOLUME) / MAX_VOLUME)


class Game:
    """One game session drawn onto a surface, driven one frame at a time."""

    def __init__(
        self,
        screen: pygame.Surface,
        resources: Resources,
        rng: random.Random | None = None,
        scores_path: str | Path = BEST_RESULTS_FILE,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self.screen = screen
        self.resources = resources
        self.rng = rng or random.Random()
        self.scores_path = Path(scores_path)

        resources.load_textures()
        resources.load_fonts()
        resources.load_sounds()
        self.best_score, self.best_level = load_best_results(self.scores_path)

        self.sounds = {name: resources.sound(name) for name in SOUND_NAMES}
        self.sounds["background"].play(loops=-1)
        _set_volume(self.sounds["background"], BACKGROUND_VOLUME)

        self.pause_menu = PauseMenu()
        self.end_menu = EndMenu()

        self.background = GameObject(resources.texture("background"), 0.0, 0.0)
        self.paddle = GameObject(resources.texture("paddle"), *PADDLE_START)
        self.ball = GameObject(resources.texture("whiteBall"), *BALL_START)
        self.ball_position = pygame.Vector2(BALL_START)
        self.ball_velocity = pygame.Vector2(BALL_VELOCITY)
        self.bricks: list[GameObject] = []

        self.buff = Buff(resources, clock)
        self.buff.set_ball(self.ball)

        self.score = 0
        self.level = 0
        self.active = True
        self.paused = False
        self.running = True
        self.buff_applied = False
        self._ball_texture_loaded = False
        self._volume = MAX_VOLUME
        self._volume_decreasing = True

    @property
    def score_text(self) -> str:
        return f"YOUR SCORE: {self.score}"

    @property
    def level_text(self) -> str:
        return f"CURRENT LEVEL: {self.level}"

    @property
    def best_text(self) -> str:
        return f"HIGH SCORE: {self.best_score} SCORE, {self.best_level} LEVELS"

    @property
    def width(self) -> int:
        return self.screen.get_width()

    @property
    def height(self) -> int:
        return self.screen.get_height()

    def _play(self, name: str) -> None:
        self.sounds[name].play()

    def _close(self) -> None:
        self.running = False

    def _generate_level(self) -> None:
        self.level += 1
        blocks = generate_blocks(MAX_BLOCKS, MIN_BLOCK_Y, MAX_BLOCK_Y, BLOCK_OFFSET_X, self.rng)
        self.bricks = [
            GameObject(self.resources.texture(block.color), block.x, block.y, hits_for_color(block.color))
            for block in blocks
        ]

    def _handle_walls(self) -> None:
        x, y = self.ball_position
        if x <= 0 or x + self.ball.width >= self.width:
            self.ball_velocity.x = -self.ball_velocity.x
        if y <= 0 or y + self.ball.height >= self.height:
            self.ball_velocity.y = -self.ball_velocity.y

    def _handle_paddle(self) -> None:
        if not self.paddle.intersects(self.ball):
            return
        paddle_center = self.paddle.x + self.paddle.width / 2
        ball_center = self.ball.x + self.ball.width / 2
        normalized = (paddle_center - ball_center) / (self.paddle.width / 2)
        angle = normalized * MAX_BOUNCE_ANGLE
        speed = self.ball_velocity.length()
        self.ball_velocity.x = -speed * math.sin(angle)
        self.ball_velocity.y = -speed * math.cos(angle)

    def _handle_bricks(self) -> None:
        for index, brick in enumerate(self.bricks):
            if not self.ball.intersects(brick):
                continue
            ball_x, ball_y, ball_w, ball_h = self.ball.bounds
            brick_x, brick_y, brick_w, brick_h = brick.bounds

            self._play("collision")
            required = BUFFED_HITS if self.buff.active else 1
            points = min(required, brick.hits)
            brick.decrement(points)
            self.score += points

            if brick.hits <= 0:
                if self.rng.randint(1, 100) <= BUFF_CHANCE:
                    self.buff.apply()
                    log.info("Buff activated")
                del self.bricks[index]
                self._play("blockDestroyed")

            delta_x = (ball_x + ball_w / 2) - (brick_x + brick_w / 2)
            delta_y = (ball_y + ball_h / 2) - (brick_y + brick_h / 2)
            if abs(delta_x) > abs(delta_y):
                self.ball_velocity.x = -self.ball_velocity.x
            else:
                self.ball_velocity.y = -self.ball_velocity.y
            break

    def _pause_menu_key(self, key: int) -> None:
        self.pause_menu.handle_key(key)
        if key != pygame.K_RETURN:
            return
        item = self.pause_menu.pressed_item
        if item == 1:
            self.paused = False
        elif item == 2:
            self.new_game()
        elif item == 3:
            self.toggle_volume()
        elif item == 4:
            self._close()

    def _end_menu_key(self, key: int) -> None:
        self.end_menu.handle_key(key)
        if key != pygame.K_RETURN:
            return
        item = self.end_menu.pressed_item
        if item == 1:
            self.new_game()
        elif item == 2:
            self.toggle_volume()
        elif item == 3:
            self._close()

    def handle_event(self, event: pygame.event.Event) -> None:
        """React to one window, keyboard or mouse event."""
        if event.type == pygame.QUIT:
            self._close()
            return
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.paused = not self.paused

        if self.paused:
            if event.type == pygame.KEYDOWN:
                self._pause_menu_key(event.key)
        elif not self.active:
            if event.type == pygame.KEYDOWN:
                self._end_menu_key(event.key)
        elif event.type == pygame.MOUSEMOTION:
            follow_mouse(self.paddle, event.pos[0], self.width)

    def update(self) -> None:
        """Advance the game by one frame."""
        if not self.active:
            return

        if not self.paused:
            if not self._ball_texture_loaded:
                texture = self.resources.texture("whiteBall")
                if texture.get_width() == 0 or texture.get_height() == 0:
                    log.warning("Failed to load whiteBall texture")
                else:
                    self._ball_texture_loaded = True
                    self.ball.texture = texture

            if self.buff.active and not self.buff_applied:
                self.buff_applied = True
                self.buff.apply()
                self._play("buff")
                _set_volume(self.sounds["buff"], BUFF_VOLUME)
            if not self.buff.active:
                self.buff_applied = False
                self.sounds["buff"].stop()

            self.ball_position += self.ball_velocity
            self.ball.set_position(self.ball_position.x, self.ball_position.y)

            self._handle_walls()
            self._handle_paddle()
            self._handle_bricks()

        if not self.bricks:
            self._generate_level()
            self.ball_velocity *= SPEEDUP
            self._play("newLevel")

        if self.ball_position.y + self.ball.height >= self.height:
            self.sounds["background"].stop()
            self.sounds["buff"].stop()
            self._play("gameOver")
            self.active = False

        self.best_score = max(self.best_score, self.score)
        self.best_level = max(self.best_level, self.level)

        if self.buff.active and not self.paused:
            self.buff.update()

        save_best_results(self.scores_path, self.best_score, self.best_level)

    def _blit_text(self, text: str, size: int, color, position, outline_color=None, outline: int = 0) -> None:
        face = self.resources.font(FONT_NAME)
        surface = face.render(text, size, color, outline_color, outline)
        self.screen.blit(surface, (position[0] - outline, position[1] - outline))

    def render(self) -> None:
        """Draw the current frame: a menu, or the playing field."""
        if self.paused:
            self.pause_menu.render(self.screen, self.resources)
        elif not self.active:
            self.end_menu.render(self.screen, self.resources)
        else:
            self.background.draw(self.screen)
            self.paddle.draw(self.screen)
            self.ball.draw(self.screen)
            brick_font = self.resources.font(FONT_NAME).sized(BRICK_TEXT_SIZE)
            for brick in self.bricks:
                brick.draw(self.screen, brick_font)

            if self.buff.active and self.buff_applied:
                self._blit_text(BUFF_TEXT, BUFF_TEXT_SIZE, BLACK, (250, 30), RED, BUFF_TEXT_OUTLINE)

            self._blit_text(self.score_text, TEXT_SIZE, WHITE, (15, 780))
            self._blit_text(self.level_text, TEXT_SIZE, WHITE, (15, 810))
            self._blit_text(self.best_text, TEXT_SIZE, WHITE, (15, 840))

        if pygame.display.get_init() and pygame.display.get_surface() is self.screen:
            pygame.display.flip()

    def run(self) -> None:
        """Process events, update and draw until the window is closed."""
        while self.running:
            for event in pygame.event.get():
                self.handle_event(event)
            if not self.running:
                break
            self.update()
            self.render()

    def new_game(self) -> None:
        """Start over from level 1 with a fresh ball and score."""
        self.ball_position = pygame.Vector2(BALL_START)
        self.ball_velocity = pygame.Vector2(BALL_VELOCITY)
        self.ball.set_position(*BALL_START)
        self.active = True
        self.paused = False
        self.score = 0
        self.level = 0
        self.bricks = []
        self.buff.reset()
        self._generate_level()
        self.sounds["background"].play(loops=-1)

    def toggle_volume(self) -> float:
        """Step the volume down to 0 and back up to 100 by tens; return the new volume."""
        if self._volume_decreasing:
            self._volume = max(self._volume - VOLUME_STEP, 0.0)
            if self._volume <= 0.0:
                self._volume_decreasing = False
        else:
            self._volume = min(self._volume + VOLUME_STEP, MAX_VOLUME)
            if self._volume >= MAX_VOLUME:
                self._volume_decreasing = True
        for sound in self.sounds.values():
            _set_volume(sound, self._volume)
        return self._volume