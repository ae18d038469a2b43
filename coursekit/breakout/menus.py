"""The start screen and the keyboard-driven pause and game-over menus."""

from __future__ import annotations

import pygame

from coursekit.breakout.resources import Resources

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
RED = (255, 0, 0)

FONT_NAME = "font"
BUTTON_SIZE = (200, 50)
BUTTON_SPACING = 70
BUTTON_OUTLINE = 5
BUTTON_TEXT_SIZE = 25

_UP_KEYS = frozenset({pygame.K_UP, pygame.K_w})
_DOWN_KEYS = frozenset({pygame.K_DOWN, pygame.K_s})


class StartMenu:
    """The opening screen, closed by pressing Enter."""

    text = "PRESS ENTER TO START"
    text_size = 82
    outline = 5

    def __init__(self) -> None:
        self.closed = False

    def handle_key(self, key: int) -> None:
        if key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            self.closed = True

    def render(self, surface: pygame.Surface, resources: Resources) -> None:
        """Draw the background with the prompt centred on it."""
        surface.fill(BLACK)
        surface.blit(resources.texture("background"), (0, 0))
        label = resources.font(FONT_NAME).render(
            self.text, self.text_size, BLACK, WHITE, self.outline
        )
        surface.blit(label, label.get_rect(center=surface.get_rect().center))


class SelectionMenu:
    """A vertical list of buttons with exactly one selected."""

    items: tuple[str, ...] = ()
    title = ""
    title_size = 64
    title_position = (0, 0)
    title_outline = 3
    first_button = (252, 290)
    button_outline_color = RED
    clears = False

    def __init__(self) -> None:
        if not self.items:
            raise TypeError("a selection menu needs items")
        self.selected = 0

    @property
    def pressed_item(self) -> int:
        """The selected item, counted from 1."""
        return self.selected + 1

    def move_up(self) -> None:
        self.selected = (self.selected - 1) % len(self.items)

    def move_down(self) -> None:
        self.selected = (self.selected + 1) % len(self.items)

    def handle_key(self, key: int) -> None:
        """Up/W and Down/S move the selection; other keys are ignored."""
        if key in _UP_KEYS:
            self.move_up()
        elif key in _DOWN_KEYS:
            self.move_down()

    def render(self, surface: pygame.Surface, resources: Resources) -> None:
        """Draw the title and the buttons, the selected one filled red."""
        if self.clears:
            surface.fill(BLACK)
        face = resources.font(FONT_NAME)
        title = face.render(self.title, self.title_size, RED, WHITE, self.title_outline)
        x, y = self.title_position
        surface.blit(title, (x - self.title_outline, y - self.title_outline))

        left, top = self.first_button
        width, height = BUTTON_SIZE
        for index, item in enumerate(self.items):
            button = pygame.Rect(left, top + index * BUTTON_SPACING, width, height)
            pygame.draw.rect(
                surface, self.button_outline_color, button.inflate(2 * BUTTON_OUTLINE, 2 * BUTTON_OUTLINE)
            )
            pygame.draw.rect(surface, RED if index == self.selected else WHITE, button)
            label = face.render(item, BUTTON_TEXT_SIZE, BLACK)
            surface.blit(label, label.get_rect(center=button.center))


class PauseMenu(SelectionMenu):
    """Shown over the game while it is paused."""

    items = ("RESUME", "NEW GAME", "TOGGLE VOLUME", "EXIT")
    title = "PAUSED"
    title_size = 64
    title_position = (273, 200)
    title_outline = 3
    first_button = (252, 290)
    button_outline_color = RED
    clears = False


class EndMenu(SelectionMenu):
    """Shown on a cleared screen once the ball is lost."""

    items = ("NEW GAME", "TOGGLE VOLUME", "EXIT")
    title = "GAME OVER!"
    title_size = 100
    title_position = (170, 180)
    title_outline = 5
    first_button = (252, 320)
    button_outline_color = BLACK
    clears = True