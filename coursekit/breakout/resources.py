"""Loading and lookup of the game's textures, fonts and sounds."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import pygame

log = logging.getLogger(__name__)

DEFAULT_DIRECTORY = "resources"

TEXTURE_FILES = {
    "whiteBall": "whiteBall.png",
    "blackBall": "blackBall.png",
    "yellowBrick": "yellowBrick.png",
    "redBrick": "redBrick.png",
    "purpleBrick": "purpleBrick.png",
    "blueBrick": "blueBrick.png",
    "greenBrick": "greenBrick.png",
    "background": "background.png",
    "paddle": "paddle.png",
}

FONT_FILES = {"font": "Stengazeta-Regular_5.ttf"}

SOUND_FILES = {
    "background": "backgroundSound.mp3",
    "blockDestroyed": "blockDestroyedSound.mp3",
    "collision": "collisionSound.mp3",
    "gameOver": "gameOverSound.mp3",
    "newLevel": "newLevelSound.mp3",
    "buff": "buffSound.mp3",
}


class _SilentSound:
    """Stand-in for a sound that could not be loaded; tracks state but makes no noise."""

    def __init__(self) -> None:
        self._volume = 1.0
        self._playing = False
        self._loops = 0

    def play(self, loops: int = 0) -> None:
        self._playing = True
        self._loops = loops

    def stop(self) -> None:
        self._playing = False
        self._loops = 0

    def get_num_channels(self) -> int:
        return 1 if self._playing else 0

    def set_volume(self, value: float) -> None:
        self._volume = min(max(float(value), 0.0), 1.0)

    def get_volume(self) -> float:
        return self._volume


@dataclass
class FontFace:
    """A font file, opened lazily at whatever sizes are asked for."""

    path: Path | None
    _sizes: dict[int, pygame.font.Font] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def sized(self, size: int) -> pygame.font.Font:
        """The face at the given character size; the default font if the file fails."""
        font = self._sizes.get(size)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            try:
                font = pygame.font.Font(str(self.path) if self.path else None, size)
            except (pygame.error, OSError):
                log.warning("Failed to open font %s", self.path)
                font = pygame.font.Font(None, size)
            self._sizes[size] = font
        return font

    def render(
        self,
        text: str,
        size: int,
        color,
        outline_color=None,
        outline: int = 0,
    ) -> pygame.Surface:
        """Render text, optionally surrounded by an outline of the given thickness."""
        font = self.sized(size)
        body = font.render(text, True, color)
        if outline <= 0 or outline_color is None:
            return body
        width, height = body.get_size()
        result = pygame.Surface((width + 2 * outline, height + 2 * outline), pygame.SRCALPHA)
        rim = font.render(text, True, outline_color)
        for dx in range(-outline, outline + 1):
            for dy in range(-outline, outline + 1):
                if dx * dx + dy * dy <= outline * outline:
                    result.blit(rim, (outline + dx, outline + dy))
        result.blit(body, (outline, outline))
        return result


def _load_image(path: Path) -> pygame.Surface:
    try:
        return pygame.image.load(str(path))
    except (pygame.error, OSError):
        log.warning("Failed to load image %s", path)
        return pygame.Surface((0, 0))


def _load_sound(path: Path):
    if not path.is_file() or not pygame.mixer.get_init():
        if not path.is_file():
            log.warning("Failed to load sound %s", path)
        return _SilentSound()
    try:
        return pygame.mixer.Sound(str(path))
    except (pygame.error, OSError):
        log.warning("Failed to load sound %s", path)
        return _SilentSound()


def _lookup(table: dict, kind: str, name: str):
    try:
        return table[name]
    except KeyError:
        raise KeyError(f"unknown {kind}: {name!r}") from None


class Resources:
    """Named textures, fonts and sounds read from one directory.

    A file that cannot be loaded still gets an entry: an empty texture,
    the default font or a silent sound.
    """

    def __init__(self, directory: str | Path = DEFAULT_DIRECTORY) -> None:
        self.directory = Path(directory)
        self._textures: dict[str, pygame.Surface] = {}
        self._fonts: dict[str, FontFace] = {}
        self._sounds: dict[str, object] = {}

    def load_textures(self) -> None:
        """Load every texture, replacing any loaded before."""
        for name, filename in TEXTURE_FILES.items():
            self._textures[name] = _load_image(self.directory / filename)

    def load_fonts(self) -> None:
        """Register every font face."""
        for name, filename in FONT_FILES.items():
            path = self.directory / filename
            if not path.is_file():
                log.warning("Failed to find font %s", path)
                path = None
            self._fonts[name] = FontFace(path)

    def load_sounds(self) -> None:
        """Load every sound; without an initialised mixer they stay silent."""
        for name, filename in SOUND_FILES.items():
            self._sounds[name] = _load_sound(self.directory / filename)

    def texture(self, name: str) -> pygame.Surface:
        """The texture called name."""
        return _lookup(self._textures, "texture", name)

    def font(self, name: str) -> FontFace:
        """The font face called name."""
        return _lookup(self._fonts, "font", name)

    def sound(self, name: str):
        """The sound called name."""
        return _lookup(self._sounds, "sound", name)