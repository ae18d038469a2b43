"""The timed power-up that turns the ball black and makes it hit harder."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from coursekit.breakout.objects import GameObject
from coursekit.breakout.resources import Resources

log = logging.getLogger(__name__)

BUFF_DURATION = 10.0
NORMAL_BALL = "whiteBall"
BUFFED_BALL = "blackBall"


class Buff:
    """A power-up that lasts BUFF_DURATION seconds from its last activation."""

    def __init__(self, resources: Resources, clock: Callable[[], float] | None = None) -> None:
        self._resources = resources
        self._clock = clock or time.monotonic
        self._active = False
        self._started = self._clock()
        self.ball: GameObject | None = None

    @property
    def active(self) -> bool:
        return self._active

    @property
    def elapsed(self) -> float:
        """Seconds since the timer was last restarted."""
        return self._clock() - self._started

    def set_ball(self, ball: GameObject | None) -> None:
        self.ball = ball

    def apply(self) -> None:
        """Switch the buff on, restart its timer and darken the ball."""
        self._active = True
        self._started = self._clock()
        texture = self._resources.texture(BUFFED_BALL)
        if texture.get_width() == 0 or texture.get_height() == 0:
            log.warning("Failed to load blackBall texture")
        if self.ball is not None:
            self.ball.texture = texture

    def reset(self) -> None:
        """Switch the buff off at once and restore the ball."""
        self._active = False
        self._started = self._clock()
        if self.ball is not None:
            self.ball.texture = self._resources.texture(NORMAL_BALL)

    def update(self) -> None:
        """End the buff once its time is up."""
        if self._active and self.elapsed >= BUFF_DURATION:
            self._active = False
            if self.ball is not None:
                self.ball.texture = self._resources.texture(NORMAL_BALL)