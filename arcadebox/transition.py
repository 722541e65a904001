"""Fade-in and fade-out shown while switching games."""

from __future__ import annotations

import enum

from .core import Canvas


class TransitionState(enum.Enum):
    IN_START = enum.auto()
    IN_END = enum.auto()
    OUT_START = enum.auto()
    OUT_END = enum.auto()


class TransitionEffect:
    """A full-screen rectangle whose alpha fades to and from opaque."""

    def __init__(self) -> None:
        self.red = 0.0
        self.green = 0.0
        self.blue = 0.0
        self.alpha = 255.0
        self.speed = 0.0
        # Time from the start of a fade-out to the end of the fade-in, in seconds.
        self.set_time(1.0)
        self.state = TransitionState.IN_START

    def set_time(self, time: float) -> None:
        if time <= 0:
            raise ValueError("transition time must be positive")
        self.speed = 255 / (time * 0.5)

    def in_start(self) -> None:
        if self.state is TransitionState.OUT_END:
            self.state = TransitionState.IN_START

    def in_end_flag(self) -> bool:
        return self.state is TransitionState.IN_START

    def out_start(self) -> None:
        if self.state is TransitionState.IN_END:
            self.state = TransitionState.OUT_START

    def out_end_flag(self) -> bool:
        return self.state is TransitionState.OUT_END

    def proc(self, canvas: Canvas, delta: float, width: float, height: float) -> None:
        if self.state in (TransitionState.IN_END, TransitionState.OUT_END):
            return
        canvas.fill(self.red, self.green, self.blue, self.alpha)
        canvas.rect(0, 0, width, height)
        if self.state is TransitionState.IN_START:
            self.alpha -= self.speed * delta
            if self.alpha <= 0:
                self.alpha = 0.0
                self.state = TransitionState.IN_END
        elif self.state is TransitionState.OUT_START:
            self.alpha += self.speed * delta
            if self.alpha >= 255:
                self.alpha = 255.0
                self.state = TransitionState.OUT_END