"""Distance-to-goal countdown shown during the stage."""

from __future__ import annotations

import copy

from ..core import Canvas
from .config import TimeData


class Timer:
    """Counts ``limit_time`` down by ``reduce_time`` per second to zero."""

    def __init__(self, data: TimeData) -> None:
        self._template = copy.deepcopy(data)
        self.data = copy.deepcopy(data)
        self._up = False

    def init(self) -> None:
        self.data = copy.deepcopy(self._template)
        self._up = False

    def update(self, delta: float) -> None:
        self.data.limit_time -= self.data.reduce_time * delta
        if self.data.limit_time <= 0:
            self.data.limit_time = 0.0
            self._up = True

    def draw(self, canvas: Canvas) -> None:
        data = self.data
        digits = str(int(data.limit_time))
        # Right-align the number within max_digit character cells.
        offset = data.time_text_size / 2 * (data.max_digit - len(digits))
        canvas.fill(data.time_color)
        canvas.text_size(data.time_text_size)
        canvas.text(digits, data.time_pos.x + offset, data.time_pos.y)
        canvas.text(data.time_str, data.time_text_pos.x, data.time_text_pos.y)

    def time_up(self) -> bool:
        return self._up