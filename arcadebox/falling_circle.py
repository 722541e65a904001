"""Click the falling circle before it leaves the screen."""

from __future__ import annotations

import enum
import random
from typing import Optional

from .core import Audio, Canvas, FrameInput, Game, Key

EXPLOSION_IMAGE = "explosion"
EXPLOSION_SOUND = "bomb"


class _Phase(enum.Enum):
    TITLE = enum.auto()
    PLAY = enum.auto()
    CLEAR = enum.auto()


class FallingCircleGame(Game):
    """A circle falls repeatedly; clicking inside it clears the game."""

    def __init__(
        self,
        host=None,
        canvas: Optional[Canvas] = None,
        audio: Optional[Audio] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        super().__init__(host, canvas, audio)
        self.rng = rng if rng is not None else random.Random()
        self.state = _Phase.TITLE
        self.circle_radius = 50.0
        self.circle_x = 0.0
        self.circle_y = 0.0
        self.circle_vy = 0.0
        self.clear_flag = False

    def create(self) -> None:
        self.state = _Phase.TITLE

    def proc(self, inputs: FrameInput) -> None:
        if self.state is _Phase.TITLE:
            self.title(inputs)
        elif self.state is _Phase.PLAY:
            self.play(inputs)
        elif self.state is _Phase.CLEAR:
            self.clear_scene(inputs)

    def title(self, inputs: FrameInput) -> None:
        canvas = self.canvas
        canvas.clear(60, 60, 60)
        canvas.fill(255, 255, 255)
        canvas.text_size(80)
        canvas.print("Title：落ちてくる円をクリックするゲーム")
        canvas.print("　クリックでゲームスタート")
        canvas.print("  Enterでメニューに戻る")
        if inputs.is_trigger(Key.MOUSE_LBUTTON):
            self.init()
            self.state = _Phase.PLAY
            return
        if inputs.is_trigger(Key.KEY_ENTER):
            self.back_to_menu()

    def _respawn(self) -> None:
        self.circle_x = self.rng.randrange(1000) + 500.0
        self.circle_y = -self.circle_radius

    def init(self) -> None:
        self.circle_radius = 50.0
        self._respawn()
        self.circle_vy = 800.0
        self.clear_flag = False

    def play(self, inputs: FrameInput) -> None:
        self.circle_y += self.circle_vy * inputs.delta
        if self.circle_y > self.canvas.height + self.circle_radius:
            self._respawn()
        if inputs.is_trigger(Key.MOUSE_LBUTTON):
            dx = self.circle_x - inputs.mouse_x
            dy = self.circle_y - inputs.mouse_y
            if dx * dx + dy * dy < self.circle_radius * self.circle_radius:
                self.audio.play(EXPLOSION_SOUND)
                self.clear_flag = True

        canvas = self.canvas
        canvas.clear(0, 0, 255)
        canvas.fill(255)
        canvas.circle(self.circle_x, self.circle_y, self.circle_radius * 2)
        canvas.fill(255, 255, 255)
        canvas.print("Play")
        canvas.print("　円をクリックするとGame Clear")
        if self.clear_flag:
            self.state = _Phase.CLEAR

    def clear_scene(self, inputs: FrameInput) -> None:
        canvas = self.canvas
        canvas.clear(0, 0, 255)
        canvas.image(EXPLOSION_IMAGE, self.circle_x, self.circle_y)
        canvas.fill(255, 255, 255)
        canvas.print("Game Clear")
        canvas.print("　クリックでタイトルに戻る")
        if inputs.is_trigger(Key.MOUSE_LBUTTON):
            self.state = _Phase.TITLE