"""Dodge the viruses: keep the mouse cursor away from four moving circles."""

from __future__ import annotations

import enum
import math
import random
from dataclasses import dataclass
from typing import Optional

from .core import Audio, Canvas, FrameInput, Game, Key

FIELD_WIDTH = 1920
FIELD_HEIGHT = 1080
STAGE_FRAMES = 300
FINAL_STAGE = 3

OBJECT_IMAGE = "object"
BACKGROUND_IMAGE = "haikei"
FACE_IMAGE = "kao"
LOSE_IMAGE = "lose"

GAME_SOUND = "game"
WIN_SOUND = "win"
LOSE_SOUND = "noroi"
PERFECT_SOUND = "perfect"
FINAL_SOUND = "final"


class _Phase(enum.Enum):
    TITLE = enum.auto()
    PLAY = enum.auto()
    CLEAR = enum.auto()
    OVER = enum.auto()


@dataclass
class _Obstacle:
    x: float = 0.0
    y: float = 0.0


class DodgeGame(Game):
    """Survive a countdown while circles sweep across the screen."""

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
        self.px = 0.0
        self.py = 0.0
        self.vx = 15.0
        self.vy = 8.0
        self.radius = 70.0
        self.obstacle_radius = 100.0
        self.stage_count = 0
        self.countdown = 0.0
        # Entering from below, from the right, from the top and from the left.
        self.obstacles = [_Obstacle() for _ in range(4)]

    def create(self) -> None:
        self.state = _Phase.TITLE

    def proc(self, inputs: FrameInput) -> None:
        if self.state is _Phase.TITLE:
            self.title(inputs)
        if self.state is _Phase.PLAY:
            self.play(inputs)
        if self.state is _Phase.CLEAR:
            self.clear_scene(inputs)
        if self.state is _Phase.OVER:
            self.over(inputs)

    def title(self, inputs: FrameInput) -> None:
        canvas = self.canvas
        canvas.clear(200, 255, 200)
        canvas.fill(0)
        canvas.text_size(100)
        canvas.text("ウイルスから逃げろ!!!", 450, 580)
        canvas.print("クリックでスタート")
        canvas.print("操作方法：マウスを動かす")
        canvas.text("　Enterでメニューに戻る", 0, canvas.height)
        if inputs.is_trigger(Key.MOUSE_LBUTTON):
            self.init(inputs)
            self.audio.play(FINAL_SOUND if self.stage_count > 2 else GAME_SOUND)
            self.state = _Phase.PLAY
            return
        if inputs.is_trigger(Key.KEY_ENTER):
            self.back_to_menu()

    def init(self, inputs: FrameInput) -> None:
        """Place the player at the mouse and the obstacles at their edges."""
        width, height = self.canvas.width, self.canvas.height
        self.radius = 70.0
        self.obstacle_radius = 100.0
        self.vx = 15.0
        self.vy = 8.0
        self.px = inputs.mouse_x
        self.py = inputs.mouse_y
        bottom, right, top, left = self.obstacles
        bottom.x, bottom.y = width / 2, height + self.obstacle_radius
        right.x, right.y = width + self.obstacle_radius, height / 2
        top.x, top.y = width / 2, 0 + self.obstacle_radius
        left.x, left.y = 0 - self.obstacle_radius, height / 2
        self.stage_count = 0
        self.countdown = float(STAGE_FRAMES)

    def _rewind(self) -> None:
        width, height = self.canvas.width, self.canvas.height
        bottom, right, top, left = self.obstacles
        bottom.y = height + self.obstacle_radius
        right.x = width + self.obstacle_radius
        top.y = 0 + self.obstacle_radius
        left.x = 0 - self.obstacle_radius

    def _move_obstacles(self) -> None:
        bottom, right, top, left = self.obstacles
        extra_y = self.stage_count * 1.5
        extra_x = self.stage_count * 2.0

        bottom.y += self.vy + extra_y
        if bottom.y > FIELD_HEIGHT + self.radius:
            bottom.y = 0 + self.radius
            bottom.x = self.rng.randrange(FIELD_WIDTH)

        right.x += self.vx + extra_x
        if right.x > FIELD_WIDTH + self.radius:
            right.x = 0 + self.radius
            right.y = self.rng.randrange(FIELD_HEIGHT)

        top.y -= self.vy + extra_y
        if top.y < 0 - self.radius:
            top.y = FIELD_HEIGHT - self.radius
            top.x = self.rng.randrange(FIELD_WIDTH)

        left.x -= self.vx + extra_x
        if left.x < 0 - self.radius:
            left.x = FIELD_WIDTH - self.radius
            left.y = self.rng.randrange(FIELD_HEIGHT)

    def play(self, inputs: FrameInput) -> None:
        canvas = self.canvas
        self.px = inputs.mouse_x
        self.py = inputs.mouse_y
        reach = self.obstacle_radius + self.radius
        if any(math.hypot(o.x - self.px, o.y - self.py) <= reach for o in self.obstacles):
            self.audio.stop(GAME_SOUND)
            self.audio.stop(FINAL_SOUND)
            self.audio.play(LOSE_SOUND)
            self.state = _Phase.OVER

        self._move_obstacles()

        canvas.fill(255)
        if self.countdown > 0:
            canvas.fill(0)
            self.countdown -= 1.0
            canvas.image(BACKGROUND_IMAGE, canvas.width / 2, canvas.height / 2)
            canvas.text(int(self.countdown), 1600, 120)
            canvas.text("STAGE", 1600, 200)
            if self.stage_count >= FINAL_STAGE:
                canvas.text("FINAL", 1750, 200)
            else:
                canvas.text(self.stage_count, 1750, 200)
        else:
            self.audio.stop(GAME_SOUND)
            self.state = _Phase.CLEAR
            self.audio.play(WIN_SOUND if self.stage_count < FINAL_STAGE else PERFECT_SOUND)

        canvas.fill(255, 255, 255, 0)
        canvas.circle(self.px, self.py, self.radius * 2.3)
        for obstacle in self.obstacles:
            canvas.circle(obstacle.x, obstacle.y, self.obstacle_radius * 2)
        canvas.image(FACE_IMAGE, self.px, self.py)
        for obstacle in self.obstacles:
            canvas.image(OBJECT_IMAGE, obstacle.x, obstacle.y)

    def _advance(self, step: int, final_after: int) -> None:
        self._rewind()
        self.stage_count += step
        self.countdown = float((self.stage_count + 1) * STAGE_FRAMES)
        self.audio.play(FINAL_SOUND if self.stage_count > final_after else GAME_SOUND)
        self.audio.stop(WIN_SOUND)
        self.state = _Phase.PLAY

    def clear_scene(self, inputs: FrameInput) -> None:
        canvas = self.canvas
        canvas.clear(255, 244, 80)
        canvas.fill(181, 255, 20)
        if self.stage_count < FINAL_STAGE:
            canvas.text("STAGE CLEAR!!", 800, 540)
            canvas.text("左クリックで、次のステージへ", 600, 640)
            canvas.text("ENTERを押して、タイトルに戻る", 600, 740)
            if inputs.is_trigger(Key.MOUSE_LBUTTON):
                self._advance(1, 2)
            if inputs.is_trigger(Key.MOUSE_RBUTTON):
                self._advance(10, 3)
            if inputs.is_trigger(Key.KEY_ENTER):
                self.audio.stop(WIN_SOUND)
                self.state = _Phase.TITLE
        else:
            canvas.text("PERFECT!!", 800, 540)
            canvas.text("ENTERを押して、タイトルに戻る", 600, 690)
            if inputs.is_trigger(Key.KEY_ENTER):
                self.stage_count = 0
                self.state = _Phase.TITLE

    def over(self, inputs: FrameInput) -> None:
        canvas = self.canvas
        canvas.clear(128)
        canvas.fill(0, 0, 128)
        canvas.image(LOSE_IMAGE, FIELD_WIDTH - 400, 800)
        canvas.text_size(80)
        canvas.text("GAME OVER", 800, 540)
        canvas.text("ENTERを押して、タイトルに戻る", 190, 640)
        if inputs.is_trigger(Key.KEY_ENTER):
            self.stage_count = 0
            self.state = _Phase.TITLE