"""The runner: enters the screen, hovers, then jumps across the rooftops."""

from __future__ import annotations

import copy
import enum
import math
from typing import Optional

from ..core import Canvas, FrameInput, Key
from .config import PlayerData, Vec2

_EXIT_LIMIT = -300


def _sin_deg(angle: float) -> float:
    return math.sin(math.radians(angle))


class PlayerState(enum.Enum):
    ANIM = enum.auto()
    STAY = enum.auto()
    FALL = enum.auto()
    COLLISION = enum.auto()
    DOUBLEJUMP = enum.auto()
    CLEAR = enum.auto()


class Player:
    """State machine for the runner character."""

    def __init__(self, data: PlayerData) -> None:
        self._template = copy.deepcopy(data)
        self.data = copy.deepcopy(data)
        self.state = PlayerState.ANIM
        self.cur_img = self.data.e_img
        self.cur_img_size = self.data.e_img_size
        self.anime_time = 0.0
        self.angle = 0.0
        self.before_wait = 0.0
        self.e_pos = Vec2(0, 0)
        self.alive = True
        self.stay = True
        self.init()

    # Shared with the building collision ----------------------------------

    @property
    def pos(self) -> Vec2:
        return self.data.pos

    @property
    def range1(self) -> Vec2:
        return self.data.range1

    @property
    def range2(self) -> Vec2:
        return self.data.range2

    @property
    def scale(self) -> Vec2:
        return self.data.scale

    @property
    def first_jump_flag(self) -> bool:
        return self.data.first_jump_flag

    @first_jump_flag.setter
    def first_jump_flag(self, value: bool) -> None:
        self.data.first_jump_flag = value

    @property
    def double_jump_flag(self) -> bool:
        return self.data.double_jump_flag

    @double_jump_flag.setter
    def double_jump_flag(self, value: bool) -> None:
        self.data.double_jump_flag = value

    # ----------------------------------------------------------------------

    def init(self) -> None:
        """Reset to the entry animation with fresh data."""
        self.data = copy.deepcopy(self._template)
        self.cur_img = self.data.e_img
        self.cur_img_size = self.data.e_img_size
        self.state = PlayerState.ANIM
        self.anime_time = 0.0
        self.before_wait = 0.0
        self.angle = 0.0
        self.alive = True
        self.stay = True

    def _start_spin(self) -> None:
        self.cur_img = self.data.jump_img
        self.cur_img_size = self.data.jump_img_size
        self.state = PlayerState.DOUBLEJUMP

    def update(self, inputs: FrameInput, buildings, time_up: bool, height: float) -> None:
        data = self.data
        delta = inputs.delta
        state = self.state

        if state is PlayerState.ANIM:
            self.anime_time += delta
            if self.anime_time <= data.enter_anime_time:
                self.enter_anime(data.target_pos, data.enter_anime_time, 0.0, delta)
            else:
                self.state = PlayerState.STAY
                self.anime_time = 0.0
        elif state is PlayerState.STAY:
            self.anime_time += 90.0 * delta
            wave = _sin_deg(self.anime_time) * data.stay_wait
            data.pos.y += self.before_wait - wave
            self.before_wait = wave
            if inputs.is_trigger(Key.KEY_SPACE):
                self.stay = False
                data.pos.x = data.st_pos_x
                data.pos.y = data.st_pos_y
                self.anime_time = 0.0
                self.jump()
                data.double_jump_flag = False
                self._start_spin()
        elif state is PlayerState.FALL:
            data.speed += data.gravity
            if buildings.collision(self):
                if data.speed > 0:
                    data.speed = 0.0
                self.state = PlayerState.COLLISION
            if data.first_jump_flag:
                if inputs.is_press(Key.KEY_SPACE):
                    self.jump()
                    data.first_jump_flag = False
            elif data.double_jump_flag:
                if inputs.is_trigger(Key.KEY_SPACE):
                    self.jump()
                    data.double_jump_flag = False
                    self._start_spin()
            if data.pos.x + data.scale.x < 0 or data.pos.y + data.scale.y > height:
                self.alive = False
        elif state is PlayerState.COLLISION:
            if not buildings.collision(self):
                data.first_jump_flag = False
                self.state = PlayerState.FALL
            if data.first_jump_flag and inputs.is_trigger(Key.KEY_SPACE):
                self.jump()
                data.first_jump_flag = False
        elif state is PlayerState.DOUBLEJUMP:
            buildings.collision(self)
            data.speed += data.gravity
            self.anime_time += delta
            if self.anime_time <= data.jump_anime_time:
                self.angle += 360 / data.jump_anime_time * delta
            else:
                self.cur_img = data.img
                self.cur_img_size = data.img_size
                self.angle = 0.0
                self.anime_time = 0.0
                self.state = PlayerState.FALL
        elif state is PlayerState.CLEAR:
            self.enter_anime(self.e_pos, 0.0, buildings.speed, delta)

        if time_up:
            self.angle = 0.0
            self.anime_time = 0.0
            self.cur_img = data.e_img
            self.cur_img_size = data.e_img_size
            self.state = PlayerState.CLEAR
        else:
            data.pos.y += data.speed * delta

    def draw(self, canvas: Canvas) -> None:
        pos = self.data.pos
        canvas.image(self.cur_img, pos.x, pos.y + self.data.scale.y, self.angle, self.cur_img_size)

    def jump(self) -> None:
        """Start a jump; the caller spends the jump it used."""
        self.data.speed = self.data.jump_speed

    def enter_anime(
        self,
        target: Vec2,
        time: float = 0.0,
        speed: float = 0.0,
        delta: float = 0.0,
    ) -> None:
        """Glide toward ``target`` over ``time`` seconds, or drift by ``speed``."""
        pos = self.data.pos
        if time != 0:
            pos.x += target.x / time * delta
            pos.y += target.y / time * delta
        elif speed != 0:
            if pos.x > _EXIT_LIMIT and pos.y > _EXIT_LIMIT:
                pos.x += speed * delta
                pos.y += speed * delta