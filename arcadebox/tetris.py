"""Falling-block puzzle where a pink block starts a tenfold bonus line."""

from __future__ import annotations

import colorsys
import enum
import random
from typing import Optional

from .core import Audio, Canvas, FrameInput, Game, Key

ROWS = 20
COLS = 12
WALL = 7
BACK = 8
BONUS_PATTERN = 6
LINE_SCORE = 1000
BONUS_LINE_SCORE = 10000
FALL_INTERVAL = 15
SPAWN_X = 5
SPAWN_Y = 1

# Offsets of the three blocks around the pivot for each of the seven patterns.
OFFSETS = (
    ((-1, 0), (1, 0), (2, 0)),
    ((-1, -1), (-1, 0), (1, 0)),
    ((-1, 0), (1, -1), (1, 0)),
    ((-1, 0), (0, 1), (1, 1)),
    ((1, 0), (0, 1), (-1, 1)),
    ((-1, 0), (0, -1), (1, 0)),
    ((1, 0), (0, 1), (1, 1)),
)

# Hue (degrees), saturation and value (0-255) for each colour number.
COLORS = (
    (0, 200, 255),
    (30, 200, 255),
    (60, 200, 255),
    (120, 200, 255),
    (180, 200, 255),
    (220, 200, 255),
    (300, 200, 255),
    (200, 44, 88),
    (0, 0, 20),
)


def hsb_to_rgb(h: float, s: float, v: float) -> tuple[int, int, int]:
    """Convert hue sector ``h`` with fraction, and ``s``, ``v`` in 0..1, to RGB bytes."""
    if s == 0:
        gray = int(v * 255)
        return gray, gray, gray
    sector = int(h)
    f = (h - sector) * 6.0
    p = v * (1.0 - s)
    q = v * (1.0 - s * f)
    t = v * (1.0 - s * (1.0 - f))
    channels = {
        0: (v, t, p),
        1: (q, v, p),
        2: (p, v, t),
        3: (p, q, v),
        4: (t, p, v),
    }.get(sector, (v, p, q))
    r, g, b = channels
    return int(r * 255), int(g * 255), int(b * 255)


def rotate_offset(dx: int, dy: int, turns: int) -> tuple[int, int]:
    """Rotate an offset by 90 degrees ``turns`` times."""
    for _ in range(turns % 4):
        dx, dy = -dy, dx
    return dx, dy


class _Phase(enum.Enum):
    TITLE = enum.auto()
    INIT = enum.auto()
    PLAY = enum.auto()
    OVER = enum.auto()


def _cell_color(number: int) -> tuple[int, int, int]:
    hue, saturation, value = COLORS[number]
    r, g, b = colorsys.hsv_to_rgb((hue % 360) / 360.0, saturation / 255.0, value / 255.0)
    return round(r * 255), round(g * 255), round(b * 255)


class TetrisGame(Game):
    """Move with A/D, rotate with W, drop with S."""

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
        self.stage = [[BACK] * COLS for _ in range(ROWS)]
        self.size = 50.0
        self.x = SPAWN_X
        self.y = SPAWN_Y
        self.r = 0
        self.px = [0] * 4
        self.py = [0] * 4
        self.fall_flag = False
        self.loop_cnt = 0
        self.ptn_no = 0
        self.score = 0
        self.bonus = 0

    def create(self) -> None:
        self.state = _Phase.TITLE

    def proc(self, inputs: FrameInput) -> None:
        if self.state is _Phase.TITLE:
            self.title(inputs)
        elif self.state is _Phase.INIT:
            self.init(inputs)
        elif self.state is _Phase.PLAY:
            self.play(inputs)
        elif self.state is _Phase.OVER:
            self.over(inputs)

    def title(self, inputs: FrameInput) -> None:
        canvas = self.canvas
        canvas.clear(60, 60, 60)
        canvas.fill(0, 255, 0)
        canvas.text_size(100)
        canvas.text("ボーナステトリス", 600, 450)
        canvas.fill(0, 0, 0)
        canvas.text_size(40)
        canvas.text("クリックでゲームスタート", 750, 500)
        canvas.text("Enterでメニューに戻る", 750, 550)
        if inputs.is_trigger(Key.MOUSE_LBUTTON):
            self.state = _Phase.INIT
            return
        if inputs.is_trigger(Key.KEY_ENTER):
            self.back_to_menu()

    def init(self, inputs: FrameInput) -> None:
        """Show the controls, prepare the field and wait for a click."""
        canvas = self.canvas
        canvas.clear(60, 60, 60)
        canvas.fill(0, 0, 0)
        canvas.text_size(60)
        canvas.text("右へ１マス:D", 750, 500)
        canvas.text("左へ１マス:A", 750, 550)
        canvas.text("回転:W", 750, 600)
        canvas.text("落下:S", 750, 650)
        canvas.text_size(40)
        canvas.text("ピンクの四角いブロックが出現した後はボーナスタイム！", 750, 700)
        canvas.text("そのあとの一列だけ点数が10倍！", 750, 750)
        canvas.text("クリックで進む", 750, 900)
        self.reset_stage()
        self._spawn()
        self.set_ptn_position()
        if inputs.is_trigger(Key.MOUSE_LBUTTON):
            self.state = _Phase.PLAY

    def reset_stage(self) -> None:
        """Fill the field with background, framed by walls on the sides and bottom."""
        self.stage = [
            [WALL] + [BACK] * (COLS - 2) + [WALL] for _ in range(ROWS - 1)
        ]
        self.stage.append([WALL] * COLS)

    def _spawn(self) -> None:
        self.x = SPAWN_X
        self.y = SPAWN_Y
        self.r = 0
        self.ptn_no = self.rng.randrange(len(OFFSETS))

    def set_ptn_position(self) -> None:
        """Compute the four block cells of the current pattern."""
        self.px[0] = self.x
        self.py[0] = self.y
        for i, (dx, dy) in enumerate(OFFSETS[self.ptn_no], start=1):
            dx, dy = rotate_offset(dx, dy, self.r)
            self.px[i] = self.x + dx
            self.py[i] = self.y + dy

    def _cells(self):
        return zip(self.px, self.py)

    def set_ptn_to_stage(self) -> None:
        self.set_ptn_position()
        for x, y in self._cells():
            self.stage[y][x] = self.ptn_no

    def del_ptn_from_stage(self) -> None:
        for x, y in self._cells():
            if 0 <= y < ROWS and 0 <= x < COLS:
                self.stage[y][x] = BACK

    def collision(self) -> bool:
        """True when any cell of the pattern leaves the field or hits a block."""
        self.set_ptn_position()
        return any(
            not (0 <= y < ROWS and 0 <= x < COLS) or self.stage[y][x] != BACK
            for x, y in self._cells()
        )

    def complete(self) -> None:
        """Score every full line and slide the rows above it down."""
        for y in range(1, ROWS - 1):
            if all(cell != BACK for cell in self.stage[y][1:COLS - 1]):
                if self.bonus == 0:
                    self.score += LINE_SCORE
                else:
                    self.score += BONUS_LINE_SCORE
                    self.bonus = 0
                for upy in range(y - 1, -1, -1):
                    self.stage[upy + 1][1:COLS - 1] = self.stage[upy][1:COLS - 1]

    def play(self, inputs: FrameInput) -> None:
        self.del_ptn_from_stage()
        dx = dy = dr = 0
        self.loop_cnt = (self.loop_cnt + 1) % FALL_INTERVAL
        if self.loop_cnt == 0:
            dy = 1
        if inputs.is_trigger(Key.KEY_D):
            dx = 1
        if inputs.is_trigger(Key.KEY_A):
            dx = -1
        if inputs.is_trigger(Key.KEY_W):
            dr = 1
        if inputs.is_trigger(Key.KEY_S):
            self.fall_flag = True
        if self.fall_flag:
            dy = 1
        self.y += dy
        self.x += dx
        self.r += dr
        if self.collision():
            self.y -= dy
            self.x -= dx
            self.r -= dr
            self.fall_flag = False
            if dy == 1 and dx == 0 and dr == 0:
                self.set_ptn_to_stage()
                self.complete()
                self._spawn()
                if self.collision():
                    self.state = _Phase.OVER
        self.set_ptn_to_stage()
        self.canvas.clear(0)
        self.draw_stage()

    def draw_stage(self) -> None:
        canvas = self.canvas
        half = self.size / 2
        for y, row in enumerate(self.stage):
            for x, number in enumerate(row):
                canvas.fill(*_cell_color(number))
                canvas.rect(half + self.size * x, half + self.size * y, half, half)
                if number == BONUS_PATTERN:
                    self.bonus = 1
        if self.bonus == 1:
            canvas.fill(255)
            canvas.text_size(100)
            canvas.text("ボーナスタイム！", 1000, 100)
        canvas.fill(255)
        canvas.text_size(40)
        canvas.text(f"Score:{self.score}", 0, 100)

    def over(self, inputs: FrameInput) -> None:
        canvas = self.canvas
        canvas.clear(255, 0, 0)
        canvas.fill(0, 0, 255)
        canvas.text_size(80)
        canvas.text("ＧａｍｅＯｖｅｒ", 650, 450)
        canvas.text("SPACEキーでタイトルに戻る", 500, 550)
        if inputs.is_trigger(Key.KEY_SPACE):
            self.state = _Phase.TITLE