"""Hit-and-blow code breaking: guess four distinct colours within eight turns."""

from __future__ import annotations

import enum
import math
import random
from typing import Optional, Sequence

from .core import Audio, Canvas, FrameInput, Game, Key

ROWS = 4  # pegs per guess
COLS = 8  # turns on the board
ANS_CNT = 4
PAWNS_KIND = 6
MAX_TURN = 8
MAX_FILLED = 4

RADIUS = 150
DEFAULT_SIZE = 1.0
BIG_SIZE = 1.3

# Board slot layout
SLOT_X, SLOT_Y, SLOT_MX, SLOT_MY = 150, 270, 190, 175
# Board column backgrounds
SET_X, SET_Y, SET_MX = 150, 530, 190
# Palette of selectable pegs
PALETTE_X, PALETTE_Y, PALETTE_MX = 525, 970, 175
# Hint pins
JUDGE_X, JUDGE_Y, JUDGE_SMALL_MX, JUDGE_MY, JUDGE_BIG_MX = 130, 100, 35, 40, 190
# Counters
SCORE_X, SCORE_Y, SCORE_SMALL_MX = 1650, 150, 25
TURN_X, TURN_Y = 1650, 950

# Time limit buttons on the title screen
TIME_KIND = 4
TIME_X, TIME_Y, TIME_MX = 400, 800, 350
TIME_RADIUS = 200
DEFAULT_TIME = 20
FLAME = 60

TITLE_IMAGE = "title"
STAGE_IMAGE = "stage"
RESULT_IMAGE = "result"
SCORE_COUNT_IMAGE = "score_count"
STAGE_SET_IMAGE = "stage_set"
TURN_COUNT_IMAGE = "turn_count"

SELECT_SOUND = "mode_sound"
PUSH_SOUND = "push_sound"
SET_SOUND = "set_sound"
JUDGE_SOUND = "judge_sound"
CLEAR_SOUND = "clear_sound"
OVER_SOUND = "over_sound"
BGM = "bgm"


class Peg(enum.IntEnum):
    """Colours a board slot can hold; SPACE is an empty slot."""

    RED = 0
    BLUE = 1
    GREEN = 2
    YELLOW = 3
    PINK = 4
    WHITE = 5
    SPACE = 6

    @property
    def image(self) -> str:
        return self.name.lower()


class Hint(enum.IntEnum):
    """Feedback pins: a hit, a blow, or nothing."""

    PERFECT = 0
    IMPERFECT = 1
    SPACE = 2

    @property
    def image(self) -> str:
        return {
            Hint.PERFECT: "perfect_pin",
            Hint.IMPERFECT: "imperfect_pin",
            Hint.SPACE: "judge_space",
        }[self]


def make_answer(rng: random.Random) -> tuple[Peg, ...]:
    """Draw ANS_CNT distinct colours, redrawing any colour already taken."""
    answer: list[Peg] = []
    while len(answer) < ANS_CNT:
        peg = Peg(rng.randrange(PAWNS_KIND))
        if peg not in answer:
            answer.append(peg)
    return tuple(answer)


def score_guess(answer: Sequence[Peg], guess: Sequence[Peg]) -> tuple[Hint, ...]:
    """Return the hint pins for a guess: hits first, then blows, then blanks."""
    if len(answer) != len(guess):
        raise ValueError("answer and guess must have the same length")
    size = len(guess)
    perfect = sum(a == g for a, g in zip(answer, guess))

    # A guessed colour repeated later in the guess and present in the answer
    # would be counted as a blow more than once; count such repeats.
    same_kind = sum(
        1
        for i, peg in enumerate(guess[:-1])
        if peg in guess[i + 1:] and peg in answer
    )
    imperfect = sum(
        1
        for i, a in enumerate(answer)
        for j, g in enumerate(guess)
        if a == g and i != j
    )
    if imperfect >= same_kind:
        imperfect -= same_kind

    hints: list[Hint] = []
    for _ in range(size):
        if perfect > 0:
            hints.append(Hint.PERFECT)
            perfect -= 1
        elif imperfect > 0:
            hints.append(Hint.IMPERFECT)
            imperfect -= 1
        else:
            hints.append(Hint.SPACE)
    return tuple(hints)


class _Phase(enum.Enum):
    TITLE = enum.auto()
    STAGE = enum.auto()
    RESULT = enum.auto()


def _distance(x: float, y: float, mx: float, my: float) -> int:
    dx = int(abs(x - mx))
    dy = int(abs(y - my))
    return int(math.sqrt(dx * dx + dy * dy))


def _slot_pos(turn: int, slot: int) -> tuple[int, int]:
    return SLOT_X + SLOT_MX * turn, SLOT_Y + SLOT_MY * slot


def _palette_pos(index: int) -> tuple[int, int]:
    return PALETTE_X + PALETTE_MX * index, PALETTE_Y


def _time_pos(index: int) -> tuple[int, int]:
    return TIME_X + TIME_MX * index, TIME_Y


class CodeBreakerGame(Game):
    """Drag coloured pegs onto the board and judge them with J."""

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
        self.board = [[Peg.SPACE] * ROWS for _ in range(COLS)]
        self.hints = [[Hint.SPACE] * ROWS for _ in range(COLS)]
        self.board_sizes = [[DEFAULT_SIZE] * ROWS for _ in range(COLS)]
        self.palette_sizes = [DEFAULT_SIZE] * PAWNS_KIND
        self._slot_dist = [[0] * ROWS for _ in range(COLS)]
        self.answer: tuple[Peg, ...] = ()
        self.held = Peg.SPACE
        self.pre_p: tuple[int, int] = (0, 0)
        self.change_flag = False
        self.not_in_flag = False
        self.elapsed_turns = 0
        self.clear_flag = False
        self.filled_flag = False
        self.voice_flag = False
        self.decision_flag = False
        self.set_time = 0
        self.sum_time = 0.0
        self.temp_time = 0.0
        self.time_scales = [1.0] * TIME_KIND

    def create(self) -> None:
        self.state = _Phase.TITLE
        self.time_scales = [1.0] * TIME_KIND

    def proc(self, inputs: FrameInput) -> None:
        if self.state is _Phase.TITLE:
            self.title(inputs)
        elif self.state is _Phase.STAGE:
            self.stage(inputs)
        elif self.state is _Phase.RESULT:
            self.result(inputs)

    # Title -----------------------------------------------------------------

    def title(self, inputs: FrameInput) -> None:
        canvas = self.canvas
        canvas.clear(0)
        self.set_time_colli(inputs)
        canvas.image(TITLE_IMAGE, canvas.width / 2, canvas.height / 2)
        for i, scale in enumerate(self.time_scales):
            x, y = _time_pos(i)
            canvas.image(f"button{i}", x, y, 0, scale)
        if not self.voice_flag:
            self.audio.play(SELECT_SOUND)
            self.voice_flag = True
        if self.decision_flag:
            self.audio.play(PUSH_SOUND)
            self.init()
            self.state = _Phase.STAGE
        if inputs.is_trigger(Key.KEY_ENTER):
            self.back_to_menu()

    def set_time_colli(self, inputs: FrameInput) -> None:
        """Enlarge the time button under the mouse and pick it on a click."""
        for i in range(TIME_KIND):
            x, y = _time_pos(i)
            dist = _distance(x, y, inputs.mouse_x, inputs.mouse_y)
            inside = dist < TIME_RADIUS / 2
            self.time_scales[i] = 1.5 if inside else 1.0
            if inside and inputs.is_trigger(Key.MOUSE_LBUTTON):
                self.set_time = i
                self.decision_flag = True

    def init(self) -> None:
        """Start a new round with a fresh answer and an empty board."""
        self.elapsed_turns = 0
        self.held = Peg.SPACE
        self.clear_flag = False
        self.audio.play(BGM)
        self.decision_flag = False
        self.voice_flag = False
        self.not_in_flag = False
        self.board_sizes = [[DEFAULT_SIZE] * ROWS for _ in range(COLS)]
        self.palette_sizes = [DEFAULT_SIZE] * PAWNS_KIND
        self.board = [[Peg.SPACE] * ROWS for _ in range(COLS)]
        self._slot_dist = [[0] * ROWS for _ in range(COLS)]
        self.answer = make_answer(self.rng)
        self.hints = [[Hint.SPACE] * ROWS for _ in range(COLS)]
        if self.set_time != 0:
            self.sum_time = float(DEFAULT_TIME * self.set_time * FLAME + FLAME)
            self.temp_time = self.sum_time

    # Stage -----------------------------------------------------------------

    def stage(self, inputs: FrameInput) -> None:
        canvas = self.canvas
        canvas.clear(128)
        canvas.text_size(100)
        self._draw_design(inputs)
        self.collision(inputs)
        self.fill_judge()
        canvas.fill(255)
        canvas.image(TURN_COUNT_IMAGE, TURN_X + 55, TURN_Y - 10)
        canvas.text(self.elapsed_turns + 1, 1680, 1000)
        if self.set_time != 0:
            self.time_laps(inputs)
        canvas.print(int(self.change_flag))
        canvas.print(int(self.held))

        timed_out = self.set_time != 0 and self.temp_time <= FLAME
        if (inputs.is_trigger(Key.KEY_J) and self.filled_flag) or timed_out:
            if timed_out:
                self.elapsed_turns += 1
            else:
                self.judgment()
                if not self.clear_flag:
                    self.audio.play(JUDGE_SOUND)
                    self.elapsed_turns += 1
            self.temp_time = self.sum_time
            self.filled_flag = False

        if self.elapsed_turns == MAX_TURN or self.clear_flag:
            self.state = _Phase.RESULT
            self.audio.play(CLEAR_SOUND if self.clear_flag else OVER_SOUND)
            self.audio.stop(BGM)

    def time_laps(self, inputs: FrameInput) -> None:
        """Show the remaining seconds and count the limit down."""
        canvas = self.canvas
        canvas.fill(255)
        canvas.image(SCORE_COUNT_IMAGE, SCORE_X + 55, SCORE_Y - 70)
        seconds = int(self.temp_time / FLAME)
        x = SCORE_X + SCORE_SMALL_MX if seconds < 10 else SCORE_X
        canvas.text(seconds, x, SCORE_Y)
        self.temp_time -= inputs.delta * FLAME

    def collision(self, inputs: FrameInput) -> None:
        """Handle picking, placing and swapping pegs with the left button."""
        mx, my = inputs.mouse_x, inputs.mouse_y
        released = inputs.is_release(Key.MOUSE_LBUTTON)
        pressed = inputs.is_press(Key.MOUSE_LBUTTON)
        half = RADIUS / 2
        turn = self.elapsed_turns
        if turn < COLS:
            row = self.board[turn]
            dists = self._slot_dist[turn]
            self.canvas.fill(255, 0, 0, 100)
            for j in range(ROWS):
                cx, cy = _slot_pos(turn, j)
                if row[j] is Peg.SPACE:
                    self.canvas.circle(cx, cy, RADIUS - 5)
                dists[j] = _distance(cx, cy, mx, my)
                inside = dists[j] < half
                self.board_sizes[turn][j] = BIG_SIZE if inside else DEFAULT_SIZE

                if inside and self.held is not Peg.SPACE and released and not self.change_flag:
                    self.audio.play(SET_SOUND)
                    row[j] = self.held
                    self.held = Peg.SPACE
                if inside and pressed and self.held is Peg.SPACE:
                    self.held = row[j]
                    self.pre_p = (turn, j)
                    row[j] = Peg.SPACE
                    self.change_flag = True

                self.not_in_flag = all(d > half for d in dists)

                if released and inside and self.change_flag and not self.not_in_flag:
                    self.audio.play(SET_SOUND)
                    previous = row[j]
                    row[j] = self.held
                    pre_turn, pre_slot = self.pre_p
                    self.board[pre_turn][pre_slot] = previous
                    self.change_flag = False
                    self.pre_p = (0, 0)
                elif released and self.not_in_flag and self.change_flag:
                    pre_turn, pre_slot = self.pre_p
                    self.board[pre_turn][pre_slot] = self.held
                    self.change_flag = False

        if released:
            self.held = Peg.SPACE

        for i in range(PAWNS_KIND):
            px, py = _palette_pos(i)
            inside = _distance(px, py, mx, my) < half
            self.palette_sizes[i] = BIG_SIZE if inside else DEFAULT_SIZE
            if pressed and inside and self.held is Peg.SPACE:
                self.held = Peg(i)

    def fill_judge(self) -> None:
        """Mark the current guess as ready once every slot holds a peg."""
        if self.elapsed_turns >= COLS:
            return
        filled = sum(peg is not Peg.SPACE for peg in self.board[self.elapsed_turns])
        if filled == MAX_FILLED:
            self.filled_flag = True

    def judgment(self) -> None:
        """Score the current guess; a full match clears the game."""
        turn = self.elapsed_turns
        hints = score_guess(self.answer, self.board[turn])
        if all(h is Hint.PERFECT for h in hints):
            self.clear_flag = True
        else:
            self.hints[turn] = list(hints)
        self.board_sizes[turn] = [DEFAULT_SIZE] * ROWS

    # Result ----------------------------------------------------------------

    def result(self, inputs: FrameInput) -> None:
        canvas = self.canvas
        canvas.clear(128, 128, 128)
        self._draw_design(inputs)
        canvas.image(RESULT_IMAGE, canvas.width / 2, canvas.height / 2)
        canvas.fill(255)
        canvas.text_size(125)
        if self.elapsed_turns == MAX_TURN:
            canvas.text("もう一度挑戦しよう!", canvas.width / 2 - 630, 200)
            canvas.text("スペースキーでタイトルに戻る", 100, 900)
        else:
            canvas.text("congratulation!!", canvas.width / 2 - 500, 200)
            canvas.text_size(70)
            canvas.text(self.elapsed_turns + 1, 660, 300)
            canvas.text("あなたは　ターンでクリアしました！", 350, 300)
            canvas.text_size(125)
            canvas.text("スペースキーでタイトルに戻る", 100, 900)
        if inputs.is_trigger(Key.KEY_SPACE):
            self.state = _Phase.TITLE

    # Drawing ---------------------------------------------------------------

    def _draw_design(self, inputs: FrameInput) -> None:
        canvas = self.canvas
        canvas.image(STAGE_IMAGE, canvas.width / 2, canvas.height / 2)
        for i in range(COLS):
            canvas.image(STAGE_SET_IMAGE, SET_X + SET_MX * i, SET_Y)
        for turn, row in enumerate(self.board):
            for slot, peg in enumerate(row):
                x, y = _slot_pos(turn, slot)
                canvas.image(peg.image, x, y, 0, self.board_sizes[turn][slot])
        for i, size in enumerate(self.palette_sizes):
            x, y = _palette_pos(i)
            canvas.image(Peg(i).image, x, y, 0, size)
        if self.held is not Peg.SPACE:
            canvas.image(self.held.image, inputs.mouse_x, inputs.mouse_y, 0, BIG_SIZE)
        for turn, row in enumerate(self.hints):
            for slot, hint in enumerate(row):
                x = JUDGE_X + JUDGE_SMALL_MX * (slot % 2) + JUDGE_BIG_MX * turn
                y = JUDGE_Y + JUDGE_MY * (slot // 2)
                canvas.image(hint.image, x, y)