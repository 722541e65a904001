"""Rock-paper-scissors against the computer until the first loss."""

from __future__ import annotations

import enum
import random
from typing import Optional

from .core import Audio, Canvas, FrameInput, Game, Key


class Hand(enum.IntEnum):
    ROCK = 0
    PAPER = 1
    SCISSORS = 2

    @property
    def label(self) -> str:
        return {Hand.ROCK: "グー", Hand.PAPER: "パー", Hand.SCISSORS: "チョキ"}[self]


class Outcome(enum.Enum):
    DRAW = enum.auto()
    WIN = enum.auto()
    LOSE = enum.auto()


_BEATS = {Hand.ROCK: Hand.SCISSORS, Hand.SCISSORS: Hand.PAPER, Hand.PAPER: Hand.ROCK}


def judge(player: Hand, computer: Hand) -> Outcome:
    """Outcome of a round from the player's side."""
    if player == computer:
        return Outcome.DRAW
    if _BEATS[player] == computer:
        return Outcome.WIN
    return Outcome.LOSE


class _Phase(enum.Enum):
    TITLE = enum.auto()
    PLAY = enum.auto()
    CLEAR = enum.auto()
    OVER = enum.auto()


_MESSAGES = {
    Outcome.DRAW: "引き分け！",
    Outcome.WIN: "あなたの勝ち！",
    Outcome.LOSE: "あなたの負け！",
}

_KEYS = ((Key.KEY_A, Hand.ROCK), (Key.KEY_S, Hand.SCISSORS), (Key.KEY_D, Hand.PAPER))


class JankenGame(Game):
    """Choose a hand with A, S or D; losing ends the game."""

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
        self.clear_flag = False
        self.player_hand = Hand.ROCK
        self.computer_hand = Hand.ROCK
        self.last_outcome: Optional[Outcome] = None

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
        canvas.clear(255, 255, 255)
        canvas.fill(0)
        canvas.text_size(100)
        canvas.print("じゃんけん")
        canvas.print("クリックでゲームスタート")
        if inputs.is_trigger(Key.MOUSE_LBUTTON):
            self.state = _Phase.PLAY
            return
        if inputs.is_trigger(Key.KEY_ENTER):
            self.back_to_menu()

    def play(self, inputs: FrameInput) -> None:
        canvas = self.canvas
        canvas.clear(255, 255, 255)
        canvas.fill(0)
        canvas.print("Aでグー")
        canvas.print("Sでチョキ")
        canvas.print("Dでパー")
        canvas.print("タイトルに戻る")
        for key, hand in _KEYS:
            if inputs.is_trigger(key):
                self.player_hand = hand
                self.determine_winner()
                break
        if self.clear_flag:
            self.state = _Phase.CLEAR

    def determine_winner(self) -> Outcome:
        """Draw the computer's hand, show both hands and the result."""
        canvas = self.canvas
        self.computer_hand = Hand(self.rng.randrange(3))
        canvas.print("あなたの手: ")
        canvas.print(self.player_hand.label)
        canvas.print("コンピュータの手: ")
        canvas.print(self.computer_hand.label)
        outcome = judge(self.player_hand, self.computer_hand)
        canvas.print(_MESSAGES[outcome])
        if outcome is Outcome.LOSE:
            self.state = _Phase.CLEAR
        self.last_outcome = outcome
        return outcome

    def clear_scene(self, inputs: FrameInput) -> None:
        canvas = self.canvas
        canvas.clear(0, 0, 255)
        canvas.fill(255, 255, 255)
        canvas.print("クリックでタイトルに戻る")
        if inputs.is_trigger(Key.MOUSE_LBUTTON):
            self.state = _Phase.TITLE