import pytest

from arcadebox.core import Canvas, FrameInput, Key
from arcadebox.janken import Hand, JankenGame, Outcome, judge


class _FixedRng:
    def __init__(self, value):
        self.value = value

    def randrange(self, n):
        return self.value % n


class _Host:
    def __init__(self):
        self.menu_requests = 0

    def back_to_menu(self):
        self.menu_requests += 1


def _playing(computer: Hand) -> JankenGame:
    g = JankenGame(canvas=Canvas(), rng=_FixedRng(int(computer)))
    g.create()
    g.proc(FrameInput(triggered={Key.MOUSE_LBUTTON}))
    return g


@pytest.mark.parametrize("hand", list(Hand))
def test_same_hands_draw(hand):
    assert judge(hand, hand) is Outcome.DRAW


@pytest.mark.parametrize(
    "player,computer",
    [
        (Hand.ROCK, Hand.SCISSORS),
        (Hand.SCISSORS, Hand.PAPER),
        (Hand.PAPER, Hand.ROCK),
    ],
)
def test_winning_pairs_and_their_reverse(player, computer):
    assert judge(player, computer) is Outcome.WIN
    assert judge(computer, player) is Outcome.LOSE


def test_click_starts_play():
    g = _playing(Hand.ROCK)
    assert g.state.name == "PLAY"


def test_enter_on_title_returns_to_menu():
    host = _Host()
    g = JankenGame(host=host)
    g.create()
    g.proc(FrameInput(triggered={Key.KEY_ENTER}))
    assert host.menu_requests == 1


def test_win_keeps_playing():
    g = _playing(Hand.SCISSORS)
    g.proc(FrameInput(triggered={Key.KEY_A}))
    assert g.player_hand is Hand.ROCK
    assert g.computer_hand is Hand.SCISSORS
    assert g.last_outcome is Outcome.WIN
    assert g.state.name == "PLAY"
    printed = [c.args[0] for c in g.canvas.commands if c.op == "print"]
    assert "あなたの勝ち！" in printed


def test_loss_ends_round_and_click_returns_to_title():
    g = _playing(Hand.ROCK)
    g.proc(FrameInput(triggered={Key.KEY_S}))
    assert g.player_hand is Hand.SCISSORS
    assert g.last_outcome is Outcome.LOSE
    assert g.state.name == "CLEAR"
    g.proc(FrameInput(triggered={Key.MOUSE_LBUTTON}))
    assert g.state.name == "TITLE"


def test_paper_key_and_draw():
    g = _playing(Hand.PAPER)
    g.proc(FrameInput(triggered={Key.KEY_D}))
    assert g.player_hand is Hand.PAPER
    assert g.last_outcome is Outcome.DRAW
    assert g.state.name == "PLAY"


def test_determine_winner_returns_outcome():
    g = _playing(Hand.PAPER)
    g.player_hand = Hand.SCISSORS
    assert g.determine_winner() is Outcome.WIN