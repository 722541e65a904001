import random

import pytest

from arcadebox.core import Audio, Canvas, FrameInput, Key
from arcadebox.falling_circle import FallingCircleGame


class _Host:
    def __init__(self):
        self.menu_requests = 0

    def back_to_menu(self):
        self.menu_requests += 1


@pytest.fixture
def game():
    g = FallingCircleGame(host=_Host(), canvas=Canvas(), audio=Audio(), rng=random.Random(7))
    g.create()
    return g


def _start(game):
    game.proc(FrameInput(triggered=[Key.MOUSE_LBUTTON]))


def test_click_on_title_starts_play(game):
    assert game.state.name == "TITLE"
    _start(game)
    assert game.state.name == "PLAY"
    assert 500 <= game.circle_x < 1500
    assert game.circle_y == -game.circle_radius
    assert game.clear_flag is False


def test_enter_on_title_goes_back_to_menu(game):
    game.proc(FrameInput(triggered=[Key.KEY_ENTER]))
    assert game.host.menu_requests == 1
    assert game.state.name == "TITLE"


def test_circle_falls_by_velocity(game):
    _start(game)
    before = game.circle_y
    game.proc(FrameInput(mouse_x=0, mouse_y=0, delta=0.1))
    assert game.circle_y == pytest.approx(before + game.circle_vy * 0.1)


def test_circle_respawns_at_top(game):
    _start(game)
    game.circle_y = game.canvas.height + game.circle_radius
    game.proc(FrameInput(delta=0.01))
    assert game.circle_y == -game.circle_radius
    assert 500 <= game.circle_x < 1500


def test_hit_clears_game(game):
    _start(game)
    game.circle_y = 300.0
    target_y = 300.0 + game.circle_vy * 0.01
    game.proc(
        FrameInput(
            mouse_x=game.circle_x, mouse_y=target_y, triggered=[Key.MOUSE_LBUTTON], delta=0.01
        )
    )
    assert game.clear_flag is True
    assert game.state.name == "CLEAR"
    assert game.audio.is_playing("bomb")


def test_miss_keeps_playing(game):
    _start(game)
    game.circle_y = 300.0
    game.proc(
        FrameInput(mouse_x=game.circle_x + 200, mouse_y=300, triggered=[Key.MOUSE_LBUTTON])
    )
    assert game.state.name == "PLAY"
    assert not game.audio.is_playing("bomb")


def test_clear_shows_explosion_and_returns_to_title(game):
    _start(game)
    game.clear_flag = True
    game.proc(FrameInput())
    assert game.state.name == "CLEAR"
    game.canvas.begin_frame()
    game.proc(FrameInput(triggered=[Key.MOUSE_LBUTTON]))
    images = [c for c in game.canvas.commands if c.op == "image"]
    assert images[0].args[0] == "explosion"
    assert game.state.name == "TITLE"