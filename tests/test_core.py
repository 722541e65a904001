import pytest

from arcadebox.core import Audio, Canvas, FrameInput, Game, Key


class _Host:
    def __init__(self):
        self.menu_requests = 0

    def back_to_menu(self):
        self.menu_requests += 1


class _Demo(Game):
    def create(self):
        self.created = True

    def proc(self, inputs):
        if inputs.is_trigger(Key.KEY_ENTER):
            self.back_to_menu()


def test_frame_input_queries():
    inputs = FrameInput(
        pressed=[Key.KEY_A], triggered=[Key.MOUSE_LBUTTON], released=[Key.KEY_SPACE]
    )
    assert inputs.is_trigger(Key.MOUSE_LBUTTON)
    assert not inputs.is_trigger(Key.KEY_A)
    assert inputs.is_press(Key.KEY_A)
    assert inputs.is_press(Key.MOUSE_LBUTTON)
    assert inputs.is_release(Key.KEY_SPACE)
    assert not inputs.is_release(Key.KEY_A)


def test_clear_normalises_gray_and_rgb():
    canvas = Canvas()
    canvas.clear(60)
    canvas.clear(0, 0, 255)
    assert canvas.commands[0].color == (60, 60, 60, 255)
    assert canvas.commands[1].color == (0, 0, 255, 255)


def test_fill_applies_to_text_and_shapes():
    canvas = Canvas()
    canvas.fill(255, 0, 0, 100)
    canvas.text_size(40)
    canvas.text(12, 5, 6)
    canvas.circle(1, 2, 3)
    text_cmd, circle_cmd = canvas.commands
    assert text_cmd.args == ("12", 5, 6)
    assert text_cmd.size == 40
    assert text_cmd.color == (255, 0, 0, 100)
    assert circle_cmd.color == (255, 0, 0, 100)


def test_fill_accepts_colour_tuple():
    canvas = Canvas()
    canvas.fill((97, 97, 97, 180))
    canvas.rect(0, 0, 10, 10)
    assert canvas.commands[0].color == (97, 97, 97, 180)


def test_bad_colour_raises():
    with pytest.raises(ValueError):
        Canvas().fill(1, 2, 3, 4, 5)


def test_print_lines_and_begin_frame():
    canvas = Canvas()
    canvas.print("a")
    canvas.print("b")
    assert [c.args for c in canvas.commands] == [("a", 0), ("b", 1)]
    canvas.begin_frame()
    assert canvas.commands == []
    canvas.print("c")
    assert canvas.commands[0].args == ("c", 0)


def test_image_records_angle_and_scale():
    canvas = Canvas()
    canvas.image("red", 10, 20, 0, 1.3)
    assert canvas.commands[0].op == "image"
    assert canvas.commands[0].args == ("red", 10, 20, 0, 1.3)


def test_audio_play_and_stop():
    audio = Audio()
    audio.play("bgm")
    assert audio.is_playing("bgm")
    audio.stop("bgm")
    assert not audio.is_playing("bgm")
    assert audio.history == ["bgm"]


def test_game_plays_silence_and_destroy_stops_sounds():
    audio = Audio()
    game = _Demo(audio=audio)
    assert audio.is_playing("silence")
    audio.play("bgm")
    game.destroy()
    assert audio.playing == set()


def test_back_to_menu_reaches_host():
    host = _Host()
    game = _Demo(host=host)
    inputs = FrameInput(triggered=[Key.KEY_ENTER])
    assert inputs.is_trigger(Key.KEY_ENTER)
    game.proc(inputs)
    assert game.host is host
    assert game.host.menu_requests == 1


def test_game_base_is_abstract():
    with pytest.raises(TypeError):
        Game()