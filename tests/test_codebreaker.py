import random

import pytest

from arcadebox.codebreaker import (
    CLEAR_SOUND,
    JUDGE_SOUND,
    OVER_SOUND,
    BGM,
    CodeBreakerGame,
    Hint,
    Peg,
    make_answer,
    score_guess,
)
from arcadebox.core import Audio, Canvas, FrameInput, Key


class _Host:
    def __init__(self):
        self.menu_requests = 0

    def back_to_menu(self):
        self.menu_requests += 1


def _slot(turn, slot):
    return 150 + 190 * turn, 270 + 175 * slot


def _palette(index):
    return 525 + 175 * index, 970


def _frame(game, x=0.0, y=0.0, triggered=(), pressed=(), released=(), delta=1 / 60):
    game.proc(
        FrameInput(
            mouse_x=x,
            mouse_y=y,
            triggered=triggered,
            pressed=pressed,
            released=released,
            delta=delta,
        )
    )


def _started_game(time_button=0, seed=1):
    host = _Host()
    game = CodeBreakerGame(host, Canvas(), Audio(), random.Random(seed))
    game.create()
    _frame(game, 400 + 350 * time_button, 800, triggered={Key.MOUSE_LBUTTON})
    return game, host


def _place(game, peg, slot):
    px, py = _palette(int(peg))
    _frame(game, px, py, triggered={Key.MOUSE_LBUTTON})
    sx, sy = _slot(game.elapsed_turns, slot)
    _frame(game, sx, sy, released={Key.MOUSE_LBUTTON})


def test_make_answer_is_distinct_colours():
    for seed in range(20):
        answer = make_answer(random.Random(seed))
        assert len(answer) == 4
        assert len(set(answer)) == 4
        assert Peg.SPACE not in answer


def test_make_answer_is_deterministic_for_a_seed():
    first = make_answer(random.Random(7))
    second = make_answer(random.Random(7))
    assert len(first) == 4
    assert list(first) == list(second)
    assert len(set(first)) == 4


def test_score_exact_match_is_all_perfect():
    answer = (Peg.RED, Peg.BLUE, Peg.GREEN, Peg.YELLOW)
    assert score_guess(answer, answer) == (Hint.PERFECT,) * 4


def test_score_derangement_is_all_imperfect():
    answer = (Peg.RED, Peg.BLUE, Peg.GREEN, Peg.YELLOW)
    guess = (Peg.BLUE, Peg.GREEN, Peg.YELLOW, Peg.RED)
    assert score_guess(answer, guess) == (Hint.IMPERFECT,) * 4


def test_score_disjoint_colours_is_blank():
    answer = (Peg.RED, Peg.BLUE, Peg.GREEN, Peg.YELLOW)
    guess = (Peg.PINK, Peg.WHITE, Peg.PINK, Peg.WHITE)
    assert score_guess(answer, guess) == (Hint.SPACE,) * 4


def test_score_repeated_colour_is_not_counted_twice():
    answer = (Peg.RED, Peg.BLUE, Peg.GREEN, Peg.YELLOW)
    guess = (Peg.RED, Peg.RED, Peg.WHITE, Peg.WHITE)
    assert score_guess(answer, guess) == (Hint.PERFECT, Hint.SPACE, Hint.SPACE, Hint.SPACE)


@pytest.mark.parametrize("seed", range(10))
def test_score_orders_hits_before_blows(seed):
    rng = random.Random(seed)
    answer = make_answer(rng)
    guess = tuple(Peg(rng.randrange(6)) for _ in range(4))
    hints = score_guess(answer, guess)
    assert list(hints) == sorted(hints)
    hits = sum(a == g for a, g in zip(answer, guess))
    assert hints.count(Hint.PERFECT) == hits


def test_score_rejects_length_mismatch():
    with pytest.raises(ValueError):
        score_guess((Peg.RED, Peg.BLUE), (Peg.RED,))


def test_time_button_starts_stage_without_limit():
    game, _ = _started_game(time_button=0)
    assert game.state.name == "STAGE"
    assert game.set_time == 0
    assert game.audio.is_playing(BGM)


def test_enter_on_title_returns_to_menu():
    host = _Host()
    game = CodeBreakerGame(host, Canvas(), Audio(), random.Random(0))
    game.create()
    _frame(game, triggered={Key.KEY_ENTER})
    assert host.menu_requests == 1
    assert game.state.name == "TITLE"


def test_drag_from_palette_places_peg():
    game, _ = _started_game()
    _place(game, Peg.GREEN, 2)
    assert game.board[0][2] is Peg.GREEN
    assert game.held is Peg.SPACE


def test_dragging_back_to_earlier_slot_swaps():
    game, _ = _started_game()
    _place(game, Peg.RED, 0)
    _place(game, Peg.BLUE, 1)
    x1, y1 = _slot(0, 1)
    _frame(game, x1, y1, triggered={Key.MOUSE_LBUTTON})
    assert game.held is Peg.BLUE
    assert game.board[0][1] is Peg.SPACE
    x0, y0 = _slot(0, 0)
    _frame(game, x0, y0, released={Key.MOUSE_LBUTTON})
    assert game.board[0][:2] == [Peg.BLUE, Peg.RED]


def test_correct_guess_clears_game():
    game, _ = _started_game(seed=3)
    for slot, peg in enumerate(game.answer):
        _place(game, peg, slot)
    assert game.filled_flag
    _frame(game, triggered={Key.KEY_J})
    assert game.clear_flag
    assert game.state.name == "RESULT"
    assert CLEAR_SOUND in game.audio.history
    assert not game.audio.is_playing(BGM)


def test_wrong_guess_records_hints_and_advances_turn():
    game, _ = _started_game(seed=5)
    answer = game.answer
    guess = answer[1:] + answer[:1]
    for slot, peg in enumerate(guess):
        _place(game, peg, slot)
    _frame(game, triggered={Key.KEY_J})
    assert game.elapsed_turns == 1
    assert game.hints[0] == list(score_guess(answer, guess))
    assert JUDGE_SOUND in game.audio.history
    assert game.state.name == "STAGE"


def test_judge_key_needs_a_full_row():
    game, _ = _started_game()
    _place(game, Peg.RED, 0)
    _frame(game, triggered={Key.KEY_J})
    assert game.elapsed_turns == 0


def test_time_limit_lapses_turn():
    game, _ = _started_game(time_button=1)
    assert game.temp_time == game.sum_time
    for _ in range(10):
        _frame(game, delta=5.0)
        if game.elapsed_turns:
            break
    assert game.elapsed_turns == 1
    assert game.temp_time == game.sum_time
    assert game.hints[0] == [Hint.SPACE] * 4


def test_running_out_of_turns_ends_game_and_space_returns_to_title():
    game, _ = _started_game(time_button=1)
    for _ in range(8):
        _frame(game, delta=100.0)
    assert game.elapsed_turns == 8
    assert game.state.name == "RESULT"
    assert OVER_SOUND in game.audio.history
    _frame(game, triggered={Key.KEY_SPACE})
    assert game.state.name == "TITLE"