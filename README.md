# arcadebox

The game logic of a handful of small mouse-and-keyboard mini games, a tile
menu to choose between them and a fade effect for switching. Everything is
stepped one frame at a time and draws into a recording canvas, so the games
run and can be tested without a window.

## Installing

```
pip install arcadebox
```

The package needs nothing beyond the standard library.

## The frame model

`arcadebox.core` holds the shared pieces:

- `FrameInput` – mouse position, the keys held (`pressed`), the keys that went
  down this frame (`triggered`), the keys that went up (`released`) and the
  frame time `delta`. Ask it with `is_trigger`, `is_press` and `is_release`;
  the keys are members of `Key`.
- `Canvas` – records every `clear`, `text`, `print`, `image`, `circle` and
  `rect` call as a `DrawCommand` in `canvas.commands`, carrying the current
  fill colour and text size. `begin_frame()` empties the list.
- `Audio` – keeps the set of named sounds playing and the history of what was
  played.
- `Game` – the base class: `create()`, `proc(inputs)` once per frame, and
  `destroy()`, which stops every sound still playing. `back_to_menu()` asks
  the host object, if one was given, to return to the menu.

```python
import random
from arcadebox.core import FrameInput, Key
from arcadebox.falling_circle import FallingCircleGame

game = FallingCircleGame(rng=random.Random(1))
game.create()
game.proc(FrameInput(triggered={Key.MOUSE_LBUTTON}))  # leave the title screen
game.proc(FrameInput(delta=1 / 60))                    # the circle falls
for command in game.canvas.commands:
    print(command.op, command.args)
```

## The games

| Module | Class | Game |
| --- | --- | --- |
| `arcadebox.codebreaker` | `CodeBreakerGame` | Hit and blow: drag four coloured pegs onto the board each turn, press `J` to judge, crack the code within eight turns. A time limit per turn is picked on the title screen. |
| `arcadebox.dodge` | `DodgeGame` | Keep the face under the mouse away from four circles sweeping the screen until the countdown ends; each stage is faster and longer. |
| `arcadebox.tetris` | `TetrisGame` | Falling blocks on a 12 by 20 field: `A` / `D` move, `W` rotates, `S` drops. Once the pink block has appeared, the next full line scores 10000 instead of 1000. |
| `arcadebox.janken` | `JankenGame` | Rock, paper, scissors against the computer: `A` rock, `S` scissors, `D` paper, until the first loss. |
| `arcadebox.falling_circle` | `FallingCircleGame` | Click the falling circle. |

The games that draw at random take an optional `rng` (`random.Random`).

The rules are also plain functions:

```python
from arcadebox.codebreaker import Peg, score_guess
from arcadebox.janken import Hand, judge

score_guess(
    (Peg.RED, Peg.BLUE, Peg.GREEN, Peg.YELLOW),
    (Peg.RED, Peg.GREEN, Peg.WHITE, Peg.WHITE),
)
# (Hint.PERFECT, Hint.IMPERFECT, Hint.SPACE, Hint.SPACE)

judge(Hand.ROCK, Hand.SCISSORS)  # Outcome.WIN
```

`arcadebox.codebreaker.make_answer` draws four distinct colours;
`arcadebox.tetris.rotate_offset` turns a block offset by quarter turns and
`arcadebox.tetris.hsb_to_rgb` converts a colour to RGB bytes.

## The menu and the fade

`arcadebox.menu.Menu` lays out a 4 by 4 grid of tiles. Each tile shows the
first line of `<assets_dir>/gameNN/title.txt`; the tile order is read from
`<assets_dir>/menu/indices.bin` and written back there by `destroy()`.
A left click on a tile calls `set_next_game_id(game_id)` on the host; a right
drag moves a tile to the spot where the button is released.

`arcadebox.transition.TransitionEffect` fades a full-screen rectangle out to
opaque (`out_start`, then `out_end_flag`) and back in (`in_start`), in one
second by default or as set with `set_time`. Its `proc(canvas, delta, width,
height)` draws the rectangle and advances the alpha.

## Skyline parts

`arcadebox.skyline` holds the pieces of a rooftop-jumping side-scroller:

- `config.load_config(width, height)` – all layout, colours, texts and
  timings as dataclasses in a `SkylineConfig`.
- `building.Buildings` – a ring of randomly sized buildings scrolling left,
  and `collision(player)`, which pushes the player onto a roof or against a
  wall.
- `player.Player` – entry glide, hovering, jump and double jump with a spin,
  falling and dying off screen; stepped with `update(inputs, buildings,
  time_up, height)`.
- `timer.Timer` – the distance-to-goal countdown.
- `button.Button` and `button.Selection` – text buttons sharing one
  selection; `scene_move(game)` calls `game.change_scene(...)` or
  `game.request_exit()` on whatever object is passed.

## What it does not do

- It opens no window and plays no sound: `Canvas` and `Audio` only record.
  Showing the commands and playing the named images and sounds is left to
  the caller.
- There is no command to start it and no host loop that runs the menu,
  switches games and plays the fade between them; the menu only hands the
  chosen game id to the host object it is given.
- The skyline parts are not assembled into a playable game: there are no
  title, stage, credit or result screens tying them together.

## Running the tests

```
pip install "arcadebox[test]"
pytest
```