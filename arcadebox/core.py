"""Frame input, recorded drawing, audio bookkeeping and the game base class."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

Color = Tuple[float, float, float, float]

SILENCE = "silence"


class Key(enum.Enum):
    """Keys and mouse buttons the games react to."""

    MOUSE_LBUTTON = enum.auto()
    MOUSE_RBUTTON = enum.auto()
    KEY_ENTER = enum.auto()
    KEY_SPACE = enum.auto()
    KEY_UP = enum.auto()
    KEY_DOWN = enum.auto()
    KEY_LEFT = enum.auto()
    KEY_RIGHT = enum.auto()
    KEY_A = enum.auto()
    KEY_D = enum.auto()
    KEY_J = enum.auto()
    KEY_S = enum.auto()
    KEY_W = enum.auto()
    KEY_Z = enum.auto()


@dataclass(frozen=True)
class FrameInput:
    """The state of mouse and keyboard for one frame.

    ``triggered`` holds keys that went down this frame, ``released`` keys
    that went up this frame and ``pressed`` keys that are held.
    """

    mouse_x: float = 0.0
    mouse_y: float = 0.0
    pressed: Iterable[Key] = frozenset()
    triggered: Iterable[Key] = frozenset()
    released: Iterable[Key] = frozenset()
    delta: float = 1.0 / 60.0

    def __post_init__(self) -> None:
        for name in ("pressed", "triggered", "released"):
            object.__setattr__(self, name, frozenset(getattr(self, name)))

    def is_trigger(self, key: Key) -> bool:
        return key in self.triggered

    def is_press(self, key: Key) -> bool:
        return key in self.pressed or key in self.triggered

    def is_release(self, key: Key) -> bool:
        return key in self.released


def _color(args: tuple) -> Color:
    if len(args) == 1 and isinstance(args[0], (tuple, list)):
        args = tuple(args[0])
    if len(args) == 1:
        gray = args[0]
        return (gray, gray, gray, 255)
    if len(args) == 2:
        gray, alpha = args
        return (gray, gray, gray, alpha)
    if len(args) == 3:
        return (args[0], args[1], args[2], 255)
    if len(args) == 4:
        return (args[0], args[1], args[2], args[3])
    raise ValueError(f"a colour takes 1 to 4 components, got {len(args)}")


@dataclass(frozen=True)
class DrawCommand:
    """One recorded drawing operation."""

    op: str
    args: tuple
    color: Optional[Color] = None
    size: Optional[float] = None


class Canvas:
    """Records drawing operations for a frame; a renderer replays them."""

    def __init__(self, width: int = 1920, height: int = 1080) -> None:
        self.width = width
        self.height = height
        self.commands: list[DrawCommand] = []
        self.fill_color: Color = (255, 255, 255, 255)
        self.size = 50.0
        self._print_line = 0

    def begin_frame(self) -> None:
        self.commands.clear()
        self._print_line = 0

    def clear(self, *args) -> None:
        self.commands.append(DrawCommand("clear", (), _color(args or (0,))))

    def fill(self, *args) -> None:
        self.fill_color = _color(args)

    def text_size(self, size: float) -> None:
        self.size = size

    def text(self, value, x: float, y: float) -> None:
        self.commands.append(
            DrawCommand("text", (str(value), x, y), self.fill_color, self.size)
        )

    def print(self, value) -> None:
        """Write a line of text below the previous printed line."""
        self.commands.append(
            DrawCommand("print", (str(value), self._print_line), self.fill_color, self.size)
        )
        self._print_line += 1

    def image(self, name: str, x: float, y: float, angle: float = 0.0, scale: float = 1.0) -> None:
        self.commands.append(DrawCommand("image", (name, x, y, angle, scale)))

    def circle(self, x: float, y: float, diameter: float) -> None:
        self.commands.append(DrawCommand("circle", (x, y, diameter), self.fill_color))

    def rect(self, x: float, y: float, w: float, h: float) -> None:
        self.commands.append(DrawCommand("rect", (x, y, w, h), self.fill_color))


class Audio:
    """Tracks which named sounds are playing."""

    def __init__(self) -> None:
        self.playing: set[str] = set()
        self.history: list[str] = []

    def play(self, name: str) -> None:
        self.playing.add(name)
        self.history.append(name)

    def stop(self, name: str) -> None:
        self.playing.discard(name)

    def is_playing(self, name: str) -> bool:
        return name in self.playing


class Game(abc.ABC):
    """Base class of every game hosted by the application.

    The host must offer ``back_to_menu()`` and ``set_next_game_id(game_id)``.
    """

    def __init__(self, host=None, canvas: Optional[Canvas] = None, audio: Optional[Audio] = None) -> None:
        self.host = host
        self.canvas = canvas if canvas is not None else Canvas()
        self.audio = audio if audio is not None else Audio()
        # Playing a silent sound first avoids a delay on the first real one.
        self.audio.play(SILENCE)

    @abc.abstractmethod
    def create(self) -> None:
        """Load resources and set the starting state."""

    @abc.abstractmethod
    def proc(self, inputs: FrameInput) -> None:
        """Advance and draw one frame."""

    def destroy(self) -> None:
        """Release every sound the game left playing."""
        for name in list(self.audio.playing):
            self.audio.stop(name)

    def back_to_menu(self) -> None:
        if self.host is not None:
            self.host.back_to_menu()