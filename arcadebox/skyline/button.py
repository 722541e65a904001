"""Menu buttons that share one selection and lead to a scene or to exit."""

from __future__ import annotations

import copy
from dataclasses import dataclass

from ..core import Canvas
from .config import ButtonData, ButtonId, SceneId


@dataclass
class Selection:
    """The button currently highlighted in a group of buttons."""

    current: ButtonId


class Button:
    """A text button; it is highlighted while the shared selection names it."""

    TEXT_SIZE = 100.0
    NORMAL_COLOR = (125, 125, 125, 255)
    SELECTED_COLOR = (225, 225, 225, 255)

    def __init__(self, data: ButtonData, selection: Selection) -> None:
        self.data = copy.deepcopy(data)
        self.selection = selection

    @property
    def my_id(self) -> ButtonId:
        return self.data.my_id

    def is_selected(self) -> bool:
        return self.selection.current == self.data.my_id

    def draw(self, canvas: Canvas, x: float = 0.0, y: float = 0.0) -> None:
        canvas.fill(self.SELECTED_COLOR if self.is_selected() else self.NORMAL_COLOR)
        canvas.text_size(self.TEXT_SIZE)
        canvas.text(self.data.name, self.data.pos.x + x, self.data.pos.y + y)

    def scene_move(self, game) -> None:
        """Act on the game when this button is the selected one.

        ``game`` must offer ``change_scene(scene_id)`` and ``request_exit()``.
        """
        if not self.is_selected():
            return
        if self.data.my_id == ButtonId.EXIT:
            game.request_exit()
        else:
            game.change_scene(SceneId(int(self.data.my_id)))