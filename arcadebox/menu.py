"""Tile menu for choosing a game, reorderable by right-button drag and drop."""

from __future__ import annotations

import colorsys
from pathlib import Path
from typing import Optional

from .core import Audio, Canvas, FrameInput, Game, Key


class Menu(Game):
    """A grid of game tiles; left click starts a game, right drag reorders."""

    def __init__(
        self,
        host=None,
        canvas: Optional[Canvas] = None,
        audio: Optional[Audio] = None,
        assets_dir: Path | str = "assets",
    ) -> None:
        super().__init__(host, canvas, audio)
        self.assets_dir = Path(assets_dir)
        self.rows = 0
        self.cols = 0
        self.tile_w = 0.0
        self.tile_h = 0.0
        self.ofst_x = 0.0
        self.ofst_y = 0.0
        self.div_hue = 0.0
        self.size_text = 0.0
        self.game_indices: list[int] = []
        self.titles: list[str] = []
        self.tile_index_mouse_over = -1
        self.tile_index_mouse_holding = -1

    @property
    def indices_path(self) -> Path:
        return self.assets_dir / "menu" / "indices.bin"

    def create(self) -> None:
        self.rows = 4
        self.cols = 4
        self.tile_w = 160 * 2
        self.tile_h = 90 * 2
        self.ofst_x = (self.canvas.width - self.tile_w * self.cols) / 2
        self.ofst_y = (self.canvas.height - self.tile_h * self.rows) / 2
        self.div_hue = 360.0 / (self.cols * self.rows)
        self.size_text = 40
        self.tile_index_mouse_holding = -1
        self.tile_index_mouse_over = -1
        self._load_game_indices()
        self._load_title_names()

    def _load_game_indices(self) -> None:
        count = self.rows * self.cols
        try:
            data = self.indices_path.read_bytes()[:count]
        except OSError:
            self.game_indices = list(range(count))
            return
        self.game_indices = list(data) + [0] * (count - len(data))

    def _load_title_names(self) -> None:
        self.titles = []
        for i in range(self.rows * self.cols):
            path = self.assets_dir / f"game{i:02d}" / "title.txt"
            try:
                with path.open(encoding="utf-8", errors="replace") as stream:
                    line = stream.readline()
            except OSError:
                line = ""
            self.titles.append(line.rstrip("\r\n"))

    def _title(self, game_id: int) -> str:
        return self.titles[game_id] if 0 <= game_id < len(self.titles) else ""

    def destroy(self) -> None:
        """Save the current tile order, then release sounds."""
        try:
            self.indices_path.parent.mkdir(parents=True, exist_ok=True)
            self.indices_path.write_bytes(bytes(i & 0xFF for i in self.game_indices))
        except OSError:
            pass
        super().destroy()

    def proc(self, inputs: FrameInput) -> None:
        self.change_game_indices(inputs)
        self.draw(inputs)
        if inputs.is_trigger(Key.MOUSE_LBUTTON) and self.tile_index_mouse_over >= 0:
            game_id = self.game_indices[self.tile_index_mouse_over]
            if self.host is not None:
                self.host.set_next_game_id(game_id)

    def change_game_indices(self, inputs: FrameInput) -> None:
        """Track the tile under the mouse and move a dragged tile where it is dropped."""
        self.tile_index_mouse_over = -1
        mx, my = inputs.mouse_x, inputs.mouse_y
        right = self.ofst_x + self.tile_w * self.cols
        bottom = self.ofst_y + self.tile_h * self.rows
        if mx < self.ofst_x or mx > right or my < self.ofst_y or my > bottom:
            self.tile_index_mouse_holding = -1
            return

        col = min(int((mx - self.ofst_x) / self.tile_w), self.cols - 1)
        row = min(int((my - self.ofst_y) / self.tile_h), self.rows - 1)
        self.tile_index_mouse_over = self.cols * row + col

        if inputs.is_trigger(Key.MOUSE_RBUTTON):
            self.tile_index_mouse_holding = self.tile_index_mouse_over

        if inputs.is_release(Key.MOUSE_RBUTTON) and self.tile_index_mouse_holding != -1:
            moved = self.game_indices.pop(self.tile_index_mouse_holding)
            self.game_indices.insert(self.tile_index_mouse_over, moved)
            self.tile_index_mouse_holding = -1

    def draw(self, inputs: FrameInput) -> None:
        canvas = self.canvas
        canvas.clear(0, 0, 0)
        canvas.text_size(self.size_text)
        canvas.fill(*_hsv(240, 0, 255))
        canvas.text("Menu", self.ofst_x, self.ofst_y)
        for row in range(self.rows):
            for col in range(self.cols):
                index = self.cols * row + col
                saturation, value = 255, 160
                if index == self.tile_index_mouse_over:
                    saturation, value = 128, 255
                canvas.fill(*_hsv(self.div_hue * index, saturation, value))
                px = self.tile_w * col + self.ofst_x
                py = self.tile_h * row + self.ofst_y
                canvas.rect(px, py, self.tile_w, self.tile_h)
                canvas.text_size(self.size_text)
                canvas.fill(0)
                canvas.text(
                    self._title(self.game_indices[index]), px + 10, py + 10 + self.size_text
                )
        if self.tile_index_mouse_holding >= 0:
            canvas.fill(128)
            canvas.text(
                self._title(self.game_indices[self.tile_index_mouse_holding]),
                inputs.mouse_x,
                inputs.mouse_y,
            )


def _hsv(hue: float, saturation: float, value: float) -> tuple[int, int, int]:
    r, g, b = colorsys.hsv_to_rgb((hue % 360) / 360.0, saturation / 255.0, value / 255.0)
    return round(r * 255), round(g * 255), round(b * 255)