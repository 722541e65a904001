"""Buildings scrolling right to left that the player runs on."""

from __future__ import annotations

import copy
import random
from dataclasses import dataclass, field
from typing import Optional

from ..core import Canvas
from .config import BuildingData, Vec2


@dataclass
class Block:
    """One building: ``pos`` is its bottom-left corner, ``scale.y`` is negative."""

    pos: Vec2 = field(default_factory=Vec2)
    scale: Vec2 = field(default_factory=Vec2)


class Buildings:
    """A ring of buildings that wrap to the right as they leave the screen."""

    def __init__(self, data: BuildingData, rng: Optional[random.Random] = None) -> None:
        self.data = copy.deepcopy(data)
        self.rng = rng if rng is not None else random.Random()
        self.blocks = [Block() for _ in range(self.data.max_building)]
        self.init()

    @property
    def max_building(self) -> int:
        return self.data.max_building

    @property
    def speed(self) -> float:
        return self.data.speed

    def _random_scale(self) -> Vec2:
        data = self.data
        range_x = data.max_wide - data.min_wide + 1
        range_y = data.max_height - data.min_height + 1
        return Vec2(
            self.rng.randrange(range_x) + data.min_wide,
            -(self.rng.randrange(range_y) + data.min_height),
        )

    def init(self) -> None:
        """Line the buildings up from the start position with random sizes."""
        data = self.data
        for i, block in enumerate(self.blocks):
            block.pos = Vec2(data.pos.x + data.pos_offset * i, data.pos.y)
            block.scale = self._random_scale()

    def rescale(self, i: int) -> None:
        self.blocks[i].scale = self._random_scale()

    def update(self, delta: float) -> None:
        """Scroll; a building gone off the left edge moves behind its predecessor."""
        count = len(self.blocks)
        for i, block in enumerate(self.blocks):
            block.pos.x += self.data.speed * delta
            if block.pos.x + block.scale.x < 0:
                block.pos.x = self.blocks[(i - 1) % count].pos.x + self.data.pos_offset
                self.rescale(i)

    def collision(self, player) -> bool:
        """Push the player out of the first building it touches.

        Returns True when the player ends up standing on a roof.
        """
        px, py = player.pos.x, player.pos.y
        range1 = player.range1.copy()
        range2 = player.range2.copy()
        scale = player.scale.copy()
        landed = False
        for block in self.blocks:
            left = block.pos.x
            right = block.pos.x + block.scale.x
            top = block.pos.y + block.scale.y
            hit = False

            foot_x = px + range1.x
            if left <= px <= right or left <= foot_x <= right:
                if py >= top:
                    if foot_x - left >= py - top:
                        player.pos.y = top
                        landed = True
                    else:
                        player.pos.x = left - range1.x
                        landed = False
                    player.first_jump_flag = True
                    player.double_jump_flag = True
                    hit = True

            side_x = px + scale.x
            side_y = py + range1.y
            if left <= side_x <= right or left <= side_x + range2.x <= right:
                if side_y >= top:
                    if side_x - left >= side_y - top:
                        player.pos.y = top - range1.y
                        landed = True
                    else:
                        player.pos.x = left - scale.x
                        landed = False
                    player.first_jump_flag = True
                    player.double_jump_flag = True
                    hit = True

            if hit:
                break
        return landed

    def draw(self, canvas: Canvas) -> None:
        for block in self.blocks:
            canvas.fill(self.data.color)
            canvas.rect(block.pos.x, block.pos.y, block.scale.x, block.scale.y)