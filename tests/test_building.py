import random

import pytest

from arcadebox.core import Canvas
from arcadebox.skyline.building import Buildings
from arcadebox.skyline.config import Vec2, load_config
from arcadebox.skyline.player import Player


@pytest.fixture
def config():
    return load_config(1920, 1080)


@pytest.fixture
def buildings(config):
    return Buildings(config.building, rng=random.Random(7))


def _park_far(buildings, keep=0):
    for i, block in enumerate(buildings.blocks):
        if i != keep:
            block.pos.x = 100000


def test_init_lays_buildings_out(buildings, config):
    data = config.building
    assert len(buildings.blocks) == buildings.max_building == data.max_building
    for i, block in enumerate(buildings.blocks):
        assert block.pos == Vec2(data.pos.x + data.pos_offset * i, data.pos.y)
        assert data.min_wide <= block.scale.x <= data.max_wide
        assert -data.max_height <= block.scale.y <= -data.min_height


def test_rescale_stays_in_range(buildings, config):
    data = config.building
    for _ in range(50):
        buildings.rescale(2)
        scale = buildings.blocks[2].scale
        assert data.min_wide <= scale.x <= data.max_wide
        assert -data.max_height <= scale.y <= -data.min_height


def test_update_scrolls_by_speed(buildings):
    before = [b.pos.x for b in buildings.blocks]
    buildings.update(0.25)
    after = [b.pos.x for b in buildings.blocks]
    assert all(a == b + buildings.speed * 0.25 for a, b in zip(after, before))


def test_offscreen_building_wraps_behind_previous(buildings, config):
    last = buildings.blocks[-1]
    first = buildings.blocks[0]
    first.pos.x = -first.scale.x - 1
    last_x_before = last.pos.x
    buildings.update(0.0)
    assert first.pos.x == last_x_before + config.building.pos_offset


def test_landing_on_roof(buildings, config):
    _park_far(buildings)
    block = buildings.blocks[0]
    block.pos = Vec2(0, 1080)
    block.scale = Vec2(200, -500)
    player = Player(config.player)
    player.pos.x = 50
    player.pos.y = block.pos.y + block.scale.y + 20
    player.first_jump_flag = False
    player.double_jump_flag = False
    assert buildings.collision(player) is True
    assert player.pos.y == block.pos.y + block.scale.y
    assert player.first_jump_flag is True
    assert player.double_jump_flag is True


def test_hitting_a_wall_pushes_back(buildings, config):
    _park_far(buildings)
    block = buildings.blocks[0]
    block.pos = Vec2(100, 1080)
    block.scale = Vec2(200, -500)
    player = Player(config.player)
    player.pos.x = -5
    player.pos.y = 700
    assert buildings.collision(player) is False
    assert player.pos.x == block.pos.x - player.scale.x


def test_no_contact_leaves_player_alone(buildings, config):
    for block in buildings.blocks:
        block.pos.x = 100000
    player = Player(config.player)
    player.pos.x = 10
    player.pos.y = 20
    assert buildings.collision(player) is False
    assert player.pos == Vec2(10, 20)
    assert player.double_jump_flag is True
    assert player.first_jump_flag is False


def test_draw_emits_one_rect_per_building(buildings, config):
    canvas = Canvas()
    buildings.draw(canvas)
    assert len(canvas.commands) == buildings.max_building
    for cmd, block in zip(canvas.commands, buildings.blocks):
        assert cmd.op == "rect"
        assert cmd.color == config.building.color
        assert cmd.args == (block.pos.x, block.pos.y, block.scale.x, block.scale.y)


def test_data_is_copied(config):
    buildings = Buildings(config.building, rng=random.Random(1))
    config.building.speed = 0
    assert buildings.speed == -400