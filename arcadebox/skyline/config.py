"""Tunable data for the skyline runner: layout, colours, timings and texts."""

from __future__ import annotations

import copy
import enum
from dataclasses import dataclass, field
from typing import Tuple

Color = Tuple[float, float, float, float]

PLAYER_IMAGE = "player"
PLAYER_JUMP_IMAGE = "player_jump"
PLAYER_ENTER_IMAGE = "player_E"
GAME_CLEAR_IMAGE = "game_clear_text"
GAME_OVER_IMAGE = "game_over_text"

# Source sprite edge length of the player image, in pixels.
_PLAYER_SPRITE = 788


class SceneId(enum.IntEnum):
    TITLE = 0
    STAGE = 1
    CREDIT = 2
    GAME_CLEAR = 3
    GAME_OVER = 4


class ButtonId(enum.IntEnum):
    """What a button leads to; most values name the scene they open."""

    TITLE = SceneId.TITLE
    START = SceneId.STAGE
    CREDIT = SceneId.CREDIT
    EXIT = SceneId.CREDIT + 1
    RETRY = SceneId.STAGE


@dataclass
class Vec2:
    """A mutable 2-D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def copy(self) -> "Vec2":
        return Vec2(self.x, self.y)


@dataclass
class PlayerData:
    img: str = PLAYER_IMAGE
    img_size: float = 0.2
    jump_img: str = PLAYER_JUMP_IMAGE
    jump_img_size: float = 0.45
    e_img: str = PLAYER_ENTER_IMAGE
    e_img_size: float = 0.1
    color: Color = (0, 255, 0, 125)
    pos: Vec2 = field(default_factory=Vec2)
    target_pos: Vec2 = field(default_factory=Vec2)
    stay_wait: float = 25.0
    scale: Vec2 = field(default_factory=Vec2)
    speed: float = 0.0
    anime_speed: float = -400.0
    jump_speed: float = -500.0
    gravity: float = 9.8
    high_limit: float = 0.0
    first_jump_flag: bool = False
    double_jump_flag: bool = True
    range1: Vec2 = field(default_factory=Vec2)  # feet hit area
    range2: Vec2 = field(default_factory=Vec2)  # side hit area
    collision_flag: bool = False
    enter_anime_time: float = 2.0
    jump_anime_time: float = 0.5
    st_pos_x: float = 0.0
    st_pos_y: float = 0.0


@dataclass
class BuildingData:
    img: str = ""
    pos: Vec2 = field(default_factory=Vec2)
    pos_offset: float = 0.0
    speed: float = 0.0
    min_height: int = 0
    min_wide: int = 0
    max_height: int = 0
    max_wide: int = 0
    color: Color = (0, 0, 0, 255)
    max_building: int = 0


@dataclass
class TitleData:
    title_str: str = ""
    img: str = ""
    text_color: Color = (0, 0, 0, 255)
    pos: Vec2 = field(default_factory=Vec2)
    text_size: int = 0
    back_color: Color = (0, 0, 0, 255)
    rect_color: Color = (0, 0, 0, 255)
    rect_size: Vec2 = field(default_factory=Vec2)
    anime_time: float = 0.0


@dataclass
class StageData:
    img: str = ""
    back_color: Color = (0, 0, 0, 255)
    cnt: float = 0.0
    anime_time: float = 0.0
    rect_color: Color = (0, 0, 0, 255)
    rect_size: Vec2 = field(default_factory=Vec2)


@dataclass
class GameClearData:
    img: str = ""
    img_pos: Vec2 = field(default_factory=Vec2)
    img_size: float = 0.0
    text: str = ""
    text_color: Color = (0, 0, 0, 255)
    pos: Vec2 = field(default_factory=Vec2)
    text_size: int = 0
    back_color: Color = (0, 0, 0, 255)


@dataclass
class GameOverData:
    img: str = ""
    img_pos: Vec2 = field(default_factory=Vec2)
    img_size: float = 0.0
    text: str = ""
    text_color: Color = (0, 0, 0, 255)
    pos: Vec2 = field(default_factory=Vec2)
    text_size: int = 0
    back_color: Color = (0, 0, 0, 255)
    rect_color: Color = (0, 0, 0, 255)
    rect_size: Vec2 = field(default_factory=Vec2)


@dataclass
class CreditData:
    n_str1: str = ""
    n_str2: str = ""
    u_str1: str = ""
    u_str2: str = ""
    n_str_pos: Vec2 = field(default_factory=Vec2)
    u_str_pos: Vec2 = field(default_factory=Vec2)
    text_color: Color = (0, 0, 0, 255)
    text_size: float = 0.0
    back_color: Color = (255, 255, 255, 255)


@dataclass
class TimeData:
    time_text_pos: Vec2 = field(default_factory=Vec2)
    time_pos: Vec2 = field(default_factory=Vec2)
    time_color: Color = (0, 0, 0, 255)
    time_str: str = ""
    max_digit: int = 0
    time_text_size: float = 0.0
    limit_time: float = 0.0
    reduce_time: float = 0.0


@dataclass
class ButtonData:
    my_id: ButtonId = ButtonId.START
    pos: Vec2 = field(default_factory=Vec2)
    name: str = ""


@dataclass
class SkylineConfig:
    player: PlayerData
    building: BuildingData
    title: TitleData
    stage: StageData
    game_clear: GameClearData
    game_over: GameOverData
    credit: CreditData
    time: TimeData
    title_button: ButtonData
    start_button: ButtonData
    retry_button: ButtonData
    exit_button: ButtonData
    credit_button: ButtonData

    def copy(self) -> "SkylineConfig":
        return copy.deepcopy(self)


def load_config(width: float = 1920, height: float = 1080) -> SkylineConfig:
    """Build the game data for a screen of the given size."""
    sprite = _PLAYER_SPRITE * 0.2
    player = PlayerData(
        scale=Vec2(sprite - 6, -sprite + 8),
        range1=Vec2(110, -40),
        range2=Vec2(-40, -(sprite - 8)),
        pos=Vec2(0, 0),
        target_pos=Vec2((width - 200) / 2, 200),
        st_pos_x=(width - 200) / 2,
        st_pos_y=200,
    )

    building = BuildingData(
        pos=Vec2(100, height),
        pos_offset=400,
        speed=-400,
        min_height=400,
        min_wide=100,
        max_height=800,
        max_wide=200,
        color=(97, 97, 97, 180),
        max_building=6,
    )

    title = TitleData(
        title_str="車からの景色",
        text_color=(225, 225, 225, 255),
        pos=Vec2(220, height / 2),
        text_size=250,
        back_color=(68, 127, 255, 255),
        rect_color=(200, 200, 200, 255),
        rect_size=Vec2(width, height),
        anime_time=1.0,
    )

    stage = StageData(
        back_color=(68, 127, 255, 255),
        cnt=0,
        rect_color=(200, 200, 200, 255),
        rect_size=Vec2(width, height),
        anime_time=title.anime_time,
    )

    game_clear = GameClearData(
        img=GAME_CLEAR_IMAGE,
        img_pos=Vec2(width - 411, height - 151),
        img_size=0.8,
        text="GAME CLEAR",
        text_color=(225, 125, 125, 255),
        pos=Vec2(20, height / 2),
        text_size=380,
        back_color=(68, 127, 255, 255),
    )

    game_over = GameOverData(
        img=GAME_OVER_IMAGE,
        img_pos=Vec2(width - 411, height - 151),
        img_size=0.8,
        text="GAME OVER",
        text_color=(225, 125, 125, 255),
        pos=Vec2(100, height / 2),
        text_size=380,
        back_color=(68, 127, 255, 255),
        rect_color=(125, 0, 0, 125),
        rect_size=Vec2(width, height),
    )

    credit = CreditData(
        n_str1="いらすとや",
        n_str2="フキダシデザイン",
        u_str1="illustrations",
        u_str2="speech bubbles",
        n_str_pos=Vec2(100, 300),
        u_str_pos=Vec2(width - 1100, 300),
        text_color=(0, 0, 0, 255),
        text_size=80,
        back_color=(255, 255, 255, 255),
    )

    reduce_time = 15.0
    time = TimeData(
        time_text_pos=Vec2(width - 400, 50),
        time_pos=Vec2(width - 150, 50),
        time_color=(0, 0, 0, 255),
        time_str="目的地まで　　ｍ",
        max_digit=4,
        time_text_size=50.0,
        reduce_time=reduce_time,
        limit_time=10.0 * reduce_time,
    )

    start_pos = Vec2(width / 2 - 250 / 2, height / 1.5)
    start_button = ButtonData(ButtonId.START, start_pos, "START")
    exit_button = ButtonData(ButtonId.EXIT, Vec2(start_pos.x, start_pos.y + 100), "EXIT")
    credit_button = ButtonData(ButtonId.CREDIT, Vec2(start_pos.x, start_pos.y + 200), "CREDIT")
    retry_button = ButtonData(ButtonId.RETRY, start_pos.copy(), "RETRY")
    title_button = ButtonData(ButtonId.TITLE, Vec2(start_pos.x, start_pos.y + 100), "TITLE")

    return SkylineConfig(
        player=player,
        building=building,
        title=title,
        stage=stage,
        game_clear=game_clear,
        game_over=game_over,
        credit=credit,
        time=time,
        title_button=title_button,
        start_button=start_button.__class__(start_button.my_id, start_pos.copy(), start_button.name),
        retry_button=retry_button,
        exit_button=exit_button,
        credit_button=credit_button,
    )