"""The player character, items it can pick up and the code locks it opens."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterable, Optional

from .geometry import Rect

SPRITE_SCALE = 5
FRAME_WIDTH = 13
FRAME_HEIGHT = 21
SPEED = 3
FRAME_SPEED = 3
TARGET_FPS = 60
ANIMATION_FRAMES = 3
BAG_SIZE = 4
AXE_SLOT = 2

_BODY_WIDTH = FRAME_WIDTH * SPRITE_SCALE
_BODY_HEIGHT = FRAME_HEIGHT * SPRITE_SCALE
_REMOVED_POSITION = -100


class Direction(Enum):
    """Facing direction; the value is the sprite-sheet row."""

    LEFT = 0
    RIGHT = 1
    UP = 2
    DOWN = 3


class Interaction(Enum):
    """Outcome of trying to interact with an item."""

    NONE = 0
    INSPECT = 1
    COLLECTED = 2


_KEY_BINDINGS = (
    (Direction.LEFT, frozenset({"left", "a"})),
    (Direction.RIGHT, frozenset({"right", "d"})),
    (Direction.UP, frozenset({"up", "w"})),
    (Direction.DOWN, frozenset({"down", "s"})),
)

_STEPS = {
    Direction.LEFT: (-SPEED, 0),
    Direction.RIGHT: (SPEED, 0),
    Direction.UP: (0, -SPEED),
    Direction.DOWN: (0, SPEED),
}


def _sprite_frame(column: float, direction: Direction) -> Rect:
    return Rect(column, FRAME_HEIGHT * direction.value, FRAME_WIDTH, FRAME_HEIGHT)


@dataclass
class Item:
    """Something in a room: a collectible object or a clue to inspect."""

    x: float
    y: float
    width: float
    height: float
    slot: int = 0
    collectible: bool = False
    sprite: Any = None

    def __post_init__(self) -> None:
        if not 0 <= self.slot < BAG_SIZE:
            raise ValueError(f"inventory slot {self.slot} is outside the bag")

    @property
    def hitbox(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    def remove(self) -> None:
        """Move the item off the map so nothing can touch it again."""
        self.x = self.y = _REMOVED_POSITION
        self.width = self.height = 0


@dataclass
class Character:
    """The player: position, facing, inventory and animation state."""

    x: float
    y: float
    sprite: Any = None
    direction: Direction = Direction.DOWN
    items: list = field(default_factory=lambda: [False] * BAG_SIZE)
    map_advance: int = 0
    frames_counter: int = 0
    current_frame: int = 0
    frame: Rect = field(default_factory=lambda: _sprite_frame(0, Direction.DOWN))
    hitbox: Rect = field(init=False)
    collision_left: Rect = field(init=False)
    collision_right: Rect = field(init=False)
    collision_up: Rect = field(init=False)
    collision_down: Rect = field(init=False)

    def __post_init__(self) -> None:
        x, y = self.x, self.y
        self.hitbox = Rect(x, y, _BODY_WIDTH, _BODY_HEIGHT)
        self.collision_left = Rect(x - 2, y + 62, 1, 40)
        self.collision_right = Rect(x + _BODY_WIDTH, y + 62, 2, 40)
        self.collision_up = Rect(x, y + 60, _BODY_WIDTH - 5, 2)
        self.collision_down = Rect(x, y + _BODY_HEIGHT, _BODY_WIDTH - 5, _BODY_HEIGHT + 2)

    def probe(self, direction: Direction) -> Rect:
        """The thin rectangle on the given side used to test for walls."""
        return {
            Direction.LEFT: self.collision_left,
            Direction.RIGHT: self.collision_right,
            Direction.UP: self.collision_up,
            Direction.DOWN: self.collision_down,
        }[direction]

    def update(
        self,
        keys: Iterable[str],
        can_walk: bool = True,
        will_collide: Optional[Callable[[Rect], bool]] = None,
    ) -> None:
        """Advance one frame: move by the held keys unless blocked, and animate."""
        if not can_walk:
            return
        pressed = {key.lower() for key in keys}
        column = FRAME_WIDTH * self.current_frame
        direction = next((d for d, names in _KEY_BINDINGS if pressed & names), None)

        if direction is None:
            frame = _sprite_frame(0, self.direction)
        else:
            self.direction = direction
            if will_collide is not None and will_collide(self.probe(direction)):
                frame = _sprite_frame(0, direction)
            else:
                dx, dy = _STEPS[direction]
                self.x += dx
                self.y += dy
                frame = _sprite_frame(column, direction)

        self._animate()
        self._place_walking_bounds()
        self.frame = frame

    def _animate(self) -> None:
        self.frames_counter += 1
        if self.frames_counter >= TARGET_FPS / FRAME_SPEED:
            self.current_frame = (self.current_frame + 1) % ANIMATION_FRAMES
            self.frames_counter = 0

    def _place_walking_bounds(self) -> None:
        x, y = self.x, self.y
        self.collision_left = Rect(x - 2, y + 67, 1, 30)
        self.collision_right = Rect(x + _BODY_WIDTH, y + 67, 2, 30)
        self.collision_up = Rect(x + 5, y + 60, _BODY_WIDTH - 10, 2)
        self.collision_down = Rect(x + 5, y + _BODY_HEIGHT, _BODY_WIDTH - 10, 2)
        self.hitbox = Rect(x, y, _BODY_WIDTH, _BODY_HEIGHT)

    def interact(self, item: Item, interact_pressed: bool) -> Interaction:
        """Try to use an item the character is touching."""
        if not self.hitbox.collides(item.hitbox) or not interact_pressed:
            return Interaction.NONE
        if not item.collectible:
            return Interaction.INSPECT
        self.items[item.slot] = True
        item.remove()
        return Interaction.COLLECTED

    def has_lamp(self) -> bool:
        """True once both the lamp and the oil are in the bag."""
        return self.items[0] and self.items[1]


def create_character(x: float, y: float, sprite: Any = None) -> Character:
    """A fresh character facing down with an empty bag."""
    return Character(x=x, y=y, sprite=sprite)


class LockStatus(Enum):
    ENTERING = "entering"
    OPEN = "open"
    WRONG = "wrong"


@dataclass
class CodeLock:
    """A lock that takes a fixed number of typed characters."""

    solutions: tuple
    accepts: Callable[[str], bool]
    on_open: Callable[[], None] = lambda: None
    length: int = 3
    prompt: str = ""
    success_lines: tuple = ()
    failure_line: str = ""
    code: str = field(default="", init=False)
    status: LockStatus = field(default=LockStatus.ENTERING, init=False)

    def type_char(self, char: str) -> LockStatus:
        """Add a character; once the code is full it is checked."""
        if len(char) != 1 or not self.accepts(char) or len(self.code) >= self.length:
            return self.status
        self.code += char
        if len(self.code) == self.length:
            if self.code in self.solutions:
                self.status = LockStatus.OPEN
                self.on_open()
            else:
                self.status = LockStatus.WRONG
        return self.status

    def backspace(self) -> None:
        self.code = self.code[:-1]
        self.status = LockStatus.ENTERING

    def reset(self) -> None:
        self.code = ""
        self.status = LockStatus.ENTERING


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _is_upper_letter(char: str) -> bool:
    return "A" <= char <= "Z"


def safe_lock(character: Character) -> CodeLock:
    """The three-digit safe; opening it puts the axe in the bag."""

    def open_safe() -> None:
        character.items[AXE_SLOT] = True

    return CodeLock(
        solutions=("508",),
        accepts=_is_digit,
        on_open=open_safe,
        prompt="HMM... 3 DIGITOS, QUAL DEVE SER A SENHA?",
        success_lines=("FUNCIONOU!", "TINHA UM MACHADO DENTRO DO COFRE!"),
        failure_line="SENHA ERRADA, MELECA.",
    )


def gate_lock(character: Character) -> CodeLock:
    """The three-letter gate; opening it lets the character move on."""

    def open_gate() -> None:
        character.map_advance += 1
        character.items[AXE_SLOT] = True

    return CodeLock(
        solutions=("CIN", "cin"),
        accepts=_is_upper_letter,
        on_open=open_gate,
        prompt="HMM... AGORA SÃO TRÊS LETRAS. QUAL SERÁ A SENHA?",
        success_lines=("FUNCIONOU!", "O PORTÃO ABRIU!"),
        failure_line="SENHA ERRADA, MELECA!",
    )