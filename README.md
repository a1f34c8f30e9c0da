# phantom_mansion

The game logic of a small haunted-mansion puzzle adventure, with no
rendering or input backend attached. The caller passes in input state
each frame and reads back the new state.

## Modules

- `phantom_mansion.geometry`: `Rect`, an axis-aligned rectangle with
  `contains_point(x, y)` (right and bottom edges excluded) and
  `collides(other)` (touching edges do not count).
- `phantom_mansion.character`:
  - `create_character(x, y, sprite)` returns a `Character` facing
    `Direction.DOWN` with an empty four-slot bag.
  - `Character.update(keys, can_walk, will_collide)` advances one frame.
    `keys` is a collection of held key names (`"left"`/`"a"`,
    `"right"`/`"d"`, `"up"`/`"w"`, `"down"`/`"s"`). The character moves
    3 units unless `will_collide` returns true for the probe rectangle on
    that side, and steps through a three-frame walk cycle. `frame` holds
    the sprite-sheet rectangle to draw. Nothing happens while `can_walk`
    is false.
  - `Item(x, y, width, height, slot, collectible, sprite)` is an object in
    a room. `Character.interact(item, interact_pressed)` returns an
    `Interaction`: `NONE` when the character is not touching the item or
    the interact key was not pressed, `INSPECT` for a non-collectible
    item, and `COLLECTED` after it has put a collectible item in its bag
    slot and moved the item off the map.
  - `Character.has_lamp()` is true once slots 0 and 1 (lamp and oil) are
    filled.
  - `CodeLock` takes a fixed number of typed characters through
    `type_char`, with `backspace` and `reset`. Its `status` is a
    `LockStatus`: `ENTERING`, `OPEN` or `WRONG`. `safe_lock(character)`
    builds the three-digit safe, which puts the axe in the bag when
    opened. `gate_lock(character)` builds the three-letter gate, which
    accepts upper-case letters and increments `map_advance` when opened.
    Each lock carries its `prompt`, `success_lines` and `failure_line`
    texts for display.
- `phantom_mansion.menu`: `Menu.update(mouse_x, mouse_y, released)`
  moves between the `Screen.MENU`, `Screen.CREDITS` and
  `Screen.GAMEPLAY` screens when the mouse is released over the start,
  credits or back button.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from phantom_mansion.character import LockStatus, create_character, safe_lock

hero = create_character(930, 900, sprite=None)

# One frame of movement: the player holds "left" and nothing is in the way.
hero.update({"left"}, can_walk=True, will_collide=lambda box: False)
assert hero.x == 927

lock = safe_lock(hero)
for ch in "508":
    lock.type_char(ch)
assert lock.status is LockStatus.OPEN
assert hero.items[2]
```

```python
from phantom_mansion.menu import Menu, Screen

menu = Menu()
menu.update(1300, 780, released=True)
assert menu.screen is Screen.GAMEPLAY
```

## What it does not do

There is no game window, drawing, sound or input handling, and no
command to start a game. The rooms of the mansion (their walls, item
placements and the move from one room to the next) are not included;
the caller supplies walls through the `will_collide` callback and places
its own `Item`s.