# termage

termage is a small engine for character-based games that run in a terminal
through curses. It comes with two games that are ready to play.

## Installing

```
pip install .
```

The games need a terminal at least 90 columns wide and 28 rows high. They
use Python's standard `curses` module, which is available on Linux and
macOS.

## Playing

### Space invaders

```
termage-invaders
```

Move with the left and right arrow keys. Shoot with space. Aliens drift
down the screen and bounce off the side walls. You score one point for each
alien you hit. You lose if an alien touches you or reaches the bottom. You
win once the last wave has passed.

### Geometry dash

```
termage-dash
```

Press the up arrow to jump. You can only jump while something is touching a
platform. The level scrolls towards you. Jump over the spikes and land on
top of the platforms. Running into a platform's side, or hitting its
underside, ends the game. You win when you reach the finish line.

In both games, Escape ends the game early. A game also stops after 10,000
frames of 50 ms each. When a game is over, its status lines are shown again
under the playfield. Press any key to leave. If curses cannot start, the
command prints the error and exits with status 1.

## Building your own game

A game is built from a `termage.model.Model`. The model takes three things:

- a `termage.screen.MainScreen`, which is built from the curses standard
  screen and a window factory such as `curses.newwin`;
- a `termage.status.Status`, which is built from a window;
- a window to read keys from.

The model puts elements on the screen with these calls:

- `Model.make_element(x, y, z, ...)` adds a `termage.element.Element` at a
  position. You can also give it a velocity and an acceleration. Elements
  are kept and ticked in order of their z value.
- `Model.add_player(...)` adds the single `termage.player.PlayerElement`,
  which reacts to the keyboard. The player is ticked after all the other
  elements. Calling `add_player` again replaces the player.
- `Model.delete_element(element)` removes an element. It ignores elements
  that the model does not hold.

Each element has a look, which you set with these calls:

- `Element.set_char`, `set_rectangle` and `set_bitmap` replace the look.
  `CharMap(x, y, c)` gives one character of a bitmap.
- `add_char`, `add_rectangle` and `add_bitmap` add further forms. The
  element moves to the next form every third tick, which makes an
  animation.

Elements react to each other and to keys with these calls:

- `Element.add_collider(other, callback, direction)` runs `callback(other)`
  when the two elements touch on the given `termage.element.Direction`.
  `Direction.ALL` matches any side. Elements only touch when their z values
  are equal.
- `Element.spawner(...)` creates a new element. The model adopts it on the
  same tick.
- `Element.kill()` blanks an element, drops its colliders and moves it out
  of play.
- `PlayerElement.add_key_motion(key, axis, physics, difference, condition)`
  changes the player's position (`physics` 0), velocity (1) or acceleration
  (2) when a key is pressed. A position change is only applied if it keeps
  the player inside the playfield.
- `PlayerElement.add_interaction(key, callback)` runs a callback with the
  player when a key is pressed. Interactions only run when no key motion
  matched that key.

`Model.go(max_ticks, delay)` runs the game loop until the model's `play`
flag is cleared or the tick limit is reached. It then waits for a key and
closes the screen.

`termage.status.Status` holds the three lines of text shown under the
playfield. Set a line with `Status.change_line(index, text)`. An index
outside 0 to 2 raises `IndexError`.

The two bundled games show how these pieces fit together. The modules are
`termage.invaders` and `termage.dash`. Each has a `build(model)` function
that sets up its level on a given model, and a `main()` function that the
commands above run.

## Running the tests

```
pip install ".[test]"
pytest
```