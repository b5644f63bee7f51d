# perfectform

A small arcade game. You steer a gently pulsing cell around the window and
launch little spinning attacks that drift away, wobble and shrink until they
vanish.

## Installing

```
pip install .
```

The game draws with pygame, which is installed along with it.

## Playing

Start the game with:

```
perfectform
```

By default the cell's image is loaded from `assets/BaseCell_64x64.png`,
relative to the directory you start the game from. Choose another image
with `--texture`:

```
perfectform --texture path/to/cell.png
```

If the image cannot be loaded, or the window cannot be created, the error is
logged and the command exits with status 1. Closing the window exits with
status 0.

Controls:

| Key          | Action                                   |
|--------------|------------------------------------------|
| Arrow keys   | Move. Two keys together move diagonally  |
| Q (hold)     | Fire attacks, at most one every 100 ms   |
| Close window | Quit                                     |

When you fire while standing still, attacks fly in the direction you last
moved.

The window opens at 1280 × 720. The simulation advances in 10 ms steps no
matter how fast frames are drawn. Progress messages are logged at INFO level.

## Using it as a library

The game logic can be driven without a window:

- `perfectform.enums.PlayerIntention` lists what a key press means: move in
  one direction, stop moving, attack, stop attacking. `perfectform.enums.to_string`
  gives an intention's name, or `UNKNOWN_PLAYER_INTENTION` for anything else.
- `perfectform.player.Player` keeps track of the cell's movement and attack
  state. Feed it intentions with `handle_event`, advance it with `update`,
  ask its direction with `is_moving_up`, `is_moving_down`, `is_moving_left`
  and `is_moving_right`, and collect new attacks with `spawn_child_object`.
  Pass `rng=` (any object with a `random()` method) to make attacks
  repeatable.
- `perfectform.player.Attack` is one drifting projectile. `should_remove`
  becomes true once it has shrunk away.
- `perfectform.objects.GameObject` is the base class of both: a textured
  object with a position, a size and a `destination_rect`.
- `perfectform.game.Game` loads the player texture, holds every object on
  the field and updates, prunes and spawns them each step.
  `perfectform.game.intention_from_event` turns a pygame key event into a
  `PlayerIntention`.
- `perfectform.app.App` binds a `Game` to a surface: `iterate(now)` runs the
  due simulation steps and draws a frame, `handle_event(event)` forwards
  input; both return an `AppResult`.
- `perfectform.textures.TextureManager` loads images once and hands out
  their indices; index it to get a `Texture` back.
- `perfectform.scene.Scene` is an abstract base for a screen; the package
  provides no concrete scenes.
- `perfectform.settings` holds the window size, step rate and colours.

Errors are raised as `perfectform.exceptions.GameError` for invalid game
state and `perfectform.exceptions.RenderError` for drawing and loading
failures.

## What it does not do

There are no enemies, scores, levels or menus: the game is the cell, its
movement and its attacks.

## Running the tests

```
pip install ".[test]"
pytest
```