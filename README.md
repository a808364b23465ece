# fireduck

The pieces of a small 2D game in which a duck breathes fireballs at castles.
The castles are built from stone blocks held together by mortar joints. A
fireball explodes when it touches something. The shockwave pushes nearby
dynamic bodies away. A block hit hard enough has all its joints broken.

The package has two parts:

- the game rules, as plain Python objects that need no window;
- `fireduck.app.Game`, a state machine for the screens, menus and pausing.
  The `fireduck` command shows it in a pygame window.

## Installing

```
pip install .
```

This installs `pygame`. The window uses it.

## The `fireduck` command

```
fireduck
```

This opens a 1280×720 window titled "Gamejam2".

1. A splash screen shows for 1.8 seconds. Press Escape to skip it.
2. The title screen then opens the main menu. It has the buttons Play,
   Settings, Credits and Exit.
3. Play goes to the gameplay screen if every asset has loaded. Otherwise it
   goes to the loading screen first.

Buttons are clicked with the left mouse button. These keys do something:

| Key    | Where                             | Effect                                              |
|--------|-----------------------------------|-----------------------------------------------------|
| Escape | splash screen                     | go to the title screen                              |
| P      | gameplay, no menu open            | pause: darken the screen and open the pause menu    |
| Escape | gameplay, no menu open            | the same as P                                       |
| P      | gameplay, a menu open             | close the menu                                      |
| Escape | credits menu                      | back to the main menu                               |
| Escape | pause menu                        | close it                                            |
| Escape | settings menu                     | back to the main menu, or to the pause menu in game |

The pause menu has the buttons Continue, Settings and Quit to title.

The settings menu has `-` and `+` buttons for the master volume. Each press
changes it by 10 %, within 0 % to 300 %.

Options:

- `--headless`: run without a window. The command steps the game for a
  simulated time, then prints the final state, for example
  `screen=title menu=main`.
- `--seconds N`: simulated time for `--headless`. The default is 5.
- `--fps N`: frames per second. The default is 60. It must be positive.
- `--web`: leave out the Exit button in the main menu.

## Driving the game from code

`Game` takes key names such as `"escape"` and `"p"`. It takes button clicks by
their label. `update(delta)` runs one frame:

```python
from fireduck.app import Game
from fireduck.states import Menu, Screen

game = Game()
game.press_key("escape")   # skip the splash screen
game.update(0.016)
game.update(0.016)         # the title screen opens the main menu
assert game.menu.current is Menu.MAIN

game.click("Play")
game.update(0.016)
assert game.screen.current is Screen.GAMEPLAY
```

Loading assets:

- By default every asset counts as loaded at once.
- Pass `is_loaded=` to decide per asset handle instead.
- `Game.resource_handles` tells whether loading has finished.

Other state on a `Game`:

- `Game.ui`: the widget trees currently shown.
- `Game.audio`: the sounds currently playing.
- `Game.global_volume`: the master volume.
- `Game.paused`: whether the game is paused.

## The game rules on their own

- `fireduck.movement`: `Vec2`, `Vec3` and `MovementController`.
  - `movement_to_physics` turns movement intent into velocity.
  - `apply_gravity` adds gravity.
  - `apply_movement_damping` slows horizontal movement, except for fireballs.
- `fireduck.animation`: `Timer`, with once and repeating modes.
  - `PlayerAnimation` has 2 idle frames and 6 walking frames.
  - `ExplosionAnimation` has 12 frames and stops on the last one.
  - `step_sound` picks a footstep sound on walking frames 2 and 5.
- `fireduck.player`: input handling and the queue of actions.
  - `CharacterController` queues actions.
  - `record_directional_input` stores a normalised direction.
  - `record_fire_input` queues a `FireballAttack` once the cooldown has run
    out. The attack goes in the movement direction, or to the right when
    standing still.
- `fireduck.balistics`: fireballs and their cooldown.
  - `process_fireball_actions` launches a fireball 24 units out at speed 900.
    It also restarts the cooldown.
  - `update_fireballs` drops fireballs once their 2-second lifetime is over.
  - `FireballCooldown.new(1.0)` gives the one-second cooldown.
- `fireduck.collision`: explosions and shockwaves.
  - `apply_explosion_shockwave` pushes dynamic bodies within 200 units.
    The impulse is 75 000 with quadratic falloff.
  - `fireball_collisions` turns touching fireballs into explosions.
  - `ground_sensor` and `GroundDetection` tell whether a body stands on
    something.
- `fireduck.castle`: castle blocks and their joints.
  - `create_mortar_joints` joins neighbouring blocks on a 16-pixel grid with
    `FixedJoint`s.
  - `castle_mass` gives a block's mass from its area.
  - `handle_castle_impulse` returns the joints that a shockwave above 30 000
    breaks.
- `fireduck.camera`: `snap_camera` fits a 16:9 view to a `LevelInfo`. It
  scrolls along the level's longer axis with the player and stays inside the
  level.
- `fireduck.theme` and `fireduck.menus`: the colour palette, the widgets and
  the menu trees.
- `fireduck.screens`: the splash fade and timer, and the loading screen.
  - `can_enter_gameplay` tells whether loading may end.
  - `gameplay_key_action` tells what a key does during gameplay.

## What it does not do

The window covers only the screens, menus and pause overlay.

The gameplay screen stays empty:

- No level file is read.
- No player, castle or fireball is drawn or simulated.
- Arrow keys and Space do nothing in the window.

The movement, fireball, shockwave, castle and camera rules above are there to
be called from code. `Game` does not run them.

Sounds are tracked as `AudioInstance` objects with their volume, but nothing
is played aloud.

## Running the tests

```
pip install .[test]
pytest
```