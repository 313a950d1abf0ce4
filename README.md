# timemarches

This package holds the engine-independent logic of a short narrative game. It
is plain Python and uses only the standard library. Every piece is advanced by
explicit time deltas and explicit calls, so you can drive it from any game
loop or test it on its own.

## Modules

- `timemarches.timer`
  - `Timer` and `TimerMode` are one-shot and repeating timers, advanced with `Timer.tick(delta)`.
  - `finished`, `just_finished` and `fraction()` report how far a timer has run.
- `timemarches.animation` handles sprite-sheet animation.
  - `AnimationIndices` is a non-empty frame sequence. It either repeats or ends; `advance()` returns `None` at the end.
  - `AnimationController` steps through a sequence on a repeating timer. It sets `despawned` when a despawning sequence runs out.
  - `AnimationSprite.once` and `AnimationSprite.repeating` describe the animation for a texture path.
  - `GridLayout` cuts a sheet into tiles. `LayoutRegistry` maps texture paths to layouts.
  - `LayoutRegistry.controller_for` raises `KeyError` for a path that has no registered layout.
- `timemarches.audio` holds the audio parameters and the tweens that drive them.
  - `Volume` is a linear or decibel gain.
  - `VolumeNode`, `LowPassNode` and `PlaybackSettings` are the nodes being driven.
  - `Pool` and `Bus` describe routing: music goes to the main bus and the other pools go to the SFX bus.
  - The tween constructors are `volume`, `low_pass` and `sample_speed`.
  - `volume_to`, `low_pass_to` and `sample_speed_to` are step functions. Each takes the current state and returns the tween together with the new state.
- `timemarches.props` describes static scene props and the opening overlay.
  - `prop_for(kind)` covers the kinds `"Piano"`, `"Easel1"`, `"Easel2"` and `"Easel3"`.
  - `easel_child_colliders()` gives the collider each easel attaches below itself.
  - `hook_scene()` returns the opening overlay: a looping swiggle animation, a fading face texture and whisper sounds. Each sound is a `SoundCue`.
- `timemarches.movement` moves entities during cutscenes.
  - `EaseFunction` and `EasingCurve` define eased paths.
  - `MovementClip` plays a curve over a one-shot timer.
  - `Mover` lets a cutscene take over an entity. `move_to` glides it to `root - offset`. `lock` and `unlock` hold it still and release it. `apply(delta)` advances the clip and records the per-frame `velocity`.
- `timemarches.navigation` handles directional focus in the pause menu.
  - `CompassOctant` and `PlayingState` are the directions and game states.
  - `direction_from_vector(x, y)` turns an input vector into an octant.
  - `bindings(context)` lists the input names for each action in a state.
  - `NavigationMap` builds symmetric links with `add_edges` and `add_looping_edges`. `navigate(focus, direction)` raises `NavigationError` when nothing lies that way.
- `timemarches.scroll`: `VerticalScroll` is a paged scroll area. It provides `scroll_up`, `scroll_down`, `offset()`, `up_visible()` and `down_visible()`.
- `timemarches.inventory` holds the player's pockets and the paused inventory menu.
  - `InventoryItem` is one item. `Inventory.starting()` returns what the player carries at the start. `pick_up(item)` adds an item and returns the pickup sound.
  - `InventoryMenu.build(inventory)` lays items out in rows of three. Rows loop east to west; columns stop at their ends. Focus starts on the top-left slot.
  - Focus moves with `navigate(x, y)`, which returns a sound cue on success, or with `hover(slot)`.
  - `click(slot)` and `interact()` press a slot. `tick(delta)` reports which presses just ended.
  - `text_color(slot)` and `background_color(slot)` give the colours for focused and unfocused slots.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

This example animates a sprite sheet:

```python
from timemarches.animation import AnimationSprite, GridLayout, LayoutRegistry

registry = LayoutRegistry().register("textures/mega-swiggle.png", GridLayout(320, 180, 5, 1))
sprite = AnimationSprite.repeating("textures/mega-swiggle.png", 0.1, range(5))
controller = registry.controller_for(sprite)

controller.frame          # 0, the first frame
controller.update(0.1)    # 1, the next frame once the interval has passed
```

This example moves focus around the inventory menu:

```python
from timemarches.inventory import Inventory, InventoryMenu

menu = InventoryMenu.build(Inventory.starting())
menu.focus                # (0, 0)
menu.navigate(1.0, 0.0)   # a SoundCue; focus moves east to (0, 1)
menu.text_color((0, 1))   # "black": the focused slot's label is inverted
```

## What this package does not do

- It draws nothing, plays no sound and reads no input devices. Sounds, textures and inputs appear only as names and paths. The caller renders, plays and maps them.
- It has no game loop and no command to run. The caller advances timers, controllers, movers and menus.
- It does not contain the characters, the dialogue scripts, the playback of those scripts into a textbox, or the logic for choosing which nearby object the player interacts with.