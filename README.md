# horizon

A small component-based 2D game engine built on pygame.

A game is made of **scenes**. A scene holds **game objects**. A game object
holds **components**, and these receive the engine's lifecycle calls:
`initialize`, `post_initialize`, `fixed_update`, `persistent_update`,
`update`, `late_update` and `render`.

## Modules

- `horizon.structs`: small value types (`IPoint2`, `FPoint2`, `IPoint3`,
  `FPoint3`, `Color`, `AudioData`, `IRect`).
  - `IPoint2` supports `+`, `-`, `*` and `/` element-wise, with another point
    or with an integer.
  - Its `/` rounds toward zero.
- `horizon.math_helper`: `are_rects_overlapping` (touching rectangles count
  as overlapping), `i_lerp` and `ipoint2_lerp`.
- `horizon.logger`: `log_info`, `log_warning`, `log_error` and
  `reset_logger_color`. These print `[INFO]`, `[WARNING]` or `[ERROR]` lines,
  in colour when standard output is a terminal.
- `horizon.singleton`: a `Singleton` base class.
  - `instance()` creates a subclass's shared object on first use.
  - `reset_instance()` drops it.
- `horizon.events`: `PossibleEvent`, `Event` (an event kind with an optional
  `data` payload), the abstract `Observer` and the `Subject` that notifies
  observers in order.
- `horizon.timer`: `Timer` measures `delta_time` and counts `fps`. It has a
  fixed step (`fixed_frame_time`) of 1/144 s.
- `horizon.component`: the `Component` base class, with `parent`,
  `identifier` and `equals`.
- `horizon.game_object`: `GameObject`.
  - Holds components; `get_component` and `get_components` find them by type.
  - Can be inactive; an inactive object receives only `persistent_update`.
  - Given an `activation_time`, it starts inactive and activates itself after
    that many seconds.
- `horizon.timed_function`: `TimedFunctionComponent` calls a function with
  the total elapsed time once its delay has passed, once or looping.
- `horizon.scene` and `horizon.scene_manager`: `Scene` holds game objects.
  - `get_game_object` and `get_game_objects` find them by identifier.
  - `SceneManager` keeps the scenes and forwards update and render calls to
    the active one.
  - `add_scene` makes the first scene added active; `add_active_scene` makes
    the new scene active; `next_scene` wraps around.
- `horizon.transform`: `TransformComponent` holds an integer position.
- `horizon.trigger` and `horizon.trigger_manager`: rectangle triggers.
  - A `TriggerComponent` follows its object's transform.
  - On `initialize` it registers with the `TriggerManager`.
  - The manager tests every pair of registered triggers.
  - Each trigger calls its callback with `(own object, other object,
    TriggerAction.ENTER or EXIT, other trigger's identifier)`.
- `horizon.health` and `horizon.score`: `HealthComponent` and
  `ScoreComponent` notify observers.
  - Health sends `PLAYER_DIED` or, at zero lives, `GAME_OVER`.
  - Score sends an event chosen by the size of the increase.
- `horizon.display`: `HealthDisplayComponent`, `ScoreDisplayComponent` and
  their observers keep a `TextComponent` in step with those events.
- `horizon.commands`: `Command` and ready-made commands. `LifeLostCommand`
  removes a life. `ColorChangeCommand`, `RemainingDiscCommand`,
  `CatchingSamOrSlickCommand` and `DefeatCoilyCommand` add 25, 50, 300 and
  500 points.
- `horizon.renderer`: `Renderer` draws textures and rectangle outlines onto
  a pygame surface. `Texture2D` wraps an image.
- `horizon.resources`: `ResourceManager` loads textures and `Font`s from
  paths that start with its data path.
- `horizon.text`, `horizon.texture`, `horizon.sprite`, `horizon.fps`:
  - `TextComponent` draws text.
  - `TextureComponent` draws a region of an image, scaled and offset.
  - `SpriteComponent` steps through equally wide frames of a strip.
  - `FPSComponent` writes `"<fps> FPS"` into a text component.
- `horizon.sound`: sound systems behind a `SoundSystemServiceLocator`.
  - `MixerSoundSystem` plays through the pygame mixer. Requests for a sound
    that is already queued merge and keep the louder volume.
  - `MutedSoundSystem` prints the requests instead of playing them.
  - `NullSoundSystem` drops them.
  - Queues hold 15 requests; one more raises `OverflowError`.
  - Each `update` handles at most one request, and waits while four channels
    are busy.
- `horizon.input`: `InputManager` binds keyboard keys (pygame key codes) and
  controller buttons to commands.
  - `process_input` takes a list of events, or reads pygame's event queue.
  - It returns `False` on a quit event.
- `horizon.prefab`: `PrefabFactory.register_prefab` records a prefab type
  under its class name. The type is called with a JSON-like mapping and
  exposes `game_object`. `get_prefab` builds the object named by the
  mapping's `"class"` entry, or returns `None`.
- `horizon.engine`: `Engine` opens the window and audio, registers a
  `MixerSoundSystem` and runs the fixed-step main loop. Sound is updated on a
  background thread.

## Example

```python
from horizon.events import Observer
from horizon.game_object import GameObject
from horizon.health import HealthComponent


class PrintingObserver(Observer):
    def on_notify(self, event):
        print(event.event, event.data)


player = GameObject("player")
health = HealthComponent(player, 3)
player.add_component(health)
health.add_observer(PrintingObserver())

health.decrease_live()   # prints PossibleEvent.PLAYER_DIED 2
```

To start a game, add your scenes to `SceneManager.instance()` and call
`Engine().run()`. The loop ends when the window is closed.

By default the engine loads ten sound files from `../Data/sounds/`. Their ids
0 to 9 follow the order of `DEFAULT_SOUND_FILES`. Pass `sound_files=` to
choose others. A file that fails to load is reported as a warning and still
takes up its id.

## What it does not include

- This is a library only: it installs no command to run.
- It contains no game levels, characters or art.
- It contains no on-screen debug overlay.
- Prefab types must be written and registered by the game itself.

## Tests

The tests use pytest, which the `test` extra installs:

```
pip install .[test]
pytest
```