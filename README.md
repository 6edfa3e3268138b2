# gridsnatch

A small arcade game played on a 12 × 12 grid. You move a player square one
tile at a time with the `W`, `A`, `S` and `D` keys. When you step onto a
collectible, your score goes up by one and the collectible jumps to a new
random tile. Tiles that have a collider block movement.

## Installing

```
pip install .
```

This installs `pygame`, which the game uses for its window, drawing and
keyboard input.

## Playing

Run the game from a directory that holds a `data/` folder with the level:

```
gridsnatch
```

Options:

- `--data-dir DIR`: directory holding `map.txt` and `scene.json` (default `data`).
- `--kill-script PATH`: where to write the kill script (default `kill.sh`).

Controls:

| Key      | Action                            |
|----------|-----------------------------------|
| W A S D  | move up, left, down, right        |
| 1        | resume                            |
| 2        | pause                             |
| 3        | restart the level (then paused)   |
| 4 / Esc  | quit                              |

Each key press moves the player at most one tile and scores at most once;
release the key and press it again to move or score again.

The score is printed to the terminal at the start and each time it changes,
along with a frames-per-second line about once a second. At startup the game
writes a script holding a `kill -15` command for its own process, so another
shell can stop it cleanly. If the level cannot be read or the window cannot be
opened, the error is printed and the command exits with status 1.

## Level data

Two files in the data directory describe a level.

`map.txt` is a grid of 12 lines of 12 digits each (anything beyond that is
ignored; missing or non-digit tiles are an error). Tiles are read row by row.
For every tile, each entity template whose `index` equals the digit places one
entity there, at pixel position `(column * 32 + 32, row * 32 + 32)`.

`scene.json` lists at most 10 entity templates:

```json
{
  "entities": [
    {
      "index": 1,
      "components": {
        "information": {"name": "player"},
        "size": {"width": 32, "height": 32},
        "color": {"red": 0, "green": 200, "blue": 0, "alpha": 255},
        "layer": {"layer": 2},
        "player": {}
      },
      "systems": [3]
    }
  ]
}
```

Notes on the format:

- Every entity object needs a numeric `index`. An entity object without a
  `systems` array ends the list: it and all later entries are dropped.
- Recognised components are `information`, `position`, `direction`,
  `velocity`, `acceleration`, `size`, `color`, `collider`, `layer`, `player`
  and `collectible`; each must be a JSON object.
- A `size.width` of `-1` means the full window width.
- The placed position always comes from the map tile; only `oldX` and `oldY`
  of a template's `position` are carried over.
- When a color is placed, its alpha is taken from the green channel.
- `collider.isItColliding` is read as the string `"true"` or anything else.
- Anything with a position, size and collider blocks the player. Anything with
  a position, size and `collectible` can be picked up by an entity with a
  position, size and `player`.
- Entities are drawn only while at least one entity has a layer. Layers 0 to 4
  are drawn lowest first, and drawing stops at the first entity that lacks a
  position, size, color or layer, so give every entity all four.

## Using it as a library

The pieces of the game can be used on their own:

- `gridsnatch.tilemap.parse_map` / `load_map` read the tile grid (raising `MapError`).
- `gridsnatch.scene.parse_scene` / `load_scene` return `EntityTemplate` objects
  (raising `SceneError`).
- `gridsnatch.populate.populate_world` resets a `gridsnatch.world.World` and fills it
  from a tile grid and templates.
- `gridsnatch.world.BoundedVector` is the fixed-capacity list the world stores
  entities and components in; misuse raises `VectorError`.
- `gridsnatch.move.move` and `gridsnatch.score.score_calculator` are the game's systems;
  `gridsnatch.timing.update` runs both, and `gridsnatch.timing.FrameClock` paces frames.
- `gridsnatch.collision.is_colliding` is the axis-aligned box test they use.
- `gridsnatch.controls.KeyState` and `handle_event` turn pygame events into key flags
  and game states.
- `gridsnatch.render.Renderer` draws a world onto any pygame surface.
- `gridsnatch.app.Game` ties it together. `Game.step` advances one frame without a
  window, which is handy for tests and scripted play.

## What it does not do

There is one level per data directory and no level selection, saving or high
score table. The `direction`, `velocity` and `acceleration` components and the
`systems` numbers are read from the scene but nothing acts on them: there is no
gravity or free movement, only tile-by-tile steps. There is no sound.