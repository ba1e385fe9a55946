# solong

A small top-down tile game. You walk a player around a walled map, pick up
every collectible, and leave through the exit. Every move that counts is
numbered and printed to standard output.

## Installing

```
pip install .
```

The game window is drawn with pygame.

## Playing

```
solong maps/level.ber
```

The command takes exactly one argument: the path of a map file, which must
end in `.ber`. Any other number of arguments prints a usage message and exits
with status 1.

Controls:

| Key   | Action      |
|-------|-------------|
| W     | move up     |
| A     | move left   |
| S     | move down   |
| D     | move right  |
| Esc   | quit        |

Closing the window also quits. Rules of movement:

- walking into a wall does nothing and is not counted;
- stepping onto a collectible picks it up and turns the tile into floor;
- the player's start tile is plain floor once play begins;
- stepping toward the exit counts as a move but leaves the player where they
  are; if every collectible has been picked up, that step wins the game and
  the window closes.

## Map files

A map is a rectangle of characters, one row per line:

| Char | Meaning         |
|------|-----------------|
| `1`  | wall            |
| `0`  | floor           |
| `C`  | collectible     |
| `E`  | exit            |
| `P`  | player start    |

A map is accepted only if:

- the last line has no trailing newline;
- every row has the same length, and the map is not square;
- it is closed: the first and last rows are all walls, and every other row
  starts and ends with a wall;
- it holds only the characters above, exactly one `P`, exactly one `E` and at
  least one `C`;
- every collectible can be reached from the player's start without passing
  through a wall or the exit.

Example:

```
1111111111111
10010000000C1
1000011111001
1P0011E000001
1111111111111
```

A wrong extension, an unreadable file, an invalid map or a missing sprite
stops the program with an `Error` message on standard error and exit
status 1.

## Sprites

Tiles are drawn 64 pixels square from images in an `assets` directory under
the current working directory: `player.xpm`, `wall.xpm`, `floor.xpm`,
`collectible.xpm` and `exit.xpm`. These images are not included in the
package; supply your own.

## Using it from Python

```python
from solong.mapfile import load_map, MapError
from solong.game import Game, Direction

game_map = load_map("maps/level.ber")   # raises MapError on a bad map
game = Game(game_map)
game.move(Direction.RIGHT)              # True if the step counted
print(game.player, game.moves, game.remaining, game.won)
```

Other pieces:

- `solong.mapfile.check_extension(path)` checks a file name only;
  `solong.mapfile.parse_map(lines)` validates lines already in memory and
  returns a `GameMap` with `rows`, `width`, `height`, `collectibles` and
  `tile(row, col)`.
- `solong.reader.read_lines(stream, buffer_size)` yields the lines of a text
  or binary stream, read in chunks, with newlines kept;
  `solong.reader.read_map_lines(path)` returns all lines of a file.
- `solong.game.find_player(rows)` returns the player's `(row, column)`.
  `Game(game_map, output)` prints move counts to `output` instead of standard
  output when one is given.
- `solong.display.run(game, asset_dir)` opens the window and returns whether
  the game was won; `solong.display.tile_sprites(game)` lists the sprites to
  draw with their pixel positions; `solong.display.key_to_direction(key)`
  maps a pygame key to a `Direction`; `solong.display.load_assets(directory)`
  loads the five sprites.