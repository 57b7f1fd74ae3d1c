# solong

A small top-down tile game played in a pygame window. You walk a
character around a walled map and pick up every coin. Once the last coin
is collected the exit door opens; step onto it to win.

The bonus edition adds animated coins and door, enemies that fire balls
along their row, and an on-screen counter for moves and coins.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Playing

Start the game with one argument, the path to a map file:

```
so-long maps/level.ber
```

or, for the bonus edition:

```
so-long-bonus maps/level.ber
```

The commands return exit status 0 when a game has been played to its
end and 1 on any error. Errors are printed to the terminal as
`ERROR: ...`:

- `map file is missing!` – not exactly one argument was given;
- `Invalid map file!` – the name does not end in `.ber`, or the file
  cannot be read;
- `Invalid map!` – the map breaks one of the rules below;
- `Could not load ... textures` – an image is missing from `assets`;
- `Failed to create window` – pygame could not open a window.

### Controls

| Action     | Keys                      |
|------------|---------------------------|
| Move up    | `W` or `Up`               |
| Move down  | `S` or `Down`             |
| Move left  | `A` or `Left`             |
| Move right | `D` or `Right`            |
| Quit       | `Esc` or close the window |

Each key press moves the player one tile. Walls block movement, and in
the bonus edition so do enemies. Every move is counted and printed to
the terminal. Walking onto the exit with all coins collected prints a
congratulation and ends the game. Ending the game any other way before
every coin is taken prints how many moves were made and how many coins
were picked up.

### Bonus edition

- Coins cycle through six animation frames and the open door through
  five.
- Every enemy (`X`) stands still and fires a ball to its left. The ball
  moves one tile every 14 frames and returns to the enemy when it hits
  a wall. A ball reaching the player's tile ends the game.
- The top of the window shows the move count and `collected / total`
  coins, the collected count in green once every coin is taken and in
  red before that.

## Images

The game loads its images from an `assets` directory in the current
working directory; run it from the directory that holds that folder.
No images are shipped with the package. The files looked for are:

- both editions: `char_right.xpm`, `char_left.xpm`, `char_up.xpm`,
  `char_down.xpm`, `tile.xpm`, `wall.xpm`;
- plain edition: `coin.xpm`, `exit.xpm`;
- bonus edition: `enemy.xpm`, `ball.xpm`, `an_coin/coin0.xpm` to
  `an_coin/coin5.xpm`, `an_door/0.xpm` to `an_door/4.xpm`.

Images are loaded with `pygame.image.load`, so the installed pygame must
be able to read the XPM format.

## Map files

A map is a plain text file whose name ends in `.ber` (with a name before
the extension). Each line is one row of tiles:

| Character | Meaning                    |
|-----------|----------------------------|
| `1`       | wall                       |
| `0`       | empty floor                |
| `P`       | player start               |
| `C`       | coin                       |
| `E`       | exit                       |
| `X`       | enemy (bonus edition only) |

A map is accepted only when:

- it holds only the characters above (a carriage return counts as an
  unknown character);
- every row has the same length;
- there is exactly one `P`, exactly one `E` and at least one `C`;
- the outer border is made entirely of walls;
- every coin and the exit can be reached from the start;
- it is at most 44 rows high and 80 columns wide;
- in the bonus edition, it holds at most 5 enemies.

Example:

```
1111111111
1P0C00C001
1011110101
1C000000E1
1111111111
```

## Using the modules

The game logic runs without a window, which makes it easy to script or
test:

```python
import io
from solong.cli import load_game
from solong.game import GameEnded, Key

out = io.StringIO()
game = load_game("maps/level.ber", bonus=False, out=out)
game.press(Key.RIGHT)
try:
    game.tick()
except GameEnded as ended:
    print(ended.moves, ended.collected, ended.total, ended.all_collected)
print(game.player.moves, game.coins_collected, game.total_coins)
```

`load_game` raises `solong.mapfile.MapFileError` for a file that is not
a readable `.ber` file and `solong.validate.InvalidMapError` for a map
that breaks the rules. `Game.tick()` advances one frame; any end of the
game, won, lost or quit, raises `GameEnded`. Terminal messages go to
the `out` stream, or to standard output when it is `None`.

The modules:

- `solong.mapfile` – `read_map`, `read_lines`, `map_dimensions`,
  `has_map_extension`.
- `solong.validate` – the map rules: `validate_map` and the single
  checks `check_chars`, `check_rectangle`, `check_components`,
  `check_closed`, `check_dims`, `flood_fill`.
- `solong.enemies` – `Enemy`, `find_enemies` and the `FrameCounter`
  used for the animations.
- `solong.game` – `Game`, `Player`, `Direction`, `Key`, `GameEnded`.
- `solong.render` – `Assets.load`, `Renderer.draw`, `key_for` and
  `run`, which opens the window and plays a game until it ends.
- `solong.console` – the coloured messages printed to the terminal.
- `solong.cli` – `load_game` and the `so-long` and `so-long-bonus`
  commands.

## What it does not do

The package contains no maps and no images: both must be supplied.
There is no level selection, saving, high-score table or map editor;
each command plays one map once and exits.