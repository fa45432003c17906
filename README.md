# snakegame

The classic Snake game. You steer a snake around a black field and eat apples. Each apple adds one segment to the snake. The game ends when the snake hits the edge of the field or runs into its own body.

## Running

The window uses Tk through Python's `tkinter` module. Install the package and start the game:

```
pip install .
snakegame
```

You can also start it with `python -m snakegame.app`.

The window has three menus:

- **File**: **Exit**.
- **Game**: **Start**, **Pause**, **Stop**.
- **Help**: **About Tk ...** shows the Tk version. **About ...** explains the rules.

A toolbar has the buttons **Start**, **Pause**, **Stop**, **Exit** and **About**:

- **Start** begins a new game. If the game is paused, Start resumes it.
- **Pause** holds the snake where it is.
- **Stop** ends the current game.
- **Exit** closes the window.

Steer with the arrow keys. The snake cannot turn straight back on itself. The status bar reads `Apple number: N | Snake size: S`. It counts every apple placed on the field, including the first one, and shows how long the snake is. The snake can grow to at most 100 segments. When the game ends, the field shows "Game over!!!". Press Start to play again.

The playing field is at least 300 × 300 pixels and follows the window when you resize it. The snake and the apple are drawn from `head.png`, `body.png` and `apple.png` in a `../res` directory, relative to the directory you start the game from. If an image cannot be loaded, that piece is drawn as a coloured dot instead: yellow for the head, green for the body and red for the apple.

## Using the engine

The game logic is in `snakegame.game` and does not depend on any GUI toolkit:

```python
import random
from snakegame.game import Direction, SnakeGame

game = SnakeGame(
    300, 300,
    rng=random.Random(1),
    on_apple_count=lambda n: print("apples:", n),
    on_snake_size=lambda s: print("size:", s),
)
game.start()
game.turn(Direction.DOWN)
game.tick()
print(game.head, game.apple, game.game_over)
```

- `SnakeGame.start()` begins a game or resumes a paused one. `pause()` and `stop()` pause and end it.
- `SnakeGame.turn(direction)` changes direction unless the new direction points straight back.
- `SnakeGame.tick()` advances the game by one step.
- `SnakeGame.place_apple()` puts the apple on a free grid cell and increments `apple_counter`.
- The state is held in `snake` (a list of `Point`, head first), `head`, `apple`, `direction`, `apple_counter`, `started`, `paused` and `game_over`.
- `timer_active` tells the caller whether to keep calling `tick()`. The Tk front end in `snakegame.app` calls it on a 150 ms timer.

`Point.moved(direction, step)` returns a shifted point. `Direction.opposite()` returns the reverse direction.

## What it does not do

The game keeps no high scores and saves nothing between runs. It has no sound, no difficulty levels and no way to change the speed from the window.

## Tests

```
pip install .[test]
pytest
```