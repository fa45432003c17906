"""Snake game state and rules, independent of any user interface."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Protocol

DEFAULT_DELAY = 150
DOT_SIZE = 10
MIN_WIDGET_SIZE = (300, 300)
SNAKE_MAX_SIZE = 100
SNAKE_MIN_SIZE = 3
START_COORD = 50
SELF_COLLISION_START = 5


class Direction(Enum):
    """A direction the snake's head can travel in."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    def opposite(self) -> "Direction":
        """Return the direction pointing the other way."""
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


@dataclass(frozen=True)
class Point:
    """A position on the playing field, in pixels."""

    x: int
    y: int

    def moved(self, direction: Direction, step: int) -> "Point":
        """Return this point shifted by ``step`` in ``direction``."""
        if direction is Direction.LEFT:
            return Point(self.x - step, self.y)
        if direction is Direction.RIGHT:
            return Point(self.x + step, self.y)
        if direction is Direction.UP:
            return Point(self.x, self.y - step)
        return Point(self.x, self.y + step)


class _RandRange(Protocol):
    def randrange(self, stop: int) -> int: ...


Callback = Optional[Callable[[int], None]]


class SnakeGame:
    """The snake, the apple and the rules that move them.

    ``timer_active`` tells the caller whether ticks should keep being
    scheduled every ``DEFAULT_DELAY`` milliseconds.
    """

    delay = DEFAULT_DELAY

    def __init__(
        self,
        width: int = MIN_WIDGET_SIZE[0],
        height: int = MIN_WIDGET_SIZE[1],
        rng: Optional[_RandRange] = None,
        on_apple_count: Callback = None,
        on_snake_size: Callback = None,
    ) -> None:
        self.width = width
        self.height = height
        self._rng = rng if rng is not None else random.Random()
        self._on_apple_count = on_apple_count
        self._on_snake_size = on_snake_size

        self.snake: list[Point] = []
        self.apple = Point(0, 0)
        self.direction = Direction.RIGHT
        self.apple_counter = 0
        self.started = False
        self.paused = False
        self.game_over = False
        self.timer_active = False

    def start(self) -> None:
        """Start a new game, or resume a paused one."""
        self.game_over = False
        if self.paused:
            self.paused = False
            return
        if self.started:
            return
        self.started = True
        self.apple_counter = 0
        self._init_snake()
        self.place_apple()
        self.timer_active = True

    def pause(self) -> None:
        """Freeze the snake until the game is started again."""
        self.paused = True

    def stop(self) -> None:
        """End the current game."""
        self.started = False
        self.timer_active = False

    def turn(self, direction: Direction) -> None:
        """Change direction unless that would reverse the snake."""
        if direction is not self.direction.opposite():
            self.direction = direction

    def tick(self) -> None:
        """Advance the game by one step."""
        if not self.game_over and not self.paused:
            self._eat_apple()
            self._check_collisions()
            self._move()
        if self.game_over:
            self.started = False

    def place_apple(self) -> None:
        """Put the apple on a free grid cell and count it."""
        occupied = set(self.snake)
        while True:
            candidate = Point(
                self._rng.randrange(self.width // DOT_SIZE) * DOT_SIZE,
                self._rng.randrange(self.height // DOT_SIZE) * DOT_SIZE,
            )
            if candidate not in occupied:
                break
        self.apple = candidate
        self.apple_counter += 1
        self._notify(self._on_apple_count, self.apple_counter)

    @property
    def head(self) -> Point:
        return self.snake[0]

    def _init_snake(self) -> None:
        self.direction = Direction.RIGHT
        self.snake = [
            Point(START_COORD - i * DOT_SIZE, START_COORD)
            for i in range(SNAKE_MIN_SIZE)
        ]
        self._notify(self._on_snake_size, len(self.snake))

    def _eat_apple(self) -> None:
        if self.head == self.apple and len(self.snake) < SNAKE_MAX_SIZE:
            self.snake.append(self.snake[-1])
            self._notify(self._on_snake_size, len(self.snake))
            self.place_apple()

    def _move(self) -> None:
        new_head = self.head.moved(self.direction, DOT_SIZE)
        self.snake = [new_head, *self.snake[:-1]]

    def _check_collisions(self) -> None:
        head = self.head
        if head in self.snake[SELF_COLLISION_START:]:
            self.game_over = True
        if not (0 <= head.x < self.width and 0 <= head.y < self.height):
            self.game_over = True
        if self.game_over:
            self.timer_active = False

    @staticmethod
    def _notify(callback: Callback, value: int) -> None:
        if callback is not None:
            callback(value)