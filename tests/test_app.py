import pytest

from snakegame.app import key_to_direction, status_text
from snakegame.game import Direction, SnakeGame


@pytest.mark.parametrize(
    "keysym, direction",
    [
        ("Left", Direction.LEFT),
        ("Right", Direction.RIGHT),
        ("Up", Direction.UP),
        ("Down", Direction.DOWN),
    ],
)
def test_arrow_keys_map_to_directions(keysym, direction):
    assert key_to_direction(keysym) is direction


@pytest.mark.parametrize("keysym", ["a", "space", "Return", "left", ""])
def test_other_keys_map_to_none(keysym):
    assert key_to_direction(keysym) is None


def test_key_mapping_covers_every_direction():
    mapped = {key_to_direction(k) for k in ("Left", "Right", "Up", "Down")}
    assert mapped == set(Direction)


def test_status_text_initial():
    assert status_text(0, 0) == "Apple number: 0 | Snake size: 0"


def test_status_text_tracks_game_callbacks():
    state = {"apples": 0, "size": 0}
    game = SnakeGame(
        300,
        300,
        on_apple_count=lambda n: state.update(apples=n),
        on_snake_size=lambda s: state.update(size=s),
    )
    game.start()
    text = status_text(state["apples"], state["size"])
    assert text.startswith("Apple number: 1")
    assert text.endswith(f"Snake size: {len(game.snake)}")


def test_keys_drive_game_turns():
    game = SnakeGame(300, 300)
    game.start()
    game.turn(key_to_direction("Left"))
    assert game.direction is Direction.RIGHT
    game.turn(key_to_direction("Down"))
    assert game.direction is Direction.DOWN