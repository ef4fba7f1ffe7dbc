import pytest

from xonixgrid.errors import FileNotFound, GameError, InvalidInput, OutOfBounds


def test_file_not_found_message():
    err = FileNotFound("game_data.txt")
    assert str(err) == "Path game_data.txt not found"
    assert err.path == "game_data.txt"


def test_out_of_bounds_message():
    err = OutOfBounds((3, -1))
    assert str(err) == "Position (3, -1) is out of bounds"
    assert err.pos == (3, -1)


def test_invalid_input_message():
    err = InvalidInput("abc")
    assert str(err) == 'Invalid input: "abc" for game format'
    assert err.token == "abc"


@pytest.mark.parametrize(
    "err", [FileNotFound("x"), OutOfBounds((1, 2)), InvalidInput("y")]
)
def test_all_caught_as_game_error(err):
    with pytest.raises(GameError) as info:
        raise err
    assert info.value is err


def test_game_error_is_runtime_error():
    err = FileNotFound("p")
    with pytest.raises(RuntimeError) as info:
        raise err
    assert info.value is err
    assert str(info.value) == "Path p not found"
    assert info.value.path == "p"