import random

from flut.worm.models import Direction, GameCell, WormCell


def test_direction_members_in_order():
    assert [Direction(d.value) for d in Direction] == [
        Direction.UP,
        Direction.RIGHT,
        Direction.DOWN,
        Direction.LEFT,
    ]


def test_game_cell_members_in_order():
    assert [GameCell(c.value) for c in GameCell] == [
        GameCell.AIR,
        GameCell.WORM,
        GameCell.WALL,
        GameCell.FOOD,
    ]


def test_random_direction_is_reproducible_with_seed():
    first = [Direction.random(random.Random(7)) for _ in range(5)]
    second = [Direction.random(random.Random(7)) for _ in range(5)]
    assert first == second


def test_random_direction_covers_all_directions():
    rng = random.Random(1)
    seen = {Direction.random(rng) for _ in range(200)}
    assert seen == set(Direction)


def test_random_direction_without_rng_is_a_direction():
    assert Direction.random() in set(Direction)


def test_worm_cell_equality_and_mutation():
    cell = WormCell(840, Direction.UP)
    assert cell == WormCell(840, Direction.UP)
    cell.direction = Direction.LEFT
    assert cell != WormCell(840, Direction.UP)
    assert cell.direction is Direction.LEFT