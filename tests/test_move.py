from gridsnatch.components import (
    SPRITE,
    Collider,
    Player,
    Position,
    Size,
    Vector2,
)
from gridsnatch.controls import Arrow, KeyState
from gridsnatch.move import move
from gridsnatch.world import World


def _add_box(world, entity_id, x, y, *extra):
    world.add_entity(entity_id)
    position = world.add_component(Position(id=entity_id, current=Vector2(x, y)))
    world.add_component(Size(id=entity_id, vector=Vector2(SPRITE, SPRITE)))
    for component in extra:
        world.add_component(component)
    return position


def _player_world(x=2 * SPRITE, y=2 * SPRITE):
    world = World()
    position = _add_box(world, 0, x, y, Player(id=0))
    return world, position


def test_move_up_when_free():
    world, position = _player_world()
    keys = KeyState()
    keys[Arrow.TOP] = True
    move(world, keys, 0.033)
    assert position.current.y == 2 * SPRITE - SPRITE
    assert position.old.y == 2 * SPRITE
    assert position.current.x == 2 * SPRITE
    assert keys[Arrow.CLICKER_TOP] is True


def test_each_direction_moves_one_tile():
    cases = [
        (Arrow.BOTTOM, Arrow.CLICKER_BOTTOM, 0, SPRITE),
        (Arrow.RIGHT, Arrow.CLICKER_RIGHT, SPRITE, 0),
        (Arrow.LEFT, Arrow.CLICKER_LEFT, -SPRITE, 0),
    ]
    for direction, clicker, dx, dy in cases:
        world, position = _player_world()
        keys = KeyState()
        keys[direction] = True
        move(world, keys, 0.0)
        assert (position.current.x, position.current.y) == (2 * SPRITE + dx, 2 * SPRITE + dy)
        assert keys[clicker] is True


def test_press_is_consumed_once():
    world, position = _player_world()
    keys = KeyState()
    keys[Arrow.RIGHT] = True
    move(world, keys, 0.0)
    move(world, keys, 0.0)
    assert position.current.x == 2 * SPRITE + SPRITE


def test_blocked_by_collider_but_press_consumed():
    world, position = _player_world()
    _add_box(world, 1, 2 * SPRITE, SPRITE, Collider(id=1))
    keys = KeyState()
    keys[Arrow.TOP] = True
    move(world, keys, 0.0)
    assert position.current.y == 2 * SPRITE
    assert position.old.y == 0
    assert keys[Arrow.CLICKER_TOP] is True


def test_entity_without_collider_does_not_block():
    world, position = _player_world()
    _add_box(world, 1, 2 * SPRITE, SPRITE)
    keys = KeyState()
    keys[Arrow.TOP] = True
    move(world, keys, 0.0)
    assert position.current.y == SPRITE


def test_adjacent_but_not_overlapping_collider_does_not_block():
    world, position = _player_world()
    _add_box(world, 1, 2 * SPRITE, 0, Collider(id=1))
    keys = KeyState()
    keys[Arrow.TOP] = True
    move(world, keys, 0.0)
    assert position.current.y == SPRITE


def test_top_takes_priority_over_right():
    world, position = _player_world()
    keys = KeyState()
    keys[Arrow.TOP] = True
    keys[Arrow.RIGHT] = True
    move(world, keys, 0.0)
    assert position.current.x == 2 * SPRITE
    assert position.current.y == SPRITE
    assert keys[Arrow.CLICKER_RIGHT] is False


def test_no_player_leaves_everything_untouched():
    world = World()
    position = _add_box(world, 0, 2 * SPRITE, 2 * SPRITE)
    keys = KeyState()
    keys[Arrow.TOP] = True
    move(world, keys, 0.0)
    assert position.current.y == 2 * SPRITE
    assert keys[Arrow.CLICKER_TOP] is False


def test_player_without_size_is_skipped():
    world = World()
    world.add_entity(0)
    position = world.add_component(Position(id=0, current=Vector2(SPRITE, SPRITE)))
    world.add_component(Player(id=0))
    keys = KeyState()
    keys[Arrow.LEFT] = True
    move(world, keys, 0.0)
    assert position.current.x == SPRITE
    assert keys[Arrow.CLICKER_LEFT] is False