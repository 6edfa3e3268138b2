from unittest import mock

import pygame
import pytest

from gridsnatch.components import GameState
from gridsnatch.controls import Arrow, KeyState, handle_event, process_input


def _down(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def _up(key):
    return pygame.event.Event(pygame.KEYUP, key=key)


def test_new_state_has_no_flags_set():
    keys = KeyState()
    assert not any(keys[arrow] for arrow in Arrow)


def test_set_and_get_flag():
    keys = KeyState()
    keys[Arrow.LEFT] = True
    assert keys[Arrow.LEFT] is True
    assert keys[Arrow.RIGHT] is False


def test_unknown_flag_raises():
    keys = KeyState()
    with pytest.raises(ValueError) as excinfo:
        keys[99]
    assert "99" in str(excinfo.value)
    assert not any(keys[arrow] for arrow in Arrow)


@pytest.mark.parametrize(
    "key,arrow",
    [
        (pygame.K_w, Arrow.TOP),
        (pygame.K_d, Arrow.RIGHT),
        (pygame.K_s, Arrow.BOTTOM),
        (pygame.K_a, Arrow.LEFT),
    ],
)
def test_movement_key_sets_direction_and_score(key, arrow):
    keys = KeyState()
    assert keys.key_down(key) is None
    assert keys[arrow] is True
    assert keys[Arrow.SCORE] is True


def test_movement_ignored_while_clicker_held():
    keys = KeyState()
    keys[Arrow.CLICKER_TOP] = True
    keys.key_down(pygame.K_w)
    assert keys[Arrow.TOP] is False
    assert keys[Arrow.SCORE] is False


def test_key_up_clears_direction_and_clicker():
    keys = KeyState()
    keys.key_down(pygame.K_d)
    keys[Arrow.CLICKER_RIGHT] = True
    keys.key_up(pygame.K_d)
    assert keys[Arrow.RIGHT] is False
    assert keys[Arrow.CLICKER_RIGHT] is False


def test_key_up_leaves_score_flag():
    keys = KeyState()
    keys.key_down(pygame.K_s)
    keys.key_up(pygame.K_s)
    assert keys[Arrow.SCORE] is True


@pytest.mark.parametrize(
    "key,expected",
    [
        (pygame.K_ESCAPE, GameState.CLOSE),
        (pygame.K_1, GameState.RESUME),
        (pygame.K_2, GameState.PAUSE),
        (pygame.K_3, GameState.RESTART),
        (pygame.K_4, GameState.CLOSE),
    ],
)
def test_state_keys(key, expected):
    keys = KeyState()
    assert handle_event(_down(key), keys, GameState.RUN) == expected


def test_quit_event_closes():
    event = pygame.event.Event(pygame.QUIT)
    assert handle_event(event, KeyState(), GameState.PAUSE) == GameState.CLOSE


def test_movement_key_keeps_state():
    keys = KeyState()
    assert handle_event(_down(pygame.K_a), keys, GameState.PAUSE) == GameState.PAUSE
    assert keys[Arrow.LEFT] is True


def test_key_up_event_keeps_state():
    keys = KeyState()
    keys[Arrow.TOP] = True
    assert handle_event(_up(pygame.K_w), keys, GameState.RUN) == GameState.RUN
    assert keys[Arrow.TOP] is False


def test_other_event_keeps_state():
    event = pygame.event.Event(pygame.MOUSEMOTION, pos=(0, 0))
    assert handle_event(event, KeyState(), GameState.RESTART) == GameState.RESTART


def test_process_input_polls_one_event():
    keys = KeyState()
    with mock.patch("pygame.event.poll", return_value=_down(pygame.K_w)) as poll:
        result = process_input(keys, GameState.RUN)
    assert poll.call_count == 1
    assert result == GameState.RUN
    assert keys[Arrow.TOP] is True


def test_process_input_quit():
    with mock.patch("pygame.event.poll", return_value=pygame.event.Event(pygame.QUIT)):
        assert process_input(KeyState(), GameState.RUN) == GameState.CLOSE