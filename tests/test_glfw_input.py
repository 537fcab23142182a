import pytest

from liwengine.glfw_input import (
    GLFW_KEY_MAP,
    GlfwKeyboard,
    GlfwMouse,
    to_key_action,
    to_key_code,
    to_mouse_button_action,
    to_mouse_code,
)
from liwengine.keyboard import KeyboardAction
from liwengine.keycodes import KeyboardKey, MouseButton
from liwengine.mouse import MouseButtonAction


@pytest.mark.parametrize(
    "glfw_key, expected",
    [
        (65, KeyboardKey.A),
        (90, KeyboardKey.Z),
        (48, KeyboardKey.NUM_0),
        (32, KeyboardKey.SPACE),
        (61, KeyboardKey.PLUS),
        (256, KeyboardKey.ESCAPE),
        (257, KeyboardKey.RETURN),
        (290, KeyboardKey.F1),
        (313, KeyboardKey.F24),
        (320, KeyboardKey.NUMPAD0),
        (340, KeyboardKey.LSHIFT),
        (348, KeyboardKey.MENU),
        (-1, KeyboardKey.UNKNOWN),
    ],
)
def test_to_key_code(glfw_key, expected):
    assert to_key_code(glfw_key) == expected


def test_unmapped_key_raises():
    with pytest.raises(KeyError):
        to_key_code(1000)


def test_all_mapped_keys_are_keyboard_keys():
    assert len(GLFW_KEY_MAP) > 100
    for glfw_key, key in GLFW_KEY_MAP.items():
        assert to_key_code(glfw_key) is KeyboardKey(int(key))


def test_key_actions():
    assert to_key_action(1) == KeyboardAction.PRESS
    assert to_key_action(0) == KeyboardAction.RELEASE
    assert to_key_action(2) == KeyboardAction.UNKNOWN
    with pytest.raises(KeyError):
        to_key_action(7)


def test_mouse_codes():
    assert [to_mouse_code(n) for n in range(8)] == [
        MouseButton.BUTTON_1,
        MouseButton.BUTTON_2,
        MouseButton.BUTTON_3,
        MouseButton.BUTTON_4,
        MouseButton.BUTTON_5,
        MouseButton.BUTTON_6,
        MouseButton.BUTTON_7,
        MouseButton.BUTTON_8,
    ]
    with pytest.raises(KeyError):
        to_mouse_code(8)


def test_mouse_actions():
    assert to_mouse_button_action(1) == MouseButtonAction.PRESS
    assert to_mouse_button_action(0) == MouseButtonAction.RELEASE
    assert to_mouse_button_action(2) == MouseButtonAction.UNKNOWN


def test_glfw_keyboard_press_and_release():
    keyboard = GlfwKeyboard()
    assert keyboard.is_awake
    keyboard.key_callback(65, 0, 1, 0)
    assert keyboard.key_down(KeyboardKey.A)
    keyboard.key_callback(65, 0, 0, 0)
    assert not keyboard.key_down(KeyboardKey.A)
    assert keyboard.key_released(KeyboardKey.A)


def test_glfw_keyboard_ignores_repeat_and_unknown():
    keyboard = GlfwKeyboard()
    keyboard.key_callback(65, 0, 2, 0)
    assert not keyboard.key_down(KeyboardKey.A)
    keyboard.key_callback(161, 0, 1, 0)
    assert not keyboard.key_down(KeyboardKey.UNKNOWN)


def test_glfw_mouse_callbacks():
    mouse = GlfwMouse()
    assert mouse.is_awake
    mouse.button_callback(0, 1, 0)
    assert mouse.button_down(MouseButton.LEFT)
    mouse.button_callback(0, 0, 0)
    assert mouse.button_released(MouseButton.LEFT)

    mouse.cursor_callback(12.0, 34.0)
    assert mouse.absolute_position == (12.0, 34.0)

    mouse.scroll_callback(0.0, -3.0)
    assert mouse.wheel_movement() == -3
    assert mouse.wheel_moved()