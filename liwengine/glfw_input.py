"""Keyboard and mouse devices fed by GLFW-style callbacks."""

from __future__ import annotations

from .keyboard import Keyboard, KeyboardAction
from .keycodes import KeyboardKey, MouseButton
from .mouse import Mouse, MouseButtonAction

__all__ = [
    "GLFW_KEY_MAP",
    "GLFW_KEY_ACTION_MAP",
    "GLFW_MOUSE_BUTTON_MAP",
    "GLFW_MOUSE_ACTION_MAP",
    "to_key_code",
    "to_key_action",
    "to_mouse_code",
    "to_mouse_button_action",
    "GlfwKeyboard",
    "GlfwMouse",
]

GLFW_RELEASE = 0
GLFW_PRESS = 1
GLFW_REPEAT = 2

K = KeyboardKey


def _build_key_map() -> dict[int, KeyboardKey]:
    mapping: dict[int, KeyboardKey] = {
        -1: K.UNKNOWN,
        32: K.SPACE,
        39: K.APOSTROPHE,
        44: K.COMMA,
        45: K.MINUS,
        46: K.PERIOD,
        47: K.SLASH,
        59: K.SEMICOLON,
        61: K.PLUS,
        91: K.LBRACKET,
        92: K.BACKSLASH,
        93: K.RBRACKET,
        96: K.GRAVE_ACCENT,
        161: K.UNKNOWN,
        162: K.UNKNOWN,
        256: K.ESCAPE,
        257: K.RETURN,
        258: K.TAB,
        259: K.BACK,
        260: K.INSERT,
        261: K.DELETE,
        262: K.RIGHT,
        263: K.LEFT,
        264: K.DOWN,
        265: K.UP,
        266: K.PRIOR,
        267: K.NEXT,
        268: K.HOME,
        269: K.END,
        280: K.CAPITAL,
        281: K.SCROLL,
        282: K.NUMLOCK,
        283: K.SNAPSHOT,
        284: K.PAUSE,
        314: K.UNKNOWN,  # F25
        330: K.DECIMAL,
        331: K.DIVIDE,
        332: K.MULTIPLY,
        333: K.SUBTRACT,
        334: K.ADD,
        335: K.SEPARATOR,
        336: K.UNKNOWN,  # keypad equal
        340: K.LSHIFT,
        341: K.LCONTROL,
        342: K.LMENU,
        343: K.UNKNOWN,
        344: K.RSHIFT,
        345: K.RCONTROL,
        346: K.RMENU,
        347: K.UNKNOWN,
        348: K.MENU,  # also GLFW_KEY_LAST; the menu key takes precedence
    }
    mapping.update({48 + n: K[f"NUM_{n}"] for n in range(10)})
    mapping.update({ord(c): K[c] for c in "ABCDEFGHIJKLMNOPQRSTUVWXYZ"})
    mapping.update({290 + n: K[f"F{n + 1}"] for n in range(24)})
    mapping.update({320 + n: K[f"NUMPAD{n}"] for n in range(10)})
    return mapping


GLFW_KEY_MAP: dict[int, KeyboardKey] = _build_key_map()

GLFW_KEY_ACTION_MAP: dict[int, KeyboardAction] = {
    GLFW_REPEAT: KeyboardAction.UNKNOWN,
    GLFW_PRESS: KeyboardAction.PRESS,
    GLFW_RELEASE: KeyboardAction.RELEASE,
}

GLFW_MOUSE_BUTTON_MAP: dict[int, MouseButton] = {
    n: MouseButton(n) for n in range(MouseButton.MAX)
}

GLFW_MOUSE_ACTION_MAP: dict[int, MouseButtonAction] = {
    GLFW_REPEAT: MouseButtonAction.UNKNOWN,
    GLFW_PRESS: MouseButtonAction.PRESS,
    GLFW_RELEASE: MouseButtonAction.RELEASE,
}


def _lookup(table: dict, code: int, what: str):
    try:
        return table[code]
    except KeyError:
        raise KeyError(f"unmapped GLFW {what}: {code}") from None


def to_key_code(glfw_key: int) -> KeyboardKey:
    """Translate a GLFW key code; raises KeyError for unmapped codes."""
    return _lookup(GLFW_KEY_MAP, glfw_key, "key")


def to_key_action(glfw_action: int) -> KeyboardAction:
    """Translate a GLFW key action; repeats become UNKNOWN."""
    return _lookup(GLFW_KEY_ACTION_MAP, glfw_action, "key action")


def to_mouse_code(glfw_button: int) -> MouseButton:
    """Translate a GLFW mouse button code; raises KeyError if unmapped."""
    return _lookup(GLFW_MOUSE_BUTTON_MAP, glfw_button, "mouse button")


def to_mouse_button_action(glfw_action: int) -> MouseButtonAction:
    """Translate a GLFW mouse button action; repeats become UNKNOWN."""
    return _lookup(GLFW_MOUSE_ACTION_MAP, glfw_action, "mouse action")


class GlfwKeyboard(Keyboard):
    """A keyboard driven by GLFW key callbacks; awake from the start."""

    def __init__(self) -> None:
        super().__init__()
        self.wake()

    def key_callback(self, key: int, scancode: int, action: int, mods: int) -> None:
        """Handle a GLFW key event."""
        self.on_update_key(to_key_code(key), to_key_action(action))


class GlfwMouse(Mouse):
    """A mouse driven by GLFW button, cursor and scroll callbacks."""

    def __init__(self) -> None:
        super().__init__()
        self.wake()

    def button_callback(self, button: int, action: int, mods: int) -> None:
        """Handle a GLFW mouse button event."""
        self.on_update_button(to_mouse_code(button), to_mouse_button_action(action))

    def cursor_callback(self, xpos: float, ypos: float) -> None:
        """Handle a GLFW cursor position event."""
        self.on_update_movement(xpos, ypos)

    def scroll_callback(self, xoffset: float, yoffset: float) -> None:
        """Handle a GLFW scroll event."""
        self.on_update_scroll(xoffset, yoffset)