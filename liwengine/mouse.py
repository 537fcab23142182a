"""Frame-based mouse state tracker with double clicks, movement and wheel."""

from __future__ import annotations

from enum import IntEnum

from .keyboard import InputDevice
from .keycodes import MouseButton

__all__ = ["MouseButtonAction", "Mouse"]

_DEFAULT_SENSITIVITY = 0.07
_DEFAULT_CLICK_LIMIT = 0.2


class MouseButtonAction(IntEnum):
    """What happened to a mouse button in one input event."""

    UNKNOWN = -1
    PRESS = 0
    RELEASE = 1


class Mouse(InputDevice):
    """Tracks mouse buttons, pointer movement and wheel scrolling per frame.

    The mouse starts asleep; button and movement events are ignored until
    it is woken. Scroll events are always applied.
    """

    def __init__(self) -> None:
        super().__init__()
        self._down: set[int] = set()
        self._held: set[int] = set()
        self._released: set[int] = set()
        self._double_clicks: set[int] = set()
        self._last_click: dict[int, float] = {}

        self.absolute_position: tuple[float, float] = (0.0, 0.0)
        self.absolute_position_bounds: tuple[float, float] = (0.0, 0.0)
        self.relative_position: tuple[float, float] = (0.0, 0.0)
        self.frame_wheel: tuple[float, float] = (0.0, 0.0)

        self.sensitivity = _DEFAULT_SENSITIVITY
        self.click_limit = _DEFAULT_CLICK_LIMIT
        self._has_absolute = False

    # Queries

    def button_down(self, button: int) -> bool:
        """Whether the button is currently pressed."""
        return int(button) in self._down

    def button_held(self, button: int) -> bool:
        """Whether the button was already down at the end of last frame."""
        return int(button) in self._held

    def button_released(self, button: int) -> bool:
        """Whether the button was released during this frame."""
        return int(button) in self._released

    def button_clicked(self, button: int) -> bool:
        """Whether this is the first frame the button is down."""
        return self.button_down(button) and not self.button_held(button)

    def double_clicked(self, button: int) -> bool:
        """Whether the button is down and was double clicked this frame."""
        code = int(button)
        return code in self._down and code in self._double_clicks

    def wheel_moved(self) -> bool:
        """Whether the vertical wheel moved since the last frame."""
        return self.frame_wheel[1] != 0

    def wheel_movement(self) -> int:
        """Vertical wheel movement: positive up, negative down, 0 for none."""
        return int(self.frame_wheel[1])

    def set_sensitivity(self, amount: float) -> None:
        """Set the relative-movement sensitivity; zero means 1.0."""
        self.sensitivity = 1.0 if amount == 0.0 else amount

    # Events

    def on_update_button(self, button: int, action: MouseButtonAction) -> None:
        """Apply one button event; ignored while asleep or out of range."""
        if not self.is_awake:
            return
        code = int(button)
        if code < 0 or code >= MouseButton.MAX:
            return
        if action == MouseButtonAction.PRESS:
            self._down.add(code)
            if self._last_click.get(code, 0.0) > 0:
                self._double_clicks.add(code)
            self._last_click[code] = self.click_limit
        elif action == MouseButtonAction.RELEASE:
            self._down.discard(code)
            self._held.discard(code)
            self._released.add(code)

    def on_update_movement(self, xpos: float, ypos: float) -> None:
        """Apply a pointer position event; ignored while asleep."""
        if not self.is_awake:
            return
        prev_x, prev_y = self.absolute_position
        self.absolute_position = (float(xpos), float(ypos))
        if self._has_absolute:
            self.relative_position = (
                (self.absolute_position[0] - prev_x) * self.sensitivity,
                (self.absolute_position[1] - prev_y) * self.sensitivity,
            )
        self._has_absolute = True

    def on_update_scroll(self, xoffset: float, yoffset: float) -> None:
        """Apply a scroll event."""
        self.frame_wheel = (float(xoffset), float(yoffset))

    # Frame updates

    def update_frame(self, dt: float) -> None:
        self.update_double_click(dt)
        self._held = set(self._down)
        self._released.clear()
        self.frame_wheel = (self.frame_wheel[0], 0.0)
        self.relative_position = (0.0, 0.0)

    def update_double_click(self, dt: float) -> None:
        """Clear consumed double clicks and run down the click timers."""
        for code in self._double_clicks:
            self._last_click.pop(code, None)
        self._double_clicks.clear()
        for code, remaining in list(self._last_click.items()):
            remaining -= dt
            if remaining <= 0.0:
                del self._last_click[code]
            else:
                self._last_click[code] = remaining

    def set_absolute_position(self, x: int, y: int) -> None:
        """Force the pointer to a position in window space."""
        self.absolute_position = (float(x), float(y))

    def set_absolute_position_bounds(self, max_x: int, max_y: int) -> None:
        """Set the largest allowed pointer position."""
        self.absolute_position_bounds = (float(max_x), float(max_y))

    def sleep(self) -> None:
        super().sleep()
        self.click_limit = _DEFAULT_CLICK_LIMIT
        self._held.clear()
        self._released.clear()
        self._down.clear()