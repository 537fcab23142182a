"""Input devices and the frame-based keyboard state tracker."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum

from .keycodes import KeyboardKey

__all__ = ["Device", "InputDevice", "KeyboardAction", "Keyboard"]


class Device:
    """A device that can be put to sleep and woken up again."""

    def __init__(self) -> None:
        self.is_awake = False

    def sleep(self) -> None:
        """Stop the device from processing events."""
        self.is_awake = False

    def wake(self) -> None:
        """Let the device process events."""
        self.is_awake = True


class InputDevice(Device, ABC):
    """A device whose state is advanced once per frame."""

    @abstractmethod
    def update_frame(self, dt: float) -> None:
        """Advance the device state by one frame of ``dt`` seconds."""


class KeyboardAction(IntEnum):
    """What happened to a key in one input event."""

    UNKNOWN = -1
    PRESS = 0
    RELEASE = 1


class Keyboard(InputDevice):
    """Tracks which keys are down, held over frames, or just released.

    The keyboard starts asleep and ignores events until woken.
    """

    def __init__(self) -> None:
        super().__init__()
        self._down: set[int] = set()
        self._held: set[int] = set()
        self._released: set[int] = set()

    def key_down(self, key: int) -> bool:
        """Whether the key is currently pressed."""
        return int(key) in self._down

    def key_held(self, key: int) -> bool:
        """Whether the key is down and was already down last frame."""
        return self.key_down(key) and int(key) in self._held

    def key_triggered(self, key: int) -> bool:
        """Whether this is the first frame the key is down."""
        return self.key_down(key) and not self.key_held(key)

    def key_pressed(self, key: int) -> bool:
        """Same as :meth:`key_triggered`."""
        return self.key_triggered(key)

    def key_released(self, key: int) -> bool:
        """Whether the key was released during this frame."""
        return int(key) in self._released

    def update_frame(self, dt: float) -> None:
        self.update_holds()
        self.update_releases()

    def update_holds(self) -> None:
        """Record the keys down now as held for the next frame."""
        self._held = set(self._down)

    def update_releases(self) -> None:
        """Forget the releases seen this frame."""
        self._released.clear()

    def on_update_key(self, key: int, action: KeyboardAction) -> None:
        """Apply one key event; ignored while asleep or out of range."""
        if not self.is_awake:
            return
        code = int(key)
        if code < 0 or code > KeyboardKey.MAX:
            return
        if action == KeyboardAction.PRESS:
            self._down.add(code)
        elif action == KeyboardAction.RELEASE:
            self._held.discard(code)
            self._down.discard(code)
            self._released.add(code)

    def sleep(self) -> None:
        super().sleep()
        self._down.clear()
        self._held.clear()
        self._released.clear()