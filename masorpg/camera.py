"""A 2D camera that follows a target and maps world coordinates to the screen."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rect:
    """An integer rectangle: position and size."""

    x: int
    y: int
    w: int
    h: int


def _halve(value: int) -> int:
    """Integer halving that truncates toward zero."""
    return value // 2 if value >= 0 else -((-value) // 2)


class Camera2D:
    """A viewport of screen size positioned somewhere in the world."""

    def __init__(
        self,
        screen_width: int,
        screen_height: int,
        map_width: int = 0,
        map_height: int = 0,
    ) -> None:
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.map_width = map_width
        self.map_height = map_height
        self.x = 0
        self.y = 0

    def follow(self, target: Rect) -> None:
        """Centre the camera on the target."""
        self.x = target.x + _halve(target.w) - _halve(self.screen_width)
        self.y = target.y + _halve(target.h) - _halve(self.screen_height)

    def world_to_screen(self, world_rect: Rect) -> Rect:
        """Translate a world rectangle into screen coordinates."""
        return Rect(world_rect.x - self.x, world_rect.y - self.y, world_rect.w, world_rect.h)

    def set_position(self, x: int, y: int) -> None:
        """Place the camera's top-left corner at the given world position."""
        self.x = x
        self.y = y

    def clamp_position(self, map_width: int, map_height: int) -> None:
        """Keep the camera inside a map of the given size."""
        if self.x < 0:
            self.x = 0
        if self.y < 0:
            self.y = 0
        if self.x + self.screen_width > map_width:
            self.x = map_width - self.screen_width
        if self.y + self.screen_height > map_height:
            self.y = map_height - self.screen_height

    def view(self) -> Rect:
        """The world area the camera currently shows."""
        return Rect(self.x, self.y, self.screen_width, self.screen_height)