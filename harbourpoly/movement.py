"""Movement and positioned, clickable board entities."""

from __future__ import annotations

import math

Vec2 = tuple[float, float]


class MovementComponent:
    """Velocity driven by a direction and a maximum speed."""

    def __init__(self, max_velocity: float) -> None:
        self.max_velocity = float(max_velocity)
        self.velocity: Vec2 = (0.0, 0.0)

    def move(self, dir_x: float, dir_y: float) -> None:
        """Set the velocity to the maximum speed scaled by the direction."""
        self.velocity = (self.max_velocity * dir_x, self.max_velocity * dir_y)

    def interpolate(self, point_a: Vec2, point_b: Vec2, factor: float) -> Vec2:
        """Return the point at ``factor`` (clamped to 0..1) between two points."""
        factor = min(max(factor, 0.0), 1.0)
        ax, ay = point_a
        bx, by = point_b
        return (ax + (bx - ax) * factor, ay + (by - ay) * factor)


class Entity:
    """A rectangular, rotatable object on the board that can be clicked."""

    def __init__(
        self,
        position: Vec2 = (0.0, 0.0),
        size: Vec2 = (0.0, 0.0),
        scale: Vec2 = (1.0, 1.0),
        rotation: float = 0.0,
        max_velocity: float | None = None,
    ) -> None:
        self.position: Vec2 = (float(position[0]), float(position[1]))
        self.size: Vec2 = (float(size[0]), float(size[1]))
        self.default_scale: Vec2 = (float(scale[0]), float(scale[1]))
        self.scale: Vec2 = self.default_scale
        self.rotation = float(rotation)
        self.movement = (
            MovementComponent(max_velocity) if max_velocity is not None else None
        )
        self.pressed = False

    def _bounds(self) -> tuple[float, float, float, float]:
        width = self.size[0] * self.scale[0]
        height = self.size[1] * self.scale[1]
        angle = math.radians(self.rotation)
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        px, py = self.position
        corners = [
            (px + x * cos_a - y * sin_a, py + x * sin_a + y * cos_a)
            for x, y in ((0.0, 0.0), (width, 0.0), (0.0, height), (width, height))
        ]
        xs = [c[0] for c in corners]
        ys = [c[1] for c in corners]
        return min(xs), min(ys), max(xs), max(ys)

    def contains(self, point: Vec2) -> bool:
        """Whether ``point`` lies inside the entity's bounding box."""
        left, top, right, bottom = self._bounds()
        x, y = point
        return left <= x < right and top <= y < bottom

    def set_default_scale(self) -> None:
        """Restore the scale the entity was created with."""
        self.scale = self.default_scale

    def move(self, dt: float, dir_x: float, dir_y: float) -> None:
        """Move along a direction for ``dt`` seconds, if the entity can move."""
        if self.movement is None:
            return
        self.movement.move(dir_x, dir_y)
        vx, vy = self.movement.velocity
        self.position = (self.position[0] + vx * dt, self.position[1] + vy * dt)

    def move_between(self, point_a: Vec2, point_b: Vec2, factor: float) -> None:
        """Place the entity at ``factor`` of the way between two points."""
        if self.movement is None:
            return
        self.position = self.movement.interpolate(point_a, point_b, factor)

    def update(self, dt: float, mouse_pos: Vec2, mouse_pressed: bool) -> None:
        """Mark the entity pressed when the mouse button is down over it."""
        self.pressed = bool(mouse_pressed) and self.contains(mouse_pos)