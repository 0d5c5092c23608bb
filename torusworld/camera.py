"""Mouse-driven cameras: a free orbit camera and a car-following camera."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

__all__ = ["Camera", "OrbitCamera", "FollowCamera"]

_PITCH_LIMIT = math.pi / 2.0 - 0.01
_UP = (0.0, 1.0, 0.0)


def _vec(values: Sequence[float] = (0.0, 0.0, 0.0)) -> np.ndarray:
    return np.array(values, dtype=float)


@dataclass
class Camera:
    """A perspective camera: where it is, what it looks at, which way is up."""

    position: np.ndarray = field(default_factory=_vec)
    target: np.ndarray = field(default_factory=_vec)
    up: np.ndarray = field(default_factory=lambda: _vec(_UP))
    fovy: float = 45.0

    def __post_init__(self) -> None:
        self.position = _vec(self.position)
        self.target = _vec(self.target)
        self.up = _vec(self.up)


def _rotate(yaw: float, pitch: float, mouse_delta: Sequence[float]) -> tuple[float, float]:
    dx, dy = mouse_delta
    yaw -= dx * 0.01
    pitch += dy * 0.01
    pitch = max(-_PITCH_LIMIT, min(_PITCH_LIMIT, pitch))
    return yaw, pitch


def _pan(yaw: float, distance: float, mouse_delta: Sequence[float]) -> np.ndarray:
    dx, dy = mouse_delta
    speed = distance * 0.001
    right = np.array([math.cos(yaw), 0.0, -math.sin(yaw)])
    return right * (-dx * speed) + _vec(_UP) * (dy * speed)


@dataclass
class OrbitCamera:
    """Orbits a target point: wheel zooms, rotate drags turn, pan drags move."""

    yaw: float = math.pi / 4.0
    pitch: float = math.pi / 4.0
    distance: float = 2000.0
    target: np.ndarray = field(default_factory=_vec)
    min_distance: float = 10.0

    def update(
        self,
        camera: Camera,
        wheel: float = 0.0,
        rotating: bool = False,
        panning: bool = False,
        mouse_delta: Sequence[float] = (0.0, 0.0),
    ) -> Camera:
        """Apply one frame of input and place ``camera`` accordingly."""
        self.distance = max(self.min_distance, self.distance - wheel * 50.0)
        if rotating:
            self.yaw, self.pitch = _rotate(self.yaw, self.pitch, mouse_delta)
        if panning:
            self.target = self.target + _pan(self.yaw, self.distance, mouse_delta)

        cos_pitch = math.cos(self.pitch)
        offset = np.array([
            self.distance * cos_pitch * math.sin(self.yaw),
            self.distance * math.sin(self.pitch),
            self.distance * cos_pitch * math.cos(self.yaw),
        ])
        camera.position = self.target + offset
        camera.target = self.target.copy()
        camera.up = _vec(_UP)
        return camera


@dataclass
class FollowCamera:
    """Eases towards a car and looks just above it, with a pannable deviation."""

    yaw: float = math.pi / 4.0
    pitch: float = math.pi / 4.0
    distance: float = 0.0
    deviation: np.ndarray = field(default_factory=_vec)
    car_position: np.ndarray = field(default_factory=_vec)
    lerp: float = 0.1

    def set_car_position(self, position: Sequence[float]) -> None:
        """Record where the followed car is now."""
        self.car_position = _vec(position[:3])

    def update(
        self,
        camera: Camera,
        reset: bool = False,
        rotating: bool = False,
        panning: bool = False,
        mouse_delta: Sequence[float] = (0.0, 0.0),
    ) -> Camera:
        """Apply one frame of input and move ``camera`` towards the car."""
        if reset:
            self.deviation = _vec()
        if rotating:
            self.yaw, self.pitch = _rotate(self.yaw, self.pitch, mouse_delta)
        if panning:
            self.deviation = self.deviation + _pan(self.yaw, self.distance, mouse_delta)

        camera.position = camera.position - (camera.position - self.car_position) * self.lerp
        anchor = self.car_position + _vec(_UP)
        self.distance = float(np.linalg.norm(camera.position - anchor))
        camera.target = anchor - self.deviation
        camera.up = _vec(_UP)
        return camera