# hexbounce/body.py

from __future__ import annotations

import math
from dataclasses import dataclass, replace

from hexbounce import config
from hexbounce.vector import Vector, Vector2D


@dataclass(frozen=True)
class Ball:
    """
    공의 상태 스냅샷
        - 불변 값, 틱마다 이전 스냅샷으로부터 새 Ball 을 만듦
        - 반지름은 항상 양수여야 함
    """
    position: Vector2D
    velocity: Vector2D = Vector.ZERO
    radius: float = config.BALL_RADIUS

    def __post_init__(self) -> None:
        r = float(self.radius)
        if not (math.isfinite(r) and r > 0.0):
            raise ValueError("ball radius must be > 0")

    @property
    def speed(self) -> float:
        return Vector.magnitude(self.velocity)

    def with_state(self, position: Vector2D | None = None, velocity: Vector2D | None = None, radius: float | None = None) -> Ball:
        """일부 값만 바꾼 새 Ball 반환"""
        changes = {}
        if position is not None: changes["position"] = position
        if velocity is not None: changes["velocity"] = velocity
        if radius is not None: changes["radius"] = float(radius)
        return replace(self, **changes)


def create_ball(x: float, y: float, radius: float = config.BALL_RADIUS) -> Ball:
    """초기(리셋) 상태의 공 생성. 속도는 0"""
    return Ball(position=Vector.create(x, y), velocity=Vector.ZERO, radius=float(radius))
