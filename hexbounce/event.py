# hexbounce/event.py

from __future__ import annotations

from dataclasses import dataclass

from hexbounce.shape import LineSegment
from hexbounce.vector import Vector2D


@dataclass(frozen=True)
class CollisionResult:
    """충돌 검사 결과 (저장하지 않고 바로 소비함)"""
    has_collision: bool
    distance: float  # 가장 가까운 변까지의 거리
    wall_start: Vector2D
    wall_end: Vector2D

    @property
    def wall(self) -> LineSegment:
        return LineSegment(self.wall_start, self.wall_end)

    def penetration(self, ball_radius: float) -> float:
        """침투 깊이 (radius - distance), 충돌이 아니면 0"""
        return max(float(ball_radius) - self.distance, 0.0)
