# hexbounce/shape.py
# 회전하는 정육각형 용기의 기하 계산 (꼭짓점, 변, 점-선분 거리, 내부 판정)

from __future__ import annotations

import math
import typing
from dataclasses import dataclass
import numpy

from hexbounce.vector import Vector, Vector2D

HexagonVertex = Vector2D

SIDES = 6


@dataclass(frozen=True)
class LineSegment:
    """육각형의 한 변"""
    start: Vector2D
    end: Vector2D

    @property
    def midpoint(self) -> Vector2D:
        return Vector.multiply(Vector.add(self.start, self.end), 0.5)

    @property
    def direction(self) -> Vector2D:
        return Vector.subtract(self.end, self.start)

    def distance_to(self, point: Vector2D) -> float:
        return point_to_segment_distance(point, self.start, self.end)


def generate_vertices(center_x: float, center_y: float, radius: float, rotation: float = 0.0) -> typing.List[HexagonVertex]:
    """정육각형 꼭짓점 6개 생성 (각도 i*π/3 + rotation, i 오름차순)

    Args:
        center_x (float): 중심 x 좌표
        center_y (float): 중심 y 좌표
        radius (float): 중심에서 꼭짓점까지 거리
        rotation (float, optional): 회전각 [rad]. Defaults to 0.0.

    Returns:
        List[HexagonVertex]: 꼭짓점 리스트 (순서 고정)
    """
    angles = numpy.arange(SIDES, dtype=float) * (math.pi / 3.0) + float(rotation)
    xs = center_x + radius * numpy.cos(angles)
    ys = center_y + radius * numpy.sin(angles)
    return [Vector2D(float(x), float(y)) for x, y in zip(xs, ys)]


def get_edges(vertices: typing.Sequence[HexagonVertex]) -> typing.List[LineSegment]:
    """꼭짓점 i -> (i+1) mod n 을 잇는 변 리스트 (마지막 변은 처음 꼭짓점으로 닫힘)"""
    n = len(vertices)
    return [LineSegment(vertices[i], vertices[(i + 1) % n]) for i in range(n)]


def point_to_segment_distance(point: Vector2D, seg_start: Vector2D, seg_end: Vector2D) -> float:
    """점에서 선분까지의 최단 거리

    직선 위로 투영한 매개변수를 [0, 1]로 잘라 선분 안의 최근접점을 구함.
    길이 0인 선분은 seg_start 까지의 거리를 반환.
    """
    ax = point.x - seg_start.x
    ay = point.y - seg_start.y
    cx = seg_end.x - seg_start.x
    cy = seg_end.y - seg_start.y

    len_sq = cx*cx + cy*cy
    if len_sq == 0.0:
        return math.hypot(ax, ay)

    t = (ax*cx + ay*cy) / len_sq
    t = max(0.0, min(1.0, t))
    dx = point.x - (seg_start.x + t*cx)
    dy = point.y - (seg_start.y + t*cy)
    return math.hypot(dx, dy)


def is_point_inside(point: Vector2D, center: Vector2D, radius: float, rotation: float = 0.0) -> bool:
    """레이 캐스팅(짝홀 규칙)으로 점이 육각형 내부인지 판정"""
    vertices = generate_vertices(center.x, center.y, radius, rotation)
    inside = False
    j = len(vertices) - 1
    for i in range(len(vertices)):
        xi, yi = vertices[i].x, vertices[i].y
        xj, yj = vertices[j].x, vertices[j].y
        if (yi > point.y) != (yj > point.y):
            x_cross = (xj - xi) * (point.y - yi) / (yj - yi) + xi
            if point.x < x_cross:
                inside = not inside
        j = i
    return inside


@dataclass(frozen=True)
class Hexagon:
    """회전하는 정육각형 용기. 기하 정보는 매번 다시 계산함 (캐시하지 않음)"""
    center: Vector2D
    radius: float
    rotation: float = 0.0

    def __post_init__(self) -> None:
        if not (self.radius > 0.0):
            raise ValueError("hexagon radius must be > 0")

    def vertices(self) -> typing.List[HexagonVertex]:
        return generate_vertices(self.center.x, self.center.y, self.radius, self.rotation)

    def edges(self) -> typing.List[LineSegment]:
        return get_edges(self.vertices())

    def contains(self, point: Vector2D) -> bool:
        return is_point_inside(point, self.center, self.radius, self.rotation)

    def apothem(self) -> float:
        """중심에서 변까지의 거리"""
        return self.radius * math.cos(math.pi / SIDES)
