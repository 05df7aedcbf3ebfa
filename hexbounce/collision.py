# hexbounce/collision.py
# 회전 육각형 벽과 공의 충돌 감지 및 보정
from __future__ import annotations

import numpy

from hexbounce import config
from hexbounce.body import Ball
from hexbounce.event import CollisionResult
from hexbounce.shape import Hexagon, LineSegment, generate_vertices, get_edges
from hexbounce.vector import Vector, Vector2D


def check_collision(
        ball_pos: Vector2D,
        ball_radius: float,
        hex_center: Vector2D,
        hex_radius: float,
        rotation: float) -> CollisionResult:
    """공 중심에서 가장 가까운 변을 찾아 충돌 여부를 보고

    Args:
        ball_pos (Vector2D): 공 중심
        ball_radius (float): 공 반지름
        hex_center (Vector2D): 육각형 중심
        hex_radius (float): 육각형 반지름(중심-꼭짓점)
        rotation (float): 현재 회전각 [rad]

    Returns:
        CollisionResult: 최소 거리와 해당 변. 충돌이 없어도 거리와 변은 채워짐
    """
    edges = get_edges(generate_vertices(hex_center.x, hex_center.y, hex_radius, rotation))
    distances = numpy.array([e.distance_to(ball_pos) for e in edges], dtype=float)

    # argmin 은 동률일 때 먼저 나온 변을 고름
    k = int(numpy.argmin(distances))
    min_distance = float(distances[k])
    nearest = edges[k]

    return CollisionResult(
        has_collision=min_distance <= ball_radius,
        distance=min_distance,
        wall_start=nearest.start,
        wall_end=nearest.end,
    )


def wall_normal(ball_position: Vector2D, wall_start: Vector2D, wall_end: Vector2D) -> Vector2D:
    """벽에서 공 쪽(용기 내부)을 향하는 단위 법선"""
    wall = LineSegment(wall_start, wall_end)
    w = wall.direction
    n = Vector.normalize(Vector2D(-w.y, w.x))
    to_ball = Vector.subtract(ball_position, wall.midpoint)
    if Vector.dot(n, to_ball) < 0.0:
        n = -n
    return n


def resolve(
        ball: Ball,
        wall_start: Vector2D,
        wall_end: Vector2D,
        distance: float,
        damping: float = config.BOUNCE_DAMPING) -> Ball:
    """벽 충돌 응답: 반사 + 감쇠, 침투 깊이만큼 법선 방향으로 위치 보정

    Args:
        ball (Ball): 충돌한 공
        wall_start (Vector2D): 벽 시작점
        wall_end (Vector2D): 벽 끝점
        distance (float): 공 중심에서 벽까지의 거리
        damping (float, optional): 반발 감쇠 계수. Defaults to config.BOUNCE_DAMPING.

    Returns:
        Ball: 보정된 새 공 (distance > radius 이면 그대로 반환)
    """
    if distance > ball.radius:
        return ball

    n = wall_normal(ball.position, wall_start, wall_end)

    velocity = Vector.multiply(Vector.reflect(ball.velocity, n), damping)

    penetration = ball.radius - distance
    position = Vector.add(ball.position, Vector.multiply(n, penetration))

    return ball.with_state(position=position, velocity=velocity)


def constrain_inside(
        ball_pos: Vector2D,
        ball_radius: float,
        hex_center: Vector2D,
        hex_radius: float,
        rotation: float,
        rng: numpy.random.Generator | None = None) -> Vector2D:
    """벽에 걸쳤거나 육각형 밖에 있는 위치를 중심 쪽 안전 거리로 옮김 (리사이즈/리셋 용)

    안전 거리 = hex_radius - ball_radius - SAFE_MARGIN.
    변 방향에서는 이 거리가 육각형 밖이 될 수 있으므로, 그 경우
    내접원 반지름(apothem) 기준으로 다시 계산함.
    위치가 정확히 중심이면 작은 무작위 오프셋을 더해 반환함.
    """
    hexagon = Hexagon(hex_center, hex_radius, rotation)
    result = check_collision(ball_pos, ball_radius, hex_center, hex_radius, rotation)
    if not result.has_collision and hexagon.contains(ball_pos):
        return ball_pos

    to_center = Vector.subtract(hex_center, ball_pos)
    if Vector.magnitude(to_center) == 0.0:
        rng = rng if rng is not None else numpy.random.default_rng()
        jitter = rng.random(2) - 0.5
        return Vector.add(ball_pos, Vector2D.from_array(jitter))

    direction = Vector.normalize(to_center)
    safe_distance = hex_radius - ball_radius - config.SAFE_MARGIN
    candidate = Vector.add(hex_center, Vector.multiply(direction, -safe_distance))
    if _is_safe(candidate, ball_radius, hexagon):
        return candidate

    safe_distance = max(hexagon.apothem() - ball_radius - config.SAFE_MARGIN, 0.0)
    return Vector.add(hex_center, Vector.multiply(direction, -safe_distance))


def _is_safe(p: Vector2D, ball_radius: float, hexagon: Hexagon) -> bool:
    if not hexagon.contains(p):
        return False
    return not check_collision(p, ball_radius, hexagon.center, hexagon.radius, hexagon.rotation).has_collision
