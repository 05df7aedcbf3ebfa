# hexbounce/integrator.py

# 반암시적(심플렉틱) 오일러 방법 기반 적분기
# 속도를 먼저 갱신한 뒤, 갱신된 속도로 위치를 이동시킴

from __future__ import annotations

from hexbounce import config
from hexbounce.body import Ball
from hexbounce.vector import Vector, Vector2D


def step(
        ball: Ball,
        delta_time: float,
        gravity: float = config.GRAVITY,
        friction: float = config.FRICTION,
        min_velocity: float = config.MIN_VELOCITY) -> Ball:
    """단일 물리 틱

    delta_time 은 호출하는 쪽에서 config.MAX_DELTA_TIME 이하로 잘라서 넘겨야 함
    (그렇지 않으면 공이 벽을 통과할 수 있음)

    Args:
        ball (Ball): 이전 틱의 공
        delta_time (float): 시간 간격 [s]
        gravity (float, optional): +y(아래) 방향 중력 가속도. Defaults to config.GRAVITY.
        friction (float, optional): 틱마다 곱하는 마찰 계수. Defaults to config.FRICTION.
        min_velocity (float, optional): 이보다 느리면 속도를 0으로. Defaults to config.MIN_VELOCITY.

    Returns:
        Ball: 새 공 (반지름 유지)
    """
    dt = float(delta_time)

    v = Vector.add(ball.velocity, Vector.multiply(Vector2D(0.0, gravity), dt))
    # 마찰은 dt 와 무관하게 틱당 한 번
    v = Vector.multiply(v, friction)
    if Vector.magnitude(v) < min_velocity:
        v = Vector.ZERO

    r = Vector.add(ball.position, Vector.multiply(v, dt))
    return ball.with_state(position=r, velocity=v)


def apply_impulse(ball: Ball, target: Vector2D, strength: float = config.CLICK_IMPULSE) -> Ball:
    """target 방향으로 크기 strength 의 속도를 더함 (클릭 입력)"""
    direction = Vector.normalize(Vector.subtract(target, ball.position))
    return ball.with_state(velocity=Vector.add(ball.velocity, Vector.multiply(direction, strength)))
