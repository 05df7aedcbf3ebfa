# hexbounce/world.py
from __future__ import annotations

import logging
import typing
from dataclasses import dataclass, replace

from hexbounce import config
from hexbounce.body import Ball, create_ball
from hexbounce.collision import check_collision, constrain_inside, resolve
from hexbounce.event import CollisionResult
from hexbounce.integrator import apply_impulse, step
from hexbounce.shape import Hexagon
from hexbounce.stats import Stats
from hexbounce.vector import Vector2D

logger = logging.getLogger(__name__)


class CollisionListener(typing.Protocol):
    """충돌 알림을 받는 객체 (효과음, 화면 효과 등)"""
    def on_collision(self, result: CollisionResult, ball: Ball) -> None: ...


@dataclass(frozen=True)
class SimulationConfig:
    """호스트가 실행 중에 바꿀 수 있는 설정값"""
    canvas_width: int = config.CANVAS_WIDTH
    canvas_height: int = config.CANVAS_HEIGHT
    hexagon_radius: float = config.HEXAGON_RADIUS
    rotation_speed: float = config.ROTATION_SPEED # [rad/tick]
    ball_radius: float = config.BALL_RADIUS

    @property
    def center(self) -> Vector2D:
        return Vector2D(self.canvas_width / 2.0, self.canvas_height / 2.0)

    def validate(self) -> None:
        if self.canvas_width <= 0 or self.canvas_height <= 0:
            raise ValueError("canvas size must be > 0")
        if self.hexagon_radius <= 0:
            raise ValueError("hexagon_radius must be > 0")
        if self.ball_radius <= 0:
            raise ValueError("ball_radius must be > 0")
        if self.ball_radius + config.SAFE_MARGIN >= self.hexagon_radius:
            raise ValueError("ball does not fit inside the hexagon")
        if not (0.0 <= self.rotation_speed <= config.MAX_ROTATION_SPEED):
            raise ValueError(f"rotation_speed must be in [0, {config.MAX_ROTATION_SPEED}]")


class World:
    """시뮬레이션 세계. 현재 상태(공, 회전각, 통계)를 가진 유일한 가변 객체"""
    def __init__(
            self,
            settings: SimulationConfig | None = None,
            listeners: typing.Iterable[CollisionListener] | None = None):
        self.config = settings or SimulationConfig()
        self.config.validate()
        self.listeners: typing.List[CollisionListener] = list(listeners or [])

        self.rotation = 0.0
        self.paused = False
        self.stats = Stats()
        self.collision_count = 0
        self._last_time: float | None = None
        self.ball = self._spawn_ball()

    @property
    def hexagon(self) -> Hexagon:
        return Hexagon(self.config.center, float(self.config.hexagon_radius), self.rotation)

    def add_listener(self, listener: CollisionListener) -> None:
        self.listeners.append(listener)

    def _spawn_ball(self) -> Ball:
        c = self.config.center
        start = Vector2D(c.x, c.y - config.RESET_OFFSET_Y)
        p = constrain_inside(start, self.config.ball_radius, c, self.config.hexagon_radius, self.rotation)
        return create_ball(p.x, p.y, self.config.ball_radius)

    def tick(self, delta_time: float) -> CollisionResult | None:
        """한 틱 진행: 적분 -> 충돌 감지 -> (충돌 시) 보정

        Returns:
            CollisionResult | None: 이번 틱의 충돌 검사 결과, 일시정지면 None
        """
        if self.paused:
            return None
        elapsed = max(0.0, float(delta_time))
        dt = min(elapsed, config.MAX_DELTA_TIME)

        self.rotation += float(self.config.rotation_speed)

        ball = step(self.ball, dt)
        ball = ball.with_state(radius=self.config.ball_radius)

        c = self.config.center
        result = check_collision(ball.position, ball.radius, c, self.config.hexagon_radius, self.rotation)
        if result.has_collision:
            ball = resolve(ball, result.wall_start, result.wall_end, result.distance)
            self.collision_count += 1
            gained = self.stats.record_bounce(ball)
            logger.debug("wall hit #%d pen=%.3f speed=%.2f (+%d)", self.collision_count, result.penetration(ball.radius), ball.speed, gained)

        self.ball = ball
        self.stats.record_tick(ball, elapsed)

        if result.has_collision:
            for listener in self.listeners:
                listener.on_collision(result, ball)
        return result

    def advance(self, now: float) -> CollisionResult | None:
        """단조 증가하는 시각 [s] 으로부터 dt 를 구해 tick. 첫 호출의 dt 는 0"""
        dt = 0.0 if self._last_time is None else float(now) - self._last_time
        self._last_time = float(now)
        return self.tick(dt)

    def reset_ball(self) -> None:
        self.ball = self._spawn_ball()
        logger.info("ball reset at (%.1f, %.1f)", self.ball.position.x, self.ball.position.y)

    def reset(self) -> None:
        self.rotation = 0.0
        self.collision_count = 0
        self.stats.reset()
        self._last_time = None
        self.reset_ball()

    def click(self, x: float, y: float) -> None:
        """클릭 지점 방향으로 충격을 줌 (일시정지 중에는 무시)"""
        if self.paused:
            return
        self.ball = apply_impulse(self.ball, Vector2D(float(x), float(y)))

    def toggle_pause(self) -> bool:
        self.paused = not self.paused
        # 재개 시 멈춘 동안의 시간을 dt 로 쓰지 않도록
        self._last_time = None
        logger.info("simulation %s", "paused" if self.paused else "resumed")
        return self.paused

    def update_config(self, **changes) -> SimulationConfig:
        """설정 변경. 육각형 크기가 바뀌면 공을 안쪽으로 다시 밀어넣음"""
        updated = replace(self.config, **changes)
        updated.validate()
        old = self.config
        self.config = updated

        if updated.hexagon_radius != old.hexagon_radius:
            p = constrain_inside(
                self.ball.position,
                updated.ball_radius,
                updated.center,
                updated.hexagon_radius,
                self.rotation,
            )
            self.ball = self.ball.with_state(position=p, radius=updated.ball_radius)

        logger.info("config updated: %s", changes)
        return updated
