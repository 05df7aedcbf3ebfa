# hexbounce/stats.py
# 통계 (튕김 횟수, 속도, 점수, 경과 시간)

from __future__ import annotations

import math
from dataclasses import dataclass

from hexbounce import config
from hexbounce.body import Ball


@dataclass
class Stats:
    bounces: int = 0
    current_speed: float = 0.0
    max_speed: float = 0.0
    score: int = 0
    total_time: float = 0.0 # 실제 경과 시간 [s] (dt 제한 전 값)

    def record_tick(self, ball: Ball, dt: float) -> None:
        self.current_speed = ball.speed
        if self.current_speed > self.max_speed:
            self.max_speed = self.current_speed
        self.total_time += float(dt)

    def record_bounce(self, ball: Ball) -> int:
        """튕김 1회 기록, 얻은 점수 반환 (기본 점수 + 속도 보너스)"""
        self.bounces += 1
        gained = config.BOUNCE_SCORE + int(math.floor(ball.speed / config.SPEED_BONUS_STEP))
        self.score += gained
        return gained

    def reset(self) -> None:
        self.bounces = 0
        self.current_speed = 0.0
        self.max_speed = 0.0
        self.score = 0
        self.total_time = 0.0
