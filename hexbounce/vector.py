# hexbounce/vector.py
# 2차원 벡터 값 타입과 연산 함수 모음

from __future__ import annotations

import math
from dataclasses import dataclass
import numpy


@dataclass(frozen=True)
class Vector2D:
    """불변 2차원 벡터 (값 의미론, 모든 연산은 새 인스턴스를 반환)"""
    x: float
    y: float

    def __add__(self, other: Vector2D) -> Vector2D: return Vector.add(self, other)
    def __sub__(self, other: Vector2D) -> Vector2D: return Vector.subtract(self, other)
    def __mul__(self, scalar: float) -> Vector2D: return Vector.multiply(self, scalar)
    def __rmul__(self, scalar: float) -> Vector2D: return Vector.multiply(self, scalar)
    def __neg__(self) -> Vector2D: return Vector2D(-self.x, -self.y)

    @classmethod
    def from_array(cls, v) -> Vector2D:
        v = numpy.asarray(v, dtype=float).reshape(2)
        return cls(float(v[0]), float(v[1]))


class Vector:
    """벡터 연산 함수 모음"""
    ZERO = Vector2D(0.0, 0.0)

    @staticmethod
    def create(x: float, y: float) -> Vector2D:
        return Vector2D(float(x), float(y))

    @staticmethod
    def add(a: Vector2D, b: Vector2D) -> Vector2D:
        return Vector2D(a.x + b.x, a.y + b.y)

    @staticmethod
    def subtract(a: Vector2D, b: Vector2D) -> Vector2D:
        return Vector2D(a.x - b.x, a.y - b.y)

    @staticmethod
    def multiply(v: Vector2D, scalar: float) -> Vector2D:
        return Vector2D(v.x * scalar, v.y * scalar)

    @staticmethod
    def dot(a: Vector2D, b: Vector2D) -> float:
        return a.x * b.x + a.y * b.y

    @staticmethod
    def magnitude(v: Vector2D) -> float:
        return math.hypot(v.x, v.y)

    @staticmethod
    def normalize(v: Vector2D) -> Vector2D:
        """단위 벡터 반환. 길이가 0이면 (0, 0)"""
        mag = Vector.magnitude(v)
        if mag == 0.0:
            return Vector.ZERO
        return Vector2D(v.x / mag, v.y / mag)

    @staticmethod
    def rotate(v: Vector2D, angle: float) -> Vector2D:
        """회전 행렬 적용 (양의 각도 = 반시계 방향)

        Args:
            v (Vector2D): 회전할 벡터
            angle (float): 회전각 [rad]

        Returns:
            Vector2D: 회전된 벡터
        """
        c, s = math.cos(angle), math.sin(angle)
        return Vector2D(v.x * c - v.y * s, v.x * s + v.y * c)

    @staticmethod
    def reflect(incident: Vector2D, normal: Vector2D) -> Vector2D:
        """법선에 대한 반사 벡터. 법선은 내부에서 정규화하므로 길이 무관

        Args:
            incident (Vector2D): 입사 벡터
            normal (Vector2D): 반사면 법선

        Returns:
            Vector2D: incident - 2 * (incident·n) * n
        """
        n = Vector.normalize(normal)
        d = Vector.dot(incident, n)
        return Vector.subtract(incident, Vector.multiply(n, 2.0 * d))
