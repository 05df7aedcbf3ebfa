import math

import pytest

from hexbounce import config
from hexbounce.body import Ball
from hexbounce.collision import check_collision
from hexbounce.stats import Stats
from hexbounce.vector import Vector2D
from hexbounce.world import SimulationConfig, World


class Recorder:
    def __init__(self):
        self.calls = []

    def on_collision(self, result, ball):
        self.calls.append((result, ball))


def test_initial_ball_above_center():
    world = World()
    c = world.config.center
    assert world.ball.position == Vector2D(c.x, c.y - config.RESET_OFFSET_Y)
    assert world.ball.velocity == Vector2D(0.0, 0.0)
    assert world.ball.radius == world.config.ball_radius


def test_tick_advances_rotation_per_tick():
    world = World()
    world.tick(0.001)
    world.tick(0.016)
    assert world.rotation == pytest.approx(2 * world.config.rotation_speed)
    assert world.hexagon.rotation == world.rotation


def test_tick_clamps_delta_time():
    a = World()
    b = World()
    a.tick(5.0)
    b.tick(config.MAX_DELTA_TIME)
    assert a.ball == b.ball
    # 통계 시간은 제한 전 실제 경과 시간
    assert a.stats.total_time == pytest.approx(5.0)
    assert b.stats.total_time == pytest.approx(config.MAX_DELTA_TIME)

    c = World()
    c.tick(-1.0)
    assert c.ball.position == World().ball.position


def test_paused_world_does_not_move():
    world = World()
    world.toggle_pause()
    before = world.ball
    assert world.tick(0.016) is None
    world.click(0.0, 0.0)
    assert world.ball == before
    assert world.rotation == 0.0
    assert not world.toggle_pause()


def test_ball_stays_inside_over_long_run():
    recorder = Recorder()
    world = World(listeners=[recorder])
    world.click(world.config.center.x + 150.0, world.config.center.y)
    for _ in range(1500):
        world.tick(1.0 / 60.0)
        assert world.hexagon.contains(world.ball.position)
        assert not math.isnan(world.ball.position.x)
    assert world.collision_count > 0
    assert world.stats.bounces == world.collision_count
    assert len(recorder.calls) == world.collision_count


def test_collision_resolved_before_exposed():
    recorder = Recorder()
    world = World(listeners=[recorder])
    for _ in range(400):
        result = world.tick(0.016)
        if result is not None and result.has_collision:
            break
    assert recorder.calls
    result, ball = recorder.calls[0]
    assert ball is world.ball
    assert result.has_collision
    assert world.hexagon.contains(ball.position)
    # 아래쪽 벽에 맞고 위로 튕김
    assert ball.velocity.y < 0.0


def test_advance_uses_time_difference():
    world = World()
    world.advance(10.0)
    assert world.ball.velocity == Vector2D(0.0, 0.0)
    world.advance(10.01)
    assert world.stats.total_time == pytest.approx(0.01)


def test_click_adds_impulse():
    world = World()
    p = world.ball.position
    world.click(p.x + 1.0, p.y)
    assert world.ball.velocity.x == pytest.approx(config.CLICK_IMPULSE)


def test_reset_ball_and_world():
    world = World()
    for _ in range(50):
        world.tick(0.016)
    world.reset_ball()
    c = world.config.center
    assert world.ball.position == Vector2D(c.x, c.y - config.RESET_OFFSET_Y)
    assert world.ball.speed == 0.0

    world.reset()
    assert world.rotation == 0.0
    assert world.stats.total_time == 0.0


def test_shrinking_hexagon_reconstrains_ball():
    world = World()
    c = world.config.center
    world.ball = Ball(Vector2D(c.x + 180.0, c.y), Vector2D(0.0, 0.0), 8.0)
    world.update_config(hexagon_radius=150.0)
    assert world.hexagon.contains(world.ball.position)
    res = check_collision(world.ball.position, world.ball.radius, c, 150.0, world.rotation)
    assert not res.has_collision


def test_ball_radius_change_applies_on_tick():
    world = World()
    world.update_config(ball_radius=12.0)
    world.tick(0.016)
    assert world.ball.radius == 12.0


@pytest.mark.parametrize("changes", [
    {"hexagon_radius": 0.0},
    {"ball_radius": -3.0},
    {"canvas_width": 0},
    {"ball_radius": 195.0},
    {"rotation_speed": -0.005},
    {"rotation_speed": config.MAX_ROTATION_SPEED + 0.01},
])
def test_invalid_config_rejected(changes):
    world = World()
    before = world.config
    with pytest.raises(ValueError):
        world.update_config(**changes)
    assert world.config == before


def test_config_center():
    cfg = SimulationConfig(canvas_width=800, canvas_height=400)
    assert cfg.center == Vector2D(400.0, 200.0)


def test_stats_scoring():
    stats = Stats()
    ball = Ball(Vector2D(0.0, 0.0), Vector2D(0.0, 57.0), 8.0)
    assert stats.record_bounce(ball) == 10 + 5
    stats.record_tick(ball, 0.5)
    stats.record_tick(Ball(Vector2D(0.0, 0.0), Vector2D(0.0, 3.0), 8.0), 0.5)
    assert stats.max_speed == pytest.approx(57.0)
    assert stats.current_speed == pytest.approx(3.0)
    assert stats.total_time == pytest.approx(1.0)
    assert stats.score == 15
    stats.reset()
    assert stats == Stats()


def test_rotation_speed_limits_accepted():
    world = World()
    world.update_config(rotation_speed=0.0)
    world.tick(0.016)
    assert world.rotation == 0.0
    world.update_config(rotation_speed=config.MAX_ROTATION_SPEED)
    assert world.config.rotation_speed == config.MAX_ROTATION_SPEED


def test_world_accepts_settings():
    settings = SimulationConfig(hexagon_radius=150.0, ball_radius=6.0)
    world = World(settings=settings)
    assert world.config is settings
    assert world.ball.radius == 6.0
    with pytest.raises(ValueError):
        World(settings=SimulationConfig(rotation_speed=-1.0))


def test_total_time_tracks_wall_clock_with_slow_frames():
    world = World()
    world.advance(1.0)
    world.advance(1.1)
    world.advance(1.35)
    assert world.stats.total_time == pytest.approx(0.35)
    world.toggle_pause()
    world.advance(5.0)
    assert world.stats.total_time == pytest.approx(0.35)
