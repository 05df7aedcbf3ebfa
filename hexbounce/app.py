# hexbounce/app.py
# pygame 화면 (호스트 루프, 그리기, 입력)

import logging
import math

import pygame
import numpy as np

from hexbounce import config
from hexbounce.body import Ball
from hexbounce.event import CollisionResult
from hexbounce.logging_config import setup_logging
from hexbounce.shape import generate_vertices
from hexbounce.world import World

logger = logging.getLogger(__name__)

FLASH_FRAMES = 8


class WallFlash:
    """충돌 시 육각형 테두리를 잠깐 밝게 표시"""
    def __init__(self, frames=FLASH_FRAMES):
        self.frames = int(frames)
        self.remaining = 0
        self.last_wall = None

    def on_collision(self, result: CollisionResult, ball: Ball) -> None:
        self.remaining = self.frames
        self.last_wall = result.wall

    def fade(self):
        if self.remaining > 0:
            self.remaining -= 1

    def intensity(self):
        return self.remaining / self.frames if self.frames > 0 else 0.0


def to_screen(p):
    return int(round(float(p.x))), int(round(float(p.y)))


def draw_text(screen, font, x, y, s, color=(220, 220, 220)):
    surf = font.render(s, True, color)
    screen.blit(surf, (x, y))
    return y + surf.get_height() + 2


def draw_hexagon(screen, world, flash):
    cfg = world.config
    c = cfg.center
    pts = [to_screen(v) for v in generate_vertices(c.x, c.y, cfg.hexagon_radius, world.rotation)]

    k = flash.intensity()
    base = np.array([90, 170, 255], dtype=float)
    hot = np.array([255, 255, 255], dtype=float)
    col = tuple(int(x) for x in (1.0 - k) * base + k * hot)
    pygame.draw.polygon(screen, col, pts, width=3)

    if flash.remaining > 0 and flash.last_wall is not None:
        pygame.draw.line(screen, (255, 220, 120), to_screen(flash.last_wall.start), to_screen(flash.last_wall.end), 5)


def draw_ball(screen, ball):
    c = to_screen(ball.position)
    Rpx = max(1, int(ball.radius))
    pygame.draw.circle(screen, (255, 120, 90), c, Rpx)

    # 속도 방향 표시
    sp = ball.speed
    if sp > 0.0:
        L = min(40.0, sp * 0.1)
        tip = (c[0] + ball.velocity.x / sp * L, c[1] + ball.velocity.y / sp * L)
        pygame.draw.line(screen, (255, 240, 140), c, tip, 2)


def main():
    setup_logging(level=logging.INFO)

    pygame.init()
    world = World()
    flash = WallFlash()
    world.add_listener(flash)

    W, H = world.config.canvas_width, world.config.canvas_height
    screen = pygame.display.set_mode((W, H))
    pygame.display.set_caption("Hexagon Bounce")

    clock = pygame.time.Clock()
    font = pygame.font.SysFont("consolas", 16)

    hud_enabled = True
    running = True
    logger.info("started: hexagon r=%.0f ball r=%.0f", world.config.hexagon_radius, world.config.ball_radius)

    while running:
        # -------- events --------
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False

            elif ev.type == pygame.KEYDOWN:
                cfg = world.config
                try:
                    if ev.key == pygame.K_SPACE:
                        world.toggle_pause()
                    elif ev.key == pygame.K_r:
                        world.reset_ball()
                    elif ev.key == pygame.K_h:
                        hud_enabled = not hud_enabled
                    elif ev.key == pygame.K_UP:
                        world.update_config(rotation_speed=min(cfg.rotation_speed + 0.005, config.MAX_ROTATION_SPEED))
                    elif ev.key == pygame.K_DOWN:
                        world.update_config(rotation_speed=max(cfg.rotation_speed - 0.005, 0.0))
                    elif ev.key in (pygame.K_EQUALS, pygame.K_PLUS):
                        world.update_config(hexagon_radius=min(cfg.hexagon_radius + 10.0, 0.5 * min(W, H) - 5.0))
                    elif ev.key == pygame.K_MINUS:
                        world.update_config(hexagon_radius=cfg.hexagon_radius - 10.0)
                    elif ev.key == pygame.K_RIGHTBRACKET:
                        world.update_config(ball_radius=cfg.ball_radius + 1.0)
                    elif ev.key == pygame.K_LEFTBRACKET:
                        world.update_config(ball_radius=cfg.ball_radius - 1.0)
                except ValueError as exc:
                    logger.warning("config change rejected: %s", exc)

            elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
                world.click(*ev.pos)

        # -------- simulate --------
        world.advance(pygame.time.get_ticks() / 1000.0)
        flash.fade()

        # -------- render --------
        screen.fill((12, 12, 24))
        draw_hexagon(screen, world, flash)
        draw_ball(screen, world.ball)

        if world.paused:
            y = H // 2 - 10
            draw_text(screen, font, W // 2 - 30, y, "PAUSED", (255, 255, 255))

        # -------- HUD --------
        if hud_enabled:
            st = world.stats
            y = 8
            y = draw_text(screen, font, 10, y, f"Bounces: {st.bounces}  Score: {st.score}")
            y = draw_text(screen, font, 10, y, f"Speed: {st.current_speed:.1f}  Max: {st.max_speed:.1f}")
            y = draw_text(screen, font, 10, y, f"Time: {st.total_time:.1f}s  Rotation: {math.degrees(world.rotation) % 360.0:.0f} deg")
            y = draw_text(screen, font, 10, y, f"RotSpeed[UP/DOWN]={world.config.rotation_speed:.3f}  Hex[+/-]={world.config.hexagon_radius:.0f}  Ball[[/]]={world.config.ball_radius:.0f}")
            y = draw_text(screen, font, 10, y, "Click=impulse  Pause[SPACE]  Reset[R]  HUD[H]")

        pygame.display.flip()
        clock.tick(60)

    pygame.quit()


if __name__ == "__main__":
    main()
