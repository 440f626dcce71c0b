#!/usr/bin/env python3
"""Interactive tracking challenge with visual feedback.

Follow the glowing track from the START beacon to the END beacon with the
mouse. The trace is evaluated when the END beacon is reached and the
diagnostics are shown on the right.
"""

import json
from typing import Tuple

import pygame

from motion_authenticity.config.settings import EvaluatorConfig
from motion_authenticity.core.events import PointerLeft, PointerMoved, RegeneratePath, ResetAttempt
from motion_authenticity.core.listener import MotionListener
from motion_authenticity.core.recorder import Tone
from motion_authenticity.utils.logger import MotionLogger, format_metrics


class MotionChallengeDemo:
    """Pygame renderer and mouse wiring around a MotionListener."""

    CANVAS_RECT = pygame.Rect(20, 70, 960, 540)

    def __init__(self) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode((1400, 640))
        pygame.display.set_caption("Motion Authenticity Challenge")

        self.config = EvaluatorConfig()
        self.listener = MotionListener(
            self.CANVAS_RECT.width,
            self.CANVAS_RECT.height,
            config=self.config,
            motion_logger=MotionLogger("motion_debug.log")
        )

        # Colors
        self.BACKGROUND = (3, 9, 20)
        self.TRACK = (49, 208, 255)
        self.TRACK_CORE = (200, 240, 255)
        self.START = (50, 248, 255)
        self.END = (255, 125, 220)
        self.WHITE = (255, 255, 255)
        self.GRAY = (128, 128, 128)
        self.TONE_COLORS = {
            Tone.READY: (180, 200, 255),
            Tone.RECORDING: (255, 210, 90),
            Tone.PASS: (90, 255, 140),
            Tone.FAIL: (255, 90, 90),
        }

        # Fonts
        self.font = pygame.font.Font(None, 36)
        self.small_font = pygame.font.Font(None, 26)
        self.label_font = pygame.font.Font(None, 18)

    def run(self) -> None:
        """Run the demo loop."""
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                elif event.type == pygame.MOUSEMOTION:
                    self.handle_motion(event.pos)
                elif event.type == pygame.WINDOWLEAVE:
                    self.listener.dispatch(PointerLeft())
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_n:
                        self.listener.dispatch(RegeneratePath())
                    elif event.key == pygame.K_r:
                        self.listener.dispatch(ResetAttempt())
                    elif event.key == pygame.K_s:
                        self.save_verdict()

            self.draw()
            clock.tick(120)

    def handle_motion(self, pos: Tuple[int, int]) -> None:
        """Translate window coordinates into canvas coordinates."""
        if not self.CANVAS_RECT.collidepoint(pos):
            self.listener.dispatch(PointerLeft())
            return
        x = pos[0] - self.CANVAS_RECT.x
        y = pos[1] - self.CANVAS_RECT.y
        self.listener.dispatch(PointerMoved(x, y))

    def save_verdict(self) -> None:
        """Save the last verdict's features (no coordinates) to a JSON file."""
        verdict = self.listener.recorder.verdict
        if verdict is None:
            return
        with open("last_verdict.json", "w") as f:
            json.dump(verdict.to_dict(), f, indent=2)

    def _canvas_point(self, point) -> Tuple[int, int]:
        return (int(point.x) + self.CANVAS_RECT.x, int(point.y) + self.CANVAS_RECT.y)

    def draw_track(self, points, width: float) -> None:
        pts = [self._canvas_point(p) for p in points]
        glow = pygame.Surface(self.screen.get_size(), pygame.SRCALPHA)
        for extra, alpha in ((24, 40), (12, 70)):
            pygame.draw.lines(glow, (*self.TRACK, alpha), False, pts, int(width) + extra)
        self.screen.blit(glow, (0, 0))

        pygame.draw.lines(self.screen, self.TRACK, False, pts, int(width))
        # Round joins
        for pt in pts:
            pygame.draw.circle(self.screen, self.TRACK, pt, int(width) // 2)
        pygame.draw.lines(self.screen, self.TRACK_CORE, False, pts, int(width) - 14)

    def draw_beacon(self, point, radius: int, color, label: str) -> None:
        center = self._canvas_point(point)
        pygame.draw.circle(self.screen, color, center, radius)
        pygame.draw.circle(self.screen, self.BACKGROUND, center, radius - 10)
        txt = self.label_font.render(label, True, color)
        self.screen.blit(txt, txt.get_rect(center=center))

    def draw_trail(self, points) -> None:
        if len(points) < 2:
            return
        pts = [self._canvas_point(p) for p in points]
        pygame.draw.lines(self.screen, self.WHITE, False, pts, 3)

    def draw(self) -> None:
        """Render the track, beacons, trail, status and metrics."""
        recorder = self.listener.recorder
        self.screen.fill(self.BACKGROUND)
        pygame.draw.rect(self.screen, self.GRAY, self.CANVAS_RECT, 1)

        if recorder.path_points:
            self.draw_track(recorder.path_points, recorder.path_width)
            self.draw_beacon(recorder.start_anchor, self.config.START_RADIUS, self.START, "START")
            self.draw_beacon(recorder.end_anchor, self.config.END_RADIUS, self.END, "END")
            self.draw_trail(recorder.trail)

        status = recorder.status
        if status:
            color = self.TONE_COLORS.get(status.tone, self.WHITE)
            self.screen.blit(self.font.render(status.text, True, color), (20, 20))

        y = 80
        for line in format_metrics(recorder.verdict).splitlines():
            self.screen.blit(self.small_font.render(line, True, self.WHITE), (1000, y))
            y += 30

        controls = "N: New track   R: Reset attempt   S: Save verdict"
        self.screen.blit(self.small_font.render(controls, True, self.GRAY), (1000, 560))
        pygame.display.flip()


def main() -> None:
    """Entry point for the demo."""
    demo = MotionChallengeDemo()
    try:
        demo.run()
    except KeyboardInterrupt:
        pass
    finally:
        demo.listener.stop()
        pygame.quit()


if __name__ == "__main__":
    main()
