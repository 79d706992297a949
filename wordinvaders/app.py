"""Command-line entry point: open a window and run the game loop."""

from __future__ import annotations

import argparse
import random
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import pygame

from .components import (
    ENEMY_LASER_SIZE,
    ENEMY_LASER_SPRITE,
    ENEMY_SIZE,
    ENEMY_SPRITE,
    EXPLOSION_LEN,
    EXPLOSION_SHEET,
    PLAYER_LASER_SIZE,
    PLAYER_LASER_SPRITE,
    PLAYER_SIZE,
    PLAYER_SPRITE,
    SPRITE_SCALE,
    WinSize,
)
from .exercise import DEFAULT_EXERCISE_PATH, load_exercise
from .world import EXPLOSION_FRAME_SIZE, Entity, Game

TITLE = "Replicating Silicon Invaders!"
CLEAR_COLOR = (10, 10, 10)
FONT_PATH = "fonts/fangsong.ttf"
FPS = 60


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="wordinvaders", description="Shoot the missing letter.")
    parser.add_argument("--exercise", default=DEFAULT_EXERCISE_PATH, help="exercise file, one word:meaning per line")
    parser.add_argument("--assets", default="assets", help="directory holding images, fonts and audio")
    parser.add_argument("--width", type=int, default=1920)
    parser.add_argument("--height", type=int, default=900)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    return parser.parse_args(argv)


def _image(assets: Path, name: str, size, color) -> pygame.Surface:
    target = (round(size[0] * SPRITE_SCALE), round(size[1] * SPRITE_SCALE))
    try:
        surface = pygame.image.load(str(assets / name)).convert_alpha()
        return pygame.transform.smoothscale(surface, target)
    except (pygame.error, FileNotFoundError):
        surface = pygame.Surface(target, pygame.SRCALPHA)
        surface.fill(color)
        return surface


def _explosion_frames(assets: Path) -> List[pygame.Surface]:
    fw, fh = (int(v) for v in EXPLOSION_FRAME_SIZE)
    try:
        sheet = pygame.image.load(str(assets / EXPLOSION_SHEET)).convert_alpha()
        return [
            sheet.subsurface(pygame.Rect((i % 4) * fw, (i // 4) * fh, fw, fh))
            for i in range(EXPLOSION_LEN)
        ]
    except (pygame.error, FileNotFoundError, ValueError):
        frames = []
        for i in range(EXPLOSION_LEN):
            frame = pygame.Surface((fw, fh), pygame.SRCALPHA)
            radius = max(1, fw // 2 - i * fw // (2 * EXPLOSION_LEN))
            pygame.draw.circle(frame, (255, 160, 40), (fw // 2, fh // 2), radius)
            frames.append(frame)
        return frames


def _font(assets: Path, size: int) -> pygame.font.Font:
    try:
        return pygame.font.Font(str(assets / FONT_PATH), size)
    except (pygame.error, FileNotFoundError, OSError):
        return pygame.font.Font(None, size)


def _sounds(assets: Path, game: Game) -> Dict[str, "pygame.mixer.Sound"]:
    try:
        pygame.mixer.init()
    except pygame.error:
        return {}
    sounds = {}
    for question in game.exercise.questions:
        try:
            sounds[question.word] = pygame.mixer.Sound(str(assets / question.audio_path()))
        except (pygame.error, FileNotFoundError):
            continue
    return sounds


def run(options: argparse.Namespace) -> Game:
    """Run the game until the window closes or the frame limit is reached."""
    rng = random.Random(options.seed)
    exercise = load_exercise(options.exercise, rng)
    win = WinSize(float(options.width), float(options.height))
    game = Game(win, exercise, rng)
    assets = Path(options.assets)

    pygame.init()
    try:
        screen = pygame.display.set_mode((options.width, options.height))
        pygame.display.set_caption(TITLE)
        images = {
            "player": _image(assets, PLAYER_SPRITE, PLAYER_SIZE, (80, 160, 255)),
            "player_laser": _image(assets, PLAYER_LASER_SPRITE, PLAYER_LASER_SIZE, (120, 255, 120)),
            "enemy": _image(assets, ENEMY_SPRITE, ENEMY_SIZE, (220, 220, 220)),
            "enemy_laser": pygame.transform.flip(
                _image(assets, ENEMY_LASER_SPRITE, ENEMY_LASER_SIZE, (255, 80, 80)), False, True
            ),
        }
        explosion_frames = _explosion_frames(assets)
        panel_font = _font(assets, 50)
        option_font = _font(assets, 40)
        sounds = _sounds(assets, game)
        clock = pygame.time.Clock()
        shown_text = None
        now = 0.0
        frame = 0

        def blit(surface: pygame.Surface, entity_or_xy) -> None:
            x, y = entity_or_xy.position if isinstance(entity_or_xy, Entity) else entity_or_xy
            rect = surface.get_rect(center=(win.w / 2.0 + x, win.h / 2.0 - y))
            screen.blit(surface, rect)

        running = True
        while running and (options.frames is None or frame < options.frames):
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE:
                    game.fire()
            keys = pygame.key.get_pressed()
            game.steer(bool(keys[pygame.K_LEFT]), bool(keys[pygame.K_RIGHT]))

            delta = clock.tick(FPS) / 1000.0
            now += delta
            game.update(delta, now)

            if game.panel_text != shown_text:
                shown_text = game.panel_text
                question = game.exercise.current()
                if question is not None and question.word in sounds:
                    sounds[question.word].play()

            screen.fill(CLEAR_COLOR)
            for laser in game.lasers:
                blit(images["player_laser" if laser.from_player else "enemy_laser"], laser)
            for enemy in game.enemies:
                blit(images["enemy"], enemy)
                if enemy.option is not None:
                    label = option_font.render(enemy.option, True, (0, 0, 0))
                    blit(label, (enemy.x, enemy.y + 12.0 * SPRITE_SCALE))
            if game.player is not None:
                blit(images["player"], game.player)
            for explosion in game.explosions:
                blit(explosion_frames[min(explosion.index, EXPLOSION_LEN - 1)], explosion)
            blit(panel_font.render(game.panel_text, True, (255, 255, 255)), (0.0, 10.0))
            pygame.display.flip()
            frame += 1
    finally:
        pygame.quit()
    return game


def main(argv: Optional[Sequence[str]] = None) -> int:
    run(parse_args(argv))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())