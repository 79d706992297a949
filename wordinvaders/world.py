"""Game state and the per-frame rules of the arcade game."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .components import (
    BASE_SPEED,
    ENEMY_LASER_SIZE,
    ENEMY_SIZE,
    EXPLOSION_LEN,
    MAX_ENEMY,
    PLAYER_LASER_SIZE,
    PLAYER_RESPAWN_DELAY,
    PLAYER_SIZE,
    SPRITE_SCALE,
    ExplosionTimer,
    PlayerState,
    SpriteSize,
    Velocity,
    WinSize,
    intersects,
)
from .exercise import Exercise, Question
from .formation import Formation, FormationMaker

Pair = Tuple[float, float]

DESPAWN_MARGIN = 200.0
ENEMY_FIRE_CHANCE = 1.0 / 600.0
PLAYER_SPAWN_INTERVAL = 0.5
ENEMY_SPAWN_INTERVAL = 1.0
QUESTION_INTERVAL = 2.0
EXPLOSION_FRAME_SIZE = (64.0, 64.0)
INITIAL_PANEL_TEXT = "Question1"


@dataclass(eq=False, kw_only=True)
class Entity:
    """Something with a position and a scaled, centred bounding box."""

    x: float
    y: float
    size: SpriteSize
    scale: Pair = (SPRITE_SCALE, SPRITE_SCALE)

    @property
    def position(self) -> Pair:
        return (self.x, self.y)

    def collides(self, other: "Entity") -> bool:
        return intersects(
            self.position, self.size, self.scale, other.position, other.size, other.scale
        )


@dataclass(eq=False, kw_only=True)
class Player(Entity):
    size: SpriteSize = field(default_factory=lambda: SpriteSize.from_tuple(PLAYER_SIZE))
    velocity: Velocity = field(default_factory=Velocity)


@dataclass(eq=False, kw_only=True)
class Enemy(Entity):
    formation: Formation
    option: Optional[str] = None
    size: SpriteSize = field(default_factory=lambda: SpriteSize.from_tuple(ENEMY_SIZE))


@dataclass(eq=False, kw_only=True)
class Laser(Entity):
    from_player: bool
    velocity: Velocity = field(default_factory=Velocity)
    auto_despawn: bool = True


@dataclass(eq=False, kw_only=True)
class Explosion(Entity):
    size: SpriteSize = field(
        default_factory=lambda: SpriteSize.from_tuple(EXPLOSION_FRAME_SIZE)
    )
    scale: Pair = (1.0, 1.0)
    index: int = 0
    timer: ExplosionTimer = field(default_factory=ExplosionTimer)


class Game:
    """All entities of a running game and the rules that move them."""

    def __init__(
        self,
        win_size: WinSize,
        exercise: Optional[Exercise] = None,
        rng: Optional[random.Random] = None,
        max_enemy_count: int = 3,
    ):
        self.win_size = win_size
        self.exercise = exercise if exercise is not None else Exercise()
        self.rng = rng or random.Random()
        self.formation_maker = FormationMaker(self.rng)
        self.player_state = PlayerState()
        self.player: Optional[Player] = None
        self.enemies: List[Enemy] = []
        self.lasers: List[Laser] = []
        self.explosions: List[Explosion] = []
        self.enemy_count = 0
        self.max_enemy_count = max_enemy_count
        self.panel_text = INITIAL_PANEL_TEXT
        self._player_timer = ExplosionTimer(duration=PLAYER_SPAWN_INTERVAL)
        self._enemy_timer = ExplosionTimer(duration=ENEMY_SPAWN_INTERVAL)
        self._question_timer = ExplosionTimer(duration=QUESTION_INTERVAL)

    # --- player -----------------------------------------------------------

    def spawn_player(self, now: float) -> Optional[Player]:
        """Place the player at the bottom unless alive or still waiting to respawn."""
        state = self.player_state
        if state.on:
            return None
        if not (state.last_shot == -1.0 or now > state.last_shot + PLAYER_RESPAWN_DELAY):
            return None
        bottom = -self.win_size.h / 2.0
        self.player = Player(x=0.0, y=bottom + PLAYER_SIZE[1] / 2.0 * SPRITE_SCALE + 5.0)
        state.spawned()
        return self.player

    def steer(self, left: bool, right: bool) -> None:
        if self.player is None:
            return
        self.player.velocity.x = -1.0 if left else 1.0 if right else 0.0

    def fire(self) -> List[Laser]:
        """Shoot a pair of lasers from both wings of the player."""
        if self.player is None:
            return []
        x, y = self.player.position
        x_offset = PLAYER_SIZE[0] / 2.0 * SPRITE_SCALE - 5.0
        shots = [
            Laser(
                x=x + offset,
                y=y + 15.0,
                size=SpriteSize.from_tuple(PLAYER_LASER_SIZE),
                from_player=True,
                velocity=Velocity(0.0, 1.0),
            )
            for offset in (x_offset, -x_offset)
        ]
        self.lasers.extend(shots)
        return shots

    # --- enemies ----------------------------------------------------------

    def spawn_enemy(self) -> Optional[Enemy]:
        if self.enemy_count >= self.max_enemy_count:
            return None
        formation = self.formation_maker.make(self.win_size)
        x, y = formation.start
        enemy = Enemy(x=x, y=y, formation=formation)
        self.enemies.append(enemy)
        self.enemy_count += 1
        return enemy

    def enemy_fire(self) -> List[Laser]:
        shots = [
            Laser(
                x=enemy.x,
                y=enemy.y - 15.0,
                size=SpriteSize.from_tuple(ENEMY_LASER_SIZE),
                from_player=False,
                velocity=Velocity(0.0, -1.0),
            )
            for enemy in self.enemies
        ]
        self.lasers.extend(shots)
        return shots

    def assign_options(self) -> Optional[Question]:
        """Show the current question and label unlabelled enemies with letters."""
        question = self.exercise.current()
        if question is None:
            return None
        self.panel_text = question.question
        for enemy in self.enemies:
            if enemy.option is not None:
                continue
            if (self.enemy_count + 1) % 5 == 0 or not question.options:
                enemy.option = question.answer
            else:
                enemy.option = self.rng.choice(question.options)
        return question

    # --- motion -----------------------------------------------------------

    def _out_of_bounds(self, entity: Entity) -> bool:
        half_w = self.win_size.w / 2.0 + DESPAWN_MARGIN
        half_h = self.win_size.h / 2.0 + DESPAWN_MARGIN
        return abs(entity.x) > half_w or abs(entity.y) > half_h

    def move_entities(self, delta: float) -> None:
        """Move the player and lasers by their velocity; drop lasers off screen."""
        movers = ([self.player] if self.player is not None else []) + self.lasers
        for mover in movers:
            mover.x += mover.velocity.x * delta * BASE_SPEED
            mover.y += mover.velocity.y * delta * BASE_SPEED
        self.lasers = [
            laser
            for laser in self.lasers
            if not (laser.auto_despawn and self._out_of_bounds(laser))
        ]

    def move_enemies(self, delta: float) -> None:
        for enemy in self.enemies:
            enemy.x, enemy.y = enemy.formation.step(enemy.x, enemy.y, delta)

    # --- collisions -------------------------------------------------------

    def _explode(self, x: float, y: float) -> None:
        self.explosions.append(Explosion(x=x, y=y))

    def player_laser_hits(self) -> List[Tuple[str, bool]]:
        """Resolve player lasers hitting labelled enemies.

        Returns the option of every enemy hit and whether it was the answer.
        """
        despawned: set = set()
        results: List[Tuple[str, bool]] = []
        targets = [enemy for enemy in self.enemies if enemy.option is not None]

        def remove_enemy(enemy: Enemy) -> None:
            if enemy not in despawned:
                despawned.add(enemy)
                self.enemy_count -= 1

        for laser in (l for l in self.lasers if l.from_player):
            for enemy in targets:
                if laser in despawned:
                    break
                if enemy in despawned or not laser.collides(enemy):
                    continue
                correct = self.exercise.check(enemy.option)
                results.append((enemy.option, correct))
                if correct:
                    for target in targets:
                        remove_enemy(target)
                    self.max_enemy_count = 2
                    self.exercise.advance()
                else:
                    remove_enemy(enemy)
                    if self.max_enemy_count < MAX_ENEMY:
                        self.max_enemy_count += 1
                despawned.add(laser)
                self._explode(enemy.x, enemy.y)

        self.enemies = [e for e in self.enemies if e not in despawned]
        self.lasers = [l for l in self.lasers if l not in despawned]
        return results

    def enemy_laser_hits(self, now: float) -> bool:
        """Kill the player if an enemy laser touches it; return True on a hit."""
        player = self.player
        if player is None:
            return False
        for laser in self.lasers:
            if laser.from_player or not laser.collides(player):
                continue
            self.player = None
            self.player_state.shot(now)
            self.lasers.remove(laser)
            self._explode(player.x, player.y)
            return True
        return False

    def update_explosions(self, delta: float) -> None:
        remaining = []
        for explosion in self.explosions:
            if explosion.timer.tick(delta):
                explosion.index += 1
            if explosion.index < EXPLOSION_LEN:
                remaining.append(explosion)
        self.explosions = remaining

    # --- frame ------------------------------------------------------------

    def update(self, delta: float, now: float) -> None:
        """Advance the whole game by one frame of ``delta`` seconds."""
        if self._player_timer.tick(delta):
            self.spawn_player(now)
        if self._enemy_timer.tick(delta):
            self.spawn_enemy()
        if self.rng.random() < ENEMY_FIRE_CHANCE:
            self.enemy_fire()
        if self._question_timer.tick(delta):
            self.assign_options()
        self.move_entities(delta)
        self.move_enemies(delta)
        self.player_laser_hits()
        self.enemy_laser_hits(now)
        self.update_explosions(delta)