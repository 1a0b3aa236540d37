"""Assembly of a ready-to-play game scene."""

from __future__ import annotations

import random

from shapematch.factories import (
    create_frame_from_toy,
    create_random_frame,
    create_random_toy,
)
from shapematch.panel import Panel
from shapematch.player import Player
from shapematch.scene import GameScene

BASE_TOY_COUNT = 3
DECOY_FRAME_COUNT = 2


def build_scene(difficulty: int, rng: random.Random | None = None) -> GameScene:
    """Build a scene with one matching hole per toy plus two random holes."""
    rng = rng if rng is not None else random.Random()
    player = Player()
    panel = Panel()
    for _ in range(BASE_TOY_COUNT + difficulty):
        toy = create_random_toy(difficulty, rng)
        player.add_toy(toy)
        panel.add_frame(create_frame_from_toy(toy))
    for _ in range(DECOY_FRAME_COUNT):
        panel.add_frame(create_random_frame(difficulty, rng))
    return GameScene(player, panel, difficulty)