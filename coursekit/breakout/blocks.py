"""Random placement of the bricks for a level."""

from __future__ import annotations

import random
from dataclasses import dataclass

BLOCK_SIZE = 45.0
MIN_STEP = 15.0
MAX_STEP = 45.0

COLOR_HITS = {
    "blueBrick": 1,
    "purpleBrick": 2,
    "greenBrick": 3,
    "yellowBrick": 4,
    "redBrick": 5,
}
COLORS = tuple(COLOR_HITS)


def hits_for_color(color: str) -> int:
    """Hits a brick of the given colour takes; unknown colours take one."""
    return COLOR_HITS.get(color, 1)


@dataclass(frozen=True)
class Block:
    """Where a brick goes and what colour it is."""

    x: float
    y: float
    color: str

    @property
    def hits(self) -> int:
        return hits_for_color(self.color)


def _overlaps(x: float, y: float, block: Block) -> bool:
    return (
        max(x, block.x) < min(x + BLOCK_SIZE, block.x + BLOCK_SIZE)
        and max(y, block.y) < min(y + BLOCK_SIZE, block.y + BLOCK_SIZE)
    )


def generate_blocks(
    max_blocks: int,
    min_y: float,
    max_y: float,
    offset_x: float = 0.0,
    rng: random.Random | None = None,
) -> list[Block]:
    """Place max_blocks non-overlapping bricks, each 15 to 45 to the right of the last.

    offset_x is accepted for callers that pass it but does not move the bricks.
    """
    rng = rng or random.Random()
    blocks: list[Block] = []
    prev_x = 0.0
    for _ in range(max_blocks):
        low, high = prev_x + MIN_STEP, prev_x + MAX_STEP
        while True:
            x = rng.uniform(low, high)
            y = rng.uniform(min_y, max_y)
            prev_x = x
            if not any(_overlaps(x, y, block) for block in blocks):
                break
        blocks.append(Block(x, y, rng.choice(COLORS)))
    return blocks