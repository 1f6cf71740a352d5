"""Tower: LIFO stack of placed blocks, bottom to top"""
from typing import List
from tower_block import Block


class EmptyTowerError(IndexError):
    """Top-of-stack access on a tower with no blocks."""


class Tower:
    def __init__(self):
        self._blocks: List[Block] = []
        self._height = 0

    @property
    def height(self) -> int:
        return self._height

    def __len__(self):
        return self._height

    def push(self, block: Block):
        self._blocks.append(block)
        self._height += 1

    def pop(self) -> Block:
        if not self._blocks:
            raise EmptyTowerError("pop from empty tower")
        self._height -= 1
        return self._blocks.pop()

    def top(self) -> Block:
        if not self._blocks:
            raise EmptyTowerError("top of empty tower")
        return self._blocks[-1]

    def is_empty(self) -> bool:
        return self._height == 0

    def clear(self):
        self._blocks.clear()
        self._height = 0

    def snapshot(self) -> List[Block]:
        """Bottom-to-top copy for drawing; the stack itself is left alone."""
        return list(self._blocks)
