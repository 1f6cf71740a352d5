"""BlockQueue: FIFO of upcoming blocks for spawn + preview"""
from collections import deque
from itertools import islice
from typing import Deque, List
from tower_block import Block


class EmptyQueueError(IndexError):
    """Front access on a queue with no pending blocks."""


class BlockQueue:
    def __init__(self):
        self._pending: Deque[Block] = deque()

    def __len__(self):
        return len(self._pending)

    def enqueue(self, block: Block):
        self._pending.append(block)

    def dequeue(self) -> Block:
        if not self._pending:
            raise EmptyQueueError("dequeue from empty block queue")
        return self._pending.popleft()

    def peek(self) -> Block:
        if not self._pending:
            raise EmptyQueueError("peek into empty block queue")
        return self._pending[0]

    def preview(self, k: int) -> List[Block]:
        """First k pending blocks in FIFO order, without removing any."""
        return list(islice(self._pending, max(k, 0)))

    def clear(self):
        self._pending.clear()
