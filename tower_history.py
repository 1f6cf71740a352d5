"""Score history for the current process, newest game first"""
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class GameRecord:
    score: int
    height: int


class ScoreHistory:
    """
    Ordered record of finished games.

    New results go in at the front, so traversal order is newest-first.
    Records are never edited or removed individually; clear() drops them all.
    Only lives as long as the process (no save/load).
    """

    EMPTY_MESSAGE = "No games played yet!"

    def __init__(self):
        self._records: List[GameRecord] = []
        self._count = 0

    @property
    def count(self) -> int:
        return self._count

    def __len__(self):
        return self._count

    def record_game(self, score: int, height: int) -> GameRecord:
        if score < 0 or height < 0:
            raise ValueError(f"score and height must be non-negative, got ({score}, {height})")
        rec = GameRecord(score, height)
        self._records.insert(0, rec)
        self._count += 1
        return rec

    def records(self) -> List[GameRecord]:
        """Newest-first copy of every record."""
        return list(self._records)

    def best_score(self) -> int:
        best = 0
        for rec in self._records:
            if rec.score > best:
                best = rec.score
        return best

    def best_height(self) -> int:
        best = 0
        for rec in self._records:
            if rec.height > best:
                best = rec.height
        return best

    def clear(self):
        self._records.clear()
        self._count = 0

    def top_n(self, n: int = 5) -> List[GameRecord]:
        """Highest scores first; equal scores keep newest-first order (sorted() is stable)."""
        ranked = sorted(self._records, key=lambda r: r.score, reverse=True)
        return ranked[:max(n, 0)]

    def format_top(self, n: int = 5) -> str:
        if not self._records:
            return self.EMPTY_MESSAGE
        top = self.top_n(n)
        lines = [f"Top {len(top)} Scores:"]
        for i, rec in enumerate(top, start=1):
            lines.append(f"{i}. Score: {rec.score} (Height: {rec.height})")
        return "\n".join(lines) + "\n"
