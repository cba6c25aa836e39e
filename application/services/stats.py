"""Small counting helpers shared by the player and duo aggregators."""
from collections import Counter
from dataclasses import dataclass
from typing import Hashable, List, Optional, Tuple, TypeVar

from domain.entities.summary import Pair

K = TypeVar("K", bound=Hashable)

LOW_SAMPLE_THRESHOLD = 5


def pair_key(a: str, b: str) -> Pair:
    """Order-independent key: ``pair_key(x, y) == pair_key(y, x)``."""
    return (a, b) if a <= b else (b, a)


@dataclass
class MeanAccumulator:
    """Running mean of an optional metric.

    ``count`` only advances for values that are present, so a metric that
    no match supplied has mean ``None`` instead of 0.
    """

    total: float = 0.0
    count: int = 0

    def add(self, value: Optional[float]) -> None:
        if value is None:
            return
        self.total += value
        self.count += 1

    @property
    def mean(self) -> Optional[float]:
        if self.count == 0:
            return None
        return self.total / self.count


def ranked(counter: Counter, wins: Optional[Counter] = None, limit: Optional[int] = None) -> List[Tuple[K, int, int]]:
    """``(key, games, wins)`` rows sorted by games desc, wins desc, key asc."""
    wins = wins or Counter()
    rows = [(key, games, wins.get(key, 0)) for key, games in counter.items()]
    rows.sort(key=lambda r: (-r[1], -r[2], r[0]))
    return rows[:limit] if limit is not None else rows


def most_common(counter: Counter, limit: int) -> List[K]:
    """Keys by count desc then key asc; deterministic where ``Counter.most_common`` is not."""
    return [key for key, _ in sorted(counter.items(), key=lambda kv: (-kv[1], kv[0]))[:limit]]


def rounded(value: Optional[float], digits: int = 2) -> Optional[float]:
    return round(value, digits) if value is not None else None
