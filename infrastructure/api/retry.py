from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Callable, Mapping, Optional

from config import settings


@dataclass(slots=True, frozen=True)
class BackoffPolicy:
    """Exponential backoff shared by 429, 5xx and transport failures.

    ``backoff`` starts at ``base_ms`` and doubles after every retry up to
    ``cap_ms``. The actual sleep is ``backoff * uniform(0.5, 1.0)`` unless the
    server sent a usable ``Retry-After``.
    """
    max_attempts: int = 7
    base_ms: int = 500
    cap_ms: int = 16000
    jitter_low: float = 0.5
    jitter_high: float = 1.0

    @classmethod
    def from_settings(cls) -> "BackoffPolicy":
        return cls(
            max_attempts=max(1, settings.MAX_ATTEMPTS),
            base_ms=max(1, settings.BACKOFF_BASE_MS),
            cap_ms=max(1, settings.BACKOFF_CAP_MS),
        )

    def jittered(self, backoff_ms: float, rand: Callable[[float, float], float] = random.uniform) -> float:
        return backoff_ms * rand(self.jitter_low, self.jitter_high)

    def next_backoff(self, backoff_ms: float) -> float:
        return min(backoff_ms * 2, self.cap_ms)


def retry_after_ms(headers: Mapping[str, str]) -> Optional[float]:
    """Parse ``Retry-After`` (delta-seconds) into milliseconds, None if absent or malformed."""
    raw = headers.get("retry-after")
    if raw is None:
        return None
    try:
        seconds = float(raw.strip())
    except ValueError:
        return None
    if not math.isfinite(seconds) or seconds < 0:
        return None
    return seconds * 1000.0
