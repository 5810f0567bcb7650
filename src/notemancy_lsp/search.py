"""Approximate string matching for symbol queries."""

from collections.abc import Callable, Iterable
from typing import TypeVar

from rapidfuzz import fuzz

from .config import SearchConfig

T = TypeVar("T")

# non-identical strings never score a perfect zero
MIN_PARTIAL_SCORE = 0.001


class FuzzyMatcher:
    """
    Score how well a query matches a piece of text.

    Scores run from 0.0 (identical) upwards; lower is better. A score is made
    of the mismatch of the best alignment of the query inside the text plus a
    penalty for how far that alignment starts from `location`, scaled by
    `distance`. Anything above `threshold` is rejected. With a `distance`
    of 0 the alignment has to start exactly at `location`.
    """

    def __init__(self, config: SearchConfig | None = None):
        self.config = config or SearchConfig()

    def score(self, query: str, text: str) -> float | None:
        cfg = self.config
        pattern = query[: cfg.max_pattern_length]
        if not cfg.case_sensitive:
            pattern = pattern.lower()
            text = text.lower()

        if pattern == text:
            return 0.0
        if not pattern or not text:
            return None

        if len(text) >= len(pattern):
            alignment = fuzz.partial_ratio_alignment(pattern, text)
            similarity, start = alignment.score, alignment.dest_start
        else:
            similarity, start = fuzz.ratio(pattern, text), 0

        score = 1.0 - similarity / 100.0
        if cfg.distance:
            score += abs(start - cfg.location) / cfg.distance
        elif start != cfg.location:
            # zero distance: only a match exactly at `location` counts
            return None
        score = max(score, MIN_PARTIAL_SCORE)

        if score > cfg.threshold:
            return None
        return score

    def rank(self, query: str, items: Iterable[T], key: Callable[[T], str]) -> list[T]:
        """Items whose key matches `query`, best match first; ties keep input order."""
        scored = []
        for item in items:
            s = self.score(query, key(item))
            if s is not None:
                scored.append((s, item))
        scored.sort(key=lambda pair: pair[0])
        return [item for _, item in scored]
