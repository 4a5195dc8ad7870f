"""Combining structural and semantic similarity into one score."""

from __future__ import annotations

from collections.abc import Iterable

from .cfg_builder import CFG
from .semantic_hasher import SemanticHasher


class Scorer:
    """Weights structural and semantic similarity into an overall score."""

    def __init__(self) -> None:
        self.structural_weight = 0.4
        self.semantic_weight = 0.6
        self.hasher = SemanticHasher()

    def set_weights(self, structural_weight: float, semantic_weight: float) -> None:
        """Set the weights, scaled so that they sum to 1; ignored if their sum is not positive."""
        total = structural_weight + semantic_weight
        if total > 0:
            self.structural_weight = structural_weight / total
            self.semantic_weight = semantic_weight / total

    def semantic_similarity(
        self, cfg1: CFG, cfg2: CFG, matches: Iterable[tuple[int, int]]
    ) -> float:
        """Average semantic likeness of the matched block pairs, given as block positions.

        Pairs whose positions fall outside either graph are skipped; with no
        valid pair the result is 0.0.
        """
        scores = [
            self.hasher.compare_blocks(cfg1.blocks[first], cfg2.blocks[second])
            for first, second in matches
            if 0 <= first < len(cfg1.blocks) and 0 <= second < len(cfg2.blocks)
        ]
        return sum(scores) / len(scores) if scores else 0.0

    def combine(self, structural: float, semantic: float) -> float:
        """Weighted sum of the two similarities, clamped to [0, 1]."""
        overall = self.structural_weight * structural + self.semantic_weight * semantic
        return max(0.0, min(1.0, overall))